# facsdensity/utils/logging.py
import logging
import sys

_LOGGER_NAME = "facsdensity"
_PREFIX = "[FACSDensity]"

_logger = logging.getLogger(_LOGGER_NAME)


def get_logger():
    """
    Returns the package logger, attaching a stderr handler on first use.

    Status messages are console output for the person running the plot,
    so they go to stderr with the package prefix and nothing else.
    """
    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(f"{_PREFIX} %(message)s"))
        _logger.addHandler(handler)
        _logger.setLevel(logging.INFO)
    return _logger


def log_info(msg):
    get_logger().info(msg)


def log_warn(msg):
    get_logger().warning(f"WARNING: {msg}")


def log_error(msg):
    get_logger().error(f"ERROR: {msg}")

# errors.py


class FACSDensityError(Exception):
    """Base class for every error the density plot pipeline raises."""
    pass


class FACSDensityConfigError(FACSDensityError):
    """Raised when the plot config file is invalid."""
    pass


class InvalidDirectoryError(FACSDensityError):
    """Raised when the source path is missing, not a directory or empty."""
    pass


class MissingDependencyError(FACSDensityError):
    """Raised when a required third-party package cannot be imported."""
    pass


class NoMatchingFilesError(FACSDensityError):
    """Raised when no file name contains the sample identifier."""
    pass


class NoMatchingFCSFilesError(FACSDensityError):
    """Raised when files match the identifier but none of them is an FCS file."""
    pass


class InvalidFormatError(FACSDensityError):
    """Raised when the requested output format is not supported."""
    pass


class InvalidFileNameError(FACSDensityError):
    """Raised when no time point can be read from an FCS file name."""
    pass


class DuplicateTimePointError(FACSDensityError):
    """Raised when two files map to the same time point in strict mode."""
    pass


class MissingChannelError(FACSDensityError):
    """Raised when the plotted channel is absent from a loaded sample."""
    pass


class InvalidGateError(FACSDensityError):
    """Raised when a gate is not a (lower, upper) pair of numbers."""
    pass


class UserCancelledError(FACSDensityError):
    """Raised when the user declines to save the plot."""
    pass

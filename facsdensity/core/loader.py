import yaml
import json
from jsonschema import Draft202012Validator
from pathlib import Path

from facsdensity.core.defaults import DEFAULT_PLOT_CONFIG
from facsdensity.core.errors import FACSDensityConfigError


def _load_schema():
    """
    Loads the JSON schema from facsdensity/config/schema.json.
    """
    schema_path = Path(__file__).resolve().parent.parent / "config" / "schema.json"
    if not schema_path.exists():
        raise FACSDensityConfigError(f"Schema file not found: {schema_path}")
    return json.loads(schema_path.read_text())


def _pretty_schema_error(error):
    """
    Turns raw jsonschema errors into human-readable diagnostics.
    """
    path = " -> ".join(str(x) for x in error.absolute_path) or "<root>"
    return (
        f"Schema validation error at '{path}':\n"
        f"   {error.message}\n"
        f"   Validator: {error.validator}\n"
        f"   Problematic value: {error.instance}"
    )


def _validate_schema(data, schema):
    """
    Performs JSON Schema validation using the Draft 2020-12 validator.
    Raises descriptive error messages.
    """
    validator = Draft202012Validator(schema)

    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        msg = "\n\n".join(_pretty_schema_error(err) for err in errors)
        raise FACSDensityConfigError(f"Configuration does not match schema:\n\n{msg}")


def _validate_gate(data):
    """
    Ensures the gate, when present, is ordered (lower < upper).
    """
    gate = data.get("gate")
    if gate is None:
        return
    lower, upper = gate
    if lower >= upper:
        raise FACSDensityConfigError(
            f"'gate' lower limit must be below the upper limit, got {gate}."
        )


def validate_plot_config(data):
    """
    Validates a plot settings dict against the schema and semantic rules.
    Returns a copy with file_format lowercased, matching the API.
    """
    if not isinstance(data, dict):
        raise FACSDensityConfigError("Plot config must be a mapping of setting names -> values.")
    if isinstance(data.get("file_format"), str):
        data = dict(data, file_format=data["file_format"].lower())
    _validate_schema(data, _load_schema())
    _validate_gate(data)
    return data


def load_plot_config(config_path):
    """
    Loads and validates a plot config YAML file.

    Performs:
      - YAML parsing
      - JSON schema validation
      - gate ordering check

    Returns:
        dict: DEFAULT_PLOT_CONFIG updated with the values from the file
    """
    config_path = Path(config_path).resolve()

    if not config_path.exists():
        raise FACSDensityConfigError(f"Config file not found: {config_path}")

    # ----- Load YAML -----
    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FACSDensityConfigError(f"Failed to parse YAML file:\n{e}")

    if data is None:
        data = {}

    data = validate_plot_config(data)

    config = dict(DEFAULT_PLOT_CONFIG)
    config.update(data)
    return config

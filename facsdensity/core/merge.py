import os
import yaml

from facsdensity.core.errors import FACSDensityConfigError

def merge_settings(base, new):
    """
    Merge two plot setting dictionaries.
    Values from 'new' override or fill missing entries in 'base'.
    """
    result = dict(base)

    for key, value in new.items():

        # Arrays (the gate): replace only if new array is non-empty
        if isinstance(value, (list, tuple)):
            if value:
                result[key] = list(value)
            continue

        # scalars: override if new value is not None
        if value is not None:
            result[key] = value

    return result

def load_existing_yaml(path):
    """
    Returns the settings mapping stored in `path`, or {} if there is no file.
    """
    if not os.path.exists(path):
        return {}

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise FACSDensityConfigError(f"Failed to parse existing YAML file {path}:\n{e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FACSDensityConfigError(
            f"Existing file {path} must hold a mapping of setting names -> values, "
            f"got {type(data).__name__}."
        )
    return data

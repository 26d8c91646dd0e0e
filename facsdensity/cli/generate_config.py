#generate_config.py
import yaml

from facsdensity.core.defaults import DEFAULT_PLOT_CONFIG
from facsdensity.core.loader import validate_plot_config
from facsdensity.core.merge import load_existing_yaml, merge_settings


def cmd_generate_config(output):
    """
    Write a plot config with every setting at its default.
    Values already present in `output` are kept.
    """
    existing = load_existing_yaml(output)
    config = merge_settings(DEFAULT_PLOT_CONFIG, existing)

    config = validate_plot_config(config)

    with open(output, "w") as f:
        yaml.safe_dump(config, f, sort_keys=False)

    print(f"Wrote config to {output}")
    return 0

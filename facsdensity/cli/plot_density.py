#plot_density.py
from facsdensity.core.density_plot import facs_density_plot
from facsdensity.core.errors import FACSDensityError, UserCancelledError
from facsdensity.core.loader import DEFAULT_PLOT_CONFIG, load_plot_config
from facsdensity.core.merge import merge_settings
from facsdensity.utils.logging import log_error, log_info


def resolve_settings(config_file=None, **overrides):
    """
    Defaults <- YAML config file <- command line values (None = not given).
    """
    if config_file:
        settings = load_plot_config(config_file)
    else:
        settings = dict(DEFAULT_PLOT_CONFIG)
    return merge_settings(settings, overrides)


def cmd_plot_density(identifier, directory, output_dir, config_file=None, **overrides):
    """
    Runs the density plot and maps the outcome to an exit status:
    0 = saved or cancelled by the user, 1 = error.
    """
    try:
        settings = resolve_settings(config_file, **overrides)
        out_file = facs_density_plot(
            identifier,
            directory=directory,
            output_dir=output_dir,
            gate=settings["gate"],
            y_axis_label=settings["y_axis_label"],
            plot_color=settings["plot_color"],
            plot_transparency=settings["plot_transparency"],
            file_format=settings["file_format"],
            user_input=settings["user_input"],
            channel=settings["channel"],
            x_axis_label=settings["x_axis_label"],
            on_duplicate=settings["on_duplicate"],
        )
    except UserCancelledError as e:
        log_info(str(e))
        return 0
    except FACSDensityError as e:
        log_error(str(e))
        return 1

    print(f"Plot written to: {out_file}")
    return 0

"""
FACS density (ridge) plot across time points.

Loads all `.fcs` files of one sample from a directory, keys them by the
time point in their file name (`<prefix>_<timepoint>.fcs`), shows a ridge
plot of one fluorescence channel and, after an optional confirmation,
saves the (optionally gated) plot as `<output_dir>/<identifier>.<jpg|pdf>`.
"""

from pathlib import Path

from facsdensity.core.defaults import DEFAULT_PLOT_CONFIG
from facsdensity.core.dependencies import check_dependencies
from facsdensity.core.discovery import find_sample_files
from facsdensity.core.errors import (
    FACSDensityConfigError,
    InvalidFormatError,
    UserCancelledError,
)
from facsdensity.core.ridgeplot import (
    FILE_FORMATS,
    close_figure,
    output_extension,
    plot_ridges,
    save_figure,
    show_figure,
    strip_x_axis,
)
from facsdensity.core.timeseries import load_time_series, read_fcs_events, to_long_frame
from facsdensity.core.transforms import validate_gate
from facsdensity.utils.logging import log_info

MENU_CHOICES = ("No, let me change it first.", "Yes, save plot!")
CANCEL_MESSAGE = "Quitting. See you soon!"


def menu_confirm(question, input_func=None):
    """
    Numbered console menu:

        <question>

        1: No, let me change it first.
        2: Yes, save plot!

    Returns True only for "2". "1", "0", an empty answer or end of input
    count as "no". Anything else asks again.
    """
    if input_func is None:
        input_func = input

    print(question)
    print()
    for i, choice in enumerate(MENU_CHOICES, start=1):
        print(f"{i}: {choice}")
    print()

    while True:
        try:
            answer = input_func("Selection: ").strip()
        except EOFError:
            return False

        if answer in ("", "0", "1"):
            return False
        if answer == "2":
            return True
        print("Enter an item from the menu, or 0 to exit")


def check_file_format(file_format):
    """
    Returns the file extension for a supported format, else raises.
    """
    if not isinstance(file_format, str) or file_format.lower() not in FILE_FORMATS:
        raise InvalidFormatError(
            f'"file_format" must be one of "jpeg" and "pdf", got "{file_format}".'
        )
    return output_extension(file_format)


def _check_transparency(plot_transparency):
    try:
        alpha = float(plot_transparency)
    except (TypeError, ValueError):
        raise FACSDensityConfigError(
            f'"plot_transparency" must be a number between 0 and 1, got {plot_transparency!r}.'
        )
    if not 0.0 <= alpha <= 1.0:
        raise FACSDensityConfigError(
            f'"plot_transparency" must be between 0 and 1, got {plot_transparency!r}.'
        )
    return alpha


def facs_density_plot(
    identifier,
    directory=".",
    output_dir=None,
    gate=None,
    y_axis_label=DEFAULT_PLOT_CONFIG["y_axis_label"],
    plot_color=DEFAULT_PLOT_CONFIG["plot_color"],
    plot_transparency=DEFAULT_PLOT_CONFIG["plot_transparency"],
    file_format=DEFAULT_PLOT_CONFIG["file_format"],
    user_input=True,
    *,
    channel=DEFAULT_PLOT_CONFIG["channel"],
    x_axis_label=DEFAULT_PLOT_CONFIG["x_axis_label"],
    confirm=None,
    reader=None,
    requirements=None,
    on_duplicate=DEFAULT_PLOT_CONFIG["on_duplicate"],
    show=True,
):
    """
    Build a ridge plot of `channel` across the time points of one sample
    and save it.

    Args:
        identifier: sample identifier; every file whose name contains it
            (and "fcs") is loaded. Also the plot title and output file name.
        directory: directory with the .fcs files
        output_dir: where the plot is written; defaults to `directory`
        gate: optional (lower, upper) x range applied to the saved plot
        y_axis_label, plot_color, plot_transparency: plot styling
        file_format: "jpeg" (written as .jpg) or "pdf"
        user_input: ask before saving
        channel: event column to plot
        x_axis_label: x axis title
        confirm: callable(question) -> bool used when user_input is true;
            defaults to menu_confirm
        reader: callable(path) -> events DataFrame; defaults to
            read_fcs_events (flowkit)
        requirements: import name -> install hint mapping checked up front
        on_duplicate: "overwrite" or "error" for repeated time points
        show: display the ungated plot

    Returns:
        Path of the written file.

    Raises:
        InvalidFormatError, InvalidGateError, FACSDensityConfigError,
        MissingDependencyError, InvalidDirectoryError, NoMatchingFilesError,
        NoMatchingFCSFilesError, InvalidFileNameError, MissingChannelError,
        DuplicateTimePointError, UserCancelledError
    """
    # -------------------------------------------------------
    # 1. Argument checks (no file system access yet)
    # -------------------------------------------------------
    ext = check_file_format(file_format)
    gate = validate_gate(gate)
    alpha = _check_transparency(plot_transparency)
    check_dependencies(requirements)

    if output_dir is None:
        output_dir = directory
    if reader is None:
        reader = read_fcs_events

    plot_config = {
        "plot_color": plot_color,
        "plot_transparency": alpha,
        "x_axis_label": x_axis_label,
        "y_axis_label": y_axis_label,
    }

    # -------------------------------------------------------
    # 2. Find + load the time series
    # -------------------------------------------------------
    log_info("Loading fcs files...")
    target_files = find_sample_files(directory, identifier)
    samples = load_time_series(directory, target_files, reader=reader, on_duplicate=on_duplicate)
    df = to_long_frame(samples, channel)

    # -------------------------------------------------------
    # 3. Ungated plot on screen
    # -------------------------------------------------------
    log_info("Plotting data...")
    fig = None
    final_fig = None
    try:
        fig = plot_ridges(df, channel, identifier, plot_config)
        if show:
            show_figure(fig)

        # ---------------------------------------------------
        # 4. Ask before saving
        # ---------------------------------------------------
        if gate is None:
            question = "Save plot to file?"
        else:
            question = "Gate plot and save to file?"

        if user_input:
            ask = confirm if confirm is not None else menu_confirm
            if not ask(question):
                raise UserCancelledError(CANCEL_MESSAGE)

        # ---------------------------------------------------
        # 5. Final (gated) plot without x ticks, to file
        # ---------------------------------------------------
        final_fig = plot_ridges(df, channel, identifier, plot_config, gate=gate)
        strip_x_axis(final_fig)

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        out_file = output_dir / f"{identifier}.{ext}"

        log_info("Saving plot:")
        log_info(f"   {out_file}")
        save_figure(final_fig, out_file, file_format)
    finally:
        close_figure(fig)
        close_figure(final_fig)

    log_info("---")
    log_info("Done!")
    return out_file

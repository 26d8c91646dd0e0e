# facsdensity/core/ridgeplot.py
from facsdensity.core.transforms import apply_gate

# ggridges-like look
RIDGE_SCALE = 2.0          # tallest ridge spans two rows
RIDGE_EDGE_COLOR = "white"
RIDGE_EDGE_WIDTH = 0.7
FIGSIZE = (7, 7)
SAVE_DPI = 150

_NON_INTERACTIVE_BACKENDS = ("agg", "cairo", "pdf", "pgf", "ps", "svg", "template")

# extension written for each accepted format name
FILE_FORMATS = {
    "jpeg": "jpg",
    "jpg": "jpg",
    "pdf": "pdf",
}


def plot_ridges(df, channel, title, plot_config, gate=None):
    """
    Ridge (stacked density) plot of one channel across time points.

    df: long DataFrame from to_long_frame
    plot_config: dict with plot_color, plot_transparency, x_axis_label,
                 y_axis_label
    gate: optional (lower, upper); events outside are dropped before the
          densities are estimated and the x axis is limited to it

    Returns the matplotlib Figure; the caller owns it and must close it.
    """
    import matplotlib.pyplot as plt
    from facsdensity.core.density import ridge_densities

    df = apply_gate(df, channel, gate)
    grid, curves = ridge_densities(df, channel, gate=gate)

    peak = max((float(c.max()) for c in curves.values()), default=0.0)
    if peak <= 0:
        peak = 1.0

    n = len(curves)
    fig, ax = plt.subplots(figsize=FIGSIZE)

    for i, (time_point, dens) in enumerate(curves.items()):
        heights = dens / peak * RIDGE_SCALE
        # lower ridges are drawn on top of the ones above them
        ax.fill_between(
            grid,
            i,
            i + heights,
            facecolor=plot_config["plot_color"],
            alpha=plot_config["plot_transparency"],
            edgecolor=RIDGE_EDGE_COLOR,
            linewidth=RIDGE_EDGE_WIDTH,
            zorder=n - i,
        )

    # ----------------------------------
    # Cosmetics
    # ----------------------------------
    ax.set_yticks(range(n))
    ax.set_yticklabels(list(curves.keys()))
    ax.set_ylim(-0.01 * n, (n - 1) + RIDGE_SCALE)
    ax.set_xlim(grid[0], grid[-1])

    ax.set_title(str(title), fontsize=30, fontweight="bold")
    ax.set_xlabel(plot_config["x_axis_label"], fontsize=26)
    ax.set_ylabel(plot_config["y_axis_label"], fontsize=26)
    ax.tick_params(axis="x", labelsize=15, colors="black")
    ax.tick_params(axis="y", labelsize=26, colors="black")

    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.grid(False)

    fig.tight_layout()
    return fig


def strip_x_axis(fig):
    """
    Removes all axis ticks and the x tick labels.
    """
    for ax in fig.axes:
        ax.tick_params(axis="both", which="both", length=0)
        ax.tick_params(axis="x", labelbottom=False)
    return fig


def is_interactive_backend():
    import matplotlib.pyplot as plt

    backend = plt.get_backend().lower()
    return backend not in _NON_INTERACTIVE_BACKENDS


def show_figure(fig):
    """
    Draw the figure on screen without blocking.
    Does nothing on non-interactive backends (Agg, file-only backends).
    """
    import matplotlib.pyplot as plt

    if not is_interactive_backend():
        return
    fig.canvas.draw_idle()
    plt.show(block=False)
    plt.pause(0.1)


def close_figure(fig):
    if fig is not None:
        import matplotlib.pyplot as plt

        plt.close(fig)


def output_extension(file_format):
    return FILE_FORMATS[str(file_format).lower()]


def save_figure(fig, path, file_format):
    """
    Write the figure as jpeg or pdf.
    PDFs carry no creation date so re-running gives the same file content.
    """
    ext = output_extension(file_format)
    if ext == "pdf":
        fig.savefig(path, format="pdf", metadata={"CreationDate": None})
    else:
        fig.savefig(path, format="jpeg", dpi=SAVE_DPI)
    return path

# facsdensity/core/density.py
import numpy as np

from facsdensity.utils.logging import log_warn


def _kde(values, grid):
    """
    Gaussian KDE (Scott bandwidth) of `values` evaluated on `grid`.
    Degenerate inputs (fewer than two distinct values) give a zero curve.
    """
    from scipy.stats import gaussian_kde

    if len(values) < 2 or np.unique(values).size < 2:
        return np.zeros_like(grid)
    kde = gaussian_kde(values, bw_method="scott")
    return kde(grid)


def density_grid(df, channel, gate=None, grid_size=512):
    """
    Shared x grid for all ridges: the gate when given, else the data range.
    """
    if gate is not None:
        lo, hi = gate
    else:
        values = df[channel].dropna().to_numpy(dtype=float)
        if values.size == 0:
            lo, hi = 0.0, 1.0
        else:
            lo, hi = float(values.min()), float(values.max())
        if lo == hi:
            lo, hi = lo - 0.5, hi + 0.5
    return np.linspace(lo, hi, grid_size)


def ridge_densities(df, channel, gate=None, grid_size=512):
    """
    Compute one density curve per time point.

    Args:
        df: long DataFrame from to_long_frame (channel + categorical time_point)
        channel: column to estimate
        gate: optional (lower, upper); the grid spans it and events outside
              are expected to be removed already
        grid_size: number of grid points

    Returns:
        (grid, dict(time_point -> density array)) with time points in
        category order.
    """
    grid = density_grid(df, channel, gate=gate, grid_size=grid_size)

    curves = {}
    for time_point in df["time_point"].cat.categories:
        values = df.loc[df["time_point"] == time_point, channel].dropna().to_numpy(dtype=float)
        if np.unique(values).size < 2:
            log_warn(
                f"Time point '{time_point}' has {values.size} usable events; "
                f"drawing a flat ridge."
            )
        curves[time_point] = _kde(values, grid)

    return grid, curves

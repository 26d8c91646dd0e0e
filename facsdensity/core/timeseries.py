#timeseries.py
from collections import OrderedDict
from pathlib import Path

from facsdensity.core.discovery import extract_time_point
from facsdensity.core.errors import (
    DuplicateTimePointError,
    FACSDensityError,
    MissingChannelError,
)
from facsdensity.utils.logging import log_info, log_warn

DUPLICATE_POLICIES = ("overwrite", "error")


def flatten_columns(df):
    """
    flowkit returns (PnN, PnS) MultiIndex columns; keep the PnN label.
    """
    import pandas as pd

    if isinstance(df.columns, pd.MultiIndex):
        df = df.copy()
        df.columns = df.columns.get_level_values(0)
    return df


def read_fcs_events(path):
    """
    Default sample reader: load one FCS file into an events DataFrame.
    """
    import flowkit as fk

    sample = fk.Sample(str(path))
    df = sample.as_dataframe(source="raw")
    return flatten_columns(df)


def load_time_series(directory, filenames, reader=read_fcs_events, on_duplicate="overwrite"):
    """
    Load every file and key it by its time point.

    Returns:
        OrderedDict(time_point -> events DataFrame), in the order of
        `filenames`.

    Two files with the same time point: with on_duplicate="overwrite" the
    later file replaces the earlier one (a warning is logged), with
    on_duplicate="error" a DuplicateTimePointError is raised.
    """
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ValueError(
            f"on_duplicate must be one of {DUPLICATE_POLICIES}, got {on_duplicate!r}"
        )

    directory = Path(directory)
    samples = OrderedDict()
    sources = {}

    for name in filenames:
        time_point = extract_time_point(name)

        if time_point in samples:
            if on_duplicate == "error":
                raise DuplicateTimePointError(
                    f'Files "{sources[time_point]}" and "{name}" both map to '
                    f'time point "{time_point}".'
                )
            log_warn(
                f'"{name}" replaces "{sources[time_point]}" '
                f'for time point "{time_point}".'
            )

        # re-assigning an existing key keeps its first-seen position
        samples[time_point] = reader(directory / name)
        sources[time_point] = name
        log_info(f"   {name} -> time point {time_point}")

    if not samples:
        raise FACSDensityError("No samples were loaded.")

    return samples


def to_long_frame(samples, channel):
    """
    Stack the per-time-point events into one long DataFrame.

    Columns: [channel, "time_point"]. "time_point" is an ordered
    categorical whose categories follow the insertion order of `samples`.
    """
    import pandas as pd

    frames = []
    for time_point, df in samples.items():
        if channel not in df.columns:
            raise MissingChannelError(
                f"Channel '{channel}' not found in time point '{time_point}'.\n"
                f"Available: {list(df.columns)}"
            )
        part = pd.DataFrame({channel: pd.to_numeric(df[channel], errors="coerce").to_numpy()})
        part["time_point"] = time_point
        frames.append(part)

    long_df = pd.concat(frames, axis=0, ignore_index=True)
    long_df["time_point"] = pd.Categorical(
        long_df["time_point"],
        categories=list(samples.keys()),
        ordered=True,
    )
    return long_df

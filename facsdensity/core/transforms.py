import math
import numbers

from facsdensity.core.errors import InvalidGateError


def validate_gate(gate):
    """
    Normalize a gate to a (lower, upper) tuple of floats.
    None means no gating and is passed through.
    """
    if gate is None:
        return None

    try:
        values = list(gate)
    except TypeError:
        raise InvalidGateError(f"Gate must be a (lower, upper) pair, got {gate!r}")

    if len(values) != 2:
        raise InvalidGateError(
            f"Gate must have exactly two limits, got {len(values)}: {gate!r}"
        )

    for v in values:
        if isinstance(v, bool) or not isinstance(v, numbers.Real) or not math.isfinite(v):
            raise InvalidGateError(f"Gate limits must be finite numbers, got {gate!r}")

    lower, upper = float(values[0]), float(values[1])
    if lower >= upper:
        raise InvalidGateError(
            f"Gate lower limit must be below the upper limit, got {gate!r}"
        )
    return lower, upper


def apply_gate(df, channel, gate):
    """
    Keeps the events whose channel value lies inside the gate (inclusive).
    """
    if gate is None:
        return df
    mn, mx = gate
    mask = (df[channel] >= mn) & (df[channel] <= mx)
    return df[mask]

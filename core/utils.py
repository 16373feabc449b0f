"""Assorted utility helpers."""

import math


def clamp_non_negative(x) -> float:
    """Return ``x`` as a finite, non-negative float or ``0.0``.

    Like the spreadsheet ``NZ()`` function, blanks become zero; negatives
    and infinities are folded to zero as well.
    """
    try:
        v = float(x)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(v):
        return 0.0
    return max(0.0, v)


def clamp(x, low, high):
    """Clamp ``x`` into ``[low, high]``; non-finite input maps to ``low``."""
    try:
        v = float(x)
    except (TypeError, ValueError):
        return low
    if not math.isfinite(v):
        return low
    return min(high, max(low, v))


def round_half_up(x):
    """Round to the nearest integer with halves going up (``2.5 -> 3``)."""
    return int(math.floor(x + 0.5))

"""
Number utilities for dashboard percentages.
"""

import math


def round_percent(part: int, whole: int) -> int:
    """
    Percent of part in whole, rounded to the nearest integer (halves up).

    Evaluated in floating point as part / whole * 100, the way the
    dashboard has always shown it:
    - 185 / 200 → 93
    - 29 / 200 → 14 (the ratio is 14.499999999999998)

    Counts too large for a float are rounded exactly on integers instead.

    Args:
        part: Non-negative count
        whole: Positive count

    Returns:
        Whole percent, unbounded above
    """
    try:
        return math.floor(part / whole * 100 + 0.5)
    except OverflowError:
        return (200 * part + whole) // (2 * whole)

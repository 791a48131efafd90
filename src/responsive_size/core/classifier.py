"""Map a dimension onto a size category."""

from enum import Enum
from typing import TypeVar

from responsive_size.core.breakpoints import BaseBreakpoints

K = TypeVar("K", bound=Enum)


def get_screen_size(dimension: float, breakpoints: BaseBreakpoints[K]) -> K:
    """
    Classify a dimension using a breakpoint table.

    Entries are scanned from the largest threshold down and the first
    category whose threshold is <= ``dimension`` wins, so a dimension
    equal to a threshold belongs to that threshold's category. Anything
    below every threshold lands in the catch-all category.

    Args:
        dimension: Width or shortest side in logical units
        breakpoints: Table to classify against

    Returns:
        The matching category (never fails)
    """
    entries = breakpoints.values
    for size, threshold in entries.items():
        if dimension >= threshold:
            return size

    return breakpoints.catch_all


def current_breakpoint(size: K, breakpoints: BaseBreakpoints[K]) -> float:
    """Threshold of the category a dimension was classified into."""
    return breakpoints.threshold_of(size)

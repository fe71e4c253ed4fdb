"""
Exposure Window

Date arithmetic for the trailing observation window. A food is assessed once
it has been offered on exactly ``EXPOSURES_FOR_OUTCOME`` days within
``WINDOW_DAYS`` calendar days ending at the anchor date.
"""

from datetime import date, timedelta
from typing import Iterable, Tuple

WINDOW_DAYS = 7
EXPOSURES_FOR_OUTCOME = 3


def window_bounds(anchor: date) -> Tuple[date, date]:
    """Return the inclusive (start, end) of the window ending at ``anchor``."""
    return anchor - timedelta(days=WINDOW_DAYS - 1), anchor


def count_in_window(anchor: date, exposure_dates: Iterable[date]) -> int:
    """Count distinct exposure dates that fall inside the window of ``anchor``."""
    start, end = window_bounds(anchor)
    return len({d for d in exposure_dates if start <= d <= end})


def needs_outcome(window_count: int) -> bool:
    # Exactly the 3rd exposure, not the 4th or later
    return window_count == EXPOSURES_FOR_OUTCOME

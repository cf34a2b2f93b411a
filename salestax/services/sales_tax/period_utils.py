"""Quarter date range calculation utilities.

Maps a (quarter, year) pair to the inclusive timestamps a sales tax
filing covers, and works out the default period for today.
"""
from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Optional, Tuple

from salestax.core.exceptions import InvalidQuarterError, InvalidYearError

from .types import QuarterRange

# (first month, first day), (last month, last day)
QUARTER_BOUNDS = {
    1: ((1, 1), (3, 31)),
    2: ((4, 1), (6, 30)),
    3: ((7, 1), (9, 30)),
    4: ((10, 1), (12, 31)),
}

QUARTER_LABELS = {
    1: "Q1 (Jan - Mar)",
    2: "Q2 (Apr - Jun)",
    3: "Q3 (Jul - Sep)",
    4: "Q4 (Oct - Dec)",
}


def resolve_quarter_range(quarter: int, year: int) -> QuarterRange:
    """Calculate the inclusive start/end timestamps of a calendar quarter.

    Args:
        quarter: 1, 2, 3 or 4
        year: Calendar year; no range limits beyond what a date can hold

    Returns:
        QuarterRange from 00:00:00 on the first day to 23:59:59 on the last

    Raises:
        InvalidQuarterError: If quarter is not 1-4
        InvalidYearError: If year falls outside the representable calendar
    """
    if isinstance(quarter, bool) or quarter not in QUARTER_BOUNDS:
        raise InvalidQuarterError(quarter, year)
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidYearError(year, quarter)

    (start_month, start_day), (end_month, end_day) = QUARTER_BOUNDS[quarter]
    return QuarterRange(
        quarter=quarter,
        year=year,
        start=datetime(year, start_month, start_day, 0, 0, 0),
        end=datetime(year, end_month, end_day, 23, 59, 59),
    )


def current_quarter(today: Optional[date] = None) -> Tuple[int, int]:
    """Return (quarter, year) containing ``today``."""
    today = today or date.today()
    return (today.month - 1) // 3 + 1, today.year


def available_years(today: Optional[date] = None, span: int = 5) -> list[int]:
    """Years offered by the period picker, newest first."""
    year = (today or date.today()).year
    return list(range(year, year - span - 1, -1))

"""Gregorian day-of-month rules used by the date masks."""

from __future__ import annotations

from datetime import date

_THIRTY_ONE_DAY_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return True if *year* is a Gregorian leap year."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_day(month: int, day: int, year: int | None = None) -> bool:
    """Check whether *day* exists in *month*.

    February is checked against *year*.  When no year is given the current
    calendar year is used, which is what the date masks do while the year
    has not been typed yet.

    Args:
        month: Month number; anything outside 1..12 is invalid.
        day: Day number; 0 is always invalid.
        year: Year used for the February leap-day rule.

    Returns:
        True if the day exists in that month.
    """
    if day < 1:
        return False
    if month in _THIRTY_ONE_DAY_MONTHS:
        return day <= 31
    if month in _THIRTY_DAY_MONTHS:
        return day <= 30
    if month == 2:
        if year is None:
            year = date.today().year
        return day <= (29 if is_leap_year(year) else 28)
    return False

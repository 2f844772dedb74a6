"""Day count normalization for the real calendar's 4-year leap cycle.

A block of four years holds 1461 days. The leap year comes first in each
block, so year 0 is a leap year. Century exceptions are not modelled.
"""
from __future__ import annotations

LEAP_YEAR_DAYS = 366
COMMON_YEAR_DAYS = 365
CYCLE_YEARS = 4
CYCLE_DAYS = LEAP_YEAR_DAYS + 3 * COMMON_YEAR_DAYS  # 1461


def is_leap_year(year: int) -> bool:
    return year % CYCLE_YEARS == 0


def normalize_leap_days(total_days: int) -> tuple[int, int, bool]:
    """Map an absolute day count to (day of year, year, is leap year)."""
    cycle, day_in_cycle = divmod(total_days, CYCLE_DAYS)
    first_year = cycle * CYCLE_YEARS
    if day_in_cycle < LEAP_YEAR_DAYS:
        return day_in_cycle, first_year, True
    position, day_of_year = divmod(day_in_cycle - LEAP_YEAR_DAYS, COMMON_YEAR_DAYS)
    return day_of_year, first_year + 1 + position, False

"""Calendar mode validation and Earth-like duration tables."""
from __future__ import annotations

from typing import assert_never

from tick_calendar.types import CalendarMode, CustomMode, InvalidModeError, LunarMode, RealMode

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
EARTH_HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

LUNAR_MONTH_DAYS = 30
LUNAR_YEAR_DAYS = LUNAR_MONTH_DAYS * 12
LUNAR_SEASON_DAYS = LUNAR_YEAR_DAYS // 4

REAL_MONTHS = 12
SEASONS = 4


def validate_mode(mode: CalendarMode) -> None:
    """Raise InvalidModeError if the mode cannot drive a calendar."""
    if isinstance(mode, (LunarMode, RealMode)):
        if mode.seconds_per_tick < 1:
            raise InvalidModeError(
                f"The minimum value for {type(mode).__name__}.seconds_per_tick is 1,"
                f" got {mode.seconds_per_tick}"
            )
    elif isinstance(mode, CustomMode):
        if mode.seconds_per_tick < 1:
            raise InvalidModeError(
                "The minimum value for CustomMode.seconds_per_tick is 1,"
                f" got {mode.seconds_per_tick}"
            )
        months_total = sum(mode.month_durations)
        seasons_total = sum(mode.season_durations)
        if months_total != seasons_total:
            raise InvalidModeError(
                "CustomMode months and seasons must cover the same number of days:"
                f" months sum to {months_total}, seasons sum to {seasons_total}"
            )
    else:
        assert_never(mode)


def hours_per_day(mode: CalendarMode) -> int:
    if isinstance(mode, (LunarMode, RealMode)):
        return EARTH_HOURS_PER_DAY
    elif isinstance(mode, CustomMode):
        return mode.hours_per_day
    else:
        assert_never(mode)


def month_durations(is_leap: bool) -> tuple[int, ...]:
    """Real month lengths in days, February depending on the leap year."""
    return (31, 29 if is_leap else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def season_durations(is_leap: bool) -> tuple[int, ...]:
    """Real season lengths in days.

    The four seasons cover 355 (356) days; the days left at the end of the
    year fall past the last season and wrap back to season 0.
    """
    return (81 if is_leap else 80, 92, 92, 91)


def describe(mode: CalendarMode) -> str:
    """Short human-readable summary used in log records."""
    if isinstance(mode, LunarMode):
        return f"lunar ({mode.seconds_per_tick}s/tick)"
    elif isinstance(mode, RealMode):
        return f"real ({mode.seconds_per_tick}s/tick)"
    elif isinstance(mode, CustomMode):
        return (
            f"custom ({mode.seconds_per_tick}s/tick, {mode.hours_per_day}h/day,"
            f" {len(mode.month_durations)} months, {len(mode.season_durations)} seasons,"
            f" {mode.year_length} days/year)"
        )
    else:
        assert_never(mode)

"""Pure tick -> calendar position decomposition for every calendar mode."""
from __future__ import annotations

from typing import assert_never

from tick_calendar.leap import normalize_leap_days
from tick_calendar.modes import (
    DAYS_PER_WEEK,
    LUNAR_MONTH_DAYS,
    LUNAR_SEASON_DAYS,
    LUNAR_YEAR_DAYS,
    REAL_MONTHS,
    SEASONS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    hours_per_day,
    month_durations,
    season_durations,
)
from tick_calendar.sections import find_section
from tick_calendar.types import CalendarMode, CalendarSnapshot, CustomMode, LunarMode, RealMode


def decompose(tick: int, mode: CalendarMode) -> CalendarSnapshot:
    """Compute the calendar position reached after ``tick`` ticks.

    The result depends only on (tick, mode). Python integers do not overflow,
    so arbitrarily large tick counts are exact.
    """
    total_seconds = tick * mode.seconds_per_tick
    second = total_seconds % SECONDS_PER_MINUTE
    minute = total_seconds // SECONDS_PER_MINUTE % 60

    day_hours = hours_per_day(mode)
    if day_hours > 0:
        hour = total_seconds // SECONDS_PER_HOUR % day_hours
        total_days = total_seconds // (day_hours * SECONDS_PER_HOUR)
    else:
        # Zero-hour days never complete.
        hour = 0
        total_days = 0

    if isinstance(mode, LunarMode):
        year, day_of_year = divmod(total_days, LUNAR_YEAR_DAYS)
        month, day = divmod(day_of_year, LUNAR_MONTH_DAYS)
        season = day_of_year // LUNAR_SEASON_DAYS
        week = day_of_year // DAYS_PER_WEEK
    elif isinstance(mode, RealMode):
        day_of_year, year, is_leap = normalize_leap_days(total_days)
        month, day = find_section(day_of_year, month_durations(is_leap), REAL_MONTHS)
        season, _ = find_section(day_of_year, season_durations(is_leap), SEASONS)
        season %= SEASONS
        week = day_of_year // DAYS_PER_WEEK
    elif isinstance(mode, CustomMode):
        year_length = mode.year_length
        if year_length > 0:
            year, day_of_year = divmod(total_days, year_length)
        else:
            year, day_of_year = 0, 0
        month, day = find_section(day_of_year, mode.month_durations)
        season, _ = find_section(day_of_year, mode.season_durations)
        season %= SEASONS
        week = day_of_year // mode.week_duration if mode.week_duration > 0 else 0
    else:
        assert_never(mode)

    return CalendarSnapshot(
        year=year,
        season=season,
        week=week,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
    )

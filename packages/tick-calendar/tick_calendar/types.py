"""Calendar modes, snapshots, and change records."""

from __future__ import annotations

from dataclasses import dataclass

FIELDS = ("year", "season", "week", "month", "day", "hour", "minute", "second")


class InvalidModeError(ValueError):
    """Raised when a calendar mode is constructed with unusable parameters."""


@dataclass(frozen=True, slots=True)
class LunarMode:
    """Earth-like time with twelve 30-day months."""

    seconds_per_tick: int = 1


@dataclass(frozen=True, slots=True)
class RealMode:
    """Earth-like time with real month lengths and a leap year every 4 years."""

    seconds_per_tick: int = 1


@dataclass(frozen=True, slots=True)
class CustomMode:
    """User-defined month, season, day and week durations.

    Month and season durations are in days and must cover the same number of
    days; their sum is the length of the year.
    """

    seconds_per_tick: int
    hours_per_day: int
    month_durations: tuple[int, ...]
    season_durations: tuple[int, ...]
    week_duration: int = 7

    def __post_init__(self) -> None:
        object.__setattr__(self, "month_durations", tuple(self.month_durations))
        object.__setattr__(self, "season_durations", tuple(self.season_durations))

    @property
    def year_length(self) -> int:
        return sum(self.month_durations)


CalendarMode = LunarMode | RealMode | CustomMode


@dataclass(frozen=True, slots=True)
class CalendarSnapshot:
    """Calendar position at a given tick. Every field is a zero-based index."""

    year: int = 0
    season: int = 0
    week: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    def values(self) -> tuple[int, int, int, int, int, int, int, int]:
        return (
            self.year,
            self.season,
            self.week,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
        )

    def __str__(self) -> str:
        return ", ".join(
            f"{name.capitalize()} {value}" for name, value in zip(FIELDS, self.values())
        )


@dataclass(frozen=True, slots=True)
class FieldChange:
    """Value of a calendar field before and after a tick.

    Both values can be equal when a coarser field rolled over.
    """

    old_value: int
    new_value: int


@dataclass
class CalendarEvent:
    """Fields updated during a single tick. None means not reported."""

    second_update: FieldChange | None = None
    minute_update: FieldChange | None = None
    hour_update: FieldChange | None = None
    day_update: FieldChange | None = None
    week_update: FieldChange | None = None
    month_update: FieldChange | None = None
    season_update: FieldChange | None = None
    year_update: FieldChange | None = None

    def get(self, name: str) -> FieldChange | None:
        """Look up a field change by calendar field name ("month", ...)."""
        if name not in FIELDS:
            raise KeyError(name)
        return getattr(self, f"{name}_update")

    def changed(self) -> list[str]:
        """Names of reported fields, coarsest first."""
        return [name for name in FIELDS if self.get(name) is not None]

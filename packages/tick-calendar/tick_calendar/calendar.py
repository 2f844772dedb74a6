"""TickCalendar - tracks the current tick and its calendar position."""
from __future__ import annotations

import logging

from tick_calendar.config import CalendarOptions
from tick_calendar.decompose import decompose
from tick_calendar.events import diff_snapshots
from tick_calendar.modes import describe, validate_mode
from tick_calendar.types import CalendarEvent, CalendarMode, CalendarSnapshot

logger = logging.getLogger(__name__)


class TickCalendar:
    """Translate a tick counter into year, season, week, month, day and time.

    The calendar is built once from a starting tick (e.g. one read back from
    a save) and then moved forward one tick at a time with advance(). Field
    values are always recomputed from the tick count, so a calendar built at
    tick T matches one advanced T times from 0.
    """

    def __init__(self, tick: int, options: CalendarOptions) -> None:
        if tick < 0:
            raise ValueError("tick must be non-negative")
        validate_mode(options.mode)
        self._options = options
        self._current_tick = tick
        self._snapshot = decompose(tick, options.mode)
        self._previous: CalendarSnapshot | None = None
        logger.debug(
            "Calendar initialized at tick %d in %s mode: %s",
            tick,
            describe(options.mode),
            self._snapshot,
        )

    @property
    def options(self) -> CalendarOptions:
        return self._options

    @property
    def mode(self) -> CalendarMode:
        return self._options.mode

    @property
    def compute_events(self) -> bool:
        return self._options.compute_events

    @property
    def current_tick(self) -> int:
        return self._current_tick

    @property
    def snapshot(self) -> CalendarSnapshot:
        return self._snapshot

    @property
    def previous_snapshot(self) -> CalendarSnapshot | None:
        """Snapshot before the last advance(). Only kept when computing events."""
        return self._previous

    @property
    def year(self) -> int:
        return self._snapshot.year

    @property
    def season(self) -> int:
        return self._snapshot.season

    @property
    def week(self) -> int:
        return self._snapshot.week

    @property
    def month(self) -> int:
        return self._snapshot.month

    @property
    def day(self) -> int:
        return self._snapshot.day

    @property
    def hour(self) -> int:
        return self._snapshot.hour

    @property
    def minute(self) -> int:
        return self._snapshot.minute

    @property
    def second(self) -> int:
        return self._snapshot.second

    def values(self) -> tuple[int, int, int, int, int, int, int, int]:
        """(year, season, week, month, day, hour, minute, second)"""
        return self._snapshot.values()

    def advance(self) -> CalendarEvent | None:
        """Move forward by one tick.

        Returns the fields updated by this tick when events are enabled,
        otherwise None.
        """
        old = self._snapshot
        self._current_tick += 1
        self._snapshot = decompose(self._current_tick, self._options.mode)

        if self._snapshot.year != old.year:
            logger.debug(
                "Year %d began at tick %d", self._snapshot.year, self._current_tick
            )

        if not self._options.compute_events:
            return None
        self._previous = old
        return diff_snapshots(old, self._snapshot)

    def __str__(self) -> str:
        return str(self._snapshot)

    def __repr__(self) -> str:
        return f"TickCalendar(tick={self._current_tick}, mode={self._options.mode!r})"

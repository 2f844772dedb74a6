"""Tests for calendar change events — diff_snapshots and TickCalendar.advance."""
from __future__ import annotations

import pytest

from tick_calendar import (
    CalendarEvent,
    CalendarOptions,
    CalendarSnapshot,
    CustomMode,
    FieldChange,
    LunarMode,
    RealMode,
    TickCalendar,
    diff_snapshots,
)

DAY = 3600 * 24


def _events(mode, tick: int = 0) -> TickCalendar:
    return TickCalendar(tick, CalendarOptions(mode=mode, compute_events=True))


def _tick_event(mode, tick: int = 0) -> CalendarEvent:
    """Event produced by advancing from ``tick`` to ``tick + 1``."""
    event = _events(mode, tick).advance()
    assert event is not None
    return event


class TestToggle:
    def test_no_event_when_disabled(self) -> None:
        calendar = TickCalendar(0, CalendarOptions(mode=RealMode(123)))
        for _ in range(50):
            assert calendar.advance() is None
        assert calendar.previous_snapshot is None

    def test_event_when_enabled(self) -> None:
        calendar = _events(RealMode(123))
        for _ in range(50):
            assert isinstance(calendar.advance(), CalendarEvent)

    def test_previous_snapshot_kept_when_enabled(self) -> None:
        calendar = _events(LunarMode(1))
        assert calendar.previous_snapshot is None
        before = calendar.snapshot
        calendar.advance()
        assert calendar.previous_snapshot == before
        assert calendar.snapshot.second == 1


class TestRollovers:
    def test_second(self) -> None:
        event = _tick_event(RealMode(1))
        assert event.second_update == FieldChange(0, 1)
        assert event.changed() == ["second"]

    def test_minute(self) -> None:
        event = _tick_event(RealMode(60))
        assert event.second_update == FieldChange(0, 0)
        assert event.minute_update == FieldChange(0, 1)
        assert event.hour_update is None
        assert event.changed() == ["minute", "second"]

    def test_minute_from_second_overflow(self) -> None:
        event = _tick_event(LunarMode(1), tick=59)
        assert event.second_update == FieldChange(59, 0)
        assert event.minute_update == FieldChange(0, 1)
        assert event.hour_update is None

    def test_hour(self) -> None:
        event = _tick_event(RealMode(3600))
        assert event.second_update == FieldChange(0, 0)
        assert event.minute_update == FieldChange(0, 0)
        assert event.hour_update == FieldChange(0, 1)
        assert event.day_update is None

    def test_day(self) -> None:
        event = _tick_event(RealMode(DAY))
        assert event.second_update == FieldChange(0, 0)
        assert event.minute_update == FieldChange(0, 0)
        assert event.hour_update == FieldChange(0, 0)
        assert event.day_update == FieldChange(0, 1)
        assert event.week_update is None
        assert event.month_update is None
        assert event.season_update is None
        assert event.year_update is None

    def test_week(self) -> None:
        event = _tick_event(RealMode(DAY * 7))
        assert event.week_update == FieldChange(0, 1)
        assert event.day_update == FieldChange(0, 7)
        assert event.month_update is None

    def test_week_alone_does_not_cascade(self) -> None:
        event = _tick_event(LunarMode(DAY), tick=6)
        assert event.week_update == FieldChange(0, 1)
        assert event.day_update == FieldChange(6, 7)
        assert event.month_update is None
        assert event.season_update is None
        assert event.changed() == ["week", "day", "hour", "minute", "second"]

    def test_month(self) -> None:
        event = _tick_event(RealMode(DAY * 31))
        assert event.second_update == FieldChange(0, 0)
        assert event.minute_update == FieldChange(0, 0)
        assert event.hour_update == FieldChange(0, 0)
        assert event.day_update == FieldChange(0, 0)
        assert event.month_update == FieldChange(0, 1)
        assert event.season_update is None
        assert event.year_update is None

    def test_lunar_month_boundary_after_720_hourly_ticks(self) -> None:
        calendar = _events(LunarMode(3600))
        for _ in range(24 * 29 + 23):
            calendar.advance()
        assert (calendar.month, calendar.day, calendar.hour) == (0, 29, 23)

        event = calendar.advance()
        assert calendar.current_tick == 720
        assert (calendar.month, calendar.day, calendar.hour) == (1, 0, 0)
        assert event == CalendarEvent(
            second_update=FieldChange(0, 0),
            minute_update=FieldChange(0, 0),
            hour_update=FieldChange(23, 0),
            day_update=FieldChange(29, 0),
            month_update=FieldChange(0, 1),
        )

    def test_season_with_month(self) -> None:
        event = _tick_event(LunarMode(DAY), tick=89)
        assert event.season_update == FieldChange(0, 1)
        assert event.month_update == FieldChange(2, 3)
        assert event.week_update is None
        assert event.year_update is None

    def test_season_alone_does_not_cascade(self) -> None:
        """Real spring starts mid-March: season changes, month does not."""
        event = _tick_event(RealMode(DAY), tick=80)
        assert event.season_update == FieldChange(0, 1)
        assert event.month_update is None
        assert event.day_update == FieldChange(20, 21)
        assert event.week_update is None
        assert event.year_update is None

    def test_year_reports_every_field(self) -> None:
        event = _tick_event(RealMode(DAY * 366))
        assert event.second_update == FieldChange(0, 0)
        assert event.minute_update == FieldChange(0, 0)
        assert event.hour_update == FieldChange(0, 0)
        assert event.day_update == FieldChange(0, 0)
        assert event.week_update == FieldChange(0, 0)
        assert event.month_update == FieldChange(0, 0)
        assert event.season_update == FieldChange(0, 0)
        assert event.year_update == FieldChange(0, 1)

    def test_year_from_last_day(self) -> None:
        event = _tick_event(LunarMode(DAY), tick=359)
        assert event.year_update == FieldChange(0, 1)
        assert event.season_update == FieldChange(3, 0)
        assert event.week_update == FieldChange(51, 0)
        assert event.month_update == FieldChange(11, 0)
        assert event.day_update == FieldChange(29, 0)

    def test_custom_year(self) -> None:
        mode = CustomMode(
            seconds_per_tick=DAY,
            hours_per_day=24,
            month_durations=[1, 1],
            season_durations=[2],
        )
        event = _tick_event(mode, tick=1)
        assert event.year_update == FieldChange(0, 1)
        assert event.month_update == FieldChange(1, 0)
        assert event.season_update == FieldChange(0, 0)
        assert event.week_update == FieldChange(0, 0)


class TestDiffSnapshots:
    def test_identical_snapshots_report_nothing(self) -> None:
        snapshot = CalendarSnapshot(year=3, month=2, day=1)
        assert diff_snapshots(snapshot, snapshot) == CalendarEvent()

    def test_change_cascades_to_finer_fields_only(self) -> None:
        old = CalendarSnapshot(year=1, month=4, day=3, hour=7, minute=5, second=0)
        new = CalendarSnapshot(year=1, month=4, day=3, hour=8, minute=5, second=0)
        event = diff_snapshots(old, new)
        assert event.changed() == ["hour", "minute", "second"]
        assert event.minute_update == FieldChange(5, 5)

    def test_side_channel_without_main_change(self) -> None:
        old = CalendarSnapshot(season=1, week=3)
        new = CalendarSnapshot(season=2, week=3)
        assert diff_snapshots(old, new).changed() == ["season"]

    def test_month_change_does_not_force_week_or_season(self) -> None:
        old = CalendarSnapshot(season=1, week=3, month=2)
        new = CalendarSnapshot(season=1, week=3, month=3)
        event = diff_snapshots(old, new)
        assert event.week_update is None
        assert event.season_update is None
        assert event.changed() == ["month", "day", "hour", "minute", "second"]

    def test_year_change_forces_everything(self) -> None:
        old = CalendarSnapshot(year=0)
        new = CalendarSnapshot(year=1)
        assert diff_snapshots(old, new).changed() == [
            "year", "season", "week", "month", "day", "hour", "minute", "second"
        ]


class TestCalendarEvent:
    def test_empty_by_default(self) -> None:
        event = CalendarEvent()
        assert event.changed() == []

    def test_get_by_field_name(self) -> None:
        event = CalendarEvent(month_update=FieldChange(1, 2))
        assert event.get("month") == FieldChange(1, 2)
        assert event.get("year") is None

    def test_get_unknown_field(self) -> None:
        with pytest.raises(KeyError):
            CalendarEvent().get("fortnight")

    def test_field_change_is_frozen(self) -> None:
        change = FieldChange(old_value=1, new_value=2)
        with pytest.raises(AttributeError):
            change.old_value = 5  # type: ignore[misc]

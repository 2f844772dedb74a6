"""Change detection between two calendar snapshots."""
from __future__ import annotations

from tick_calendar.types import CalendarEvent, CalendarSnapshot, FieldChange

# Nested fields, outermost first. Once one is reported, every field inside
# it is reported too, even when its value did not move.
_CASCADE = ("year", "month", "day", "hour", "minute", "second")

# Reported on their own change or on a year change; never start the cascade.
_SIDE_CHANNEL = ("season", "week")


def diff_snapshots(old: CalendarSnapshot, new: CalendarSnapshot) -> CalendarEvent:
    """Build the CalendarEvent describing the move from ``old`` to ``new``."""
    event = CalendarEvent()

    cascading = False
    for name in _CASCADE:
        before, after = getattr(old, name), getattr(new, name)
        if cascading or before != after:
            cascading = True
            setattr(event, f"{name}_update", FieldChange(before, after))

    year_changed = event.year_update is not None
    for name in _SIDE_CHANNEL:
        before, after = getattr(old, name), getattr(new, name)
        if year_changed or before != after:
            setattr(event, f"{name}_update", FieldChange(before, after))

    return event

"""tick-calendar - Calendar time for tick-driven simulations."""

from tick_calendar.calendar import TickCalendar
from tick_calendar.config import CalendarOptions
from tick_calendar.decompose import decompose
from tick_calendar.events import diff_snapshots
from tick_calendar.types import (
    FIELDS,
    CalendarEvent,
    CalendarMode,
    CalendarSnapshot,
    CustomMode,
    FieldChange,
    InvalidModeError,
    LunarMode,
    RealMode,
)

__all__ = [
    "TickCalendar",
    "CalendarOptions",
    "CalendarMode",
    "LunarMode",
    "RealMode",
    "CustomMode",
    "CalendarSnapshot",
    "CalendarEvent",
    "FieldChange",
    "InvalidModeError",
    "FIELDS",
    "decompose",
    "diff_snapshots",
]

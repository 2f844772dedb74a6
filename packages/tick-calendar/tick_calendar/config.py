"""Calendar construction options."""
from __future__ import annotations

from dataclasses import dataclass

from tick_calendar.types import CalendarMode


@dataclass(frozen=True)
class CalendarOptions:
    """Immutable configuration for a TickCalendar.

    Attributes:
        mode: How ticks map onto calendar fields (LunarMode, RealMode or
            CustomMode).
        compute_events: When True, advance() returns a CalendarEvent
            describing the fields updated by the tick.
    """

    mode: CalendarMode
    compute_events: bool = False

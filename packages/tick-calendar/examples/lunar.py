"""Lunar calendar -- twelve 30-day months, one hour per tick.

Demonstrates:
- Building a TickCalendar with LunarMode
- Advancing it tick by tick
- Reading individual fields and the formatted position

Run: python -m examples.lunar
"""

from tick_calendar import CalendarOptions, LunarMode, TickCalendar


def main() -> None:
    print("=== Lunar Calendar ===\n")

    # One tick is one hour of game time.
    calendar = TickCalendar(0, CalendarOptions(mode=LunarMode(seconds_per_tick=3600)))

    # Simulate 40 days.
    for _ in range(24 * 40):
        calendar.advance()

    print(f"  tick {calendar.current_tick}")
    print(f"  month={calendar.month}  day={calendar.day}")  # month 1, day 10
    print(f"  {calendar}")


if __name__ == "__main__":
    main()

"""Real calendar -- Gregorian-like months with a leap year every 4 years.

Demonstrates:
- RealMode month lengths (year 0 is a leap year)
- Rebuilding a calendar from a saved tick instead of replaying every tick

Run: python -m examples.real
"""

from tick_calendar import CalendarOptions, RealMode, TickCalendar


def main() -> None:
    print("=== Real Calendar ===\n")

    options = CalendarOptions(mode=RealMode(seconds_per_tick=3600))
    calendar = TickCalendar(0, options)

    # Simulate 40 days.
    for _ in range(24 * 40):
        calendar.advance()

    print(f"  month={calendar.month}  day={calendar.day}")  # month 1, day 9

    # A save only needs the tick count.
    saved_tick = calendar.current_tick
    reloaded = TickCalendar(saved_tick, options)
    print(f"  reloaded at tick {saved_tick}: {reloaded}")
    print(f"  identical: {reloaded.values() == calendar.values()}")


if __name__ == "__main__":
    main()

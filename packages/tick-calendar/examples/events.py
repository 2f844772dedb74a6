"""Calendar events -- react to month, season and year changes.

Demonstrates:
- Enabling compute_events so advance() returns a CalendarEvent
- Cascading updates: a month change also reports day, hour, minute, second
- Turning on debug logging for the calendar

Run: python -m examples.events [--ticks N] [--verbose]
"""

import argparse
import logging

from tick_calendar import CalendarOptions, LunarMode, TickCalendar


def main() -> None:
    parser = argparse.ArgumentParser(description="Print calendar events as ticks pass")
    parser.add_argument("--ticks", "-n", type=int, default=24 * 400,
                        help="ticks to simulate, one hour each (default: 9600)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="show debug log records from tick_calendar")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=== Calendar Events ===\n")

    calendar = TickCalendar(
        0,
        CalendarOptions(mode=LunarMode(seconds_per_tick=3600), compute_events=True),
    )

    for _ in range(args.ticks):
        event = calendar.advance()
        if event is None:
            continue
        if event.year_update is not None:
            print(f"  tick {calendar.current_tick:>6}  new year {event.year_update.new_value}")
        elif event.season_update is not None:
            print(f"  tick {calendar.current_tick:>6}  season {event.season_update.new_value}")
        elif event.month_update is not None:
            change = event.month_update
            print(
                f"  tick {calendar.current_tick:>6}  month {change.old_value} -> {change.new_value}"
                f"  (updated: {', '.join(event.changed())})"
            )

    print(f"\nDone at tick {calendar.current_tick}: {calendar}")


if __name__ == "__main__":
    main()

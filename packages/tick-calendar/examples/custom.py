"""Custom calendar -- 12-hour days and a 4-day year.

Demonstrates:
- CustomMode with user-defined day, month, season and week lengths
- Validation of month/season totals at construction time

Run: python -m examples.custom
"""

from tick_calendar import CalendarOptions, CustomMode, InvalidModeError, TickCalendar


def main() -> None:
    print("=== Custom Calendar ===\n")

    mode = CustomMode(
        seconds_per_tick=3600,
        hours_per_day=12,
        month_durations=[1, 1, 1, 1],
        season_durations=[4],
        week_duration=7,
    )
    calendar = TickCalendar(0, CalendarOptions(mode=mode))

    # 960 one-hour ticks are 80 twelve-hour days, i.e. 20 years.
    for _ in range(24 * 40):
        calendar.advance()

    print(f"  {calendar}")  # Year 20, ... Month 0, Day 0

    # Months and seasons must cover the same number of days.
    broken = CustomMode(
        seconds_per_tick=3600,
        hours_per_day=12,
        month_durations=[1, 1, 1, 1],
        season_durations=[3],
    )
    try:
        TickCalendar(0, CalendarOptions(mode=broken))
    except InvalidModeError as exc:
        print(f"  rejected: {exc}")


if __name__ == "__main__":
    main()

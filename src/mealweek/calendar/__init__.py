"""Week indexing: ISO week numbers, day/week keys and navigation."""

from mealweek.calendar.weeks import (
    DAYS_OF_WEEK,
    WEEKEND_DAYS,
    DayInfo,
    DayKey,
    Weekday,
    WeekInfo,
    WeekRef,
    compute_week_info,
    current_week,
    date_of,
    day_key,
    next_week,
    parse_day_key,
    parse_week_key,
    previous_week,
    week_dates,
    week_day_keys,
    week_key,
    week_of,
)

__all__ = [
    "DAYS_OF_WEEK",
    "WEEKEND_DAYS",
    "DayInfo",
    "DayKey",
    "WeekInfo",
    "WeekRef",
    "Weekday",
    "compute_week_info",
    "current_week",
    "date_of",
    "day_key",
    "next_week",
    "parse_day_key",
    "parse_week_key",
    "previous_week",
    "week_dates",
    "week_day_keys",
    "week_key",
    "week_of",
]

"""Week numbering, day/week keys and week navigation.

Weeks follow ISO-8601: week 1 is the week holding the first Thursday of the
year and every week runs Monday to Sunday. Navigation is simplified and
wraps 52 <-> 1 at year boundaries, so ISO week 53 is never navigated to.
This is a known approximation, not strict ISO-8601 navigation.
"""

import datetime as dt
import re
from datetime import date, timedelta
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel

from mealweek.logging_config import get_logger

logger = get_logger(__name__)

WEEKS_PER_NAVIGATION_YEAR = 52
MAX_ISO_WEEK = 53


class Weekday(str, Enum):
    """English weekday names, Monday first."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def offset(self) -> int:
        """Offset from Monday (0..6)."""
        return DAYS_OF_WEEK.index(self)

    @property
    def is_weekend(self) -> bool:
        """Friday, Saturday and Sunday count as weekend days."""
        return self in WEEKEND_DAYS


DAYS_OF_WEEK: tuple[Weekday, ...] = tuple(Weekday)
WEEKEND_DAYS = frozenset({Weekday.FRIDAY, Weekday.SATURDAY, Weekday.SUNDAY})

_WEEKDAY_PATTERN = "|".join(day.value for day in DAYS_OF_WEEK)
_DAY_KEY_RE = re.compile(rf"([0-9]+)-W([0-9]+)-({_WEEKDAY_PATTERN})")
_WEEK_KEY_RE = re.compile(r"([0-9]+)-W([0-9]+)")


class WeekRef(NamedTuple):
    """A (year, week) pair."""

    year: int
    week: int


class DayKey(NamedTuple):
    """Parsed form of a day-key string."""

    year: int
    week: int
    weekday: Weekday


class DayInfo(BaseModel):
    """One day of a week projection."""

    weekday: Weekday
    date: dt.date
    meal_id: str | None = None


class WeekInfo(BaseModel):
    """Read-only projection of a week and its assignments."""

    year: int
    week: int
    days: list[DayInfo]


# =============================================================================
# Dates
# =============================================================================


def week_of(day: date) -> WeekRef:
    """Return the ISO (year, week) that contains ``day``."""
    iso = day.isocalendar()
    return WeekRef(iso[0], iso[1])


def _coerce_weekday(weekday: Weekday | str) -> Weekday:
    try:
        return Weekday(weekday)
    except ValueError:
        raise ValueError(f"Unknown weekday: {weekday!r}") from None


def date_of(year: int, week: int, weekday: Weekday | str) -> date:
    """Calendar date of ``weekday`` in ISO week ``week`` of ``year``."""
    if not 1 <= week <= MAX_ISO_WEEK:
        raise ValueError(f"Week must be between 1 and {MAX_ISO_WEEK}, got {week}")
    day = _coerce_weekday(weekday)

    jan_fourth = date(year, 1, 4)  # always inside ISO week 1
    first_monday = jan_fourth - timedelta(days=jan_fourth.weekday())
    return first_monday + timedelta(weeks=week - 1, days=day.offset)


def week_dates(year: int, week: int) -> list[date]:
    """The seven dates of a week, Monday to Sunday."""
    return [date_of(year, week, day) for day in DAYS_OF_WEEK]


# =============================================================================
# Keys
# =============================================================================


def day_key(year: int, week: int, weekday: Weekday | str) -> str:
    """Stable key of one day, e.g. ``2024-W47-Monday``."""
    return f"{year}-W{week}-{_coerce_weekday(weekday).value}"


def parse_day_key(key: str) -> DayKey | None:
    """Parse a day-key. Returns None for anything that is not a valid key."""
    if not isinstance(key, str):
        return None
    match = _DAY_KEY_RE.fullmatch(key)
    if not match:
        logger.debug(f"Not a valid day key: {key!r}")
        return None
    return DayKey(int(match.group(1)), int(match.group(2)), Weekday(match.group(3)))


def week_key(year: int, week: int) -> str:
    """Stable key of one week's shopping list, e.g. ``2024-W47``."""
    return f"{year}-W{week}"


def parse_week_key(key: str) -> WeekRef | None:
    """Parse a week-key. Returns None for anything that is not a valid key."""
    if not isinstance(key, str):
        return None
    match = _WEEK_KEY_RE.fullmatch(key)
    if not match:
        return None
    return WeekRef(int(match.group(1)), int(match.group(2)))


def week_day_keys(year: int, week: int) -> list[str]:
    """The seven day-keys of a week, Monday to Sunday."""
    return [day_key(year, week, day) for day in DAYS_OF_WEEK]


# =============================================================================
# Navigation
# =============================================================================


def previous_week(year: int, week: int) -> WeekRef:
    """Week before (year, week); week 1 wraps to week 52 of the previous year."""
    if week > 1:
        return WeekRef(year, week - 1)
    return WeekRef(year - 1, WEEKS_PER_NAVIGATION_YEAR)


def next_week(year: int, week: int) -> WeekRef:
    """Week after (year, week); week 52 wraps to week 1 of the next year."""
    if week < WEEKS_PER_NAVIGATION_YEAR:
        return WeekRef(year, week + 1)
    return WeekRef(year + 1, 1)


def current_week(today: date | None = None) -> WeekRef:
    """Week containing today (or the given date)."""
    return week_of(today or date.today())


# =============================================================================
# Projection
# =============================================================================


def compute_week_info(
    year: int,
    week: int,
    assignments: dict[str, str | None],
) -> WeekInfo:
    """Project a week's dates and assigned meal ids. Does not modify ``assignments``."""
    days = [
        DayInfo(
            weekday=day,
            date=date_of(year, week, day),
            meal_id=assignments.get(day_key(year, week, day)) or None,
        )
        for day in DAYS_OF_WEEK
    ]
    return WeekInfo(year=year, week=week, days=days)

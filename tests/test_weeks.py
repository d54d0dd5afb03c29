"""Unit tests for week numbering, keys and navigation."""

from datetime import date, timedelta

import pytest

from mealweek.calendar import (
    DAYS_OF_WEEK,
    DayKey,
    Weekday,
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

# =============================================================================
# Dates
# =============================================================================


class TestWeekOf:
    """Tests for week_of function."""

    def test_mid_year(self):
        assert week_of(date(2024, 11, 20)) == WeekRef(2024, 47)

    def test_early_january_in_previous_year(self):
        """January 1st 2021 falls in week 53 of 2020."""
        assert week_of(date(2021, 1, 1)) == WeekRef(2020, 53)

    def test_late_december_in_next_year(self):
        """December 29th 2025 is the Monday of week 1 of 2026."""
        assert week_of(date(2025, 12, 29)) == WeekRef(2026, 1)


class TestDateOf:
    """Tests for date_of function."""

    def test_first_monday(self):
        assert date_of(2024, 1, Weekday.MONDAY) == date(2024, 1, 1)

    def test_accepts_weekday_name(self):
        assert date_of(2024, 47, "Wednesday") == date(2024, 11, 20)

    def test_week_one_starting_in_previous_year(self):
        assert date_of(2026, 1, Weekday.MONDAY) == date(2025, 12, 29)

    def test_week_53(self):
        assert date_of(2020, 53, Weekday.THURSDAY) == date(2020, 12, 31)

    @pytest.mark.parametrize("week", [0, 54, -1])
    def test_week_out_of_range(self, week):
        with pytest.raises(ValueError):
            date_of(2024, week, Weekday.MONDAY)

    def test_unknown_weekday(self):
        with pytest.raises(ValueError):
            date_of(2024, 1, "Funday")

    @pytest.mark.parametrize("year", [2019, 2020, 2024, 2026])
    def test_week_dates_are_consecutive_and_map_back(self, year):
        """Every week's dates run Monday to Sunday and belong to that week."""
        for week in range(1, 53):
            dates = week_dates(year, week)
            assert dates[0].weekday() == 0
            for earlier, later in zip(dates, dates[1:]):
                assert later - earlier == timedelta(days=1)
            for d in dates:
                assert week_of(d) == WeekRef(year, week)


# =============================================================================
# Keys
# =============================================================================


class TestDayKey:
    """Tests for day-key formatting and parsing."""

    def test_format_is_not_padded(self):
        assert day_key(2024, 5, Weekday.FRIDAY) == "2024-W5-Friday"

    def test_round_trip(self):
        for year in (1, 2024):
            for week in (1, 9, 52):
                for day in DAYS_OF_WEEK:
                    assert parse_day_key(day_key(year, week, day)) == DayKey(year, week, day)

    @pytest.mark.parametrize(
        "key",
        [
            "not-a-key",
            "",
            "2024-W5",
            "2024-W5-friday",
            "2024-5-Friday",
            "2024-W5-Friday-extra",
            "x2024-W5-Friday",
        ],
    )
    def test_invalid_keys(self, key):
        assert parse_day_key(key) is None

    def test_non_string(self):
        assert parse_day_key(None) is None

    def test_week_day_keys(self):
        keys = week_day_keys(2024, 47)
        assert len(keys) == 7
        assert keys[0] == "2024-W47-Monday"
        assert keys[-1] == "2024-W47-Sunday"


class TestWeekKey:
    """Tests for week-key formatting and parsing."""

    def test_round_trip(self):
        assert week_key(2024, 3) == "2024-W3"
        assert parse_week_key("2024-W3") == WeekRef(2024, 3)

    def test_invalid(self):
        assert parse_week_key("2024-W3-Monday") is None
        assert parse_week_key("week 3") is None


# =============================================================================
# Navigation
# =============================================================================


class TestNavigation:
    """Tests for previous/next/current week."""

    def test_previous_within_year(self):
        assert previous_week(2024, 10) == WeekRef(2024, 9)

    def test_previous_wraps_to_week_52(self):
        assert previous_week(2024, 1) == WeekRef(2023, 52)

    def test_next_within_year(self):
        assert next_week(2024, 10) == WeekRef(2024, 11)

    def test_next_wraps_after_week_52(self):
        assert next_week(2020, 52) == WeekRef(2021, 1)

    def test_current_week_for_given_day(self):
        assert current_week(date(2024, 11, 20)) == WeekRef(2024, 47)

    def test_current_week_defaults_to_today(self):
        assert current_week() == week_of(date.today())


# =============================================================================
# Projection
# =============================================================================


class TestComputeWeekInfo:
    """Tests for compute_week_info function."""

    def test_projects_dates_and_meals(self):
        assignments = {
            "2024-W47-Monday": "spaghetti",
            "2024-W47-Tuesday": None,
            "2024-W48-Monday": "curry",
        }
        info = compute_week_info(2024, 47, assignments)

        assert info.year == 2024
        assert info.week == 47
        assert [d.weekday for d in info.days] == list(DAYS_OF_WEEK)
        assert info.days[0].date == date(2024, 11, 18)
        assert info.days[0].meal_id == "spaghetti"
        assert all(d.meal_id is None for d in info.days[1:])

    def test_does_not_modify_assignments(self):
        assignments = {"2024-W47-Monday": "spaghetti"}
        compute_week_info(2024, 47, assignments)
        assert assignments == {"2024-W47-Monday": "spaghetti"}

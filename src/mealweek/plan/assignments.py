"""Helpers over a household's single day-key -> meal id map."""

from collections.abc import Mapping

from mealweek.calendar import parse_day_key, week_day_keys


def week_assignments(plan: Mapping[str, str | None], year: int, week: int) -> dict[str, str | None]:
    """The entries of one week, only for keys present in ``plan``."""
    return {key: plan[key] for key in week_day_keys(year, week) if key in plan}


def set_meal_for_day(
    plan: Mapping[str, str | None],
    key: str,
    meal_id: str | None,
) -> dict[str, str | None]:
    """Copy of ``plan`` with one day assigned (or explicitly emptied with None)."""
    if parse_day_key(key) is None:
        raise ValueError(f"Invalid day key: {key!r}")
    return {**plan, key: meal_id}


def clear_week(plan: Mapping[str, str | None], year: int, week: int) -> dict[str, str | None]:
    """Copy of ``plan`` with the seven days of a week set to None."""
    return {**plan, **{key: None for key in week_day_keys(year, week)}}

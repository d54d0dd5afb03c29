"""Ingredient aggregation over a week's assigned meals."""

from collections.abc import Mapping, Sequence

from mealweek.calendar import week_day_keys
from mealweek.logging_config import get_logger
from mealweek.models import AggregatedIngredient, Meal

logger = get_logger(__name__)


def aggregate_ingredients(
    catalog: Sequence[Meal],
    assignments: Mapping[str, str | None],
    *,
    year: int | None = None,
    week: int | None = None,
) -> list[AggregatedIngredient]:
    """
    Sum ingredient quantities across every assigned meal.

    Ingredients are matched by exact name and listed in first-seen order.
    A meal assigned on several days contributes once per day.

    Args:
        catalog: Meals the assignment ids refer to.
        assignments: Day-key to meal id map.
        year: Restrict to one week (requires ``week``).
        week: Restrict to one week (requires ``year``).

    Returns:
        One AggregatedIngredient per distinct ingredient name.
    """
    if (year is None) != (week is None):
        raise ValueError("year and week must be given together")

    if year is not None and week is not None:
        meal_ids = [assignments.get(key) for key in week_day_keys(year, week)]
    else:
        meal_ids = list(assignments.values())

    meals_by_id = {meal.id: meal for meal in catalog}
    totals: dict[str, float] = {}

    for meal_id in meal_ids:
        if not meal_id:
            continue
        meal = meals_by_id.get(meal_id)
        if meal is None:
            logger.debug(f"Skipping unknown meal id {meal_id}")
            continue
        for ingredient in meal.ingredients:
            totals[ingredient.name] = totals.get(ingredient.name, 0) + ingredient.quantity

    return [AggregatedIngredient(name=name, quantity=qty) for name, qty in totals.items()]

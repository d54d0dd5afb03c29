"""Meal catalog search and filtering."""

from collections.abc import Sequence

from mealweek.models import Meal, MealCategory


def fuzzy_search(query: str, text: str) -> bool:
    """
    Case-insensitive subsequence match.

    Every character of the query must appear in ``text`` in the same order,
    not necessarily next to each other ("spg" matches "Spaghetti"). An
    empty query matches everything.
    """
    if not query:
        return True

    needle = query.strip().lower()
    haystack = text.lower()

    position = 0
    for char in haystack:
        if position == len(needle):
            break
        if char == needle[position]:
            position += 1

    return position == len(needle)


def filter_meals(
    meals: Sequence[Meal],
    query: str = "",
    favorites_only: bool = False,
    category: MealCategory | None = None,
) -> list[Meal]:
    """Meals matching the search query and filters, in catalog order."""
    return [
        meal
        for meal in meals
        if (not favorites_only or meal.favorite)
        and (category is None or meal.category == category)
        and fuzzy_search(query, meal.name)
    ]

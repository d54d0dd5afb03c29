"""Selection cascade used by the meal plan generator.

Each step looks at the same immutable tuple of day candidates and either
picks a meal or passes. ``select_meal`` returns the pick of the first step
that does not pass.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from mealweek.models import CATEGORY_ORDER, Meal, MealCategory

# Scoring weights
UNUSED_THIS_WEEK_BONUS = 1000
NOT_IN_PREVIOUS_WEEK_BONUS = 500
NOT_PREVIOUS_DAY_BONUS = 100
DEFICIT_WEIGHT = 10


@dataclass(frozen=True)
class DayContext:
    """State the scoring of one empty day depends on."""

    deficits: Mapping[MealCategory, int]
    used_this_week: frozenset[str] = field(default_factory=frozenset)
    previous_week_meals: frozenset[str] = field(default_factory=frozenset)
    previous_day_meal_id: str | None = None

    def score(self, meal: Meal) -> int:
        score = 0
        if meal.id not in self.used_this_week:
            score += UNUSED_THIS_WEEK_BONUS
        if meal.id not in self.previous_week_meals:
            score += NOT_IN_PREVIOUS_WEEK_BONUS
        if meal.id != self.previous_day_meal_id:
            score += NOT_PREVIOUS_DAY_BONUS
        score += self.deficits.get(meal.category, 0) * DEFICIT_WEIGHT
        return score

    def largest_deficit_category(self) -> MealCategory:
        """Category furthest behind its target, ties resolved by CATEGORY_ORDER."""
        return max(CATEGORY_ORDER, key=lambda c: self.deficits.get(c, 0))

    def is_previous_day(self, meal: Meal) -> bool:
        return meal.id == self.previous_day_meal_id


SelectionStep = Callable[[tuple[Meal, ...], DayContext], Meal | None]


def best_scored(candidates: tuple[Meal, ...], context: DayContext) -> Meal | None:
    """Highest scored candidate; ties keep candidate order."""
    if not candidates:
        return None
    return max(candidates, key=context.score)


def pick_from_deficit_categories(
    candidates: tuple[Meal, ...], context: DayContext
) -> Meal | None:
    """Best meal from any category still below target, other than yesterday's."""
    return best_scored(
        tuple(
            m
            for m in candidates
            if context.deficits.get(m.category, 0) > 0 and not context.is_previous_day(m)
        ),
        context,
    )


def pick_from_largest_deficit_category(
    candidates: tuple[Meal, ...], context: DayContext
) -> Meal | None:
    """Best meal from the single category with the largest deficit."""
    category = context.largest_deficit_category()
    return best_scored(
        tuple(
            m for m in candidates if m.category == category and not context.is_previous_day(m)
        ),
        context,
    )


def pick_any_but_previous(candidates: tuple[Meal, ...], context: DayContext) -> Meal | None:
    """Best meal of any category, other than yesterday's."""
    return best_scored(
        tuple(m for m in candidates if not context.is_previous_day(m)),
        context,
    )


def pick_any(candidates: tuple[Meal, ...], context: DayContext) -> Meal | None:
    """First candidate, repetition allowed. Guarantees a pick for a non-empty day."""
    return candidates[0] if candidates else None


DEFAULT_STEPS: tuple[SelectionStep, ...] = (
    pick_from_deficit_categories,
    pick_from_largest_deficit_category,
    pick_any_but_previous,
    pick_any,
)


def select_meal(
    candidates: tuple[Meal, ...],
    context: DayContext,
    steps: tuple[SelectionStep, ...] = DEFAULT_STEPS,
) -> Meal | None:
    """Run the selection steps in order and return the first pick."""
    for step in steps:
        meal = step(candidates, context)
        if meal is not None:
            return meal
    return None

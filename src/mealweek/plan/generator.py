"""Weighted, repetition-aware weekly meal plan generation."""

import math
import random
from collections.abc import Mapping, Sequence

from mealweek.calendar import DAYS_OF_WEEK, day_key, previous_week, week_key
from mealweek.calendar.weeks import Weekday
from mealweek.logging_config import get_logger
from mealweek.models import CATEGORY_ORDER, CategoryWeightings, Meal, MealCategory
from mealweek.plan.selection import DEFAULT_STEPS, DayContext, SelectionStep, select_meal

logger = get_logger(__name__)

Assignments = Mapping[str, str | None]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_target_counts(
    weightings: CategoryWeightings,
    days_to_fill: int,
) -> dict[MealCategory, int]:
    """
    Split the empty days between categories proportionally to the weightings.

    Each share is rounded half-up. A shortfall goes to the highest weighted
    category; an overshoot is taken from the lowest weighted categories that
    still have a target, so the counts always add up to ``days_to_fill``.
    """
    effective = weightings.effective()
    total = effective.total

    targets = {
        category: _round_half_up(effective.get(category) / total * days_to_fill)
        for category in CATEGORY_ORDER
    }

    difference = days_to_fill - sum(targets.values())
    if difference > 0:
        targets[effective.highest_category()] += difference
    elif difference < 0:
        trim_order = sorted(
            reversed(CATEGORY_ORDER),
            key=effective.get,
        )
        for category in trim_order:
            while difference < 0 and targets[category] > 0:
                targets[category] -= 1
                difference += 1

    return targets


class MealPlanGenerator:
    """
    Fills the empty days of a week with meals from a catalog, balancing:
    - Category distribution (towards the configured weightings)
    - Repetition within the week and across the previous week
    - Weekend/weekday meal types (advisory, never blocking)

    Randomness is only used for one shuffle of the catalog, which decides
    ties between equally scored meals. Pass a seeded ``random.Random`` for
    reproducible plans.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        steps: tuple[SelectionStep, ...] = DEFAULT_STEPS,
    ):
        self.rng = rng or random.Random()
        self.steps = steps

    def generate(
        self,
        catalog: Sequence[Meal],
        year: int,
        week: int,
        current_assignments: Assignments,
        weightings: CategoryWeightings | None = None,
        previous_week_assignments: Assignments | None = None,
    ) -> dict[str, str | None]:
        """
        Complete a week's assignment map.

        Args:
            catalog: Meals to choose from.
            year: Target year.
            week: Target week.
            current_assignments: Assignments of the target week. Non-empty days are kept.
            weightings: Category weightings (defaults to 1:1:1).
            previous_week_assignments: Assignments of the week before, used to
                discourage repeating last week's meals.

        Returns:
            A new map: the input with every empty day of the week filled.
            With an empty catalog the input is returned unchanged.
        """
        plan: dict[str, str | None] = dict(current_assignments)
        if not catalog:
            logger.info(f"Empty meal catalog, nothing to plan for {week_key(year, week)}")
            return plan

        weightings = weightings or CategoryWeightings()
        previous_week_assignments = previous_week_assignments or {}
        meals_by_id = {meal.id: meal for meal in catalog}
        keys = {day: day_key(year, week, day) for day in DAYS_OF_WEEK}

        prev_year, prev_week = previous_week(year, week)
        previous_week_meals = frozenset(
            meal_id
            for day in DAYS_OF_WEEK
            if (meal_id := previous_week_assignments.get(day_key(prev_year, prev_week, day)))
        )

        category_counts = {category: 0 for category in CATEGORY_ORDER}
        used_this_week: set[str] = set()
        for key in keys.values():
            meal_id = current_assignments.get(key)
            if not meal_id:
                continue
            used_this_week.add(meal_id)
            meal = meals_by_id.get(meal_id)
            if meal is not None:
                category_counts[meal.category] += 1

        days_to_fill = sum(1 for key in keys.values() if not current_assignments.get(key))
        targets = compute_target_counts(weightings, days_to_fill)

        shuffled = list(catalog)
        self.rng.shuffle(shuffled)

        last_meal_id = previous_week_assignments.get(
            day_key(prev_year, prev_week, Weekday.SUNDAY)
        ) or None

        for day in DAYS_OF_WEEK:
            key = keys[day]
            fixed = current_assignments.get(key)
            if fixed:
                last_meal_id = fixed
                continue

            candidates = self._candidates_for_day(shuffled, day)
            context = DayContext(
                deficits={c: targets[c] - category_counts[c] for c in CATEGORY_ORDER},
                used_this_week=frozenset(used_this_week),
                previous_week_meals=previous_week_meals,
                previous_day_meal_id=last_meal_id,
            )
            meal = select_meal(candidates, context, self.steps)
            if meal is None:
                continue

            plan[key] = meal.id
            category_counts[meal.category] += 1
            used_this_week.add(meal.id)
            last_meal_id = meal.id

        logger.info(
            f"Planned {days_to_fill} day(s) for {week_key(year, week)}: "
            + ", ".join(f"{c.value}={category_counts[c]}" for c in CATEGORY_ORDER)
        )
        return plan

    @staticmethod
    def _candidates_for_day(shuffled: list[Meal], day: Weekday) -> tuple[Meal, ...]:
        """Meals whose weekend flag matches the day, or every meal if none match."""
        matching = tuple(m for m in shuffled if m.weekend_meal == day.is_weekend)
        if matching:
            return matching
        return tuple(shuffled)


def generate_plan(
    catalog: Sequence[Meal],
    year: int,
    week: int,
    current_assignments: Assignments,
    weightings: CategoryWeightings | None = None,
    previous_week_assignments: Assignments | None = None,
    *,
    rng: random.Random | None = None,
    seed: int | None = None,
) -> dict[str, str | None]:
    """Functional wrapper around MealPlanGenerator.generate."""
    if rng is None and seed is not None:
        rng = random.Random(seed)
    return MealPlanGenerator(rng=rng).generate(
        catalog,
        year,
        week,
        current_assignments,
        weightings,
        previous_week_assignments,
    )

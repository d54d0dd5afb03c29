"""Unit tests for weekly meal plan generation."""

import random
from collections import Counter

import pytest

from mealweek.calendar import Weekday, day_key, week_day_keys
from mealweek.models import CategoryWeightings, MealCategory
from mealweek.plan import (
    MealPlanGenerator,
    aggregate_ingredients,
    compute_target_counts,
    generate_plan,
)

YEAR, WEEK = 2024, 47
WEEKDAYS = (Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY, Weekday.THURSDAY)


def categories_of(plan, catalog, year=YEAR, week=WEEK):
    by_id = {m.id: m for m in catalog}
    return Counter(by_id[plan[key]].category for key in week_day_keys(year, week))


# =============================================================================
# Target Counts
# =============================================================================


class TestComputeTargetCounts:
    """Tests for compute_target_counts function."""

    def test_equal_weightings_shortfall_goes_to_meat(self):
        """7 / 3 rounds to 2 each; the missing day goes to the first tied category."""
        targets = compute_target_counts(CategoryWeightings(), 7)
        assert targets == {
            MealCategory.MEAT: 3,
            MealCategory.FISH: 2,
            MealCategory.VEGETARIAN: 2,
        }

    def test_shortfall_goes_to_highest_weighting(self):
        weightings = CategoryWeightings(meat=1, fish=1, vegetarian=1.5)
        targets = compute_target_counts(weightings, 7)
        assert sum(targets.values()) == 7
        assert targets[MealCategory.VEGETARIAN] == 3

    def test_overshoot_is_trimmed(self):
        """1.5 + 1.5 rounds up to 4 for three days; the surplus is removed."""
        weightings = CategoryWeightings(meat=1, fish=1, vegetarian=0)
        targets = compute_target_counts(weightings, 3)
        assert sum(targets.values()) == 3
        assert targets[MealCategory.VEGETARIAN] == 0

    def test_all_zero_means_equal(self):
        weightings = CategoryWeightings(meat=0, fish=0, vegetarian=0)
        assert compute_target_counts(weightings, 6) == {
            MealCategory.MEAT: 2,
            MealCategory.FISH: 2,
            MealCategory.VEGETARIAN: 2,
        }

    def test_single_category(self):
        weightings = CategoryWeightings(meat=3, fish=0, vegetarian=0)
        assert compute_target_counts(weightings, 7)[MealCategory.MEAT] == 7

    def test_no_days(self):
        assert sum(compute_target_counts(CategoryWeightings(), 0).values()) == 0


# =============================================================================
# Generation
# =============================================================================


class TestMealPlanGenerator:
    """Tests for MealPlanGenerator.generate."""

    @pytest.mark.parametrize("seed", range(10))
    def test_balance_with_equal_weightings(self, one_per_category, seed):
        plan = generate_plan(one_per_category, YEAR, WEEK, {}, seed=seed)
        counts = categories_of(plan, one_per_category)
        assert sum(counts.values()) == 7
        for category in MealCategory:
            assert 2 <= counts[category] <= 3

    def test_single_category_weighting(self, meal_factory, rng):
        catalog = [
            meal_factory("steak", MealCategory.MEAT),
            meal_factory("burger", MealCategory.MEAT),
            meal_factory("salmon", MealCategory.FISH),
            meal_factory("risotto", MealCategory.VEGETARIAN),
        ]
        weightings = CategoryWeightings(meat=3, fish=0, vegetarian=0)
        plan = MealPlanGenerator(rng=rng).generate(catalog, YEAR, WEEK, {}, weightings)
        assert categories_of(plan, catalog) == Counter({MealCategory.MEAT: 7})

    def test_no_meal_on_consecutive_days_when_avoidable(self, meal_factory, rng):
        catalog = [
            meal_factory("steak", MealCategory.MEAT),
            meal_factory("burger", MealCategory.MEAT),
        ]
        plan = MealPlanGenerator(rng=rng).generate(catalog, YEAR, WEEK, {})
        keys = week_day_keys(YEAR, WEEK)
        for today, tomorrow in zip(keys, keys[1:]):
            assert plan[today] != plan[tomorrow]

    def test_assigned_days_pass_through(self, sample_catalog, rng):
        monday = day_key(YEAR, WEEK, Weekday.MONDAY)
        friday = day_key(YEAR, WEEK, Weekday.FRIDAY)
        current = {monday: "lasagna", friday: "not-in-catalog"}

        plan = MealPlanGenerator(rng=rng).generate(sample_catalog, YEAR, WEEK, current)

        assert plan[monday] == "lasagna"
        assert plan[friday] == "not-in-catalog"
        assert all(plan[key] for key in week_day_keys(YEAR, WEEK))

    def test_other_weeks_untouched(self, sample_catalog, rng):
        other = day_key(YEAR, WEEK + 1, Weekday.MONDAY)
        current = {other: None}
        plan = MealPlanGenerator(rng=rng).generate(sample_catalog, YEAR, WEEK, current)
        assert plan[other] is None
        assert current == {other: None}

    def test_single_meal_fills_every_day(self, meal_factory, rng):
        catalog = [meal_factory("only", MealCategory.FISH)]
        plan = MealPlanGenerator(rng=rng).generate(catalog, YEAR, WEEK, {})
        assert [plan[key] for key in week_day_keys(YEAR, WEEK)] == ["only"] * 7

    def test_empty_catalog_returns_input(self, rng):
        current = {day_key(YEAR, WEEK, Weekday.MONDAY): None}
        plan = MealPlanGenerator(rng=rng).generate([], YEAR, WEEK, current)
        assert plan == current
        assert plan is not current

    def test_weekend_meal_stays_off_weekdays(self, meal_factory):
        catalog = [
            meal_factory("pizza", MealCategory.VEGETARIAN, weekend_meal=True),
            meal_factory("soup", MealCategory.VEGETARIAN),
            meal_factory("stew", MealCategory.MEAT),
        ]
        for seed in range(10):
            plan = generate_plan(catalog, YEAR, WEEK, {}, seed=seed)
            for day in WEEKDAYS:
                assert plan[day_key(YEAR, WEEK, day)] != "pizza"

    def test_weekend_falls_back_to_any_meal(self, meal_factory, rng):
        catalog = [meal_factory("soup", MealCategory.VEGETARIAN)]
        plan = MealPlanGenerator(rng=rng).generate(catalog, YEAR, WEEK, {})
        assert plan[day_key(YEAR, WEEK, Weekday.SATURDAY)] == "soup"

    def test_avoids_previous_week_meals(self, meal_factory, rng):
        catalog = [
            meal_factory("steak", MealCategory.MEAT),
            meal_factory("burger", MealCategory.MEAT),
        ]
        previous = {day_key(YEAR, WEEK - 1, Weekday.SUNDAY): "steak"}
        monday = day_key(YEAR, WEEK, Weekday.MONDAY)

        plan = MealPlanGenerator(rng=rng).generate(
            catalog, YEAR, WEEK, {}, CategoryWeightings(), previous
        )
        assert plan[monday] == "burger"

    def test_previous_week_wraps_across_year(self, meal_factory, rng):
        """Week 1 looks back at week 52 of the previous year."""
        catalog = [
            meal_factory("steak", MealCategory.MEAT),
            meal_factory("burger", MealCategory.MEAT),
        ]
        previous = {day_key(2024, 52, Weekday.SUNDAY): "burger"}
        plan = MealPlanGenerator(rng=rng).generate(
            catalog, 2025, 1, {}, CategoryWeightings(), previous
        )
        assert plan[day_key(2025, 1, Weekday.MONDAY)] == "steak"

    def test_same_seed_same_plan(self, sample_catalog):
        first = generate_plan(sample_catalog, YEAR, WEEK, {}, seed=7)
        second = generate_plan(sample_catalog, YEAR, WEEK, {}, seed=7)
        assert first == second

    def test_injected_rng_is_used(self, sample_catalog):
        first = generate_plan(sample_catalog, YEAR, WEEK, {}, rng=random.Random(3))
        second = generate_plan(sample_catalog, YEAR, WEEK, {}, rng=random.Random(3))
        assert first == second


# =============================================================================
# End-to-end
# =============================================================================


class TestPlanToIngredients:
    """Generating a week and summing its ingredients."""

    def test_missing_category_still_fills_week(self, meal_factory, rng):
        catalog = [
            meal_factory("MeatA", MealCategory.MEAT, [("Rice", 2)]),
            meal_factory("FishB", MealCategory.FISH, [("Rice", 1), ("Lemon", 1)]),
        ]
        monday = day_key(YEAR, WEEK, Weekday.MONDAY)
        weightings = CategoryWeightings(meat=1, fish=1, vegetarian=0)

        plan = MealPlanGenerator(rng=rng).generate(
            catalog, YEAR, WEEK, {monday: "MeatA"}, weightings
        )

        assert plan[monday] == "MeatA"
        assert all(plan[key] in {"MeatA", "FishB"} for key in week_day_keys(YEAR, WEEK))

        totals = {
            i.name: i.quantity
            for i in aggregate_ingredients(catalog, plan, year=YEAR, week=WEEK)
        }
        meat_days = sum(1 for key in week_day_keys(YEAR, WEEK) if plan[key] == "MeatA")
        fish_days = 7 - meat_days
        assert totals["Rice"] == 2 * meat_days + fish_days
        assert totals.get("Lemon", 0) == fish_days

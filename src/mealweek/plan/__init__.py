"""Meal planning: generation, selection and ingredient aggregation."""

from mealweek.plan.assignments import clear_week, set_meal_for_day, week_assignments
from mealweek.plan.generator import MealPlanGenerator, compute_target_counts, generate_plan
from mealweek.plan.ingredients import aggregate_ingredients
from mealweek.plan.selection import DayContext, select_meal

__all__ = [
    "DayContext",
    "MealPlanGenerator",
    "aggregate_ingredients",
    "clear_week",
    "compute_target_counts",
    "generate_plan",
    "select_meal",
    "set_meal_for_day",
    "week_assignments",
]

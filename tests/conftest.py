"""Pytest configuration and shared fixtures."""

import random

import pytest

from mealweek.models import Ingredient, Meal, MealCategory, ShoppingEntry

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise the HTTP application"
    )


# =============================================================================
# Catalog Fixtures
# =============================================================================


def make_meal(
    meal_id: str,
    category: MealCategory = MealCategory.MEAT,
    ingredients: list[tuple[str, float]] | None = None,
    **kwargs,
) -> Meal:
    """Build a meal with (name, quantity) ingredient pairs."""
    return Meal(
        id=meal_id,
        name=kwargs.pop("name", meal_id),
        category=category,
        ingredients=[Ingredient(name=n, quantity=q) for n, q in ingredients or []],
        **kwargs,
    )


@pytest.fixture
def rng():
    """Seeded random source for reproducible plans."""
    return random.Random(42)


@pytest.fixture
def one_per_category():
    """One meal of each category."""
    return [
        make_meal("steak", MealCategory.MEAT, [("Beef", 1)]),
        make_meal("salmon", MealCategory.FISH, [("Salmon", 2)]),
        make_meal("risotto", MealCategory.VEGETARIAN, [("Rice", 1)]),
    ]


@pytest.fixture
def sample_catalog():
    """Mixed household catalog with favorites and a weekend meal."""
    return [
        make_meal(
            "spaghetti",
            MealCategory.MEAT,
            [("Pasta", 500), ("Minced beef", 400), ("Tomato", 3)],
            name="Spaghetti Bolognese",
            favorite=True,
        ),
        make_meal(
            "curry",
            MealCategory.MEAT,
            [("Chicken", 600), ("Rice", 2), ("Coconut milk", 1)],
            name="Chicken Curry",
        ),
        make_meal(
            "fish-tacos",
            MealCategory.FISH,
            [("Cod", 400), ("Tortilla", 8), ("Tomato", 2)],
            name="Fish Tacos",
            weekend_meal=True,
        ),
        make_meal(
            "lasagna",
            MealCategory.VEGETARIAN,
            [("Pasta", 250), ("Spinach", 1)],
            name="Spinach Lasagna",
            favorite=True,
        ),
    ]


# =============================================================================
# Shopping List Fixtures
# =============================================================================


@pytest.fixture
def custom_milk():
    """Unchecked custom entry."""
    return ShoppingEntry(id="custom-1", name="Milk", checked=False, is_custom=True)


@pytest.fixture
def counter_ids():
    """Deterministic id factory for custom entries."""
    counter = iter(range(1, 1000))
    return lambda: f"custom-{next(counter)}"


@pytest.fixture
def meal_factory():
    """Factory for meals with (name, quantity) ingredient pairs."""
    return make_meal

"""Pydantic models for meals, weightings and shopping entries."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MealCategory(str, Enum):
    """Closed set of meal categories."""

    MEAT = "meat"
    FISH = "fish"
    VEGETARIAN = "vegetarian"


# Comparison order for every deterministic tie-break between categories
CATEGORY_ORDER: tuple[MealCategory, ...] = (
    MealCategory.MEAT,
    MealCategory.FISH,
    MealCategory.VEGETARIAN,
)


class BaseDocument(BaseModel):
    """Base class for records exchanged with the persistence layer."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class Ingredient(BaseDocument):
    """Ingredient line of a meal. A zero quantity means no explicit amount."""

    name: str
    quantity: float = Field(default=0, ge=0)


class Meal(BaseDocument):
    """Meal in the household catalog."""

    id: str
    name: str
    category: MealCategory
    link: str | None = None
    about: str | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)
    favorite: bool = False
    weekend_meal: bool = Field(default=False, alias="weekendMeal")


class CategoryWeightings(BaseDocument):
    """Relative share of each category in a generated plan."""

    meat: float = Field(default=1.0, ge=0)
    fish: float = Field(default=1.0, ge=0)
    vegetarian: float = Field(default=1.0, ge=0)

    @property
    def total(self) -> float:
        return self.meat + self.fish + self.vegetarian

    def get(self, category: MealCategory) -> float:
        return getattr(self, MealCategory(category).value)

    def effective(self) -> "CategoryWeightings":
        """Weightings to plan with: 1:1:1 when everything is zero."""
        if self.total > 0:
            return self
        return CategoryWeightings(meat=1, fish=1, vegetarian=1)

    def highest_category(self) -> MealCategory:
        """Category with the largest weighting, ties resolved by CATEGORY_ORDER."""
        return max(CATEGORY_ORDER, key=self.get)

    def with_weighting(self, category: MealCategory, value: float) -> "CategoryWeightings":
        """Copy with one weighting replaced, negative values clamped to zero."""
        return self.model_copy(update={MealCategory(category).value: max(0.0, float(value))})

    @classmethod
    def reset(cls) -> "CategoryWeightings":
        return cls()


class ShoppingEntry(BaseDocument):
    """Item on a week's shopping list."""

    id: str
    name: str
    quantity: float | None = None
    checked: bool = False
    is_custom: bool = Field(default=False, alias="isCustom")


class AggregatedIngredient(BaseDocument):
    """Ingredient total across every meal assigned in a week."""

    name: str
    quantity: float = 0

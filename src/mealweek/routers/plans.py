"""API routes for meal plan generation and ingredient totals."""

import random

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from mealweek.calendar import week_key
from mealweek.config import Settings, get_settings
from mealweek.logging_config import LoggingContext, get_logger
from mealweek.models import AggregatedIngredient, CategoryWeightings, Meal
from mealweek.plan import MealPlanGenerator, aggregate_ingredients, week_assignments

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/plans", tags=["plans"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class GeneratePlanRequest(BaseModel):
    """Request to fill the empty days of a week."""

    year: int
    week: int = Field(ge=1, le=53)
    meals: list[Meal] = Field(default_factory=list, description="Household meal catalog")
    assignments: dict[str, str | None] = Field(
        default_factory=dict, description="Household day-key to meal id map, any number of weeks"
    )
    previous_week_assignments: dict[str, str | None] = Field(
        default_factory=dict, description="Extra entries of the week before, if kept separately"
    )
    weightings: CategoryWeightings | None = Field(
        None, description="Category weightings (server defaults when omitted)"
    )
    seed: int | None = Field(None, description="Seed for a reproducible plan")


class GeneratePlanResponse(BaseModel):
    """Completed assignment map and the entries of the planned week."""

    week_key: str
    assignments: dict[str, str | None]
    week_assignments: dict[str, str | None]


class IngredientsRequest(BaseModel):
    """Request to sum the ingredients of assigned meals."""

    meals: list[Meal] = Field(default_factory=list)
    assignments: dict[str, str | None] = Field(default_factory=dict)
    year: int | None = None
    week: int | None = None


class IngredientsResponse(BaseModel):
    ingredients: list[AggregatedIngredient]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/generate", response_model=GeneratePlanResponse)
async def generate_week_plan(
    request: GeneratePlanRequest,
    settings: Settings = Depends(get_settings),
) -> GeneratePlanResponse:
    """
    Fill every empty day of the requested week.

    Days that already have a meal are kept. Last week's meals are read from
    ``assignments`` as well as ``previous_week_assignments`` (which wins on
    conflicting keys). With an empty catalog the assignments come back
    unchanged.
    """
    key = week_key(request.year, request.week)
    seed = request.seed if request.seed is not None else settings.plan_random_seed
    weightings = request.weightings or settings.default_weightings()

    with LoggingContext(week_key=key):
        logger.info(f"Generating plan from {len(request.meals)} meals")
        generator = MealPlanGenerator(rng=random.Random(seed))
        try:
            plan = generator.generate(
                request.meals,
                request.year,
                request.week,
                request.assignments,
                weightings,
                {**request.assignments, **request.previous_week_assignments},
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return GeneratePlanResponse(
        week_key=key,
        assignments=plan,
        week_assignments=week_assignments(plan, request.year, request.week),
    )


@router.post("/ingredients", response_model=IngredientsResponse)
async def get_ingredients(request: IngredientsRequest) -> IngredientsResponse:
    """Ingredient totals for the assigned meals, optionally restricted to one week."""
    try:
        ingredients = aggregate_ingredients(
            request.meals,
            request.assignments,
            year=request.year,
            week=request.week,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return IngredientsResponse(ingredients=ingredients)

"""API routes for searching the household meal catalog."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from mealweek.catalog import filter_meals
from mealweek.logging_config import get_logger
from mealweek.models import Meal, MealCategory

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/meals", tags=["meals"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class MealSearchRequest(BaseModel):
    """Search over a catalog sent by the caller."""

    meals: list[Meal] = Field(default_factory=list, description="Household meal catalog")
    query: str = Field("", description="Letters to match in order, e.g. 'spg'")
    favorites_only: bool = False
    category: MealCategory | None = None


class MealSearchResponse(BaseModel):
    meals: list[Meal]
    total: int


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/search", response_model=MealSearchResponse)
async def search_meals(request: MealSearchRequest) -> MealSearchResponse:
    """
    Filter the catalog by name, favorite flag and category.

    Matching meals keep their catalog order.
    """
    meals = filter_meals(
        request.meals,
        query=request.query,
        favorites_only=request.favorites_only,
        category=request.category,
    )
    logger.debug(f"Meal search '{request.query}': {len(meals)} of {len(request.meals)}")
    return MealSearchResponse(meals=meals, total=len(meals))

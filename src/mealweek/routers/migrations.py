"""API routes for importing legacy local data."""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from mealweek.config import Settings, get_settings
from mealweek.logging_config import get_logger
from mealweek.migration import has_legacy_data, migrate_snapshot
from mealweek.models import CategoryWeightings, Meal, ShoppingEntry

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/migrations", tags=["migrations"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class LegacySnapshotRequest(BaseModel):
    """Sections of a legacy snapshot, each decoded JSON or a JSON string."""

    model_config = ConfigDict(populate_by_name=True)

    meals: Any = None
    week_plans: Any = Field(None, alias="weekPlans")
    category_weightings: Any = Field(None, alias="categoryWeightings")
    shopping_lists: Any = Field(None, alias="shoppingLists")


class MigrationResponse(BaseModel):
    """Household data rebuilt from the snapshot."""

    has_legacy_data: bool
    meals: list[Meal] = Field(default_factory=list)
    week_plans: dict[str, str | None] = Field(default_factory=dict)
    category_weightings: CategoryWeightings = Field(default_factory=CategoryWeightings)
    shopping_lists: dict[str, list[ShoppingEntry]] = Field(default_factory=dict)
    custom_item_history: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/", response_model=MigrationResponse)
async def import_legacy_snapshot(
    request: LegacySnapshotRequest,
    settings: Settings = Depends(get_settings),
) -> MigrationResponse:
    """
    Convert a legacy snapshot into current household data.

    Broken sections fall back to their defaults; records that cannot be
    converted are listed in ``skipped``. An empty snapshot returns
    ``has_legacy_data: false`` and defaults.
    """
    snapshot = request.model_dump(by_alias=True)
    if not has_legacy_data(snapshot):
        return MigrationResponse(has_legacy_data=False)

    result = migrate_snapshot(snapshot, history_limit=settings.custom_item_history_limit)
    if result.skipped:
        logger.warning(f"Legacy import skipped {len(result.skipped)} record(s)")

    return MigrationResponse(
        has_legacy_data=True,
        meals=result.meals,
        week_plans=result.week_plans,
        category_weightings=result.category_weightings,
        shopping_lists=result.shopping.lists,
        custom_item_history=result.shopping.custom_item_history,
        skipped=result.skipped,
    )

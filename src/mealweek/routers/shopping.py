"""API routes for week-scoped shopping lists."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from mealweek.calendar import week_key
from mealweek.config import Settings, get_settings
from mealweek.logging_config import LoggingContext, get_logger
from mealweek.models import Meal, ShoppingEntry
from mealweek.plan import aggregate_ingredients
from mealweek.shopping import (
    add_custom_entry,
    clear_entries,
    push_history,
    reconcile_shopping_list,
    remove_entry,
    toggle_entry,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ReconcileRequest(BaseModel):
    """Request to bring a week's list in line with its meal plan."""

    year: int
    week: int = Field(ge=1, le=53)
    entries: list[ShoppingEntry] = Field(default_factory=list, description="Current list")
    meals: list[Meal] = Field(default_factory=list)
    assignments: dict[str, str | None] = Field(default_factory=dict)


class CustomItemRequest(BaseModel):
    """Request to add a custom item to a week's list."""

    name: str
    entries: list[ShoppingEntry] = Field(default_factory=list)
    custom_item_history: list[str] = Field(default_factory=list)


class EntryRequest(BaseModel):
    """Request addressing one entry of a week's list."""

    entry_id: str
    entries: list[ShoppingEntry] = Field(default_factory=list)


class ClearRequest(BaseModel):
    entries: list[ShoppingEntry] = Field(default_factory=list)


class ShoppingListResponse(BaseModel):
    """Updated list of a week."""

    entries: list[ShoppingEntry]


class CustomItemResponse(BaseModel):
    """Updated list and custom item history."""

    entries: list[ShoppingEntry]
    custom_item_history: list[str]


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/reconcile", response_model=ShoppingListResponse)
async def reconcile(request: ReconcileRequest) -> ShoppingListResponse:
    """
    Reconcile a week's list against the ingredients of its planned meals.

    Custom items are kept. Checked ingredient entries survive while the
    ingredient (same name and quantity) is still needed; new ingredients
    arrive unchecked. Calling it twice gives the same list.
    """
    key = week_key(request.year, request.week)
    with LoggingContext(week_key=key):
        try:
            aggregated = aggregate_ingredients(
                request.meals,
                request.assignments,
                year=request.year,
                week=request.week,
            )
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        entries = reconcile_shopping_list(request.entries, aggregated)
        logger.info(f"Reconciled shopping list: {len(entries)} entries")

    return ShoppingListResponse(entries=entries)


@router.post("/custom-items", response_model=CustomItemResponse)
async def add_custom_item(
    request: CustomItemRequest,
    settings: Settings = Depends(get_settings),
) -> CustomItemResponse:
    """
    Add a custom item.

    Blank names and names already on the list (case-insensitive) leave the
    list unchanged. New items are remembered in the custom item history.
    """
    result = add_custom_entry(request.entries, request.name)
    history = list(request.custom_item_history)
    if result.created is not None:
        history = push_history(history, result.created.name, settings.custom_item_history_limit)
    return CustomItemResponse(entries=result.entries, custom_item_history=history)


@router.post("/toggle", response_model=ShoppingListResponse)
async def toggle(request: EntryRequest) -> ShoppingListResponse:
    """Flip the checked flag of one entry. Unknown ids leave the list unchanged."""
    return ShoppingListResponse(entries=toggle_entry(request.entries, request.entry_id))


@router.post("/remove", response_model=ShoppingListResponse)
async def remove(request: EntryRequest) -> ShoppingListResponse:
    """Remove a custom entry. Ingredient entries follow the meal plan and stay."""
    return ShoppingListResponse(entries=remove_entry(request.entries, request.entry_id))


@router.post("/clear", response_model=ShoppingListResponse)
async def clear(request: ClearRequest) -> ShoppingListResponse:
    return ShoppingListResponse(entries=clear_entries(request.entries))

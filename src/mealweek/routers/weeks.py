"""API routes for week indexing and navigation."""

from fastapi import APIRouter, HTTPException, Path, status
from pydantic import BaseModel, Field

from mealweek.calendar import (
    WeekInfo,
    WeekRef,
    compute_week_info,
    current_week,
    next_week,
    previous_week,
    week_key,
)
from mealweek.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/weeks", tags=["weeks"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class WeekRefSchema(BaseModel):
    """A week and its persistence key."""

    year: int
    week: int
    week_key: str

    @classmethod
    def from_ref(cls, ref: WeekRef) -> "WeekRefSchema":
        return cls(year=ref.year, week=ref.week, week_key=week_key(ref.year, ref.week))


class WeekInfoRequest(BaseModel):
    """Request to project a week's dates and assigned meals."""

    year: int
    week: int
    assignments: dict[str, str | None] = Field(
        default_factory=dict, description="Day-key to meal id map"
    )


class NavigationResponse(BaseModel):
    """A week with its neighbours."""

    current: WeekRefSchema
    previous: WeekRefSchema
    next: WeekRefSchema


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/current", response_model=WeekRefSchema)
async def get_current_week() -> WeekRefSchema:
    """ISO week containing today."""
    return WeekRefSchema.from_ref(current_week())


@router.post("/info", response_model=WeekInfo)
async def get_week_info(request: WeekInfoRequest) -> WeekInfo:
    """
    Dates of a week's seven days and the meal assigned to each.

    The assignment map is read only; entries of other weeks are ignored.
    """
    try:
        return compute_week_info(request.year, request.week, request.assignments)
    except ValueError as e:
        logger.warning(f"Rejected week info request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{year}/{week}/navigation", response_model=NavigationResponse)
async def get_navigation(
    year: int,
    week: int = Path(ge=1, le=53),
) -> NavigationResponse:
    """Previous and next week, wrapping between week 52 and week 1."""
    return NavigationResponse(
        current=WeekRefSchema.from_ref(WeekRef(year, week)),
        previous=WeekRefSchema.from_ref(previous_week(year, week)),
        next=WeekRefSchema.from_ref(next_week(year, week)),
    )

"""API routers for the mealweek application."""

from mealweek.routers.meals import router as meals_router
from mealweek.routers.migrations import router as migrations_router
from mealweek.routers.plans import router as plans_router
from mealweek.routers.shopping import router as shopping_router
from mealweek.routers.weeks import router as weeks_router

__all__ = [
    "meals_router",
    "migrations_router",
    "plans_router",
    "shopping_router",
    "weeks_router",
]

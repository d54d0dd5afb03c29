"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mealweek.config import get_settings
from mealweek.logging_config import configure_logging, get_logger
from mealweek.routers import (
    meals_router,
    migrations_router,
    plans_router,
    shopping_router,
    weeks_router,
)

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Mealweek API ({settings.environment})")
    yield
    logger.info("Shutting down Mealweek API")


app = FastAPI(
    title="Mealweek API",
    description="Weekly meal planning and shopping lists",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(weeks_router)
app.include_router(plans_router)
app.include_router(shopping_router)
app.include_router(meals_router)
app.include_router(migrations_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "mealweek-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Mealweek API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }

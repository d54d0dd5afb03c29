"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mealweek.models import CategoryWeightings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Meal plan generation
    default_meat_weighting: float = Field(default=1.0, ge=0)
    default_fish_weighting: float = Field(default=1.0, ge=0)
    default_vegetarian_weighting: float = Field(default=1.0, ge=0)
    plan_random_seed: int | None = None  # Pin the shuffle for reproducible plans

    # Shopping list
    custom_item_history_limit: int = Field(default=20, ge=1)

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    def default_weightings(self) -> CategoryWeightings:
        """Build the category weightings used when a caller sends none."""
        return CategoryWeightings(
            meat=self.default_meat_weighting,
            fish=self.default_fish_weighting,
            vegetarian=self.default_vegetarian_weighting,
        )

    @property
    def origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

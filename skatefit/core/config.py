"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from skatefit.core.enums import DeckSizing, UnitSystem

# Resolve .env relative to the project root (2 levels up from this file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Deck sizing algorithm
    deck_sizing: DeckSizing = Field(
        default=DeckSizing.CONTINUOUS,
        validation_alias="SKATEFIT_DECK_SIZING",
    )

    # Units used in explanation text
    display_units: UnitSystem = Field(
        default=UnitSystem.METRIC,
        validation_alias="SKATEFIT_DISPLAY_UNITS",
    )

    # Logging
    log_level: str = Field(default="INFO", validation_alias="SKATEFIT_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Get cached engine settings."""
    return Settings()

"""
Application settings loaded from environment variables.

Uses pydantic-settings for validation and type safety.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache

from config.engine import (
    EngineConfig,
    DEFAULT_ALERT_THRESHOLD,
    DEFAULT_PALLET_CAPACITY,
)
from models.shift import Shift, DEFAULT_SHIFTS


class Settings(BaseSettings):
    """
    Application settings.

    All values loaded from .env file or environment variables.
    Validation happens automatically on startup.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),  # Check current dir, then parent
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra env vars
    )

    # ===================
    # PRODUCTION LINE
    # ===================
    alert_threshold: int = Field(
        default=DEFAULT_ALERT_THRESHOLD,
        ge=0,
        le=100,
        description="Remaining pallets that trigger the low-pallet alert"
    )
    pallet_capacity: int = Field(
        default=DEFAULT_PALLET_CAPACITY,
        ge=1,
        le=10000,
        description="Boxes per full pallet"
    )
    shifts: list[Shift] = Field(
        default_factory=lambda: list(DEFAULT_SHIFTS),
        min_length=1,
        description="Shift order, as a JSON list (e.g. '[\"A\",\"B\",\"C\"]')"
    )

    # ===================
    # APP SETTINGS
    # ===================
    environment: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="Application environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level"
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host"
    )
    api_port: int = Field(
        default=8000,
        ge=1000,
        le=65535,
        description="API port"
    )

    # ===================
    # COMPUTED PROPERTIES
    # ===================
    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def engine_config(self) -> EngineConfig:
        """Engine configuration built from these settings."""
        return EngineConfig(
            alert_threshold=self.alert_threshold,
            pallet_capacity=self.pallet_capacity,
            shifts=tuple(self.shifts),
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload.

    Returns:
        Settings: Application settings

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()


def get_engine_config() -> EngineConfig:
    """EngineConfig for the running application."""
    return get_settings().engine_config


# For convenient imports: from config.settings import settings
settings = get_settings()

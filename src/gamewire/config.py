"""
config.py

PURPOSE: Settings and logging setup.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from (in priority order):
1. CLI flags (highest priority)
2. Environment variables (GAMEWIRE_*)
3. Defaults (lowest priority)

The schema engine itself takes no configuration; its behaviour is fully
determined by keyword arguments. These settings supply the defaults the
CLI passes to it.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings."""

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output (forces DEBUG logging)",
    )
    revalidate: bool = Field(
        default=False,
        description="Re-check fields of values that are already typed instances",
    )
    indent: int | None = Field(
        default=None,
        ge=0,
        description="Indentation for formatted JSON output (None for canonical compact form)",
    )

    model_config = {"env_prefix": "GAMEWIRE_"}

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case, reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}', expected one of {', '.join(LOG_LEVELS)}")
        return level


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    level = logging.DEBUG if settings.debug else settings.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)

"""Configuration settings for Career Match."""

from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SortOrder(str, Enum):
    """How recommendations are ordered for display."""

    SCORE = "score"
    SALARY = "salary"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    output_dir: Path = Field(
        default=Path("./artifacts"),
        description="Directory for generated recommendation artifacts",
    )
    sort_order: SortOrder = Field(
        default=SortOrder.SCORE,
        description="Display order for recommendations: 'score' or 'salary'",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("sort_order", mode="before")
    @classmethod
    def validate_sort_order(cls, v: str | SortOrder) -> SortOrder:
        """Convert a sort order string to the SortOrder enum."""
        if isinstance(v, SortOrder):
            return v
        if isinstance(v, str):
            try:
                return SortOrder(v.lower().strip())
            except ValueError:
                raise ValueError(
                    f"Invalid sort order: {v}. Must be 'score' or 'salary'"
                ) from None
        raise ValueError(f"Invalid sort order type: {type(v)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None

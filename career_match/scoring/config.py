"""Configuration settings for career scoring."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Career scoring configuration settings.

    All settings have sensible defaults and can be overridden via
    environment variables with `SCORING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    profile_path: Path = Field(
        default=Path("profiles/profile.yaml"),
        description="Path to user profile file (YAML/JSON)",
    )
    catalog_path: Path | None = Field(
        default=None,
        description="Path to a career catalog file (YAML/JSON); None uses the built-in catalog",
    )
    skip_invalid_profiles: bool = Field(
        default=True,
        description="Skip profiles with unusable data in batch runs instead of aborting",
    )


# Singleton instance for easy import
_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None

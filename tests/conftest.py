"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest

from career_match.scoring.catalog import CareerCatalog
from career_match.scoring.config import ScoringConfig, reset_scoring_config
from career_match.scoring.models import CareerDefinition
from career_match.utils.logging import reset_logging


@pytest.fixture(autouse=True)
def _isolate_singletons():
    """Start every test with fresh config and logging state."""
    reset_scoring_config()
    reset_logging()
    yield
    reset_scoring_config()
    reset_logging()


@pytest.fixture
def reference_date() -> date:
    """Fixed 'today' for anything that depends on the current date."""
    return date(2024, 6, 1)


@pytest.fixture
def data_scientist() -> CareerDefinition:
    """The Data Scientist career from the built-in catalog."""
    return CareerDefinition(
        title="Data Scientist",
        description="Extract insights from large datasets.",
        required_skills=[
            {"name": "Python", "importance": 0.9},
            {"name": "Machine Learning", "importance": 0.9},
            {"name": "SQL", "importance": 0.8},
            {"name": "Statistics", "importance": 0.8},
            {"name": "Data Visualization", "importance": 0.7},
        ],
        required_education=[
            "Computer Science",
            "Statistics",
            "Mathematics",
            "Data Science",
        ],
        related_interests=["Technology", "Mathematics", "Research", "Analytics"],
        average_salary="$105,000 - $150,000",
        demand_level="High",
        industry="Technology",
    )


@pytest.fixture
def scoring_config() -> ScoringConfig:
    """Scoring config that ignores any local .env file."""
    return ScoringConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def default_catalog() -> CareerCatalog:
    return CareerCatalog.default()

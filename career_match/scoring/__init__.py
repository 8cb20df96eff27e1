"""Career matching and recommendation.

This module turns a user's self-reported profile into weighted features and
scores a catalog of careers against them.

Public API:
    - normalize: Raw profile -> NormalizedFeatures
    - rank_careers: Catalog + features -> top five ScoredCareer
    - CareerMatchingService: Scoring, ranking and batch recommendation
    - CareerCatalog: Immutable career catalog
    - ProfileService: Load and validate profiles
    - ScoringConfig: Configuration settings
"""

from career_match.scoring.catalog import CareerCatalog
from career_match.scoring.config import (
    ScoringConfig,
    get_scoring_config,
    reset_scoring_config,
)
from career_match.scoring.models import (
    CareerDefinition,
    CareerProfile,
    DemandLevel,
    EducationRecord,
    ExperienceRecord,
    InterestRecord,
    MatchBreakdown,
    NormalizedFeatures,
    ProfileDataError,
    RequiredSkill,
    ScoredCareer,
    SkillRecord,
)
from career_match.scoring.normalizer import normalize
from career_match.scoring.profile import ProfileService
from career_match.scoring.service import (
    CareerMatchingService,
    rank_careers,
    sort_by_salary,
)

__all__ = [
    "normalize",
    "rank_careers",
    "sort_by_salary",
    "CareerMatchingService",
    "CareerCatalog",
    "ProfileService",
    "CareerProfile",
    "SkillRecord",
    "EducationRecord",
    "ExperienceRecord",
    "InterestRecord",
    "CareerDefinition",
    "RequiredSkill",
    "DemandLevel",
    "NormalizedFeatures",
    "MatchBreakdown",
    "ScoredCareer",
    "ProfileDataError",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]

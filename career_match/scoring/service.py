"""Career matching service implementation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from datetime import date, datetime

from career_match.scoring.catalog import CareerCatalog
from career_match.scoring.config import ScoringConfig, get_scoring_config
from career_match.scoring.matchers import contains_any, find_by_name, mutually_contains
from career_match.scoring.models import (
    BatchRecommendations,
    CareerDefinition,
    CareerProfile,
    MatchBreakdown,
    NormalizedFeatures,
    ProfileDataError,
    ProfileRecommendations,
    ScoredCareer,
)
from career_match.scoring.normalizer import normalize
from career_match.utils.logging import get_logger

logger = get_logger("scoring.service")

# Category weights; together they cover the whole 0-100 range.
SKILL_WEIGHT = 0.4
EDUCATION_WEIGHT = 0.25
EXPERIENCE_WEIGHT = 0.2
INTEREST_WEIGHT = 0.15

MAX_RECOMMENDATIONS = 5

# Partial credit for entries that do not line up with the career.
FIELD_MISMATCH_CREDIT = 0.5
INDUSTRY_MISMATCH_CREDIT = 0.5
INTEREST_MISMATCH_CREDIT = 0.3

# Profiles without experience are scored as entry level, not zero.
NO_EXPERIENCE_CREDIT = 50

# Experience credit stops growing after this many years.
FULL_CREDIT_YEARS = 5

MAX_LEVEL = 5
MIN_SCORE = 0
MAX_SCORE = 100


class CareerMatchingService:
    """Service for scoring and ranking careers against normalized features."""

    def __init__(
        self,
        catalog: CareerCatalog | Iterable[CareerDefinition] | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        self._config = config

        if catalog is None:
            if self.config.catalog_path is not None:
                catalog = CareerCatalog.load(self.config.catalog_path)
            else:
                catalog = CareerCatalog.default()
        elif not isinstance(catalog, CareerCatalog):
            catalog = CareerCatalog(catalog)
        self.catalog: CareerCatalog = catalog

    @property
    def config(self) -> ScoringConfig:
        """Scoring config, read from the environment on first use if not given."""
        if self._config is None:
            self._config = get_scoring_config()
        return self._config

    def score_skills(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> float:
        """Weighted skill sub-score, averaged over the career's required skills."""
        required = career.required_skills
        if not required:
            return 0.0

        total = 0.0
        for requirement in required:
            user_skill = find_by_name(requirement.name, features.skills)
            if user_skill is not None:
                total += user_skill.weight * requirement.importance

        return (total / len(required)) * 100 * SKILL_WEIGHT

    def score_education(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> float:
        """Weighted education sub-score, averaged over the user's entries."""
        education = features.education
        if not education:
            return 0.0

        total = 0.0
        for entry in education:
            if contains_any(entry.field, career.required_education):
                field_match = 1.0
            else:
                field_match = FIELD_MISMATCH_CREDIT
            total += field_match * (entry.level / MAX_LEVEL) * entry.weight

        return (total / len(education)) * 100 * EDUCATION_WEIGHT

    def score_experience(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> float:
        """Weighted experience sub-score, averaged over the user's entries."""
        experience = features.experience
        if not experience:
            return EXPERIENCE_WEIGHT * NO_EXPERIENCE_CREDIT

        total = 0.0
        for entry in experience:
            if mutually_contains(career.industry, entry.industry):
                industry_match = 1.0
            else:
                industry_match = INDUSTRY_MISMATCH_CREDIT
            years_score = min(entry.years / FULL_CREDIT_YEARS, 1.0)
            total += industry_match * years_score * entry.weight

        return (total / len(experience)) * 100 * EXPERIENCE_WEIGHT

    def score_interests(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> float:
        """Weighted interest sub-score, averaged over the user's interests."""
        interests = features.interests
        if not interests:
            return 0.0

        total = 0.0
        for interest in interests:
            if contains_any(interest.name, career.related_interests):
                interest_match = 1.0
            else:
                interest_match = INTEREST_MISMATCH_CREDIT
            total += interest_match * (interest.level / MAX_LEVEL) * interest.weight

        return (total / len(interests)) * 100 * INTEREST_WEIGHT

    def calculate_breakdown(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> MatchBreakdown:
        """Compute every sub-score and the maximum they could add up to."""
        applicable_weights = [
            SKILL_WEIGHT,
            EDUCATION_WEIGHT,
            EXPERIENCE_WEIGHT,
            INTEREST_WEIGHT,
        ]
        return MatchBreakdown(
            skills=self.score_skills(career, features),
            education=self.score_education(career, features),
            experience=self.score_experience(career, features),
            interests=self.score_interests(career, features),
            max_possible_score=100 * math.fsum(applicable_weights),
        )

    def calculate_match(
        self, career: CareerDefinition, features: NormalizedFeatures
    ) -> ScoredCareer:
        """Score one career as a percentage of its maximum possible score."""
        breakdown = self.calculate_breakdown(career, features)
        adjusted = breakdown.total * 100 / breakdown.max_possible_score
        match_score = min(MAX_SCORE, max(MIN_SCORE, _round_half_up(adjusted)))
        return ScoredCareer(career=career, match_score=match_score, breakdown=breakdown)

    def rank_careers(self, features: NormalizedFeatures) -> list[ScoredCareer]:
        """Return the best matching careers, highest score first.

        Careers with equal scores keep their catalog order.
        """
        scored = [self.calculate_match(career, features) for career in self.catalog]
        ranked = sorted(scored, key=lambda s: s.match_score, reverse=True)
        top = ranked[:MAX_RECOMMENDATIONS]
        logger.debug(
            f"Ranked {len(scored)} careers; top: "
            + ", ".join(f"{s.title}={s.match_score}" for s in top)
        )
        return top

    def recommend(
        self, profile: CareerProfile, now: date | datetime
    ) -> list[ScoredCareer]:
        """Normalize a raw profile and rank the catalog against it."""
        return self.rank_careers(normalize(profile, now))

    def recommend_batch(
        self, profiles: Iterable[CareerProfile], now: date | datetime
    ) -> BatchRecommendations:
        """Rank careers for several profiles.

        A profile whose data cannot be normalized is skipped (and logged) when
        ``skip_invalid_profiles`` is enabled; otherwise the error propagates.
        """
        batch = BatchRecommendations()
        for index, profile in enumerate(profiles):
            label = profile.name or f"profile #{index}"
            try:
                careers = self.recommend(profile, now)
            except ProfileDataError as e:
                if not self.config.skip_invalid_profiles:
                    raise
                logger.warning(f"Skipping {label}: {e}")
                batch.skipped.append(f"{label}: {e}")
                continue
            batch.results.append(
                ProfileRecommendations(profile_name=profile.name, careers=careers)
            )

        logger.info(
            f"Batch complete: processed={batch.processed} "
            f"ranked={len(batch.results)} skipped={len(batch.skipped)}"
        )
        return batch

    def format_result(self, careers: list[ScoredCareer]) -> str:
        """Format ranked careers for CLI output."""
        if not careers:
            return "No careers to recommend."

        lines: list[str] = []
        for position, scored in enumerate(careers, start=1):
            career = scored.career
            lines.append(f"{position}. {career.title} - {scored.match_score}/100")
            lines.append(
                f"   Industry: {career.industry} | Demand: {career.demand_level.value}"
                f" | Salary: {career.average_salary or 'n/a'}"
            )
            lines.append(
                "   Scores: "
                f"skills={scored.breakdown.skills:.1f} "
                f"education={scored.breakdown.education:.1f} "
                f"experience={scored.breakdown.experience:.1f} "
                f"interests={scored.breakdown.interests:.1f}"
            )
        return "\n".join(lines)


def rank_careers(
    catalog: CareerCatalog | Iterable[CareerDefinition], features: NormalizedFeatures
) -> list[ScoredCareer]:
    """Rank ``catalog`` against ``features`` (at most five careers)."""
    if not isinstance(catalog, CareerCatalog):
        catalog = CareerCatalog(catalog)
    return CareerMatchingService(catalog=catalog).rank_careers(features)


def sort_by_salary(careers: Iterable[ScoredCareer]) -> list[ScoredCareer]:
    """Order careers by average salary, highest first; unparseable salaries last."""
    return sorted(
        careers,
        key=lambda s: (s.average_salary is None, -(s.average_salary or 0.0)),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

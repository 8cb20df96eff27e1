"""Profile loading and validation utilities."""

from __future__ import annotations

from pathlib import Path

from career_match.scoring.config import ScoringConfig, get_scoring_config
from career_match.scoring.loaders import load_structured_file
from career_match.scoring.matchers import normalize_term
from career_match.scoring.models import CareerProfile


class ProfileService:
    """Service for loading and validating career profiles."""

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or get_scoring_config()

    def load_profile(self, path: Path | str | None = None) -> CareerProfile:
        """Load and validate a profile from YAML or JSON.

        Raises:
            FileNotFoundError: If the profile does not exist.
            ValueError: If the file cannot be parsed or is not a mapping.
            pydantic.ValidationError: If the profile breaks the schema,
                e.g. a proficiency or interest level outside 1-5.
        """
        profile_path = Path(path) if path is not None else self.config.profile_path
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile_path}")

        data = load_structured_file(profile_path)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be a mapping/dict: {profile_path}")

        return CareerProfile.model_validate(data)

    def validate_profile(self, profile: CareerProfile) -> list[str]:
        """Return warnings for incomplete profiles."""
        warnings: list[str] = []

        if not profile.skills:
            warnings.append("Skills list is empty")
        if not profile.education:
            warnings.append("Education list is empty")
        if not profile.interests:
            warnings.append("Interests list is empty")
        if not profile.experience:
            warnings.append("No experience listed; scored as entry level")

        seen: set[str] = set()
        for skill in profile.skills:
            key = normalize_term(skill.skill_name)
            if key in seen:
                warnings.append(f"Duplicate skill: {skill.skill_name}")
            seen.add(key)

        return warnings

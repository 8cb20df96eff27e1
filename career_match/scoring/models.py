"""Data models for the career matching system."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

_SALARY_AMOUNT_PATTERN = re.compile(r"\$\d+,\d+")


class ProfileDataError(ValueError):
    """Raised when a profile record cannot be turned into scoring features."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class SkillRecord(BaseModel):
    """Self-reported skill."""

    skill_name: str = Field(..., min_length=1, description="Skill name")
    proficiency_level: int = Field(..., ge=1, le=5, description="Proficiency 1-5")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> SkillRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class EducationRecord(BaseModel):
    """Education entry for a user's profile."""

    institution: str = Field(..., description="Institution name")
    degree: str = Field(..., min_length=1, description="Degree label")
    field_of_study: str = Field(..., min_length=1, description="Field of study")
    start_year: int | None = Field(default=None, description="Start year")
    end_year: int | None = Field(default=None, description="End year")
    current: bool = Field(default=False, description="Currently enrolled")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> EducationRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class ExperienceRecord(BaseModel):
    """Work experience entry for a user's profile.

    Dates are kept as the text the user entered (``YYYY-MM-DD``, ``YYYY-MM``
    or an ISO timestamp); they are parsed during normalization.
    """

    company: str = Field(..., min_length=1, description="Company name")
    position: str = Field(..., min_length=1, description="Position title")
    start_date: str = Field(..., min_length=1, description="Start date")
    end_date: str | None = Field(default=None, description="End date (if any)")
    current: bool = Field(default=False, description="Currently in this role")
    description: str | None = Field(default=None, description="Role description")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ExperienceRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class InterestRecord(BaseModel):
    """Self-reported interest."""

    interest_name: str = Field(..., min_length=1, description="Interest name")
    interest_level: int = Field(..., ge=1, le=5, description="Interest level 1-5")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> InterestRecord:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class CareerProfile(BaseModel):
    """Everything a user reported about themselves."""

    name: str | None = Field(default=None, description="Display name")
    skills: list[SkillRecord] = Field(default_factory=list)
    education: list[EducationRecord] = Field(default_factory=list)
    experience: list[ExperienceRecord] = Field(default_factory=list)
    interests: list[InterestRecord] = Field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> CareerProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class DemandLevel(str, Enum):
    """Labour market demand for a career."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RequiredSkill(BaseModel):
    """Skill a career asks for, with how much it matters."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    importance: float = Field(..., ge=0.0, le=1.0)


class CareerDefinition(BaseModel):
    """Static catalog entry describing one career."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = Field(default="")
    required_skills: tuple[RequiredSkill, ...] = Field(default_factory=tuple)
    required_education: tuple[str, ...] = Field(
        default_factory=tuple, description="Qualifying fields of study"
    )
    related_interests: tuple[str, ...] = Field(default_factory=tuple)
    average_salary: str = Field(
        default="", description='Salary range text, "$NNN,NNN - $NNN,NNN"'
    )
    demand_level: DemandLevel = Field(default=DemandLevel.MEDIUM)
    industry: str = Field(default="")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> CareerDefinition:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


@dataclass(frozen=True)
class NormalizedSkill:
    name: str
    proficiency: int
    weight: float


@dataclass(frozen=True)
class NormalizedEducation:
    degree: str
    field: str
    level: float
    weight: float


@dataclass(frozen=True)
class NormalizedExperience:
    title: str
    industry: str
    years: float
    weight: float


@dataclass(frozen=True)
class NormalizedInterest:
    name: str
    level: int
    weight: float


@dataclass(frozen=True)
class NormalizedFeatures:
    """Weighted feature lists derived from a CareerProfile."""

    skills: tuple[NormalizedSkill, ...] = ()
    education: tuple[NormalizedEducation, ...] = ()
    experience: tuple[NormalizedExperience, ...] = ()
    interests: tuple[NormalizedInterest, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass
class MatchBreakdown:
    """Weighted sub-scores that add up to a career's raw match score."""

    skills: float = 0.0
    education: float = 0.0
    experience: float = 0.0
    interests: float = 0.0
    max_possible_score: float = 100.0

    @property
    def total(self) -> float:
        return self.skills + self.education + self.experience + self.interests

    def __post_init__(self) -> None:
        if self.max_possible_score <= 0:
            raise ValueError(
                f"max_possible_score must be positive (got {self.max_possible_score})"
            )


@dataclass
class ScoredCareer:
    """A catalog career together with how well it matches a profile."""

    career: CareerDefinition
    match_score: int
    breakdown: MatchBreakdown = field(default_factory=MatchBreakdown)

    def __post_init__(self) -> None:
        if not (0 <= self.match_score <= 100):
            raise ValueError(
                f"match_score must be between 0 and 100 (got {self.match_score})"
            )

    @property
    def title(self) -> str:
        return self.career.title

    @property
    def industry(self) -> str:
        return self.career.industry

    @property
    def average_salary(self) -> float | None:
        """Mean of every dollar amount in the career's salary text."""
        return parse_average_salary(self.career.average_salary)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        payload = self.career.to_dict()
        payload["match_score"] = self.match_score
        payload["breakdown"] = asdict(self.breakdown)
        return payload


@dataclass
class ProfileRecommendations:
    """Ranked careers for one profile."""

    profile_name: str | None
    careers: list[ScoredCareer] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "profile_name": self.profile_name,
            "careers": [career.to_dict() for career in self.careers],
        }


@dataclass
class BatchRecommendations:
    """Outcome of ranking careers for several profiles."""

    results: list[ProfileRecommendations] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results) + len(self.skipped)


def parse_average_salary(text: str) -> float | None:
    """Average the ``$NNN,NNN`` amounts found in a salary range string."""
    amounts = [
        int(match.replace("$", "").replace(",", ""))
        for match in _SALARY_AMOUNT_PATTERN.findall(text or "")
    ]
    if not amounts:
        return None
    return sum(amounts) / len(amounts)

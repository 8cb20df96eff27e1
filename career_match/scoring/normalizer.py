"""Turn raw profile records into weighted scoring features."""

from __future__ import annotations

from datetime import date, datetime

from career_match.scoring.models import (
    CareerProfile,
    EducationRecord,
    ExperienceRecord,
    InterestRecord,
    NormalizedEducation,
    NormalizedExperience,
    NormalizedFeatures,
    NormalizedInterest,
    NormalizedSkill,
    ProfileDataError,
    SkillRecord,
)

MIN_LEVEL = 1
MAX_LEVEL = 5

CURRENT_WEIGHT = 1.2
PAST_WEIGHT = 1.0

# Fixed 365-day year; leap days are ignored.
DAYS_PER_YEAR = 365

DEFAULT_INDUSTRY = "business"

# Checked in order; the first keyword found in the text decides the industry.
INDUSTRY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("technology", "technology"),
    ("healthcare", "healthcare"),
    ("finance", "finance"),
    ("education", "education"),
    ("manufacturing", "manufacturing"),
    ("retail", "retail"),
    ("government", "government"),
    ("non-profit", "non-profit"),
    ("media", "media"),
    ("entertainment", "entertainment"),
    ("construction", "construction"),
    ("transportation", "transportation"),
    ("agriculture", "agriculture"),
    ("energy", "energy"),
    ("legal", "legal"),
    ("hospitality", "hospitality"),
    ("tourism", "tourism"),
    ("telecommunications", "telecommunications"),
    ("pharmaceutical", "pharmaceutical"),
    ("consulting", "consulting"),
)

# Checked in order against the lowercased degree text.
_DEGREE_LEVELS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("doctorate", "phd"), 5),
    (("master",), 4),
    (("bachelor",), 3),
    (("associate",), 2),
    (("certificate", "diploma"), 1.5),
)
_DEFAULT_DEGREE_LEVEL = 1


def normalize_weight(value: float, low: float = MIN_LEVEL, high: float = MAX_LEVEL) -> float:
    """Scale ``value`` from ``[low, high]`` onto ``[0, 1]``."""
    return (value - low) / (high - low)


def recency_weight(current: bool) -> float:
    return CURRENT_WEIGHT if current else PAST_WEIGHT


def degree_level(degree: str) -> float:
    """Map a degree label to an ordinal level (Doctorate=5 ... other=1)."""
    lowered = degree.lower()
    for keywords, level in _DEGREE_LEVELS:
        if any(keyword in lowered for keyword in keywords):
            return level
    return _DEFAULT_DEGREE_LEVEL


def infer_industry(company: str, description: str | None = None) -> str:
    """Guess an industry from the company name and role description."""
    text = f"{company} {description or ''}".lower()
    for keyword, label in INDUSTRY_KEYWORDS:
        if keyword in text:
            return label
    return DEFAULT_INDUSTRY


def parse_profile_date(value: str) -> date:
    """Parse a profile date.

    Accepts ``YYYY-MM-DD``, ISO timestamps and the ``YYYY-MM`` values
    produced by month pickers (read as the first of the month).
    """
    raw = value.strip()
    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    return datetime.strptime(raw, "%Y-%m").date()


def years_between(start: date, end: date) -> float:
    return (end - start).days / DAYS_PER_YEAR


def normalize_skill(skill: SkillRecord) -> NormalizedSkill:
    return NormalizedSkill(
        name=skill.skill_name,
        proficiency=skill.proficiency_level,
        weight=normalize_weight(skill.proficiency_level),
    )


def normalize_education(education: EducationRecord) -> NormalizedEducation:
    return NormalizedEducation(
        degree=education.degree,
        field=education.field_of_study,
        level=degree_level(education.degree),
        weight=recency_weight(education.current),
    )


def normalize_experience(
    experience: ExperienceRecord, now: date | datetime
) -> NormalizedExperience:
    """Normalize one experience entry.

    The end of the role is its end date, or ``now`` when none was given.
    Raises ValueError if either date cannot be parsed or the role ends before
    it starts.
    """
    today = now.date() if isinstance(now, datetime) else now
    start = parse_profile_date(experience.start_date)
    end = parse_profile_date(experience.end_date) if experience.end_date else today
    if end < start:
        raise ValueError(
            f"role ends ({end.isoformat()}) before it starts ({start.isoformat()})"
        )

    return NormalizedExperience(
        title=experience.position,
        industry=infer_industry(experience.company, experience.description),
        years=years_between(start, end),
        weight=recency_weight(experience.current),
    )


def normalize_interest(interest: InterestRecord) -> NormalizedInterest:
    return NormalizedInterest(
        name=interest.interest_name,
        level=interest.interest_level,
        weight=normalize_weight(interest.interest_level),
    )


def normalize(profile: CareerProfile, now: date | datetime) -> NormalizedFeatures:
    """Convert a raw profile into weighted features for the career matcher.

    Levels are trusted as given; CareerProfile validates them on load.

    Args:
        profile: The raw profile records.
        now: Reference date for roles without an end date.

    Returns:
        The normalized feature lists.

    Raises:
        ProfileDataError: If an experience entry has an unparseable date or
            ends before it starts.
    """
    experience: list[NormalizedExperience] = []
    for index, entry in enumerate(profile.experience):
        try:
            experience.append(normalize_experience(entry, now))
        except ValueError as e:
            raise ProfileDataError(
                f"Invalid date in experience entry {index} "
                f"({entry.position} at {entry.company}): {e}",
                index=index,
            ) from e

    return NormalizedFeatures(
        skills=tuple(normalize_skill(s) for s in profile.skills),
        education=tuple(normalize_education(e) for e in profile.education),
        experience=tuple(experience),
        interests=tuple(normalize_interest(i) for i in profile.interests),
    )

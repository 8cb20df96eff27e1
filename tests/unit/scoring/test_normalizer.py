"""Unit tests for profile normalization."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from career_match.scoring.models import (
    CareerProfile,
    EducationRecord,
    ExperienceRecord,
    InterestRecord,
    ProfileDataError,
    SkillRecord,
)
from career_match.scoring.normalizer import (
    DEFAULT_INDUSTRY,
    INDUSTRY_KEYWORDS,
    degree_level,
    infer_industry,
    normalize,
    normalize_weight,
    parse_profile_date,
)


def _experience(**overrides) -> ExperienceRecord:
    data = {
        "company": "Quiet Corp",
        "position": "Engineer",
        "start_date": "2022-01-01",
        "end_date": "2023-01-01",
    }
    data.update(overrides)
    return ExperienceRecord(**data)


class TestNormalizeWeight:
    """Test the 1-5 to 0-1 scaling."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, 0.0), (2, 0.25), (3, 0.5), (4, 0.75), (5, 1.0)],
    )
    def test_scales_levels_onto_unit_interval(self, value, expected):
        assert normalize_weight(value) == expected


class TestDegreeLevel:
    """Test degree label to ordinal level mapping."""

    @pytest.mark.parametrize(
        ("degree", "expected"),
        [
            ("Doctorate", 5),
            ("PhD in Physics", 5),
            ("Master of Science", 4),
            ("MASTER'S", 4),
            ("Bachelor of Arts", 3),
            ("Associate Degree", 2),
            ("Graduate Certificate", 1.5),
            ("Diploma", 1.5),
            ("High School", 1),
            ("", 1),
        ],
    )
    def test_maps_degree_text_to_level(self, degree, expected):
        assert degree_level(degree) == expected

    def test_first_rule_wins_when_several_keywords_match(self):
        """A higher degree keyword takes precedence over a lower one."""
        assert degree_level("Master's Certificate") == 4
        assert degree_level("PhD after a Bachelor") == 5

    def test_same_text_always_gives_same_level(self):
        assert degree_level("Bachelor of Science") == degree_level("Bachelor of Science")


class TestInferIndustry:
    """Test keyword-based industry inference."""

    @pytest.mark.parametrize(("keyword", "label"), INDUSTRY_KEYWORDS)
    def test_each_keyword_is_recognized(self, keyword, label):
        assert infer_industry(f"Acme {keyword} group") == label

    def test_match_is_case_insensitive_and_uses_description(self):
        assert infer_industry("Acme", "A leading HEALTHCARE provider") == "healthcare"

    def test_earlier_keyword_wins(self):
        """Keywords are checked in list order, not by position in the text."""
        assert infer_industry("Finance Co", "healthcare technology") == "technology"
        assert infer_industry("Global Media", "non-profit newsroom") == "non-profit"

    def test_keywords_match_as_substrings(self):
        assert infer_industry("Synergy Partners") == "energy"

    def test_falls_back_to_business(self):
        assert infer_industry("Quiet Corp", None) == DEFAULT_INDUSTRY == "business"


class TestParseProfileDate:
    """Test date parsing for experience entries."""

    def test_parses_full_date(self):
        assert parse_profile_date("2020-05-17") == date(2020, 5, 17)

    def test_parses_month_as_first_of_month(self):
        assert parse_profile_date("2020-05") == date(2020, 5, 1)

    def test_parses_timestamp(self):
        assert parse_profile_date("2020-05-17T10:30:00") == date(2020, 5, 17)

    def test_invalid_date_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_profile_date("last spring")


class TestNormalize:
    """Test full profile normalization."""

    def test_empty_profile_gives_empty_features(self, reference_date):
        features = normalize(CareerProfile(), reference_date)

        assert features.skills == ()
        assert features.education == ()
        assert features.experience == ()
        assert features.interests == ()

    def test_skills_keep_proficiency_and_get_weight(self, reference_date):
        profile = CareerProfile(
            skills=[
                SkillRecord(skill_name="Python", proficiency_level=5),
                SkillRecord(skill_name="SQL", proficiency_level=3),
            ]
        )

        features = normalize(profile, reference_date)

        assert [(s.name, s.proficiency, s.weight) for s in features.skills] == [
            ("Python", 5, 1.0),
            ("SQL", 3, 0.5),
        ]

    def test_interests_keep_level_and_get_weight(self, reference_date):
        profile = CareerProfile(
            interests=[InterestRecord(interest_name="Technology", interest_level=4)]
        )

        features = normalize(profile, reference_date)

        interest = features.interests[0]
        assert interest.name == "Technology"
        assert interest.level == 4
        assert interest.weight == 0.75

    def test_education_level_field_and_recency(self, reference_date):
        profile = CareerProfile(
            education=[
                EducationRecord(
                    institution="State University",
                    degree="Bachelor's",
                    field_of_study="Computer Science",
                ),
                EducationRecord(
                    institution="Tech Institute",
                    degree="PhD",
                    field_of_study="machine learning",
                    current=True,
                ),
            ]
        )

        features = normalize(profile, reference_date)

        finished, enrolled = features.education
        assert (finished.level, finished.field, finished.weight) == (
            3,
            "Computer Science",
            1.0,
        )
        assert (enrolled.level, enrolled.field, enrolled.weight) == (
            5,
            "machine learning",
            1.2,
        )

    def test_experience_years_use_365_day_years(self, reference_date):
        profile = CareerProfile(
            experience=[_experience(start_date="2020-01-01", end_date="2021-01-01")]
        )

        features = normalize(profile, reference_date)

        # 2020 is a leap year: 366 days, divided by a fixed 365.
        assert features.experience[0].years == 366 / 365

    def test_experience_title_industry_and_weight(self, reference_date):
        profile = CareerProfile(
            experience=[
                _experience(
                    company="Northwind",
                    position="Analyst",
                    description="Retail pricing",
                )
            ]
        )

        features = normalize(profile, reference_date)

        entry = features.experience[0]
        assert entry.title == "Analyst"
        assert entry.industry == "retail"
        assert entry.weight == 1.0
        assert entry.years == 1.0

    def test_current_role_without_end_date_runs_until_now(self):
        profile = CareerProfile(
            experience=[
                _experience(start_date="2023-06-01", end_date=None, current=True)
            ]
        )

        features = normalize(profile, date(2024, 6, 1))

        entry = features.experience[0]
        assert entry.years == 366 / 365
        assert entry.weight == 1.2

    def test_role_with_end_date_uses_it_even_when_current(self):
        profile = CareerProfile(
            experience=[
                _experience(
                    start_date="2022-01-01", end_date="2023-01-01", current=True
                )
            ]
        )

        features = normalize(profile, date(2030, 1, 1))

        assert features.experience[0].years == 1.0
        assert features.experience[0].weight == 1.2

    def test_past_role_without_end_date_runs_until_now(self):
        profile = CareerProfile(
            experience=[_experience(start_date="2023-01-01", end_date=None)]
        )

        features = normalize(profile, date(2024, 1, 1))

        assert features.experience[0].years == 1.0
        assert features.experience[0].weight == 1.0

    def test_accepts_datetime_as_now(self):
        profile = CareerProfile(
            experience=[_experience(start_date="2023-01-01", end_date=None)]
        )

        features = normalize(profile, datetime(2024, 1, 1, 18, 30))

        assert features.experience[0].years == 1.0

    def test_malformed_date_raises_profile_data_error(self, reference_date):
        profile = CareerProfile(
            experience=[
                _experience(),
                _experience(company="Bad Dates Ltd", start_date="sometime"),
            ]
        )

        with pytest.raises(ProfileDataError) as exc_info:
            normalize(profile, reference_date)

        assert exc_info.value.index == 1
        assert "Bad Dates Ltd" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)

    def test_role_ending_before_it_starts_raises_profile_data_error(
        self, reference_date
    ):
        profile = CareerProfile(
            experience=[
                _experience(
                    company="Technology Inc",
                    start_date="2024-01-01",
                    end_date="2019-01-01",
                )
            ]
        )

        with pytest.raises(ProfileDataError) as exc_info:
            normalize(profile, reference_date)

        assert exc_info.value.index == 0
        assert "before it starts" in str(exc_info.value)

    def test_role_starting_after_now_without_end_date_raises(self):
        profile = CareerProfile(
            experience=[_experience(start_date="2025-03-01", end_date=None)]
        )

        with pytest.raises(ProfileDataError):
            normalize(profile, date(2024, 6, 1))

    def test_same_day_role_has_zero_years(self, reference_date):
        profile = CareerProfile(
            experience=[_experience(start_date="2023-01-01", end_date="2023-01-01")]
        )

        assert normalize(profile, reference_date).experience[0].years == 0.0

    def test_normalize_does_not_mutate_profile(self, reference_date):
        profile = CareerProfile(
            skills=[SkillRecord(skill_name="Python", proficiency_level=4)]
        )
        before = profile.to_dict()

        normalize(profile, reference_date)

        assert profile.to_dict() == before

"""Integration tests for the profile -> recommendation flow."""

from __future__ import annotations

from datetime import date
from pathlib import Path


def test_example_profile_recommends_data_scientist_first():
    """The bundled example profile should rank Data Scientist on top."""
    from career_match.scoring.config import ScoringConfig
    from career_match.scoring.profile import ProfileService
    from career_match.scoring.service import CareerMatchingService

    repo_root = Path(__file__).resolve().parents[3]
    profile_path = repo_root / "profiles" / "profile.example.yaml"

    config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]
    profile = ProfileService(config=config).load_profile(profile_path)

    ranked = CareerMatchingService(config=config).recommend(profile, date(2024, 6, 1))

    assert len(ranked) == 5
    assert ranked[0].title == "Data Scientist"
    assert ranked[0].match_score == 58
    scores = [career.match_score for career in ranked]
    assert scores == sorted(scores, reverse=True)
    assert all(0 <= score <= 100 for score in scores)


def test_raw_records_score_end_to_end():
    """Raw records through normalize and rank_careers give the expected score."""
    from career_match.scoring.catalog import CareerCatalog
    from career_match.scoring.models import CareerProfile
    from career_match.scoring.normalizer import normalize
    from career_match.scoring.service import rank_careers

    catalog = CareerCatalog([CareerCatalog.default().get("Data Scientist")])
    profile = CareerProfile.from_dict(
        {
            "skills": [
                {"skill_name": "Python", "proficiency_level": 5},
                {"skill_name": "SQL", "proficiency_level": 3},
            ],
            "education": [
                {
                    "institution": "State University",
                    "degree": "Bachelor's",
                    "field_of_study": "Computer Science",
                }
            ],
            "experience": [
                {
                    "company": "Quiet Corp",
                    "position": "Engineer",
                    "start_date": "2022-01-01",
                    "end_date": "2023-01-01",
                }
            ],
            "interests": [{"interest_name": "Technology", "interest_level": 4}],
        }
    )

    features = normalize(profile, date(2024, 6, 1))
    ranked = rank_careers(catalog, features)

    assert [(c.title, c.match_score) for c in ranked] == [("Data Scientist", 36)]


def test_batch_recommendation_skips_bad_profiles_and_keeps_going():
    from career_match.scoring.config import ScoringConfig
    from career_match.scoring.models import CareerProfile
    from career_match.scoring.service import CareerMatchingService

    config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]
    service = CareerMatchingService(config=config)
    profiles = [
        CareerProfile.from_dict({"name": "Ana"}),
        CareerProfile.from_dict(
            {
                "name": "Ben",
                "experience": [
                    {"company": "Acme", "position": "Dev", "start_date": "13/2020"}
                ],
            }
        ),
        CareerProfile.from_dict({"name": "Cy"}),
    ]

    batch = service.recommend_batch(profiles, date(2024, 6, 1))

    assert [r.profile_name for r in batch.results] == ["Ana", "Cy"]
    assert len(batch.skipped) == 1
    # Empty profiles only earn the entry-level experience credit.
    assert {c.match_score for c in batch.results[0].careers} == {10}

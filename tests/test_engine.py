"""
Tests for the matching engine.
"""

from types import SimpleNamespace

import pytest

from linkup_matching.matching import engine
from linkup_matching.matching.engine import calculate_matching_score, get_recommendation, score_pair
from linkup_matching.matching.models import (
    IncompatibilityCheck,
    MatchingConfig,
    MatchingWeights,
    RecommendationTier,
    UNAVAILABLE_RECOMMENDATION,
)
from linkup_matching.profiles.models import CandidateProfile, JobPosting

SKILLS_ONLY = MatchingWeights(
    skills=1.0, title=0.0, industry=0.0, location=0.0, experience=0.0, contract=0.0, salary=0.0
)


class TestCalculateMatchingScore:
    """End-to-end scoring of candidate/job pairs."""

    def test_strong_frontend_match(self, frontend_candidate, frontend_job):
        result = calculate_matching_score(frontend_candidate, frontend_job)
        assert result.score == 83
        assert result.recommendation == "Excellent ⭐"
        assert result.subscores.factor_scores() == {
            "skills": 100,
            "title": 100,
            "industry": 31,
            "location": 90,
            "experience": 100,
            "contract": 90,
            "salary": 0,
        }
        assert result.subscores.total == 83
        assert result.weights == MatchingWeights().as_dict()
        assert not result.is_incompatible

    def test_storage_rows_are_accepted(self, frontend_candidate, frontend_job):
        candidate_row = {
            "id_user": 42,
            "job_title": "Développeur Frontend",
            "skills": "javascript, react",
            "experience_level": "junior",
            "availability": "true",
        }
        job_row = {
            "id_job_offer": 1,
            "title": frontend_job.title,
            "description": frontend_job.description,
            "industry": "tech",
            "remote": "remote",
            "contract_type": "CDI",
            "experience": "junior",
        }
        assert calculate_matching_score(candidate_row, job_row) == calculate_matching_score(
            frontend_candidate, frontend_job
        )

    def test_incompatible_domains_are_capped(self, doctor_candidate, software_job):
        result = calculate_matching_score(doctor_candidate, software_job)
        assert result.score == 5
        assert result.recommendation == "Very weak ❌ ❌"
        assert result.recommendation.endswith("❌")
        assert result.weights == {}
        assert result.is_incompatible
        assert result.subscores.incompatibility_reason
        assert set(result.subscores.factor_scores().values()) == {0}

    def test_empty_candidate(self, empty_candidate, full_job):
        result = calculate_matching_score(empty_candidate, full_job)
        assert result.score == 0
        assert result.recommendation == "Very weak ❌"
        assert set(result.subscores.factor_scores().values()) == {0}

    def test_same_city(self):
        result = calculate_matching_score(
            CandidateProfile(city="Paris"), JobPosting(title="Chargé de clientèle", location="Paris")
        )
        assert result.subscores.location == 100
        assert result.score == 10

    def test_experience_gap(self):
        result = calculate_matching_score(
            CandidateProfile(experience_level="senior"),
            JobPosting(title="Poste", experience_required="débutant"),
        )
        assert result.subscores.experience == 40
        assert result.score == 4

    def test_idempotent(self, frontend_candidate, frontend_job):
        first = calculate_matching_score(frontend_candidate, frontend_job)
        second = calculate_matching_score(frontend_candidate, frontend_job)
        assert first == second

    @pytest.mark.parametrize("candidate,job", [
        ("not a record", {"title": "Développeur"}),
        ({"job_title": "Développeur"}, 42),
        (None, None),
        (["python"], {"title": "Développeur"}),
    ])
    def test_unreadable_records(self, candidate, job):
        result = calculate_matching_score(candidate, job)
        assert result.score == 0
        assert result.recommendation == UNAVAILABLE_RECOMMENDATION
        assert result.subscores is None
        assert result.weights == {}

    def test_oversized_salary_only_zeroes_the_salary_factor(self, frontend_candidate):
        result = calculate_matching_score(
            frontend_candidate, {"title": "Développeur Frontend", "salary_max": 10 ** 400}
        )
        assert result.subscores is not None
        assert result.subscores.salary == 0
        assert result.subscores.title == 100

    def test_unexpected_error_is_contained(self, monkeypatch, frontend_candidate, frontend_job):
        def boom(*args, **kwargs):
            raise RuntimeError("scorer exploded")

        monkeypatch.setattr(engine, "score_factors", boom)
        result = calculate_matching_score(frontend_candidate, frontend_job)
        assert result.score == 0
        assert result.recommendation == UNAVAILABLE_RECOMMENDATION

    def test_configured_unavailable_label(self):
        config = MatchingConfig(unavailable_recommendation="n/a")
        assert calculate_matching_score("x", "y", config).recommendation == "n/a"

    @pytest.mark.parametrize("candidate,job", [
        (
            {"skills": 42, "job_title": ["x"], "availability": "maybe"},
            {"title": None, "salary_min": "abc", "salary_max": {"a": 1}},
        ),
        (
            {"skills": "python, sql", "experience_level": 7},
            {"title": "Data engineer", "description": "python sql", "salary_max": "-5"},
        ),
        (
            {"job_title": "Développeur"},
            {"title": "Développeur", "salary_min": 0, "salary_max": 0},
        ),
        (
            SimpleNamespace(job_title="Juriste", skills=["droit"], city="Paris", country="France"),
            SimpleNamespace(title="Juriste", location="Marseille", industry="juridique"),
        ),
        ({}, {}),
    ])
    def test_score_is_always_a_bounded_integer(self, candidate, job):
        result = calculate_matching_score(candidate, job)
        assert isinstance(result.score, int)
        assert 0 <= result.score <= 100

    def test_veto_never_exceeds_cap(self, doctor_candidate, software_job):
        assert calculate_matching_score(doctor_candidate, software_job).score <= 15

    def test_veto_without_penalty_uses_default(self, monkeypatch, frontend_candidate, frontend_job):
        monkeypatch.setattr(
            engine,
            "check_incompatibility",
            lambda *args: IncompatibilityCheck(is_incompatible=True, reason="forced", penalty_score=0),
        )
        result = calculate_matching_score(frontend_candidate, frontend_job)
        assert result.score == 10
        assert result.recommendation == "Very weak ❌ ❌"

    def test_veto_penalty_is_capped(self, monkeypatch, frontend_candidate, frontend_job):
        monkeypatch.setattr(
            engine,
            "check_incompatibility",
            lambda *args: IncompatibilityCheck(is_incompatible=True, reason="forced", penalty_score=50),
        )
        assert calculate_matching_score(frontend_candidate, frontend_job).score == 15

    def test_no_skills_means_no_skills_score(self, frontend_candidate, frontend_job):
        candidate = frontend_candidate.model_copy(update={"skills": []})
        assert calculate_matching_score(candidate, frontend_job).subscores.skills == 0

    @pytest.mark.parametrize("city,country", [(None, None), ("Tokyo", "Japon"), ("Paris", "France")])
    def test_remote_job_ignores_candidate_location(self, frontend_candidate, frontend_job, city, country):
        candidate = frontend_candidate.model_copy(update={"city": city, "country": country})
        assert calculate_matching_score(candidate, frontend_job).subscores.location == 90

    def test_more_matching_skills_never_lower_the_score(self, frontend_candidate, frontend_job):
        fewer = frontend_candidate.model_copy(update={"skills": ["javascript", "docker"]})
        more = frontend_candidate.model_copy(update={"skills": ["javascript", "docker", "react"]})
        low = calculate_matching_score(fewer, frontend_job)
        high = calculate_matching_score(more, frontend_job)
        assert low.subscores.skills == 50
        assert high.subscores.skills == 67
        assert high.score >= low.score

    def test_custom_weights(self, frontend_candidate, frontend_job):
        result = calculate_matching_score(frontend_candidate, frontend_job, MatchingConfig(weights=SKILLS_ONLY))
        assert result.score == 100
        assert result.recommendation == "Perfect match 🎯"
        assert result.weights["skills"] == 1.0


class TestScorePair:

    def test_matches_total_function(self, frontend_candidate, frontend_job):
        assert score_pair(frontend_candidate, frontend_job) == calculate_matching_score(
            frontend_candidate, frontend_job
        )


class TestGetRecommendation:
    """Score to tier label mapping."""

    @pytest.mark.parametrize("score,label", [
        (100, "Perfect match 🎯"),
        (90, "Perfect match 🎯"),
        (89, "Excellent ⭐"),
        (80, "Excellent ⭐"),
        (79, "Good 👍"),
        (70, "Good 👍"),
        (60, "Correct ✅"),
        (50, "Average ⚖️"),
        (40, "Weak ⚠️"),
        (39, "Very weak ❌"),
        (0, "Very weak ❌"),
    ])
    def test_default_tiers(self, score, label):
        assert get_recommendation(score) == label

    def test_custom_tiers(self):
        tiers = (RecommendationTier(threshold=50, label="yes"), RecommendationTier(threshold=0, label="no"))
        assert get_recommendation(75, tiers) == "yes"
        assert get_recommendation(49, tiers) == "no"


class TestPayload:
    """camelCase payload attached to API responses."""

    def test_scored_payload(self, frontend_candidate, frontend_job):
        payload = calculate_matching_score(frontend_candidate, frontend_job).to_payload()
        assert payload["score"] == 83
        assert payload["subscores"]["total"] == 83
        assert payload["subscores"]["skills"] == 100
        assert "incompatibilityReason" not in payload["subscores"]
        assert payload["weights"]["skills"] == 0.30

    def test_vetoed_payload(self, doctor_candidate, software_job):
        payload = calculate_matching_score(doctor_candidate, software_job).to_payload()
        assert "incompatibilityReason" in payload["subscores"]
        assert payload["weights"] == {}

    def test_unavailable_payload(self):
        payload = calculate_matching_score(None, None).to_payload()
        assert payload == {
            "score": 0,
            "subscores": {},
            "weights": {},
            "recommendation": UNAVAILABLE_RECOMMENDATION,
        }

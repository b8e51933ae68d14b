"""Candidate/job matching engine.

``calculate_matching_score`` is a total function: whatever it is given, it
returns a ``MatchResult`` whose score is an integer in [0, 100]. Missing fields
lower the corresponding sub-scores to 0, records that cannot be read at all
produce the "unavailable" result, and a domain incompatibility caps the score.
"""
from typing import Any, Iterable

from .compatibility import check_incompatibility
from .models import (
    DEFAULT_MATCHING_CONFIG,
    DEFAULT_TIERS,
    IncompatibilityCheck,
    MatchDetails,
    MatchingConfig,
    MatchResult,
    RecommendationTier,
    UNAVAILABLE_RECOMMENDATION,
)
from .scorers import round_half_up, score_factors
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from ..profiles.models import CandidateProfile, JobPosting
from ..utils.logger import logger


def get_recommendation(score: int, tiers: Iterable[RecommendationTier] = DEFAULT_TIERS) -> str:
    """Map a score to the label of the highest tier it reaches"""
    label = ""
    for tier in tiers:
        label = tier.label
        if score >= tier.threshold:
            return label
    return label


def _incompatible_result(check: IncompatibilityCheck, config: MatchingConfig) -> MatchResult:
    score = min(config.veto_score_cap, check.penalty_score or config.default_veto_penalty)
    return MatchResult(
        score=score,
        subscores=MatchDetails(incompatibility_reason=check.reason),
        weights={},
        recommendation=f"{get_recommendation(score, config.tiers)}{config.incompatibility_suffix}",
    )


def score_pair(
    candidate: CandidateProfile,
    job: JobPosting,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> MatchResult:
    """Score two already-validated records"""
    check = check_incompatibility(candidate, job, vocabulary)
    if check.is_incompatible:
        logger.debug(f"Candidate {candidate.id} / job {job.id} vetoed: {check.reason}")
        return _incompatible_result(check, config)

    factors = score_factors(candidate, job, vocabulary)
    weights = config.weights.as_dict()
    total = round_half_up(sum(factors[name] * weight for name, weight in weights.items()))
    total = max(0, min(100, total))

    logger.debug(f"Candidate {candidate.id} / job {job.id}: {factors} -> {total}")

    return MatchResult(
        score=total,
        subscores=MatchDetails(**factors, total=total),
        weights=weights,
        recommendation=get_recommendation(total, config.tiers),
    )


def calculate_matching_score(
    candidate: Any,
    job: Any,
    config: MatchingConfig = DEFAULT_MATCHING_CONFIG,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> MatchResult:
    """Compute the compatibility between a candidate and a job.

    Args:
        candidate: CandidateProfile, storage row mapping or object with profile attributes
        job: JobPosting, storage row mapping or object with job attributes
        config: Weights and recommendation tiers
        vocabulary: Keyword tables used by the guard and the scorers

    Returns:
        MatchResult; never raises
    """
    fallback = getattr(config, "unavailable_recommendation", UNAVAILABLE_RECOMMENDATION)
    try:
        profile = CandidateProfile.coerce(candidate)
        posting = JobPosting.coerce(job)
        if profile is None or posting is None:
            logger.warning(
                f"Cannot read matching records: candidate={type(candidate).__name__}, job={type(job).__name__}"
            )
            return MatchResult.unavailable(fallback)
        return score_pair(profile, posting, config, vocabulary)
    except Exception as e:
        logger.error(f"Matching failed: {e}")
        return MatchResult.unavailable(fallback)

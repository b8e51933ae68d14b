"""Matching package"""
from .models import (
    DEFAULT_MATCHING_CONFIG,
    FACTORS,
    IncompatibilityCheck,
    MatchDetails,
    MatchingConfig,
    MatchingWeights,
    MatchResult,
    RecommendationTier,
)
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .compatibility import check_incompatibility
from .engine import calculate_matching_score, get_recommendation, score_pair

__all__ = [
    "DEFAULT_MATCHING_CONFIG",
    "DEFAULT_VOCABULARY",
    "FACTORS",
    "IncompatibilityCheck",
    "MatchDetails",
    "MatchingConfig",
    "MatchingWeights",
    "MatchResult",
    "RecommendationTier",
    "Vocabulary",
    "calculate_matching_score",
    "check_incompatibility",
    "get_recommendation",
    "score_pair",
]

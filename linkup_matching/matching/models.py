"""Matching result and configuration models"""
import math
from typing import Any, Dict, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

FACTORS: Tuple[str, ...] = ("skills", "title", "industry", "location", "experience", "contract", "salary")

UNAVAILABLE_RECOMMENDATION = "Impossible de calculer le matching"


class IncompatibilityCheck(BaseModel):
    """Outcome of the domain compatibility guard"""
    model_config = ConfigDict(frozen=True)

    is_incompatible: bool = False
    reason: str = ""
    penalty_score: int = Field(0, ge=0, le=100)
    domain: str = Field("", description="Domain whose keywords triggered the veto")


class MatchDetails(BaseModel):
    """Per-factor sub-scores of a match"""
    skills: int = Field(0, ge=0, le=100, description="Skills found in the job text")
    title: int = Field(0, ge=0, le=100, description="Job title similarity")
    industry: int = Field(0, ge=0, le=100, description="Candidate keywords for the job's industry")
    location: int = Field(0, ge=0, le=100, description="Location or remote compatibility")
    experience: int = Field(0, ge=0, le=100, description="Experience level proximity")
    contract: int = Field(0, ge=0, le=100, description="Contract type / availability")
    salary: int = Field(0, ge=0, le=100, description="Salary expectation proximity")
    total: Optional[int] = Field(None, ge=0, le=100, description="Weighted total")
    incompatibility_reason: Optional[str] = Field(None, description="Set when the domain guard vetoed")

    def factor_scores(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in FACTORS}


class MatchResult(BaseModel):
    """Compatibility between one candidate and one job"""
    score: int = Field(..., ge=0, le=100, description="Overall compatibility percentage")
    subscores: Optional[MatchDetails] = Field(None, description="None when the score could not be computed")
    weights: Dict[str, float] = Field(default_factory=dict, description="Weights applied, empty on veto")
    recommendation: str = Field(..., description="Human-readable tier label")

    @property
    def is_incompatible(self) -> bool:
        return self.subscores is not None and bool(self.subscores.incompatibility_reason)

    @classmethod
    def unavailable(cls, recommendation: str = UNAVAILABLE_RECOMMENDATION) -> "MatchResult":
        return cls(score=0, subscores=None, weights={}, recommendation=recommendation)

    def to_payload(self) -> Dict[str, Any]:
        """Shape attached to API responses (camelCase keys)"""
        subscores: Dict[str, Any] = {}
        if self.subscores is not None:
            subscores.update(self.subscores.factor_scores())
            if self.subscores.total is not None:
                subscores["total"] = self.subscores.total
            if self.subscores.incompatibility_reason:
                subscores["incompatibilityReason"] = self.subscores.incompatibility_reason
        return {
            "score": self.score,
            "subscores": subscores,
            "weights": dict(self.weights),
            "recommendation": self.recommendation,
        }


class MatchingWeights(BaseModel):
    """Contribution of each factor to the total; must sum to 1.0"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    skills: float = Field(0.30, ge=0.0, le=1.0)
    title: float = Field(0.25, ge=0.0, le=1.0)
    industry: float = Field(0.20, ge=0.0, le=1.0)
    location: float = Field(0.10, ge=0.0, le=1.0)
    experience: float = Field(0.10, ge=0.0, le=1.0)
    contract: float = Field(0.03, ge=0.0, le=1.0)
    salary: float = Field(0.02, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_total(self) -> "MatchingWeights":
        total = sum(self.as_dict().values())
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"Matching weights must sum to 1.0, got {total:.4f}")
        return self

    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in FACTORS}


class RecommendationTier(BaseModel):
    """Lowest score (inclusive) that earns ``label``"""
    model_config = ConfigDict(frozen=True)

    threshold: int = Field(..., ge=0, le=100)
    label: str


DEFAULT_TIERS: Tuple[RecommendationTier, ...] = (
    RecommendationTier(threshold=90, label="Perfect match 🎯"),
    RecommendationTier(threshold=80, label="Excellent ⭐"),
    RecommendationTier(threshold=70, label="Good 👍"),
    RecommendationTier(threshold=60, label="Correct ✅"),
    RecommendationTier(threshold=50, label="Average ⚖️"),
    RecommendationTier(threshold=40, label="Weak ⚠️"),
    RecommendationTier(threshold=0, label="Very weak ❌"),
)


class MatchingConfig(BaseModel):
    """Immutable scoring configuration threaded into the engine"""
    model_config = ConfigDict(frozen=True)

    weights: MatchingWeights = Field(default_factory=MatchingWeights)
    tiers: Tuple[RecommendationTier, ...] = DEFAULT_TIERS
    veto_score_cap: int = Field(15, ge=0, le=100, description="Highest score a vetoed pair can get")
    default_veto_penalty: int = Field(10, ge=0, le=100, description="Used when the guard gives no penalty")
    incompatibility_suffix: str = " ❌"
    unavailable_recommendation: str = UNAVAILABLE_RECOMMENDATION

    @model_validator(mode="after")
    def _check_tiers(self) -> "MatchingConfig":
        if not self.tiers:
            raise ValueError("At least one recommendation tier is required")
        thresholds = [tier.threshold for tier in self.tiers]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError(f"Recommendation tiers must have strictly descending thresholds, got {thresholds}")
        return self

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> "MatchingConfig":
        """Build a config from the ``matching`` section of config.yaml"""
        settings = dict(settings or {})
        values: Dict[str, Any] = {}
        if settings.get("weights"):
            values["weights"] = MatchingWeights(**settings["weights"])
        if settings.get("tiers"):
            values["tiers"] = tuple(
                RecommendationTier(threshold=tier["threshold"], label=tier["label"])
                for tier in settings["tiers"]
            )
        for key in ("veto_score_cap", "default_veto_penalty", "incompatibility_suffix", "unavailable_recommendation"):
            if settings.get(key) is not None:
                values[key] = settings[key]
        return cls(**values)


DEFAULT_MATCHING_CONFIG = MatchingConfig()

"""Ranking quality metrics"""
from typing import Sequence, Set
import numpy as np


class MetricsCalculator:
    """Metrics comparing a ranked list of ids with the set of relevant ids"""

    @staticmethod
    def _hits(ranked: Sequence[str], relevant: Set[str], k: int) -> np.ndarray:
        return np.array([item in relevant for item in ranked[:k]], dtype=float)

    @staticmethod
    def precision_at_k(ranked: Sequence[str], relevant: Set[str], k: int) -> float:
        """Precision@K metric"""
        if not ranked or k <= 0:
            return 0.0
        return float(MetricsCalculator._hits(ranked, relevant, k).sum() / k)

    @staticmethod
    def recall_at_k(ranked: Sequence[str], relevant: Set[str], k: int) -> float:
        """Recall@K metric"""
        if not relevant or k <= 0:
            return 0.0
        return float(MetricsCalculator._hits(ranked, relevant, k).sum() / len(relevant))

    @staticmethod
    def f1_score(precision: float, recall: float) -> float:
        """F1 Score"""
        if precision + recall == 0:
            return 0.0
        return 2 * precision * recall / (precision + recall)

    @staticmethod
    def mean_reciprocal_rank(ranked: Sequence[str], relevant: Set[str]) -> float:
        """Reciprocal rank of the first relevant id"""
        hits = np.flatnonzero(MetricsCalculator._hits(ranked, relevant, len(ranked)))
        return float(1.0 / (hits[0] + 1)) if hits.size else 0.0

    @staticmethod
    def ndcg_at_k(ranked: Sequence[str], relevant: Set[str], k: int) -> float:
        """Normalized Discounted Cumulative Gain@K (binary relevance)"""
        if k <= 0:
            return 0.0
        hits = MetricsCalculator._hits(ranked, relevant, k)
        discounts = 1.0 / np.log2(np.arange(2, k + 2))
        dcg = float(np.dot(hits, discounts[:hits.size]))
        idcg = float(discounts[:min(k, len(relevant))].sum())
        return dcg / idcg if idcg > 0 else 0.0

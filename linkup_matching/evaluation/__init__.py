"""Evaluation package"""
from .evaluator import EvaluationCase, EvalResult, RankingEvaluator, compare_configs
from .metrics import MetricsCalculator

__all__ = ["EvaluationCase", "EvalResult", "RankingEvaluator", "compare_configs", "MetricsCalculator"]

"""Evaluation of ranking quality for a matching configuration"""
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Set
import pandas as pd

from .metrics import MetricsCalculator
from ..batch_processor import BatchMatcher
from ..matching.models import MatchingConfig
from ..profiles.models import JobPosting
from ..utils import logger


@dataclass
class EvaluationCase:
    """One candidate, the jobs to rank for them and the ids judged relevant"""
    case_id: str
    candidate: Any
    jobs: List[Any]
    relevant_job_ids: Set[str] = field(default_factory=set)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EvaluationCase":
        return cls(
            case_id=str(data.get("case_id") or data.get("id") or ""),
            candidate=data.get("candidate") or {},
            jobs=list(data.get("jobs") or []),
            relevant_job_ids={str(job_id) for job_id in data.get("relevant_job_ids") or []},
        )


@dataclass
class EvalResult:
    """Single evaluation result"""
    case_id: str
    latency: float
    precision: float
    recall: float
    f1: float
    mrr: float
    ndcg: float


class RankingEvaluator:
    """Measure how well a BatchMatcher ranks relevant jobs first"""

    def __init__(self, matcher: BatchMatcher):
        self.matcher = matcher
        self.results: List[EvalResult] = []

    def evaluate_case(self, case: EvaluationCase, k: int = 5) -> EvalResult:
        """Evaluate single candidate"""
        start = time.perf_counter()

        # Jobs without an id are identified by their position in the case
        jobs = []
        for position, job in enumerate(case.jobs):
            if isinstance(job, Mapping) and not (job.get("id") or job.get("id_job_offer")):
                job = {**job, "id": str(position)}
            elif isinstance(job, JobPosting) and not job.id:
                job = job.model_copy(update={"id": str(position)})
            jobs.append(job)

        ranked = self.matcher.rank_jobs_for_candidate(case.candidate, jobs, limit=len(jobs))
        ranked_ids = [item.job.id or "" for item in ranked]
        latency = time.perf_counter() - start

        calc = MetricsCalculator()
        precision = calc.precision_at_k(ranked_ids, case.relevant_job_ids, k)
        recall = calc.recall_at_k(ranked_ids, case.relevant_job_ids, k)

        return EvalResult(
            case_id=case.case_id,
            latency=latency,
            precision=precision,
            recall=recall,
            f1=calc.f1_score(precision, recall),
            mrr=calc.mean_reciprocal_rank(ranked_ids, case.relevant_job_ids),
            ndcg=calc.ndcg_at_k(ranked_ids, case.relevant_job_ids, k),
        )

    def run_evaluation(self, cases: Sequence[EvaluationCase], k: int = 5) -> Dict:
        """Run full evaluation"""
        logger.info(f"Starting evaluation on {len(cases)} cases (k={k})")

        start_time = time.perf_counter()
        self.results = [self.evaluate_case(case, k) for case in cases]
        total_time = time.perf_counter() - start_time

        return self.generate_report(total_time, k)

    def generate_report(self, total_time: float, k: int = 5) -> Dict:
        """Generate evaluation report"""
        if not self.results:
            return {"total_samples": 0, "total_time_sec": round(total_time, 2), "quality_metrics": {},
                    "performance_metrics": {}}

        df = pd.DataFrame([vars(r) for r in self.results])

        def summary(column: str) -> Dict[str, float]:
            std = df[column].std()
            return {
                "mean": round(float(df[column].mean()), 4),
                "std": round(float(std), 4) if pd.notna(std) else 0.0,
            }

        return {
            "total_samples": len(df),
            "total_time_sec": round(total_time, 2),
            "quality_metrics": {
                f"precision@{k}": summary("precision"),
                f"recall@{k}": summary("recall"),
                "f1_score": summary("f1"),
                "mrr": summary("mrr"),
                f"ndcg@{k}": summary("ndcg"),
            },
            "performance_metrics": {
                "avg_latency_sec": round(float(df['latency'].mean()), 4),
                "p50_latency_sec": round(float(df['latency'].quantile(0.50)), 4),
                "p95_latency_sec": round(float(df['latency'].quantile(0.95)), 4),
                "throughput_cases_per_sec": round(len(df) / total_time, 2) if total_time > 0 else 0.0,
            },
        }


def compare_configs(
    cases: Sequence[EvaluationCase],
    configs: Mapping[str, MatchingConfig],
    k: int = 5,
    max_workers: int = 4,
) -> pd.DataFrame:
    """Evaluate several named configurations on the same cases, best nDCG first"""
    rows = []
    for name, matching_config in configs.items():
        evaluator = RankingEvaluator(BatchMatcher(max_workers=max_workers, matching_config=matching_config))
        report = evaluator.run_evaluation(cases, k)
        metrics = report["quality_metrics"]
        rows.append({
            "config": name,
            "precision": metrics.get(f"precision@{k}", {}).get("mean", 0.0),
            "recall": metrics.get(f"recall@{k}", {}).get("mean", 0.0),
            "f1": metrics.get("f1_score", {}).get("mean", 0.0),
            "mrr": metrics.get("mrr", {}).get("mean", 0.0),
            "ndcg": metrics.get(f"ndcg@{k}", {}).get("mean", 0.0),
        })
        logger.info(f"Config {name}: ndcg@{k}={rows[-1]['ndcg']:.4f}")

    columns = ["config", "precision", "recall", "f1", "mrr", "ndcg"]
    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values("ndcg", ascending=False, kind="stable").reset_index(drop=True)

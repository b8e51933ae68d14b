#!/usr/bin/env python3
"""Run ranking evaluation for the configured matching weights"""
import argparse
import json
import os
from pathlib import Path
from rich.console import Console
from rich.table import Table

from linkup_matching.batch_processor import BatchMatcher
from linkup_matching.evaluation import EvaluationCase, RankingEvaluator
from linkup_matching.utils import logger

console = Console()


def main():
    parser = argparse.ArgumentParser(description="Run ranking evaluation")
    parser.add_argument("--cases", default="data/evaluation_cases.json", help="Labelled evaluation cases (JSON list)")
    parser.add_argument("--k", type=int, default=5, help="Cut-off rank for the metrics")
    parser.add_argument("--output", default="output/evaluation_report.json", help="Output JSON file")
    args = parser.parse_args()

    raw_cases = json.loads(Path(args.cases).read_text(encoding="utf-8"))
    cases = [EvaluationCase.from_dict(case) for case in raw_cases]
    logger.info(f"Loaded {len(cases)} evaluation cases from {args.cases}")

    evaluator = RankingEvaluator(BatchMatcher())
    report = evaluator.run_evaluation(cases, k=args.k)

    table = Table(title="Evaluation Report")
    table.add_column("Metric", style="cyan")
    table.add_column("Mean", style="yellow")
    table.add_column("Std", style="magenta")
    for metric, values in report["quality_metrics"].items():
        table.add_row(metric, f"{values['mean']:.4f}", f"{values['std']:.4f}")
    console.print(table)

    for metric, value in report["performance_metrics"].items():
        console.print(f"  {metric}: {value}")

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.output, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2)
    logger.info(f"✓ Saved report to {args.output}")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Main entry point for the LinkUp matching engine demo"""
import json
from pathlib import Path
from rich.console import Console
from rich.table import Table

from linkup_matching.batch_processor import BatchMatcher
from linkup_matching.utils import logger, config, monitor

console = Console()

SAMPLE_CANDIDATE = Path("data/sample_candidate.json")
SAMPLE_JOBS = Path("data/sample_jobs.json")


def display_ranking(candidate_label: str, ranked_jobs):
    """Display ranked jobs in a table"""
    table = Table(title=f"Job matches for {candidate_label}")
    table.add_column("Rank", style="cyan", width=6)
    table.add_column("Job Title", style="magenta")
    table.add_column("Location", style="green")
    table.add_column("Score", style="yellow", width=7)
    table.add_column("Skills", style="blue", width=7)
    table.add_column("Recommendation")

    for i, item in enumerate(ranked_jobs, 1):
        details = item.matching.subscores
        table.add_row(
            str(i),
            item.job.title,
            item.job.location or "-",
            str(item.score),
            str(details.skills) if details else "-",
            item.matching.recommendation,
        )

    console.print(table)


def main():
    """Main workflow"""
    console.print("[bold blue]LinkUp Matching Engine[/bold blue]\n")

    if not SAMPLE_CANDIDATE.exists() or not SAMPLE_JOBS.exists():
        logger.error(f"Sample data not found in {SAMPLE_CANDIDATE.parent}/")
        return

    candidate = json.loads(SAMPLE_CANDIDATE.read_text(encoding="utf-8"))
    jobs = json.loads(SAMPLE_JOBS.read_text(encoding="utf-8"))

    logger.info(f"Ranking {len(jobs)} jobs with {config.max_workers} workers")
    matcher = BatchMatcher()
    ranked = matcher.rank_jobs_for_candidate(candidate, jobs)

    display_ranking(candidate.get("job_title") or "candidate", ranked)

    for item in ranked:
        if item.matching.is_incompatible:
            console.print(f"[red]✗[/red] {item.job.title}: {item.matching.subscores.incompatibility_reason}")

    console.print(f"\n[dim]{json.dumps(monitor.get_report(), indent=2)}[/dim]")


if __name__ == "__main__":
    main()

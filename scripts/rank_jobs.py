#!/usr/bin/env python3
"""Rank job offers for a candidate"""
import argparse
import json
from pathlib import Path

from linkup_matching.batch_processor import BatchMatcher
from linkup_matching.utils import logger


def load_json(path: str):
    return json.loads(Path(path).read_text(encoding="utf-8"))


def main():
    parser = argparse.ArgumentParser(description="Rank job offers for a candidate")
    parser.add_argument("--candidate", required=True, help="Candidate profile JSON file")
    parser.add_argument("--jobs", required=True, help="JSON file holding a list of job offers")
    parser.add_argument("--limit", type=int, help="Maximum number of jobs to return")
    parser.add_argument("--workers", type=int, help="Concurrent scoring workers")
    parser.add_argument("--output", help="Output JSON file")
    args = parser.parse_args()

    candidate = load_json(args.candidate)
    jobs = load_json(args.jobs)
    if not isinstance(jobs, list):
        logger.error(f"{args.jobs} must contain a JSON list of jobs")
        return

    matcher = BatchMatcher(max_workers=args.workers)
    logger.info(f"Ranking {len(jobs)} jobs")
    ranked = matcher.rank_jobs_for_candidate(candidate, jobs, limit=args.limit)

    output = {
        "candidate_id": candidate.get("id_user") or candidate.get("id"),
        "jobs": [
            {
                "id": item.job.id,
                "title": item.job.title,
                "matching": item.matching.to_payload(),
            }
            for item in ranked
        ],
    }

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(output, f, indent=2, ensure_ascii=False)
        logger.info(f"✓ Saved ranking to {args.output}")
    else:
        print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

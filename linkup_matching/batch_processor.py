"""Concurrent ranking of jobs and candidates"""
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel

from .matching.engine import calculate_matching_score
from .matching.models import MatchingConfig, MatchResult
from .matching.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from .profiles.models import Application, CandidateProfile, JobPosting
from .utils import config, logger, monitor

T = TypeVar("T")


class RankedJob(BaseModel):
    """A job with its compatibility for one candidate"""
    job: JobPosting
    matching: MatchResult

    @property
    def score(self) -> int:
        return self.matching.score


class RankedCandidate(BaseModel):
    """A candidate with their compatibility for one job"""
    candidate: CandidateProfile
    matching: MatchResult

    @property
    def score(self) -> int:
        return self.matching.score


class BatchMatcher:
    """Score many candidate/job pairs concurrently"""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        matching_config: Optional[MatchingConfig] = None,
        vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ):
        self.max_workers = max_workers or config.max_workers
        self.matching_config = matching_config or config.matching_config
        self.vocabulary = vocabulary

    def score(self, candidate: Any, job: Any) -> MatchResult:
        """Score a single pair with this matcher's configuration"""
        return calculate_matching_score(candidate, job, self.matching_config, self.vocabulary)

    def _score_all(self, pairs: Sequence[Tuple[Any, Any]]) -> List[MatchResult]:
        """Score every pair; results keep the order of ``pairs``"""
        results: List[Optional[MatchResult]] = [None] * len(pairs)
        if not pairs:
            return []

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(pairs))) as executor:
            future_to_index = {
                executor.submit(self.score, candidate, job): index
                for index, (candidate, job) in enumerate(pairs)
            }
            for future in as_completed(future_to_index):
                results[future_to_index[future]] = future.result()

        return results

    @staticmethod
    def _rank(items: List[T], key: Callable[[T], int], limit: Optional[int]) -> List[T]:
        # sorted() is stable: equal scores keep their input order
        ranked = sorted(items, key=key, reverse=True)
        return ranked[:limit] if limit is not None else ranked

    @monitor.measure("rank_jobs_for_candidate")
    def rank_jobs_for_candidate(
        self,
        candidate: Any,
        jobs: Sequence[Any],
        limit: Optional[int] = None,
    ) -> List[RankedJob]:
        """Rank jobs by descending compatibility with one candidate"""
        limit = config.job_limit if limit is None else limit
        profile = CandidateProfile.coerce(candidate)
        postings = [JobPosting.coerce(job) for job in jobs]
        postings = [posting for posting in postings if posting is not None]
        if profile is None or not postings:
            logger.debug(f"Nothing to rank: candidate={profile is not None}, jobs={len(postings)}")
            return []

        start = time.perf_counter()
        results = self._score_all([(profile, posting) for posting in postings])
        ranked = self._rank(
            [RankedJob(job=posting, matching=result) for posting, result in zip(postings, results)],
            key=lambda item: item.score,
            limit=limit,
        )

        logger.info(
            f"Ranked {len(postings)} jobs for candidate {profile.id} in {time.perf_counter() - start:.3f}s. "
            f"Top score: {ranked[0].score if ranked else 0}"
        )
        return ranked

    @monitor.measure("rank_candidates_for_job")
    def rank_candidates_for_job(
        self,
        job: Any,
        candidates: Sequence[Any],
        limit: Optional[int] = None,
    ) -> List[RankedCandidate]:
        """Rank candidates by descending compatibility with one job"""
        limit = config.candidate_limit if limit is None else limit
        posting = JobPosting.coerce(job)
        profiles = [CandidateProfile.coerce(candidate) for candidate in candidates]
        profiles = [profile for profile in profiles if profile is not None]
        if posting is None or not profiles:
            logger.debug(f"Nothing to rank: job={posting is not None}, candidates={len(profiles)}")
            return []

        start = time.perf_counter()
        results = self._score_all([(profile, posting) for profile in profiles])
        ranked = self._rank(
            [RankedCandidate(candidate=profile, matching=result) for profile, result in zip(profiles, results)],
            key=lambda item: item.score,
            limit=limit,
        )

        logger.info(
            f"Ranked {len(profiles)} candidates for job {posting.id} in {time.perf_counter() - start:.3f}s. "
            f"Top score: {ranked[0].score if ranked else 0}"
        )
        return ranked

    @monitor.measure("score_applications")
    def score_applications(self, applications: Sequence[Any]) -> List[Application]:
        """Attach a match score to each application.

        Applications missing their candidate or job get the configured default
        score. Input order is preserved.
        """
        records = []
        for application in applications:
            record = Application.coerce(application)
            records.append(record if record is not None else Application())
        if not records:
            logger.debug("No applications to score")
            return []

        complete = [(i, r) for i, r in enumerate(records) if r.candidate is not None and r.job is not None]
        results = self._score_all([(r.candidate, r.job) for _, r in complete])
        scores = {i: result.score for (i, _), result in zip(complete, results)}

        default_score = config.application_default_score
        scored = []
        for index, record in enumerate(records):
            if index not in scores:
                logger.debug(
                    f"Application {record.id} is missing data "
                    f"(candidate={record.candidate is not None}, job={record.job is not None})"
                )
            scored.append(record.model_copy(update={"match_score": scores.get(index, default_score)}))

        logger.info(f"Scored {len(complete)}/{len(records)} applications")
        return scored

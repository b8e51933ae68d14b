"""Domain compatibility guard.

Detects candidate/job pairs from mutually exclusive professional domains (a
doctor applying to a software job, a developer to a surgeon position...) so
the engine can cap their score instead of rewarding incidental keyword
overlap. This is a deny-list: pairs it does not recognize pass through.
"""
from .models import IncompatibilityCheck
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from ..profiles.models import CandidateProfile, JobPosting

INCOMPATIBILITY_PENALTY = 5

COMPATIBLE = IncompatibilityCheck()


def candidate_text(candidate: CandidateProfile) -> str:
    return f"{candidate.job_title or ''} {candidate.bio or ''} {' '.join(candidate.skills)}".lower()


def job_text(job: JobPosting) -> str:
    return f"{job.title} {job.description} {job.industry or ''}".lower()


def check_incompatibility(
    candidate: CandidateProfile,
    job: JobPosting,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> IncompatibilityCheck:
    """Check both directions for every domain; the first domain that matches wins"""
    profile = candidate_text(candidate)
    posting = job_text(job)

    for domain in vocabulary.domains:
        if domain.matches(profile) and domain.conflicts_with(posting):
            return IncompatibilityCheck(
                is_incompatible=True,
                reason=f"Candidate's {domain.name} background is incompatible with the job's sector",
                penalty_score=INCOMPATIBILITY_PENALTY,
                domain=domain.name,
            )

        if domain.matches(posting) and domain.conflicts_with(profile):
            return IncompatibilityCheck(
                is_incompatible=True,
                reason=f"Job's {domain.name} sector is incompatible with the candidate's profile",
                penalty_score=INCOMPATIBILITY_PENALTY,
                domain=domain.name,
            )

    return COMPATIBLE

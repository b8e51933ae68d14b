"""Factor scorers.

Each scorer is a pure function returning an integer sub-score in [0, 100] for
one matching dimension. A scorer returns 0 whenever the data it needs is
missing on either side: absent information is never rewarded with a neutral
midpoint.
"""
import math
from typing import Dict, Iterable, List, Optional

from .vocabulary import DEFAULT_VOCABULARY, Vocabulary
from ..profiles.models import CandidateProfile, JobPosting

REMOTE_SCORE = 90
EXACT_LOCATION_SCORE = 100
CITY_SCORE = 85
COUNTRY_SCORE = 70

EXACT_TITLE_SCORE = 100
MAX_TITLE_OVERLAP_SCORE = 80
SEMANTIC_TITLE_SCORE = 70

INDUSTRY_WITHOUT_KEYWORDS_SCORE = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up"""
    return int(math.floor(value + 0.5))


def _lower(value: Optional[str]) -> str:
    return (value or "").lower()


def _join(*parts: Optional[str]) -> str:
    return " ".join(part or "" for part in parts)


def skills_score(
    skills: Iterable[str],
    job_title: Optional[str],
    job_description: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Share of the candidate's recognized skills that the job text mentions"""
    skills = list(skills or [])
    if not skills:
        return 0

    job_text = _join(job_title, job_description).lower()
    known = vocabulary.relevant_skills

    matched = 0
    relevant = 0
    for skill in skills:
        skill = skill.lower().strip()
        if not skill:
            continue
        if not any(skill in term or term in skill for term in known):
            continue
        relevant += 1
        if skill in job_text or any(skill in term and term in job_text for term in known):
            matched += 1

    if relevant == 0:
        return 0
    return round_half_up(matched / relevant * 100)


def _significant_words(text: str) -> List[str]:
    return [word for word in text.split() if len(word) > 2]


def title_score(
    candidate_title: Optional[str],
    candidate_bio: Optional[str],
    job_title: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Similarity between the candidate's title/bio and the job title"""
    if not job_title or not job_title.strip():
        return 0

    candidate_text = _join(candidate_title, candidate_bio).lower().strip()
    if not candidate_text:
        return 0

    title = job_title.lower().strip()
    if title in candidate_text or candidate_text in title:
        return EXACT_TITLE_SCORE

    candidate_words = _significant_words(candidate_text)
    title_words = _significant_words(title)
    common = [
        word for word in candidate_words
        if word in title_words and len(word) > 3 and word not in vocabulary.title_stopwords
    ]
    if common:
        ratio = len(common) / max(len(candidate_words), len(title_words))
        return min(MAX_TITLE_OVERLAP_SCORE, round_half_up(ratio * MAX_TITLE_OVERLAP_SCORE))

    for keywords in vocabulary.semantic_groups.values():
        if any(k in candidate_text for k in keywords) and any(k in title for k in keywords):
            return SEMANTIC_TITLE_SCORE

    return 0


def industry_score(
    skills: Iterable[str],
    job_industry: Optional[str],
    candidate_title: Optional[str],
    candidate_bio: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Coverage of the job industry's keyword list by the candidate profile"""
    if not job_industry or not job_industry.strip():
        return 0

    candidate_text = _join(candidate_title, candidate_bio, " ".join(skills or [])).lower()
    if not candidate_text.strip():
        return 0

    industry = job_industry.lower()
    for tag, keywords in vocabulary.industry_keywords.items():
        if tag in industry or industry in tag:
            hits = sum(1 for keyword in keywords if keyword in candidate_text)
            if hits == 0:
                return INDUSTRY_WITHOUT_KEYWORDS_SCORE
            return round_half_up(hits / len(keywords) * 100)

    return 0


def location_score(
    city: Optional[str],
    country: Optional[str],
    job_location: Optional[str],
    remote_mode: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Geographic compatibility; remote-friendly jobs fit everyone"""
    remote = _lower(remote_mode)
    if remote and any(marker in remote for marker in vocabulary.remote_markers):
        return REMOTE_SCORE

    candidate_location = _join(city, country).lower().strip()
    location = _lower(job_location).strip()
    if not candidate_location or not location:
        return 0

    if location in candidate_location or candidate_location in location:
        return EXACT_LOCATION_SCORE

    city = _lower(city).strip()
    country = _lower(country).strip()
    if city and city in location:
        return CITY_SCORE
    if country and country in location:
        return COUNTRY_SCORE

    for region in vocabulary.regions:
        if region.covers(location) and region.includes(country):
            return region.score

    return 0


def experience_score(
    candidate_level: Optional[str],
    required_level: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Proximity of experience levels on the seven-step ladder"""
    if not candidate_level or not required_level:
        return 0

    gap = abs(vocabulary.experience_rank(candidate_level) - vocabulary.experience_rank(required_level))
    if gap < len(vocabulary.experience_gap_scores):
        return vocabulary.experience_gap_scores[gap]
    return vocabulary.experience_far_score


def contract_score(
    availability: Optional[bool],
    contract_type: Optional[str],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Contract type attractiveness, maxed out for immediately available candidates"""
    if not contract_type or availability is None:
        return 0
    if availability:
        return vocabulary.available_contract_score

    contract = contract_type.lower()
    for keyword, score in vocabulary.contract_scores:
        if keyword in contract:
            return score
    return 0


def salary_score(
    candidate_level: Optional[str],
    salary_min: Optional[float],
    salary_max: Optional[float],
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> int:
    """Gap between the salary offered and the one expected at the candidate's level"""
    if not salary_min and not salary_max:
        return 0
    if not candidate_level or not candidate_level.strip():
        return 0

    expected = vocabulary.expected_salary(candidate_level)
    offered = salary_max or salary_min or vocabulary.default_salary
    gap_percent = abs(expected - offered) / expected * 100

    for max_gap, score in vocabulary.salary_bands:
        if gap_percent <= max_gap:
            return score
    return vocabulary.salary_far_score


def score_factors(
    candidate: CandidateProfile,
    job: JobPosting,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> Dict[str, int]:
    """Run every factor scorer on one candidate/job pair"""
    return {
        "skills": skills_score(candidate.skills, job.title, job.description, vocabulary),
        "title": title_score(candidate.job_title, candidate.bio, job.title, vocabulary),
        "industry": industry_score(
            candidate.skills, job.industry, candidate.job_title, candidate.bio, vocabulary
        ),
        "location": location_score(
            candidate.city, candidate.country, job.location, job.remote_mode, vocabulary
        ),
        "experience": experience_score(candidate.experience_level, job.experience_required, vocabulary),
        "contract": contract_score(candidate.availability, job.contract_type, vocabulary),
        "salary": salary_score(
            candidate.experience_level, job.salary_min, job.salary_max, vocabulary
        ),
    }

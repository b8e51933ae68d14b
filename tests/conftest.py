"""
Pytest configuration and shared fixtures.
"""

import pytest

from linkup_matching.profiles.models import CandidateProfile, JobPosting
from linkup_matching.utils import monitor


@pytest.fixture
def frontend_candidate() -> CandidateProfile:
    """Junior frontend developer, immediately available."""
    return CandidateProfile(
        id="42",
        skills=["javascript", "react"],
        job_title="Développeur Frontend",
        experience_level="junior",
        availability=True,
    )


@pytest.fixture
def frontend_job() -> JobPosting:
    """Remote junior frontend position in tech."""
    return JobPosting(
        id="1",
        title="Développeur Frontend React",
        description="Nous recherchons un profil react et javascript pour notre produit.",
        industry="tech",
        remote_mode="remote",
        contract_type="CDI",
        experience_required="junior",
    )


@pytest.fixture
def doctor_candidate() -> CandidateProfile:
    """General practitioner."""
    return CandidateProfile(
        job_title="Médecin généraliste",
        bio="clinique hospital patient",
    )


@pytest.fixture
def software_job() -> JobPosting:
    """Software job that no medical profile should match."""
    return JobPosting(
        id="7",
        title="Développeur logiciel",
        description="software engineer javascript",
    )


@pytest.fixture
def empty_candidate() -> CandidateProfile:
    """Candidate who filled in nothing."""
    return CandidateProfile()


@pytest.fixture
def full_job() -> JobPosting:
    """Job with every field populated and no remote option."""
    return JobPosting(
        id="9",
        title="Comptable senior",
        description="Gestion de la comptabilité fournisseurs, finance et reporting",
        industry="finance",
        location="Lyon",
        remote_mode="sur site",
        contract_type="CDI",
        experience_required="senior",
        salary_min=40000,
        salary_max=50000,
    )


@pytest.fixture
def storage_candidate_row() -> dict:
    """Candidate row as returned by the user_ table."""
    return {
        "id_user": 12,
        "email": "camille@example.com",
        "job_title": "Développeur Python",
        "bio_pro": "Backend et data",
        "skills": ["python", "django", "sql"],
        "city": "Paris",
        "country": "France",
        "experience_level": "senior",
        "availability": False,
    }


@pytest.fixture
def storage_job_row() -> dict:
    """Job row as returned by the job_offer table."""
    return {
        "id_job_offer": 31,
        "title": "Développeur Backend Python",
        "description": "API django, sql et docker",
        "industry": "informatique",
        "location": "Paris",
        "remote": "sur site",
        "contract_type": "CDI",
        "experience": "senior",
        "salary_min": 55000,
        "salary_max": 62000,
        "published_at": "2024-03-01T10:00:00Z",
    }


@pytest.fixture(autouse=True)
def reset_monitor():
    """Give every test a clean performance monitor."""
    monitor.reset()
    yield
    monitor.reset()

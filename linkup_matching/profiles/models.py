"""Candidate, job and application records consumed by the matching engine.

Records arrive from the job-board storage layer as rows with snake_case column
names (``job_title``, ``bio_pro``, ``contract_type``...) or from API payloads
in camelCase. Both spellings are accepted. A malformed field value becomes
``None`` (or an empty list) instead of a validation error.
"""
import math
from typing import Any, List, Optional, Type, TypeVar
from collections.abc import Mapping
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

RecordT = TypeVar("RecordT", bound="MatchingRecord")

_TRUE_STRINGS = {"true", "1", "yes", "oui", "y"}
_FALSE_STRINGS = {"false", "0", "no", "non", "n", ""}


def coerce_text(value: Any) -> Optional[str]:
    """Return ``value`` as text, or None when it is not text-like"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def coerce_skills(value: Any) -> List[str]:
    """Normalize a skills field to a list of strings"""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple, set, frozenset)):
        skills = []
        for item in value:
            text = coerce_text(item)
            if text is not None:
                skills.append(text)
        return skills
    return []


def coerce_flag(value: Any) -> Optional[bool]:
    """Interpret availability flags stored as booleans, numbers or strings"""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def coerce_amount(value: Any) -> Optional[float]:
    """Return a salary amount as float, or None when it is not numeric"""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            amount = float(value)
        elif isinstance(value, str):
            amount = float(value.replace(" ", "").replace(",", "."))
        else:
            return None
    except (OverflowError, ValueError):
        return None
    return amount if math.isfinite(amount) else None


class MatchingRecord(BaseModel):
    """Base class for records read by the matching engine"""

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    @classmethod
    def coerce(cls: Type[RecordT], value: Any) -> Optional[RecordT]:
        """Build a record from a model, a mapping or an attribute-bearing object.

        Returns None when ``value`` cannot be interpreted as a record.
        """
        if isinstance(value, cls):
            return value
        if value is None or isinstance(value, (str, bytes, int, float, bool, list, tuple)):
            return None
        try:
            if isinstance(value, Mapping):
                return cls.model_validate(dict(value))
            return cls.model_validate(value, from_attributes=True)
        except (ValidationError, ArithmeticError, TypeError, ValueError):
            return None


class CandidateProfile(MatchingRecord):
    """Candidate side of a match"""
    id: Optional[str] = Field(None, validation_alias=AliasChoices("id", "id_user"))
    skills: List[str] = Field(default_factory=list, description="Declared skills, in profile order")
    job_title: Optional[str] = Field(
        None, validation_alias=AliasChoices("job_title", "jobTitle"), description="Current or target job title"
    )
    bio: Optional[str] = Field(
        None, validation_alias=AliasChoices("bio", "bio_pro", "bioPro"), description="Professional bio"
    )
    city: Optional[str] = None
    country: Optional[str] = None
    experience_level: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("experience_level", "experienceLevel"),
        description="débutant, junior, intermédiaire, senior, expert, lead or manager",
    )
    availability: Optional[bool] = Field(None, description="Immediately available")

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("job_title", "bio", "city", "country", "experience_level", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("skills", mode="before")
    @classmethod
    def _skills(cls, value: Any) -> List[str]:
        return coerce_skills(value)

    @field_validator("availability", mode="before")
    @classmethod
    def _availability(cls, value: Any) -> Optional[bool]:
        return coerce_flag(value)


class JobPosting(MatchingRecord):
    """Job side of a match"""
    id: Optional[str] = Field(None, validation_alias=AliasChoices("id", "id_job_offer"))
    title: str = ""
    description: str = ""
    industry: Optional[str] = None
    location: Optional[str] = None
    remote_mode: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("remote_mode", "remoteMode", "remote"),
        description="Free text such as 'remote', 'hybride' or 'sur site'",
    )
    contract_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("contract_type", "contractType"), description="CDI, CDD, stage..."
    )
    experience_required: Optional[str] = Field(
        None, validation_alias=AliasChoices("experience_required", "experienceRequired", "experience")
    )
    salary_min: Optional[float] = Field(None, validation_alias=AliasChoices("salary_min", "salaryMin"))
    salary_max: Optional[float] = Field(None, validation_alias=AliasChoices("salary_max", "salaryMax"))

    @field_validator("id", "industry", "location", "remote_mode", "contract_type", "experience_required", mode="before")
    @classmethod
    def _text(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _required_text(cls, value: Any) -> str:
        return coerce_text(value) or ""

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Optional[float]:
        return coerce_amount(value)


class Application(MatchingRecord):
    """A candidate's application to a job, as joined by the storage layer"""
    id: Optional[str] = Field(None, validation_alias=AliasChoices("id", "id_application"))
    candidate: Optional[CandidateProfile] = Field(None, validation_alias=AliasChoices("candidate", "user_"))
    job: Optional[JobPosting] = Field(None, validation_alias=AliasChoices("job", "job_offer"))
    match_score: Optional[int] = Field(None, ge=0, le=100, validation_alias=AliasChoices("match_score", "matchScore"))

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> Optional[str]:
        return coerce_text(value)

    @field_validator("candidate", mode="before")
    @classmethod
    def _candidate(cls, value: Any) -> Optional[CandidateProfile]:
        return CandidateProfile.coerce(value)

    @field_validator("job", mode="before")
    @classmethod
    def _job(cls, value: Any) -> Optional[JobPosting]:
        return JobPosting.coerce(value)

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MatchStrengthLabel = Literal["strong", "good", "none"]


def _as_text_list(value: Any) -> list[str]:
    if value is None or isinstance(value, (str, bytes, dict)):
        return []
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []
    items: list[str] = []
    for item in value:
        if item is None:
            continue
        text = item if isinstance(item, str) else str(item)
        text = text.strip()
        if text:
            items.append(text)
    return items


def _as_optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    text = text.strip()
    return text or None


class CandidateProfile(BaseModel):
    """AI-derived candidate profile as supplied by the profile-fetch collaborator."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    skills: list[str] = Field(default_factory=list)
    experience: list[Any] = Field(default_factory=list)
    work_style: str | None = Field(default=None, alias="workStyle")
    career_goals: str | None = Field(default=None, alias="careerGoals")

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> list[str]:
        return _as_text_list(value)

    @field_validator("experience", mode="before")
    @classmethod
    def _coerce_experience(cls, value: Any) -> list[Any]:
        if isinstance(value, (list, tuple)):
            return list(value)
        return []

    @field_validator("work_style", "career_goals", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_optional_text(value)


class JobPosting(BaseModel):
    """Job posting as supplied by the job-listing collaborator.

    ``title`` must be present as a key; a null or blank value is kept as ``""``
    so a listing with a broken title is still scored instead of rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str | None = Field(default=None, alias="recordId")
    title: str
    company_name: str | None = Field(default=None, alias="companyName")
    skills: list[str] = Field(default_factory=list)
    experience_level: str | None = Field(default=None, alias="experienceLevel")
    employment_type: str | None = Field(default=None, alias="employmentType")
    location: str | None = None
    description: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        return _as_optional_text(value)

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> str:
        return _as_optional_text(value) or ""

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, value: Any) -> list[str]:
        return _as_text_list(value)

    @field_validator(
        "company_name",
        "experience_level",
        "employment_type",
        "location",
        "description",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _as_optional_text(value)


class ScoreRequest(BaseModel):
    profile: CandidateProfile | None = None
    job: JobPosting


class ScoreResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    strength: MatchStrengthLabel
    display: bool


class RankRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile: CandidateProfile | None = None
    jobs: list[JobPosting] = Field(default_factory=list)
    min_score: int | None = Field(default=None, ge=0, le=100, alias="minScore")
    limit: int | None = Field(default=None, ge=1)
    pinned_job_id: str | None = Field(default=None, alias="pinnedJobId")


class ScoredJob(BaseModel):
    job_id: str | None
    title: str
    score: int = Field(ge=0, le=100)
    strength: MatchStrengthLabel
    pinned: bool = False


class RankResponse(BaseModel):
    results: list[ScoredJob] = Field(default_factory=list)
    total: int

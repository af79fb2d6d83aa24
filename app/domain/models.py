"""Core domain models for saved analyses, job applications and interviews.

This module defines the per-user records kept by CareerPath:
- SavedAnalysis: immutable snapshot of a match report
- JobApplication: a submitted application and its current status
- Interview: a scheduled interview and its status
"""

from datetime import date, datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


def _to_utc(v: Optional[datetime]) -> Optional[datetime]:
    if v is None:
        return None
    # If timezone-naive, treat as UTC
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)


class ApplicationStatus(str, Enum):
    """Lifecycle of a job application."""

    APPLIED = "Applied"
    INTERVIEWING = "Interviewing"
    OFFER = "Offer"
    REJECTED = "Rejected"


class InterviewStatus(str, Enum):
    """Lifecycle of a scheduled interview."""

    UPCOMING = "Upcoming"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


class SavedAnalysis(BaseModel):
    """A stored match report.

    Records are append-only: they can be listed and deleted but never edited.
    """

    id: str = Field(..., description="Record identifier")
    user_id: str = Field(..., description="Owner of the record")
    matched: List[str] = Field(default_factory=list, description="Matched skills, scorer order")
    missing: List[str] = Field(default_factory=list, description="Missing skills")
    match_rate: str = Field(..., pattern=r"^\d{1,3}%$", description='Match rate such as "67%"')
    saved_at: datetime = Field(..., description="When the analysis was saved (UTC)")

    @field_validator("saved_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        return _to_utc(v)

    model_config = {"frozen": True, "json_schema_extra": {"example": {
        "id": "5f0c6a2e9b1d4c3a8e7f6d5c4b3a2918",
        "user_id": "user-123",
        "matched": ["react", "nodejs", "sql"],
        "missing": ["for", "looking", "skills"],
        "match_rate": "50%",
        "saved_at": "2025-09-01T12:00:00Z",
    }}}


class JobApplication(BaseModel):
    """A job application tracked by a user."""

    id: str = Field(..., description="Record identifier")
    user_id: str = Field(..., description="Owner of the record")
    position: str = Field(..., description="Position applied for")
    company: str = Field(..., description="Company name")
    applied_date: date = Field(..., description="Date the application was submitted")
    status: ApplicationStatus = Field(ApplicationStatus.APPLIED, description="Current status")

    @field_validator("position", "company")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or whitespace-only")
        return v.strip()

    model_config = {"json_schema_extra": {"example": {
        "id": "a1b2c3d4e5f60718293a4b5c6d7e8f90",
        "user_id": "user-123",
        "position": "Frontend Engineer",
        "company": "Example Corp",
        "applied_date": "2025-09-01",
        "status": "Applied",
    }}}


class Interview(BaseModel):
    """A scheduled interview."""

    id: str = Field(..., description="Record identifier")
    user_id: str = Field(..., description="Owner of the record")
    position: str = Field(..., description="Position being interviewed for")
    company: str = Field(..., description="Company name")
    scheduled_at: datetime = Field(..., description="Interview start time (UTC)")
    status: InterviewStatus = Field(InterviewStatus.UPCOMING, description="Current status")

    @field_validator("position", "company")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty or whitespace-only")
        return v.strip()

    @field_validator("scheduled_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Ensure datetime is timezone-aware and in UTC."""
        return _to_utc(v)

    model_config = {"json_schema_extra": {"example": {
        "id": "0f1e2d3c4b5a69788796a5b4c3d2e1f0",
        "user_id": "user-123",
        "position": "Frontend Engineer",
        "company": "Example Corp",
        "scheduled_at": "2025-09-03T15:00:00Z",
        "status": "Upcoming",
    }}}

"""Domain models for CareerPath."""

from .models import (
    ApplicationStatus,
    Interview,
    InterviewStatus,
    JobApplication,
    SavedAnalysis,
)

__all__ = [
    "SavedAnalysis",
    "JobApplication",
    "Interview",
    "ApplicationStatus",
    "InterviewStatus",
]

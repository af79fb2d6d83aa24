"""Application services used by the CLI."""

from .analysis import AnalysisService
from .exceptions import EmptyInputError, NotAuthenticatedError, ServiceError
from .identity import USER_ID_ENV_VAR, resolve_user_id
from .reminders import (
    REMINDER_TAG,
    InterviewListing,
    format_reminder_tag,
    is_within_window,
)
from .tracker import TrackerService

__all__ = [
    "AnalysisService",
    "TrackerService",
    "InterviewListing",
    "resolve_user_id",
    "USER_ID_ENV_VAR",
    "is_within_window",
    "format_reminder_tag",
    "REMINDER_TAG",
    "ServiceError",
    "NotAuthenticatedError",
    "EmptyInputError",
]

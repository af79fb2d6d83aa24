"""Interview reminder helpers."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from app.domain.models import Interview, InterviewStatus
from app.utils.timestamps import ensure_utc

REMINDER_TAG = "Reminder: Interview Soon!"


def is_within_window(scheduled_at: datetime, now: datetime, window_hours: int = 24) -> bool:
    """True if the interview starts after now and no later than window_hours from now."""
    delta = ensure_utc(scheduled_at) - ensure_utc(now)
    return timedelta(0) < delta <= timedelta(hours=window_hours)


def format_reminder_tag(
    scheduled_at: datetime, now: datetime, window_hours: int = 24
) -> Optional[str]:
    """Return the reminder label for an imminent interview, else None."""
    if is_within_window(scheduled_at, now, window_hours):
        return REMINDER_TAG
    return None


@dataclass(frozen=True)
class InterviewListing:
    """An interview paired with its reminder label (if any)."""

    interview: Interview
    reminder: Optional[str] = None

    @property
    def has_reminder(self) -> bool:
        return self.reminder is not None

    @classmethod
    def build(cls, interview: Interview, now: datetime, window_hours: int) -> "InterviewListing":
        reminder = None
        if interview.status == InterviewStatus.UPCOMING:
            reminder = format_reminder_tag(interview.scheduled_at, now, window_hours)
        return cls(interview=interview, reminder=reminder)

"""Tracker service for job applications and interviews."""

from datetime import date, datetime
from typing import List, Optional
from uuid import uuid4

from app.config.models import AppConfig
from app.domain.models import (
    ApplicationStatus,
    Interview,
    InterviewStatus,
    JobApplication,
)
from app.logging import get_logger
from app.logging.context import log_context
from app.persistence.database import get_session
from app.persistence.exceptions import RecordNotFoundError
from app.persistence.repositories import ApplicationRepository, InterviewRepository
from app.utils.timestamps import utc_now

from .reminders import InterviewListing

logger = get_logger(__name__, component="tracker")


class TrackerService:
    """Per-user job application and interview tracking."""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()

    # Applications

    def add_application(
        self,
        user_id: str,
        position: str,
        company: str,
        applied_date: Optional[date] = None,
        status: ApplicationStatus = ApplicationStatus.APPLIED,
    ) -> JobApplication:
        """Record a new application (applied today unless a date is given)."""
        application = JobApplication(
            id=uuid4().hex,
            user_id=user_id,
            position=position,
            company=company,
            applied_date=applied_date or utc_now().date(),
            status=status,
        )

        with log_context(user_id=user_id, application_id=application.id):
            with get_session() as session:
                saved = ApplicationRepository(session).add(application)

            logger.info(
                f"Application added: {saved.position} at {saved.company}",
                extra={"event": "tracker.application.added", "status": saved.status.value},
            )
        return saved

    def list_applications(self, user_id: str) -> List[JobApplication]:
        with get_session() as session:
            return ApplicationRepository(session).list_for_user(user_id)

    def set_application_status(
        self, user_id: str, application_id: str, status: ApplicationStatus
    ) -> JobApplication:
        """
        Change an application's status.

        Raises:
            ValueError: If status is not a known ApplicationStatus
            RecordNotFoundError: If the user has no application with that id
        """
        status = ApplicationStatus(status)

        with log_context(user_id=user_id, application_id=application_id):
            with get_session() as session:
                updated = ApplicationRepository(session).update_status(
                    user_id, application_id, status
                )

            logger.info(
                f"Application status set to {status.value}",
                extra={"event": "tracker.application.status_changed", "status": status.value},
            )
        return updated

    def delete_application(self, user_id: str, application_id: str) -> None:
        with log_context(user_id=user_id, application_id=application_id):
            with get_session() as session:
                ApplicationRepository(session).delete(user_id, application_id)

            logger.info("Application deleted", extra={"event": "tracker.application.deleted"})

    # Interviews

    def schedule_interview(
        self, user_id: str, position: str, company: str, scheduled_at: datetime
    ) -> Interview:
        """Record a new upcoming interview."""
        interview = Interview(
            id=uuid4().hex,
            user_id=user_id,
            position=position,
            company=company,
            scheduled_at=scheduled_at,
            status=InterviewStatus.UPCOMING,
        )

        with log_context(user_id=user_id, interview_id=interview.id):
            with get_session() as session:
                saved = InterviewRepository(session).add(interview)

            logger.info(
                f"Interview scheduled: {saved.position} at {saved.company}",
                extra={
                    "event": "tracker.interview.scheduled",
                    "scheduled_at": saved.scheduled_at.isoformat(),
                },
            )
        return saved

    def list_interviews(
        self, user_id: str, now: Optional[datetime] = None
    ) -> List[InterviewListing]:
        """
        List the user's interviews in chronological order.

        Upcoming interviews whose start time has passed are marked Completed
        (and persisted) first. Upcoming interviews starting within the
        reminder window carry a reminder label.
        """
        now = now or utc_now()
        window_hours = self.config.reminders.window_hours

        with get_session() as session:
            repo = InterviewRepository(session)
            completed = repo.complete_past(user_id, now)
            interviews = repo.list_for_user(user_id)

        if completed:
            logger.info(
                f"Marked {completed} past interview(s) as completed",
                extra={"event": "tracker.interview.auto_completed", "count": completed},
            )

        return [InterviewListing.build(i, now, window_hours) for i in interviews]

    def update_interview(
        self,
        user_id: str,
        interview_id: str,
        position: Optional[str] = None,
        company: Optional[str] = None,
        scheduled_at: Optional[datetime] = None,
        status: Optional[InterviewStatus] = None,
    ) -> Interview:
        """
        Edit an interview. Fields left as None keep their current value.

        Raises:
            RecordNotFoundError: If the user has no interview with that id
        """
        with log_context(user_id=user_id, interview_id=interview_id):
            with get_session() as session:
                repo = InterviewRepository(session)
                current = repo.get(user_id, interview_id)
                if current is None:
                    raise RecordNotFoundError(f"Interview {interview_id} not found")

                changes = {
                    key: value
                    for key, value in (
                        ("position", position),
                        ("company", company),
                        ("scheduled_at", scheduled_at),
                        ("status", InterviewStatus(status) if status is not None else None),
                    )
                    if value is not None
                }
                updated = repo.update(
                    Interview.model_validate({**current.model_dump(), **changes})
                )

            logger.info(
                "Interview updated",
                extra={"event": "tracker.interview.updated", "status": updated.status.value},
            )
        return updated

    def delete_interview(self, user_id: str, interview_id: str) -> None:
        """
        Delete one of the user's interviews.

        Raises:
            RecordNotFoundError: If the user has no interview with that id
        """
        with log_context(user_id=user_id, interview_id=interview_id):
            with get_session() as session:
                InterviewRepository(session).delete(user_id, interview_id)

            logger.info("Interview deleted", extra={"event": "tracker.interview.deleted"})

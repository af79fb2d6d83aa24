"""Data access layer (repositories) for persistence operations.

This module provides repository classes for the per-user collections:
saved analyses, job applications and interviews. Repositories encapsulate
database operations and return domain models rather than ORM models. Every
query is scoped by user_id.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.models import (
    ApplicationStatus,
    Interview,
    InterviewStatus,
    JobApplication,
    SavedAnalysis,
)

from .exceptions import DataIntegrityError, PersistenceError, RecordNotFoundError
from .schema import (
    InterviewModel,
    JobApplicationModel,
    SavedAnalysisModel,
    _format_datetime,
)

logger = logging.getLogger(__name__)


class AnalysisRepository:
    """Repository for saved match reports (append, list, delete)."""

    def __init__(self, session: Session):
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def add(self, analysis: SavedAnalysis) -> SavedAnalysis:
        """Append a saved analysis.

        Raises:
            DataIntegrityError: If a record with the same id already exists
            PersistenceError: If database error occurs
        """
        try:
            model = SavedAnalysisModel.from_domain(analysis)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()
        except IntegrityError as e:
            logger.error(f"Integrity error saving analysis {analysis.id}: {e}", exc_info=True)
            raise DataIntegrityError(f"Failed to save analysis due to constraint violation: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error saving analysis {analysis.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to save analysis: {e}") from e

    def list_for_user(self, user_id: str) -> List[SavedAnalysis]:
        """List a user's saved analyses, newest first.

        Raises:
            PersistenceError: If database error occurs
        """
        try:
            stmt = (
                select(SavedAnalysisModel)
                .where(SavedAnalysisModel.user_id == user_id)
                .order_by(SavedAnalysisModel.saved_at.desc(), SavedAnalysisModel.id)
            )
            return [model.to_domain() for model in self.session.execute(stmt).scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing analyses for user {user_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list analyses: {e}") from e

    def delete(self, user_id: str, analysis_id: str) -> None:
        """Delete one of the user's saved analyses.

        Raises:
            RecordNotFoundError: If the user has no analysis with that id
            PersistenceError: If database error occurs
        """
        try:
            stmt = delete(SavedAnalysisModel).where(
                SavedAnalysisModel.id == analysis_id,
                SavedAnalysisModel.user_id == user_id,
            )
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Analysis {analysis_id} not found")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting analysis {analysis_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to delete analysis: {e}") from e


class ApplicationRepository:
    """Repository for tracked job applications."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, application: JobApplication) -> JobApplication:
        """Insert a new application.

        Raises:
            DataIntegrityError: If a record with the same id already exists
            PersistenceError: If database error occurs
        """
        try:
            model = JobApplicationModel.from_domain(application)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()
        except IntegrityError as e:
            logger.error(f"Integrity error adding application {application.id}: {e}", exc_info=True)
            raise DataIntegrityError(f"Failed to add application due to constraint violation: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error adding application {application.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to add application: {e}") from e

    def list_for_user(self, user_id: str) -> List[JobApplication]:
        """List a user's applications, most recently applied first."""
        try:
            stmt = (
                select(JobApplicationModel)
                .where(JobApplicationModel.user_id == user_id)
                .order_by(JobApplicationModel.applied_date.desc(), JobApplicationModel.company)
            )
            return [model.to_domain() for model in self.session.execute(stmt).scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing applications for user {user_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list applications: {e}") from e

    def update_status(
        self, user_id: str, application_id: str, status: ApplicationStatus
    ) -> JobApplication:
        """Change an application's status.

        Raises:
            RecordNotFoundError: If the user has no application with that id
            PersistenceError: If database error occurs
        """
        try:
            model = self._get_owned(user_id, application_id)
            model.status = ApplicationStatus(status).value
            self.session.flush()
            return model.to_domain()
        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error updating application {application_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to update application: {e}") from e

    def delete(self, user_id: str, application_id: str) -> None:
        """Delete one of the user's applications.

        Raises:
            RecordNotFoundError: If the user has no application with that id
            PersistenceError: If database error occurs
        """
        try:
            stmt = delete(JobApplicationModel).where(
                JobApplicationModel.id == application_id,
                JobApplicationModel.user_id == user_id,
            )
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Application {application_id} not found")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting application {application_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to delete application: {e}") from e

    def _get_owned(self, user_id: str, application_id: str) -> JobApplicationModel:
        model = self.session.get(JobApplicationModel, application_id)
        if model is None or model.user_id != user_id:
            raise RecordNotFoundError(f"Application {application_id} not found")
        return model


class InterviewRepository:
    """Repository for scheduled interviews."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, interview: Interview) -> Interview:
        """Insert a new interview.

        Raises:
            DataIntegrityError: If a record with the same id already exists
            PersistenceError: If database error occurs
        """
        try:
            model = InterviewModel.from_domain(interview)
            self.session.add(model)
            self.session.flush()
            return model.to_domain()
        except IntegrityError as e:
            logger.error(f"Integrity error adding interview {interview.id}: {e}", exc_info=True)
            raise DataIntegrityError(f"Failed to add interview due to constraint violation: {e}") from e
        except SQLAlchemyError as e:
            logger.error(f"Error adding interview {interview.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to add interview: {e}") from e

    def get(self, user_id: str, interview_id: str) -> Optional[Interview]:
        """Retrieve one of the user's interviews, or None if not found."""
        try:
            model = self.session.get(InterviewModel, interview_id)
            if model is None or model.user_id != user_id:
                return None
            return model.to_domain()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving interview {interview_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to retrieve interview: {e}") from e

    def list_for_user(self, user_id: str) -> List[Interview]:
        """List a user's interviews in chronological order."""
        try:
            stmt = (
                select(InterviewModel)
                .where(InterviewModel.user_id == user_id)
                .order_by(InterviewModel.scheduled_at.asc(), InterviewModel.id)
            )
            return [model.to_domain() for model in self.session.execute(stmt).scalars().all()]
        except SQLAlchemyError as e:
            logger.error(f"Error listing interviews for user {user_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to list interviews: {e}") from e

    def update(self, interview: Interview) -> Interview:
        """Replace the editable fields of an existing interview.

        Raises:
            RecordNotFoundError: If the user has no interview with that id
            PersistenceError: If database error occurs
        """
        try:
            model = self.session.get(InterviewModel, interview.id)
            if model is None or model.user_id != interview.user_id:
                raise RecordNotFoundError(f"Interview {interview.id} not found")

            model.position = interview.position
            model.company = interview.company
            model.scheduled_at = _format_datetime(interview.scheduled_at)
            model.status = interview.status.value

            self.session.flush()
            return model.to_domain()

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error updating interview {interview.id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to update interview: {e}") from e

    def complete_past(self, user_id: str, now: datetime) -> int:
        """Mark the user's upcoming interviews that already started as completed.

        Returns:
            Number of interviews updated
        """
        try:
            stmt = (
                update(InterviewModel)
                .where(
                    InterviewModel.user_id == user_id,
                    InterviewModel.status == InterviewStatus.UPCOMING.value,
                    InterviewModel.scheduled_at < _format_datetime(now),
                )
                .values(status=InterviewStatus.COMPLETED.value)
            )
            result = self.session.execute(stmt)
            self.session.flush()
            return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Error completing past interviews for user {user_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to complete past interviews: {e}") from e

    def delete(self, user_id: str, interview_id: str) -> None:
        """Delete one of the user's interviews.

        Raises:
            RecordNotFoundError: If the user has no interview with that id
            PersistenceError: If database error occurs
        """
        try:
            stmt = delete(InterviewModel).where(
                InterviewModel.id == interview_id,
                InterviewModel.user_id == user_id,
            )
            result = self.session.execute(stmt)
            self.session.flush()

            if result.rowcount == 0:
                raise RecordNotFoundError(f"Interview {interview_id} not found")

        except RecordNotFoundError:
            raise
        except SQLAlchemyError as e:
            logger.error(f"Error deleting interview {interview_id}: {e}", exc_info=True)
            raise PersistenceError(f"Failed to delete interview: {e}") from e

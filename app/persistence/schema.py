"""Database schema definition and ORM models.

This module defines SQLAlchemy ORM models for the database schema and provides
conversion methods between ORM models and domain models.
"""

import json
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import Column, Index, String, Text, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

from app.domain.models import Interview, JobApplication, SavedAnalysis

logger = logging.getLogger(__name__)

Base = declarative_base()

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


class SavedAnalysisModel(Base):
    """ORM model for the analyses table (append-only match reports)."""

    __tablename__ = "analyses"

    id = Column(String(32), primary_key=True, nullable=False)
    user_id = Column(String(255), nullable=False)

    # Token lists stored as JSON arrays
    matched = Column(Text, nullable=False)
    missing = Column(Text, nullable=False)
    match_rate = Column(String(8), nullable=False)

    saved_at = Column(String(50), nullable=False)

    __table_args__ = (Index("idx_analyses_user_saved", "user_id", "saved_at"),)

    def to_domain(self) -> SavedAnalysis:
        """Convert ORM model to domain model."""
        return SavedAnalysis(
            id=self.id,
            user_id=self.user_id,
            matched=_load_list(self.matched),
            missing=_load_list(self.missing),
            match_rate=self.match_rate,
            saved_at=_parse_datetime(self.saved_at),
        )

    @classmethod
    def from_domain(cls, analysis: SavedAnalysis) -> "SavedAnalysisModel":
        """Create ORM model from domain model."""
        return cls(
            id=analysis.id,
            user_id=analysis.user_id,
            matched=json.dumps(list(analysis.matched)),
            missing=json.dumps(list(analysis.missing)),
            match_rate=analysis.match_rate,
            saved_at=_format_datetime(analysis.saved_at),
        )


class JobApplicationModel(Base):
    """ORM model for the applications table."""

    __tablename__ = "applications"

    id = Column(String(32), primary_key=True, nullable=False)
    user_id = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    applied_date = Column(String(10), nullable=False)
    status = Column(String(20), nullable=False)

    __table_args__ = (Index("idx_applications_user", "user_id", "applied_date"),)

    def to_domain(self) -> JobApplication:
        """Convert ORM model to domain model."""
        return JobApplication(
            id=self.id,
            user_id=self.user_id,
            position=self.position,
            company=self.company,
            applied_date=date.fromisoformat(self.applied_date),
            status=self.status,
        )

    @classmethod
    def from_domain(cls, application: JobApplication) -> "JobApplicationModel":
        """Create ORM model from domain model."""
        return cls(
            id=application.id,
            user_id=application.user_id,
            position=application.position,
            company=application.company,
            applied_date=application.applied_date.isoformat(),
            status=application.status.value,
        )


class InterviewModel(Base):
    """ORM model for the interviews table."""

    __tablename__ = "interviews"

    id = Column(String(32), primary_key=True, nullable=False)
    user_id = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    scheduled_at = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False)

    __table_args__ = (Index("idx_interviews_user_scheduled", "user_id", "scheduled_at"),)

    def to_domain(self) -> Interview:
        """Convert ORM model to domain model."""
        return Interview(
            id=self.id,
            user_id=self.user_id,
            position=self.position,
            company=self.company,
            scheduled_at=_parse_datetime(self.scheduled_at),
            status=self.status,
        )

    @classmethod
    def from_domain(cls, interview: Interview) -> "InterviewModel":
        """Create ORM model from domain model."""
        return cls(
            id=interview.id,
            user_id=interview.user_id,
            position=interview.position,
            company=interview.company,
            scheduled_at=_format_datetime(interview.scheduled_at),
            status=interview.status.value,
        )


def _load_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return list(json.loads(raw))


def _format_datetime(dt: Optional[datetime]) -> Optional[str]:
    """Format datetime as a fixed-width ISO 8601 UTC string (sorts chronologically)."""
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)

    return dt.strftime(TIMESTAMP_FORMAT)


def _parse_datetime(dt_str: Optional[str]) -> Optional[datetime]:
    """Parse a stored ISO 8601 string back to an aware UTC datetime."""
    if not dt_str:
        return None

    dt_str = dt_str.rstrip("Z")

    try:
        dt = datetime.strptime(dt_str, "%Y-%m-%dT%H:%M:%S.%f")
    except ValueError:
        dt = datetime.strptime(dt_str, "%Y-%m-%dT%H:%M:%S")

    return dt.replace(tzinfo=timezone.utc)


def create_schema(engine: Engine) -> None:
    """Create all tables and indexes if they don't exist (idempotent).

    Args:
        engine: SQLAlchemy engine instance
    """
    try:
        Base.metadata.create_all(engine, checkfirst=True)
        tables = inspect(engine).get_table_names()
        logger.debug(f"Database schema ready. Tables: {', '.join(tables)}")
    except Exception as e:
        logger.error(f"Failed to create database schema: {e}", exc_info=True)
        raise

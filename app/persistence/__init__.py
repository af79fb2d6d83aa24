"""Persistence layer for saved analyses, applications and interviews.

Public API:
    # Database initialization and session management
    - init_database(database_url: str) -> None
    - get_session() -> ContextManager[Session]
    - close_database() -> None
    - get_engine() -> Engine

    # Repository classes
    - AnalysisRepository: append/list/delete saved match reports
    - ApplicationRepository: CRUD for job applications
    - InterviewRepository: CRUD for interviews

    # Exceptions
    - PersistenceError: Base exception for all persistence errors
    - DatabaseConnectionError: Database connection/initialization failures
    - RecordNotFoundError: Required record not found
    - DataIntegrityError: Constraint violations

Example usage:
    >>> from app.persistence import init_database, get_session, AnalysisRepository
    >>> init_database("sqlite:///./data/careerpath.db")
    >>> with get_session() as session:
    ...     saved = AnalysisRepository(session).list_for_user("user-123")
"""

from .database import close_database, get_engine, get_session, init_database, is_initialized
from .exceptions import (
    DatabaseConnectionError,
    DataIntegrityError,
    PersistenceError,
    RecordNotFoundError,
)
from .repositories import AnalysisRepository, ApplicationRepository, InterviewRepository

__all__ = [
    # Database functions
    "init_database",
    "get_session",
    "close_database",
    "get_engine",
    "is_initialized",
    # Repositories
    "AnalysisRepository",
    "ApplicationRepository",
    "InterviewRepository",
    # Exceptions
    "PersistenceError",
    "DatabaseConnectionError",
    "RecordNotFoundError",
    "DataIntegrityError",
]

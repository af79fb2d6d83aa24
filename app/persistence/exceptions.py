"""Persistence layer exceptions.

All persistence exceptions inherit from PersistenceError so callers can
report any storage failure with a single except clause.
"""


class PersistenceError(Exception):
    """Base exception for all persistence layer errors."""

    pass


class DatabaseConnectionError(PersistenceError):
    """Raised when the database cannot be initialized or reached.

    Examples:
    - Empty or malformed database URL
    - Database file not accessible
    - init_database() not called before use
    """

    pass


class RecordNotFoundError(PersistenceError):
    """Raised when a record does not exist or belongs to another user.

    Optional lookups return None instead of raising this.
    """

    pass


class DataIntegrityError(PersistenceError):
    """Raised when a database constraint is violated (e.g. duplicate id)."""

    pass

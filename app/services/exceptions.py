"""Exceptions raised by the application services."""


class ServiceError(Exception):
    """Base exception for user-facing service failures."""

    pass


class NotAuthenticatedError(ServiceError):
    """Raised when an operation needs a user but none is signed in."""

    pass


class EmptyInputError(ServiceError):
    """Raised when there is nothing to analyze (blank resume or job text)."""

    pass

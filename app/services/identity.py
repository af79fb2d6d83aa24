"""Identity lookup for the current user."""

import os
from typing import Optional

from .exceptions import NotAuthenticatedError

USER_ID_ENV_VAR = "CAREERPATH_USER_ID"


def resolve_user_id(explicit: Optional[str] = None) -> str:
    """Return the current user's stable identifier.

    Args:
        explicit: Identifier supplied by the caller (e.g. --user flag)

    Returns:
        The explicit identifier if given, else the CAREERPATH_USER_ID variable

    Raises:
        NotAuthenticatedError: If no identifier is available
    """
    for candidate in (explicit, os.getenv(USER_ID_ENV_VAR)):
        if candidate and candidate.strip():
            return candidate.strip()

    raise NotAuthenticatedError(
        f"No user signed in. Pass --user or set {USER_ID_ENV_VAR}."
    )

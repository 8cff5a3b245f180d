"""
Current-user resolution.

Authentication happens upstream: the session provider in front of this
service validates the user's session and forwards the user id in a trusted
header (AUTH_USER_HEADER). This module only turns that header into an
explicit principal that routers hand to the service layer.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from app.config import AUTH_USER_HEADER
from app.exceptions import Unauthorized


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller."""
    id: str


def get_current_user(request: Request) -> Optional[CurrentUser]:
    """
    Dependency returning the signed-in user, or None for anonymous requests.

    Does not raise: each service operation decides via require_user().
    """
    user_id = (request.headers.get(AUTH_USER_HEADER) or '').strip()
    if not user_id:
        return None
    return CurrentUser(id=user_id)


def require_user(user: Optional[CurrentUser]) -> CurrentUser:
    """Return the user, raising Unauthorized for anonymous requests."""
    if user is None:
        raise Unauthorized()
    return user

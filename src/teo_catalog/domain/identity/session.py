"""
Identity collaborator interface and the in-memory session implementation.

Authentication itself (sign-in providers, tokens) lives outside the core;
the core only asks who the current user is.
"""

from typing import Optional, Protocol

from loguru import logger

from teo_catalog.domain.catalog.models import User

from .exceptions import SignInRequired


class IdentityProvider(Protocol):
    """Identity/session collaborator."""

    def current_user(self) -> Optional[User]: ...

    def login(self, user: User) -> None: ...

    def logout(self) -> None: ...


class SessionIdentity:
    """Holds the signed-in user for one session."""

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user

    def current_user(self) -> Optional[User]:
        return self._user

    def login(self, user: User) -> None:
        self._user = user
        logger.info(f"User {user.id} signed in")

    def logout(self) -> None:
        if self._user is not None:
            logger.info(f"User {self._user.id} signed out")
        self._user = None


def require_user(identity: IdentityProvider, action: str = "continue") -> User:
    """Return the signed-in user or raise SignInRequired."""
    user = identity.current_user()
    if user is None:
        raise SignInRequired(action)
    return user

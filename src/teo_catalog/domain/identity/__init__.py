"""Identity domain - who is signed in to the session."""

from .exceptions import SessionError, SignInRequired
from .session import IdentityProvider, SessionIdentity, require_user

__all__ = [
    "SessionError",
    "SignInRequired",
    "IdentityProvider",
    "SessionIdentity",
    "require_user",
]

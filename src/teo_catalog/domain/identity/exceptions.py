"""Session and identity exceptions."""


class SessionError(Exception):
    """Base exception for session operations."""

    pass


class SignInRequired(SessionError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, action: str = "continue"):
        self.action = action
        super().__init__(f"Please sign in or create an account to {action}.")

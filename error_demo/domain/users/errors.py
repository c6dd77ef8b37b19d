"""
Domain-specific errors for the users bounded context.

All errors raised from the domain and application layers must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

USER_NOT_FOUND_MESSAGE = "Error: User does not exists"


class UserDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(UserDomainError):
    """Raised when a user identifier is not present in the directory."""

    def __init__(self, user_id: int, message: str = USER_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)
        self.user_id = user_id

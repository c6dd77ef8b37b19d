"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FindUserQuery:
    """Input DTO for looking up a single user.

    Attributes:
        user_id: Identifier taken from the request path.
    """

    user_id: int


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        id: User identifier.
        first_name: Given name.
        last_name: Family name.
    """

    id: int
    first_name: str
    last_name: str

"""
Domain entities for the users bounded context.

Entities represent core business objects with identity.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A directory user. Identity is the integer ``id``."""

    id: int
    first_name: str
    last_name: str

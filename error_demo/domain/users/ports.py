"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from error_demo.domain.users.entities import User


class UserRepository(ABC):
    """Port for read-only access to the user directory."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with the given id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return every user in the directory."""
        raise NotImplementedError

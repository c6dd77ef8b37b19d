"""
Adapter: In-memory user directory.

Implements UserRepository port.
The directory is built once from a fixed seed list and never mutated.
"""

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional

from error_demo.domain.users.entities import User
from error_demo.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

SEED_USERS: tuple[User, ...] = (
    User(id=1, first_name="Pepe", last_name="Gonzalez"),
    User(id=2, first_name="Maria", last_name="Perez"),
    User(id=3, first_name="Juan", last_name="Castro"),
    User(id=4, first_name="Manuel", last_name="Chinchilla"),
)


class InMemoryUserRepository(UserRepository):
    """Read-only user directory keyed by user id.

    Iteration order of ``find_all`` follows the seed order.
    """

    def __init__(self, users: Iterable[User] = SEED_USERS) -> None:
        by_id: dict[int, User] = {}
        for user in users:
            if user.id in by_id:
                raise ValueError(f"Duplicate user id in seed list: {user.id}")
            by_id[user.id] = user
        self._users = MappingProxyType(by_id)
        logger.debug("User directory initialized with %d users", len(by_id))

    def find_by_id(self, user_id: int) -> Optional[User]:
        """Return the user for ``user_id``, or None if not seeded."""
        return self._users.get(user_id)

    def find_all(self) -> list[User]:
        return list(self._users.values())


_directory = InMemoryUserRepository()


def get_user_directory() -> InMemoryUserRepository:
    """Return the process-wide directory built at import time."""
    return _directory

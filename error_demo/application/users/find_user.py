"""
Use case: Look up a single user by identifier.

Input: FindUserQuery (user_id)
Output: UserResult
Side effects: None.
Failure cases: UserNotFoundError.
"""

import logging

from error_demo.application.users.dtos import FindUserQuery, UserResult
from error_demo.domain.users.errors import UserNotFoundError
from error_demo.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class FindUserUseCase:
    """Resolves a user from the directory or fails with UserNotFoundError."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: FindUserQuery) -> UserResult:
        """Run the lookup.

        Args:
            query: The lookup request carrying the user id.

        Returns:
            The matching user.

        Raises:
            UserNotFoundError: If the id is not in the directory.
        """
        logger.info("Looking up user_id=%s", query.user_id)

        user = self._user_repo.find_by_id(query.user_id)
        if user is None:
            raise UserNotFoundError(query.user_id)

        return UserResult(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
        )

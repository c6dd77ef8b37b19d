"""
Use case: List every user in the directory.

Input: None
Output: list[UserResult]
Side effects: None.
Failure cases: None.
"""

from error_demo.application.users.dtos import UserResult
from error_demo.domain.users.ports import UserRepository


class ListUsersUseCase:
    """Returns the full directory in seed order."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        return [
            UserResult(id=u.id, first_name=u.first_name, last_name=u.last_name)
            for u in self._user_repo.find_all()
        ]

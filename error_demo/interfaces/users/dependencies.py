"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the shared user
directory into use cases via constructor injection.
"""

from error_demo.application.users.find_user import FindUserUseCase
from error_demo.application.users.list_users import ListUsersUseCase
from error_demo.infrastructure.users.user_repository import get_user_directory


def get_find_user_use_case() -> FindUserUseCase:
    """Build FindUserUseCase over the process-wide directory."""
    return FindUserUseCase(user_repo=get_user_directory())


def get_list_users_use_case() -> ListUsersUseCase:
    """Build ListUsersUseCase over the process-wide directory."""
    return ListUsersUseCase(user_repo=get_user_directory())

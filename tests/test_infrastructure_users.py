"""
Tests for the in-memory user directory adapter.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from error_demo.domain.users.entities import User
from error_demo.infrastructure.users import user_repository
from error_demo.infrastructure.users.user_repository import (
    SEED_USERS,
    InMemoryUserRepository,
    get_user_directory,
)


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    def test_seed_ids_are_unique(self) -> None:
        """The seed list holds four users with distinct ids."""
        assert sorted(u.id for u in SEED_USERS) == [1, 2, 3, 4]

    @pytest.mark.parametrize("user", SEED_USERS)
    def test_find_by_id_returns_seeded_user(self, user: User) -> None:
        """Every seeded user can be found by id."""
        assert InMemoryUserRepository().find_by_id(user.id) == user

    def test_find_by_id_absent(self) -> None:
        """Unknown ids return None."""
        assert InMemoryUserRepository().find_by_id(5) is None

    def test_find_all_is_a_copy(self) -> None:
        """Mutating the returned list never changes the directory."""
        repo = InMemoryUserRepository()
        users = repo.find_all()
        users.clear()
        assert len(repo.find_all()) == 4

    def test_duplicate_ids_rejected(self) -> None:
        """A seed list with duplicate ids is refused."""
        with pytest.raises(ValueError, match="Duplicate user id"):
            InMemoryUserRepository(
                [User(1, "A", "B"), User(1, "C", "D")]
            )

    def test_process_wide_directory_is_shared(self) -> None:
        """The directory is built once and reused."""
        assert get_user_directory() is get_user_directory()

    def test_directory_exists_before_first_request(self) -> None:
        """The shared directory is built at import time, not lazily."""
        assert user_repository._directory is not None
        assert get_user_directory() is user_repository._directory

    def test_concurrent_access_sees_one_directory(self) -> None:
        """Lookups from worker threads all share a single directory."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            directories = list(pool.map(lambda _: get_user_directory(), range(32)))
        assert all(d is directories[0] for d in directories)

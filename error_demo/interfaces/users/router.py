"""
FastAPI router for the users demonstration endpoints.

``/index`` and ``/number`` always fail; ``/show/{id}`` fails for unknown ids.
Nothing here catches errors: every failure is translated by the
centralized error handlers.
"""

import logging

from fastapi import APIRouter, Depends

from error_demo.application.users.dtos import FindUserQuery, UserResult
from error_demo.application.users.find_user import FindUserUseCase
from error_demo.application.users.list_users import ListUsersUseCase
from error_demo.interfaces.users.dependencies import (
    get_find_user_use_case,
    get_list_users_use_case,
)
from error_demo.interfaces.users.schemas import UserResponse
from error_demo.shared.errors.translation import ErrorResponse

logger = logging.getLogger(__name__)

MALFORMED_NUMBER = "1s"

router = APIRouter(tags=["users"])


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(
        id=result.id,
        first_name=result.first_name,
        last_name=result.last_name,
    )


@router.get(
    "/index",
    responses={500: {"model": ErrorResponse}},
    summary="Divide by zero",
    description="Always fails with a division by zero.",
)
def index() -> str:
    quotient = 1 // 0
    logger.info("Quotient: %d", quotient)
    return "Hello World"


@router.get(
    "/number",
    responses={500: {"model": ErrorResponse}},
    summary="Parse a malformed number",
    description="Always fails parsing a malformed integer literal.",
)
def number() -> str:
    value = int(MALFORMED_NUMBER)
    return f"ok 200{value}"


@router.get(
    "/show/{user_id}",
    response_model=UserResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Show a user",
    description="Return a user by id; unknown ids fail with status 500.",
)
def show(
    user_id: int,
    use_case: FindUserUseCase = Depends(get_find_user_use_case),
) -> UserResponse:
    """Look up a single user by id."""
    return _to_response(use_case.execute(FindUserQuery(user_id=user_id)))


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List users",
    description="Return every user in the directory.",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """List all users."""
    return [_to_response(r) for r in use_case.execute()]

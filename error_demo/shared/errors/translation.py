"""
Error categories and the error-to-response translation table.

Every error that reaches the HTTP boundary is classified into exactly one
ErrorCategory. The category alone selects the label and status code of the
response body, so adding a new mapping never requires a new handler.
"""

from datetime import datetime, timezone
from enum import Enum
from http import HTTPStatus
from typing import Optional

from fastapi.exceptions import RequestValidationError, ResponseValidationError
from pydantic import BaseModel, Field, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from error_demo.domain.users.errors import UserNotFoundError


class ErrorCategory(Enum):
    """Kind of failure, carrying its response label and HTTP status.

    ``HTTP_ERROR`` has no fixed status; the status and reason phrase come
    from the raised ``HTTPException``.
    """

    DIVISION_BY_ZERO = ("Division by zero", HTTPStatus.INTERNAL_SERVER_ERROR)
    ROUTE_NOT_FOUND = ("Api Rest Not Found", HTTPStatus.NOT_FOUND)
    NUMBER_FORMAT = ("Number Format not valid", HTTPStatus.INTERNAL_SERVER_ERROR)
    USER_NOT_FOUND = ("User or role not found", HTTPStatus.INTERNAL_SERVER_ERROR)
    HTTP_ERROR = ("HTTP error", None)
    INTERNAL = ("Internal Server Error", HTTPStatus.INTERNAL_SERVER_ERROR)

    def __init__(self, label: str, status: Optional[HTTPStatus]) -> None:
        self.label = label
        self.status = status


# Most specific type wins: lookup walks the raised exception's MRO.
EXCEPTION_CATEGORIES: dict[type[Exception], ErrorCategory] = {
    ZeroDivisionError: ErrorCategory.DIVISION_BY_ZERO,
    ValueError: ErrorCategory.NUMBER_FORMAT,
    RequestValidationError: ErrorCategory.NUMBER_FORMAT,
    UserNotFoundError: ErrorCategory.USER_NOT_FOUND,
    AttributeError: ErrorCategory.USER_NOT_FOUND,
    TypeError: ErrorCategory.USER_NOT_FOUND,
    ValidationError: ErrorCategory.USER_NOT_FOUND,
    ResponseValidationError: ErrorCategory.USER_NOT_FOUND,
    StarletteHTTPException: ErrorCategory.HTTP_ERROR,
}


class ErrorResponse(BaseModel):
    """Standard error body returned for every failed request."""

    timestamp: datetime = Field(description="When the error was handled (UTC)")
    error: str = Field(description="Error category label")
    message: Optional[str] = Field(default=None, description="Raised error detail")
    status: int = Field(description="HTTP status code, same as the status line")


def classify(exc: BaseException) -> ErrorCategory:
    """Return the category of ``exc``.

    An ``HTTPException`` with status 404 is a route-not-found error; any
    other ``HTTPException`` keeps its own status as ``HTTP_ERROR``.
    Unmapped exceptions are ``INTERNAL``.
    """
    for exc_type in type(exc).__mro__:
        category = EXCEPTION_CATEGORIES.get(exc_type)
        if category is None:
            continue
        if (
            category is ErrorCategory.HTTP_ERROR
            and getattr(exc, "status_code", None) == HTTPStatus.NOT_FOUND
        ):
            return ErrorCategory.ROUTE_NOT_FOUND
        return category
    return ErrorCategory.INTERNAL


def translate(
    category: ErrorCategory,
    message: Optional[str],
    status: Optional[int] = None,
) -> ErrorResponse:
    """Build the error body for ``category``.

    Args:
        category: The classified error category.
        message: Detail text of the raised error, may be None.
        status: Status code, required for ``HTTP_ERROR`` and ignored otherwise.

    Returns:
        A fresh ErrorResponse stamped with the current UTC time.
    """
    if category.status is not None:
        code = int(category.status)
        label = category.label
    else:
        if status is None:
            raise ValueError(f"{category.name} requires an explicit status")
        code = status
        try:
            label = HTTPStatus(status).phrase
        except ValueError:
            label = category.label

    return ErrorResponse(
        timestamp=datetime.now(timezone.utc),
        error=label,
        message=message or None,
        status=code,
    )

"""
Pydantic schemas for the users API responses.

Field names are snake_case in Python and camelCase on the wire.
No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """A single user as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

"""
Pydantic models for user data.

Stored records are returned with their column names (``first_name``,
``last_name``); request and response bodies of the write endpoints use
the camelCase names ``firstName`` and ``lastName``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class UserRecord(BaseModel):
    """A row of the ``users`` table."""

    id: int
    first_name: Optional[str] = Field(None, examples=["Ada"])
    last_name: Optional[str] = Field(None, examples=["Lovelace"])


class UserPayload(BaseModel):
    """Request body of the create and update endpoints.

    Both names are optional at this level so that a missing field is
    reported by the handler as a bad request instead of a schema error.
    """

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Ada"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Lovelace"])

    model_config = {
        "populate_by_name": True,
    }


class UserNames(BaseModel):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    model_config = {
        "populate_by_name": True,
    }


class UserCreated(UserNames):
    """Response of ``POST /add``: the id assigned by the database."""

    id: int


class UserUpdated(UserNames):
    """Response of ``PUT /update/{id}``.

    ``id`` echoes the path segment as it was sent.
    """

    id: str


class UserDeleted(BaseModel):
    message: str = "User deleted successfully"
    id: str


class UserLookup(BaseModel):
    results: List[UserRecord]

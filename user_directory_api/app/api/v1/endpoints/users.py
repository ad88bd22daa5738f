"""
User endpoints for API v1.

Four routes, one statement each: look users up by name, add a user,
replace a user's names and delete a user.  Validation is limited to
presence checks.  Any storage failure, a duplicate name pair included,
is answered with a generic 500; the store has already logged the
details.
"""

import re
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from user_directory_api.app.api.dependencies import get_user_store
from user_directory_api.app.api.errors import (
    INTERNAL_ERROR,
    MISSING_FIELDS,
    MISSING_USER_ID,
    USER_NOT_FOUND,
)
from user_directory_api.app.core.exceptions import StorageError
from user_directory_api.app.schemas.user import (
    UserCreated,
    UserDeleted,
    UserLookup,
    UserPayload,
    UserUpdated,
)
from user_directory_api.app.services.user_filters import UserCriteria
from user_directory_api.app.services.user_store import UserStore

router = APIRouter()

USER_ID_PATTERN = re.compile(r"-?[0-9]+")
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def _require_names(payload: Optional[UserPayload]) -> UserPayload:
    if payload is None or not payload.first_name or not payload.last_name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)
    return payload


def _parse_user_id(user_id: str) -> int:
    """Convert a path id to an integer.

    Only plain ASCII decimal ids within SQLite's 64-bit integer range
    can name a stored user; anything else is reported as not found.
    """
    if USER_ID_PATTERN.fullmatch(user_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    numeric_id = int(user_id)
    if not SQLITE_INTEGER_MIN <= numeric_id <= SQLITE_INTEGER_MAX:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return numeric_id


def _storage_failure() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR)


@router.get("/get", response_model=UserLookup)
async def lookup_users(
    first_name: Optional[str] = Query(None, alias="firstName"),
    last_name: Optional[str] = Query(None, alias="lastName"),
    store: UserStore = Depends(get_user_store),
) -> UserLookup:
    """Return the users matching every given name.

    Without parameters all users are returned.  An empty result is
    still a 200.
    """
    criteria = UserCriteria.from_query(first_name, last_name)
    try:
        records = await store.find(criteria)
    except StorageError:
        raise _storage_failure()
    return UserLookup(results=records)


@router.post("/add", response_model=UserCreated)
async def add_user(
    payload: Optional[UserPayload] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> UserCreated:
    """Create a user from ``firstName`` and ``lastName``."""
    payload = _require_names(payload)
    try:
        user_id = await store.insert(payload.first_name, payload.last_name)
    except StorageError:
        raise _storage_failure()
    return UserCreated(id=user_id, first_name=payload.first_name, last_name=payload.last_name)


@router.put("/update/{user_id}", response_model=UserUpdated)
async def update_user(
    user_id: str,
    payload: Optional[UserPayload] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> UserUpdated:
    """Replace both names of the user ``user_id``.

    The response echoes the id exactly as it appeared in the path.
    """
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)
    payload = _require_names(payload)
    numeric_id = _parse_user_id(user_id)
    try:
        changes = await store.update(numeric_id, payload.first_name, payload.last_name)
    except StorageError:
        raise _storage_failure()
    if changes == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserUpdated(id=user_id, first_name=payload.first_name, last_name=payload.last_name)


@router.put("/update", include_in_schema=False)
@router.put("/update/", include_in_schema=False)
async def update_user_without_id() -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)


@router.delete("/delete/{user_id}", response_model=UserDeleted)
async def delete_user(
    user_id: str,
    store: UserStore = Depends(get_user_store),
) -> UserDeleted:
    """Delete the user ``user_id``."""
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_USER_ID)
    numeric_id = _parse_user_id(user_id)
    try:
        changes = await store.delete(numeric_id)
    except StorageError:
        raise _storage_failure()
    if changes == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return UserDeleted(id=user_id)


@router.delete("/delete", include_in_schema=False)
@router.delete("/delete/", include_in_schema=False)
async def delete_user_without_id() -> None:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_USER_ID)

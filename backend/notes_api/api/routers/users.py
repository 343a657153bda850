# notes_api/api/routers/users.py
from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notes_api.api.deps import get_user_service
from notes_api.schemas.user import (
    MessageOut,
    UserCreateIn,
    UserDeleteIn,
    UserOut,
    UserUpdateIn,
)
from notes_api.services import ErrorKind, Result, UserAccountService

router = APIRouter(prefix="/users", tags=["users"])

# Status code for each refused operation; routes may override per error kind
STATUS_BY_ERROR: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorKind.WRITE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}

ERROR_RESPONSES = {
    400: {"model": MessageOut},
    409: {"model": MessageOut},
}


def _error_response(result: Result, overrides: Optional[Dict[ErrorKind, int]] = None) -> JSONResponse:
    """
    Translate a failed Result into a JSON error body.

    Args:
        result: Failed service result
        overrides: Per-route replacements for STATUS_BY_ERROR

    Returns:
        JSONResponse: {"message": ...} with the mapped status code
    """
    codes = {**STATUS_BY_ERROR, **(overrides or {})}
    return JSONResponse(status_code=codes[result.error], content={"message": result.message})


@router.get("", response_model=List[UserOut], responses=ERROR_RESPONSES)
async def get_all_users(service: UserAccountService = Depends(get_user_service)):
    """
    List every user, without password hashes.

    Returns 400 {"message": "No Users Found"} when there are no users.
    """
    result = await service.list_users()
    if not result.ok:
        return _error_response(result)
    return result.data


@router.post(
    "",
    response_model=MessageOut,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_new_user(body: UserCreateIn, service: UserAccountService = Depends(get_user_service)):
    """
    Create a user account.

    Args:
        body: Request body containing:
            - username: str (must be unique)
            - password: str (hashed before storage)
            - roles: list[str] (non-empty)

    Returns:
        201 {"message": "New User <username> Created"}

    Errors:
        400: missing fields, or storage produced no record
        409: username already taken
    """
    result = await service.create_user(body.username, body.password, body.roles)
    if not result.ok:
        return _error_response(result)
    return {"message": result.message}


@router.patch("", response_model=MessageOut, responses=ERROR_RESPONSES)
async def update_user(body: UserUpdateIn, service: UserAccountService = Depends(get_user_service)):
    """
    Update username, roles and active flag of a user; the password only when given.

    Errors:
        400: missing fields or unknown id
        409: username held by another user
    """
    result = await service.update_user(
        body.id,
        body.username,
        body.roles,
        body.active,
        password=body.password,
    )
    if not result.ok:
        return _error_response(result)
    return {"message": result.message}


@router.delete("", response_model=str, responses={400: {"model": MessageOut}})
async def delete_user(
    body: Optional[UserDeleteIn] = None,
    service: UserAccountService = Depends(get_user_service),
):
    """
    Delete a user that owns no notes.

    Returns:
        200 "Username <username> With ID <id> Deleted"

    Errors:
        400: missing id, user still has notes, or unknown id
    """
    result = await service.delete_user(body.id if body else None)
    if not result.ok:
        # Assigned notes are reported as a bad request, not a conflict
        return _error_response(result, overrides={ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST})
    return result.data

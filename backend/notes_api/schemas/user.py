# notes_api/schemas/user.py
"""
Pydantic schemas for the user management endpoints.
Every input field is optional here: presence is checked by the service so that
a missing field yields the same 400 response as an empty one.
"""
from pydantic import BaseModel, StrictBool
from typing import Optional, List

__all__ = ["UserOut", "UserCreateIn", "UserUpdateIn", "UserDeleteIn", "MessageOut"]

# ========== Return models ==========
class UserOut(BaseModel):
    """User as listed by GET /users (never carries the password)."""
    id: str  # User unique identifier
    username: str  # User login name
    roles: List[str]  # Role labels, e.g. ["Employee"]
    active: bool  # Whether the account is enabled


class MessageOut(BaseModel):
    """Confirmation or error body."""
    message: str


# ========== Input models ==========
class UserCreateIn(BaseModel):
    """Request body for POST /users."""
    username: Optional[str] = None
    password: Optional[str] = None  # Plain text, hashed server-side
    roles: Optional[List[str]] = None  # Must be non-empty


class UserUpdateIn(BaseModel):
    """
    Request body for PATCH /users.
    Omitting password keeps the stored hash.
    """
    id: Optional[str] = None
    username: Optional[str] = None
    roles: Optional[List[str]] = None
    active: Optional[StrictBool] = None  # "true" or 1 are rejected, not coerced
    password: Optional[str] = None


class UserDeleteIn(BaseModel):
    """Request body for DELETE /users."""
    id: Optional[str] = None

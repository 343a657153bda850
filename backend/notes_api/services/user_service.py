"""
User Account Service

List / create / update / delete user accounts.

Works against two storage collections: users (owned) and notes (read-only,
consulted so a user who still owns notes is never removed). Duplicate
usernames are rejected by looking the name up before writing; the lookup and
the write are not atomic, so two concurrent requests for the same name can
both pass the check.
"""
import logging
from typing import Any, Awaitable, Callable, Optional

from notes_api.core.security import hash_password_async
from notes_api.storage import Collection
from .result import ErrorKind, Result

logger = logging.getLogger("uvicorn.error")

Hasher = Callable[[str], Awaitable[str]]

PASSWORD_FIELD = "password"


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def _is_role_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


class UserAccountService:
    """CRUD operations on user accounts, each returning a Result."""

    def __init__(self, users: Collection, notes: Collection, hasher: Optional[Hasher] = None):
        self.users = users
        self.notes = notes
        self.hasher = hasher or hash_password_async

    async def list_users(self) -> Result:
        """All users, password excluded. NOT_FOUND when there are none."""
        users = await self.users.find(exclude=(PASSWORD_FIELD,))
        if not users:
            return Result.failure(ErrorKind.NOT_FOUND, "No Users Found")
        return Result.success(users)

    async def create_user(self, username: Any, password: Any, roles: Any) -> Result:
        """
        Create a user with a hashed password. New users are active.

        Returns:
            Result carrying the stored record (without password) on success;
            VALIDATION, CONFLICT or WRITE otherwise.
        """
        if not _is_text(username) or not _is_text(password) or not _is_role_list(roles):
            return Result.failure(ErrorKind.VALIDATION, "All Fields Are Required")

        duplicate = await self.users.find_one(username=username)
        if duplicate:
            logger.warning("[users] create rejected, username=%s already taken", username)
            return Result.failure(ErrorKind.CONFLICT, "Duplicate Username")

        hashed = await self.hasher(password)
        user = await self.users.create({
            "username": username,
            PASSWORD_FIELD: hashed,
            "roles": list(roles),
        })
        if not user:
            return Result.failure(ErrorKind.WRITE, "Invalid User Data Received")

        logger.info("[users] created username=%s id=%s", username, user["id"])
        user.pop(PASSWORD_FIELD, None)
        return Result.success(user, f"New User {username} Created")

    async def update_user(
        self,
        user_id: Any,
        username: Any,
        roles: Any,
        active: Any,
        password: Any = None,
    ) -> Result:
        """
        Replace username, roles and active flag of an existing user.

        The stored password hash is only replaced when a new password is given.
        Keeping one's own username is not a conflict.
        """
        if not user_id or not _is_text(username) or not _is_role_list(roles) or not isinstance(active, bool):
            return Result.failure(ErrorKind.VALIDATION, "All Fields Are Required")

        user = await self.users.find_by_id(user_id)
        if not user:
            return Result.failure(ErrorKind.NOT_FOUND, "User Not Found")

        duplicate = await self.users.find_one(username=username)
        if duplicate and str(duplicate["id"]) != str(user["id"]):
            logger.warning("[users] update of id=%s rejected, username=%s already taken", user["id"], username)
            return Result.failure(ErrorKind.CONFLICT, "Duplicate Username")

        user["username"] = username
        user["roles"] = list(roles)
        user["active"] = active
        if password:
            user[PASSWORD_FIELD] = await self.hasher(password)

        updated = await self.users.save(user)
        logger.info("[users] updated id=%s username=%s password_changed=%s",
                    updated["id"], updated["username"], bool(password))
        updated.pop(PASSWORD_FIELD, None)
        return Result.success(updated, f"{updated['username']} Updated")

    async def delete_user(self, user_id: Any) -> Result:
        """
        Remove a user that owns no notes.

        The confirmation is built from the record read before deletion.
        """
        if not user_id:
            return Result.failure(ErrorKind.VALIDATION, "User ID Is Required")

        note = await self.notes.find_one(user_id=user_id)
        if note:
            logger.warning("[users] delete of id=%s rejected, user has assigned notes", user_id)
            return Result.failure(ErrorKind.CONFLICT, "User Has Assigned Notes")

        user = await self.users.find_by_id(user_id)
        if not user:
            return Result.failure(ErrorKind.NOT_FOUND, "User Not Found")

        username, deleted_id = user["username"], user["id"]
        deleted = await self.users.delete_one(deleted_id)
        if not deleted:
            # Removed by a concurrent request between the lookup and the delete
            return Result.failure(ErrorKind.NOT_FOUND, "User Not Found")
        logger.info("[users] deleted username=%s id=%s", username, deleted_id)
        reply = f"Username {username} With ID {deleted_id} Deleted"
        return Result.success(reply, reply)

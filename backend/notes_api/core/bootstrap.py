# notes_api/core/bootstrap.py
"""
Bootstrap module for application initialization.
Handles initial setup tasks such as creating a default admin user on first startup.
"""
import os
import logging

from notes_api.services import UserAccountService

logger = logging.getLogger("uvicorn.error")

ADMIN_ROLE = "Admin"

async def ensure_default_admin(service: UserAccountService) -> None:
    """
    If no user holds the Admin role, create one based on environment variables.
    Only takes effect under the following conditions:
      - Currently no user with "Admin" in roles
      - And ADMIN_PASSWORD is set (to avoid using a default weak password)
    Environment variables:
      ADMIN_USERNAME (default: "admin")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    users = await service.users.find(exclude=("password",))
    if any(ADMIN_ROLE in (u.get("roles") or []) for u in users):
        return  # Skip creation if an admin already exists

    admin_password = os.getenv("ADMIN_PASSWORD")
    if not admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    admin_username = os.getenv("ADMIN_USERNAME", "admin")

    # If username is already taken by a regular account, create a non-conflicting name
    taken = {u["username"] for u in users}
    base_username = admin_username
    suffix = 1
    while admin_username in taken:
        suffix += 1
        admin_username = f"{base_username}{suffix}"  # Append number suffix to make unique

    result = await service.create_user(admin_username, admin_password, ["Employee", ADMIN_ROLE])
    if not result.ok:
        logger.warning("[bootstrap] Default admin not created: %s", result.message)
        return
    logger.warning("[bootstrap] Created default admin -> username=%s id=%s",
                   admin_username, result.data["id"])

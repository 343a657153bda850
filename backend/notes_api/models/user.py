# notes_api/models/user.py
"""
Database model for users.
Represents a staff account of the notes application: login name,
hashed password, role labels and an active flag.
"""
import uuid
from tortoise import fields, models

from notes_api.config import settings


def default_roles() -> list[str]:
    return list(settings.default_roles)


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has many Notes (one-to-many, via related_name="notes")

    Security:
    - Password is stored as a bcrypt hash (never store plain text passwords)
    - Username must be unique across all users
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    username = fields.CharField(
        max_length=256,
        unique=True,
        index=True
    )  # User login name (uniqueness is also checked by the service before writes)
    password = fields.CharField(max_length=255)  # bcrypt hash, never plain text
    roles = fields.JSONField(default=default_roles)  # Ordered list of role labels, e.g. ["Employee", "Manager"]
    active = fields.BooleanField(default=True)  # Deactivated users keep their notes

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name

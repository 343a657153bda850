# notes_api/models/note.py
"""
Database model for notes.
Only the owner reference matters to user management: a user cannot be
removed while a note still points at them.
"""
import uuid
from tortoise import fields, models

class Note(models.Model):
    """
    Note database model.

    Relationships:
    - Belongs to a User (many-to-one); deleting the owner is restricted
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique note identifier
    user = fields.ForeignKeyField(
        "models.User",
        related_name="notes",
        on_delete=fields.RESTRICT
    )  # Owning user; the database refuses to drop a user that still has notes
    title = fields.CharField(max_length=256)
    text = fields.TextField()
    completed = fields.BooleanField(default=False)
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "notes"  # Database table name

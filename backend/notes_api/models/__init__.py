# notes_api/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: User account model
- Note: Note model (owned by a User)
"""
from .user import User
from .note import Note

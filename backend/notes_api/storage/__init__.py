# notes_api/storage/__init__.py
"""
Storage port and its adapters.
- Collection: abstract async collection handing out lean dict records
- TortoiseCollection: production adapter over a Tortoise model
- MemoryCollection: dict-backed adapter
"""
from .base import Collection, Record
from .memory import MemoryCollection
from .tortoise_store import TortoiseCollection

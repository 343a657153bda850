# notes_api/storage/base.py
"""
Storage port used by the services.

A Collection hands out lean records: plain dicts keyed by field name, with
identifiers rendered as strings. Services never see ORM instances, so any
backend that honours this contract can be swapped in.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

Record = dict[str, Any]


class Collection(ABC):
    """Async access to one collection of records."""

    @abstractmethod
    async def find(self, exclude: Iterable[str] = ()) -> list[Record]:
        """Return every record, with the fields named in ``exclude`` projected out."""

    @abstractmethod
    async def find_one(self, **filters: Any) -> Optional[Record]:
        """Return the first record whose fields equal all ``filters``, or None."""

    @abstractmethod
    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        """Return the record with this id, or None. Malformed ids match nothing."""

    @abstractmethod
    async def create(self, data: Record) -> Optional[Record]:
        """Insert a record and return it as stored (defaults applied, id assigned)."""

    @abstractmethod
    async def save(self, record: Record) -> Record:
        """Write every field of ``record`` back under ``record["id"]`` and return the stored record."""

    @abstractmethod
    async def delete_one(self, record_id: Any) -> int:
        """Remove the record with this id. Returns the number of records removed."""

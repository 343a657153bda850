# notes_api/storage/tortoise_store.py
"""
Tortoise ORM adapter for the storage port.
Reads go through ``values()`` so callers get plain dicts instead of model instances.
"""
import uuid
from typing import Any, Iterable, Optional, Type

from tortoise import models

from .base import Collection, Record


def _to_uuid(value: Any) -> Optional[uuid.UUID]:
    """Parse an id coming from a request body; None when it is not a UUID."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


def _lean(row: Record) -> Record:
    return {k: str(v) if isinstance(v, uuid.UUID) else v for k, v in row.items()}


class TortoiseCollection(Collection):
    """Collection backed by a Tortoise model with a UUID primary key."""

    def __init__(self, model: Type[models.Model]):
        self.model = model

    @property
    def field_names(self) -> list[str]:
        # Column-backed fields, foreign keys appear as "<name>_id"
        return list(self.model._meta.fields_db_projection.keys())

    async def find(self, exclude: Iterable[str] = ()) -> list[Record]:
        excluded = set(exclude)
        fields = [f for f in self.field_names if f not in excluded]
        rows = await self.model.all().values(*fields)
        return [_lean(r) for r in rows]

    async def find_one(self, **filters: Any) -> Optional[Record]:
        query = {}
        for key, value in filters.items():
            if key == "id" or key.endswith("_id"):
                value = _to_uuid(value)
                if value is None:
                    return None  # no row can carry a malformed id
            query[key] = value
        rows = await self.model.filter(**query).limit(1).values()
        return _lean(rows[0]) if rows else None

    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        return await self.find_one(id=record_id)

    async def create(self, data: Record) -> Optional[Record]:
        obj = await self.model.create(**data)
        return await self.find_by_id(obj.pk)

    async def save(self, record: Record) -> Record:
        pk = _to_uuid(record["id"])
        changes = {k: v for k, v in record.items() if k != "id"}
        await self.model.filter(id=pk).update(**changes)
        return await self.find_by_id(pk)

    async def delete_one(self, record_id: Any) -> int:
        pk = _to_uuid(record_id)
        if pk is None:
            return 0
        return await self.model.filter(id=pk).delete()

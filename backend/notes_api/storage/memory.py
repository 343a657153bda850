# notes_api/storage/memory.py
"""
In-process implementation of the storage port.

Keeps records in a dict and returns deep copies, so callers mutating a
record never touch the stored one until they call ``save``. No uniqueness
constraints are enforced.
"""
import copy
import uuid
from typing import Any, Iterable, Optional

from .base import Collection, Record


class MemoryCollection(Collection):

    def __init__(self, defaults: Optional[dict[str, Any]] = None):
        # Field defaults applied on create; callables are invoked per record
        self.defaults = defaults or {}
        self._rows: dict[str, Record] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def _apply_defaults(self, data: Record) -> Record:
        row = {}
        for key, default in self.defaults.items():
            row[key] = default() if callable(default) else copy.deepcopy(default)
        row.update(copy.deepcopy(data))
        return row

    async def find(self, exclude: Iterable[str] = ()) -> list[Record]:
        excluded = set(exclude)
        return [
            {k: copy.deepcopy(v) for k, v in row.items() if k not in excluded}
            for row in self._rows.values()
        ]

    async def find_one(self, **filters: Any) -> Optional[Record]:
        for row in self._rows.values():
            if all(row.get(k) == v for k, v in filters.items()):
                return copy.deepcopy(row)
        return None

    async def find_by_id(self, record_id: Any) -> Optional[Record]:
        row = self._rows.get(str(record_id))
        return copy.deepcopy(row) if row is not None else None

    async def create(self, data: Record) -> Optional[Record]:
        row = self._apply_defaults(data)
        row["id"] = str(row.get("id") or uuid.uuid4())
        self._rows[row["id"]] = row
        return copy.deepcopy(row)

    async def save(self, record: Record) -> Record:
        record_id = str(record["id"])
        if record_id not in self._rows:
            raise KeyError(f"no record with id {record_id}")
        self._rows[record_id] = copy.deepcopy(record)
        return copy.deepcopy(self._rows[record_id])

    async def delete_one(self, record_id: Any) -> int:
        return 1 if self._rows.pop(str(record_id), None) is not None else 0

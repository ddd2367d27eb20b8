from __future__ import annotations

from typing import Any

from .memory_base import InMemoryTable


class MemoryStore:
    """Holds one table per entity type.

    Stands in for a database connection: repositories receive the store and
    pick their table by name. A new store starts empty.
    """

    def __init__(self) -> None:
        self._tables: dict[str, InMemoryTable[Any]] = {}

    def table(self, name: str) -> InMemoryTable[Any]:
        if name not in self._tables:
            self._tables[name] = InMemoryTable(name)
        return self._tables[name]

    def list_tables(self) -> list[str]:
        return sorted(self._tables)

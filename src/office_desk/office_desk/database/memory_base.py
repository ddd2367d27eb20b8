from __future__ import annotations

import dataclasses
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Auto-incrementing ``id -> record`` map holding frozen dataclasses.

    Ids start at 1 and are never reused, even after a delete.
    """

    def __init__(self, name: str):
        self.name = name
        self._rows: dict[int, T] = {}
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        row_id = self._next_id
        self._next_id += 1
        row = build(row_id)
        self._rows[row_id] = row
        return row

    def get(self, row_id: int) -> Optional[T]:
        return self._rows.get(int(row_id))

    def all(self) -> list[T]:
        return [self._rows[k] for k in sorted(self._rows)]

    def where(self, predicate: Callable[[T], bool]) -> list[T]:
        return [row for row in self.all() if predicate(row)]

    def update(self, row_id: int, **changes) -> Optional[T]:
        current = self._rows.get(int(row_id))
        if current is None:
            return None
        updated = dataclasses.replace(current, **changes)
        self._rows[int(row_id)] = updated
        return updated

    def delete(self, row_id: int) -> bool:
        return self._rows.pop(int(row_id), None) is not None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[T]:
        return iter(self.all())

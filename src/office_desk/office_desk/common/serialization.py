from __future__ import annotations

import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Optional


def to_plain(value: Any) -> Any:
    """Convert domain values (enums, dates, tuples) into JSON-friendly ones."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, frozenset, set)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


def to_json(record: Any, *, exclude: Iterable[str] = ()) -> dict:
    """Shallow dataclass -> dict, skipping the ``exclude`` fields."""
    skip = set(exclude)
    return {
        f.name: to_plain(getattr(record, f.name))
        for f in dataclasses.fields(record)
        if f.name not in skip
    }


def ref(record: Any, *attrs: str) -> Optional[dict]:
    """Small ``{id, <attrs>}`` reference used for denormalized joins."""
    if record is None:
        return None
    out = {"id": record.id}
    for attr in attrs:
        out[attr] = to_plain(getattr(record, attr))
    return out

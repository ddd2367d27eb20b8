from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AccessLevel, DocumentCategory


@dataclass(frozen=True)
class Document:
    """Metadata of an uploaded file; the file body itself is not stored."""

    id: int
    title: str
    file_name: str
    file_type: str
    file_size: int
    category: DocumentCategory
    uploaded_by_id: int
    access_level: AccessLevel
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    tags: tuple[str, ...] = ()
    download_count: int = 0

from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AccessLevel, DocumentCategory
from ..database.store import MemoryStore
from .model import Document
from .repository import DocumentRepository


class MemoryDocumentRepository(DocumentRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("documents")

    def get(self, document_id: int) -> Optional[Document]:
        return self._table.get(document_id)

    def list_all(self) -> Sequence[Document]:
        return self._table.all()

    def list_by_uploader(self, uploaded_by_id: int) -> Sequence[Document]:
        return self._table.where(lambda d: d.uploaded_by_id == int(uploaded_by_id))

    def create(
        self,
        *,
        title: str,
        file_name: str,
        file_type: str,
        file_size: int,
        category: DocumentCategory,
        uploaded_by_id: int,
        access_level: AccessLevel = AccessLevel.PUBLIC,
        description: Optional[str] = None,
        tags: tuple[str, ...] = (),
    ) -> Document:
        now = now_local()
        return self._table.insert(
            lambda document_id: Document(
                id=document_id,
                title=title,
                file_name=file_name,
                file_type=file_type,
                file_size=int(file_size),
                category=category,
                uploaded_by_id=int(uploaded_by_id),
                access_level=access_level,
                created_at=now,
                updated_at=now,
                description=description,
                tags=tuple(tags),
            )
        )

    def increment_downloads(self, document_id: int) -> Optional[Document]:
        current = self._table.get(document_id)
        if current is None:
            return None
        return self._table.update(document_id, download_count=current.download_count + 1)

    def delete(self, document_id: int) -> bool:
        return self._table.delete(document_id)

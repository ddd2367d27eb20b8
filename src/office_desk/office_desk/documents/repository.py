from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AccessLevel, DocumentCategory
from .model import Document


class DocumentRepository(Protocol):
    def get(self, document_id: int) -> Optional[Document]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Document]:
        raise NotImplementedError

    def list_by_uploader(self, uploaded_by_id: int) -> Sequence[Document]:
        raise NotImplementedError

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
        raise NotImplementedError

    def increment_downloads(self, document_id: int) -> Optional[Document]:
        raise NotImplementedError

    def delete(self, document_id: int) -> bool:
        raise NotImplementedError

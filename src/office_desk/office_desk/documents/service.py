from __future__ import annotations

import logging

from ..common.serialization import to_json
from ..common.validators import optional_enum, optional_str_list, optional_text, require_enum, require_int, require_non_empty
from ..core.enums import AccessLevel, DocumentCategory, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..core.permissions import Action, is_allowed
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Document
from .repository import DocumentRepository

logger = logging.getLogger(__name__)

# Access levels a role can read besides its own uploads.
ACCESS_BY_ROLE = {
    Role.HR: frozenset(AccessLevel),
    Role.IT: frozenset({AccessLevel.PUBLIC, AccessLevel.MANAGERS}),
    Role.EMPLOYEE: frozenset({AccessLevel.PUBLIC}),
}


def can_view(document: Document, actor: SessionUser) -> bool:
    if document.uploaded_by_id == actor.id:
        return True
    if is_allowed(actor.role, Action.DOCUMENTS_VIEW_ALL):
        return True
    return document.access_level in ACCESS_BY_ROLE.get(actor.role, frozenset())


class DocumentService:
    def __init__(self, documents: DocumentRepository, users: UserRepository):
        self._documents = documents
        self._users = users

    def to_view(self, document: Document) -> dict:
        row = to_json(document)
        row["uploaded_by"] = user_ref(self._users, document.uploaded_by_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        return [self.to_view(d) for d in self._documents.list_all() if can_view(d, actor)]

    def upload(self, *, actor: SessionUser, data: dict) -> dict:
        document = self._documents.create(
            title=require_non_empty(data.get("title"), "title"),
            file_name=require_non_empty(data.get("file_name"), "file_name"),
            file_type=require_non_empty(data.get("file_type"), "file_type"),
            file_size=require_int(data.get("file_size"), "file_size", minimum=0),
            category=require_enum(data.get("category"), DocumentCategory, "category"),
            uploaded_by_id=actor.id,
            access_level=optional_enum(data.get("access_level"), AccessLevel, "access_level", AccessLevel.PUBLIC),
            description=optional_text(data.get("description"), "description"),
            tags=optional_str_list(data.get("tags"), "tags"),
        )
        logger.info("document %s uploaded by user %s (%s)", document.id, actor.id, document.access_level.value)
        return self.to_view(document)

    def delete(self, *, actor: SessionUser, document_id: int) -> None:
        document = self._documents.get(document_id)
        if not document:
            raise NotFoundError("Document not found")
        if document.uploaded_by_id != actor.id and not is_allowed(actor.role, Action.DOCUMENTS_MANAGE):
            raise AuthorizationError("Only the uploader or HR can delete this document")

        self._documents.delete(document_id)
        logger.info("document %s deleted by user %s", document_id, actor.id)

    def register_download(self, *, actor: SessionUser, document_id: int) -> dict:
        document = self._documents.get(document_id)
        if not document or not can_view(document, actor):
            raise NotFoundError("Document not found")

        document = self._documents.increment_downloads(document_id)
        if not document:
            raise NotFoundError("Document not found")
        return self.to_view(document)

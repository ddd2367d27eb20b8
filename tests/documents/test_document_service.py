import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.documents.memory_document_repository import MemoryDocumentRepository
from src.office_desk.office_desk.documents.service import DocumentService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
IT = SessionUser(id=2, email="it@company.com", name="Mike", role=Role.IT)
EMP = SessionUser(id=3, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, IT, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return DocumentService(MemoryDocumentRepository(store), users)


def _upload(service, actor, access_level, title=None):
    return service.upload(
        actor=actor,
        data={
            "title": title or access_level,
            "file_name": "doc.pdf",
            "file_type": "application/pdf",
            "file_size": 1024,
            "category": "policy",
            "access_level": access_level,
            "tags": "hr, policy",
        },
    )


def test_access_levels(service):
    for level in ("public", "hr_only", "managers", "specific_users"):
        _upload(service, HR, level)
    _upload(service, EMP, "hr_only", title="mine")

    titles = lambda actor: [d["title"] for d in service.list_for(actor)]
    assert titles(HR) == ["public", "hr_only", "managers", "specific_users", "mine"]
    assert titles(IT) == ["public", "managers"]
    assert titles(EMP) == ["public", "mine"]


def test_upload_parses_tags_and_denormalizes(service):
    doc = _upload(service, IT, "public")
    assert doc["tags"] == ["hr", "policy"]
    assert doc["uploaded_by"] == {"id": 2, "name": "Mike"}
    assert doc["download_count"] == 0


def test_delete_by_uploader_or_hr(service):
    doc = _upload(service, IT, "public")
    with pytest.raises(AuthorizationError):
        service.delete(actor=EMP, document_id=doc["id"])

    service.delete(actor=HR, document_id=doc["id"])
    assert service.list_for(HR) == []
    with pytest.raises(NotFoundError):
        service.delete(actor=HR, document_id=doc["id"])


def test_download_counter(service):
    doc = _upload(service, HR, "public")
    service.register_download(actor=EMP, document_id=doc["id"])
    assert service.register_download(actor=IT, document_id=doc["id"])["download_count"] == 2

    secret = _upload(service, HR, "hr_only")
    with pytest.raises(NotFoundError):
        service.register_download(actor=EMP, document_id=secret["id"])

from datetime import datetime, timedelta

import pytest

from src.office_desk.office_desk.announcements.memory_announcement_repository import MemoryAnnouncementRepository
from src.office_desk.office_desk.announcements.service import AnnouncementService
from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
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
    return AnnouncementService(MemoryAnnouncementRepository(store), users)


def _post(service, **overrides):
    data = {"title": "Notice", "content": "Body", "type": "general"}
    data.update(overrides)
    return service.create(actor=HR, data=data)


def test_only_hr_publishes(service):
    with pytest.raises(AuthorizationError):
        service.create(actor=IT, data={"title": "t", "content": "c", "type": "general"})

    a = _post(service)
    assert a["target_audience"] == "all"
    assert a["priority"] == "medium"
    assert a["creator"] == {"id": 1, "name": "Sarah"}


def test_audience_filter(service):
    _post(service, title="everyone")
    _post(service, title="it", target_audience="it")
    _post(service, title="staff", target_audience="employees")
    _post(service, title="leads", target_audience="managers")

    titles = lambda actor: [a["title"] for a in service.list_for(actor)]
    assert titles(HR) == ["everyone", "it", "staff", "leads"]
    assert titles(IT) == ["everyone", "it", "leads"]
    assert titles(EMP) == ["everyone", "staff"]


def test_inactive_and_expired_are_hidden_from_non_hr(service):
    past = (datetime.now() - timedelta(days=1)).isoformat()
    _post(service, title="old", publish_date=(datetime.now() - timedelta(days=5)).isoformat(), expiry_date=past)
    _post(service, title="off", is_active=False)

    assert service.list_for(EMP) == []
    assert len(service.list_for(HR)) == 2


def test_expiry_before_publish_is_rejected(service):
    with pytest.raises(ValidationError):
        _post(service, publish_date="2024-05-01T00:00", expiry_date="2024-04-01T00:00")


def test_mark_read_is_idempotent_and_scoped(service):
    a = _post(service)
    hidden = _post(service, target_audience="hr")
    assert service.count_unread(EMP) == 1

    read = service.mark_read(actor=EMP, announcement_id=a["id"])
    read = service.mark_read(actor=EMP, announcement_id=a["id"])
    assert read["read_by"] == [3]
    assert read["is_read"] is True
    assert service.count_unread(EMP) == 0

    with pytest.raises(NotFoundError):
        service.mark_read(actor=EMP, announcement_id=hidden["id"])


def test_update_and_delete(service):
    a = _post(service)
    updated = service.update(actor=HR, announcement_id=a["id"], data={"priority": "urgent", "title": "New"})
    assert (updated["priority"], updated["title"], updated["content"]) == ("urgent", "New", "Body")

    service.delete(actor=HR, announcement_id=a["id"])
    assert service.list_for(HR) == []
    with pytest.raises(NotFoundError):
        service.delete(actor=HR, announcement_id=a["id"])

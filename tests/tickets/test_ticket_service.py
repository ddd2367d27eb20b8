from datetime import datetime

import pytest

from src.office_desk.office_desk.core.enums import Role, TicketPriority, TicketStatus
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.tickets.model import Ticket
from src.office_desk.office_desk.tickets.service import TicketService
from src.office_desk.office_desk.users.model import SessionUser, User


class FakeUsersRepo:
    def __init__(self, users):
        self._users = {u.id: u for u in users}

    def get_by_id(self, user_id):
        return self._users.get(int(user_id))

    def get_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email), None)

    def list_by_role(self, role):
        return [u for u in self._users.values() if u.role == role]


class FakeTicketsRepo:
    def __init__(self):
        self._next_id = 1
        self._rows = {}

    def get(self, ticket_id):
        return self._rows.get(int(ticket_id))

    def list_all(self):
        return list(self._rows.values())

    def list_by_creator(self, created_by_id):
        return [t for t in self._rows.values() if t.created_by_id == created_by_id]

    def create(self, *, title, description, priority, created_by_id, assigned_to_id, status=TicketStatus.OPEN):
        tid = self._next_id
        self._next_id += 1
        now = datetime(2026, 2, 1, 9, 0)
        self._rows[tid] = Ticket(
            id=tid,
            title=title,
            description=description,
            status=status,
            priority=priority,
            created_by_id=created_by_id,
            assigned_to_id=assigned_to_id,
            created_at=now,
            updated_at=now,
        )
        return self._rows[tid]

    def update_status(self, ticket_id, status):
        t = self._rows.get(int(ticket_id))
        if not t:
            return None
        self._rows[t.id] = Ticket(**{**t.__dict__, "status": status})
        return self._rows[t.id]


HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
IT = SessionUser(id=2, email="it@company.com", name="Mike", role=Role.IT)
EMP = SessionUser(id=3, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)


@pytest.fixture()
def service():
    users = FakeUsersRepo([User(id=s.id, email=s.email, password_hash="x", name=s.name, role=s.role) for s in (HR, IT, EMP)])
    return TicketService(FakeTicketsRepo(), users, default_assignee="it@company.com")


def test_create_assigns_default_it_user_and_denormalizes(service):
    ticket = service.create(actor=EMP, data={"title": "Printer", "description": "Jammed", "priority": "high"})

    assert ticket["status"] == "open"
    assert ticket["priority"] == TicketPriority.HIGH.value
    assert ticket["created_by"] == {"id": 3, "name": "Alex"}
    assert ticket["assigned_to"] == {"id": 2, "name": "Mike"}


def test_create_rejects_unknown_priority(service):
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={"title": "x", "description": "y", "priority": "urgent"})


def test_it_sees_all_others_see_their_own(service):
    service.create(actor=EMP, data={"title": "a", "description": "a", "priority": "low"})
    service.create(actor=HR, data={"title": "b", "description": "b", "priority": "low"})

    assert len(service.list_for(IT)) == 2
    assert [t["title"] for t in service.list_for(EMP)] == ["a"]
    assert [t["title"] for t in service.list_for(HR)] == ["b"]


def test_only_it_changes_status(service):
    ticket = service.create(actor=EMP, data={"title": "a", "description": "a", "priority": "low"})

    with pytest.raises(AuthorizationError):
        service.update_status(actor=HR, ticket_id=ticket["id"], status="resolved")

    updated = service.update_status(actor=IT, ticket_id=ticket["id"], status="resolved")
    assert updated["status"] == "resolved"

    with pytest.raises(NotFoundError):
        service.update_status(actor=IT, ticket_id=99, status="resolved")

import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.leaves.memory_leave_repository import MemoryLeaveRepository
from src.office_desk.office_desk.leaves.service import LeaveService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
EMP = SessionUser(id=2, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return LeaveService(MemoryLeaveRepository(store), users)


def test_days_default_to_inclusive_span(service):
    leave = service.create(actor=EMP, data={"type": "annual", "start_date": "2024-03-04", "end_date": "2024-03-08", "reason": "Trip"})
    assert leave["days"] == 5
    assert leave["status"] == "pending"
    assert leave["employee"] == {"id": 2, "name": "Alex"}


def test_invalid_ranges_are_rejected(service):
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={"type": "sick", "start_date": "2024-03-08", "end_date": "2024-03-04", "reason": "x"})
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={"type": "sick", "start_date": "2024-03-04", "end_date": "2024-03-05", "days": 3, "reason": "x"})


def test_hr_decides_and_approver_is_recorded(service):
    leave = service.create(actor=EMP, data={"type": "personal", "start_date": "2024-03-04", "end_date": "2024-03-04", "reason": "x"})

    with pytest.raises(AuthorizationError):
        service.update_status(actor=EMP, leave_id=leave["id"], data={"status": "approved"})

    decided = service.update_status(actor=HR, leave_id=leave["id"], data={"status": "approved", "comments": "ok"})
    assert decided["status"] == "approved"
    assert decided["approver"] == {"id": 1, "name": "Sarah"}
    assert decided["approved_at"] is not None

    with pytest.raises(NotFoundError):
        service.update_status(actor=HR, leave_id=42, data={"status": "rejected"})


def test_employees_only_list_their_own(service):
    service.create(actor=EMP, data={"type": "annual", "start_date": "2024-03-04", "end_date": "2024-03-04", "reason": "x"})
    service.create(actor=HR, data={"type": "annual", "start_date": "2024-03-04", "end_date": "2024-03-04", "reason": "y"})
    assert len(service.list_for(HR)) == 2
    assert [l["reason"] for l in service.list_for(EMP)] == ["x"]

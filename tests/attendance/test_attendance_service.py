from datetime import datetime

import pytest

from src.office_desk.office_desk.attendance.memory_attendance_repository import MemoryAttendanceRepository
from src.office_desk.office_desk.attendance.service import AttendanceService, worked_minutes
from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
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
    return AttendanceService(MemoryAttendanceRepository(store), users)


def test_worked_minutes_splits_overtime():
    assert worked_minutes(datetime(2024, 1, 2, 8, 0), datetime(2024, 1, 2, 17, 30)) == (570, 90)
    assert worked_minutes(datetime(2024, 1, 2, 9, 0), datetime(2024, 1, 2, 12, 0)) == (180, 0)
    with pytest.raises(ValidationError):
        worked_minutes(datetime(2024, 1, 2, 9, 0), datetime(2024, 1, 2, 8, 0))


def test_create_computes_work_hours(service):
    record = service.create(
        actor=EMP,
        data={"date": "2024-01-02", "status": "present", "clock_in": "2024-01-02T09:00", "clock_out": "2024-01-02T17:00"},
    )
    assert record["work_hours"] == 480
    assert record["overtime"] == 0
    assert record["employee"] == {"id": 2, "name": "Alex"}


def test_one_record_per_day(service):
    service.create(actor=EMP, data={"date": "2024-01-02", "status": "present"})
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={"date": "2024-01-02", "status": "late"})


def test_clock_out_is_owner_only_and_once(service):
    record = service.create(actor=EMP, data={"date": "2024-01-02", "status": "late", "clock_in": "2024-01-02T09:30"})

    with pytest.raises(AuthorizationError):
        service.clock_out(actor=HR, attendance_id=record["id"], data={"clock_out": "2024-01-02T18:00"})

    done = service.clock_out(actor=EMP, attendance_id=record["id"], data={"clock_out": "2024-01-02T18:00"})
    assert done["work_hours"] == 510
    assert done["overtime"] == 30

    with pytest.raises(ValidationError):
        service.clock_out(actor=EMP, attendance_id=record["id"])


def test_hr_lists_everything(service):
    service.create(actor=EMP, data={"date": "2024-01-02", "status": "present"})
    service.create(actor=HR, data={"date": "2024-01-02", "status": "present"})
    assert len(service.list_for(HR)) == 2
    assert len(service.list_for(EMP)) == 1

import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.training.memory_training_repository import MemoryEnrollmentRepository, MemoryTrainingRepository
from src.office_desk.office_desk.training.service import TrainingService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
IT = SessionUser(id=2, email="it@company.com", name="Mike", role=Role.IT)
EMP = SessionUser(id=3, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)

COURSE = {"title": "Security basics", "category": "compliance", "duration": 2, "start_date": "2024-06-01T09:00"}


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, IT, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return TrainingService(MemoryTrainingRepository(store), MemoryEnrollmentRepository(store), users)


def test_hr_manages_catalogue(service):
    with pytest.raises(AuthorizationError):
        service.create_training(actor=IT, data=COURSE)

    training = service.create_training(actor=HR, data=COURSE)
    assert training["status"] == "scheduled"
    assert training["is_online"] is False
    assert training["enrolled_count"] == 0

    updated = service.update_training(actor=HR, training_id=training["id"], data={"is_online": True, "location": "Zoom"})
    assert (updated["is_online"], updated["location"], updated["title"]) == (True, "Zoom", "Security basics")

    with pytest.raises(NotFoundError):
        service.update_training(actor=HR, training_id=99, data={"title": "x"})


def test_enrollment_view_and_scoping(service):
    training = service.create_training(actor=HR, data=COURSE)
    enrollment = service.enroll(actor=EMP, data={"training_id": training["id"]})

    assert enrollment["status"] == "enrolled"
    assert enrollment["training"] == {"id": training["id"], "title": "Security basics", "category": "compliance"}
    assert enrollment["employee"] == {"id": 3, "name": "Alex"}

    service.enroll(actor=HR, data={"training_id": training["id"], "employee_id": 2})
    assert len(service.list_enrollments(HR)) == 2
    assert [e["employee_id"] for e in service.list_enrollments(EMP)] == [3]


def test_duplicate_and_full_enrollments_are_rejected(service):
    training = service.create_training(actor=HR, data={**COURSE, "max_participants": 1})
    service.enroll(actor=EMP, data={"training_id": training["id"]})

    with pytest.raises(ValidationError, match="already enrolled"):
        service.enroll(actor=EMP, data={"training_id": training["id"]})
    with pytest.raises(ValidationError, match="full"):
        service.enroll(actor=IT, data={"training_id": training["id"]})


def test_cannot_enroll_in_cancelled_training(service):
    training = service.create_training(actor=HR, data={**COURSE, "status": "cancelled"})
    with pytest.raises(ValidationError):
        service.enroll(actor=EMP, data={"training_id": training["id"]})

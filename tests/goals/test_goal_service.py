import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.goals.memory_goal_repository import MemoryGoalRepository
from src.office_desk.office_desk.goals.service import GoalService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
IT = SessionUser(id=2, email="it@company.com", name="Mike", role=Role.IT)
EMP = SessionUser(id=3, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)

GOAL = {"title": "Learn Python", "category": "skill", "priority": "high", "start_date": "2024-01-01", "target_date": "2024-06-30"}


@pytest.fixture()
def service():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, IT, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    return GoalService(MemoryGoalRepository(store), users)


def test_create_belongs_to_actor(service):
    goal = service.create(actor=EMP, data={**GOAL, "manager_id": 1})
    assert goal["employee"] == {"id": 3, "name": "Alex"}
    assert goal["manager"] == {"id": 1, "name": "Sarah"}
    assert (goal["progress"], goal["status"]) == (0, "not_started")


def test_progress_rules(service):
    goal = service.create(actor=EMP, data=GOAL)

    with pytest.raises(AuthorizationError):
        service.update_progress(actor=IT, goal_id=goal["id"], data={"progress": 10})
    with pytest.raises(ValidationError):
        service.update_progress(actor=EMP, goal_id=goal["id"], data={"progress": 101})

    halfway = service.update_progress(actor=EMP, goal_id=goal["id"], data={"progress": 50})
    assert (halfway["status"], halfway["completion_date"]) == ("in_progress", None)

    done = service.update_progress(actor=HR, goal_id=goal["id"], data={"progress": 100})
    assert done["status"] == "completed"
    assert done["completion_date"] is not None


def test_completed_status_needs_full_progress(service):
    goal = service.create(actor=EMP, data=GOAL)
    with pytest.raises(ValidationError):
        service.update_progress(actor=EMP, goal_id=goal["id"], data={"progress": 40, "status": "completed"})


def test_listing(service):
    service.create(actor=EMP, data=GOAL)
    service.create(actor=IT, data=GOAL)
    assert len(service.list_for(HR)) == 2
    assert len(service.list_for(EMP)) == 1


@pytest.mark.parametrize("progress", [100.9, 50.5, 99.0])
def test_fractional_progress_is_rejected(service, progress):
    goal = service.create(actor=EMP, data=GOAL)
    with pytest.raises(ValidationError):
        service.update_progress(actor=EMP, goal_id=goal["id"], data={"progress": progress})
    assert service.list_for(EMP)[0]["progress"] == 0

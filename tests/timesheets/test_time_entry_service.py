import pytest

from src.office_desk.office_desk.core.enums import Role
from src.office_desk.office_desk.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.office_desk.office_desk.database.store import MemoryStore
from src.office_desk.office_desk.projects.memory_project_repository import MemoryProjectRepository, MemoryTaskRepository
from src.office_desk.office_desk.projects.service import ProjectService, TaskService
from src.office_desk.office_desk.timesheets.memory_time_entry_repository import MemoryTimeEntryRepository
from src.office_desk.office_desk.timesheets.service import TimeEntryService
from src.office_desk.office_desk.users.memory_user_repository import MemoryUserRepository
from src.office_desk.office_desk.users.model import SessionUser

HR = SessionUser(id=1, email="hr@company.com", name="Sarah", role=Role.HR)
EMP = SessionUser(id=2, email="employee@company.com", name="Alex", role=Role.EMPLOYEE)


@pytest.fixture()
def setup():
    store = MemoryStore()
    users = MemoryUserRepository(store)
    for s in (HR, EMP):
        users.create_user(email=s.email, password_hash="x", name=s.name, role=s.role)
    projects = MemoryProjectRepository(store)
    tasks = MemoryTaskRepository(store)
    project = ProjectService(projects, users).create(
        actor=HR, data={"name": "Website", "description": "d", "start_date": "2024-01-01", "end_date": "2024-03-31"}
    )
    task = TaskService(tasks, projects, users).create(
        actor=HR,
        data={"title": "Logo", "description": "d", "project_id": project["id"], "assigned_to_id": 2, "due_date": "2024-02-01"},
    )
    service = TimeEntryService(MemoryTimeEntryRepository(store), projects, tasks, users)
    return service, project, task


def test_duration_and_denormalized_refs(setup):
    service, project, task = setup
    entry = service.create(
        actor=EMP,
        data={
            "start_time": "2024-01-10T09:00",
            "end_time": "2024-01-10T11:15",
            "project_id": project["id"],
            "task_id": task["id"],
            "billable": True,
        },
    )
    assert entry["duration"] == 135
    assert entry["date"] == "2024-01-10"
    assert entry["project"] == {"id": project["id"], "name": "Website"}
    assert entry["task"] == {"id": task["id"], "title": "Logo"}
    assert entry["approved"] is False


def test_open_entry_has_no_duration(setup):
    service, _, _ = setup
    entry = service.create(actor=EMP, data={"start_time": "2024-01-10T09:00"})
    assert entry["duration"] is None
    assert entry["project"] is None


def test_end_before_start_is_rejected(setup):
    service, _, _ = setup
    with pytest.raises(ValidationError):
        service.create(actor=EMP, data={"start_time": "2024-01-10T09:00", "end_time": "2024-01-10T08:00"})


def test_hr_approves(setup):
    service, _, _ = setup
    entry = service.create(actor=EMP, data={"start_time": "2024-01-10T09:00", "end_time": "2024-01-10T10:00"})

    with pytest.raises(AuthorizationError):
        service.approve(actor=EMP, entry_id=entry["id"])

    approved = service.approve(actor=HR, entry_id=entry["id"])
    assert approved["approved"] is True
    assert approved["approved_by"] == {"id": 1, "name": "Sarah"}

    with pytest.raises(NotFoundError):
        service.approve(actor=HR, entry_id=50)

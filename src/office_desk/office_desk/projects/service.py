from __future__ import annotations

import logging
from typing import Optional

from ..common.serialization import ref, to_json
from ..common.validators import optional_enum, require_date, require_enum, require_int, require_non_empty
from ..core.enums import ProjectStatus, TaskStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Project, Task
from .repository import ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)

PROJECT_UPDATE_FIELDS = ("name", "description", "status", "start_date", "end_date", "manager_id")


class ProjectService:
    def __init__(self, projects: ProjectRepository, users: UserRepository):
        self._projects = projects
        self._users = users

    def to_view(self, project: Project) -> dict:
        row = to_json(project)
        row["manager"] = user_ref(self._users, project.manager_id)
        return row

    def list_all(self) -> list[dict]:
        return [self.to_view(p) for p in self._projects.list_all()]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        require(actor.role, Action.PROJECTS_MANAGE, "Only HR or IT can create projects")

        name = require_non_empty(data.get("name"), "name")
        description = require_non_empty(data.get("description"), "description")
        status = optional_enum(data.get("status"), ProjectStatus, "status", ProjectStatus.PLANNING)
        start_date = require_date(data.get("start_date"), "start_date")
        end_date = require_date(data.get("end_date"), "end_date")
        if end_date < start_date:
            raise ValidationError("end_date must be on or after start_date")

        project = self._projects.create(
            name=name,
            description=description,
            manager_id=actor.id,
            start_date=start_date,
            end_date=end_date,
            status=status,
        )
        logger.info("project %s created by user %s", project.id, actor.id)
        return self.to_view(project)

    def update(self, *, actor: SessionUser, project_id: int, data: dict) -> dict:
        require(actor.role, Action.PROJECTS_MANAGE, "Only HR or IT can update projects")

        current = self._projects.get(project_id)
        if not current:
            raise NotFoundError("Project not found")

        changes = {}
        if "name" in data:
            changes["name"] = require_non_empty(data.get("name"), "name")
        if "description" in data:
            changes["description"] = require_non_empty(data.get("description"), "description")
        if "status" in data:
            changes["status"] = require_enum(data.get("status"), ProjectStatus, "status")
        if "start_date" in data:
            changes["start_date"] = require_date(data.get("start_date"), "start_date")
        if "end_date" in data:
            changes["end_date"] = require_date(data.get("end_date"), "end_date")
        if "manager_id" in data:
            manager_id = require_int(data.get("manager_id"), "manager_id", minimum=1)
            if not self._users.get_by_id(manager_id):
                raise ValidationError("manager_id does not exist")
            changes["manager_id"] = manager_id
        if not changes:
            raise ValidationError(f"Nothing to update (allowed: {', '.join(PROJECT_UPDATE_FIELDS)})")

        start = changes.get("start_date", current.start_date)
        end = changes.get("end_date", current.end_date)
        if end < start:
            raise ValidationError("end_date must be on or after start_date")

        project = self._projects.update(project_id, **changes)
        if not project:
            raise NotFoundError("Project not found")
        return self.to_view(project)

    def delete(self, *, actor: SessionUser, project_id: int) -> None:
        require(actor.role, Action.PROJECTS_MANAGE, "Only HR or IT can delete projects")
        if not self._projects.delete(project_id):
            raise NotFoundError("Project not found")
        logger.info("project %s deleted by user %s", project_id, actor.id)


class TaskService:
    """Use case: tasks inside projects.

    HR and IT manage tasks; an assignee may move their own task's status.
    """

    def __init__(self, tasks: TaskRepository, projects: ProjectRepository, users: UserRepository):
        self._tasks = tasks
        self._projects = projects
        self._users = users

    def to_view(self, task: Task) -> dict:
        row = to_json(task)
        row["project"] = ref(self._projects.get(task.project_id), "name")
        row["assigned_to"] = user_ref(self._users, task.assigned_to_id)
        return row

    def list_for(self, actor: SessionUser, *, mine: bool = False) -> list[dict]:
        if mine:
            tasks = self._tasks.list_by_assignee(actor.id)
        else:
            tasks = self._tasks.list_all()
        return [self.to_view(t) for t in tasks]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        require(actor.role, Action.TASKS_MANAGE, "Only HR or IT can create tasks")

        title = require_non_empty(data.get("title"), "title")
        description = require_non_empty(data.get("description"), "description")
        project_id = require_int(data.get("project_id"), "project_id", minimum=1)
        assigned_to_id = require_int(data.get("assigned_to_id"), "assigned_to_id", minimum=1)
        due_date = require_date(data.get("due_date"), "due_date")
        status = optional_enum(data.get("status"), TaskStatus, "status", TaskStatus.PENDING)

        if not self._projects.get(project_id):
            raise ValidationError("project_id does not exist")
        if not self._users.get_by_id(assigned_to_id):
            raise ValidationError("assigned_to_id does not exist")

        task = self._tasks.create(
            title=title,
            description=description,
            project_id=project_id,
            assigned_to_id=assigned_to_id,
            due_date=due_date,
            status=status,
        )
        logger.info("task %s created in project %s by user %s", task.id, project_id, actor.id)
        return self.to_view(task)

    def update_status(self, *, actor: SessionUser, task_id: int, status) -> dict:
        new_status = require_enum(status, TaskStatus, "status")

        task: Optional[Task] = self._tasks.get(task_id)
        if not task:
            raise NotFoundError("Task not found")
        if not is_allowed(actor.role, Action.TASKS_MANAGE) and task.assigned_to_id != actor.id:
            raise AuthorizationError("Only the assignee, HR or IT can update this task")

        task = self._tasks.update_status(task_id, new_status)
        if not task:
            raise NotFoundError("Task not found")
        logger.info("task %s -> %s by user %s", task_id, new_status.value, actor.id)
        return self.to_view(task)

    def delete(self, *, actor: SessionUser, task_id: int) -> None:
        require(actor.role, Action.TASKS_MANAGE, "Only HR or IT can delete tasks")
        if not self._tasks.delete(task_id):
            raise NotFoundError("Task not found")
        logger.info("task %s deleted by user %s", task_id, actor.id)

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ProjectStatus, TaskStatus
from .model import Project, Task


class ProjectRepository(Protocol):
    def get(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def list_by_manager(self, manager_id: int) -> Sequence[Project]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        description: str,
        manager_id: int,
        start_date: date,
        end_date: date,
        status: ProjectStatus = ProjectStatus.PLANNING,
    ) -> Project:
        raise NotImplementedError

    def update(self, project_id: int, **changes) -> Optional[Project]:
        raise NotImplementedError

    def delete(self, project_id: int) -> bool:
        raise NotImplementedError


class TaskRepository(Protocol):
    def get(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_project(self, project_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def list_by_assignee(self, assigned_to_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def create(
        self,
        *,
        title: str,
        description: str,
        project_id: int,
        assigned_to_id: int,
        due_date: date,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        raise NotImplementedError

    def update_status(self, task_id: int, status: TaskStatus) -> Optional[Task]:
        raise NotImplementedError

    def delete(self, task_id: int) -> bool:
        raise NotImplementedError

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ProjectStatus, TaskStatus
from ..database.store import MemoryStore
from .model import Project, Task
from .repository import ProjectRepository, TaskRepository


class MemoryProjectRepository(ProjectRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("projects")

    def get(self, project_id: int) -> Optional[Project]:
        return self._table.get(project_id)

    def list_all(self) -> Sequence[Project]:
        return self._table.all()

    def list_by_manager(self, manager_id: int) -> Sequence[Project]:
        return self._table.where(lambda p: p.manager_id == int(manager_id))

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
        now = now_local()
        return self._table.insert(
            lambda project_id: Project(
                id=project_id,
                name=name,
                description=description,
                status=status,
                manager_id=int(manager_id),
                start_date=start_date,
                end_date=end_date,
                created_at=now,
            )
        )

    def update(self, project_id: int, **changes) -> Optional[Project]:
        return self._table.update(project_id, **changes)

    def delete(self, project_id: int) -> bool:
        return self._table.delete(project_id)


class MemoryTaskRepository(TaskRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("tasks")

    def get(self, task_id: int) -> Optional[Task]:
        return self._table.get(task_id)

    def list_all(self) -> Sequence[Task]:
        return self._table.all()

    def list_by_project(self, project_id: int) -> Sequence[Task]:
        return self._table.where(lambda t: t.project_id == int(project_id))

    def list_by_assignee(self, assigned_to_id: int) -> Sequence[Task]:
        return self._table.where(lambda t: t.assigned_to_id == int(assigned_to_id))

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
        now = now_local()
        return self._table.insert(
            lambda task_id: Task(
                id=task_id,
                title=title,
                description=description,
                project_id=int(project_id),
                assigned_to_id=int(assigned_to_id),
                status=status,
                due_date=due_date,
                created_at=now,
            )
        )

    def update_status(self, task_id: int, status: TaskStatus) -> Optional[Task]:
        return self._table.update(task_id, status=status)

    def delete(self, task_id: int) -> bool:
        return self._table.delete(task_id)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import ProjectStatus, TaskStatus


@dataclass(frozen=True)
class Project:
    id: int
    name: str
    description: str
    status: ProjectStatus
    manager_id: int
    start_date: date
    end_date: date
    created_at: datetime


@dataclass(frozen=True)
class Task:
    """Unit of work inside a project.

    Note: ``project_id`` may dangle after the project is deleted.
    """

    id: int
    title: str
    description: str
    project_id: int
    assigned_to_id: int
    status: TaskStatus
    due_date: date
    created_at: datetime

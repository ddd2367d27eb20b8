from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import GoalCategory, GoalPriority, GoalStatus
from .model import Goal


class GoalRepository(Protocol):
    def get(self, goal_id: int) -> Optional[Goal]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Goal]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[Goal]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        title: str,
        category: GoalCategory,
        priority: GoalPriority,
        start_date: date,
        target_date: date,
        description: Optional[str] = None,
        manager_id: Optional[int] = None,
    ) -> Goal:
        raise NotImplementedError

    def update_progress(
        self,
        goal_id: int,
        *,
        progress: int,
        status: GoalStatus,
        completion_date: Optional[datetime],
    ) -> Optional[Goal]:
        raise NotImplementedError

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import GoalCategory, GoalPriority, GoalStatus
from ..database.store import MemoryStore
from .model import Goal
from .repository import GoalRepository


class MemoryGoalRepository(GoalRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("goals")

    def get(self, goal_id: int) -> Optional[Goal]:
        return self._table.get(goal_id)

    def list_all(self) -> Sequence[Goal]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[Goal]:
        return self._table.where(lambda g: g.employee_id == int(employee_id))

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
        now = now_local()
        return self._table.insert(
            lambda goal_id: Goal(
                id=goal_id,
                employee_id=int(employee_id),
                title=title,
                category=category,
                status=GoalStatus.NOT_STARTED,
                priority=priority,
                start_date=start_date,
                target_date=target_date,
                created_at=now,
                updated_at=now,
                description=description,
                manager_id=manager_id,
            )
        )

    def update_progress(
        self,
        goal_id: int,
        *,
        progress: int,
        status: GoalStatus,
        completion_date: Optional[datetime],
    ) -> Optional[Goal]:
        return self._table.update(
            goal_id,
            progress=int(progress),
            status=status,
            completion_date=completion_date,
            updated_at=now_local(),
        )

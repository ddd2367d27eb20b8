from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import GoalCategory, GoalPriority, GoalStatus


@dataclass(frozen=True)
class Goal:
    id: int
    employee_id: int
    title: str
    category: GoalCategory
    status: GoalStatus
    priority: GoalPriority
    start_date: date
    target_date: date
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    completion_date: Optional[datetime] = None
    progress: int = 0
    manager_id: Optional[int] = None

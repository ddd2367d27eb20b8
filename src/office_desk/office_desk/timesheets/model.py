from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class TimeEntry:
    id: int
    employee_id: int
    start_time: datetime
    date: date
    created_at: datetime
    updated_at: datetime
    project_id: Optional[int] = None
    task_id: Optional[int] = None
    description: Optional[str] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = None  # minutes
    billable: bool = False
    approved: bool = False
    approved_by_id: Optional[int] = None

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def get(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        start_time: datetime,
        work_date: date,
        end_time: Optional[datetime] = None,
        duration: Optional[int] = None,
        project_id: Optional[int] = None,
        task_id: Optional[int] = None,
        description: Optional[str] = None,
        billable: bool = False,
    ) -> TimeEntry:
        raise NotImplementedError

    def approve(self, entry_id: int, *, approved_by_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..database.store import MemoryStore
from .model import TimeEntry
from .repository import TimeEntryRepository


class MemoryTimeEntryRepository(TimeEntryRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("time_entries")

    def get(self, entry_id: int) -> Optional[TimeEntry]:
        return self._table.get(entry_id)

    def list_all(self) -> Sequence[TimeEntry]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[TimeEntry]:
        return self._table.where(lambda t: t.employee_id == int(employee_id))

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
        now = now_local()
        return self._table.insert(
            lambda entry_id: TimeEntry(
                id=entry_id,
                employee_id=int(employee_id),
                start_time=start_time,
                date=work_date,
                created_at=now,
                updated_at=now,
                project_id=project_id,
                task_id=task_id,
                description=description,
                end_time=end_time,
                duration=duration,
                billable=bool(billable),
            )
        )

    def approve(self, entry_id: int, *, approved_by_id: int) -> Optional[TimeEntry]:
        return self._table.update(
            entry_id,
            approved=True,
            approved_by_id=int(approved_by_id),
            updated_at=now_local(),
        )

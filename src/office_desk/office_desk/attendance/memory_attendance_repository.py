from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AttendanceStatus
from ..database.store import MemoryStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("attendance")

    def get(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._table.get(attendance_id)

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for record in self._table:
            if record.employee_id == int(employee_id) and record.date == work_date:
                return record
        return None

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._table.where(lambda r: r.employee_id == int(employee_id))

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        clock_in: Optional[datetime] = None,
        clock_out: Optional[datetime] = None,
        work_hours: Optional[int] = None,
        overtime: int = 0,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        now = now_local()
        return self._table.insert(
            lambda attendance_id: AttendanceRecord(
                id=attendance_id,
                employee_id=int(employee_id),
                date=work_date,
                status=status,
                created_at=now,
                clock_in=clock_in,
                clock_out=clock_out,
                work_hours=work_hours,
                overtime=int(overtime),
                location=location,
                notes=notes,
            )
        )

    def update_clock_out(
        self,
        attendance_id: int,
        *,
        clock_out: datetime,
        work_hours: int,
        overtime: int,
    ) -> Optional[AttendanceRecord]:
        return self._table.update(attendance_id, clock_out=clock_out, work_hours=work_hours, overtime=overtime)

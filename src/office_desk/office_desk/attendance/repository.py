from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_clock_out(
        self,
        attendance_id: int,
        *,
        clock_out: datetime,
        work_hours: int,
        overtime: int,
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per employee per day.

    ``work_hours`` and ``overtime`` are stored in minutes.
    """

    id: int
    employee_id: int
    date: date
    status: AttendanceStatus
    created_at: datetime
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    work_hours: Optional[int] = None
    overtime: int = 0
    location: Optional[str] = None
    notes: Optional[str] = None

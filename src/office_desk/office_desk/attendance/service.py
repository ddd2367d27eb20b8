from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import minutes_between, now_local
from ..common.serialization import to_json
from ..common.validators import optional_datetime, optional_text, require_date, require_enum
from ..core.constants import STANDARD_WORKDAY_MINUTES
from ..core.enums import AttendanceStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def worked_minutes(clock_in: datetime, clock_out: datetime) -> tuple[int, int]:
    """Return ``(work_minutes, overtime_minutes)`` for one shift."""
    if clock_out < clock_in:
        raise ValidationError("clock_out cannot be earlier than clock_in")
    minutes = minutes_between(clock_in, clock_out)
    return minutes, max(0, minutes - STANDARD_WORKDAY_MINUTES)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, users: UserRepository):
        self._attendance = attendance
        self._users = users

    def to_view(self, record: AttendanceRecord) -> dict:
        row = to_json(record)
        row["employee"] = user_ref(self._users, record.employee_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.ATTENDANCE_VIEW_ALL):
            records = self._attendance.list_all()
        else:
            records = self._attendance.list_by_employee(actor.id)
        return [self.to_view(r) for r in records]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        work_date = require_date(data.get("date"), "date")
        status = require_enum(data.get("status"), AttendanceStatus, "status")
        clock_in = optional_datetime(data.get("clock_in"), "clock_in")
        clock_out = optional_datetime(data.get("clock_out"), "clock_out")

        if self._attendance.get_for_employee_and_date(actor.id, work_date):
            raise ValidationError("Attendance for this date is already recorded")
        if clock_out and not clock_in:
            raise ValidationError("clock_out requires clock_in")

        work_hours: Optional[int] = None
        overtime = 0
        if clock_in and clock_out:
            work_hours, overtime = worked_minutes(clock_in, clock_out)

        record = self._attendance.create(
            employee_id=actor.id,
            work_date=work_date,
            status=status,
            clock_in=clock_in,
            clock_out=clock_out,
            work_hours=work_hours,
            overtime=overtime,
            location=optional_text(data.get("location"), "location"),
            notes=optional_text(data.get("notes"), "notes"),
        )
        return self.to_view(record)

    def clock_out(self, *, actor: SessionUser, attendance_id: int, data: Optional[dict] = None) -> dict:
        data = data or {}
        record = self._attendance.get(attendance_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        if record.employee_id != actor.id:
            raise AuthorizationError("You can only clock out your own attendance")
        if record.clock_in is None:
            raise ValidationError("You have not clocked in for this record")
        if record.clock_out is not None:
            raise ValidationError("You have already clocked out")

        clock_out = optional_datetime(data.get("clock_out"), "clock_out") or now_local()
        work_hours, overtime = worked_minutes(record.clock_in, clock_out)

        updated = self._attendance.update_clock_out(
            attendance_id, clock_out=clock_out, work_hours=work_hours, overtime=overtime
        )
        if not updated:
            raise NotFoundError("Attendance record not found")
        return self.to_view(updated)

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import LeaveStatus, LeaveType
from ..database.store import MemoryStore
from .model import Leave
from .repository import LeaveRepository


class MemoryLeaveRepository(LeaveRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("leaves")

    def get(self, leave_id: int) -> Optional[Leave]:
        return self._table.get(leave_id)

    def list_all(self) -> Sequence[Leave]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[Leave]:
        return self._table.where(lambda l: l.employee_id == int(employee_id))

    def create(
        self,
        *,
        employee_id: int,
        type: LeaveType,
        start_date: date,
        end_date: date,
        days: int,
        reason: str,
        attachments: tuple[str, ...] = (),
    ) -> Leave:
        now = now_local()
        return self._table.insert(
            lambda leave_id: Leave(
                id=leave_id,
                employee_id=int(employee_id),
                type=type,
                start_date=start_date,
                end_date=end_date,
                days=int(days),
                reason=reason,
                status=LeaveStatus.PENDING,
                created_at=now,
                attachments=tuple(attachments),
            )
        )

    def decide(
        self,
        leave_id: int,
        *,
        status: LeaveStatus,
        approved_by: Optional[int],
        comments: Optional[str] = None,
    ) -> Optional[Leave]:
        current = self._table.get(leave_id)
        if current is None:
            return None
        return self._table.update(
            leave_id,
            status=status,
            approved_by=approved_by,
            approved_at=None if status == LeaveStatus.PENDING else now_local(),
            comments=comments if comments is not None else current.comments,
        )

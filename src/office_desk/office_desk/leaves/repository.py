from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus, LeaveType
from .model import Leave


class LeaveRepository(Protocol):
    def get(self, leave_id: int) -> Optional[Leave]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Leave]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[Leave]:
        raise NotImplementedError

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
        raise NotImplementedError

    def decide(
        self,
        leave_id: int,
        *,
        status: LeaveStatus,
        approved_by: Optional[int],
        comments: Optional[str] = None,
    ) -> Optional[Leave]:
        """Set the status; ``approved_at`` is stamped unless back to pending."""

        raise NotImplementedError

from __future__ import annotations

import logging

from ..common.serialization import to_json
from ..common.validators import optional_int, optional_str_list, optional_text, require_date, require_enum, require_non_empty
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Leave
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: employees request leave, HR approves or rejects it."""

    def __init__(self, leaves: LeaveRepository, users: UserRepository):
        self._leaves = leaves
        self._users = users

    def to_view(self, leave: Leave) -> dict:
        row = to_json(leave)
        row["employee"] = user_ref(self._users, leave.employee_id)
        row["approver"] = user_ref(self._users, leave.approved_by)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.LEAVES_VIEW_ALL):
            leaves = self._leaves.list_all()
        else:
            leaves = self._leaves.list_by_employee(actor.id)
        return [self.to_view(l) for l in leaves]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        leave_type = require_enum(data.get("type"), LeaveType, "type")
        start_date = require_date(data.get("start_date"), "start_date")
        end_date = require_date(data.get("end_date"), "end_date")
        if end_date < start_date:
            raise ValidationError("end_date must be on or after start_date")

        span = (end_date - start_date).days + 1
        days = optional_int(data.get("days"), "days", minimum=1)
        if days is None:
            days = span
        elif days > span:
            raise ValidationError("days cannot exceed the requested date range")

        reason = require_non_empty(data.get("reason"), "reason")
        leave = self._leaves.create(
            employee_id=actor.id,
            type=leave_type,
            start_date=start_date,
            end_date=end_date,
            days=days,
            reason=reason,
            attachments=optional_str_list(data.get("attachments"), "attachments"),
        )
        logger.info("leave %s requested by user %s (%s days)", leave.id, actor.id, days)
        return self.to_view(leave)

    def update_status(self, *, actor: SessionUser, leave_id: int, data: dict) -> dict:
        require(actor.role, Action.LEAVES_DECIDE, "Only HR can approve/reject leaves")
        status = require_enum(data.get("status"), LeaveStatus, "status")

        leave = self._leaves.decide(
            leave_id,
            status=status,
            approved_by=None if status == LeaveStatus.PENDING else actor.id,
            comments=optional_text(data.get("comments"), "comments"),
        )
        if not leave:
            raise NotFoundError("Leave request not found")
        logger.info("leave %s -> %s by user %s", leave_id, status.value, actor.id)
        return self.to_view(leave)

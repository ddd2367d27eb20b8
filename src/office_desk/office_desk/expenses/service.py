from __future__ import annotations

import logging

from ..common.datetime_utils import now_local
from ..common.serialization import to_json
from ..common.validators import optional_text, require_date, require_enum, require_int, require_non_empty
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import ExpenseCategory, ExpenseStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Expense
from .repository import ExpenseRepository

logger = logging.getLogger(__name__)

DECISION_STATUSES = frozenset({ExpenseStatus.APPROVED, ExpenseStatus.REJECTED, ExpenseStatus.REIMBURSED})


class ExpenseService:
    """Use case: expense claims.

    The owner drafts and submits a claim; HR approves, rejects or marks it
    reimbursed. Amounts are integer cents.
    """

    def __init__(self, expenses: ExpenseRepository, users: UserRepository):
        self._expenses = expenses
        self._users = users

    def to_view(self, expense: Expense) -> dict:
        row = to_json(expense)
        row["employee"] = user_ref(self._users, expense.employee_id)
        row["approved_by"] = user_ref(self._users, expense.approved_by_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.EXPENSES_VIEW_ALL):
            expenses = self._expenses.list_all()
        else:
            expenses = self._expenses.list_by_employee(actor.id)
        return [self.to_view(e) for e in expenses]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        currency = optional_text(data.get("currency"), "currency") or DEFAULT_CURRENCY
        if len(currency) != 3:
            raise ValidationError("currency must be a 3-letter code")

        expense = self._expenses.create(
            employee_id=actor.id,
            title=require_non_empty(data.get("title"), "title"),
            category=require_enum(data.get("category"), ExpenseCategory, "category"),
            amount=require_int(data.get("amount"), "amount", minimum=1),
            currency=currency.upper(),
            expense_date=require_date(data.get("expense_date"), "expense_date"),
            description=optional_text(data.get("description"), "description"),
            receipt_url=optional_text(data.get("receipt_url"), "receipt_url"),
        )
        logger.info("expense %s drafted by user %s (%s %s)", expense.id, actor.id, expense.amount, expense.currency)
        return self.to_view(expense)

    def submit(self, *, actor: SessionUser, expense_id: int) -> dict:
        expense = self._expenses.get(expense_id)
        if not expense:
            raise NotFoundError("Expense not found")
        if expense.employee_id != actor.id:
            raise AuthorizationError("Only the owner can submit this expense")

        expense = self._expenses.update(expense_id, status=ExpenseStatus.SUBMITTED)
        if not expense:
            raise NotFoundError("Expense not found")
        logger.info("expense %s submitted by user %s", expense_id, actor.id)
        return self.to_view(expense)

    def update_status(self, *, actor: SessionUser, expense_id: int, data: dict) -> dict:
        require(actor.role, Action.EXPENSES_DECIDE, "Only HR can approve/reject expenses")
        status = require_enum(data.get("status"), ExpenseStatus, "status")
        if status not in DECISION_STATUSES:
            allowed = ", ".join(sorted(s.value for s in DECISION_STATUSES))
            raise ValidationError(f"status must be one of: {allowed}")

        current = self._expenses.get(expense_id)
        if not current:
            raise NotFoundError("Expense not found")

        now = now_local()
        changes = {"status": status, "approved_by_id": actor.id}
        if status == ExpenseStatus.REJECTED:
            changes["approved_at"] = None
            changes["rejection_reason"] = optional_text(data.get("rejection_reason"), "rejection_reason")
        else:
            changes["approved_at"] = current.approved_at or now
            changes["rejection_reason"] = None
        if status == ExpenseStatus.REIMBURSED:
            changes["reimbursed_at"] = now

        expense = self._expenses.update(expense_id, **changes)
        if not expense:
            raise NotFoundError("Expense not found")
        logger.info("expense %s -> %s by user %s", expense_id, status.value, actor.id)
        return self.to_view(expense)

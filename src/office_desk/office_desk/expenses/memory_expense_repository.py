from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ExpenseCategory, ExpenseStatus
from ..database.store import MemoryStore
from .model import Expense
from .repository import ExpenseRepository


class MemoryExpenseRepository(ExpenseRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("expenses")

    def get(self, expense_id: int) -> Optional[Expense]:
        return self._table.get(expense_id)

    def list_all(self) -> Sequence[Expense]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[Expense]:
        return self._table.where(lambda e: e.employee_id == int(employee_id))

    def create(
        self,
        *,
        employee_id: int,
        title: str,
        category: ExpenseCategory,
        amount: int,
        currency: str,
        expense_date: date,
        description: Optional[str] = None,
        receipt_url: Optional[str] = None,
    ) -> Expense:
        now = now_local()
        return self._table.insert(
            lambda expense_id: Expense(
                id=expense_id,
                employee_id=int(employee_id),
                title=title,
                category=category,
                amount=int(amount),
                currency=currency,
                expense_date=expense_date,
                status=ExpenseStatus.DRAFT,
                created_at=now,
                updated_at=now,
                description=description,
                receipt_url=receipt_url,
            )
        )

    def update(self, expense_id: int, **changes) -> Optional[Expense]:
        return self._table.update(expense_id, updated_at=now_local(), **changes)

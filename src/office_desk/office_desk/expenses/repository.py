from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ExpenseCategory
from .model import Expense


class ExpenseRepository(Protocol):
    def get(self, expense_id: int) -> Optional[Expense]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Expense]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[Expense]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, expense_id: int, **changes) -> Optional[Expense]:
        """Apply ``changes`` and bump ``updated_at``."""

        raise NotImplementedError

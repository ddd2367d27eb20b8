from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ExpenseCategory, ExpenseStatus


@dataclass(frozen=True)
class Expense:
    id: int
    employee_id: int
    title: str
    category: ExpenseCategory
    amount: int  # cents
    currency: str
    expense_date: date
    status: ExpenseStatus
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    receipt_url: Optional[str] = None
    approved_by_id: Optional[int] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    reimbursed_at: Optional[datetime] = None

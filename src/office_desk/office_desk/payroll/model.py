from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PayrollStatus


@dataclass(frozen=True)
class PayComponents:
    """Amounts that make up one pay slip, in whole currency units."""

    basic_salary: int
    allowances: int = 0
    deductions: int = 0
    overtime: int = 0
    bonus: int = 0


@dataclass(frozen=True)
class PayrollRecord:
    id: int
    employee_id: int
    pay_period: str
    basic_salary: int
    allowances: int
    deductions: int
    overtime: int
    bonus: int
    net_pay: int
    status: PayrollStatus
    created_at: datetime
    pay_date: Optional[datetime] = None

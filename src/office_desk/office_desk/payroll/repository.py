from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayComponents, PayrollRecord


class PayrollRepository(Protocol):
    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        pay_period: str,
        components: PayComponents,
        net_pay: int,
        status: PayrollStatus = PayrollStatus.DRAFT,
    ) -> PayrollRecord:
        raise NotImplementedError

    def update_status(
        self, payroll_id: int, *, status: PayrollStatus, pay_date: Optional[datetime]
    ) -> Optional[PayrollRecord]:
        raise NotImplementedError

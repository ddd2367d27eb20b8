from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import PayrollStatus
from ..database.store import MemoryStore
from .model import PayComponents, PayrollRecord
from .repository import PayrollRepository


class MemoryPayrollRepository(PayrollRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("payroll")

    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        return self._table.get(payroll_id)

    def list_all(self) -> Sequence[PayrollRecord]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[PayrollRecord]:
        return self._table.where(lambda p: p.employee_id == int(employee_id))

    def create(
        self,
        *,
        employee_id: int,
        pay_period: str,
        components: PayComponents,
        net_pay: int,
        status: PayrollStatus = PayrollStatus.DRAFT,
    ) -> PayrollRecord:
        now = now_local()
        return self._table.insert(
            lambda payroll_id: PayrollRecord(
                id=payroll_id,
                employee_id=int(employee_id),
                pay_period=pay_period,
                basic_salary=components.basic_salary,
                allowances=components.allowances,
                deductions=components.deductions,
                overtime=components.overtime,
                bonus=components.bonus,
                net_pay=net_pay,
                status=status,
                created_at=now,
            )
        )

    def update_status(
        self, payroll_id: int, *, status: PayrollStatus, pay_date: Optional[datetime]
    ) -> Optional[PayrollRecord]:
        return self._table.update(payroll_id, status=status, pay_date=pay_date)

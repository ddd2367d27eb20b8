from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.serialization import to_json
from ..common.validators import optional_enum, optional_int, require_enum, require_int, require_non_empty
from ..core.enums import PayrollStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayComponents, PayrollRecord
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        users: UserRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._users = users
        self._calculator = calculator or StandardPayrollCalculator()

    def to_view(self, record: PayrollRecord) -> dict:
        row = to_json(record)
        row["employee"] = user_ref(self._users, record.employee_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.PAYROLL_VIEW_ALL):
            records = self._payroll.list_all()
        else:
            records = self._payroll.list_by_employee(actor.id)
        return [self.to_view(r) for r in records]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        require(actor.role, Action.PAYROLL_MANAGE, "Only HR can manage payroll")

        employee_id = require_int(data.get("employee_id"), "employee_id", minimum=1)
        if not self._users.get_by_id(employee_id):
            raise ValidationError("employee_id does not exist")

        components = PayComponents(
            basic_salary=require_int(data.get("basic_salary"), "basic_salary", minimum=0),
            allowances=optional_int(data.get("allowances"), "allowances", minimum=0) or 0,
            deductions=optional_int(data.get("deductions"), "deductions", minimum=0) or 0,
            overtime=optional_int(data.get("overtime"), "overtime", minimum=0) or 0,
            bonus=optional_int(data.get("bonus"), "bonus", minimum=0) or 0,
        )
        net_pay = self._calculator.net_pay(components)
        if net_pay < 0:
            raise ValidationError("deductions cannot exceed gross pay")

        record = self._payroll.create(
            employee_id=employee_id,
            pay_period=require_non_empty(data.get("pay_period"), "pay_period"),
            components=components,
            net_pay=net_pay,
            status=optional_enum(data.get("status"), PayrollStatus, "status", PayrollStatus.DRAFT),
        )
        logger.info("payroll %s created for employee %s by user %s", record.id, employee_id, actor.id)
        return self.to_view(record)

    def update_status(self, *, actor: SessionUser, payroll_id: int, status) -> dict:
        require(actor.role, Action.PAYROLL_MANAGE, "Only HR can manage payroll")
        new_status = require_enum(status, PayrollStatus, "status")

        current = self._payroll.get(payroll_id)
        if not current:
            raise NotFoundError("Payroll record not found")

        pay_date = None
        if new_status == PayrollStatus.PAID:
            pay_date = current.pay_date or now_local()

        record = self._payroll.update_status(payroll_id, status=new_status, pay_date=pay_date)
        if not record:
            raise NotFoundError("Payroll record not found")
        logger.info("payroll %s -> %s by user %s", payroll_id, new_status.value, actor.id)
        return self.to_view(record)

    def period_summary(self, *, actor: SessionUser) -> list[dict]:
        require(actor.role, Action.PAYROLL_VIEW_ALL, "Only HR can view payroll summaries")

        summary_map: dict[str, dict] = {}
        for r in self._payroll.list_all():
            s = summary_map.get(r.pay_period)
            if not s:
                s = {"pay_period": r.pay_period, "records": 0, "total_net_pay": 0, "paid": 0}
                summary_map[r.pay_period] = s
            s["records"] += 1
            s["total_net_pay"] += r.net_pay
            if r.status == PayrollStatus.PAID:
                s["paid"] += 1

        summary = list(summary_map.values())
        summary.sort(key=lambda x: x["pay_period"], reverse=True)
        return summary

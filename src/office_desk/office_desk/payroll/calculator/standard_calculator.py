from __future__ import annotations

from .base import PayrollCalculator
from ..model import PayComponents


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: basic + allowances + overtime + bonus - deductions."""

    def net_pay(self, components: PayComponents) -> int:
        gross = components.basic_salary + components.allowances + components.overtime + components.bonus
        return gross - components.deductions

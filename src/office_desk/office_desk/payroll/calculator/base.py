from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PayComponents


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_pay(self, components: PayComponents) -> int:
        raise NotImplementedError

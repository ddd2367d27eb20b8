from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import EnrollmentStatus
from .model import Training, TrainingEnrollment


class TrainingRepository(Protocol):
    def get(self, training_id: int) -> Optional[Training]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Training]:
        raise NotImplementedError

    def create(self, *, created_by_id: int, **fields) -> Training:
        raise NotImplementedError

    def update(self, training_id: int, **changes) -> Optional[Training]:
        raise NotImplementedError


class EnrollmentRepository(Protocol):
    def get(self, enrollment_id: int) -> Optional[TrainingEnrollment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[TrainingEnrollment]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: int) -> Sequence[TrainingEnrollment]:
        raise NotImplementedError

    def list_by_training(self, training_id: int) -> Sequence[TrainingEnrollment]:
        raise NotImplementedError

    def create(
        self,
        *,
        training_id: int,
        employee_id: int,
        status: EnrollmentStatus = EnrollmentStatus.ENROLLED,
        notes: Optional[str] = None,
    ) -> TrainingEnrollment:
        raise NotImplementedError

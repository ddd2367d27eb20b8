from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import EnrollmentStatus
from ..database.store import MemoryStore
from .model import Training, TrainingEnrollment
from .repository import EnrollmentRepository, TrainingRepository


class MemoryTrainingRepository(TrainingRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("trainings")

    def get(self, training_id: int) -> Optional[Training]:
        return self._table.get(training_id)

    def list_all(self) -> Sequence[Training]:
        return self._table.all()

    def create(self, *, created_by_id: int, **fields) -> Training:
        now = now_local()
        return self._table.insert(
            lambda training_id: Training(
                id=training_id,
                created_by_id=int(created_by_id),
                created_at=now,
                **fields,
            )
        )

    def update(self, training_id: int, **changes) -> Optional[Training]:
        return self._table.update(training_id, **changes)


class MemoryEnrollmentRepository(EnrollmentRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("training_enrollments")

    def get(self, enrollment_id: int) -> Optional[TrainingEnrollment]:
        return self._table.get(enrollment_id)

    def list_all(self) -> Sequence[TrainingEnrollment]:
        return self._table.all()

    def list_by_employee(self, employee_id: int) -> Sequence[TrainingEnrollment]:
        return self._table.where(lambda e: e.employee_id == int(employee_id))

    def list_by_training(self, training_id: int) -> Sequence[TrainingEnrollment]:
        return self._table.where(lambda e: e.training_id == int(training_id))

    def create(
        self,
        *,
        training_id: int,
        employee_id: int,
        status: EnrollmentStatus = EnrollmentStatus.ENROLLED,
        notes: Optional[str] = None,
    ) -> TrainingEnrollment:
        now = now_local()
        return self._table.insert(
            lambda enrollment_id: TrainingEnrollment(
                id=enrollment_id,
                training_id=int(training_id),
                employee_id=int(employee_id),
                status=status,
                enrolled_at=now,
                notes=notes,
            )
        )

from __future__ import annotations

import logging

from ..common.serialization import ref, to_json
from ..common.validators import (
    optional_bool,
    optional_datetime,
    optional_enum,
    optional_int,
    optional_text,
    require_datetime,
    require_enum,
    require_int,
    require_non_empty,
)
from ..core.enums import EnrollmentStatus, TrainingCategory, TrainingStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Training, TrainingEnrollment
from .repository import EnrollmentRepository, TrainingRepository

logger = logging.getLogger(__name__)

CLOSED_TRAINING_STATUSES = frozenset({TrainingStatus.COMPLETED, TrainingStatus.CANCELLED})


class TrainingService:
    """Use case: HR runs the training catalogue, employees enroll in it.

    Seats are counted over enrollments that are not cancelled.
    """

    def __init__(self, trainings: TrainingRepository, enrollments: EnrollmentRepository, users: UserRepository):
        self._trainings = trainings
        self._enrollments = enrollments
        self._users = users

    # Trainings

    def to_view(self, training: Training) -> dict:
        row = to_json(training)
        row["created_by"] = user_ref(self._users, training.created_by_id)
        row["enrolled_count"] = self._seats_taken(training.id)
        return row

    def list_trainings(self) -> list[dict]:
        return [self.to_view(t) for t in self._trainings.list_all()]

    def _parse_training(self, data: dict, *, partial: bool) -> dict:
        fields = {}
        if not partial or "title" in data:
            fields["title"] = require_non_empty(data.get("title"), "title")
        if not partial or "category" in data:
            fields["category"] = require_enum(data.get("category"), TrainingCategory, "category")
        if not partial or "duration" in data:
            fields["duration"] = require_int(data.get("duration"), "duration", minimum=1)
        if not partial or "start_date" in data:
            fields["start_date"] = require_datetime(data.get("start_date"), "start_date")
        if not partial or "status" in data:
            fields["status"] = optional_enum(data.get("status"), TrainingStatus, "status", TrainingStatus.SCHEDULED)
        if not partial or "end_date" in data:
            fields["end_date"] = optional_datetime(data.get("end_date"), "end_date")
        if not partial or "max_participants" in data:
            fields["max_participants"] = optional_int(data.get("max_participants"), "max_participants", minimum=1)
        if not partial or "is_online" in data:
            fields["is_online"] = optional_bool(data.get("is_online"), "is_online")
        for name in ("description", "instructor", "location"):
            if not partial or name in data:
                fields[name] = optional_text(data.get(name), name)
        return fields

    def create_training(self, *, actor: SessionUser, data: dict) -> dict:
        require(actor.role, Action.TRAININGS_MANAGE, "Only HR can create trainings")

        fields = self._parse_training(data, partial=False)
        if fields["end_date"] is not None and fields["end_date"] < fields["start_date"]:
            raise ValidationError("end_date must be after start_date")

        training = self._trainings.create(created_by_id=actor.id, **fields)
        logger.info("training %s created by user %s", training.id, actor.id)
        return self.to_view(training)

    def update_training(self, *, actor: SessionUser, training_id: int, data: dict) -> dict:
        require(actor.role, Action.TRAININGS_MANAGE, "Only HR can update trainings")

        current = self._trainings.get(training_id)
        if not current:
            raise NotFoundError("Training not found")

        changes = self._parse_training(data, partial=True)
        if not changes:
            raise ValidationError("Nothing to update")

        start = changes.get("start_date", current.start_date)
        end = changes.get("end_date", current.end_date)
        if end is not None and end < start:
            raise ValidationError("end_date must be after start_date")

        max_participants = changes.get("max_participants", current.max_participants)
        if max_participants is not None and max_participants < self._seats_taken(training_id):
            raise ValidationError("max_participants is below the current number of enrollments")

        training = self._trainings.update(training_id, **changes)
        if not training:
            raise NotFoundError("Training not found")
        return self.to_view(training)

    # Enrollments

    def _seats_taken(self, training_id: int) -> int:
        return sum(
            1 for e in self._enrollments.list_by_training(training_id)
            if e.status != EnrollmentStatus.CANCELLED
        )

    def enrollment_view(self, enrollment: TrainingEnrollment) -> dict:
        row = to_json(enrollment)
        row["training"] = ref(self._trainings.get(enrollment.training_id), "title", "category")
        row["employee"] = user_ref(self._users, enrollment.employee_id)
        return row

    def list_enrollments(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.ENROLLMENTS_VIEW_ALL):
            enrollments = self._enrollments.list_all()
        else:
            enrollments = self._enrollments.list_by_employee(actor.id)
        return [self.enrollment_view(e) for e in enrollments]

    def enroll(self, *, actor: SessionUser, data: dict) -> dict:
        training_id = require_int(data.get("training_id"), "training_id", minimum=1)
        training = self._trainings.get(training_id)
        if not training:
            raise ValidationError("training_id does not exist")
        if training.status in CLOSED_TRAINING_STATUSES:
            raise ValidationError(f"Training is {training.status.value}")

        # HR may enroll other employees
        employee_id = actor.id
        if is_allowed(actor.role, Action.ENROLLMENTS_VIEW_ALL):
            employee_id = optional_int(data.get("employee_id"), "employee_id", minimum=1) or actor.id
            if not self._users.get_by_id(employee_id):
                raise ValidationError("employee_id does not exist")

        for e in self._enrollments.list_by_training(training_id):
            if e.employee_id == employee_id and e.status != EnrollmentStatus.CANCELLED:
                raise ValidationError("Employee is already enrolled in this training")

        if training.max_participants is not None and self._seats_taken(training_id) >= training.max_participants:
            raise ValidationError("Training is full")

        enrollment = self._enrollments.create(
            training_id=training_id,
            employee_id=employee_id,
            notes=optional_text(data.get("notes"), "notes"),
        )
        logger.info("user %s enrolled in training %s", employee_id, training_id)
        return self.enrollment_view(enrollment)

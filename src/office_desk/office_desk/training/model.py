from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import EnrollmentStatus, TrainingCategory, TrainingStatus


@dataclass(frozen=True)
class Training:
    id: int
    title: str
    category: TrainingCategory
    duration: int  # hours
    status: TrainingStatus
    start_date: datetime
    created_by_id: int
    created_at: datetime
    description: Optional[str] = None
    instructor: Optional[str] = None
    max_participants: Optional[int] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    is_online: bool = False


@dataclass(frozen=True)
class TrainingEnrollment:
    id: int
    training_id: int
    employee_id: int
    status: EnrollmentStatus
    enrolled_at: datetime
    completion_date: Optional[datetime] = None
    score: Optional[int] = None
    certificate_issued: bool = False
    notes: Optional[str] = None

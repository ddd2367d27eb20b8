from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    HR = "hr"
    IT = "it"
    EMPLOYEE = "employee"


class TicketStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class TicketPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ProjectStatus(str, Enum):
    PLANNING = "planning"
    ACTIVE = "active"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class LeaveType(str, Enum):
    ANNUAL = "annual"
    SICK = "sick"
    MATERNITY = "maternity"
    PATERNITY = "paternity"
    PERSONAL = "personal"
    EMERGENCY = "emergency"


class LeaveStatus(str, Enum):
    """Leave approval flow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half_day"


class PayrollStatus(str, Enum):
    DRAFT = "draft"
    PROCESSED = "processed"
    PAID = "paid"


class AnnouncementType(str, Enum):
    GENERAL = "general"
    URGENT = "urgent"
    POLICY = "policy"
    EVENT = "event"
    HOLIDAY = "holiday"


class Audience(str, Enum):
    ALL = "all"
    HR = "hr"
    IT = "it"
    EMPLOYEES = "employees"
    MANAGERS = "managers"


class AnnouncementPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class DocumentCategory(str, Enum):
    POLICY = "policy"
    HANDBOOK = "handbook"
    FORM = "form"
    TRAINING = "training"
    CONTRACT = "contract"
    OTHER = "other"


class AccessLevel(str, Enum):
    PUBLIC = "public"
    HR_ONLY = "hr_only"
    MANAGERS = "managers"
    SPECIFIC_USERS = "specific_users"


class TrainingCategory(str, Enum):
    MANDATORY = "mandatory"
    PROFESSIONAL = "professional"
    SKILL = "skill"
    COMPLIANCE = "compliance"
    SAFETY = "safety"


class TrainingStatus(str, Enum):
    SCHEDULED = "scheduled"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EnrollmentStatus(str, Enum):
    ENROLLED = "enrolled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no_show"


class GoalCategory(str, Enum):
    PERFORMANCE = "performance"
    SKILL = "skill"
    CAREER = "career"
    PROJECT = "project"


class GoalStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class GoalPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ExpenseCategory(str, Enum):
    TRAVEL = "travel"
    MEALS = "meals"
    OFFICE = "office"
    TRAINING = "training"
    EQUIPMENT = "equipment"
    OTHER = "other"


class ExpenseStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"
    REIMBURSED = "reimbursed"

"""Navigation and page layout of the server-rendered UI.

Each section is one entity page: a table over the JSON list endpoint's rows,
a create form that posts JSON back to the API, and per-row action buttons
that call the record's PATCH/PUT/DELETE endpoints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Type

from ..core.enums import (
    AccessLevel,
    AnnouncementPriority,
    AnnouncementType,
    Audience,
    DocumentCategory,
    ExpenseCategory,
    ExpenseStatus,
    GoalCategory,
    GoalPriority,
    GoalStatus,
    LeaveStatus,
    LeaveType,
    AttendanceStatus,
    PayrollStatus,
    ProjectStatus,
    Role,
    TaskStatus,
    TicketPriority,
    TicketStatus,
    TrainingCategory,
    TrainingStatus,
)
from ..core.permissions import Action, is_allowed

ALL_ROLES = frozenset(Role)


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    kind: str = "text"  # text, textarea, number, date, datetime-local, select, checkbox, email, password
    options: tuple[str, ...] = ()
    required: bool = True


def choice(name: str, label: str, enum_cls: Type[Enum], *, required: bool = True) -> FormField:
    return FormField(name, label, "select", tuple(m.value for m in enum_cls), required)


@dataclass(frozen=True)
class RowAction:
    """Button on a table row calling ``method url`` with a JSON ``body``.

    ``{id}`` in ``url`` is the row id; ``id_field`` copies the row id into the
    body. When ``prompt`` is set the browser asks for that body field first.

    The button shows when the row's ``status_key`` value is in ``statuses``
    (if given) and the user holds ``permission`` or owns the row through
    ``owner_key``. With neither set, every user sees it.
    """

    label: str
    method: str
    url: str
    body: dict = field(default_factory=dict)
    permission: Optional[Action] = None
    owner_key: Optional[str] = None
    status_key: str = "status"
    statuses: tuple = ()
    prompt: Optional[str] = None
    prompt_label: str = ""
    id_field: Optional[str] = None
    confirm: bool = False
    style: str = "outline-primary"

    def applies(self, row: dict, user) -> bool:
        if self.statuses and row.get(self.status_key) not in self.statuses:
            return False
        if self.permission is None and self.owner_key is None:
            return True
        if self.permission is not None and is_allowed(user.role, self.permission):
            return True
        return self.owner_key is not None and lookup(row, self.owner_key) == user.id

    def url_for(self, row: dict) -> str:
        return self.url.format(id=row["id"])

    def body_for(self, row: dict) -> dict:
        body = dict(self.body)
        if self.id_field:
            body[self.id_field] = row["id"]
        return body


def set_status(label: str, url: str, status: Enum, **kwargs) -> RowAction:
    return RowAction(label, "PATCH", url, {"status": status.value}, **kwargs)


@dataclass(frozen=True)
class Section:
    key: str
    title: str
    path: str
    api: str
    columns: tuple[tuple[str, str], ...]
    load: Callable
    roles: frozenset = ALL_ROLES
    form: tuple[FormField, ...] = ()
    form_roles: frozenset = ALL_ROLES
    actions: tuple[RowAction, ...] = ()
    # per-role sidebar label, e.g. "All Tickets" for IT
    nav_titles: dict = field(default_factory=dict)

    def nav_title(self, role: Role) -> str:
        return self.nav_titles.get(role, self.title)

    def can_create(self, role: Role) -> bool:
        return bool(self.form) and role in self.form_roles

    def actions_for(self, row: dict, user) -> list[RowAction]:
        return [a for a in self.actions if a.applies(row, user)]


SECTIONS: tuple[Section, ...] = (
    Section(
        key="employees",
        title="All Employees",
        path="/employees",
        api="/api/users",
        roles=frozenset({Role.HR}),
        columns=(("id", "ID"), ("name", "Name"), ("email", "Email"), ("role", "Role")),
        load=lambda c, user: c.user_service.list_directory(),
        form=(
            FormField("name", "Name"),
            FormField("email", "Email", "email"),
            FormField("password", "Password", "password"),
            choice("role", "Role", Role),
            FormField("department", "Department", required=False),
            FormField("position", "Position", required=False),
        ),
        form_roles=frozenset({Role.HR}),
    ),
    Section(
        key="tickets",
        title="My Tickets",
        path="/tickets",
        api="/api/tickets",
        columns=(
            ("id", "ID"),
            ("title", "Title"),
            ("priority", "Priority"),
            ("status", "Status"),
            ("created_by.name", "Created by"),
            ("assigned_to.name", "Assigned to"),
        ),
        load=lambda c, user: c.ticket_service.list_for(user),
        form=(
            FormField("title", "Title"),
            FormField("description", "Description", "textarea"),
            choice("priority", "Priority", TicketPriority),
        ),
        actions=(
            set_status(
                "Start", "/api/tickets/{id}/status", TicketStatus.IN_PROGRESS,
                permission=Action.TICKETS_UPDATE_STATUS, statuses=(TicketStatus.OPEN.value,),
            ),
            set_status(
                "Resolve", "/api/tickets/{id}/status", TicketStatus.RESOLVED,
                permission=Action.TICKETS_UPDATE_STATUS,
                statuses=(TicketStatus.OPEN.value, TicketStatus.IN_PROGRESS.value),
                style="outline-success",
            ),
        ),
        nav_titles={Role.IT: "All Tickets"},
    ),
    Section(
        key="projects",
        title="Projects",
        path="/projects",
        api="/api/projects",
        columns=(
            ("id", "ID"),
            ("name", "Name"),
            ("status", "Status"),
            ("manager.name", "Manager"),
            ("start_date", "Start"),
            ("end_date", "End"),
        ),
        load=lambda c, user: c.project_service.list_all(),
        form=(
            FormField("name", "Name"),
            FormField("description", "Description", "textarea"),
            choice("status", "Status", ProjectStatus, required=False),
            FormField("start_date", "Start date", "date"),
            FormField("end_date", "End date", "date"),
        ),
        form_roles=frozenset({Role.HR, Role.IT}),
        actions=(
            RowAction(
                "Activate", "PUT", "/api/projects/{id}", {"status": ProjectStatus.ACTIVE.value},
                permission=Action.PROJECTS_MANAGE,
                statuses=(ProjectStatus.PLANNING.value, ProjectStatus.ON_HOLD.value),
            ),
            RowAction(
                "Hold", "PUT", "/api/projects/{id}", {"status": ProjectStatus.ON_HOLD.value},
                permission=Action.PROJECTS_MANAGE, statuses=(ProjectStatus.ACTIVE.value,),
                style="outline-secondary",
            ),
            RowAction(
                "Complete", "PUT", "/api/projects/{id}", {"status": ProjectStatus.COMPLETED.value},
                permission=Action.PROJECTS_MANAGE, statuses=(ProjectStatus.ACTIVE.value,),
                style="outline-success",
            ),
            RowAction(
                "Rename", "PUT", "/api/projects/{id}",
                permission=Action.PROJECTS_MANAGE, prompt="name", prompt_label="New project name",
                style="outline-secondary",
            ),
            RowAction(
                "Move end date", "PUT", "/api/projects/{id}",
                permission=Action.PROJECTS_MANAGE, prompt="end_date", prompt_label="New end date (YYYY-MM-DD)",
                style="outline-secondary",
            ),
            RowAction(
                "Delete", "DELETE", "/api/projects/{id}",
                permission=Action.PROJECTS_MANAGE, confirm=True, style="outline-danger",
            ),
        ),
    ),
    Section(
        key="tasks",
        title="Tasks",
        path="/tasks",
        api="/api/tasks",
        columns=(
            ("id", "ID"),
            ("title", "Title"),
            ("project.name", "Project"),
            ("assigned_to.name", "Assignee"),
            ("status", "Status"),
            ("due_date", "Due"),
        ),
        load=lambda c, user: c.task_service.list_for(user, mine=user.role == Role.EMPLOYEE),
        form=(
            FormField("title", "Title"),
            FormField("description", "Description", "textarea"),
            FormField("project_id", "Project ID", "number"),
            FormField("assigned_to_id", "Assignee ID", "number"),
            FormField("due_date", "Due date", "date"),
        ),
        form_roles=frozenset({Role.HR, Role.IT}),
        actions=(
            set_status(
                "Start", "/api/tasks/{id}/status", TaskStatus.IN_PROGRESS,
                permission=Action.TASKS_MANAGE, owner_key="assigned_to.id",
                statuses=(TaskStatus.PENDING.value,),
            ),
            set_status(
                "Complete", "/api/tasks/{id}/status", TaskStatus.COMPLETED,
                permission=Action.TASKS_MANAGE, owner_key="assigned_to.id",
                statuses=(TaskStatus.PENDING.value, TaskStatus.IN_PROGRESS.value),
                style="outline-success",
            ),
            RowAction(
                "Delete", "DELETE", "/api/tasks/{id}",
                permission=Action.TASKS_MANAGE, confirm=True, style="outline-danger",
            ),
        ),
        nav_titles={Role.EMPLOYEE: "My Tasks"},
    ),
    Section(
        key="attendance",
        title="Attendance",
        path="/attendance",
        api="/api/attendance",
        columns=(
            ("date", "Date"),
            ("employee.name", "Employee"),
            ("status", "Status"),
            ("clock_in", "In"),
            ("clock_out", "Out"),
            ("work_hours", "Minutes"),
        ),
        load=lambda c, user: c.attendance_service.list_for(user),
        form=(
            FormField("date", "Date", "date"),
            choice("status", "Status", AttendanceStatus),
            FormField("clock_in", "Clock in", "datetime-local", required=False),
            FormField("location", "Location", required=False),
            FormField("notes", "Notes", "textarea", required=False),
        ),
        actions=(
            RowAction(
                "Clock out", "PATCH", "/api/attendance/{id}/clock-out",
                owner_key="employee.id", status_key="clock_out", statuses=(None,),
            ),
        ),
    ),
    Section(
        key="leaves",
        title="Leaves",
        path="/leaves",
        api="/api/leaves",
        columns=(
            ("employee.name", "Employee"),
            ("type", "Type"),
            ("start_date", "From"),
            ("end_date", "To"),
            ("days", "Days"),
            ("status", "Status"),
        ),
        load=lambda c, user: c.leave_service.list_for(user),
        form=(
            choice("type", "Type", LeaveType),
            FormField("start_date", "From", "date"),
            FormField("end_date", "To", "date"),
            FormField("reason", "Reason", "textarea"),
        ),
        actions=(
            set_status(
                "Approve", "/api/leaves/{id}/status", LeaveStatus.APPROVED,
                permission=Action.LEAVES_DECIDE, statuses=(LeaveStatus.PENDING.value,),
                style="outline-success",
            ),
            set_status(
                "Reject", "/api/leaves/{id}/status", LeaveStatus.REJECTED,
                permission=Action.LEAVES_DECIDE, statuses=(LeaveStatus.PENDING.value,),
                prompt="comments", prompt_label="Comments for the employee",
                style="outline-danger",
            ),
        ),
    ),
    Section(
        key="payroll",
        title="Payroll",
        path="/payroll",
        api="/api/payroll",
        columns=(
            ("pay_period", "Period"),
            ("employee.name", "Employee"),
            ("basic_salary", "Basic"),
            ("net_pay", "Net pay"),
            ("status", "Status"),
            ("pay_date", "Paid on"),
        ),
        load=lambda c, user: c.payroll_service.list_for(user),
        form=(
            FormField("employee_id", "Employee ID", "number"),
            FormField("pay_period", "Pay period"),
            FormField("basic_salary", "Basic salary", "number"),
            FormField("allowances", "Allowances", "number", required=False),
            FormField("deductions", "Deductions", "number", required=False),
            FormField("overtime", "Overtime", "number", required=False),
            FormField("bonus", "Bonus", "number", required=False),
        ),
        form_roles=frozenset({Role.HR}),
        actions=(
            set_status(
                "Process", "/api/payroll/{id}/status", PayrollStatus.PROCESSED,
                permission=Action.PAYROLL_MANAGE, statuses=(PayrollStatus.DRAFT.value,),
            ),
            set_status(
                "Mark paid", "/api/payroll/{id}/status", PayrollStatus.PAID,
                permission=Action.PAYROLL_MANAGE,
                statuses=(PayrollStatus.DRAFT.value, PayrollStatus.PROCESSED.value),
                style="outline-success",
            ),
        ),
    ),
    Section(
        key="announcements",
        title="Announcements",
        path="/announcements",
        api="/api/announcements",
        columns=(
            ("title", "Title"),
            ("type", "Type"),
            ("priority", "Priority"),
            ("target_audience", "Audience"),
            ("publish_date", "Published"),
            ("is_read", "Read"),
        ),
        load=lambda c, user: c.announcement_service.list_for(user),
        form=(
            FormField("title", "Title"),
            FormField("content", "Content", "textarea"),
            choice("type", "Type", AnnouncementType),
            choice("target_audience", "Audience", Audience, required=False),
            choice("priority", "Priority", AnnouncementPriority, required=False),
            FormField("expiry_date", "Expires", "datetime-local", required=False),
        ),
        form_roles=frozenset({Role.HR}),
        actions=(
            RowAction("Mark read", "POST", "/api/announcements/{id}/read", status_key="is_read", statuses=(False,)),
            RowAction(
                "Delete", "DELETE", "/api/announcements/{id}",
                permission=Action.ANNOUNCEMENTS_MANAGE, confirm=True, style="outline-danger",
            ),
        ),
    ),
    Section(
        key="documents",
        title="Documents",
        path="/documents",
        api="/api/documents",
        columns=(
            ("title", "Title"),
            ("category", "Category"),
            ("file_name", "File"),
            ("access_level", "Access"),
            ("uploaded_by.name", "Uploaded by"),
            ("download_count", "Downloads"),
        ),
        load=lambda c, user: c.document_service.list_for(user),
        form=(
            FormField("title", "Title"),
            FormField("description", "Description", "textarea", required=False),
            FormField("file_name", "File name"),
            FormField("file_type", "File type"),
            FormField("file_size", "Size (bytes)", "number"),
            choice("category", "Category", DocumentCategory),
            choice("access_level", "Access level", AccessLevel, required=False),
            FormField("tags", "Tags (comma separated)", required=False),
        ),
        actions=(
            RowAction("Download", "POST", "/api/documents/{id}/download"),
            RowAction(
                "Delete", "DELETE", "/api/documents/{id}",
                permission=Action.DOCUMENTS_MANAGE, owner_key="uploaded_by.id",
                confirm=True, style="outline-danger",
            ),
        ),
    ),
    Section(
        key="training",
        title="Training",
        path="/training",
        api="/api/trainings",
        columns=(
            ("id", "ID"),
            ("title", "Title"),
            ("category", "Category"),
            ("status", "Status"),
            ("start_date", "Starts"),
            ("enrolled_count", "Enrolled"),
        ),
        load=lambda c, user: c.training_service.list_trainings(),
        form=(
            FormField("title", "Title"),
            choice("category", "Category", TrainingCategory),
            FormField("duration", "Duration (hours)", "number"),
            FormField("start_date", "Starts", "datetime-local"),
            FormField("instructor", "Instructor", required=False),
            FormField("max_participants", "Seats", "number", required=False),
            FormField("location", "Location", required=False),
            FormField("is_online", "Online", "checkbox", required=False),
        ),
        form_roles=frozenset({Role.HR}),
        actions=(
            RowAction(
                "Enroll", "POST", "/api/training-enrollments", id_field="training_id",
                statuses=(TrainingStatus.SCHEDULED.value, TrainingStatus.ONGOING.value),
            ),
            RowAction(
                "Cancel", "PUT", "/api/trainings/{id}", {"status": TrainingStatus.CANCELLED.value},
                permission=Action.TRAININGS_MANAGE,
                statuses=(TrainingStatus.SCHEDULED.value, TrainingStatus.ONGOING.value),
                confirm=True, style="outline-danger",
            ),
        ),
    ),
    Section(
        key="goals",
        title="Goals",
        path="/goals",
        api="/api/goals",
        columns=(
            ("title", "Title"),
            ("employee.name", "Employee"),
            ("category", "Category"),
            ("priority", "Priority"),
            ("progress", "Progress"),
            ("status", "Status"),
        ),
        load=lambda c, user: c.goal_service.list_for(user),
        form=(
            FormField("title", "Title"),
            FormField("description", "Description", "textarea", required=False),
            choice("category", "Category", GoalCategory),
            choice("priority", "Priority", GoalPriority),
            FormField("start_date", "Start", "date"),
            FormField("target_date", "Target", "date"),
        ),
        actions=(
            RowAction(
                "Update progress", "PATCH", "/api/goals/{id}/progress",
                permission=Action.GOALS_MANAGE, owner_key="employee.id",
                statuses=(GoalStatus.NOT_STARTED.value, GoalStatus.IN_PROGRESS.value),
                prompt="progress", prompt_label="Progress (0-100)",
            ),
        ),
    ),
    Section(
        key="timetracking",
        title="Time Tracking",
        path="/timetracking",
        api="/api/time-entries",
        columns=(
            ("date", "Date"),
            ("employee.name", "Employee"),
            ("project.name", "Project"),
            ("task.title", "Task"),
            ("duration", "Minutes"),
            ("approved", "Approved"),
        ),
        load=lambda c, user: c.time_entry_service.list_for(user),
        form=(
            FormField("start_time", "Start", "datetime-local"),
            FormField("end_time", "End", "datetime-local", required=False),
            FormField("project_id", "Project ID", "number", required=False),
            FormField("task_id", "Task ID", "number", required=False),
            FormField("description", "Description", "textarea", required=False),
            FormField("billable", "Billable", "checkbox", required=False),
        ),
        actions=(
            RowAction(
                "Approve", "PATCH", "/api/time-entries/{id}/approve",
                permission=Action.TIME_ENTRIES_APPROVE, status_key="approved", statuses=(False,),
                style="outline-success",
            ),
        ),
    ),
    Section(
        key="expenses",
        title="Expenses",
        path="/expenses",
        api="/api/expenses",
        columns=(
            ("expense_date", "Date"),
            ("employee.name", "Employee"),
            ("title", "Title"),
            ("category", "Category"),
            ("amount", "Amount (cents)"),
            ("status", "Status"),
        ),
        load=lambda c, user: c.expense_service.list_for(user),
        form=(
            FormField("title", "Title"),
            choice("category", "Category", ExpenseCategory),
            FormField("amount", "Amount (cents)", "number"),
            FormField("currency", "Currency", required=False),
            FormField("expense_date", "Date", "date"),
            FormField("description", "Description", "textarea", required=False),
        ),
        actions=(
            RowAction(
                "Submit", "PATCH", "/api/expenses/{id}/submit",
                owner_key="employee.id", statuses=(ExpenseStatus.DRAFT.value,),
            ),
            set_status(
                "Approve", "/api/expenses/{id}/status", ExpenseStatus.APPROVED,
                permission=Action.EXPENSES_DECIDE, statuses=(ExpenseStatus.SUBMITTED.value,),
                style="outline-success",
            ),
            set_status(
                "Reject", "/api/expenses/{id}/status", ExpenseStatus.REJECTED,
                permission=Action.EXPENSES_DECIDE, statuses=(ExpenseStatus.SUBMITTED.value,),
                prompt="rejection_reason", prompt_label="Reason for rejection",
                style="outline-danger",
            ),
            set_status(
                "Reimburse", "/api/expenses/{id}/status", ExpenseStatus.REIMBURSED,
                permission=Action.EXPENSES_DECIDE, statuses=(ExpenseStatus.APPROVED.value,),
            ),
        ),
    ),
)



def nav_for(role: Optional[Role]) -> list[Section]:
    if role is None:
        return []
    return [s for s in SECTIONS if role in s.roles]


def lookup(row: dict, dotted: str):
    """Resolve ``"assigned_to.name"`` style column keys; missing parts give None."""
    value = row
    for part in dotted.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value

"""Static role table.

Every role-gated action is listed here once. Ownership rules (a user acting
on their own record) live in the services, next to the record lookup.
"""
from __future__ import annotations

from enum import Enum

from .enums import Role
from .exceptions import AuthorizationError


class Action(str, Enum):
    TICKETS_VIEW_ALL = "tickets.view_all"
    TICKETS_UPDATE_STATUS = "tickets.update_status"
    PROJECTS_MANAGE = "projects.manage"
    TASKS_MANAGE = "tasks.manage"
    LEAVES_VIEW_ALL = "leaves.view_all"
    LEAVES_DECIDE = "leaves.decide"
    ATTENDANCE_VIEW_ALL = "attendance.view_all"
    PAYROLL_VIEW_ALL = "payroll.view_all"
    PAYROLL_MANAGE = "payroll.manage"
    ANNOUNCEMENTS_VIEW_ALL = "announcements.view_all"
    ANNOUNCEMENTS_MANAGE = "announcements.manage"
    DOCUMENTS_VIEW_ALL = "documents.view_all"
    DOCUMENTS_MANAGE = "documents.manage"
    TRAININGS_MANAGE = "trainings.manage"
    ENROLLMENTS_VIEW_ALL = "enrollments.view_all"
    GOALS_VIEW_ALL = "goals.view_all"
    GOALS_MANAGE = "goals.manage"
    TIME_ENTRIES_VIEW_ALL = "time_entries.view_all"
    TIME_ENTRIES_APPROVE = "time_entries.approve"
    EXPENSES_VIEW_ALL = "expenses.view_all"
    EXPENSES_DECIDE = "expenses.decide"
    USERS_MANAGE = "users.manage"


_HR = frozenset({Role.HR})
_IT = frozenset({Role.IT})
_MANAGERS = frozenset({Role.HR, Role.IT})

PERMISSIONS: dict[Action, frozenset[Role]] = {
    Action.TICKETS_VIEW_ALL: _IT,
    Action.TICKETS_UPDATE_STATUS: _IT,
    Action.PROJECTS_MANAGE: _MANAGERS,
    Action.TASKS_MANAGE: _MANAGERS,
    Action.LEAVES_VIEW_ALL: _HR,
    Action.LEAVES_DECIDE: _HR,
    Action.ATTENDANCE_VIEW_ALL: _HR,
    Action.PAYROLL_VIEW_ALL: _HR,
    Action.PAYROLL_MANAGE: _HR,
    Action.ANNOUNCEMENTS_VIEW_ALL: _HR,
    Action.ANNOUNCEMENTS_MANAGE: _HR,
    Action.DOCUMENTS_VIEW_ALL: _HR,
    Action.DOCUMENTS_MANAGE: _HR,
    Action.TRAININGS_MANAGE: _HR,
    Action.ENROLLMENTS_VIEW_ALL: _HR,
    Action.GOALS_VIEW_ALL: _HR,
    Action.GOALS_MANAGE: _HR,
    Action.TIME_ENTRIES_VIEW_ALL: _HR,
    Action.TIME_ENTRIES_APPROVE: _HR,
    Action.EXPENSES_VIEW_ALL: _HR,
    Action.EXPENSES_DECIDE: _HR,
    Action.USERS_MANAGE: _HR,
}


def is_allowed(role: Role, action: Action) -> bool:
    return role in PERMISSIONS.get(action, frozenset())


def require(role: Role, action: Action, message: str = "You do not have permission") -> None:
    if not is_allowed(role, action):
        raise AuthorizationError(message)

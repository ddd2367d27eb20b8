from __future__ import annotations

from dataclasses import dataclass

from ..announcements.service import AnnouncementService
from ..core.enums import (
    ExpenseStatus,
    LeaveStatus,
    ProjectStatus,
    Role,
    TaskStatus,
    TicketStatus,
)
from ..expenses.repository import ExpenseRepository
from ..leaves.repository import LeaveRepository
from ..projects.repository import ProjectRepository, TaskRepository
from ..tickets.repository import TicketRepository
from ..timesheets.repository import TimeEntryRepository
from ..users.model import SessionUser
from ..users.repository import UserRepository


@dataclass(frozen=True)
class DashboardData:
    role: Role
    counters: dict[str, int]

    def to_json(self) -> dict:
        return {"role": self.role.value, "counters": dict(self.counters)}


class DashboardService:
    """Role-specific counters for the landing page."""

    def __init__(
        self,
        *,
        users: UserRepository,
        tickets: TicketRepository,
        projects: ProjectRepository,
        tasks: TaskRepository,
        leaves: LeaveRepository,
        expenses: ExpenseRepository,
        time_entries: TimeEntryRepository,
        announcements: AnnouncementService,
    ):
        self._users = users
        self._tickets = tickets
        self._projects = projects
        self._tasks = tasks
        self._leaves = leaves
        self._expenses = expenses
        self._time_entries = time_entries
        self._announcements = announcements

    def build(self, actor: SessionUser) -> DashboardData:
        my_tasks = self._tasks.list_by_assignee(actor.id)
        my_tickets = self._tickets.list_by_creator(actor.id)

        counters = {
            "my_tasks": len(my_tasks),
            "my_open_tasks": sum(1 for t in my_tasks if t.status != TaskStatus.COMPLETED),
            "my_open_tickets": sum(1 for t in my_tickets if t.status != TicketStatus.RESOLVED),
            "active_projects": sum(1 for p in self._projects.list_all() if p.status == ProjectStatus.ACTIVE),
            "unread_announcements": self._announcements.count_unread(actor),
        }

        if actor.role == Role.IT:
            tickets = self._tickets.list_all()
            counters["open_tickets"] = sum(1 for t in tickets if t.status == TicketStatus.OPEN)
            counters["in_progress_tickets"] = sum(1 for t in tickets if t.status == TicketStatus.IN_PROGRESS)
            counters["assigned_tickets"] = sum(
                1 for t in self._tickets.list_by_assignee(actor.id) if t.status != TicketStatus.RESOLVED
            )
        elif actor.role == Role.HR:
            counters["employees"] = len(self._users.list_all())
            counters["pending_leaves"] = sum(1 for l in self._leaves.list_all() if l.status == LeaveStatus.PENDING)
            counters["submitted_expenses"] = sum(
                1 for e in self._expenses.list_all() if e.status == ExpenseStatus.SUBMITTED
            )
            counters["unapproved_time_entries"] = sum(1 for t in self._time_entries.list_all() if not t.approved)
        else:
            counters["my_pending_leaves"] = sum(
                1 for l in self._leaves.list_by_employee(actor.id) if l.status == LeaveStatus.PENDING
            )

        return DashboardData(role=actor.role, counters=counters)

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .announcements.memory_announcement_repository import MemoryAnnouncementRepository
from .announcements.service import AnnouncementService
from .attendance.memory_attendance_repository import MemoryAttendanceRepository
from .attendance.service import AttendanceService
from .chat.service import ChatService
from .dashboard.service import DashboardService
from .database.store import MemoryStore
from .documents.memory_document_repository import MemoryDocumentRepository
from .documents.service import DocumentService
from .expenses.memory_expense_repository import MemoryExpenseRepository
from .expenses.service import ExpenseService
from .goals.memory_goal_repository import MemoryGoalRepository
from .goals.service import GoalService
from .leaves.memory_leave_repository import MemoryLeaveRepository
from .leaves.service import LeaveService
from .payroll.memory_payroll_repository import MemoryPayrollRepository
from .payroll.service import PayrollService
from .projects.memory_project_repository import MemoryProjectRepository, MemoryTaskRepository
from .projects.service import ProjectService, TaskService
from .tickets.memory_ticket_repository import MemoryTicketRepository
from .tickets.service import TicketService
from .timesheets.memory_time_entry_repository import MemoryTimeEntryRepository
from .timesheets.service import TimeEntryService
from .training.memory_training_repository import MemoryEnrollmentRepository, MemoryTrainingRepository
from .training.service import TrainingService
from .users.memory_user_repository import MemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: MemoryStore

    users_repo: MemoryUserRepository
    tickets_repo: MemoryTicketRepository
    projects_repo: MemoryProjectRepository
    tasks_repo: MemoryTaskRepository
    leaves_repo: MemoryLeaveRepository
    attendance_repo: MemoryAttendanceRepository
    payroll_repo: MemoryPayrollRepository
    announcements_repo: MemoryAnnouncementRepository
    documents_repo: MemoryDocumentRepository
    trainings_repo: MemoryTrainingRepository
    enrollments_repo: MemoryEnrollmentRepository
    goals_repo: MemoryGoalRepository
    time_entries_repo: MemoryTimeEntryRepository
    expenses_repo: MemoryExpenseRepository

    auth_service: AuthService
    user_service: UserService
    ticket_service: TicketService
    project_service: ProjectService
    task_service: TaskService
    leave_service: LeaveService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    announcement_service: AnnouncementService
    document_service: DocumentService
    training_service: TrainingService
    goal_service: GoalService
    time_entry_service: TimeEntryService
    expense_service: ExpenseService
    chat_service: ChatService
    dashboard_service: DashboardService


def build_container(*, store: Optional[MemoryStore] = None, default_ticket_assignee: str = "") -> Container:
    store = store or MemoryStore()

    users_repo = MemoryUserRepository(store)
    tickets_repo = MemoryTicketRepository(store)
    projects_repo = MemoryProjectRepository(store)
    tasks_repo = MemoryTaskRepository(store)
    leaves_repo = MemoryLeaveRepository(store)
    attendance_repo = MemoryAttendanceRepository(store)
    payroll_repo = MemoryPayrollRepository(store)
    announcements_repo = MemoryAnnouncementRepository(store)
    documents_repo = MemoryDocumentRepository(store)
    trainings_repo = MemoryTrainingRepository(store)
    enrollments_repo = MemoryEnrollmentRepository(store)
    goals_repo = MemoryGoalRepository(store)
    time_entries_repo = MemoryTimeEntryRepository(store)
    expenses_repo = MemoryExpenseRepository(store)

    announcement_service = AnnouncementService(announcements_repo, users_repo)
    dashboard_service = DashboardService(
        users=users_repo,
        tickets=tickets_repo,
        projects=projects_repo,
        tasks=tasks_repo,
        leaves=leaves_repo,
        expenses=expenses_repo,
        time_entries=time_entries_repo,
        announcements=announcement_service,
    )

    return Container(
        store=store,
        users_repo=users_repo,
        tickets_repo=tickets_repo,
        projects_repo=projects_repo,
        tasks_repo=tasks_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        announcements_repo=announcements_repo,
        documents_repo=documents_repo,
        trainings_repo=trainings_repo,
        enrollments_repo=enrollments_repo,
        goals_repo=goals_repo,
        time_entries_repo=time_entries_repo,
        expenses_repo=expenses_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        ticket_service=TicketService(tickets_repo, users_repo, default_assignee=default_ticket_assignee),
        project_service=ProjectService(projects_repo, users_repo),
        task_service=TaskService(tasks_repo, projects_repo, users_repo),
        leave_service=LeaveService(leaves_repo, users_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo),
        payroll_service=PayrollService(payroll_repo, users_repo),
        announcement_service=announcement_service,
        document_service=DocumentService(documents_repo, users_repo),
        training_service=TrainingService(trainings_repo, enrollments_repo, users_repo),
        goal_service=GoalService(goals_repo, users_repo),
        time_entry_service=TimeEntryService(time_entries_repo, projects_repo, tasks_repo, users_repo),
        expense_service=ExpenseService(expenses_repo, users_repo),
        chat_service=ChatService(),
        dashboard_service=dashboard_service,
    )

from __future__ import annotations

import logging
from datetime import date

from werkzeug.security import generate_password_hash

from ..core.constants import DEMO_PASSWORD
from ..core.enums import ProjectStatus, Role, TaskStatus, TicketPriority, TicketStatus

logger = logging.getLogger(__name__)

DEMO_USERS = (
    {
        "email": "hr@company.com",
        "name": "Sarah Johnson",
        "role": Role.HR,
        "department": "Human Resources",
        "position": "HR Manager",
        "employee_code": "HR001",
        "phone": "+1-555-0101",
        "hire_date": date(2023, 1, 15),
        "salary": 75000,
        "address": "123 Main St, City, State 12345",
        "emergency_contact": "Jane Doe",
        "emergency_phone": "+1-555-0102",
    },
    {
        "email": "it@company.com",
        "name": "Mike Chen",
        "role": Role.IT,
        "department": "Information Technology",
        "position": "IT Support Specialist",
        "employee_code": "IT001",
        "phone": "+1-555-0201",
        "hire_date": date(2023, 2, 20),
        "salary": 65000,
        "manager_email": "hr@company.com",
        "address": "456 Tech Ave, City, State 12345",
        "emergency_contact": "John Smith",
        "emergency_phone": "+1-555-0202",
    },
    {
        "email": "employee@company.com",
        "name": "Alex Smith",
        "role": Role.EMPLOYEE,
        "department": "Operations",
        "position": "Operations Associate",
        "employee_code": "OP001",
        "phone": "+1-555-0301",
        "hire_date": date(2023, 3, 10),
        "salary": 50000,
        "manager_email": "hr@company.com",
        "address": "789 Work St, City, State 12345",
        "emergency_contact": "Sarah Johnson",
        "emergency_phone": "+1-555-0302",
    },
)


def ensure_demo_users(container) -> dict[str, int]:
    """Create the demo accounts that are missing; returns ``email -> id``."""
    ids: dict[str, int] = {}
    for entry in DEMO_USERS:
        profile = dict(entry)
        email = profile.pop("email")
        manager_email = profile.pop("manager_email", None)

        existing = container.users_repo.get_by_email(email)
        if existing:
            ids[email] = existing.id
            continue

        user = container.users_repo.create_user(
            email=email,
            password_hash=generate_password_hash(DEMO_PASSWORD),
            manager_id=ids.get(manager_email) if manager_email else None,
            **profile,
        )
        ids[email] = user.id
    return ids


def seed_demo_data(container) -> None:
    """Demo accounts plus a couple of tickets, projects and tasks.

    Records are only added to empty tables, so calling it twice is harmless.
    """
    ids = ensure_demo_users(container)
    hr_id = ids["hr@company.com"]
    it_id = ids["it@company.com"]
    employee_id = ids["employee@company.com"]

    if not container.tickets_repo.list_all():
        container.tickets_repo.create(
            title="Computer not starting",
            description="My computer won't turn on this morning",
            priority=TicketPriority.HIGH,
            created_by_id=employee_id,
            assigned_to_id=it_id,
        )
        container.tickets_repo.create(
            title="Software installation request",
            description="Need Photoshop installed on my workstation",
            priority=TicketPriority.MEDIUM,
            created_by_id=hr_id,
            assigned_to_id=it_id,
            status=TicketStatus.IN_PROGRESS,
        )

    if not container.projects_repo.list_all():
        website = container.projects_repo.create(
            name="Website Redesign",
            description="Complete redesign of company website",
            manager_id=hr_id,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 3, 31),
            status=ProjectStatus.ACTIVE,
        )
        relocation = container.projects_repo.create(
            name="Office Relocation",
            description="Moving to new office space",
            manager_id=it_id,
            start_date=date(2024, 2, 1),
            end_date=date(2024, 4, 30),
        )

        if not container.tasks_repo.list_all():
            container.tasks_repo.create(
                title="Design new logo",
                description="Create modern logo for rebranding",
                project_id=website.id,
                assigned_to_id=employee_id,
                due_date=date(2024, 2, 15),
                status=TaskStatus.IN_PROGRESS,
            )
            container.tasks_repo.create(
                title="Setup new servers",
                description="Configure servers for new office",
                project_id=relocation.id,
                assigned_to_id=it_id,
                due_date=date(2024, 3, 1),
            )

    logger.info("demo data ready (tables=%s)", ", ".join(container.store.list_tables()))

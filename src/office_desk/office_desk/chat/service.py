"""Keyword matcher behind the in-app assistant."""
from __future__ import annotations

import logging
from typing import Any

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.model import SessionUser

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"

# Checked in insertion order; the first keyword found in the message wins.
RESPONSES: dict[Role, dict[str, str]] = {
    Role.HR: {
        "leave": (
            "To request leave: 1) Go to the Leaves section, 2) Click 'Request Leave', "
            "3) Fill out the form with dates and reason, 4) Submit for approval. "
            "Your manager will review and approve/deny the request."
        ),
        "payroll": (
            "You can view your payroll details in the Payroll section. This includes your current salary, "
            "deductions, allowances, and pay history. Contact HR for payroll-related questions."
        ),
        "policy": (
            "Company policies can be found in the Employee Handbook. For specific policy questions, "
            "please reach out to the HR department directly."
        ),
        "performance": (
            "Performance reviews are conducted quarterly. You can view your performance metrics "
            "in the Performance section if you're an HR manager."
        ),
        DEFAULT_KEY: (
            "As an HR representative, I can help you with leave requests, payroll questions, company policies, "
            "and performance-related queries. What specific HR topic can I assist you with?"
        ),
    },
    Role.IT: {
        "ticket": (
            "To raise an IT support ticket: 1) Go to Tickets section, 2) Click 'Create Ticket', "
            "3) Describe your technical issue clearly, 4) Set priority level, 5) Submit. "
            "IT team will respond within 24 hours."
        ),
        "password": (
            "For password resets, please create a support ticket with 'Password Reset' in the title. "
            "Include your employee ID and the system you need access to."
        ),
        "system": (
            "For system access issues, create a ticket specifying which system/application you're trying "
            "to access and the error message you're receiving."
        ),
        DEFAULT_KEY: (
            "As IT support, I can help you with technical issues, system access, password resets, "
            "and software problems. Please describe your technical issue in detail."
        ),
    },
    Role.EMPLOYEE: {
        "task": (
            "You can view your assigned tasks in the 'My Tasks' section. Update task status as you progress: "
            "Pending -> In Progress -> Completed. Set due dates and track your workload efficiently."
        ),
        "project": (
            "Check the Projects section to see project details you're involved in. "
            "Contact your project manager for project-specific questions or timeline changes."
        ),
        "attendance": (
            "Track your attendance in the Attendance section. Clock in/out daily and view your attendance "
            "history. Contact HR if you notice any discrepancies."
        ),
        DEFAULT_KEY: (
            "I can help you with task management, attendance tracking, leave requests, "
            "and general workplace questions. What would you like assistance with?"
        ),
    },
}

CREATE_HELP = (
    "To create new items: Navigate to the relevant section (Tickets, Projects, Tasks), click the 'Create' "
    "or 'Add' button, fill out the required information, and submit. Each section has specific forms "
    "designed for that purpose."
)

THANKS = (
    "You're welcome! I'm here to help with any workplace questions you have. Feel free to ask about "
    "HR policies, IT support, project management, or any other work-related topics."
)


class ChatService:
    def reply(self, *, actor: SessionUser, message: Any) -> str:
        if not isinstance(message, str) or not message.strip():
            raise ValidationError("Message is required")

        text = message.lower()
        answers = RESPONSES.get(actor.role, RESPONSES[Role.EMPLOYEE])

        response = answers[DEFAULT_KEY]
        for keyword, answer in answers.items():
            if keyword != DEFAULT_KEY and keyword in text:
                response = answer
                break

        if ("help" in text or "how" in text) and ("create" in text or "add" in text):
            response = CREATE_HELP
        if "thank" in text:
            response = THANKS

        logger.debug("chat reply for user %s (%s)", actor.id, actor.role.value)
        return response

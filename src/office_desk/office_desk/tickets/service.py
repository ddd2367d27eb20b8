from __future__ import annotations

import logging
from typing import Optional

from ..common.serialization import to_json
from ..common.validators import require_enum, require_non_empty
from ..core.enums import Role, TicketPriority, TicketStatus
from ..core.exceptions import NotFoundError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Ticket
from .repository import TicketRepository

logger = logging.getLogger(__name__)


class TicketService:
    """Use case: raise IT tickets and move them through their lifecycle.

    IT sees every ticket; everyone else sees the tickets they created.
    New tickets are assigned to the default IT assignee when one exists.
    """

    def __init__(self, tickets: TicketRepository, users: UserRepository, *, default_assignee: str = ""):
        self._tickets = tickets
        self._users = users
        self._default_assignee = default_assignee

    def _assignee_id(self) -> Optional[int]:
        if self._default_assignee:
            user = self._users.get_by_email(self._default_assignee)
            if user:
                return user.id
        it_users = self._users.list_by_role(Role.IT)
        return it_users[0].id if it_users else None

    def to_view(self, ticket: Ticket) -> dict:
        row = to_json(ticket)
        row["created_by"] = user_ref(self._users, ticket.created_by_id)
        row["assigned_to"] = user_ref(self._users, ticket.assigned_to_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.TICKETS_VIEW_ALL):
            tickets = self._tickets.list_all()
        else:
            tickets = self._tickets.list_by_creator(actor.id)
        return [self.to_view(t) for t in tickets]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        title = require_non_empty(data.get("title"), "title")
        description = require_non_empty(data.get("description"), "description")
        priority = require_enum(data.get("priority"), TicketPriority, "priority")

        ticket = self._tickets.create(
            title=title,
            description=description,
            priority=priority,
            created_by_id=actor.id,
            assigned_to_id=self._assignee_id(),
        )
        logger.info("ticket %s created by user %s", ticket.id, actor.id)
        return self.to_view(ticket)

    def update_status(self, *, actor: SessionUser, ticket_id: int, status) -> dict:
        require(actor.role, Action.TICKETS_UPDATE_STATUS, "Only IT can update ticket status")
        new_status = require_enum(status, TicketStatus, "status")

        ticket = self._tickets.update_status(ticket_id, new_status)
        if not ticket:
            raise NotFoundError("Ticket not found")
        logger.info("ticket %s -> %s by user %s", ticket_id, new_status.value, actor.id)
        return self.to_view(ticket)

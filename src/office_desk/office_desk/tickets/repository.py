from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import TicketPriority, TicketStatus
from .model import Ticket


class TicketRepository(Protocol):
    def get(self, ticket_id: int) -> Optional[Ticket]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Ticket]:
        raise NotImplementedError

    def list_by_creator(self, created_by_id: int) -> Sequence[Ticket]:
        raise NotImplementedError

    def list_by_assignee(self, assigned_to_id: int) -> Sequence[Ticket]:
        raise NotImplementedError

    def create(
        self,
        *,
        title: str,
        description: str,
        priority: TicketPriority,
        created_by_id: int,
        assigned_to_id: Optional[int],
        status: TicketStatus = TicketStatus.OPEN,
    ) -> Ticket:
        raise NotImplementedError

    def update_status(self, ticket_id: int, status: TicketStatus) -> Optional[Ticket]:
        raise NotImplementedError

from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import TicketPriority, TicketStatus
from ..database.store import MemoryStore
from .model import Ticket
from .repository import TicketRepository


class MemoryTicketRepository(TicketRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("tickets")

    def get(self, ticket_id: int) -> Optional[Ticket]:
        return self._table.get(ticket_id)

    def list_all(self) -> Sequence[Ticket]:
        return self._table.all()

    def list_by_creator(self, created_by_id: int) -> Sequence[Ticket]:
        return self._table.where(lambda t: t.created_by_id == int(created_by_id))

    def list_by_assignee(self, assigned_to_id: int) -> Sequence[Ticket]:
        return self._table.where(lambda t: t.assigned_to_id == int(assigned_to_id))

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
        now = now_local()
        return self._table.insert(
            lambda ticket_id: Ticket(
                id=ticket_id,
                title=title,
                description=description,
                status=status,
                priority=priority,
                created_by_id=int(created_by_id),
                assigned_to_id=assigned_to_id,
                created_at=now,
                updated_at=now,
            )
        )

    def update_status(self, ticket_id: int, status: TicketStatus) -> Optional[Ticket]:
        return self._table.update(ticket_id, status=status, updated_at=now_local())

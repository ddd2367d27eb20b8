from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TicketPriority, TicketStatus


@dataclass(frozen=True)
class Ticket:
    """IT support ticket raised by any user."""

    id: int
    title: str
    description: str
    status: TicketStatus
    priority: TicketPriority
    created_by_id: int
    assigned_to_id: Optional[int]
    created_at: datetime
    updated_at: datetime

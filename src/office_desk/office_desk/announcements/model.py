from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AnnouncementPriority, AnnouncementType, Audience


@dataclass(frozen=True)
class Announcement:
    id: int
    title: str
    content: str
    type: AnnouncementType
    target_audience: Audience
    priority: AnnouncementPriority
    publish_date: datetime
    is_active: bool
    created_by: int
    created_at: datetime
    expiry_date: Optional[datetime] = None
    attachments: tuple[str, ...] = ()
    # ids of users who marked the announcement as read
    read_by: tuple[int, ...] = ()

    def is_read_by(self, user_id: int) -> bool:
        return int(user_id) in self.read_by

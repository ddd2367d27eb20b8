from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AnnouncementPriority, AnnouncementType, Audience
from .model import Announcement


class AnnouncementRepository(Protocol):
    def get(self, announcement_id: int) -> Optional[Announcement]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Announcement]:
        raise NotImplementedError

    def create(
        self,
        *,
        title: str,
        content: str,
        type: AnnouncementType,
        target_audience: Audience,
        priority: AnnouncementPriority,
        created_by: int,
        publish_date: Optional[datetime] = None,
        expiry_date: Optional[datetime] = None,
        is_active: bool = True,
        attachments: tuple[str, ...] = (),
    ) -> Announcement:
        raise NotImplementedError

    def update(self, announcement_id: int, **changes) -> Optional[Announcement]:
        raise NotImplementedError

    def mark_read(self, announcement_id: int, user_id: int) -> Optional[Announcement]:
        raise NotImplementedError

    def delete(self, announcement_id: int) -> bool:
        raise NotImplementedError

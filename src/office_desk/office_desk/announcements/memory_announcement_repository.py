from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import AnnouncementPriority, AnnouncementType, Audience
from ..database.store import MemoryStore
from .model import Announcement
from .repository import AnnouncementRepository


class MemoryAnnouncementRepository(AnnouncementRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("announcements")

    def get(self, announcement_id: int) -> Optional[Announcement]:
        return self._table.get(announcement_id)

    def list_all(self) -> Sequence[Announcement]:
        return self._table.all()

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
        now = now_local()
        return self._table.insert(
            lambda announcement_id: Announcement(
                id=announcement_id,
                title=title,
                content=content,
                type=type,
                target_audience=target_audience,
                priority=priority,
                publish_date=publish_date or now,
                is_active=bool(is_active),
                created_by=int(created_by),
                created_at=now,
                expiry_date=expiry_date,
                attachments=tuple(attachments),
            )
        )

    def update(self, announcement_id: int, **changes) -> Optional[Announcement]:
        return self._table.update(announcement_id, **changes)

    def mark_read(self, announcement_id: int, user_id: int) -> Optional[Announcement]:
        current = self._table.get(announcement_id)
        if current is None:
            return None
        if current.is_read_by(user_id):
            return current
        return self._table.update(announcement_id, read_by=current.read_by + (int(user_id),))

    def delete(self, announcement_id: int) -> bool:
        return self._table.delete(announcement_id)

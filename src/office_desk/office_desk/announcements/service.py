from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.serialization import to_json
from ..common.validators import (
    optional_bool,
    optional_datetime,
    optional_enum,
    optional_str_list,
    require_enum,
    require_non_empty,
)
from ..core.enums import AnnouncementPriority, AnnouncementType, Audience, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Announcement
from .repository import AnnouncementRepository

logger = logging.getLogger(__name__)

AUDIENCES_BY_ROLE = {
    Role.HR: frozenset({Audience.ALL, Audience.HR, Audience.MANAGERS}),
    Role.IT: frozenset({Audience.ALL, Audience.IT, Audience.MANAGERS}),
    Role.EMPLOYEE: frozenset({Audience.ALL, Audience.EMPLOYEES}),
}


def is_visible_to(announcement: Announcement, role: Role, *, now: Optional[datetime] = None) -> bool:
    """Audience match plus active/not-expired. HR sees everything."""
    if is_allowed(role, Action.ANNOUNCEMENTS_VIEW_ALL):
        return True
    if announcement.target_audience not in AUDIENCES_BY_ROLE.get(role, frozenset()):
        return False
    if not announcement.is_active:
        return False
    now = now or now_local()
    if announcement.expiry_date is not None and announcement.expiry_date <= now:
        return False
    return True


class AnnouncementService:
    def __init__(self, announcements: AnnouncementRepository, users: UserRepository):
        self._announcements = announcements
        self._users = users

    def to_view(self, announcement: Announcement, viewer: Optional[SessionUser] = None) -> dict:
        row = to_json(announcement)
        row["creator"] = user_ref(self._users, announcement.created_by)
        if viewer is not None:
            row["is_read"] = announcement.is_read_by(viewer.id)
        return row

    def visible_to(self, actor: SessionUser) -> list[Announcement]:
        now = now_local()
        return [a for a in self._announcements.list_all() if is_visible_to(a, actor.role, now=now)]

    def list_for(self, actor: SessionUser) -> list[dict]:
        return [self.to_view(a, actor) for a in self.visible_to(actor)]

    def count_unread(self, actor: SessionUser) -> int:
        return sum(1 for a in self.visible_to(actor) if not a.is_read_by(actor.id))

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        require(actor.role, Action.ANNOUNCEMENTS_MANAGE, "Only HR can create announcements")

        publish_date = optional_datetime(data.get("publish_date"), "publish_date")
        expiry_date = optional_datetime(data.get("expiry_date"), "expiry_date")
        if publish_date and expiry_date and expiry_date < publish_date:
            raise ValidationError("expiry_date must be after publish_date")

        announcement = self._announcements.create(
            title=require_non_empty(data.get("title"), "title"),
            content=require_non_empty(data.get("content"), "content"),
            type=require_enum(data.get("type"), AnnouncementType, "type"),
            target_audience=optional_enum(data.get("target_audience"), Audience, "target_audience", Audience.ALL),
            priority=optional_enum(data.get("priority"), AnnouncementPriority, "priority", AnnouncementPriority.MEDIUM),
            created_by=actor.id,
            publish_date=publish_date,
            expiry_date=expiry_date,
            is_active=optional_bool(data.get("is_active"), "is_active", default=True),
            attachments=optional_str_list(data.get("attachments"), "attachments"),
        )
        logger.info("announcement %s published by user %s for %s", announcement.id, actor.id, announcement.target_audience.value)
        return self.to_view(announcement, actor)

    def update(self, *, actor: SessionUser, announcement_id: int, data: dict) -> dict:
        require(actor.role, Action.ANNOUNCEMENTS_MANAGE, "Only HR can update announcements")

        current = self._announcements.get(announcement_id)
        if not current:
            raise NotFoundError("Announcement not found")

        changes = {}
        if "title" in data:
            changes["title"] = require_non_empty(data.get("title"), "title")
        if "content" in data:
            changes["content"] = require_non_empty(data.get("content"), "content")
        if "type" in data:
            changes["type"] = require_enum(data.get("type"), AnnouncementType, "type")
        if "target_audience" in data:
            changes["target_audience"] = require_enum(data.get("target_audience"), Audience, "target_audience")
        if "priority" in data:
            changes["priority"] = require_enum(data.get("priority"), AnnouncementPriority, "priority")
        if "publish_date" in data:
            changes["publish_date"] = optional_datetime(data.get("publish_date"), "publish_date") or current.publish_date
        if "expiry_date" in data:
            changes["expiry_date"] = optional_datetime(data.get("expiry_date"), "expiry_date")
        if "is_active" in data:
            changes["is_active"] = optional_bool(data.get("is_active"), "is_active", default=current.is_active)
        if "attachments" in data:
            changes["attachments"] = optional_str_list(data.get("attachments"), "attachments")
        if not changes:
            raise ValidationError("Nothing to update")

        publish = changes.get("publish_date", current.publish_date)
        expiry = changes.get("expiry_date", current.expiry_date)
        if expiry is not None and expiry < publish:
            raise ValidationError("expiry_date must be after publish_date")

        announcement = self._announcements.update(announcement_id, **changes)
        if not announcement:
            raise NotFoundError("Announcement not found")
        return self.to_view(announcement, actor)

    def delete(self, *, actor: SessionUser, announcement_id: int) -> None:
        require(actor.role, Action.ANNOUNCEMENTS_MANAGE, "Only HR can delete announcements")
        if not self._announcements.delete(announcement_id):
            raise NotFoundError("Announcement not found")
        logger.info("announcement %s deleted by user %s", announcement_id, actor.id)

    def mark_read(self, *, actor: SessionUser, announcement_id: int) -> dict:
        current = self._announcements.get(announcement_id)
        # hidden announcements are reported as missing
        if not current or not is_visible_to(current, actor.role):
            raise NotFoundError("Announcement not found")

        announcement = self._announcements.mark_read(announcement_id, actor.id)
        if not announcement:
            raise NotFoundError("Announcement not found")
        return self.to_view(announcement, actor)

from __future__ import annotations

import logging

from ..common.datetime_utils import minutes_between
from ..common.serialization import ref, to_json
from ..common.validators import optional_bool, optional_date, optional_datetime, optional_int, optional_text, require_datetime
from ..core.exceptions import NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed, require
from ..projects.repository import ProjectRepository, TaskRepository
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


class TimeEntryService:
    """Use case: employees log time against projects/tasks, HR approves it."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        projects: ProjectRepository,
        tasks: TaskRepository,
        users: UserRepository,
    ):
        self._entries = entries
        self._projects = projects
        self._tasks = tasks
        self._users = users

    def to_view(self, entry: TimeEntry) -> dict:
        row = to_json(entry)
        row["employee"] = user_ref(self._users, entry.employee_id)
        row["project"] = ref(self._projects.get(entry.project_id), "name") if entry.project_id else None
        row["task"] = ref(self._tasks.get(entry.task_id), "title") if entry.task_id else None
        row["approved_by"] = user_ref(self._users, entry.approved_by_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.TIME_ENTRIES_VIEW_ALL):
            entries = self._entries.list_all()
        else:
            entries = self._entries.list_by_employee(actor.id)
        return [self.to_view(e) for e in entries]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        start_time = require_datetime(data.get("start_time"), "start_time")
        end_time = optional_datetime(data.get("end_time"), "end_time")

        duration = None
        if end_time is not None:
            if end_time < start_time:
                raise ValidationError("end_time must be after start_time")
            duration = minutes_between(start_time, end_time)

        project_id = optional_int(data.get("project_id"), "project_id", minimum=1)
        if project_id is not None and not self._projects.get(project_id):
            raise ValidationError("project_id does not exist")

        task_id = optional_int(data.get("task_id"), "task_id", minimum=1)
        if task_id is not None:
            task = self._tasks.get(task_id)
            if not task:
                raise ValidationError("task_id does not exist")
            if project_id is not None and task.project_id != project_id:
                raise ValidationError("task_id does not belong to project_id")

        entry = self._entries.create(
            employee_id=actor.id,
            start_time=start_time,
            work_date=optional_date(data.get("date"), "date") or start_time.date(),
            end_time=end_time,
            duration=duration,
            project_id=project_id,
            task_id=task_id,
            description=optional_text(data.get("description"), "description"),
            billable=optional_bool(data.get("billable"), "billable"),
        )
        logger.info("time entry %s logged by user %s (%s min)", entry.id, actor.id, duration)
        return self.to_view(entry)

    def approve(self, *, actor: SessionUser, entry_id: int) -> dict:
        require(actor.role, Action.TIME_ENTRIES_APPROVE, "Only HR can approve time entries")

        entry = self._entries.approve(entry_id, approved_by_id=actor.id)
        if not entry:
            raise NotFoundError("Time entry not found")
        logger.info("time entry %s approved by user %s", entry_id, actor.id)
        return self.to_view(entry)

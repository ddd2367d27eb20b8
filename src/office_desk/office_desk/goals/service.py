from __future__ import annotations

import logging

from ..common.datetime_utils import now_local
from ..common.serialization import to_json
from ..common.validators import optional_int, optional_text, require_date, require_enum, require_int, require_non_empty
from ..core.constants import MAX_GOAL_PROGRESS
from ..core.enums import GoalCategory, GoalPriority, GoalStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import Action, is_allowed
from ..users.model import SessionUser
from ..users.repository import UserRepository
from ..users.service import user_ref
from .model import Goal
from .repository import GoalRepository

logger = logging.getLogger(__name__)


class GoalService:
    def __init__(self, goals: GoalRepository, users: UserRepository):
        self._goals = goals
        self._users = users

    def to_view(self, goal: Goal) -> dict:
        row = to_json(goal)
        row["employee"] = user_ref(self._users, goal.employee_id)
        row["manager"] = user_ref(self._users, goal.manager_id)
        return row

    def list_for(self, actor: SessionUser) -> list[dict]:
        if is_allowed(actor.role, Action.GOALS_VIEW_ALL):
            goals = self._goals.list_all()
        else:
            goals = self._goals.list_by_employee(actor.id)
        return [self.to_view(g) for g in goals]

    def create(self, *, actor: SessionUser, data: dict) -> dict:
        start_date = require_date(data.get("start_date"), "start_date")
        target_date = require_date(data.get("target_date"), "target_date")
        if target_date < start_date:
            raise ValidationError("target_date must be on or after start_date")

        manager_id = optional_int(data.get("manager_id"), "manager_id", minimum=1)
        if manager_id is not None and not self._users.get_by_id(manager_id):
            raise ValidationError("manager_id does not exist")

        goal = self._goals.create(
            employee_id=actor.id,
            title=require_non_empty(data.get("title"), "title"),
            category=require_enum(data.get("category"), GoalCategory, "category"),
            priority=require_enum(data.get("priority"), GoalPriority, "priority"),
            start_date=start_date,
            target_date=target_date,
            description=optional_text(data.get("description"), "description"),
            manager_id=manager_id,
        )
        logger.info("goal %s created by user %s", goal.id, actor.id)
        return self.to_view(goal)

    def update_progress(self, *, actor: SessionUser, goal_id: int, data: dict) -> dict:
        goal = self._goals.get(goal_id)
        if not goal:
            raise NotFoundError("Goal not found")
        if goal.employee_id != actor.id and not is_allowed(actor.role, Action.GOALS_MANAGE):
            raise AuthorizationError("Only the goal owner or HR can update progress")

        progress = require_int(data.get("progress"), "progress", minimum=0, maximum=MAX_GOAL_PROGRESS)

        if progress == MAX_GOAL_PROGRESS:
            status = GoalStatus.COMPLETED
            completion_date = goal.completion_date or now_local()
        else:
            if "status" in data:
                status = require_enum(data.get("status"), GoalStatus, "status")
                if status == GoalStatus.COMPLETED:
                    raise ValidationError(f"A completed goal must have progress {MAX_GOAL_PROGRESS}")
            elif progress > 0:
                status = GoalStatus.IN_PROGRESS
            else:
                status = GoalStatus.NOT_STARTED
            completion_date = None

        goal = self._goals.update_progress(goal_id, progress=progress, status=status, completion_date=completion_date)
        if not goal:
            raise NotFoundError("Goal not found")
        logger.info("goal %s progress %s%% by user %s", goal_id, progress, actor.id)
        return self.to_view(goal)

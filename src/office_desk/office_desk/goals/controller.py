from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/goals", endpoint="api_list_goals")
    @api_login_required
    @api_view("Failed to fetch goals")
    def list_goals():
        return container.goal_service.list_for(current_user())

    @app.post("/api/goals", endpoint="api_create_goal")
    @api_login_required
    @api_view("Failed to create goal")
    def create_goal():
        return container.goal_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/goals/<int:goal_id>/progress", endpoint="api_update_goal_progress")
    @api_login_required
    @api_view("Failed to update goal progress")
    def update_goal_progress(goal_id: int):
        return container.goal_service.update_progress(actor=current_user(), goal_id=goal_id, data=read_json())

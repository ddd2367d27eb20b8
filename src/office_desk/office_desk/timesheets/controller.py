from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/time-entries", endpoint="api_list_time_entries")
    @api_login_required
    @api_view("Failed to fetch time entries")
    def list_time_entries():
        return container.time_entry_service.list_for(current_user())

    @app.post("/api/time-entries", endpoint="api_create_time_entry")
    @api_login_required
    @api_view("Failed to create time entry")
    def create_time_entry():
        return container.time_entry_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/time-entries/<int:entry_id>/approve", endpoint="api_approve_time_entry")
    @api_login_required
    @api_view("Failed to approve time entry")
    def approve_time_entry(entry_id: int):
        return container.time_entry_service.approve(actor=current_user(), entry_id=entry_id)

from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/leaves", endpoint="api_list_leaves")
    @api_login_required
    @api_view("Failed to fetch leaves")
    def list_leaves():
        return container.leave_service.list_for(current_user())

    @app.post("/api/leaves", endpoint="api_create_leave")
    @api_login_required
    @api_view("Failed to create leave request")
    def create_leave():
        return container.leave_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/leaves/<int:leave_id>/status", endpoint="api_update_leave_status")
    @api_login_required
    @api_view("Failed to update leave status")
    def update_leave_status(leave_id: int):
        return container.leave_service.update_status(actor=current_user(), leave_id=leave_id, data=read_json())

from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/attendance", endpoint="api_list_attendance")
    @api_login_required
    @api_view("Failed to fetch attendance")
    def list_attendance():
        return container.attendance_service.list_for(current_user())

    @app.post("/api/attendance", endpoint="api_create_attendance")
    @api_login_required
    @api_view("Failed to create attendance record")
    def create_attendance():
        return container.attendance_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/attendance/<int:attendance_id>/clock-out", endpoint="api_clock_out")
    @api_login_required
    @api_view("Failed to clock out")
    def clock_out(attendance_id: int):
        data = read_json()
        return container.attendance_service.clock_out(actor=current_user(), attendance_id=attendance_id, data=data)

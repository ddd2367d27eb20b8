from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/announcements", endpoint="api_list_announcements")
    @api_login_required
    @api_view("Failed to fetch announcements")
    def list_announcements():
        return container.announcement_service.list_for(current_user())

    @app.post("/api/announcements", endpoint="api_create_announcement")
    @api_login_required
    @api_view("Failed to create announcement")
    def create_announcement():
        return container.announcement_service.create(actor=current_user(), data=read_json()), 201

    @app.put("/api/announcements/<int:announcement_id>", endpoint="api_update_announcement")
    @api_login_required
    @api_view("Failed to update announcement")
    def update_announcement(announcement_id: int):
        return container.announcement_service.update(
            actor=current_user(), announcement_id=announcement_id, data=read_json()
        )

    @app.delete("/api/announcements/<int:announcement_id>", endpoint="api_delete_announcement")
    @api_login_required
    @api_view("Failed to delete announcement")
    def delete_announcement(announcement_id: int):
        container.announcement_service.delete(actor=current_user(), announcement_id=announcement_id)
        return {"message": "Announcement deleted successfully"}

    @app.post("/api/announcements/<int:announcement_id>/read", endpoint="api_mark_announcement_read")
    @api_login_required
    @api_view("Failed to mark announcement as read")
    def mark_announcement_read(announcement_id: int):
        return container.announcement_service.mark_read(actor=current_user(), announcement_id=announcement_id)

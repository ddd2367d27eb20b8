from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/tickets", endpoint="api_list_tickets")
    @api_login_required
    @api_view("Failed to fetch tickets")
    def list_tickets():
        return container.ticket_service.list_for(current_user())

    @app.post("/api/tickets", endpoint="api_create_ticket")
    @api_login_required
    @api_view("Failed to create ticket")
    def create_ticket():
        return container.ticket_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/tickets/<int:ticket_id>/status", endpoint="api_update_ticket_status")
    @api_login_required
    @api_view("Failed to update ticket status")
    def update_ticket_status(ticket_id: int):
        data = read_json()
        return container.ticket_service.update_status(
            actor=current_user(), ticket_id=ticket_id, status=data.get("status")
        )

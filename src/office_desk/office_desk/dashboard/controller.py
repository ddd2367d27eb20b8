from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/dashboard", endpoint="api_dashboard")
    @api_login_required
    @api_view("Failed to build dashboard")
    def dashboard_stats():
        return container.dashboard_service.build(current_user()).to_json()

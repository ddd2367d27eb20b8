from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/payroll", endpoint="api_list_payroll")
    @api_login_required
    @api_view("Failed to fetch payroll")
    def list_payroll():
        return container.payroll_service.list_for(current_user())

    @app.post("/api/payroll", endpoint="api_create_payroll")
    @api_login_required
    @api_view("Failed to create payroll record")
    def create_payroll():
        return container.payroll_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/payroll/<int:payroll_id>/status", endpoint="api_update_payroll_status")
    @api_login_required
    @api_view("Failed to update payroll status")
    def update_payroll_status(payroll_id: int):
        data = read_json()
        return container.payroll_service.update_status(actor=current_user(), payroll_id=payroll_id, status=data.get("status"))

    @app.get("/api/payroll/summary", endpoint="api_payroll_summary")
    @api_login_required
    @api_view("Failed to build payroll summary")
    def payroll_summary():
        return container.payroll_service.period_summary(actor=current_user())

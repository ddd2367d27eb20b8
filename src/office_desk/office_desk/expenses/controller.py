from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/expenses", endpoint="api_list_expenses")
    @api_login_required
    @api_view("Failed to fetch expenses")
    def list_expenses():
        return container.expense_service.list_for(current_user())

    @app.post("/api/expenses", endpoint="api_create_expense")
    @api_login_required
    @api_view("Failed to create expense")
    def create_expense():
        return container.expense_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/expenses/<int:expense_id>/submit", endpoint="api_submit_expense")
    @api_login_required
    @api_view("Failed to submit expense")
    def submit_expense(expense_id: int):
        return container.expense_service.submit(actor=current_user(), expense_id=expense_id)

    @app.patch("/api/expenses/<int:expense_id>/status", endpoint="api_update_expense_status")
    @api_login_required
    @api_view("Failed to update expense status")
    def update_expense_status(expense_id: int):
        return container.expense_service.update_status(actor=current_user(), expense_id=expense_id, data=read_json())

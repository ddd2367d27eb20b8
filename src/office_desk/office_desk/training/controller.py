from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/trainings", endpoint="api_list_trainings")
    @api_login_required
    @api_view("Failed to fetch trainings")
    def list_trainings():
        return container.training_service.list_trainings()

    @app.post("/api/trainings", endpoint="api_create_training")
    @api_login_required
    @api_view("Failed to create training")
    def create_training():
        return container.training_service.create_training(actor=current_user(), data=read_json()), 201

    @app.put("/api/trainings/<int:training_id>", endpoint="api_update_training")
    @api_login_required
    @api_view("Failed to update training")
    def update_training(training_id: int):
        return container.training_service.update_training(
            actor=current_user(), training_id=training_id, data=read_json()
        )

    @app.get("/api/training-enrollments", endpoint="api_list_enrollments")
    @api_login_required
    @api_view("Failed to fetch enrollments")
    def list_enrollments():
        return container.training_service.list_enrollments(current_user())

    @app.post("/api/training-enrollments", endpoint="api_create_enrollment")
    @api_login_required
    @api_view("Failed to enroll in training")
    def create_enrollment():
        return container.training_service.enroll(actor=current_user(), data=read_json()), 201

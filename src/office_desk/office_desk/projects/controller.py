from __future__ import annotations

from flask import Flask, request

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/projects", endpoint="api_list_projects")
    @api_login_required
    @api_view("Failed to fetch projects")
    def list_projects():
        return container.project_service.list_all()

    @app.post("/api/projects", endpoint="api_create_project")
    @api_login_required
    @api_view("Failed to create project")
    def create_project():
        return container.project_service.create(actor=current_user(), data=read_json()), 201

    @app.put("/api/projects/<int:project_id>", endpoint="api_update_project")
    @api_login_required
    @api_view("Failed to update project")
    def update_project(project_id: int):
        return container.project_service.update(actor=current_user(), project_id=project_id, data=read_json())

    @app.delete("/api/projects/<int:project_id>", endpoint="api_delete_project")
    @api_login_required
    @api_view("Failed to delete project")
    def delete_project(project_id: int):
        container.project_service.delete(actor=current_user(), project_id=project_id)
        return {"message": "Project deleted successfully"}

    @app.get("/api/tasks", endpoint="api_list_tasks")
    @api_login_required
    @api_view("Failed to fetch tasks")
    def list_tasks():
        mine = request.args.get("my") == "true"
        return container.task_service.list_for(current_user(), mine=mine)

    @app.post("/api/tasks", endpoint="api_create_task")
    @api_login_required
    @api_view("Failed to create task")
    def create_task():
        return container.task_service.create(actor=current_user(), data=read_json()), 201

    @app.patch("/api/tasks/<int:task_id>/status", endpoint="api_update_task_status")
    @api_login_required
    @api_view("Failed to update task status")
    def update_task_status(task_id: int):
        data = read_json()
        return container.task_service.update_status(actor=current_user(), task_id=task_id, status=data.get("status"))

    @app.delete("/api/tasks/<int:task_id>", endpoint="api_delete_task")
    @api_login_required
    @api_view("Failed to delete task")
    def delete_task(task_id: int):
        container.task_service.delete(actor=current_user(), task_id=task_id)
        return {"message": "Task deleted successfully"}

from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.get("/api/documents", endpoint="api_list_documents")
    @api_login_required
    @api_view("Failed to fetch documents")
    def list_documents():
        return container.document_service.list_for(current_user())

    @app.post("/api/documents", endpoint="api_create_document")
    @api_login_required
    @api_view("Failed to upload document")
    def create_document():
        return container.document_service.upload(actor=current_user(), data=read_json()), 201

    @app.delete("/api/documents/<int:document_id>", endpoint="api_delete_document")
    @api_login_required
    @api_view("Failed to delete document")
    def delete_document(document_id: int):
        container.document_service.delete(actor=current_user(), document_id=document_id)
        return {"message": "Document deleted successfully"}

    @app.post("/api/documents/<int:document_id>/download", endpoint="api_download_document")
    @api_login_required
    @api_view("Failed to register download")
    def download_document(document_id: int):
        return container.document_service.register_download(actor=current_user(), document_id=document_id)

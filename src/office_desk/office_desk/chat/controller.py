from __future__ import annotations

from flask import Flask

from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.post("/api/chat", endpoint="api_chat")
    @api_login_required
    @api_view("Failed to process chat message")
    def chat():
        data = read_json()
        return {"response": container.chat_service.reply(actor=current_user(), message=data.get("message"))}

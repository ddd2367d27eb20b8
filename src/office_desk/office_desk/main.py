from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .database.seed import seed_demo_data
from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .chat.controller import register as register_chat
from .dashboard.controller import register as register_dashboard
from .documents.controller import register as register_documents
from .expenses.controller import register as register_expenses
from .goals.controller import register as register_goals
from .leaves.controller import register as register_leaves
from .payroll.controller import register as register_payroll
from .projects.controller import register as register_projects
from .tickets.controller import register as register_tickets
from .timesheets.controller import register as register_timesheets
from .training.controller import register as register_training
from .users.controller import register as register_users
from .web.controller import register as register_pages

logger = logging.getLogger(__name__)

SETTING_KEYS = (
    "DEBUG",
    "TESTING",
    "SESSION_DAYS",
    "SEED_DEMO_DATA",
    "LOG_LEVEL",
    "DEFAULT_TICKET_ASSIGNEE",
)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    for key in SETTING_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config["DEBUG"] = bool(app.config.get("DEBUG", False))

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(default_ticket_assignee=str(app.config.get("DEFAULT_TICKET_ASSIGNEE") or ""))
    if app.config.get("SEED_DEMO_DATA"):
        seed_demo_data(container)
    app.extensions["office_desk"] = container

    register_users(app, container)
    register_tickets(app, container)
    register_projects(app, container)
    register_leaves(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_announcements(app, container)
    register_documents(app, container)
    register_training(app, container)
    register_goals(app, container)
    register_timesheets(app, container)
    register_expenses(app, container)
    register_chat(app, container)
    register_dashboard(app, container)
    register_pages(app, container)

    logger.info("office desk ready (settings=%s)", settings_module)
    return app

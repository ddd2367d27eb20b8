from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, url_for

from ..common.web import current_user, login_required, roles_required
from ..container import Container
from ..core.enums import Role
from .sections import SECTIONS, Section, lookup, nav_for

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_navigation():
        user = current_user()
        return {
            "current_user": user,
            "nav_sections": nav_for(user.role if user else None),
            "cell": lookup,
        }

    @app.route("/", endpoint="dashboard")
    @login_required
    def dashboard():
        user = current_user()
        try:
            stats = container.dashboard_service.build(user)
        except Exception:
            logger.exception("dashboard failed for user %s", user.id)
            flash("Could not load dashboard counters", "danger")
            return render_template("dashboard.html", counters={})
        return render_template("dashboard.html", counters=stats.counters)

    @app.route("/chatbot", endpoint="page_chatbot")
    @login_required
    def chatbot():
        return render_template("chat.html")

    def _section_view(section: Section):
        @login_required
        @roles_required(*section.roles)
        def view():
            user = current_user()
            try:
                rows = section.load(container, user)
            except Exception:
                logger.exception("failed to load %s for user %s", section.key, user.id)
                flash(f"Could not load {section.title.lower()}", "danger")
                return redirect(url_for("dashboard"))
            return render_template(
                "section.html",
                section=section,
                rows=rows,
                can_create=section.can_create(user.role),
            )

        return view

    for section in SECTIONS:
        app.add_url_rule(section.path, endpoint=f"page_{section.key}", view_func=_section_view(section))

    @app.route("/profile", endpoint="page_profile")
    @login_required
    def profile():
        user = container.user_service.get(current_user().id)
        if not user:
            return redirect(url_for("logout"))
        return render_template("profile.html", profile=user, is_hr=user.role == Role.HR)

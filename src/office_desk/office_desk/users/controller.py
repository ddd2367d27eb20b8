from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.validators import optional_bool
from ..common.web import api_login_required, api_view, current_user, read_json
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, ValidationError
from .model import SessionUser
from .service import public_user

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    session_days = int(app.config.get("SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=session_days)

    def _start_session(s_user: SessionUser, *, remember: bool) -> None:
        session.clear()
        session.permanent = remember
        session.update(s_user.to_session())

    # JSON API

    @app.post("/api/auth/login", endpoint="api_login")
    @api_view("Invalid request data")
    def api_login():
        data = read_json()
        s_user = container.auth_service.authenticate(data.get("email"), data.get("password"))
        _start_session(s_user, remember=optional_bool(data.get("remember_me"), "remember_me", default=True))
        return s_user.to_json()

    @app.post("/api/auth/logout", endpoint="api_logout")
    def api_logout():
        session.clear()
        return {"message": "Logged out successfully"}

    @app.get("/api/auth/me", endpoint="api_me")
    @api_view("Not authenticated")
    def api_me():
        s_user = container.auth_service.resolve(current_user())
        return s_user.to_json()

    @app.get("/api/users", endpoint="api_list_users")
    @api_login_required
    @api_view("Failed to fetch users")
    def api_list_users():
        return container.user_service.list_directory()

    @app.post("/api/users", endpoint="api_create_user")
    @api_login_required
    @api_view("Failed to create user")
    def api_create_user():
        user = container.user_service.create_account(actor=current_user(), data=read_json())
        return public_user(user), 201

    @app.get("/api/profile", endpoint="api_get_profile")
    @api_login_required
    @api_view("Failed to fetch profile")
    def api_get_profile():
        user = container.user_service.get(current_user().id)
        if not user:
            raise AuthenticationError("User not found")
        return public_user(user)

    @app.patch("/api/profile", endpoint="api_update_profile")
    @api_login_required
    @api_view("Failed to update profile")
    def api_update_profile():
        user = container.user_service.update_profile(actor=current_user(), data=read_json())
        session["name"] = user.name
        return public_user(user)

    # Pages

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_user() is not None:
            return redirect(url_for("dashboard"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(email, password)
                _start_session(s_user, remember=bool(remember))
                flash("Signed in successfully.", "success")
                return redirect(url_for("dashboard"))
            except (AuthenticationError, ValidationError) as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("login failed")
                flash("System error while signing in", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("login"))

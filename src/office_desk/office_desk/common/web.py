"""Shared controller helpers: session guards and error-to-status mapping."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import flash, jsonify, redirect, render_template, request, session, url_for

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..users.model import SessionUser

logger = logging.getLogger(__name__)


def current_user() -> Optional[SessionUser]:
    return SessionUser.from_session(session)


def read_json() -> dict:
    """JSON object body of the request; an empty body reads as ``{}``."""
    if not request.get_data():
        return {}
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def api_login_required(view):
    """JSON routes: 401 when there is no session user."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            return jsonify({"message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def api_view(failure_message: str):
    """Map domain errors raised by a JSON view to HTTP status codes.

    The view returns ``(payload, status)`` or just ``payload``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                result = view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"message": failure_message, "detail": str(e)}), 400
            except AuthenticationError as e:
                return jsonify({"message": str(e)}), 401
            except AuthorizationError as e:
                logger.warning("denied %s %s for user %s: %s", request.method, request.path, session.get("user_id"), e)
                return jsonify({"message": str(e)}), 403
            except NotFoundError as e:
                return jsonify({"message": str(e)}), 404
            except Exception:
                logger.exception("unhandled error on %s %s", request.method, request.path)
                return jsonify({"message": failure_message}), 500

            if isinstance(result, tuple):
                payload, status = result
                return jsonify(payload), status
            return jsonify(result)

        return wrapper

    return decorator


def login_required(view):
    """HTML pages: redirect anonymous users to the login page."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_user() is None:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """HTML pages: render 403.html when the session role is not allowed."""

    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = current_user()
            if user is None:
                return redirect(url_for("login"))
            if user.role not in allowed:
                return render_template("403.html", current_user=user), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator

from __future__ import annotations

import logging
from typing import Any, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.serialization import to_json
from ..common.validators import (
    optional_date,
    optional_int,
    optional_text,
    require_email,
    require_enum,
    require_min_length,
    require_non_empty,
)
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..core.permissions import Action, require
from .model import SessionUser, User
from .repository import UserRepository

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("phone", "address", "emergency_contact", "emergency_phone")


def public_user(user: User) -> dict:
    return to_json(user, exclude=("password_hash",))


class AuthService:
    """Use case: authenticate user (login) and resolve the session user."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: Any, password: Any) -> SessionUser:
        if not isinstance(email, str) or not isinstance(password, str) or not password:
            raise ValidationError("Email and password are required")

        user = self._users.get_by_email(email)
        if not user:
            logger.warning("login failed for unknown email %s", email)
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            logger.warning("login failed for user %s", user.id)
            raise AuthenticationError("Invalid credentials")

        logger.info("user %s logged in as %s", user.id, user.role.value)
        return SessionUser(id=user.id, email=user.email, name=user.name, role=user.role)

    def resolve(self, session_user: Optional[SessionUser]) -> SessionUser:
        """Re-check that the session still points at an existing user."""
        if session_user is None:
            raise AuthenticationError("Not authenticated")
        user = self._users.get_by_id(session_user.id)
        if not user:
            raise AuthenticationError("User not found")
        return SessionUser(id=user.id, email=user.email, name=user.name, role=user.role)


class UserService:
    """Use case: employee directory, HR account creation, self-service profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        return self._users.get_by_id(int(user_id))

    def require_user(self, user_id: int, field_name: str = "user") -> User:
        user = self.get(user_id)
        if not user:
            raise ValidationError(f"{field_name} does not exist")
        return user

    def list_directory(self) -> list[dict]:
        return [
            {"id": u.id, "name": u.name, "email": u.email, "role": u.role.value}
            for u in self._users.list_all()
        ]

    def create_account(self, *, actor: SessionUser, data: dict) -> User:
        require(actor.role, Action.USERS_MANAGE, "Only HR can create accounts")

        email = require_email(data.get("email"))
        name = require_non_empty(data.get("name"), "name")
        password = require_min_length(data.get("password"), "password", MIN_PASSWORD_LENGTH)
        role = require_enum(data.get("role", Role.EMPLOYEE.value), Role, "role")

        if self._users.get_by_email(email):
            raise ValidationError("Email already exists")

        manager_id = optional_int(data.get("manager_id"), "manager_id", minimum=1)
        if manager_id is not None:
            self.require_user(manager_id, "manager_id")

        user = self._users.create_user(
            email=email,
            password_hash=generate_password_hash(password),
            name=name,
            role=role,
            department=optional_text(data.get("department"), "department"),
            position=optional_text(data.get("position"), "position"),
            employee_code=optional_text(data.get("employee_code"), "employee_code"),
            phone=optional_text(data.get("phone"), "phone"),
            hire_date=optional_date(data.get("hire_date"), "hire_date"),
            salary=optional_int(data.get("salary"), "salary", minimum=0),
            manager_id=manager_id,
            address=optional_text(data.get("address"), "address"),
            emergency_contact=optional_text(data.get("emergency_contact"), "emergency_contact"),
            emergency_phone=optional_text(data.get("emergency_phone"), "emergency_phone"),
        )
        logger.info("user %s created account %s (%s)", actor.id, user.id, role.value)
        return user

    def update_profile(self, *, actor: SessionUser, data: dict) -> User:
        changes = {}
        for field in PROFILE_FIELDS:
            if field in data:
                changes[field] = optional_text(data.get(field), field)
        if "name" in data:
            changes["name"] = require_non_empty(data.get("name"), "name")
        if not changes:
            raise ValidationError("Nothing to update")

        user = self._users.update_profile(actor.id, **changes)
        if not user:
            raise NotFoundError("User not found")
        return user


def user_ref(users: UserRepository, user_id: Optional[int]) -> Optional[dict]:
    """``{id, name}`` of a referenced user, or None when unset or missing."""
    if user_id is None:
        return None
    user = users.get_by_id(int(user_id))
    if not user:
        return None
    return {"id": user.id, "name": user.name}

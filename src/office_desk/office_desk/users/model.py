from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no storage access here.
    """

    id: int
    email: str
    password_hash: str
    name: str
    role: Role
    department: Optional[str] = None
    position: Optional[str] = None
    employee_code: Optional[str] = None
    phone: Optional[str] = None
    hire_date: Optional[date] = None
    salary: Optional[int] = None
    manager_id: Optional[int] = None
    address: Optional[str] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    id: int
    email: str
    name: str
    role: Role

    def to_session(self) -> dict:
        return {"user_id": self.id, "email": self.email, "name": self.name, "role": self.role.value}

    @classmethod
    def from_session(cls, data) -> Optional["SessionUser"]:
        if "user_id" not in data:
            return None
        try:
            role = Role(data.get("role"))
        except ValueError:
            return None
        return cls(id=int(data["user_id"]), email=data.get("email", ""), name=data.get("name", ""), role=role)

    def to_json(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name, "role": self.role.value}

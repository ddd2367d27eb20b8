from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import Role
from ..database.store import MemoryStore
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._table = store.table("users")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._table.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        for user in self._table:
            if user.email == email:
                return user
        return None

    def list_all(self) -> Sequence[User]:
        return self._table.all()

    def list_by_role(self, role: Role) -> Sequence[User]:
        return self._table.where(lambda u: u.role == role)

    def create_user(self, *, email: str, password_hash: str, name: str, role: Role, **profile) -> User:
        now = now_local()
        return self._table.insert(
            lambda user_id: User(
                id=user_id,
                email=email.strip().lower(),
                password_hash=password_hash,
                name=name,
                role=role,
                created_at=now,
                updated_at=now,
                **profile,
            )
        )

    def update_profile(self, user_id: int, **changes) -> Optional[User]:
        return self._table.update(user_id, updated_at=now_local(), **changes)

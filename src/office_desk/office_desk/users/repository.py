from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError

    def create_user(self, *, email: str, password_hash: str, name: str, role: Role, **profile) -> User:
        raise NotImplementedError

    def update_profile(self, user_id: int, **changes) -> Optional[User]:
        raise NotImplementedError

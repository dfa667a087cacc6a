from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import NewUser, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on the store directly.
    """

    def list_all(self, *, role: Optional[Role] = None, department: Optional[str] = None) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive lookup."""

        raise NotImplementedError

    def create_user(self, new_user: NewUser, *, created_at: str) -> User:
        raise NotImplementedError

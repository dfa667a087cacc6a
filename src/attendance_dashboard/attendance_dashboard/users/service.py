from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import to_utc_iso, utc_now
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, NotFoundError
from .model import LoginRequest, NewUser, User
from .repository import UserRepository


class AuthService:
    """Use case: authenticate user (login).

    Passwords are compared in plaintext; usernames case-insensitively.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, login: LoginRequest) -> User:
        user = self._users.get_by_username(login.username)
        if not user or user.password != login.password:
            raise AuthenticationError("Invalid credentials")
        return user


class UserService:
    """Use case: list and register users (admin screens)."""

    def __init__(self, users: UserRepository, *, clock: Optional[Callable[[], datetime]] = None):
        self._users = users
        self._clock = clock or utc_now

    def list_users(self, *, role: Optional[str] = None, department: Optional[str] = None) -> Sequence[User]:
        # an unknown role matches nobody rather than failing the request
        if role:
            try:
                role_enum = Role(role)
            except ValueError:
                return []
            return self._users.list_all(role=role_enum, department=department)
        return self._users.list_all(department=department)

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def create_user(self, new_user: NewUser) -> User:
        return self._users.create_user(new_user, created_at=to_utc_iso(self._clock()))

    def faculty_name(self, faculty_id: Optional[int]) -> str:
        """Live lookup of a faculty member's display name."""
        if faculty_id is None:
            return "N/A"
        user = self._users.get_by_id(faculty_id)
        if not user or user.role != Role.FACULTY:
            return "N/A"
        return user.name

from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.store import InMemoryStore
from .model import NewUser, User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self, *, role: Optional[Role] = None, department: Optional[str] = None) -> Sequence[User]:
        users = list(self._store.users)
        if role is not None:
            users = [u for u in users if u.role == role]
        if department:
            users = [u for u in users if u.department == department]
        return users

    def get_by_id(self, user_id: int) -> Optional[User]:
        return next((u for u in self._store.users if u.id == user_id), None)

    def get_by_username(self, username: str) -> Optional[User]:
        wanted = username.lower()
        return next((u for u in self._store.users if u.username.lower() == wanted), None)

    def create_user(self, new_user: NewUser, *, created_at: str) -> User:
        user = User(
            id=self._store.user_ids.next(),
            username=new_user.username,
            password=new_user.password,
            name=new_user.name,
            email=new_user.email,
            role=new_user.role,
            created_at=created_at,
            profile_image=new_user.profile_image,
            department=new_user.department,
            registration_number=new_user.registration_number,
            semester=new_user.semester,
            subject_ids=new_user.subject_ids,
            student_type=new_user.student_type,
        )
        self._store.users.append(user)
        return user

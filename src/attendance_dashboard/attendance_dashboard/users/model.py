from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import (
    optional_int,
    optional_str,
    optional_str_list,
    require_body,
    require_choice,
    require_non_empty,
)
from ..core.enums import Role, StudentType


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Which optional fields are meaningful depends on ``role``: faculty carry
    ``department`` and ``subject_ids``; students carry ``department``,
    ``registration_number``, ``semester`` and ``student_type``.
    """

    id: int
    username: str
    password: str
    name: str
    email: str
    role: Role
    created_at: str
    profile_image: Optional[str] = None
    department: Optional[str] = None
    registration_number: Optional[str] = None
    semester: Optional[int] = None
    subject_ids: Optional[tuple[str, ...]] = None
    student_type: Optional[StudentType] = None

    def to_dict(self) -> dict:
        # password is never serialized
        out: dict[str, Any] = {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "profileImage": self.profile_image,
            "createdAt": self.created_at,
        }
        if self.department is not None:
            out["department"] = self.department
        if self.registration_number is not None:
            out["registrationNumber"] = self.registration_number
        if self.semester is not None:
            out["semester"] = self.semester
        if self.subject_ids is not None:
            out["subjectIds"] = list(self.subject_ids)
        if self.student_type is not None:
            out["type"] = self.student_type.value
        return out


@dataclass(frozen=True)
class LoginRequest:
    username: str
    password: str

    @classmethod
    def from_body(cls, body: Any) -> "LoginRequest":
        # missing credentials fall through to "Invalid credentials", not a 400
        data = require_body(body)
        username = data.get("username")
        password = data.get("password")
        return cls(
            username=username.strip() if isinstance(username, str) else "",
            password=password if isinstance(password, str) else "",
        )


@dataclass(frozen=True)
class NewUser:
    username: str
    password: str
    name: str
    email: str
    role: Role
    profile_image: Optional[str] = None
    department: Optional[str] = None
    registration_number: Optional[str] = None
    semester: Optional[int] = None
    subject_ids: Optional[tuple[str, ...]] = None
    student_type: Optional[StudentType] = None

    @classmethod
    def from_body(cls, body: Any) -> "NewUser":
        data = require_body(body)
        student_type = data.get("type")
        return cls(
            username=require_non_empty(data.get("username"), "username"),
            password=require_non_empty(data.get("password"), "password"),
            name=require_non_empty(data.get("name"), "name"),
            email=optional_str(data.get("email"), "email") or "",
            role=require_choice(data.get("role"), Role, "role"),
            profile_image=optional_str(data.get("profileImage"), "profileImage"),
            department=optional_str(data.get("department"), "department"),
            registration_number=optional_str(data.get("registrationNumber"), "registrationNumber"),
            semester=optional_int(data.get("semester"), "semester"),
            subject_ids=optional_str_list(data.get("subjectIds"), "subjectIds"),
            student_type=require_choice(student_type, StudentType, "type") if student_type is not None else None,
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_int, optional_str, require_body, require_int, require_non_empty
from ..core.constants import DEFAULT_COURSE_CREDITS


@dataclass(frozen=True)
class Course:
    """A subject offered by a department in a given semester."""

    id: str
    name: str
    code: str
    credits: int
    semester: Optional[int]
    department: Optional[str]
    faculty_id: Optional[int] = None

    def matches(self, id_or_code: str) -> bool:
        return self.id == id_or_code or self.code == id_or_code

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "credits": self.credits,
            "semester": self.semester,
            "department": self.department,
            "facultyId": self.faculty_id,
        }


@dataclass(frozen=True)
class NewCourse:
    name: str
    code: str
    credits: int
    semester: Optional[int]
    department: Optional[str]
    faculty_id: Optional[int]

    @classmethod
    def from_body(cls, body: Any) -> "NewCourse":
        data = require_body(body)
        credits = data.get("credits")
        return cls(
            name=require_non_empty(data.get("name"), "name"),
            code=require_non_empty(data.get("code"), "code"),
            credits=require_int(credits, "credits") if credits else DEFAULT_COURSE_CREDITS,
            semester=optional_int(data.get("semester"), "semester"),
            department=optional_str(data.get("department"), "department"),
            faculty_id=optional_int(data.get("facultyId"), "facultyId"),
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..common.validators import require_body, require_int, require_non_empty


@dataclass(frozen=True)
class Enrollment:
    id: int
    student_id: int
    course_id: str
    enrollment_date: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "studentId": self.student_id,
            "courseId": self.course_id,
            "enrollmentDate": self.enrollment_date,
        }


@dataclass(frozen=True)
class NewEnrollment:
    student_id: int
    course_id: str

    @classmethod
    def from_body(cls, body: Any) -> "NewEnrollment":
        data = require_body(body)
        course_id = data.get("courseId")
        if isinstance(course_id, int) and not isinstance(course_id, bool):
            course_id = str(course_id)
        return cls(
            student_id=require_int(data.get("studentId"), "studentId"),
            course_id=require_non_empty(course_id, "courseId"),
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import optional_str, require_body, require_non_empty
from ..core.constants import WEEKDAYS
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ClassSlot:
    """A weekly schedule slot of a course."""

    id: int
    course_id: str
    day: str
    start_time: str
    end_time: str
    room_number: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "courseId": self.course_id,
            "day": self.day,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "roomNumber": self.room_number,
        }


@dataclass(frozen=True)
class NewClassSlot:
    course_id: str
    day: str
    start_time: str
    end_time: str
    room_number: Optional[str] = None

    @classmethod
    def from_body(cls, body: Any) -> "NewClassSlot":
        data = require_body(body)
        course_id = data.get("courseId")
        if isinstance(course_id, int) and not isinstance(course_id, bool):
            course_id = str(course_id)
        day = require_non_empty(data.get("day"), "day")
        if day not in WEEKDAYS:
            raise ValidationError(f"day must be one of: {', '.join(WEEKDAYS)}")
        return cls(
            course_id=require_non_empty(course_id, "courseId"),
            day=day,
            start_time=require_non_empty(data.get("startTime"), "startTime"),
            end_time=require_non_empty(data.get("endTime"), "endTime"),
            room_number=optional_str(data.get("roomNumber"), "roomNumber"),
        )

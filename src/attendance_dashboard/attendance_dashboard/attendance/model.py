from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date
from typing import Any, Optional

from ..common.validators import (
    optional_float,
    optional_int,
    optional_str,
    require_body,
    require_choice,
    require_int,
    require_iso_date,
    require_non_empty,
)
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance for one class on one date.

    ``(student_id, class_id, date)`` is the natural key used to decide
    whether a submission updates an existing record or appends a new one.
    """

    id: str
    date: date
    student_id: int
    class_id: str
    status: AttendanceStatus
    subject: str = ""
    subject_code: str = ""
    registration_number: Optional[str] = None
    student_name: str = ""
    instructor: str = "N/A"
    faculty_id: Optional[int] = None
    time: str = ""
    duration: float = 0.0
    notes: str = ""
    department: Optional[str] = None

    @property
    def natural_key(self) -> tuple[int, str, date]:
        return (self.student_id, self.class_id, self.date)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "subject": self.subject,
            "subjectCode": self.subject_code,
            "studentId": self.student_id,
            "registrationNumber": self.registration_number,
            "studentName": self.student_name,
            "status": self.status.value,
            "instructor": self.instructor,
            "facultyId": self.faculty_id,
            "time": self.time,
            "duration": self.duration,
            "notes": self.notes,
            "classId": self.class_id,
            "department": self.department,
        }


@dataclass(frozen=True)
class AttendanceSubmission:
    """Validated body of an attendance POST.

    Optional fields left as ``None`` were not sent and must not overwrite
    values of an existing record.
    """

    student_id: int
    class_id: str
    date: date
    status: AttendanceStatus
    subject: Optional[str] = None
    subject_code: Optional[str] = None
    registration_number: Optional[str] = None
    student_name: Optional[str] = None
    instructor: Optional[str] = None
    faculty_id: Optional[int] = None
    time: Optional[str] = None
    duration: Optional[float] = None
    notes: Optional[str] = None
    department: Optional[str] = None

    @property
    def natural_key(self) -> tuple[int, str, date]:
        return (self.student_id, self.class_id, self.date)

    @classmethod
    def from_body(cls, body: Any) -> "AttendanceSubmission":
        data = require_body(body)
        class_id = data.get("classId")
        if isinstance(class_id, int) and not isinstance(class_id, bool):
            class_id = str(class_id)
        return cls(
            student_id=require_int(data.get("studentId"), "studentId"),
            class_id=require_non_empty(class_id, "classId"),
            date=require_iso_date(data.get("date"), "date"),
            status=require_choice(data.get("status"), AttendanceStatus, "status"),
            subject=optional_str(data.get("subject"), "subject"),
            subject_code=optional_str(data.get("subjectCode"), "subjectCode"),
            registration_number=optional_str(data.get("registrationNumber"), "registrationNumber"),
            student_name=optional_str(data.get("studentName"), "studentName"),
            instructor=optional_str(data.get("instructor"), "instructor"),
            faculty_id=optional_int(data.get("facultyId"), "facultyId"),
            time=optional_str(data.get("time"), "time"),
            duration=optional_float(data.get("duration"), "duration"),
            notes=optional_str(data.get("notes"), "notes"),
            department=optional_str(data.get("department"), "department"),
        )

    def changes(self) -> dict[str, Any]:
        """Fields that were actually sent, keyed by AttendanceRecord field name."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used to decide which profile fields are meaningful."""

    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """The only valid values of an attendance record's status."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    EXCUSED = "excused"


class StudentType(str, Enum):
    REGULAR = "Regular"
    DETAINED = "Detained"

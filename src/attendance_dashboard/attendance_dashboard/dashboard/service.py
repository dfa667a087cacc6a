from __future__ import annotations

import math
import random
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..attendance.repository import AttendanceRepository
from ..classes.service import ClassService
from ..common.datetime_utils import now_local, to_utc_iso
from ..core.constants import DEFAULT_DASHBOARD_DEPARTMENT, RECENT_ATTENDANCE_LIMIT
from ..core.enums import AttendanceStatus, Role, StudentType
from ..courses.repository import CourseRepository
from ..users.repository import UserRepository
from ..users.service import UserService


class DashboardService:
    """Aggregate views for the dashboard widgets.

    Chart, class-summary and stats figures are random but bounded; the random
    source is injected so tests can pin it.
    """

    def __init__(
        self,
        users: UserRepository,
        courses: CourseRepository,
        attendance: AttendanceRepository,
        class_service: ClassService,
        user_service: UserService,
        *,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        default_department: str = DEFAULT_DASHBOARD_DEPARTMENT,
    ):
        self._users = users
        self._courses = courses
        self._attendance = attendance
        self._class_service = class_service
        self._user_service = user_service
        self._rng = rng or random.Random()
        self._clock = clock or now_local
        self.default_department = default_department

    def _students(self, department: str):
        return self._users.list_all(role=Role.STUDENT, department=department)

    def chart(self, department: str) -> list[dict]:
        total = len(self._students(department))
        today = self._clock().date()
        out = []
        for i in range(7):
            day = today - timedelta(days=6 - i)
            present = math.floor(self._rng.random() * (total * 0.7)) + math.floor(total * 0.1)
            out.append({"date": day.isoformat(), "present": present, "absent": total - present})
        return out

    def class_summary(self, department: str) -> list[dict]:
        courses = [c for c in self._courses.list_all() if c.department == department][:4]
        return [
            {
                "subjectName": c.name,
                "subjectCode": c.code,
                "facultyName": self._user_service.faculty_name(c.faculty_id),
                "time": "10:00 AM",
                "attendanceRate": self._rng.randrange(20) + 75,
            }
            for c in courses
        ]

    def recent_attendance(self, department: str) -> list[dict]:
        records = [r for r in self._attendance.list_all() if r.department == department]
        records.sort(key=lambda r: r.date, reverse=True)

        out = []
        for r in records[:RECENT_ATTENDANCE_LIMIT]:
            view = r.to_dict()
            student = self._users.get_by_id(r.student_id)
            view["studentName"] = student.name if student else r.student_name
            out.append(view)
        return out

    def alerts(self, department: str) -> list[dict]:
        now = to_utc_iso(self._clock())
        detained = [s for s in self._students(department) if s.student_type == StudentType.DETAINED]
        alerts = [
            {
                "id": f"alert_{s.registration_number}",
                "message": f"Student {s.name} ({s.registration_number}) has low attendance.",
                "type": "warning",
                "date": now,
            }
            for s in detained[:2]
        ]
        if not alerts:
            alerts.append(
                {
                    "id": f"info_{department.lower()}_ok",
                    "message": f"{department} attendance is generally good.",
                    "type": "info",
                    "date": now,
                }
            )
        return alerts

    def stats(self, department: str) -> dict:
        total = len(self._students(department))
        today = self._clock().date()

        classes_today = [
            c for c in self._class_service.list_for_day(today) if self._class_service.department_of(c) == department
        ]
        absent_today = [
            r
            for r in self._attendance.list_all()
            if r.department == department and r.date == today and r.status == AttendanceStatus.ABSENT
        ]

        return {
            "attendanceRate": self._rng.randrange(10) + 80,
            "totalStudents": total,
            # fallbacks keep the widgets populated on an empty schedule
            "classesToday": len(classes_today) or 2,
            "absentStudents": len(absent_today) or math.floor(total * 0.05),
        }

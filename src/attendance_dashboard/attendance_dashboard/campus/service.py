from __future__ import annotations

from typing import Optional

from ..core.constants import ACADEMIC_YEAR
from ..courses.repository import CourseRepository
from ..database.seed_data import Department
from ..users.service import UserService

_TIMETABLE_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
_TIMETABLE_SLOTS = ("09:00 AM - 10:30 AM", "11:00 AM - 12:30 PM", "02:00 PM - 03:30 PM")


class CampusService:
    """Read-only campus payloads: student timetable, events and notifications.

    Events and notifications are fixed; the timetable is derived from the
    department's subject plan and the current course list.
    """

    def __init__(self, departments: dict[str, Department], courses: CourseRepository, user_service: UserService):
        self._departments = departments
        self._courses = courses
        self._user_service = user_service

    def student_timetable(self, *, department: Optional[str], semester: Optional[int]) -> list[dict]:
        if not department or semester is None:
            return []

        dept = self._departments.get(department)
        subject_ids = set(dept.subject_ids_for(ACADEMIC_YEAR, semester)) if dept else set()
        subjects = [c for c in self._courses.list_all() if c.id in subject_ids]

        timetable = []
        for index, subject in enumerate(subjects):
            day_index = index % len(_TIMETABLE_DAYS)
            timetable.append(
                {
                    "id": f"tt_{subject.id}_{day_index}",
                    "subjectName": subject.name,
                    "subjectCode": subject.code,
                    "day": _TIMETABLE_DAYS[day_index],
                    "time": _TIMETABLE_SLOTS[index % len(_TIMETABLE_SLOTS)],
                    "room": f"{department}-R{101 + index}",
                    "facultyName": self._user_service.faculty_name(subject.faculty_id),
                }
            )
        return timetable

    def events(self, *, department: Optional[str] = None) -> list[dict]:
        return [
            {
                "id": "evt1",
                "title": f"Dept. Seminar on AI ({department or 'General'})",
                "date": "2025-06-10",
                "time": "02:00 PM",
                "description": "Expert talk on latest AI trends.",
                "type": "Seminar",
            },
            {
                "id": "evt2",
                "title": "Sports Day Trials",
                "date": "2025-06-15",
                "description": "Trials for upcoming annual sports meet.",
                "type": "Sports",
            },
            {
                "id": "evt3",
                "title": "Tech Fest 'Innovate 2025'",
                "date": "2025-07-01",
                "description": "Annual technical festival.",
                "type": "Fest",
            },
        ]

    def student_notifications(self) -> list[dict]:
        return [
            {
                "id": "msg1",
                "title": "Library Due Reminder",
                "content": "Your borrowed book 'Advanced Java' is due tomorrow.",
                "date": "2025-05-24T00:00:00.000Z",
                "read": False,
                "type": "Reminder",
            },
            {
                "id": "msg2",
                "title": "Fee Payment Update",
                "content": "Semester fee payment portal is now open.",
                "date": "2025-05-20T00:00:00.000Z",
                "read": True,
                "type": "Info",
            },
            {
                "id": "msg3",
                "from": "Admin",
                "title": "Campus Closure Notice",
                "content": "Campus will be closed on Monday due to public holiday.",
                "date": "2025-05-22T00:00:00.000Z",
                "read": False,
                "type": "Notice",
            },
        ]

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import weekday_name
from ..courses.repository import CourseRepository
from ..users.service import UserService
from .model import ClassSlot, NewClassSlot
from .repository import ClassRepository


class ClassService:
    def __init__(self, classes: ClassRepository, courses: CourseRepository, user_service: UserService):
        self._classes = classes
        self._courses = courses
        self._user_service = user_service

    def list_classes(self) -> Sequence[ClassSlot]:
        return self._classes.list_all()

    def list_for_day(self, day: date) -> Sequence[ClassSlot]:
        return self._classes.list_all(day=weekday_name(day))

    def list_for_course(self, id_or_code: str) -> Sequence[ClassSlot]:
        course = self._courses.get_by_id_or_code(id_or_code)
        if not course:
            return self._classes.list_for_course(id_or_code)
        # slots may reference the course by either its id or its code
        return [c for c in self._classes.list_all() if course.matches(c.course_id)]

    def department_of(self, slot: ClassSlot) -> Optional[str]:
        course = self._courses.get_by_id_or_code(slot.course_id)
        return course.department if course else None

    def to_view(self, slot: ClassSlot) -> dict:
        course = self._courses.get_by_id_or_code(slot.course_id)
        view = slot.to_dict()
        view["courseName"] = course.name if course else None
        view["facultyName"] = self._user_service.faculty_name(course.faculty_id if course else None)
        return view

    def create_class(self, new_class: NewClassSlot) -> ClassSlot:
        return self._classes.create_class(new_class)

from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..users.repository import UserRepository
from ..users.service import UserService
from .model import Course, NewCourse
from .repository import CourseRepository


class CourseService:
    def __init__(self, courses: CourseRepository, users: UserRepository, user_service: UserService):
        self._courses = courses
        self._users = users
        self._user_service = user_service

    def list_courses(
        self,
        *,
        department: Optional[str] = None,
        semester: Optional[int] = None,
        faculty_id: Optional[int] = None,
    ) -> Sequence[Course]:
        courses = list(self._courses.list_all())
        if department:
            courses = [c for c in courses if c.department == department]
        if semester is not None:
            courses = [c for c in courses if c.semester == semester]
        if faculty_id is not None:
            # Ownership comes from the faculty's subject list, not Course.faculty_id.
            faculty = self._users.get_by_id(faculty_id)
            subject_ids = set(faculty.subject_ids or ()) if faculty and faculty.role == Role.FACULTY else set()
            courses = [c for c in courses if c.id in subject_ids]
        return courses

    def to_view(self, course: Course) -> dict:
        view = course.to_dict()
        view["facultyName"] = self._user_service.faculty_name(course.faculty_id)
        return view

    def create_course(self, new_course: NewCourse) -> Course:
        return self._courses.create_course(new_course)

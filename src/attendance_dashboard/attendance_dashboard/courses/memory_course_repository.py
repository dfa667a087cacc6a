from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import Course, NewCourse
from .repository import CourseRepository


class MemoryCourseRepository(CourseRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Course]:
        return list(self._store.courses)

    def get_by_id_or_code(self, id_or_code: str) -> Optional[Course]:
        return next((c for c in self._store.courses if c.matches(id_or_code)), None)

    def create_course(self, new_course: NewCourse) -> Course:
        course = Course(
            id=f"NEW_COURSE_{self._store.course_ids.next()}",
            name=new_course.name,
            code=new_course.code,
            credits=new_course.credits,
            semester=new_course.semester,
            department=new_course.department,
            faculty_id=new_course.faculty_id,
        )
        self._store.courses.append(course)
        return course

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course, NewCourse


class CourseRepository(Protocol):
    def list_all(self) -> Sequence[Course]:
        raise NotImplementedError

    def get_by_id_or_code(self, id_or_code: str) -> Optional[Course]:
        raise NotImplementedError

    def create_course(self, new_course: NewCourse) -> Course:
        raise NotImplementedError

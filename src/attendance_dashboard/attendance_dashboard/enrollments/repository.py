from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Enrollment, NewEnrollment


class EnrollmentRepository(Protocol):
    def list_all(self) -> Sequence[Enrollment]:
        raise NotImplementedError

    def list_for_course(self, course_id: str) -> Sequence[Enrollment]:
        raise NotImplementedError

    def find(self, *, student_id: int, course_id: str) -> Optional[Enrollment]:
        raise NotImplementedError

    def create_enrollment(self, new_enrollment: NewEnrollment, *, enrollment_date: str) -> Enrollment:
        raise NotImplementedError

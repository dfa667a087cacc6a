from __future__ import annotations

from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import Enrollment, NewEnrollment
from .repository import EnrollmentRepository


class MemoryEnrollmentRepository(EnrollmentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[Enrollment]:
        return list(self._store.enrollments)

    def list_for_course(self, course_id: str) -> Sequence[Enrollment]:
        return [e for e in self._store.enrollments if e.course_id == course_id]

    def find(self, *, student_id: int, course_id: str) -> Optional[Enrollment]:
        return next(
            (e for e in self._store.enrollments if e.student_id == student_id and e.course_id == course_id),
            None,
        )

    def create_enrollment(self, new_enrollment: NewEnrollment, *, enrollment_date: str) -> Enrollment:
        enrollment = Enrollment(
            id=self._store.enrollment_ids.next(),
            student_id=new_enrollment.student_id,
            course_id=new_enrollment.course_id,
            enrollment_date=enrollment_date,
        )
        self._store.enrollments.append(enrollment)
        return enrollment

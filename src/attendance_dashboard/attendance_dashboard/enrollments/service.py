from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import to_utc_iso, utc_now
from ..core.exceptions import ConflictError
from ..courses.repository import CourseRepository
from .model import Enrollment, NewEnrollment
from .repository import EnrollmentRepository


class EnrollmentService:
    """Use case: enroll students into courses.

    At most one enrollment exists per (student, course); the rule is checked
    on insert only.
    """

    def __init__(
        self,
        enrollments: EnrollmentRepository,
        courses: CourseRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._enrollments = enrollments
        self._courses = courses
        self._clock = clock or utc_now

    def list_enrollments(self) -> Sequence[Enrollment]:
        return self._enrollments.list_all()

    def list_for_course(self, id_or_code: str) -> Sequence[Enrollment]:
        course = self._courses.get_by_id_or_code(id_or_code)
        if not course:
            return self._enrollments.list_for_course(id_or_code)
        return self._enrollments.list_for_course(course.id)

    def enroll(self, new_enrollment: NewEnrollment) -> Enrollment:
        course = self._courses.get_by_id_or_code(new_enrollment.course_id)
        if course:
            new_enrollment = replace(new_enrollment, course_id=course.id)

        if self._enrollments.find(student_id=new_enrollment.student_id, course_id=new_enrollment.course_id):
            raise ConflictError("Student already enrolled in this course")

        return self._enrollments.create_enrollment(new_enrollment, enrollment_date=to_utc_iso(self._clock()))

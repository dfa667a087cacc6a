from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from .model import AttendanceRecord, AttendanceSubmission
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, *, debug: bool = False):
        self._attendance = attendance
        self._debug = bool(debug)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_range(
        self,
        *,
        student_id: Optional[int] = None,
        registration_number: Optional[str] = None,
        department: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        return self._attendance.list_range(
            student_id=student_id,
            registration_number=registration_number,
            department=department,
            start_date=start_date,
            end_date=end_date,
        )

    def list_for_class(self, *, class_id: str, day: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_class_and_date(class_id=class_id, day=day)

    def submit(self, submission: AttendanceSubmission) -> tuple[AttendanceRecord, bool]:
        """Upsert by (student, class, date).

        Returns the stored record and whether it was newly created.
        """

        existing = self._attendance.get_by_natural_key(
            student_id=submission.student_id,
            class_id=submission.class_id,
            day=submission.date,
        )
        if existing:
            updated = replace(existing, **submission.changes())
            self._attendance.update_record(updated)
            if self._debug:
                print(f"[mock-api] Updated attendance: {updated.id} -> {updated.status.value}")
            return updated, False

        created = self._attendance.create_record(submission)
        if self._debug:
            print(f"[mock-api] Added new attendance: {created.id}")
        return created, True

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceSubmission


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(
        self,
        *,
        student_id: Optional[int] = None,
        registration_number: Optional[str] = None,
        department: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Inclusive date range; ``student_id`` wins over ``registration_number``."""

        raise NotImplementedError

    def list_for_class_and_date(self, *, class_id: str, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_natural_key(self, *, student_id: int, class_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def update_record(self, record: AttendanceRecord) -> bool:
        """Replace the stored record with the same id in place."""

        raise NotImplementedError

    def create_record(self, submission: AttendanceSubmission) -> AttendanceRecord:
        raise NotImplementedError

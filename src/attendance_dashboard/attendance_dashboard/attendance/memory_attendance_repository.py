from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.store import InMemoryStore
from .model import AttendanceRecord, AttendanceSubmission
from .repository import AttendanceRepository


class MemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return list(self._store.attendance)

    def list_range(
        self,
        *,
        student_id: Optional[int] = None,
        registration_number: Optional[str] = None,
        department: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        records = list(self._store.attendance)
        if student_id is not None:
            records = [r for r in records if r.student_id == student_id]
        elif registration_number:
            records = [r for r in records if r.registration_number == registration_number]
        if department:
            records = [r for r in records if r.department == department]
        if start_date is not None:
            records = [r for r in records if r.date >= start_date]
        if end_date is not None:
            records = [r for r in records if r.date <= end_date]
        return records

    def list_for_class_and_date(self, *, class_id: str, day: date) -> Sequence[AttendanceRecord]:
        return [r for r in self._store.attendance if r.class_id == class_id and r.date == day]

    def get_by_natural_key(self, *, student_id: int, class_id: str, day: date) -> Optional[AttendanceRecord]:
        key = (student_id, class_id, day)
        return next((r for r in self._store.attendance if r.natural_key == key), None)

    def update_record(self, record: AttendanceRecord) -> bool:
        for i, existing in enumerate(self._store.attendance):
            if existing.id == record.id:
                self._store.attendance[i] = record
                return True
        return False

    def create_record(self, submission: AttendanceSubmission) -> AttendanceRecord:
        record_id = f"{submission.subject_code or 'SUB'}_{submission.student_id}_{self._store.attendance_ids.next()}"
        record = AttendanceRecord(id=record_id, **submission.changes())
        self._store.attendance.append(record)
        return record

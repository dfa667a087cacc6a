from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord
from .repository import AttendanceRepository

_ATTENDED = (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


def attendance_stats(records: Iterable[AttendanceRecord]) -> dict:
    """Status counts, attendance rate and hours for a group of records.

    Excused classes are left out of the rate; an empty effective total counts
    as full attendance.
    """

    records = list(records)
    counts = {s: 0 for s in AttendanceStatus}
    total_hours = 0.0
    attended_hours = 0.0
    for r in records:
        counts[r.status] += 1
        total_hours += r.duration or 0
        if r.status in _ATTENDED:
            attended_hours += r.duration or 0

    total = len(records)
    effective_total = total - counts[AttendanceStatus.EXCUSED]
    attended = counts[AttendanceStatus.PRESENT] + counts[AttendanceStatus.LATE]
    rate = round(attended / effective_total * 100) if effective_total > 0 else 100

    return {
        "totalClasses": total,
        "presentClasses": counts[AttendanceStatus.PRESENT],
        "lateClasses": counts[AttendanceStatus.LATE],
        "absentClasses": counts[AttendanceStatus.ABSENT],
        "excusedClasses": counts[AttendanceStatus.EXCUSED],
        "attendanceRate": rate,
        "totalHours": total_hours,
        "attendedHours": attended_hours,
    }


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_attendance_report(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        student_id: Optional[int] = None,
        registration_number: Optional[str] = None,
        department: Optional[str] = None,
    ) -> ReportData:
        records = self._attendance.list_range(
            student_id=student_id,
            registration_number=registration_number,
            department=department,
            start_date=start,
            end_date=end,
        )

        by_student: dict[int, list[AttendanceRecord]] = {}
        out_rows: list[dict] = []
        for r in sorted(records, key=lambda x: (x.date, x.student_id)):
            out_rows.append(
                {
                    "date": r.date.strftime("%Y-%m-%d"),
                    "student_id": r.student_id,
                    "registration_number": r.registration_number or "-",
                    "student_name": r.student_name,
                    "department": r.department or "-",
                    "subject_code": r.subject_code,
                    "subject": r.subject,
                    "instructor": r.instructor,
                    "time": r.time,
                    "status": r.status.value,
                    "notes": r.notes or "",
                }
            )
            by_student.setdefault(r.student_id, []).append(r)

        summary = []
        for sid, group in by_student.items():
            by_subject: dict[str, list[AttendanceRecord]] = {}
            for r in group:
                by_subject.setdefault(r.subject, []).append(r)

            entry = {
                "studentId": sid,
                "studentName": group[0].student_name,
                "registrationNumber": group[0].registration_number,
            }
            entry.update(attendance_stats(group))
            entry["subjects"] = [dict(subject=name, **attendance_stats(rs)) for name, rs in by_subject.items()]
            summary.append(entry)

        summary.sort(key=lambda x: x["studentId"])
        return ReportData(rows=out_rows, summary=summary)

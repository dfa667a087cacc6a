from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..common.datetime_utils import parse_iso_date, try_parse_iso_date
from ..container import Container
from .model import AttendanceSubmission


def register(router: Router, container: Container) -> None:
    def _range_filters(request: ApiRequest):
        """Shared filters of the range and summary endpoints; None when a filter is malformed."""
        student_id, bad_student = request.typed_arg("studentId", int)
        start, bad_start = request.typed_arg("startDate", parse_iso_date)
        end, bad_end = request.typed_arg("endDate", parse_iso_date)
        if bad_student or bad_start or bad_end:
            return None
        return {
            "student_id": student_id,
            "registration_number": request.args.get("registrationNumber") or None,
            "department": request.args.get("department") or None,
            "start": start,
            "end": end,
        }

    @router.route("GET", "/api/attendance/range")
    def attendance_range(request: ApiRequest):
        filters = _range_filters(request)
        if filters is None:
            return []
        records = container.attendance_service.list_range(
            student_id=filters["student_id"],
            registration_number=filters["registration_number"],
            department=filters["department"],
            start_date=filters["start"],
            end_date=filters["end"],
        )
        return [r.to_dict() for r in records]

    @router.route("GET", "/api/attendance/summary")
    def attendance_summary(request: ApiRequest):
        filters = _range_filters(request)
        if filters is None:
            return []
        return container.attendance_report_service.build_attendance_report(**filters).summary

    @router.route("GET", "/api/attendance/class/<class_id>/date/<day>")
    def attendance_for_class(request: ApiRequest):
        day = try_parse_iso_date(request.view_args["day"])
        if day is None:
            return []
        records = container.attendance_service.list_for_class(class_id=request.view_args["class_id"], day=day)
        return [r.to_dict() for r in records]

    @router.route("GET", "/api/attendance")
    def list_attendance(request: ApiRequest):
        return [r.to_dict() for r in container.attendance_service.list_all()]

    @router.route("POST", "/api/attendance")
    def submit_attendance(request: ApiRequest):
        record, created = container.attendance_service.submit(AttendanceSubmission.from_body(request.body))
        return record.to_dict(), 201 if created else 200

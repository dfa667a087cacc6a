from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..container import Container


def register(router: Router, container: Container) -> None:
    service = container.campus_service

    @router.route("GET", "/api/timetable/student")
    def student_timetable(request: ApiRequest):
        semester, bad_semester = request.typed_arg("semester", int)
        if bad_semester:
            return []
        return service.student_timetable(department=request.args.get("department") or None, semester=semester)

    @router.route("GET", "/api/events")
    def events(request: ApiRequest):
        return service.events(department=request.args.get("department") or None)

    @router.route("GET", "/api/notifications/student")
    def student_notifications(request: ApiRequest):
        return service.student_notifications()

    @router.route("GET", "/api/notifications/student/<int:student_id>")
    def notifications_for_student(request: ApiRequest):
        return service.student_notifications()

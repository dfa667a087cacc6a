from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..container import Container
from .model import NewEnrollment


def register(router: Router, container: Container) -> None:
    @router.route("GET", "/api/enrollments/course/<course_id>")
    def enrollments_for_course(request: ApiRequest):
        enrollments = container.enrollment_service.list_for_course(request.view_args["course_id"])
        return [e.to_dict() for e in enrollments]

    @router.route("GET", "/api/enrollments")
    def list_enrollments(request: ApiRequest):
        return [e.to_dict() for e in container.enrollment_service.list_enrollments()]

    @router.route("POST", "/api/enrollments")
    def enroll(request: ApiRequest):
        enrollment = container.enrollment_service.enroll(NewEnrollment.from_body(request.body))
        if container.debug:
            print(f"[mock-api] Added new enrollment: student={enrollment.student_id} course={enrollment.course_id}")
        return enrollment.to_dict(), 201

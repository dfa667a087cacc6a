from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..container import Container
from .model import NewCourse


def register(router: Router, container: Container) -> None:
    @router.route("GET", "/api/courses")
    def list_courses(request: ApiRequest):
        semester, bad_semester = request.typed_arg("semester", int)
        faculty_id, bad_faculty = request.typed_arg("facultyId", int)
        if bad_semester or bad_faculty:
            return []

        courses = container.course_service.list_courses(
            department=request.args.get("department") or None,
            semester=semester,
            faculty_id=faculty_id,
        )
        return [container.course_service.to_view(c) for c in courses]

    @router.route("POST", "/api/courses")
    def create_course(request: ApiRequest):
        course = container.course_service.create_course(NewCourse.from_body(request.body))
        if container.debug:
            print(f"[mock-api] Added new course: {course.id} ({course.code})")
        return course.to_dict(), 201

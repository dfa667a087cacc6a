from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..common.datetime_utils import now_local
from ..container import Container
from .model import NewClassSlot


def register(router: Router, container: Container) -> None:
    service = container.class_service

    @router.route("GET", "/api/classes/today")
    def classes_today(request: ApiRequest):
        return [service.to_view(c) for c in service.list_for_day(now_local().date())]

    @router.route("GET", "/api/classes/course/<course_id>")
    def classes_for_course(request: ApiRequest):
        return [service.to_view(c) for c in service.list_for_course(request.view_args["course_id"])]

    @router.route("GET", "/api/classes")
    def list_classes(request: ApiRequest):
        return [service.to_view(c) for c in service.list_classes()]

    @router.route("POST", "/api/classes")
    def create_class(request: ApiRequest):
        slot = service.create_class(NewClassSlot.from_body(request.body))
        if container.debug:
            print(f"[mock-api] Added new class schedule: id={slot.id} course={slot.course_id} {slot.day}")
        return slot.to_dict(), 201

from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..container import Container


def register(router: Router, container: Container) -> None:
    service = container.dashboard_service

    def _department(request: ApiRequest) -> str:
        return request.args.get("department") or service.default_department

    @router.route("GET", "/api/dashboard/chart")
    def chart(request: ApiRequest):
        return service.chart(_department(request))

    @router.route("GET", "/api/dashboard/class-summary")
    def class_summary(request: ApiRequest):
        return service.class_summary(_department(request))

    @router.route("GET", "/api/dashboard/recent-attendance")
    def recent_attendance(request: ApiRequest):
        return service.recent_attendance(_department(request))

    @router.route("GET", "/api/dashboard/alerts")
    def alerts(request: ApiRequest):
        return service.alerts(_department(request))

    @router.route("GET", "/api/dashboard/stats")
    def stats(request: ApiRequest):
        return service.stats(_department(request))

from __future__ import annotations

from ..api.router import ApiRequest, Router
from ..container import Container
from .model import LoginRequest, NewUser


def register(router: Router, container: Container) -> None:
    @router.route("POST", "/api/login")
    def login(request: ApiRequest):
        user = container.auth_service.authenticate(LoginRequest.from_body(request.body))
        return user.to_dict()

    @router.route("GET", "/api/users")
    def list_users(request: ApiRequest):
        users = container.user_service.list_users(
            role=request.args.get("role") or None,
            department=request.args.get("department") or None,
        )
        return [u.to_dict() for u in users]

    @router.route("GET", "/api/users/<int:user_id>")
    def get_user(request: ApiRequest):
        return container.user_service.get_user(request.view_args["user_id"]).to_dict()

    @router.route("POST", "/api/users")
    def create_user(request: ApiRequest):
        user = container.user_service.create_user(NewUser.from_body(request.body))
        if container.debug:
            print(f"[mock-api] Added new user: id={user.id} role={user.role.value}")
        return user.to_dict(), 201

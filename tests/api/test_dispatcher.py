from __future__ import annotations

import asyncio

from src.attendance_dashboard.attendance_dashboard.api.dispatcher import MockApiDispatcher, status_for
from src.attendance_dashboard.attendance_dashboard.api.router import ApiRequest, Router
from src.attendance_dashboard.attendance_dashboard.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.attendance_dashboard.attendance_dashboard.database.store import InMemoryStore


def test_unknown_route_returns_404_message(api):
    res = api.dispatch("GET", "/api/unknown?x=1")

    assert res.status == 404
    assert res.json() == {"message": "Mock for GET /api/unknown not found."}


def test_wrong_method_returns_404(api):
    res = api.dispatch("DELETE", "/api/users")

    assert res.status == 404
    assert res.json()["message"] == "Mock for DELETE /api/users not found."


def test_method_matching_is_case_insensitive(api):
    assert api.dispatch("get", "/api/users").status == 200


def test_text_is_json_encoded_body(api):
    res = api.dispatch("GET", "/api/unknown")

    assert res.text() == '{"message": "Mock for GET /api/unknown not found."}'


def test_status_for_domain_errors():
    assert status_for(ValidationError("x")) == 400
    assert status_for(AuthenticationError("x")) == 401
    assert status_for(NotFoundError("x")) == 404
    assert status_for(ConflictError("x")) == 409


def test_specific_rule_wins_over_generic_regardless_of_order():
    router = Router()

    @router.route("GET", "/api/classes/<course_id>")
    def generic(request: ApiRequest):
        return "generic"

    @router.route("GET", "/api/classes/today")
    def today(request: ApiRequest):
        return "today"

    dispatcher = MockApiDispatcher(router, InMemoryStore())

    assert dispatcher.dispatch("GET", "/api/classes/today").json() == "today"
    assert dispatcher.dispatch("GET", "/api/classes/MCA101").json() == "generic"


def test_first_query_value_wins():
    router = Router()

    @router.route("GET", "/api/echo")
    def echo(request: ApiRequest):
        return request.args.get("role")

    dispatcher = MockApiDispatcher(router, InMemoryStore())

    assert dispatcher.dispatch("GET", "/api/echo?role=admin&role=student").json() == "admin"


def test_unexpected_error_becomes_500():
    router = Router()

    @router.route("GET", "/api/boom")
    def boom(request: ApiRequest):
        raise RuntimeError("boom")

    res = MockApiDispatcher(router, InMemoryStore()).dispatch("GET", "/api/boom")

    assert res.status == 500
    assert res.json() == {"message": "Internal mock API error"}


def test_handler_status_tuple_is_honoured():
    router = Router()

    @router.route("POST", "/api/things")
    def create(request: ApiRequest):
        return {"received": request.body}, 201

    res = MockApiDispatcher(router, InMemoryStore()).dispatch("POST", "/api/things", {"a": 1})

    assert res.status == 201
    assert res.ok
    assert res.json() == {"received": {"a": 1}}


def test_duplicate_route_is_rejected():
    router = Router()
    router.route("GET", "/api/x")(lambda request: None)

    try:
        router.route("GET", "/api/x")(lambda request: None)
    except ValueError as e:
        assert "GET /api/x" in str(e)
    else:
        raise AssertionError("duplicate route was accepted")


def test_dispatch_async_resolves_same_response(api):
    res = asyncio.run(api.dispatch_async("POST", "/api/login", {"username": "haritha", "password": "faculty123"}))

    assert res.status == 200
    assert res.json()["id"] == 2

from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.api.query_client import (
    ApiError,
    QueryClient,
    build_url,
    should_retry,
)
from src.attendance_dashboard.attendance_dashboard.api.response import MockResponse


class FakeDispatcher:
    def __init__(self, status=200, body=None):
        self.status = status
        self.body = body if body is not None else []
        self.calls = []

    def dispatch(self, method, url, body=None):
        self.calls.append((method, url))
        return MockResponse(self.status, self.body)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_build_url_drops_none_and_renders_booleans():
    assert build_url("/api/users") == "/api/users"
    assert build_url("/api/users", {"role": None}) == "/api/users"
    assert build_url("/api/users", {"role": "student", "department": None}) == "/api/users?role=student"
    assert build_url("/api/x", {"active": True, "archived": False}) == "/api/x?active=true&archived=false"


def test_fetch_raises_api_error_with_status_and_body(api):
    client = QueryClient(api)

    with pytest.raises(ApiError) as exc:
        client.fetch("/api/nope")

    assert exc.value.status == 404
    assert exc.value.message.startswith("404: ")
    assert exc.value.body == {"message": "Mock for GET /api/nope not found."}


def test_fetch_builds_query_string(api):
    users = QueryClient(api).fetch("/api/users", {"role": "faculty", "department": "CSE"})

    assert [u["id"] for u in users] == [10, 11]


def test_should_retry_policy():
    assert not should_retry(0, ApiError(401, "401: x"))
    assert not should_retry(0, ApiError(403, "403: x"))
    assert not should_retry(0, ApiError(404, "404: x"))
    assert should_retry(0, ApiError(500, "500: x"))
    assert should_retry(1, ApiError(500, "500: x"))
    assert not should_retry(2, ApiError(500, "500: x"))


def test_query_retries_server_errors_up_to_limit():
    dispatcher = FakeDispatcher(status=500, body={"message": "Internal mock API error"})
    client = QueryClient(dispatcher, max_retries=2)

    with pytest.raises(ApiError):
        client.query("/api/users")

    assert len(dispatcher.calls) == 3


def test_query_does_not_retry_not_found():
    dispatcher = FakeDispatcher(status=404, body={"message": "missing"})
    client = QueryClient(dispatcher)

    with pytest.raises(ApiError):
        client.query("/api/users")

    assert len(dispatcher.calls) == 1


def test_query_caches_within_stale_window():
    dispatcher = FakeDispatcher(body=[{"id": 1}])
    clock = FakeClock()
    client = QueryClient(dispatcher, stale_seconds=300, clock=clock)

    assert client.query("/api/users", {"role": "admin"}) == [{"id": 1}]
    client.query("/api/users", {"role": "admin"})
    assert len(dispatcher.calls) == 1

    client.query("/api/users", {"role": "faculty"})
    assert len(dispatcher.calls) == 2

    clock.now += 301
    client.query("/api/users", {"role": "admin"})
    assert len(dispatcher.calls) == 3


def test_invalidate_by_prefix():
    dispatcher = FakeDispatcher()
    client = QueryClient(dispatcher, clock=FakeClock())
    client.query("/api/users")
    client.query("/api/courses")

    client.invalidate("/api/users")
    client.query("/api/users")
    client.query("/api/courses")
    assert [url for _, url in dispatcher.calls] == ["/api/users", "/api/courses", "/api/users"]

    client.invalidate()
    client.query("/api/courses")
    assert len(dispatcher.calls) == 4

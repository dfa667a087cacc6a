from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class MockResponse:
    """Response-like object returned by the dispatcher (``ok``/``status``/``json()``/``text()``)."""

    status: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        return self.body

    def text(self) -> str:
        return json.dumps(self.body)


HandlerResult = Union[MockResponse, tuple, Any]


def mock_response(data: Any, status: int = 200) -> MockResponse:
    return MockResponse(status=int(status), body=data)


def make_response(result: HandlerResult) -> MockResponse:
    """Normalize a handler return value, Flask style: body or (body, status)."""
    if isinstance(result, MockResponse):
        return result
    if isinstance(result, tuple):
        data, status = result
        return mock_response(data, status)
    return mock_response(result)

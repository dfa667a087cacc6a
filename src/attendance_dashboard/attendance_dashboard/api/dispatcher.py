from __future__ import annotations

import traceback
from typing import Any
from urllib.parse import parse_qsl, unquote, urlsplit

from werkzeug.datastructures import MultiDict

from ..core.exceptions import AuthenticationError, ConflictError, DomainError, NotFoundError, ValidationError
from ..database.store import InMemoryStore
from .response import MockResponse, make_response, mock_response
from .router import ApiRequest, Router

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


class MockApiDispatcher:
    """Emulates the REST backend in-process.

    ``dispatch`` never raises: unmatched routes, domain errors and unexpected
    failures all come back as a non-ok MockResponse.
    """

    def __init__(self, router: Router, store: InMemoryStore, *, debug: bool = False):
        self._router = router
        self._store = store
        self._debug = bool(debug)

    def dispatch(self, method: str, url: str, body: Any = None) -> MockResponse:
        parts = urlsplit(url)
        path = unquote(parts.path) or "/"
        args = MultiDict(parse_qsl(parts.query, keep_blank_values=True))

        if self._debug:
            print(f"[mock-api] {method} {path} params={parts.query!r} body={body!r}")

        matched = self._router.match(method, path)
        if matched is None:
            if self._debug:
                print(f"[mock-api] No mock handler for {method} {path}. Returning 404.")
            return mock_response({"message": f"Mock for {method} {path} not found."}, 404)

        handler, view_args = matched
        request = ApiRequest(method=method.upper(), path=path, args=args, view_args=view_args, body=body)
        try:
            return make_response(handler(request))
        except DomainError as e:
            return mock_response({"message": str(e)}, status_for(e))
        except Exception:
            if self._debug:
                traceback.print_exc()
            return mock_response({"message": "Internal mock API error"}, 500)

    async def dispatch_async(self, method: str, url: str, body: Any = None) -> MockResponse:
        """Awaitable twin of ``dispatch``; resolves immediately, no latency is modeled."""
        return self.dispatch(method, url, body)

    def reset(self) -> None:
        self._store.reset()

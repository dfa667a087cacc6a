"""Read adapter between cache-keyed queries and the mock API dispatcher.

Reads go through ``QueryClient.query``: the key ``(url, params)`` is turned
into a GET, non-ok responses become ``ApiError`` and results are cached for a
stale window. Mutations are sent straight to the dispatcher by callers and
never retried.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode

from ..core.constants import DEFAULT_QUERY_MAX_RETRIES, DEFAULT_QUERY_STALE_SECONDS, NON_RETRYABLE_STATUSES
from .dispatcher import MockApiDispatcher
from .response import MockResponse

Params = Optional[Mapping[str, Any]]


class ApiError(Exception):
    def __init__(self, status: int, message: str, body: Any = None):
        super().__init__(message)
        self.status = int(status)
        self.message = message
        self.body = body


@dataclass
class _CacheEntry:
    data: Any
    fetched_at: float


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(url: str, params: Params = None) -> str:
    """Append non-null params as a query string; drop the ``?`` when nothing is left."""
    if not params:
        return url
    pairs = [(k, _param_value(v)) for k, v in params.items() if v is not None]
    if not pairs:
        return url
    return f"{url}?{urlencode(pairs)}"


def raise_if_not_ok(res: MockResponse) -> None:
    if res.ok:
        return
    text = res.text() or f"Error: {res.status}"
    raise ApiError(res.status, f"{res.status}: {text}", res.json())


def should_retry(failure_count: int, error: Exception, *, max_retries: int = DEFAULT_QUERY_MAX_RETRIES) -> bool:
    """Retry policy: never on 401/403/404, otherwise while ``failure_count`` < ``max_retries``."""
    if isinstance(error, ApiError) and error.status in NON_RETRYABLE_STATUSES:
        return False
    return failure_count < max_retries


class QueryClient:
    def __init__(
        self,
        dispatcher: MockApiDispatcher,
        *,
        stale_seconds: float = DEFAULT_QUERY_STALE_SECONDS,
        max_retries: int = DEFAULT_QUERY_MAX_RETRIES,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._dispatcher = dispatcher
        self._stale_seconds = float(stale_seconds)
        self._max_retries = int(max_retries)
        self._clock = clock or time.monotonic
        self._cache: dict[tuple[str, tuple], _CacheEntry] = {}

    @staticmethod
    def _key(url: str, params: Params) -> tuple[str, tuple]:
        items = tuple(sorted((k, _param_value(v)) for k, v in (params or {}).items() if v is not None))
        return url, items

    def fetch(self, url: str, params: Params = None) -> Any:
        """One GET through the dispatcher, no cache and no retry."""
        res = self._dispatcher.dispatch("GET", build_url(url, params))
        raise_if_not_ok(res)
        return res.json()

    def query(self, url: str, params: Params = None) -> Any:
        key = self._key(url, params)
        entry = self._cache.get(key)
        now = self._clock()
        if entry and now - entry.fetched_at < self._stale_seconds:
            return entry.data

        failure_count = 0
        while True:
            try:
                data = self.fetch(url, params)
                break
            except ApiError as e:
                if not should_retry(failure_count, e, max_retries=self._max_retries):
                    raise
                failure_count += 1

        self._cache[key] = _CacheEntry(data=data, fetched_at=self._clock())
        return data

    def invalidate(self, prefix: Optional[str] = None) -> None:
        """Drop cached results whose URL starts with ``prefix`` (everything when omitted)."""
        if prefix is None:
            self._cache.clear()
            return
        for key in [k for k in self._cache if k[0].startswith(prefix)]:
            del self._cache[key]

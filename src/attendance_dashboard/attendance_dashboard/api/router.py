from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from werkzeug.datastructures import MultiDict
from werkzeug.exceptions import HTTPException
from werkzeug.routing import Map, Rule

from .response import HandlerResult

T = TypeVar("T")


@dataclass(frozen=True)
class ApiRequest:
    method: str
    path: str
    args: MultiDict = field(default_factory=MultiDict)
    view_args: dict = field(default_factory=dict)
    body: Any = None

    def typed_arg(self, name: str, parse: Callable[[str], T]) -> tuple[Optional[T], bool]:
        """Parse an optional query arg.

        Returns ``(value, malformed)``; a missing or blank arg is ``(None, False)``.
        """
        raw = self.args.get(name)
        if not raw:
            return None, False
        try:
            return parse(raw), False
        except ValueError:
            return None, True


Handler = Callable[[ApiRequest], HandlerResult]


class Router:
    """Route table of (method, rule, handler) entries.

    Rules use werkzeug syntax (``/api/classes/course/<course_id>``). Matching is
    by specificity, not registration order, so a static path such as
    ``/api/classes/today`` is never shadowed by a more generic rule.
    """

    def __init__(self):
        self._map = Map(strict_slashes=False)
        self._handlers: dict[str, Handler] = {}

    def route(self, method: str, rule: str) -> Callable[[Handler], Handler]:
        method = method.upper()

        def decorator(handler: Handler) -> Handler:
            endpoint = f"{method} {rule}"
            if endpoint in self._handlers:
                raise ValueError(f"Route already registered: {endpoint}")
            self._map.add(Rule(rule, endpoint=endpoint, methods=[method]))
            self._handlers[endpoint] = handler
            return handler

        return decorator

    def match(self, method: str, path: str) -> Optional[tuple[Handler, dict]]:
        adapter = self._map.bind("localhost")
        try:
            endpoint, view_args = adapter.match(path, method=method.upper())
        except HTTPException:
            # NotFound, MethodNotAllowed and slash redirects all count as "no route"
            return None
        return self._handlers[endpoint], view_args

    def rules(self) -> list[tuple[str, str]]:
        return sorted((r.rule, ",".join(sorted(r.methods - {"HEAD", "OPTIONS"}))) for r in self._map.iter_rules())

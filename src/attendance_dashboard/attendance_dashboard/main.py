from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.dispatcher import MockApiDispatcher
from .api.query_client import QueryClient
from .api.router import Router
from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .campus.controller import register as register_campus
from .classes.controller import register as register_classes
from .courses.controller import register as register_courses
from .dashboard.controller import register as register_dashboard
from .enrollments.controller import register as register_enrollments
from .users.controller import register as register_users
from .web.controller import register as register_web


def build_api(container: Container) -> MockApiDispatcher:
    """Register every resource handler and return the dispatcher over them."""
    router = Router()

    register_users(router, container)
    register_courses(router, container)
    register_classes(router, container)
    register_enrollments(router, container)
    register_attendance(router, container)
    register_dashboard(router, container)
    register_campus(router, container)

    return MockApiDispatcher(router, container.store, debug=container.debug)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["ENABLE_RESET_ENDPOINT"] = bool(getattr(settings, "ENABLE_RESET_ENDPOINT", False))

    container = build_container(
        random_seed=getattr(settings, "MOCK_RANDOM_SEED", None),
        dashboard_department=getattr(settings, "DASHBOARD_DEPARTMENT", "MCA"),
        debug=app.config["DEBUG"],
    )
    dispatcher = build_api(container)
    query_client = QueryClient(
        dispatcher,
        stale_seconds=float(getattr(settings, "QUERY_STALE_SECONDS", 300)),
        max_retries=int(getattr(settings, "QUERY_MAX_RETRIES", 2)),
    )
    app.extensions["attendance_dashboard"] = {
        "container": container,
        "dispatcher": dispatcher,
        "query_client": query_client,
    }

    if app.config["DEBUG"]:
        print(
            "[attendance-dashboard] settings=", settings_module,
            " users=", len(container.store.users),
            " attendance=", len(container.store.attendance),
        )

    register_web(app, container, dispatcher)

    return app

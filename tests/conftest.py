from __future__ import annotations

import pytest

from src.attendance_dashboard.attendance_dashboard.container import build_container
from src.attendance_dashboard.attendance_dashboard.main import build_api, create_app


@pytest.fixture
def container():
    return build_container(random_seed=1234)


@pytest.fixture
def api(container):
    return build_api(container)


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()

from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.main import create_app


@pytest.fixture
def container():
    return build_container(latency_ms=(0, 0))


@pytest.fixture
def store(container):
    return container.store


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()

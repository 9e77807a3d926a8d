from __future__ import annotations

import pytest

from employee_api.container import build_container_for
from employee_api.main import create_app

from tests.fakes import InMemoryEmployees


@pytest.fixture
def repo():
    return InMemoryEmployees()


@pytest.fixture
def app(monkeypatch, repo):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=build_container_for(repo))


@pytest.fixture
def client(app):
    return app.test_client()

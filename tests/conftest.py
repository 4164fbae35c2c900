from __future__ import annotations

import pytest

from attendx.main import create_app
from tests.fakes import in_memory_container, unconfigured_container


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")


@pytest.fixture
def static_dir(tmp_path):
    return tmp_path / "dist"


@pytest.fixture
def container():
    return in_memory_container()


@pytest.fixture
def client(container, static_dir):
    app = create_app(container, static_dir=str(static_dir))
    return app.test_client()


@pytest.fixture
def offline_client(static_dir):
    app = create_app(unconfigured_container(), static_dir=str(static_dir))
    return app.test_client()

"""Shared pytest fixtures for the item API test suites."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from itemapi.core.config import Settings
from itemapi.main import create_app


def make_settings(tmp_path: Path, **overrides) -> Settings:
    """Build settings for tests without reading the process .env file."""
    values = {
        "node_env": "test",
        "port": 3000,
        "database_url": "sqlite://",
        "jwt_secret": "test-secret",
        "upload_path": str(tmp_path / "uploads"),
        "log_level": "warning",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings for a non-production app on an in-memory database."""
    return make_settings(tmp_path)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh application with its own database and rate limiter."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Provide an API test client with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_factory(tmp_path: Path) -> Callable[..., FastAPI]:
    """Build applications with overridden settings."""

    def _build(**overrides) -> FastAPI:
        return create_app(make_settings(tmp_path, **overrides))

    return _build


@pytest.fixture
def production_client(
    app_factory: Callable[..., FastAPI],
) -> Generator[TestClient, None, None]:
    """Provide a test client for an app running in production mode."""
    with TestClient(app_factory(node_env="production")) as test_client:
        yield test_client

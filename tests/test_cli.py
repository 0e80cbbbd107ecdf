"""
Tests for the server entry point.

uvicorn.run is patched; no socket is ever opened.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import FastAPI

from itemapi.__main__ import main


@pytest.fixture
def server_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("JWT_SECRET", "s3cret")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return monkeypatch


class TestMain:
    """Tests for main()."""

    def test_missing_configuration_exits_with_1(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("NODE_ENV", "PORT", "DATABASE_URL", "MONGODB_URI", "JWT_SECRET"):
            monkeypatch.delenv(name, raising=False)
        with patch("uvicorn.run") as run:
            assert main([]) == 1
        run.assert_not_called()

    def test_unusable_database_url_exits_with_1(self, server_env: pytest.MonkeyPatch) -> None:
        server_env.setenv("DATABASE_URL", "not a url")
        with patch("uvicorn.run") as run:
            assert main([]) == 1
        run.assert_not_called()

    def test_runs_server_from_settings(self, server_env: pytest.MonkeyPatch) -> None:
        with patch("uvicorn.run") as run:
            assert main([]) == 0
        app = run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["log_level"] == "warning"
        assert run.call_args.kwargs["server_header"] is False

    def test_command_line_overrides_bind_address(self, server_env: pytest.MonkeyPatch) -> None:
        with patch("uvicorn.run") as run:
            assert main(["--host", "0.0.0.0", "--port", "9000"]) == 0
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9000

    def test_exit_codes_are_documented(self) -> None:
        assert "0 after a graceful shutdown" in main.__doc__
        assert "1 when" in main.__doc__

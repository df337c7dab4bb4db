"""
Tests for environment configuration and the server entry point.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from src.app_shell import server
from src.app_shell.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    ConfigError,
    Settings,
    get_settings,
    parse_log_level,
    parse_port,
)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self) -> None:
        """An empty environment yields the defaults."""
        settings = Settings(environ={})

        assert settings.port == DEFAULT_PORT == 8080
        assert settings.host == DEFAULT_HOST
        assert settings.log_level == "INFO"

    def test_reads_environment(self) -> None:
        settings = Settings(environ={"PORT": "9000", "HOST": "127.0.0.1", "LOG_LEVEL": "debug"})

        assert settings.port == 9000
        assert settings.host == "127.0.0.1"
        assert settings.log_level == "DEBUG"

    def test_empty_port_uses_default(self) -> None:
        """An empty PORT counts as unset."""
        assert Settings(environ={"PORT": ""}).port == 8080

    def test_get_settings_uses_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "5050")

        assert get_settings().port == 5050

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestParsing:
    @pytest.mark.parametrize("raw", ["abc", "80.5", "0", "65536", "-1"])
    def test_bad_port(self, raw: str) -> None:
        with pytest.raises(ConfigError):
            parse_port(raw)

    def test_good_port(self) -> None:
        assert parse_port("65535") == 65535

    def test_bad_log_level(self) -> None:
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            parse_log_level("chatty")

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


class TestServerMain:
    def test_runs_uvicorn_with_env_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8181")
        monkeypatch.delenv("HOST", raising=False)

        with patch.object(server.uvicorn, "run") as run:
            server.main([])

        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 8181
        assert run.call_args.kwargs["host"] == DEFAULT_HOST

    def test_cli_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8181")

        with patch.object(server.uvicorn, "run") as run:
            server.main(["--port", "9191", "--host", "127.0.0.1"])

        assert run.call_args.kwargs["port"] == 9191
        assert run.call_args.kwargs["host"] == "127.0.0.1"

    def test_invalid_port_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")

        with patch.object(server.uvicorn, "run") as run, pytest.raises(SystemExit) as exc:
            server.main([])

        assert exc.value.code == 1
        run.assert_not_called()

    def test_logs_under_module_name(self) -> None:
        assert server.logger.name == "src.app_shell.server"

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_line import cli as cli_module
from lib_log_line import config as log_config
from lib_log_line.domain.levels import LogLevel


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in parent directories."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=debug\n")
    monkeypatch.chdir(nested)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert log_config.dotenv_loaded() == env_file.resolve()
    assert os.environ["LOG_LEVEL"] == "debug"
    assert log_config.load_settings(level="error").level is LogLevel.DEBUG

    os.environ.pop("LOG_LEVEL", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("LOG_TAB_SIZE=8\n")
    monkeypatch.setenv("LOG_TAB_SIZE", "3")
    monkeypatch.chdir(tmp_path)

    result = log_config.enable_dotenv()

    assert result is not None
    assert os.environ["LOG_TAB_SIZE"] == "3"


def test_enable_dotenv_without_file_returns_none(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(log_config, "find_dotenv", lambda usecwd: "")
    assert log_config.enable_dotenv() is None
    assert log_config.dotenv_loaded() is None


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


def test_load_settings_defaults() -> None:
    settings = log_config.load_settings()
    assert settings == log_config.LoggerSettings()


def test_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LOG_LEVEL", "7")
    monkeypatch.setenv("LOG_LEVEL_PREFIX", "true")
    monkeypatch.setenv("LOG_TIME_PREFIX", "elapsed")
    monkeypatch.setenv("LOG_TAB_SIZE", "4")
    monkeypatch.setenv("LOG_COLORIZE", "on")
    monkeypatch.setenv("LOG_KEEP_LINES", "1")
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "env.log"))

    settings = log_config.load_settings(level="error", time_prefix="utc", tab_size=2)

    assert settings.level is LogLevel.INFO
    assert settings.level_prefix is True
    assert settings.time_prefix == "elapsed"
    assert settings.tab_size == 4
    assert settings.colorize is True
    assert settings.keep_lines is True
    assert settings.log_file == tmp_path / "env.log"


@pytest.mark.parametrize(
    "name, value",
    [("LOG_LEVEL", "loud"), ("LOG_TIME_PREFIX", "iso"), ("LOG_TAB_SIZE", "wide"), ("LOG_COLORIZE", "maybe")],
)
def test_invalid_environment_values_keep_arguments(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    settings = log_config.load_settings(level="warn", time_prefix="local", tab_size=3, colorize=True)
    assert settings.level is LogLevel.WARN
    assert settings.time_prefix == "local"
    assert settings.tab_size == 3
    assert settings.colorize is True


def test_no_color_forces_colour_off(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_COLORIZE", "1")
    monkeypatch.setenv("LOG_NO_COLOR", "1")
    assert log_config.load_settings().colorize is False


def test_time_prefix_can_be_disabled_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_TIME_PREFIX", "false")
    assert log_config.load_settings(time_prefix="utc").time_prefix is False


def test_invalid_tab_size_argument_falls_back() -> None:
    assert log_config.load_settings(tab_size=0).tab_size == 2

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_to import cli as cli_module
from lib_log_to import config as log_config
from lib_log_to.domain import FormatOptions, LogLevel


@pytest.fixture(autouse=True)
def _reset_dotenv_state():
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into the environment."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_TO_OPTIONS=level,single-line\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_TO_OPTIONS", raising=False)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOG_TO_OPTIONS"] == "level,single-line"
    assert log_config.options_from_env() == FormatOptions.LEVEL | FormatOptions.SINGLE_LINE

    os.environ.pop("LOG_TO_OPTIONS", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("LOG_TO_LEVEL=error\n")
    monkeypatch.setenv("LOG_TO_LEVEL", "warning")

    result = log_config.enable_dotenv(tmp_path)

    assert result is not None
    assert log_config.level_from_env() is LogLevel.WARNING


def test_enable_dotenv_runs_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    first.mkdir()
    monkeypatch.delenv("LOG_TO_LEVEL", raising=False)

    first_result = log_config.enable_dotenv(first)

    (first / ".env").write_text("LOG_TO_LEVEL=error\n")

    assert log_config.enable_dotenv(first) == first_result

    assert "LOG_TO_LEVEL" not in os.environ


def test_env_accessors_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(log_config.OPTIONS_ENV_VAR, raising=False)
    monkeypatch.setenv(log_config.LEVEL_ENV_VAR, "  ")

    assert log_config.options_from_env(FormatOptions.ID) == FormatOptions.ID
    assert log_config.level_from_env(LogLevel.ERROR) is LogLevel.ERROR


def test_env_level_rejects_unknown_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(log_config.LEVEL_ENV_VAR, "loud")

    with pytest.raises(ValueError, match="Unknown log level"):
        log_config.level_from_env()


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
    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []

    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_env_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(log_config.OPTIONS_ENV_VAR, raw)
    monkeypatch.setenv(log_config.LEVEL_ENV_VAR, raw)

    assert log_config.options_from_env() == FormatOptions.DEFAULT
    assert log_config.level_from_env() is LogLevel.DEBUG


def test_enable_dotenv_uses_cwd_when_no_start_given(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("LOG_TO_LEVEL=critical\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_TO_LEVEL", raising=False)

    assert log_config.enable_dotenv() == (tmp_path / ".env").resolve()
    assert log_config.level_from_env() is LogLevel.CRITICAL

    os.environ.pop("LOG_TO_LEVEL", None)

"""Tests for environment settings and logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from version_range.config.logging import configure_logging
from version_range.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's `.env` and shell variables out of the settings under test.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("VERSION_RANGE_STRICT_SEPARATOR", raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.strict_separator is True


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("VERSION_RANGE_STRICT_SEPARATOR", "false")

    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.strict_separator is False


def test_reads_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("VERSION_RANGE_STRICT_SEPARATOR=0\n", encoding="utf-8")

    assert load_settings().strict_separator is False


def test_invalid_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]
    root.handlers = []
    try:
        configure_logging("warning")
        assert root.level == logging.WARNING
    finally:
        root.handlers = previous_handlers
        root.setLevel(previous_level)

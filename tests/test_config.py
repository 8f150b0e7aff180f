"""Tests for environment settings loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's local `.env` out of the way.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("PERSON_INPUT", raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.log_level == "INFO"
    assert settings.person_input == "Mark,20"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("PERSON_INPUT", "John,32")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.person_input == "John,32"


def test_env_file_is_read(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("PERSON_INPUT=Ann,7\n", encoding="utf-8")
    assert Settings().person_input == "Ann,7"


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()

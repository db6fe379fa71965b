"""Tests for numutil.config."""

import pytest

from numutil.config import DEFAULT_FACTORIAL_LIMIT, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NUMUTIL_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NUMUTIL_FACTORIAL_LIMIT", raising=False)
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.factorial_limit == DEFAULT_FACTORIAL_LIMIT


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMUTIL_LOG_LEVEL", "debug")
    monkeypatch.setenv("NUMUTIL_FACTORIAL_LIMIT", "20")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.factorial_limit == 20


def test_blank_limit_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMUTIL_FACTORIAL_LIMIT", "  ")
    assert load_settings().factorial_limit == DEFAULT_FACTORIAL_LIMIT


def test_invalid_limit_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMUTIL_FACTORIAL_LIMIT", "lots")
    with pytest.raises(ValueError, match="NUMUTIL_FACTORIAL_LIMIT"):
        load_settings()


def test_invalid_log_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMUTIL_LOG_LEVEL", "verbose")
    with pytest.raises(ValueError, match="NUMUTIL_LOG_LEVEL"):
        load_settings()


def test_blank_log_level_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMUTIL_LOG_LEVEL", "")
    assert load_settings().log_level == "WARNING"

from __future__ import annotations

from occkit.config import load_settings


def test_defaults():
    s = load_settings()
    assert s.allow_digit_roots is True
    assert s.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("OCC_ALLOW_DIGIT_ROOTS", "false")
    monkeypatch.setenv("OCC_LOG_LEVEL", " debug ")
    s = load_settings()
    assert s.allow_digit_roots is False
    assert s.log_level == "DEBUG"

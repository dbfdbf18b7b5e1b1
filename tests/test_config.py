"""Tests configuration — flag strict et logging."""
import logging

from style_engine import config
from style_engine.config import configure_logging, is_strict


def test_is_strict_explicit_wins(monkeypatch):
    monkeypatch.setattr(config, "STRICT_MODE", True)
    assert is_strict() is True
    assert is_strict(False) is False
    monkeypatch.setattr(config, "STRICT_MODE", False)
    assert is_strict() is False
    assert is_strict(True) is True


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    configure_logging("debug")
    configure_logging()
    assert calls[0] == {"level": "DEBUG", "format": config.LOG_FORMAT}
    assert calls[1]["level"] == config.LOG_LEVEL

import logging

import pytest

from skeme.config import Scoping, configure_logging, get_log_level, get_scoping
from skeme.types.environment import Environment


def test_scoping_from_environment(monkeypatch):
    monkeypatch.setenv("SKEME_SCOPING", "Lexical")
    assert get_scoping() is Scoping.LEXICAL
    assert Environment.root().scoping is Scoping.LEXICAL


def test_scoping_default(monkeypatch):
    monkeypatch.delenv("SKEME_SCOPING", raising=False)
    assert get_scoping() is Scoping.DYNAMIC
    monkeypatch.setenv("SKEME_SCOPING", "  ")
    assert get_scoping() is Scoping.DYNAMIC


def test_explicit_scoping_wins(monkeypatch):
    monkeypatch.setenv("SKEME_SCOPING", "lexical")
    assert get_scoping("dynamic") is Scoping.DYNAMIC
    assert get_scoping(Scoping.DYNAMIC) is Scoping.DYNAMIC
    assert Environment.root("DYNAMIC").scoping is Scoping.DYNAMIC


def test_unknown_scoping_is_rejected(monkeypatch):
    monkeypatch.setenv("SKEME_SCOPING", "sideways")
    with pytest.raises(ValueError, match="SKEME_SCOPING"):
        get_scoping()
    with pytest.raises(ValueError):
        get_scoping("sideways")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("error", logging.ERROR),
        ("", logging.WARNING),
        ("nonsense", logging.WARNING),
        ("basic_format", logging.WARNING),
    ],
)
def test_log_level_from_environment(monkeypatch, raw, expected):
    monkeypatch.setenv("SKEME_LOG_LEVEL", raw)
    assert get_log_level() == expected


def test_log_level_override():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level(logging.ERROR) == logging.ERROR


def test_configure_logging_applies_level(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("SKEME_LOG_LEVEL", "info")
    assert configure_logging() == logging.INFO
    assert root.level == logging.INFO
    # still applied when handlers are already installed
    assert configure_logging("debug") == logging.DEBUG
    assert root.level == logging.DEBUG


def test_evaluation_logs_at_debug(caplog):
    from skeme.interpreter import interpret
    from skeme.types.symbol import Symbol

    with caplog.at_level(logging.DEBUG, logger="skeme"):
        interpret([[Symbol("define"), Symbol("x"), 1]])
    messages = [r.getMessage() for r in caplog.records]
    assert "Interpreting 1 top-level node(s)" in messages
    assert "Defined x" in messages

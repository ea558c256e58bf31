import logging

from lrc2ass.logging_setup import _level


def test_level_from_flags(monkeypatch):
    monkeypatch.delenv("LRC2ASS_LOG_LEVEL", raising=False)
    assert _level(debug=False, quiet=False) == logging.INFO
    assert _level(debug=True, quiet=False) == logging.DEBUG
    assert _level(debug=False, quiet=True) == logging.WARNING


def test_env_overrides_flags(monkeypatch):
    monkeypatch.setenv("LRC2ASS_LOG_LEVEL", "error")
    assert _level(debug=True, quiet=False) == logging.ERROR


def test_unknown_env_level_is_ignored(monkeypatch):
    monkeypatch.setenv("LRC2ASS_LOG_LEVEL", "chatty")
    assert _level(debug=True, quiet=False) == logging.DEBUG

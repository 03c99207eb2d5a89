import sys

import pytest
from pydantic import ValidationError

from typedrills.config import DEFAULT_CHECKERS, KNOWN_CHECKERS, SNIPPETS_DIR, Settings


def test_defaults():
    settings = Settings()
    assert list(settings.checkers) == DEFAULT_CHECKERS
    assert settings.checkers["mypy"][0] == sys.executable
    assert settings.snippets_dir == SNIPPETS_DIR
    assert settings.timeout == 120.0


def test_default_commands_are_copies():
    settings = Settings()
    assert settings.checkers["mypy"] == KNOWN_CHECKERS["mypy"]
    assert settings.checkers["mypy"] is not KNOWN_CHECKERS["mypy"]

    settings.checkers["mypy"].append("--strict")
    assert "--strict" not in KNOWN_CHECKERS["mypy"]
    assert "--strict" not in Settings().checkers["mypy"]


def test_from_env_selects_checkers(monkeypatch):
    monkeypatch.setenv("TYPEDRILLS_CHECKERS", "mypy, ty")
    monkeypatch.setenv("TYPEDRILLS_TIMEOUT", "30")
    settings = Settings.from_env()
    assert settings.checkers == {"mypy": KNOWN_CHECKERS["mypy"], "ty": KNOWN_CHECKERS["ty"]}
    assert settings.timeout == 30.0


def test_from_env_rejects_unknown_checker(monkeypatch):
    monkeypatch.setenv("TYPEDRILLS_CHECKERS", "mypy,pyright")
    with pytest.raises(ValueError, match="pyright"):
        Settings.from_env()


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(timeout=0)

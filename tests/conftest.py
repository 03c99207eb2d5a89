import pytest

from typedrills.config import KNOWN_CHECKERS, Settings


@pytest.fixture
def mypy_settings(tmp_path):
    """Settings that run mypy only, with its cache kept out of the repo."""
    command = KNOWN_CHECKERS["mypy"] + [f"--cache-dir={tmp_path / '.mypy_cache'}"]
    return Settings(checkers={"mypy": command}, timeout=300)


@pytest.fixture(autouse=True)
def clean_checker_env(monkeypatch):
    monkeypatch.delenv("TYPEDRILLS_CHECKERS", raising=False)
    monkeypatch.delenv("TYPEDRILLS_TIMEOUT", raising=False)

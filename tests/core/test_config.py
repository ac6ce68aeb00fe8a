import pytest
from pydantic import ValidationError

from funclite.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = Settings.load()

    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT


def test_load_reads_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("LOG_FORMAT", "%(levelname)s %(message)s")

    settings = Settings.load()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(levelname)s %(message)s"


def test_rejects_unknown_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")

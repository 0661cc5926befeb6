import logging

import pytest

from syoj_py.config import Settings
from syoj_py.utils import make_logger


def test_defaults() -> None:
    settings = Settings.from_env()

    assert settings.base_url == "https://syoj.org"
    assert settings.timeout == 30.0
    assert settings.user_agent == "syojctl/1.0"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SYOJ_BASE_URL", "judge.example.com/")
    monkeypatch.setenv("SYOJ_TIMEOUT", "2.5")

    settings = Settings.from_env()

    assert settings.base_url == "https://judge.example.com"
    assert settings.timeout == 2.5


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout(monkeypatch, value) -> None:
    monkeypatch.setenv("SYOJ_TIMEOUT", value)

    with pytest.raises(ValueError):
        Settings.from_env()


def test_make_logger_replaces_handlers() -> None:
    first = make_logger(verbose=True)
    second = make_logger(verbose=False)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
    assert not second.propagate

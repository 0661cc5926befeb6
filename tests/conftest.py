import json

import pytest
import requests

from syoj_py.config import CredentialStore


def _make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def store(tmp_path):
    return CredentialStore(config_home=tmp_path / "home", config_dirs=[tmp_path / "etc"])


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("SYOJ_USERNAME", "SYOJ_PASSWORD", "SYOJ_BASE_URL", "SYOJ_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "xdg-dirs"))


@pytest.fixture
def make_response():
    return _make_response

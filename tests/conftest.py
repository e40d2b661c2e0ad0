import pathlib

import pytest

from zang_api.common.config import Configuration
from zang_api.common.http_client import HttpProvider
from tests.helpers.fakes import DummySession


# ----------------------------
#  Auto-mark tests by folder
# ----------------------------

def pytest_collection_modifyitems(config, items):
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        if "/tests/unit/" in p:
            item.add_marker(pytest.mark.unit)
        elif "/tests/component/" in p:
            item.add_marker(pytest.mark.component)


# ----------------------------
#  ENV setup: never use real credentials
# ----------------------------

@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    for var in (
        "ZANG_ACCOUNT_SID",
        "ZANG_AUTH_TOKEN",
        "ZANG_BASE_URL",
        "ZANG_TIMEOUT_S",
        "ZANG_LOG_LEVEL",
        "ZANG_TIMING_SLOW_THRESHOLD_MS",
        "ZANG_TIMING_LOG_ALL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture()
def config():
    return Configuration(
        account_sid="AC123456789",
        auth_token="token",
        base_url="https://api.example.test/v2/",
        timeout_s=5,
    )


@pytest.fixture()
def provider(config):
    return HttpProvider(config)


@pytest.fixture()
def fake_session(monkeypatch, provider):
    """Installs a DummySession into the provider; tests queue responses on it."""
    sess = DummySession()
    monkeypatch.setattr(provider, "get_http_client", lambda: sess)
    return sess

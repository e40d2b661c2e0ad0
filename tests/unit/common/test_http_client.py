from zang_api.common.config import Configuration
from zang_api.common.http_client import HttpProvider


def test_get_http_client_is_lazy_and_cached():
    p = HttpProvider(Configuration(account_sid="AC1", auth_token="tok"))
    assert p._session is None

    s1 = p.get_http_client()
    s2 = p.get_http_client()

    assert s1 is s2


def test_session_carries_basic_auth_from_configuration():
    p = HttpProvider(Configuration(account_sid="AC1", auth_token="tok"))
    s = p.get_http_client()

    assert s.auth == ("AC1", "tok")
    assert s.headers["Accept"] == "application/json"


def test_get_configuration_returns_same_object():
    cfg = Configuration(account_sid="AC1")
    assert HttpProvider(cfg).get_configuration() is cfg


def test_close_drops_session():
    with HttpProvider(Configuration(account_sid="AC1", auth_token="tok")) as p:
        s1 = p.get_http_client()
    assert p._session is None
    assert p.get_http_client() is not s1

import zang_api.common.config as config_mod
from zang_api.common.config import Configuration
from zang_api.connectors.accounts import AccountsConnector
from zang_api.connectors.factory import ConnectorFactory
from zang_api.connectors.sms import SmsConnector


def test_connectors_are_cached_and_share_provider():
    f = ConnectorFactory(Configuration(account_sid="AC1", auth_token="t"))

    assert isinstance(f.accounts, AccountsConnector)
    assert isinstance(f.sms, SmsConnector)
    assert f.accounts is f.accounts
    assert f.sms is f.sms
    assert f.accounts.http_provider is f.sms.http_provider is f.http_provider


def test_from_env(monkeypatch):
    monkeypatch.setattr(config_mod, "load_dotenv", lambda *a, **k: False)
    monkeypatch.setenv("ZANG_ACCOUNT_SID", "AC-env")
    monkeypatch.setenv("ZANG_AUTH_TOKEN", "tok")

    f = ConnectorFactory.from_env()

    assert f.configuration.account_sid == "AC-env"
    assert f.sms.http_provider.get_configuration().auth_token == "tok"


def test_context_manager_closes_session():
    with ConnectorFactory(Configuration(account_sid="AC1", auth_token="t")) as f:
        f.http_provider.get_http_client()
    assert f.http_provider._session is None

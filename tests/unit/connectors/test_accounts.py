import pytest

from tests.helpers.fakes import DummyResp
from zang_api.common.errors import ZangApiError
from zang_api.connectors.accounts import AccountsConnector


BASE = "https://api.example.test/v2/"


def test_view_account_uses_configured_sid(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789", "friendly_name": "Main"}))

    a = AccountsConnector(provider).view_account()

    assert a.friendly_name == "Main"
    assert fake_session.calls[0]["method"] == "GET"
    assert fake_session.calls[0]["url"] == BASE + "Accounts/AC123456789.json"


def test_view_account_implicit_equals_explicit(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789"}))
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789"}))
    c = AccountsConnector(provider)

    implicit = c.view_account()
    explicit = c.view_account("AC123456789")

    assert implicit == explicit
    assert fake_session.calls[0] == fake_session.calls[1]


def test_view_account_explicit_sid(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC-other"}))
    AccountsConnector(provider).view_account("AC-other")
    assert fake_session.calls[0]["url"] == BASE + "Accounts/AC-other.json"


def test_update_account_sends_friendly_name(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789", "friendly_name": "New"}))

    a = AccountsConnector(provider).update_account("New")

    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == BASE + "Accounts/AC123456789.json"
    assert call["data"] == {"FriendlyName": "New"}
    assert a.friendly_name == "New"


def test_update_account_without_friendly_name_omits_it(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789"}))

    AccountsConnector(provider).update_account(account_sid="AC123456789")

    assert fake_session.calls[0]["data"] is None


def test_view_account_error(provider, fake_session):
    fake_session.queue(
        DummyResp(status_code=404, json_payload={"code": 20404, "message": "Account not found", "status": 404})
    )

    with pytest.raises(ZangApiError) as e:
        AccountsConnector(provider).view_account("AC-missing")

    assert e.value.status == 404
    assert e.value.code == 20404
    assert e.value.message == "Account not found"


def test_update_account_with_empty_friendly_name_omits_it(provider, fake_session):
    fake_session.queue(DummyResp(json_payload={"sid": "AC123456789"}))

    AccountsConnector(provider).update_account("")

    assert fake_session.calls[0]["method"] == "POST"
    assert fake_session.calls[0]["data"] is None

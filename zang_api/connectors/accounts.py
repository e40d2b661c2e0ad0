from __future__ import annotations

from ..common.logging import logger
from ..common.logging_utils import mask_sid
from ..domain.enums import HttpMethod
from ..domain.models import Account
from .base import Connector


class AccountsConnector(Connector):
    """Accounts endpoint: view and update the account itself."""

    component = "accounts"

    def view_account(self, account_sid: str | None = None) -> Account:
        """All information associated with an account.

        ``account_sid`` defaults to the configured one.
        """
        sid = self._account_sid(account_sid)
        request = self._request(HttpMethod.GET, f"Accounts/{sid}.json")
        return self._execute(request, Account)

    def update_account(
        self,
        friendly_name: str | None = None,
        *,
        account_sid: str | None = None,
    ) -> Account:
        """Update account information (currently only the friendly name)."""
        sid = self._account_sid(account_sid)
        request = self._request(HttpMethod.POST, f"Accounts/{sid}.json")

        if friendly_name:
            request.add_parameter("FriendlyName", friendly_name)

        account = self._execute(request, Account)
        logger.info({"msg": "Account updated", "sid": mask_sid(account.sid)})
        return account

"""zang_api.common.config

Configuration is never global: every ``HttpProvider`` (and so every connector)
gets an explicit ``Configuration`` instance.

Values can be given directly or read from the environment (with optional
``.env`` file support) via ``Configuration.from_env()``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv


DEFAULT_BASE_URL = "https://api.zang.io/v2/"
DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class Configuration:
    """
    Credentials and endpoint of the REST API.

    Shared read-only by all connectors created from it.
    """

    account_sid: str = ""
    auth_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    # requests has no default timeout
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(
        cls,
        *,
        account_sid: str | None = None,
        auth_token: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
    ) -> "Configuration":
        # .env is optional; existing env vars win
        load_dotenv(find_dotenv(usecwd=True))

        if timeout_s is None:
            timeout_raw = os.getenv("ZANG_TIMEOUT_S", "").strip()
            timeout_s = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_S

        return cls(
            account_sid=(account_sid or os.getenv("ZANG_ACCOUNT_SID", "")).strip(),
            auth_token=(auth_token or os.getenv("ZANG_AUTH_TOKEN", "")).strip(),
            base_url=(base_url or os.getenv("ZANG_BASE_URL", "") or DEFAULT_BASE_URL).strip(),
            timeout_s=timeout_s,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.account_sid and self.auth_token)

# zang_api/common/http_client.py
from __future__ import annotations

import requests

from .config import Configuration


class HttpProvider:
    """
    Owns the HTTP session used by connectors.

    The session is created lazily on first use and carries basic auth built
    from the configuration, so every request sent through it is authenticated.
    """

    def __init__(self, configuration: Configuration) -> None:
        self._configuration = configuration
        self._session: requests.Session | None = None

    def get_configuration(self) -> Configuration:
        return self._configuration

    def get_http_client(self) -> requests.Session:
        if self._session is not None:
            return self._session

        s = requests.Session()
        cfg = self._configuration
        s.auth = (cfg.account_sid, cfg.auth_token)
        s.headers.update({"Accept": "application/json"})

        self._session = s
        return s

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HttpProvider":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

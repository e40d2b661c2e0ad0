from __future__ import annotations

from typing import Dict, Type, TypeVar

from ..common.config import Configuration
from ..common.http_client import HttpProvider
from .accounts import AccountsConnector
from .base import Connector
from .sms import SmsConnector


C = TypeVar("C", bound=Connector)


class ConnectorFactory:
    """
    Creates connectors bound to one configuration.

    All connectors share a single HttpProvider (and so one HTTP session).
    Instances are cached per factory.
    """

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.http_provider = HttpProvider(configuration)
        self._connectors: Dict[Type[Connector], Connector] = {}

    @classmethod
    def from_env(cls, **overrides) -> "ConnectorFactory":
        return cls(Configuration.from_env(**overrides))

    def _get_connector(self, connector_cls: Type[C]) -> C:
        if connector_cls not in self._connectors:
            self._connectors[connector_cls] = connector_cls(self.http_provider)
        return self._connectors[connector_cls]  # type: ignore[return-value]

    @property
    def accounts(self) -> AccountsConnector:
        return self._get_connector(AccountsConnector)

    @property
    def sms(self) -> SmsConnector:
        return self._get_connector(SmsConnector)

    def close(self) -> None:
        self.http_provider.close()

    def __enter__(self) -> "ConnectorFactory":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

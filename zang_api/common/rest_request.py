from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .config import Configuration
from ..domain.enums import HttpMethod


@dataclass
class RestRequest:
    """A single REST call: verb, absolute URL, auth and parameters.

    ``params`` go to the query string, ``data`` to the form-encoded body.
    """

    method: HttpMethod
    url: str
    auth: Tuple[str, str] | None = None
    params: Dict[str, str] = field(default_factory=dict)
    data: Dict[str, str] = field(default_factory=dict)

    def add_parameter(self, name: str, value: Any) -> "RestRequest":
        # GET has no body, so parameters end up in the query string
        target = self.params if self.method == HttpMethod.GET else self.data
        target[name] = _to_wire(value)
        return self

    def add_query_parameter(self, name: str, value: Any) -> "RestRequest":
        self.params[name] = _to_wire(value)
        return self


def _to_wire(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, HttpMethod):
        return value.value
    return str(value)


def build_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def create_rest_request(configuration: Configuration, method: HttpMethod, path: str) -> RestRequest:
    """Request for ``path`` (relative to the configured base URL), with basic auth attached."""
    auth = None
    if configuration.account_sid or configuration.auth_token:
        auth = (configuration.account_sid, configuration.auth_token)

    return RestRequest(
        method=method,
        url=build_url(configuration.base_url, path),
        auth=auth,
    )

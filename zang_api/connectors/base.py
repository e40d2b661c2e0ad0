from __future__ import annotations

import re
from typing import Any, Protocol, Type, TypeVar

import requests

from ..common.errors import ZangApiError, ZangTransportError, ZangValidationError
from ..common.http_client import HttpProvider
from ..common.logging import logger
from ..common.logging_utils import mask_sid
from ..common.rest_request import RestRequest, create_rest_request
from ..common.timing import timed
from ..domain.enums import HttpMethod


class _FromDict(Protocol):
    @classmethod
    def from_dict(cls, d: dict) -> Any: ...


T = TypeVar("T", bound=_FromDict)


def return_or_raise(resp: requests.Response, model: Type[T]) -> T:
    """Decode a response into ``model`` or raise the matching error.

    Raises:
        ZangApiError: on non-2xx responses.
        ZangTransportError: when a 2xx body is not valid JSON.
    """
    # resp.ok is true for unfollowed 3xx too
    success = 200 <= resp.status_code < 300

    try:
        payload = resp.json() if resp.content else {}
    except ValueError as e:
        if success:
            raise ZangTransportError(
                f"Could not decode response body (HTTP {resp.status_code})"
            ) from e
        payload = None

    if not success:
        raise ZangApiError.from_payload(resp.status_code, payload, fallback_text=resp.text)

    if not isinstance(payload, dict):
        raise ZangTransportError(f"Unexpected response body type: {type(payload).__name__}")

    return model.from_dict(payload)


_ACCOUNT_SEGMENT = re.compile(r"(/Accounts/)([^/?#]+?)(?=\.json|/|\?|#|$)")


def mask_url(url: str) -> str:
    """Masks the sid in ``.../Accounts/<sid>...``, whichever sid the request used."""
    return _ACCOUNT_SEGMENT.sub(lambda m: m.group(1) + mask_sid(m.group(2)), url)


def require(name: str, value: Any) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ZangValidationError(name)


class Connector:
    """Shared plumbing for resource connectors: sid defaulting, request building, execution."""

    component = "connector"

    def __init__(self, http_provider: HttpProvider) -> None:
        self.http_provider = http_provider

    def _account_sid(self, account_sid: str | None) -> str:
        sid = (account_sid or "").strip() or self.http_provider.get_configuration().account_sid
        require("AccountSid", sid)
        return sid

    def _request(self, method: HttpMethod, path: str) -> RestRequest:
        return create_rest_request(self.http_provider.get_configuration(), method, path)

    def _execute(self, request: RestRequest, model: Type[T]) -> T:
        session = self.http_provider.get_http_client()
        cfg = self.http_provider.get_configuration()

        log_ctx = {
            "method": request.method.value,
            "url": mask_url(request.url),
        }

        with timed("http_request", logger=logger, component=self.component, extra=log_ctx):
            try:
                resp = session.request(
                    request.method.value,
                    request.url,
                    params=request.params or None,
                    data=request.data or None,
                    auth=request.auth,
                    timeout=cfg.timeout_s,
                )
            except requests.RequestException as e:
                logger.error({**log_ctx, "msg": "Zang HTTP request failed", "error": str(e)})
                raise ZangTransportError(f"Zang HTTP request failed: {e}") from e

        try:
            return return_or_raise(resp, model)
        except ZangApiError as e:
            logger.error(
                {
                    **log_ctx,
                    "msg": "Zang API error",
                    "status": e.status,
                    "code": e.code,
                    "error": e.message,
                }
            )
            raise
        except ZangTransportError as e:
            logger.error(
                {
                    **log_ctx,
                    "msg": "Zang response not decodable",
                    "status": resp.status_code,
                    "error": str(e),
                }
            )
            raise

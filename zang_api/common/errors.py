from __future__ import annotations

from typing import Any


class ZangError(Exception):
    """Base class for everything raised by this package."""


class ZangValidationError(ZangError, ValueError):
    """A required parameter is missing or empty. Raised before any request is sent."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(message or f"Missing required parameter: {parameter}")


class ZangApiError(ZangError, RuntimeError):
    """Non-2xx response from the REST API."""

    def __init__(
        self,
        *,
        status: int,
        code: int | None = None,
        message: str | None = None,
        more_info: str | None = None,
        payload: dict[str, Any] | None = None,
    ) -> None:
        self.status = status
        self.code = code
        self.message = message
        self.more_info = more_info
        self.payload = payload or {}
        super().__init__(f"Zang API error {status} (code={code}): {message}")

    @classmethod
    def from_payload(cls, status: int, payload: Any, fallback_text: str = "") -> "ZangApiError":
        if not isinstance(payload, dict):
            return cls(status=status, message=fallback_text or None)

        code = payload.get("code")
        try:
            code = int(code) if code is not None else None
        except (TypeError, ValueError):
            pass

        return cls(
            status=status,
            code=code,
            message=payload.get("message") or fallback_text or None,
            more_info=payload.get("more_info"),
            payload=payload,
        )


class ZangTransportError(ZangError, RuntimeError):
    """Network failure, or a response body that could not be decoded."""

"""zang_api.common.logging

Structured logging for the package.

Call sites log plain dicts, e.g. ``logger.info({"msg": "sms sent", "sid": ...})``;
dicts are rendered as a single JSON line so log shippers can parse them.
The package never configures the root logger; applications that want output
without their own setup can call ``configure_logging()``.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

LOGGER_NAME = "zang-api"


def _render(msg: Any) -> Any:
    if isinstance(msg, dict):
        return json.dumps(msg, ensure_ascii=False, default=str)
    return msg


class StructuredLogger(logging.LoggerAdapter):
    """Adapter over a stdlib logger that accepts dict messages."""

    def process(self, msg, kwargs):
        return _render(msg), kwargs


def _env_level(default: str | None = None) -> str | None:
    """ZANG_LOG_LEVEL if it names a known level, else ``default``."""
    level = os.getenv("ZANG_LOG_LEVEL", "").strip().upper()
    if level and isinstance(logging.getLevelName(level), int):
        return level
    return default


def get_logger(name: str = LOGGER_NAME) -> StructuredLogger:
    base = logging.getLogger(name)
    level = _env_level()
    if level:
        base.setLevel(level)
    return StructuredLogger(base, {})


def configure_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the package logger (idempotent)."""
    base = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_zang_handler", False) for h in base.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        handler._zang_handler = True  # type: ignore[attr-defined]
        base.addHandler(handler)
    base.setLevel(level or _env_level("INFO"))


logger = get_logger()

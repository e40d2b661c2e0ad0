from __future__ import annotations

import os
import time
from contextlib import contextmanager
from typing import Any, Dict, Optional


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@contextmanager
def timed(
    name: str,
    *,
    logger,
    component: str,
    extra: Optional[Dict[str, Any]] = None,
):
    # read per call so tests / long-running apps can change it
    slow_threshold_ms = _env_int("ZANG_TIMING_SLOW_THRESHOLD_MS", 1000)
    log_all = os.getenv("ZANG_TIMING_LOG_ALL", "false").lower() == "true"

    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = int((time.perf_counter() - start) * 1000)
        payload: Dict[str, Any] = {
            "component": component,
            "timing": name,
            "duration_ms": duration_ms,
        }
        if extra:
            payload.update(extra)

        if duration_ms >= slow_threshold_ms:
            logger.warning(payload)
        elif log_all:
            logger.info(payload)

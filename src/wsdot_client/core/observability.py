from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Optional

LoggingMode = Literal["debug", "info", "none"]

RESERVED_LOG_KEYS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
}


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in RESERVED_LOG_KEYS}


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """
    Minimal structured logging helper.
    - Passes fields through the extra dict so formatters can include keys.
    - Drops reserved LogRecord attributes to avoid collisions.
    """
    log = logger or logging.getLogger("wsdot_client.observability")
    extra = {"event": event, **_clean_fields(fields)}
    log.log(level, event, extra=extra)


def is_enabled(log_mode: Optional[LoggingMode]) -> bool:
    return log_mode in ("info", "debug")


__all__ = ["LoggingMode", "log_event", "is_enabled"]

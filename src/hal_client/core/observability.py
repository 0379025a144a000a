from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict

# Attributes every LogRecord carries, plus the two Formatter fills in.
RESERVED_LOG_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
}


def _event_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    cleaned: Dict[str, Any] = {}
    for key, value in fields.items():
        if key in RESERVED_LOG_KEYS:
            continue
        cleaned[key] = value.value if isinstance(value, Enum) else value
    return cleaned


def log_event(
    event: str,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
    **fields: Any,
) -> None:
    """
    Emit *event* as the record message with *fields* attached as extras.

    Fields colliding with LogRecord attributes are dropped and enum values
    are flattened to their wire form. hal_client is a library, so events go
    out at DEBUG unless a level is given.
    """
    log = logger or logging.getLogger("hal_client")
    if not log.isEnabledFor(level):
        return
    log.log(level, event, extra={"event": event, **_event_fields(fields)})


__all__ = ["log_event", "RESERVED_LOG_KEYS"]

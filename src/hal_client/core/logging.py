import logging
from typing import Any, Iterable, Optional

from .observability import RESERVED_LOG_KEYS

# Preferred ordering for the extras hal_client emits; others follow sorted.
LOG_EXTRA_FIELDS = (
    "rel",
    "cardinality",
    "target",
    "model",
    "template",
    "count",
    "error_type",
)

_RECORD_INTERNALS = RESERVED_LOG_KEYS | {"event"}


class LogfmtFormatter(logging.Formatter):
    """
    logfmt-style formatter for log_event records.
    With *fields* set only those extras are rendered; otherwise every
    non-internal attribute on the record is.
    """

    def __init__(self, fields: Optional[Iterable[str]] = None):
        super().__init__()
        self.fields = tuple(fields) if fields is not None else None

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in self._extra_keys(record):
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    def _extra_keys(self, record: logging.LogRecord) -> list[str]:
        if self.fields is not None:
            return list(self.fields)
        present = [k for k in vars(record) if k not in _RECORD_INTERNALS]
        known = [k for k in LOG_EXTRA_FIELDS if k in present]
        return known + sorted(k for k in present if k not in LOG_EXTRA_FIELDS)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO", logger_name: Optional[str] = None) -> None:
    """
    Attach a logfmt handler to *logger_name* (root by default).
    Calling it again replaces the handler rather than stacking another.
    """

    target = logging.getLogger(logger_name)
    for h in list(target.handlers):
        target.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]

import logging
from typing import Any

from .urls import redact_url

# Request fields emitted by the fetch strategies, in output order.
LOG_EXTRA_FIELDS = (
    "strategy",
    "endpoint",
    "url",
    "status",
    "duration_ms",
    "bytes",
    "log_mode",
    "error_type",
)
# Fields that may carry an access code in their query string.
URL_FIELDS = frozenset({"endpoint", "url"})


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines for WSDOT request events.

    URL-bearing fields pass through redact_url, so a record built from an
    unredacted request URL never prints the access code.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            if key in URL_FIELDS:
                val = redact_url(str(val))
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[0] is not None:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if not s or " " in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(level: str = "INFO") -> None:
    """Install a single logfmt handler on the root logger."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS", "URL_FIELDS"]

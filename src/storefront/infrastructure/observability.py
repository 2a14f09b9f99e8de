"""Structured logging: JSON formatter and one-shot setup.

All records carry timestamp, level, logger name and message; the
order/customer identifiers and error codes that handlers attach via
``extra`` are surfaced when present.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("order_id", "customer_id", "error_code", "operation")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _StorefrontHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces rather than stacks handlers."""


def setup_logging(level: str = "WARNING", fmt: str = "text") -> None:
    """Configure root logging for the process."""
    handler = _StorefrontHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _StorefrontHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

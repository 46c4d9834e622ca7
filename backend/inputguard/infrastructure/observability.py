"""Structured Logging - one root handler, JSON or text, for the InputGuard shell.

Invariants:
    - Records carry timestamp, level, logger, message
    - Filter-call context (feature, argument, error_code, path) is copied from
      `extra=` only when set; raw input values are never logged
    - setup_logging is idempotent: a second call replaces its own handler
      instead of stacking another one

Design Decisions:
    - stdlib logging with a small JSON formatter, as the rest of the shell
      expects `extra=` dicts rather than a logger wrapper
"""

import logging
import json
from datetime import datetime, timezone


CONTEXT_FIELDS = ("feature", "argument", "error_code", "path")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "inputguard"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    return JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the InputGuard handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(build_formatter(fmt))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from . import config

__all__ = ["JsonFormatter", "configure_logging"]

_EXTRA_KEYS = ("product", "environment", "method", "endpoint", "status")


class JsonFormatter(logging.Formatter):
    """A minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        # Request context passed through ``extra=`` by the dispatcher
        for key in _EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        return json.dumps(payload, separators=(",", ":"))


def configure_logging(fmt: str | None = None, *, level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to the ``revolut`` logger.

    Args:
        fmt: 'json' or 'text'. Defaults to REVOLUT_LOG_FORMAT or 'text'.
        level: log level name. Defaults to REVOLUT_LOG_LEVEL or 'INFO'.

    The library never calls this itself; applications opt in.
    """

    fmt = (fmt or config.LOG_FORMAT).lower()
    logger = logging.getLogger("revolut")
    logger.setLevel((level or config.LOG_LEVEL).upper())

    # Re-configuring replaces the previous handler instead of stacking them
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
        )
    logger.addHandler(handler)
    return logger

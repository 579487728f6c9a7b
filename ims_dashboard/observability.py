"""
Structured logging - JSON formatter and setup.

All records carry timestamp, level, logger name and message. Extra fields
(client_id, username, resource, error_code, path) are surfaced when present.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("client_id", "username", "resource", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text"):
    """Configure the root logger once; repeated calls replace the handler."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_ims_dashboard", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._ims_dashboard = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

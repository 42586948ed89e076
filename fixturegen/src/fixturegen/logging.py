"""Structured logging for fixturegen.

Controlled via FIXTUREGEN_LOG_FORMAT env var: "text" (default) or "json".
Logs go to stderr; stdout is reserved for the fixture report.
"""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

LOG_FORMATS = ("text", "json")
EXTRA_PREFIX = "fixturegen_"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, carrying any fixturegen_* extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        entry.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key.startswith(EXTRA_PREFIX)
        )
        return json.dumps(entry, default=str)


def setup_logging(log_format: str, level: int = logging.INFO) -> None:
    """Route all logging to a single stderr handler in the chosen format."""
    if log_format not in LOG_FORMATS:
        raise ValueError(f"log_format must be one of {LOG_FORMATS}, got {log_format!r}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)
    root.addHandler(handler)

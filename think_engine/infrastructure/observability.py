"""Structured Logging - JSON and text formatters for the engine's log stream.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (session_id, tool_name, error_code, request_id, processing_time_ms)
      surfaced when present, in both formats
    - JSON format by default, human-readable with log_format=text

Design Decisions:
    - Formatters over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
    - Artifact renderings are multi-line; the text format keeps them as-is,
      JSON escapes them into a single line
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "session_id", "tool_name", "error_code", "request_id", "processing_time_ms",
)


def _extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in EXTRA_FIELDS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines with extras appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extras(record)
        if not extras:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in extras.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger for the application."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

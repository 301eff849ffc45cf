"""ISO 8601 timestamp helpers and JSONL log formatting."""

from __future__ import annotations

__all__ = ["ISO8601Formatter", "format_iso8601", "utc_now_iso"]

import json
import logging
from datetime import datetime, timezone


def format_iso8601(moment: datetime) -> str:
    """Render a datetime as YYYY-MM-DDTHH:MM:SS.sssZ in UTC."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return format_iso8601(datetime.now(timezone.utc))


class ISO8601Formatter(logging.Formatter):
    """Custom formatter with ISO 8601 timestamps (UTC) for JSONL output.

    Format: YYYY-MM-DDTHH:MM:SS.sssZ
    Example: 2026-10-18T10:48:37.123Z
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSONL with ISO 8601 timestamp.

        Args:
            record: The log record to format

        Returns:
            str: JSON-formatted log entry with timestamp
        """
        timestamp = format_iso8601(datetime.fromtimestamp(record.created, tz=timezone.utc))

        # Structured logging passes dicts
        if isinstance(record.msg, dict):
            log_data = record.msg
        else:
            log_data = {"message": record.getMessage()}

        log_entry = {"time": timestamp, "level": record.levelname, **log_data}
        return json.dumps(log_entry, default=str)

"""
Logging configuration.

All logs go to stdout as one JSON object per line, so they can be
collected as structured logs wherever the service runs.

The record shape (timestamp, severity, name, message plus extra_fields)
is the same one used for Cloud Logging jsonPayload entries, extended
with a formatted "exception" field when the record carries exc_info.
"""

import json
import logging
import os
from datetime import UTC, datetime


class JsonFormatter(logging.Formatter):
    """
    Custom JSON log formatter.

    Emits timestamp, severity, logger name and message, merged with any
    dict passed as extra={"extra_fields": {...}}.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format.

        Returns:
            A JSON string representing the log record.
        """
        log_object = {
            "timestamp": datetime.now(UTC).isoformat(),
            "severity": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if they exist
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_object.update(record.extra_fields)

        if record.exc_info:
            log_object["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_object, default=str)


def setup_global_logging() -> None:
    """
    Configure global logging.

    Installs a single stdout handler with JsonFormatter on the root logger.
    The level is taken from LOG_LEVEL (default INFO).
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Remove previously installed handlers to avoid duplicate logs
    for h in root_logger.handlers[:-1]:
        root_logger.removeHandler(h)

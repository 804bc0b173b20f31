"""
Structured JSON logging configuration for argguard.

Provides machine-readable logs for guard failures.
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Dict

from pythonjsonlogger.json import JsonFormatter

# Extra fields attached to guard failure records
GUARD_FIELDS = ("guard", "arg_name", "error_code")


class GuardJSONFormatter(JsonFormatter):
    """JSON formatter that adds an ISO timestamp and guard failure fields."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault(
            "rename_fields",
            {"levelname": "level", "name": "logger"},
        )
        super().__init__(*args, **kwargs)

    def add_fields(self, log_record: Dict, record: logging.LogRecord, message_dict: Dict) -> None:
        """
        Add timestamp and guard context to log fields.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")

        for field in GUARD_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value


def configure_logging(level: str = "INFO", json_format: bool = True) -> logging.Logger:
    """
    Configure root logging.

    Args:
        level: Logging level (INFO, DEBUG, WARNING, ERROR)
        json_format: Use JSON formatter (True for production)

    Returns:
        logging.Logger: Configured root logger
    """
    handler = logging.StreamHandler(sys.stdout)

    if json_format:
        handler.setFormatter(GuardJSONFormatter("%(levelname)s %(name)s %(message)s"))
    else:
        # Human-readable format for development
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return root_logger

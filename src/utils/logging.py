# src/utils/logging.py
"""Structured logging with JSON format and run correlation ID support.

Provides:
- JSON-formatted log output for structured logging
- Run correlation ID via ContextVar so every line of one demo run can be grouped
- Centralized logger configuration
"""

import json
import logging
from contextvars import ContextVar
from typing import Any

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Correlation ID shared by all log lines of a single run
run_id_var: ContextVar[str] = ContextVar("run_id", default="")


def set_run_id(run_id: str) -> None:
    """Set the run correlation ID for the current context.

    Args:
        run_id: Unique identifier for the run.
    """
    run_id_var.set(run_id)


def get_run_id() -> str:
    """Get the run correlation ID for the current context.

    Returns:
        Current run ID, or empty string if not set.
    """
    return run_id_var.get()


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs log records as JSON with timestamp, level, logger name,
    message, and optional run_id for correlation.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id = get_run_id()
        if run_id:
            log_data["run_id"] = run_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


def configure_logging(level: int = logging.INFO, json_format: bool = False) -> None:
    """Configure application logging on the root logger.

    Log lines go to stderr so they never mix with the demo output on stdout.
    Replaces handlers installed by a previous call.

    Args:
        level: Logging level (default: logging.INFO).
        json_format: Use StructuredFormatter instead of the plain text format.
    """
    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    for existing in list(logging.root.handlers):
        logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(level)

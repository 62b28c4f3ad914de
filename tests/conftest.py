"""Shared pytest fixtures for all test modules.

Provides common fixtures for:
- Recording reporter (captures user-visible messages)
- Mock environment variables
- Logging state reset
"""

import logging
import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from src.utils.logging import run_id_var


class RecordingReporter:
    """Reporter that keeps every message in memory."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def report(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def reporter() -> RecordingReporter:
    """Provide a fresh recording reporter.

    Returns:
        RecordingReporter with an empty message list.
    """
    return RecordingReporter()


@pytest.fixture
def mock_env_vars() -> Generator[dict[str, str], None, None]:
    """Provide mock environment variables for testing.

    Yields:
        Dictionary of mock environment variables that were set.
    """
    mock_vars = {
        "LOG_LEVEL": "debug",
        "LOG_JSON": "true",
        "DEFAULT_STRATEGY": "length",
    }

    with patch.dict(os.environ, mock_vars):
        yield mock_vars


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers, level and run ID after a test.

    configure_logging() replaces root handlers, which would otherwise leak
    into later tests (and break caplog).
    """
    handlers = list(logging.root.handlers)
    level = logging.root.level
    token = run_id_var.set("")

    yield

    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
    for handler in handlers:
        logging.root.addHandler(handler)
    logging.root.setLevel(level)
    run_id_var.reset(token)

"""Utility functions for the task pattern toolkit."""

from src.utils.logging import (
    configure_logging,
    get_run_id,
    set_run_id,
)
from src.utils.observability import setup_logfire

__all__ = [
    "setup_logfire",
    "set_run_id",
    "get_run_id",
    "configure_logging",
]

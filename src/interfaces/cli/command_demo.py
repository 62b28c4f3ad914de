# src/interfaces/cli/command_demo.py
"""Command pattern demo.

Executes two task commands, undoes both in reverse order, then tries one
more undo on the empty history.
"""

import logging
import uuid

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from src.config import settings  # noqa: E402
from src.core.commands import (  # noqa: E402
    CommandHistory,
    GenerateReportCommand,
    SendEmailCommand,
)
from src.core.reporting import ReporterProtocol  # noqa: E402
from src.utils.logging import configure_logging, set_run_id  # noqa: E402
from src.utils.observability import setup_logfire  # noqa: E402

logger = logging.getLogger(__name__)


def run_demo(reporter: ReporterProtocol | None = None) -> CommandHistory:
    """Run the command/undo sequence.

    Args:
        reporter: Output destination. Defaults to the console.

    Returns:
        The history after the run (always empty).
    """
    history = CommandHistory(reporter=reporter)

    history.execute_command(SendEmailCommand(reporter=reporter))
    history.execute_command(GenerateReportCommand(reporter=reporter))

    history.undo_last()
    history.undo_last()
    history.undo_last()

    return history


def main() -> int:
    """Entry point for the command-demo script."""
    configure_logging(settings.log_level_value, json_format=settings.log_json)
    setup_logfire()
    set_run_id(uuid.uuid4().hex[:8])

    logger.info("Starting command demo")
    run_demo()
    logger.info("Command demo finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

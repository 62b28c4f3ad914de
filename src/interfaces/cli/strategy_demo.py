# src/interfaces/cli/strategy_demo.py
"""Strategy pattern demo.

Prioritizes a fixed task list with no strategy, then with the configured
default strategy, then with the remaining built-in strategy.
"""

import logging
import uuid

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from src.config import settings  # noqa: E402
from src.core.reporting import ReporterProtocol  # noqa: E402
from src.core.strategies import (  # noqa: E402
    TaskPrioritizer,
    UnknownStrategyError,
    available_strategies,
    get_strategy,
)
from src.utils.logging import configure_logging, set_run_id  # noqa: E402
from src.utils.observability import setup_logfire  # noqa: E402

logger = logging.getLogger(__name__)

DEMO_TASKS = ["Enviar Email", "Gerar Relatório", "Corrigir Bug"]


def run_demo(
    default_strategy: str,
    reporter: ReporterProtocol | None = None,
) -> list[str]:
    """Run the prioritization sequence on a fresh copy of DEMO_TASKS.

    Args:
        default_strategy: Name of the strategy applied first.
        reporter: Output destination. Defaults to the console.

    Returns:
        The task list after the last strategy was applied.

    Raises:
        UnknownStrategyError: If default_strategy is not registered.
    """
    first = get_strategy(default_strategy, reporter=reporter)
    tasks = list(DEMO_TASKS)
    prioritizer = TaskPrioritizer(reporter=reporter)

    prioritizer.apply_strategy(tasks)

    prioritizer.set_strategy(first)
    prioritizer.apply_strategy(tasks)

    for name in available_strategies():
        if name != first.name:
            prioritizer.set_strategy(get_strategy(name, reporter=reporter))
            prioritizer.apply_strategy(tasks)

    return tasks


def main() -> int:
    """Entry point for the strategy-demo script."""
    configure_logging(settings.log_level_value, json_format=settings.log_json)
    setup_logfire()
    set_run_id(uuid.uuid4().hex[:8])

    logger.info("Starting strategy demo")
    try:
        run_demo(settings.default_strategy)
    except UnknownStrategyError as e:
        logger.error("Invalid DEFAULT_STRATEGY: %s", e)
        return 1

    logger.info("Strategy demo finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

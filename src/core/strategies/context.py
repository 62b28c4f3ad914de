# src/core/strategies/context.py
"""Strategy holder for task prioritization.

This module provides the TaskPrioritizer class which keeps the currently
selected strategy and delegates ordering to it.
"""

import logging

from src.core.reporting import ReporterProtocol, resolve_reporter
from src.core.strategies.base import PrioritizationStrategy

logger = logging.getLogger(__name__)

NO_STRATEGY_MESSAGE = "Nenhuma estratégia definida."


class TaskPrioritizer:
    """Context that applies whichever strategy is currently selected.

    The prioritizer enforces no ordering of its own. With no strategy
    selected, applying is a reported no-op.

    Example:
        >>> from src.core.strategies.ordering import ByLengthStrategy
        >>> prioritizer = TaskPrioritizer()
        >>> prioritizer.apply_strategy(["b", "a"])
        Nenhuma estratégia definida.
        False
        >>> prioritizer.set_strategy(ByLengthStrategy())
        >>> prioritizer.apply_strategy(["aaa", "a"])
        Tarefas ordenadas por tamanho: ['a', 'aaa']
        True
    """

    def __init__(
        self,
        strategy: PrioritizationStrategy | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize the prioritizer.

        Args:
            strategy: Initial strategy, or None to start unset.
            reporter: Destination for the "no strategy" notice.
                Defaults to the console.
        """
        self._strategy = strategy
        self._reporter = resolve_reporter(reporter)

    @property
    def strategy(self) -> PrioritizationStrategy | None:
        """Currently selected strategy, or None."""
        return self._strategy

    def set_strategy(self, strategy: PrioritizationStrategy | None) -> None:
        """Replace the current strategy unconditionally.

        Args:
            strategy: New strategy. None clears the selection.
        """
        self._strategy = strategy
        logger.info(
            "Strategy set to %s",
            type(strategy).__name__ if strategy is not None else None,
        )

    def apply_strategy(self, tasks: list[str]) -> bool:
        """Reorder tasks in place with the current strategy.

        Args:
            tasks: Task descriptions to reorder.

        Returns:
            True if a strategy ran, False if none was selected
            (tasks are left untouched).
        """
        if self._strategy is None:
            logger.info("No strategy selected, leaving %d tasks as-is", len(tasks))
            self._reporter.report(NO_STRATEGY_MESSAGE)
            return False

        self._strategy.prioritize(tasks)
        return True

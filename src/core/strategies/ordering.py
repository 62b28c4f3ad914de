# src/core/strategies/ordering.py
"""Built-in task ordering strategies."""

import logging

from src.core.reporting import ReporterProtocol, resolve_reporter

logger = logging.getLogger(__name__)


class AlphabeticalStrategy:
    """Orders tasks by code-point comparison of the whole string.

    No locale or case folding is applied, so "Zeta" sorts before "alpha".

    Example:
        >>> tasks = ["Enviar Email", "Gerar Relatório", "Corrigir Bug"]
        >>> AlphabeticalStrategy().prioritize(tasks)
        Tarefas ordenadas alfabeticamente: ['Corrigir Bug', 'Enviar Email', 'Gerar Relatório']
    """

    name = "alphabetical"

    def __init__(self, reporter: ReporterProtocol | None = None) -> None:
        self._reporter = resolve_reporter(reporter)

    def prioritize(self, tasks: list[str]) -> None:
        """Sort tasks alphabetically in place and report the result.

        Args:
            tasks: Task descriptions to reorder.
        """
        tasks.sort()
        logger.debug("Sorted %d tasks alphabetically", len(tasks))
        self._reporter.report(f"Tarefas ordenadas alfabeticamente: {tasks}")


class ByLengthStrategy:
    """Orders tasks by ascending length.

    The sort is stable: tasks of equal length keep their input order.

    Example:
        >>> tasks = ["aaa", "a", "aa"]
        >>> ByLengthStrategy().prioritize(tasks)
        Tarefas ordenadas por tamanho: ['a', 'aa', 'aaa']
    """

    name = "length"

    def __init__(self, reporter: ReporterProtocol | None = None) -> None:
        self._reporter = resolve_reporter(reporter)

    def prioritize(self, tasks: list[str]) -> None:
        """Sort tasks by ascending length in place and report the result.

        Args:
            tasks: Task descriptions to reorder.
        """
        tasks.sort(key=len)
        logger.debug("Sorted %d tasks by length", len(tasks))
        self._reporter.report(f"Tarefas ordenadas por tamanho: {tasks}")

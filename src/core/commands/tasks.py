# src/core/commands/tasks.py
"""Concrete task commands.

Each command announces what it did (or undid) through a reporter and logs
the same event for diagnostics.
"""

import logging
from collections.abc import Iterable

from src.core.commands.base import CommandProtocol
from src.core.reporting import ReporterProtocol, resolve_reporter

logger = logging.getLogger(__name__)


class SendEmailCommand:
    """Sends an email.

    Example:
        >>> cmd = SendEmailCommand()
        >>> cmd.execute()
        Email enviado.
        >>> cmd.undo()
        Envio de email desfeito.
    """

    EXECUTED_MESSAGE = "Email enviado."
    UNDONE_MESSAGE = "Envio de email desfeito."

    def __init__(self, reporter: ReporterProtocol | None = None) -> None:
        self._reporter = resolve_reporter(reporter)

    def execute(self) -> None:
        """Send the email and report it."""
        logger.debug("Executing %s", type(self).__name__)
        self._reporter.report(self.EXECUTED_MESSAGE)

    def undo(self) -> None:
        """Reverse the send and report it."""
        logger.debug("Undoing %s", type(self).__name__)
        self._reporter.report(self.UNDONE_MESSAGE)


class GenerateReportCommand:
    """Generates a report.

    Example:
        >>> cmd = GenerateReportCommand()
        >>> cmd.execute()
        Relatório gerado.
    """

    EXECUTED_MESSAGE = "Relatório gerado."
    UNDONE_MESSAGE = "Geração de relatório desfeita."

    def __init__(self, reporter: ReporterProtocol | None = None) -> None:
        self._reporter = resolve_reporter(reporter)

    def execute(self) -> None:
        """Generate the report and report it."""
        logger.debug("Executing %s", type(self).__name__)
        self._reporter.report(self.EXECUTED_MESSAGE)

    def undo(self) -> None:
        """Discard the generated report and report it."""
        logger.debug("Undoing %s", type(self).__name__)
        self._reporter.report(self.UNDONE_MESSAGE)


class MacroCommand:
    """Composite command running several commands as one unit.

    Children execute in order and undo in reverse order. If a child raises
    during execute(), the children that already ran are rolled back in
    reverse order before the error propagates, so a failed macro leaves
    no effects behind.

    Attributes:
        commands: Child commands in execution order.
    """

    def __init__(self, commands: Iterable[CommandProtocol]) -> None:
        self.commands: list[CommandProtocol] = list(commands)
        self._executed = 0

    def add(self, command: CommandProtocol) -> None:
        """Append a child command."""
        self.commands.append(command)

    def execute(self) -> None:
        """Execute every child in order.

        Raises:
            Exception: Whatever the failing child raised, after the children
                that already ran have been undone.
        """
        self._executed = 0
        try:
            for command in self.commands:
                command.execute()
                self._executed += 1
        except Exception:
            logger.warning(
                "Macro child %d failed, rolling back %d commands",
                self._executed + 1,
                self._executed,
            )
            self.undo()
            raise
        logger.debug("Macro executed %d commands", self._executed)

    def undo(self) -> None:
        """Undo the executed children in reverse order."""
        for command in reversed(self.commands[: self._executed]):
            command.undo()
        logger.debug("Macro undid %d commands", self._executed)
        self._executed = 0

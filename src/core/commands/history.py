# src/core/commands/history.py
"""Command history manager.

This module provides the CommandHistory class which executes commands and
keeps them on a last-in-first-out stack so they can be undone in reverse
order.
"""

import logging

from src.core.commands.base import CommandProtocol
from src.core.reporting import ReporterProtocol, resolve_reporter

logger = logging.getLogger(__name__)

NOTHING_TO_UNDO_MESSAGE = "Nada para desfazer."


class CommandHistory:
    """Invoker that executes commands and tracks them for undo.

    The most recently executed, not-yet-undone command is always the last
    entry. Single-threaded and in-memory only.

    Example:
        >>> from src.core.commands.tasks import SendEmailCommand
        >>> history = CommandHistory()
        >>> history.execute_command(SendEmailCommand())
        Email enviado.
        >>> undone = history.undo_last()
        Envio de email desfeito.
        >>> history.undo_last()
        Nada para desfazer.
    """

    def __init__(self, reporter: ReporterProtocol | None = None) -> None:
        """Initialize an empty history.

        Args:
            reporter: Destination for the "nothing to undo" notice.
                Defaults to the console.
        """
        self._reporter = resolve_reporter(reporter)
        self._stack: list[CommandProtocol] = []

    def execute_command(self, command: CommandProtocol) -> None:
        """Execute a command and record it in the history.

        The command is recorded only after execute() returns, so a command
        that raises is never undone later.

        Args:
            command: Any object satisfying CommandProtocol.
        """
        command.execute()
        self._stack.append(command)
        logger.info(
            "Executed %s (history size: %d)", type(command).__name__, len(self._stack)
        )

    def undo_last(self) -> CommandProtocol | None:
        """Undo the most recently executed command.

        With an empty history this reports a notice and leaves state unchanged.
        The command is removed only after undo() returns, so a command whose
        undo() raises stays on top of the history.

        Returns:
            The command that was undone, or None if there was nothing to undo.
        """
        if not self._stack:
            logger.info("Undo requested with empty history")
            self._reporter.report(NOTHING_TO_UNDO_MESSAGE)
            return None

        command = self._stack[-1]
        command.undo()
        self._stack.pop()
        logger.info(
            "Undid %s (history size: %d)", type(command).__name__, len(self._stack)
        )
        return command

    def peek(self) -> CommandProtocol | None:
        """Get the command that undo_last() would undo next.

        Returns:
            The top command, or None if the history is empty.
        """
        return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        """Drop all recorded commands without undoing them."""
        logger.debug("Clearing %d commands from history", len(self._stack))
        self._stack.clear()

    @property
    def history(self) -> tuple[CommandProtocol, ...]:
        """Snapshot of recorded commands, oldest first."""
        return tuple(self._stack)

    @property
    def is_empty(self) -> bool:
        return not self._stack

    def __len__(self) -> int:
        return len(self._stack)

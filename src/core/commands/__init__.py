"""Command module for undoable task actions.

This module provides:
- CommandProtocol: Interface for executable, undoable actions
- SendEmailCommand, GenerateReportCommand: Concrete task commands
- MacroCommand: Composite command running several commands as one
- CommandHistory: Invoker that executes commands and undoes them in LIFO order
"""

from src.core.commands.base import CommandProtocol
from src.core.commands.history import NOTHING_TO_UNDO_MESSAGE, CommandHistory
from src.core.commands.tasks import (
    GenerateReportCommand,
    MacroCommand,
    SendEmailCommand,
)

__all__ = [
    "CommandProtocol",
    "CommandHistory",
    "NOTHING_TO_UNDO_MESSAGE",
    "SendEmailCommand",
    "GenerateReportCommand",
    "MacroCommand",
]

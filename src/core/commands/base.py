# src/core/commands/base.py
"""Command protocol.

A command is an encapsulated, undoable unit of action. Anything exposing
zero-argument ``execute()`` and ``undo()`` methods qualifies.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommandProtocol(Protocol):
    """Protocol for executable actions with undo support."""

    def execute(self) -> None:
        """Perform the action."""
        ...

    def undo(self) -> None:
        """Reverse the effect of a previous execute()."""
        ...

# src/core/reporting.py
"""Reporter protocol for user-visible output.

Commands and strategies announce their effects through a reporter instead of
printing directly, so callers can redirect the output (console, tests, etc.).
"""

import sys
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class ReporterProtocol(Protocol):
    """Protocol for emitting user-visible messages."""

    def report(self, message: str) -> None:
        """Emit a single message.

        Args:
            message: Human-readable line to show the user.
        """
        ...


class ConsoleReporter:
    """Console implementation of ReporterProtocol.

    Writes each message as its own line to a text stream (stdout by default).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize with an optional output stream.

        Args:
            stream: Target stream. Resolved to sys.stdout at report time when None,
                so redirection (e.g. pytest capsys) is honored.
        """
        self._stream = stream

    def report(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(message, file=stream)


def resolve_reporter(reporter: ReporterProtocol | None) -> ReporterProtocol:
    """Return the given reporter, or a ConsoleReporter when None."""
    return reporter if reporter is not None else ConsoleReporter()

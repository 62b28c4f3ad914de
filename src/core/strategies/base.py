# src/core/strategies/base.py
"""Prioritization strategy protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class PrioritizationStrategy(Protocol):
    """Protocol for interchangeable task ordering algorithms.

    Implementations reorder the given list in place and report the result.

    Attributes:
        name: Registry key for the strategy (e.g. "alphabetical").
    """

    name: str

    def prioritize(self, tasks: list[str]) -> None:
        """Reorder tasks in place.

        Args:
            tasks: Task descriptions to reorder.
        """
        ...

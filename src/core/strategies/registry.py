# src/core/strategies/registry.py
"""Lookup of built-in strategies by name.

Lets configuration refer to strategies by their ``name`` attribute
(e.g. DEFAULT_STRATEGY=length).
"""

import logging
from collections.abc import Callable

from src.core.reporting import ReporterProtocol
from src.core.strategies.base import PrioritizationStrategy
from src.core.strategies.ordering import AlphabeticalStrategy, ByLengthStrategy

logger = logging.getLogger(__name__)

StrategyFactory = Callable[[ReporterProtocol | None], PrioritizationStrategy]

_STRATEGIES: dict[str, StrategyFactory] = {
    AlphabeticalStrategy.name: AlphabeticalStrategy,
    ByLengthStrategy.name: ByLengthStrategy,
}


class UnknownStrategyError(ValueError):
    """Raised when a strategy name is not registered."""

    def __init__(self, name: str):
        available = ", ".join(available_strategies())
        super().__init__(f"Unknown strategy '{name}'. Available: {available}")
        self.name = name


def available_strategies() -> list[str]:
    """List registered strategy names in sorted order."""
    return sorted(_STRATEGIES)


def get_strategy(
    name: str, reporter: ReporterProtocol | None = None
) -> PrioritizationStrategy:
    """Build a strategy by name.

    The lookup ignores case and surrounding whitespace.

    Args:
        name: Registered strategy name.
        reporter: Reporter passed to the new strategy.

    Returns:
        A new strategy instance.

    Raises:
        UnknownStrategyError: If no strategy is registered under the name.
    """
    key = name.strip().lower()
    factory = _STRATEGIES.get(key)
    if factory is None:
        raise UnknownStrategyError(name)

    logger.debug("Resolved strategy '%s'", key)
    return factory(reporter)

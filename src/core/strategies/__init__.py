"""Strategy module for task prioritization.

Provides interchangeable ordering algorithms and the context that applies them:
- PrioritizationStrategy: Interface for ordering algorithms
- AlphabeticalStrategy, ByLengthStrategy: Built-in orderings
- TaskPrioritizer: Holds the selected strategy and delegates to it
- get_strategy, available_strategies: Name-based lookup for configuration
"""

from src.core.strategies.base import PrioritizationStrategy
from src.core.strategies.context import NO_STRATEGY_MESSAGE, TaskPrioritizer
from src.core.strategies.ordering import AlphabeticalStrategy, ByLengthStrategy
from src.core.strategies.registry import (
    UnknownStrategyError,
    available_strategies,
    get_strategy,
)

__all__ = [
    "PrioritizationStrategy",
    "AlphabeticalStrategy",
    "ByLengthStrategy",
    "TaskPrioritizer",
    "NO_STRATEGY_MESSAGE",
    "UnknownStrategyError",
    "available_strategies",
    "get_strategy",
]

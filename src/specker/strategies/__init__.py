"""Strategy implementations for Specker.

All strategies implement the Strategy base class interface. The set is
closed: every StrategyKind maps to exactly one deterministic strategy.
"""

from specker.strategies.base import (
    Strategy,
    find_max_heap,
    find_min_positive_heap,
    get_strategy,
    list_strategy_kinds,
)
from specker.strategies.deterministic import Greedy, Righteous, Sneaky, Spartan

__all__ = [
    # Base class
    "Strategy",
    # Factory functions
    "get_strategy",
    "list_strategy_kinds",
    # Heap scans
    "find_max_heap",
    "find_min_positive_heap",
    # Strategies
    "Greedy",
    "Spartan",
    "Sneaky",
    "Righteous",
]

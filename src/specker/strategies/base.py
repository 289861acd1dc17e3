"""Base strategy interface for Specker.

This module defines the abstract base class for all player strategies,
the heap-scanning helpers they share, and the factory that maps a
StrategyKind to its implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from specker.exceptions import NoLegalMoveError
from specker.models.move import Move
from specker.models.player import StrategyKind, parse_strategy_kind
from specker.models.state import HeapSnapshot


class Strategy(ABC):
    """Abstract base class for all strategies.

    A strategy is a pure function from heaps to a move. It must not keep a
    reference to the state it is given, and must return the same move for
    the same heaps every time.
    """

    kind: ClassVar[StrategyKind]

    @property
    def name(self) -> str:
        """Display name, e.g. "Greedy"."""
        return self.kind.label

    @abstractmethod
    def decide(self, state: HeapSnapshot) -> Move:
        """Choose a move for the given heaps.

        Args:
            state: Current heaps (read-only)

        Returns:
            A move that is legal for `state`

        Raises:
            NoLegalMoveError: If every heap is empty
        """
        pass

    def _require_coins(self, state: HeapSnapshot) -> None:
        """Raise NoLegalMoveError if there is nothing left to take."""
        if state.is_terminal():
            raise NoLegalMoveError(f"{self.name} strategy invoked on a terminal state")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def find_max_heap(state: HeapSnapshot) -> tuple[int, int]:
    """Find the heap with the most coins.

    Only a strictly larger count replaces the current candidate, so the
    lowest index wins ties.

    Returns:
        Tuple of (heap index, coin count)
    """
    i_max, max_coins = 0, 0
    for i, x in enumerate(state.coins):
        if x > max_coins:
            i_max, max_coins = i, x
    return i_max, max_coins


def find_min_positive_heap(state: HeapSnapshot) -> tuple[int, int]:
    """Find the non-empty heap with the fewest coins.

    The first non-empty heap is the initial candidate and only a strictly
    smaller positive count replaces it, so the lowest index wins ties.

    Returns:
        Tuple of (heap index, coin count)

    Raises:
        NoLegalMoveError: If every heap is empty
    """
    i_min, min_coins = -1, 0
    for i, x in enumerate(state.coins):
        if x > 0 and (i_min < 0 or x < min_coins):
            i_min, min_coins = i, x
    if i_min < 0:
        raise NoLegalMoveError("no non-empty heap")
    return i_min, min_coins


def get_strategy(kind: StrategyKind | str) -> Strategy:
    """Create a strategy by kind.

    Args:
        kind: StrategyKind or case-insensitive name ("greedy", "Sneaky", ...)

    Returns:
        Strategy instance

    Raises:
        ValueError: If the strategy kind is unknown
    """
    # Import here to avoid circular imports
    from specker.strategies.deterministic import Greedy, Righteous, Sneaky, Spartan

    strategy_map: dict[StrategyKind, type[Strategy]] = {
        StrategyKind.GREEDY: Greedy,
        StrategyKind.SPARTAN: Spartan,
        StrategyKind.SNEAKY: Sneaky,
        StrategyKind.RIGHTEOUS: Righteous,
    }
    return strategy_map[parse_strategy_kind(kind)]()


def list_strategy_kinds() -> list[str]:
    """List the names of all available strategies."""
    return [kind.value for kind in StrategyKind]

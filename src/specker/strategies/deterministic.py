"""Deterministic strategy implementations for Specker.

Each strategy embodies one simple attitude towards the heaps. All of them
are stateless and scan heaps from index 0 upward, so ties always go to the
lowest index and the same heaps always produce the same move.

Moves that put nothing back use target heap 0 with amount 0.
"""

from __future__ import annotations

from typing import ClassVar

from specker.models.move import Move
from specker.models.player import StrategyKind
from specker.models.state import HeapSnapshot
from specker.strategies.base import Strategy, find_max_heap, find_min_positive_heap


class Greedy(Strategy):
    """Takes every coin from the largest heap."""

    kind: ClassVar[StrategyKind] = StrategyKind.GREEDY

    def decide(self, state: HeapSnapshot) -> Move:
        self._require_coins(state)
        i_max, max_coins = find_max_heap(state)
        return Move(source_heap=i_max, source_amount=max_coins)


class Spartan(Strategy):
    """Takes a single coin from the largest heap."""

    kind: ClassVar[StrategyKind] = StrategyKind.SPARTAN

    def decide(self, state: HeapSnapshot) -> Move:
        self._require_coins(state)
        i_max, _ = find_max_heap(state)
        return Move(source_heap=i_max, source_amount=1)


class Sneaky(Strategy):
    """Takes every coin from the smallest non-empty heap."""

    kind: ClassVar[StrategyKind] = StrategyKind.SNEAKY

    def decide(self, state: HeapSnapshot) -> Move:
        self._require_coins(state)
        i_min, min_coins = find_min_positive_heap(state)
        return Move(source_heap=i_min, source_amount=min_coins)


class Righteous(Strategy):
    """Takes half (rounded up) of the largest heap and gives all but one
    of those coins to the smallest non-empty heap.

    With a single non-empty heap both ends of the scan land on the same
    heap and the move puts coins back where it took them from.
    """

    kind: ClassVar[StrategyKind] = StrategyKind.RIGHTEOUS

    def decide(self, state: HeapSnapshot) -> Move:
        self._require_coins(state)

        i_max, max_coins = 0, 0
        i_min, min_coins = -1, 0
        for i, x in enumerate(state.coins):
            if x > max_coins:
                i_max, max_coins = i, x
            if x > 0 and (i_min < 0 or x < min_coins):
                i_min, min_coins = i, x

        k = (max_coins + 1) // 2
        return Move(
            source_heap=i_max,
            source_amount=k,
            target_heap=i_min,
            target_amount=k - 1,
        )

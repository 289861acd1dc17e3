"""Game state models for Specker.

GameState is the single mutable piece of the game: an ordered list of heap
coin counts, changed in place only by apply(). Strategies and transcripts
only ever see a HeapSnapshot, a frozen copy of the counts.

Legality rules enforced by apply():
- source_heap and target_heap in [0, heap_count)
- source_amount > 0 and target_amount >= 0
- source_amount <= coins[source_heap]
- target_amount < source_amount

The last rule makes the total number of coins strictly decrease with every
move, so every game terminates.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from specker.exceptions import IllegalMoveError, InvalidHeapError, InvalidStateError
from specker.models.move import Move


def _check_heap(index: int, heap_count: int) -> None:
    if index < 0 or index >= heap_count:
        raise InvalidHeapError(index, heap_count)


def format_state(coins) -> str:
    """Format heap counts for the game transcript, e.g. "10, 20, 17"."""
    if isinstance(coins, (GameState, HeapSnapshot)):
        coins = coins.coins
    return ", ".join(str(c) for c in coins)


class HeapSnapshot(BaseModel):
    """Read-only view of the heaps at one point in the game.

    Attributes:
        coins: Coin count per heap, index order is heap identity
    """

    model_config = ConfigDict(frozen=True)

    coins: tuple[int, ...]

    @property
    def heap_count(self) -> int:
        """Number of heaps."""
        return len(self.coins)

    @property
    def total_coins(self) -> int:
        """Coins still in play."""
        return sum(self.coins)

    def coins_at(self, index: int) -> int:
        """Coins on heap `index`.

        Raises:
            InvalidHeapError: If index is out of range
        """
        _check_heap(index, self.heap_count)
        return self.coins[index]

    def is_terminal(self) -> bool:
        """Check whether every heap is empty."""
        return all(c == 0 for c in self.coins)

    def __str__(self) -> str:
        return format_state(self.coins)


class GameState(BaseModel):
    """Heap coin counts for a game in progress.

    Attributes:
        heap_count: Number of heaps, fixed for the whole game
        coins: Coin count per heap (length heap_count, all >= 0)
    """

    heap_count: int
    coins: list[int]

    @model_validator(mode="after")
    def validate_heaps(self) -> GameState:
        """Reject empty heap vectors, length mismatches and negative counts."""
        if self.heap_count <= 0:
            raise InvalidStateError(f"heap count must be positive, got {self.heap_count}")
        if len(self.coins) != self.heap_count:
            raise InvalidStateError(
                f"expected {self.heap_count} coin counts, got {len(self.coins)}"
            )
        for i, c in enumerate(self.coins):
            if c < 0:
                raise InvalidStateError(f"heap {i} has negative coin count {c}")
        return self

    @property
    def total_coins(self) -> int:
        """Coins still in play."""
        return sum(self.coins)

    def coins_at(self, index: int) -> int:
        """Coins on heap `index`.

        Raises:
            InvalidHeapError: If index is out of range
        """
        _check_heap(index, self.heap_count)
        return self.coins[index]

    def is_terminal(self) -> bool:
        """Check whether every heap is empty (the last mover has won)."""
        return all(c == 0 for c in self.coins)

    def snapshot(self) -> HeapSnapshot:
        """Frozen copy of the current heaps."""
        return HeapSnapshot(coins=tuple(self.coins))

    def validate_move(self, move: Move) -> str | None:
        """Check a move against the legality rules.

        Returns:
            None if the move is legal, otherwise the reason it is not
        """
        if not 0 <= move.source_heap < self.heap_count:
            return f"source heap {move.source_heap} out of range"
        if not 0 <= move.target_heap < self.heap_count:
            return f"target heap {move.target_heap} out of range"
        if move.source_amount <= 0:
            return f"must take at least one coin, got {move.source_amount}"
        if move.target_amount < 0:
            return f"cannot put a negative amount ({move.target_amount})"
        if move.source_amount > self.coins[move.source_heap]:
            return (
                f"cannot take {move.source_amount} coins from heap {move.source_heap} "
                f"holding {self.coins[move.source_heap]}"
            )
        if move.target_amount >= move.source_amount:
            return (
                f"must put fewer coins than taken "
                f"({move.target_amount} >= {move.source_amount})"
            )
        return None

    def apply(self, move: Move) -> None:
        """Apply a move in place.

        Either the whole move is applied or, on error, nothing is.

        Args:
            move: The move to apply

        Raises:
            IllegalMoveError: If the move breaks any legality rule
        """
        reason = self.validate_move(move)
        if reason is not None:
            raise IllegalMoveError(f"invalid move: {reason}", move=move)
        self.coins[move.source_heap] -= move.source_amount
        if move.target_amount > 0:
            self.coins[move.target_heap] += move.target_amount

    def __str__(self) -> str:
        return format_state(self.coins)


def new_state(heap_count: int, coins: list[int]) -> GameState:
    """Create the initial state of a game.

    Raises:
        InvalidStateError: If the heap vector is empty, the wrong length,
            negative, or not made of integers
    """
    try:
        return GameState(heap_count=heap_count, coins=list(coins))
    except ValidationError as e:
        raise InvalidStateError(f"malformed heaps: {e.errors()[0]['msg']}") from e

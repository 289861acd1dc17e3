"""Move definitions for Specker.

A move removes coins from one heap and optionally puts a strictly smaller
number of coins onto a heap. Moves carry no validation of their own:
GameState.apply is the only authority on legality, since only the state
knows how many heaps exist and what they hold.
"""

from pydantic import BaseModel, ConfigDict


class Move(BaseModel):
    """A coin transfer chosen by a strategy.

    Attributes:
        source_heap: Heap the coins are taken from
        source_amount: Coins removed from the source heap
        target_heap: Heap that receives coins (ignored when target_amount is 0)
        target_amount: Coins put on the target heap, must be < source_amount
    """

    model_config = ConfigDict(frozen=True)

    source_heap: int
    source_amount: int
    target_heap: int = 0
    target_amount: int = 0

    @property
    def net_removed(self) -> int:
        """Coins taken out of play by this move."""
        return self.source_amount - self.target_amount

    def is_self_targeting(self) -> bool:
        """Check whether coins are put back on the heap they came from."""
        return self.target_amount > 0 and self.source_heap == self.target_heap

    def __str__(self) -> str:
        return format_move(self)


def format_move(move: Move) -> str:
    """Format a move for the game transcript.

    Args:
        move: The move to format

    Returns:
        Phrase such as "takes 9 coins from heap 2 and puts 8 coins to heap 2"
    """
    text = f"takes {move.source_amount} coins from heap {move.source_heap} and puts "
    if move.target_amount > 0:
        return text + f"{move.target_amount} coins to heap {move.target_heap}"
    return text + "nothing"

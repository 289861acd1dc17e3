"""Player definitions for Specker.

A player is a name bound to one of the four strategy kinds. Players are
immutable; turn order is the order they are registered with the engine.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from specker.models.move import Move
    from specker.models.state import HeapSnapshot
    from specker.strategies.base import Strategy


class StrategyKind(str, Enum):
    """The closed set of strategies a player can follow.

    Inherits from str for proper JSON serialization.
    """

    GREEDY = "greedy"
    SPARTAN = "spartan"
    SNEAKY = "sneaky"
    RIGHTEOUS = "righteous"

    @property
    def label(self) -> str:
        """Display name used in transcripts, e.g. "Greedy"."""
        return self.value.capitalize()


class Player(BaseModel):
    """A named participant following a fixed strategy.

    Attributes:
        name: Display name
        strategy_kind: Which strategy decides this player's moves
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    strategy_kind: StrategyKind

    @property
    def strategy(self) -> Strategy:
        """The strategy instance for this player's kind."""
        # Import here to avoid circular imports
        from specker.strategies.base import get_strategy

        return get_strategy(self.strategy_kind)

    def decide(self, state: HeapSnapshot) -> Move:
        """Ask this player's strategy for a move."""
        return self.strategy.decide(state)

    def __str__(self) -> str:
        return f"{self.strategy_kind.label} player {self.name}"


def new_player(name: str, strategy_kind: StrategyKind | str) -> Player:
    """Create a player from a name and a strategy kind or kind name.

    Raises:
        ValueError: If the strategy kind is unknown
    """
    return Player(name=name, strategy_kind=parse_strategy_kind(strategy_kind))


def parse_strategy_kind(kind: StrategyKind | str) -> StrategyKind:
    """Normalize a strategy kind given as enum or case-insensitive name.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(kind, StrategyKind):
        return kind
    normalized = kind.strip().lower()
    try:
        return StrategyKind(normalized)
    except ValueError:
        raise ValueError(
            f"Unknown strategy: {kind}. "
            f"Valid strategies: {[k.value for k in StrategyKind]}"
        ) from None

"""Specker game models.

This module exports the core data structures for the game.
"""

from .move import Move, format_move
from .player import Player, StrategyKind, new_player, parse_strategy_kind
from .state import GameState, HeapSnapshot, format_state, new_state

__all__ = [
    # Enums
    "StrategyKind",
    # Move
    "Move",
    "format_move",
    # State
    "GameState",
    "HeapSnapshot",
    "format_state",
    "new_state",
    # Players
    "Player",
    "new_player",
    "parse_strategy_kind",
]

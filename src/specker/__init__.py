"""Specker's coin game: heaps, moves, strategies and the turn engine."""

from specker.engine import GameEnding, GameEngine, TurnEvent, create_game
from specker.exceptions import (
    IllegalMoveError,
    InvalidHeapError,
    InvalidStateError,
    NoLegalMoveError,
    SpeckerError,
)
from specker.models import GameState, Move, Player, StrategyKind, new_player, new_state

__all__ = [
    "GameEngine",
    "GameEnding",
    "TurnEvent",
    "create_game",
    "GameState",
    "Move",
    "Player",
    "StrategyKind",
    "new_player",
    "new_state",
    "SpeckerError",
    "InvalidStateError",
    "IllegalMoveError",
    "InvalidHeapError",
    "NoLegalMoveError",
]

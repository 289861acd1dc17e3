"""Core game engine for Specker.

This module implements the GameEngine class, which owns the heaps and the
player list and runs the turn loop.

Turn Sequence:
1. SELECT - actor is players[turn_index % len(players)]
2. DECIDE - actor's strategy picks a move from a snapshot of the heaps
3. APPLY - GameState.apply validates and applies the move
4. RECORD - TurnEvent appended to history
5. ADVANCE - increment turn_index
6. CHECK ENDING - all heaps empty -> FINISHED, the last mover wins
7. EMIT - TurnEvent (then GameEnding, if any) sent to every sink

An illegal move from a strategy is a defect, so IllegalMoveError
propagates out of step() and the turn is not recorded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from specker.exceptions import InvalidStateError
from specker.models.move import Move, format_move
from specker.models.player import Player, StrategyKind, new_player
from specker.models.state import GameState, HeapSnapshot, new_state

logger = logging.getLogger(__name__)


class EnginePhase(Enum):
    """Lifecycle of a game."""

    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class TurnEvent:
    """Record of a single turn.

    Attributes:
        turn: Turn index (0-indexed)
        state_before: Heaps before the move was applied
        player_name: Name of the acting player
        strategy_kind: Strategy of the acting player
        move: The move that was applied
    """

    turn: int
    state_before: HeapSnapshot
    player_name: str
    strategy_kind: StrategyKind
    move: Move

    def describe(self) -> str:
        """One transcript line, e.g. "Sneaky player Tom takes 10 coins ..."."""
        return f"{self.strategy_kind.label} player {self.player_name} {format_move(self.move)}"


@dataclass(frozen=True)
class GameEnding:
    """Result of a completed game.

    Attributes:
        winner_index: Position of the winner in the player list
        winner_name: Name of the winner
        winner_kind: Strategy of the winner
        turns_played: Number of moves made
        final_state: Heaps at the end (all empty)
    """

    winner_index: int
    winner_name: str
    winner_kind: StrategyKind
    turns_played: int
    final_state: HeapSnapshot

    def describe(self) -> str:
        """Transcript line announcing the winner."""
        return f"{self.winner_kind.label} player {self.winner_name} wins"


EngineOutput = Union[TurnEvent, GameEnding]
EventSink = Callable[[EngineOutput], None]


class GameEngine:
    """Runs one game of Specker to completion.

    The GameEngine handles:
    - Round-robin turn order
    - Applying strategy moves to the state
    - Ending detection and winner determination
    - Turn history and event emission to sinks

    Attributes:
        state: Current heaps (owned exclusively by the engine)
        players: Players in turn order
        turn_index: Number of completed turns
        phase: RUNNING or FINISHED
        history: Every completed turn
        ending: GameEnding once the game is over
    """

    def __init__(
        self,
        state: GameState,
        players: Sequence[Player],
        sinks: Optional[Sequence[EventSink]] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            state: Initial heaps; the engine mutates it as the game proceeds
            players: Players in turn order (at least one)
            sinks: Callables that receive every TurnEvent and the GameEnding

        Raises:
            InvalidStateError: If there are no players or no coins to play
        """
        if not players:
            raise InvalidStateError("a game needs at least one player")
        if state.is_terminal():
            raise InvalidStateError("initial state has no coins; nobody can move")

        self.state = state
        self.players: list[Player] = list(players)
        self.turn_index = 0
        self.phase = EnginePhase.RUNNING
        self.history: list[TurnEvent] = []
        self.ending: Optional[GameEnding] = None
        self._sinks: list[EventSink] = list(sinks or [])

    def subscribe(self, sink: EventSink) -> None:
        """Register a callable to receive every subsequent event."""
        self._sinks.append(sink)

    def current_player(self) -> Player:
        """Player whose turn it is."""
        return self.players[self.turn_index % len(self.players)]

    def step(self) -> EngineOutput:
        """Play a single turn.

        Returns:
            The TurnEvent for the turn just played, or the GameEnding if
            the game was already over

        Raises:
            IllegalMoveError: If the strategy produced an illegal move
        """
        if self.ending is not None:
            return self.ending

        actor = self.current_player()
        before = self.state.snapshot()
        move = actor.decide(before)
        self.state.apply(move)

        event = TurnEvent(
            turn=self.turn_index,
            state_before=before,
            player_name=actor.name,
            strategy_kind=actor.strategy_kind,
            move=move,
        )
        self.history.append(event)
        self.turn_index += 1
        logger.debug("turn %d: [%s] %s", event.turn, before, event.describe())
        if self.state.is_terminal():
            self._finish()

        # the turn is fully recorded before any sink runs
        self._emit(event)
        if self.ending is not None:
            self._emit(self.ending)
        return event

    def run_to_completion(self) -> list[EngineOutput]:
        """Play every remaining turn.

        Returns:
            The TurnEvents played by this call followed by the GameEnding
        """
        outputs: list[EngineOutput] = []
        while self.ending is None:
            outputs.append(self.step())
        outputs.append(self.ending)
        return outputs

    def is_game_over(self) -> bool:
        """Check if the game has ended."""
        return self.phase == EnginePhase.FINISHED

    def get_ending(self) -> Optional[GameEnding]:
        """Get the game ending if the game is over."""
        return self.ending

    def get_history(self) -> list[TurnEvent]:
        """Get every completed turn."""
        return list(self.history)

    def _finish(self) -> None:
        winner_index = (self.turn_index - 1) % len(self.players)
        winner = self.players[winner_index]
        self.ending = GameEnding(
            winner_index=winner_index,
            winner_name=winner.name,
            winner_kind=winner.strategy_kind,
            turns_played=self.turn_index,
            final_state=self.state.snapshot(),
        )
        self.phase = EnginePhase.FINISHED
        logger.info("%s after %d turns", self.ending.describe(), self.turn_index)

    def _emit(self, output: EngineOutput) -> None:
        for sink in self._sinks:
            sink(output)


# =============================================================================
# Factory function for creating games
# =============================================================================


def create_game(
    heaps: Sequence[int],
    players: Sequence[Union[Player, tuple[str, Union[StrategyKind, str]]]],
    sinks: Optional[Sequence[EventSink]] = None,
) -> GameEngine:
    """Create a new game from heap counts and players.

    Args:
        heaps: Initial coin count per heap
        players: Player instances or (name, strategy kind) pairs, in turn order
        sinks: Optional event sinks

    Returns:
        Initialized GameEngine

    Raises:
        InvalidStateError: If the heaps or player list are invalid
        ValueError: If a strategy kind is unknown
    """
    state = new_state(len(heaps), list(heaps))
    roster = [p if isinstance(p, Player) else new_player(*p) for p in players]
    return GameEngine(state=state, players=roster, sinks=sinks)

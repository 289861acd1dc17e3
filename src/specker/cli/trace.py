"""Game trace logging for the Specker CLI.

Records every engine event to a JSON file for debugging and analysis:
- Heaps before each move
- Acting player and strategy
- The move applied
- The winner
"""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from specker.engine.game_engine import EngineOutput, GameEnding, TurnEvent
from specker.models.player import Player


@dataclass
class MoveRecord:
    """Record of a move."""

    source_heap: int
    source_amount: int
    target_heap: int
    target_amount: int


@dataclass
class TurnRecord:
    """Record of a complete turn."""

    turn_number: int
    state_before: list[int]
    player: str
    strategy: str
    move: MoveRecord
    description: str


@dataclass
class GameTrace:
    """Complete trace of a game."""

    game_id: str
    heaps: list[int]
    players: list[dict[str, str]]
    start_time: str
    end_time: str | None = None
    turns: list[TurnRecord] = field(default_factory=list)
    ending: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "game_id": self.game_id,
            "heaps": self.heaps,
            "players": self.players,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "turns": [asdict(t) for t in self.turns],
            "ending": self.ending,
        }


class TraceLogger:
    """Event sink that writes a game trace to disk.

    Subscribe an instance to a GameEngine; it saves after every event.
    """

    def __init__(
        self,
        heaps: list[int],
        players: list[Player],
        output_dir: Path | None = None,
    ):
        """Initialize trace logger.

        Args:
            heaps: Initial coin count per heap
            players: Players in turn order
            output_dir: Directory for trace files (default: ./traces)
        """
        self.output_dir = output_dir or Path("traces")
        self.output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        game_id = f"specker_{len(heaps)}h_{len(players)}p_{timestamp}"

        self.trace = GameTrace(
            game_id=game_id,
            heaps=list(heaps),
            players=[{"name": p.name, "strategy": p.strategy_kind.value} for p in players],
            start_time=datetime.now().isoformat(),
        )
        self._output_file = self.output_dir / f"{game_id}.json"

    @property
    def output_file(self) -> Path:
        """Path the trace is written to."""
        return self._output_file

    def __call__(self, output: EngineOutput) -> None:
        if isinstance(output, GameEnding):
            self.record_ending(output)
        else:
            self.record_turn(output)

    def record_turn(self, event: TurnEvent) -> None:
        """Record a complete turn.

        Args:
            event: TurnEvent emitted by the engine
        """
        move = event.move
        self.trace.turns.append(
            TurnRecord(
                turn_number=event.turn,
                state_before=list(event.state_before.coins),
                player=event.player_name,
                strategy=event.strategy_kind.value,
                move=MoveRecord(
                    source_heap=move.source_heap,
                    source_amount=move.source_amount,
                    target_heap=move.target_heap,
                    target_amount=move.target_amount,
                ),
                description=event.describe(),
            )
        )
        self.save()

    def record_ending(self, ending: GameEnding) -> None:
        """Record the game ending.

        Args:
            ending: GameEnding emitted by the engine
        """
        self.trace.end_time = datetime.now().isoformat()
        self.trace.ending = {
            "winner_index": ending.winner_index,
            "winner": ending.winner_name,
            "strategy": ending.winner_kind.value,
            "turns_played": ending.turns_played,
            "final_state": list(ending.final_state.coins),
        }
        self.save()

    def save(self) -> Path:
        """Save the trace to a JSON file.

        Returns:
            Path to the saved file
        """
        with open(self._output_file, "w") as f:
            json.dump(self.trace.to_dict(), f, indent=2)
        return self._output_file

    def get_summary(self) -> str:
        """Get a human-readable summary of the trace."""
        lines = [
            f"Game: {self.trace.game_id}",
            f"Heaps: {self.trace.heaps}",
            f"Turns played: {len(self.trace.turns)}",
        ]
        if self.trace.ending:
            lines.append(
                f"Winner: {self.trace.ending['winner']} ({self.trace.ending['strategy']})"
            )
        lines.append(f"Trace saved to: {self._output_file}")
        return "\n".join(lines)

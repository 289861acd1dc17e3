"""Specker CLI Application.

Console driver for Specker's game. Builds the heaps and players (from
arguments, environment or the classic defaults), runs the engine and
prints the transcript. Optionally writes a JSON trace and opens a
Textual-based transcript viewer.

Usage:
    specker
    specker --heaps 10 20 17 --player Tom:sneaky --player Mary:greedy
    specker --tui
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import DataTable, Footer, Header, Static

from specker import config
from specker.cli.trace import TraceLogger
from specker.engine.game_engine import EngineOutput, GameEnding, GameEngine, TurnEvent, create_game
from specker.exceptions import InvalidStateError
from specker.models.state import format_state

logger = logging.getLogger(__name__)


# =============================================================================
# Console transcript
# =============================================================================


class TranscriptPrinter:
    """Event sink that prints the classic transcript.

    Each turn prints the heaps and the move; the ending prints the final
    heaps and the winner.
    """

    def __init__(self, out: TextIO) -> None:
        self.out = out

    def __call__(self, output: EngineOutput) -> None:
        if isinstance(output, GameEnding):
            self._line(f"State: {format_state(output.final_state)}")
            self._line(output.describe())
        else:
            self._line(f"State: {format_state(output.state_before)}")
            self._line(output.describe())

    def _line(self, text: str) -> None:
        self.out.write(text + "\n")


# =============================================================================
# Theme and Styles
# =============================================================================

CSS = """
Screen {
    background: $surface;
}

#transcript {
    height: 1fr;
    border: solid green;
}

#winner {
    text-align: center;
    text-style: bold;
    color: $success;
    padding: 1 0;
}
"""


class TranscriptApp(App):
    """Textual viewer for a finished game."""

    TITLE = "Specker"
    SUB_TITLE = "Last mover wins"
    CSS = CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(self, outputs: Sequence[EngineOutput]) -> None:
        super().__init__()
        self.events = [o for o in outputs if isinstance(o, TurnEvent)]
        self.ending: Optional[GameEnding] = next(
            (o for o in outputs if isinstance(o, GameEnding)), None
        )

    @property
    def winner_text(self) -> str:
        """Banner shown under the transcript."""
        if self.ending is None:
            return "Game in progress"
        return self.ending.describe().upper()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield DataTable(id="transcript", zebra_stripes=True)
            yield Static(self.winner_text, id="winner")
        yield Footer()

    def on_mount(self) -> None:
        """Fill the transcript table."""
        table = self.query_one("#transcript", DataTable)
        table.cursor_type = "row"
        table.add_columns("Turn", "Heaps", "Player", "Move")
        for event in self.events:
            table.add_row(
                str(event.turn),
                format_state(event.state_before),
                f"{event.player_name} ({event.strategy_kind.label})",
                str(event.move),
            )


# =============================================================================
# Entry point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="specker",
        description="Simulate Specker's coin game between strategy players.",
    )
    parser.add_argument(
        "--heaps",
        type=int,
        nargs="+",
        metavar="COINS",
        help="Initial coin count per heap (default: 10 20 17 or $SPECKER_HEAPS)",
    )
    parser.add_argument(
        "--player",
        action="append",
        metavar="NAME:STRATEGY",
        help="Add a player; repeat in turn order. Strategies: greedy, spartan, sneaky, righteous",
    )
    parser.add_argument(
        "--trace-dir",
        type=Path,
        default=None,
        help="Write a JSON trace of the game to this directory (or $SPECKER_TRACE_DIR)",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Show the transcript in a terminal UI instead of printing it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: $SPECKER_LOG_LEVEL or WARNING)",
    )
    return parser


def setup_game(args: argparse.Namespace) -> GameEngine:
    """Create the engine described by parsed arguments and the environment.

    Raises:
        InvalidStateError: If the heaps or player list are invalid
        ValueError: If a heap list or player specification cannot be parsed
    """
    heaps = args.heaps if args.heaps else config.get_heaps()
    if args.player:
        players = [config.parse_player(p) for p in args.player]
    else:
        players = config.get_players()
    return create_game(heaps, players)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the CLI application.

    Returns:
        Exit code: 0 on success, 2 on an invalid game setup
    """
    args = build_parser().parse_args(argv)

    try:
        logging.basicConfig(
            level=args.log_level or config.get_log_level(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        game = setup_game(args)

        trace_dir = args.trace_dir or config.get_trace_dir()
        trace_logger: Optional[TraceLogger] = None
        if trace_dir is not None:
            trace_logger = TraceLogger(
                heaps=list(game.state.coins),
                players=game.players,
                output_dir=trace_dir,
            )
            game.subscribe(trace_logger)
    except (InvalidStateError, ValueError, OSError) as e:
        print(f"specker: error: {e}", file=sys.stderr)
        return 2

    if args.tui:
        TranscriptApp(game.run_to_completion()).run()
    else:
        game.subscribe(TranscriptPrinter(sys.stdout))
        game.run_to_completion()

    if trace_logger is not None:
        logger.info("%s", trace_logger.get_summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())

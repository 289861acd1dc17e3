"""Tests for the CLI application."""

import io
import json

import pytest
from textual.widgets import DataTable, Static

from specker.cli.app import TranscriptApp, TranscriptPrinter, main
from specker.cli.trace import TraceLogger
from specker.engine.game_engine import create_game

CLASSIC_OUTPUT = """\
State: 10, 20, 17
Sneaky player Tom takes 10 coins from heap 0 and puts nothing
State: 0, 20, 17
Spartan player Mary takes 1 coins from heap 1 and puts nothing
State: 0, 19, 17
Greedy player Alan takes 19 coins from heap 1 and puts nothing
State: 0, 0, 17
Righteous player Robin takes 9 coins from heap 2 and puts 8 coins to heap 2
State: 0, 0, 16
Sneaky player Tom takes 16 coins from heap 2 and puts nothing
State: 0, 0, 0
Sneaky player Tom wins
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of the driver defaults."""
    for var in ("SPECKER_HEAPS", "SPECKER_PLAYERS", "SPECKER_TRACE_DIR", "SPECKER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestTranscriptPrinter:
    """Tests for the console transcript sink."""

    def test_classic_transcript(self, classic_heaps, classic_players):
        out = io.StringIO()
        game = create_game(classic_heaps, classic_players, sinks=[TranscriptPrinter(out)])
        game.run_to_completion()
        assert out.getvalue() == CLASSIC_OUTPUT


class TestMain:
    """Tests for the argparse entry point."""

    def test_default_game(self, capsys):
        assert main([]) == 0
        assert capsys.readouterr().out == CLASSIC_OUTPUT

    def test_custom_heaps_and_players(self, capsys):
        code = main(["--heaps", "1", "--player", "Solo:greedy"])
        assert code == 0
        assert capsys.readouterr().out == (
            "State: 1\n"
            "Greedy player Solo takes 1 coins from heap 0 and puts nothing\n"
            "State: 0\n"
            "Greedy player Solo wins\n"
        )

    def test_players_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("SPECKER_HEAPS", "2,1")
        monkeypatch.setenv("SPECKER_PLAYERS", "Ann:spartan,Bob:sneaky")
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "Spartan player Ann takes 1 coins from heap 0 and puts nothing"
        assert lines[-1] == "Sneaky player Bob wins"

    def test_negative_heap_is_setup_error(self, capsys):
        assert main(["--heaps", "3", "-1"]) == 2
        assert "negative" in capsys.readouterr().err

    def test_all_empty_heaps_is_setup_error(self, capsys):
        assert main(["--heaps", "0", "0"]) == 2

    def test_unknown_strategy_is_setup_error(self, capsys):
        assert main(["--player", "Zed:lazy"]) == 2
        assert "Unknown strategy" in capsys.readouterr().err

    def test_malformed_player(self, capsys):
        assert main(["--player", "nocolon"]) == 2

    def test_writes_trace(self, tmp_path, capsys):
        assert main(["--trace-dir", str(tmp_path)]) == 0
        files = list(tmp_path.glob("*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text())
        assert data["heaps"] == [10, 20, 17]
        assert len(data["turns"]) == 5
        assert data["ending"]["winner"] == "Tom"

    def test_invalid_log_level_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("SPECKER_LOG_LEVEL", "verbose")
        assert main([]) == 2
        captured = capsys.readouterr()
        assert "Invalid log level" in captured.err
        assert captured.out == ""

    def test_trace_dir_is_a_file(self, tmp_path, capsys, monkeypatch):
        blocker = tmp_path / "traces"
        blocker.write_text("not a directory")
        monkeypatch.setenv("SPECKER_TRACE_DIR", str(blocker))
        assert main([]) == 2
        assert "specker: error:" in capsys.readouterr().err

    def test_trace_summary_logged(self, tmp_path, caplog):
        with caplog.at_level("INFO", logger="specker.cli.app"):
            assert main(["--trace-dir", str(tmp_path)]) == 0
        assert "Winner: Tom (sneaky)" in caplog.text
        assert "Trace saved to:" in caplog.text


class TestTraceLogger:
    """Tests for the JSON trace sink."""

    def test_records_turns_and_ending(self, tmp_path, classic_heaps, classic_players):
        trace = TraceLogger(classic_heaps, classic_players, output_dir=tmp_path)
        game = create_game(classic_heaps, classic_players, sinks=[trace])
        game.run_to_completion()

        data = json.loads(trace.output_file.read_text())
        assert data["players"][3] == {"name": "Robin", "strategy": "righteous"}
        robin_turn = data["turns"][3]
        assert robin_turn["state_before"] == [0, 0, 17]
        assert robin_turn["move"] == {
            "source_heap": 2,
            "source_amount": 9,
            "target_heap": 2,
            "target_amount": 8,
        }
        assert data["ending"]["winner_index"] == 0
        assert data["ending"]["turns_played"] == 5
        assert data["end_time"] is not None
        assert "Winner: Tom (sneaky)" in trace.get_summary()


@pytest.mark.tui
class TestTranscriptApp:
    """Pilot tests for the Textual viewer."""

    @pytest.mark.asyncio
    async def test_shows_transcript_and_winner(self, classic_heaps, classic_players):
        outputs = create_game(classic_heaps, classic_players).run_to_completion()
        app = TranscriptApp(outputs)
        async with app.run_test() as pilot:
            table = app.query_one("#transcript", DataTable)
            assert table.row_count == 5
            assert table.get_row_at(3)[2] == "Robin (Righteous)"
            assert app.query_one("#winner", Static) is not None
            assert app.winner_text == "SNEAKY PLAYER TOM WINS"
            await pilot.press("q")

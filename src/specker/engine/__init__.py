"""Game engine module for Specker.

Usage:
    from specker.engine import create_game

    game = create_game([10, 20, 17], [("Tom", "sneaky"), ("Mary", "spartan")])

    # Play turn by turn
    event = game.step()
    print(event.describe())

    # Or play out the rest
    for output in game.run_to_completion():
        print(output.describe())
"""

from specker.engine.game_engine import (
    EnginePhase,
    EngineOutput,
    EventSink,
    GameEnding,
    GameEngine,
    TurnEvent,
    create_game,
)

__all__ = [
    "GameEngine",
    "EnginePhase",
    "TurnEvent",
    "GameEnding",
    "EngineOutput",
    "EventSink",
    "create_game",
]

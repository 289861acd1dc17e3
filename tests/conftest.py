"""Shared pytest fixtures and markers for all tests."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "tui: marks Textual pilot tests"
    )


@pytest.fixture
def classic_heaps():
    """The classic three-heap setup."""
    return [10, 20, 17]


@pytest.fixture
def classic_players():
    """Tom, Mary, Alan and Robin with one strategy each."""
    from specker.models.player import StrategyKind, new_player

    return [
        new_player("Tom", StrategyKind.SNEAKY),
        new_player("Mary", StrategyKind.SPARTAN),
        new_player("Alan", StrategyKind.GREEDY),
        new_player("Robin", StrategyKind.RIGHTEOUS),
    ]


@pytest.fixture
def sample_game_state(classic_heaps):
    """Provide the classic game state for testing."""
    from specker.models.state import new_state

    return new_state(len(classic_heaps), classic_heaps)

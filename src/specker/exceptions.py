"""Error taxonomy for Specker.

Every error is raised synchronously where it is detected and is never
retried. None of them subclass ValueError, so they pass through pydantic
validators unwrapped.
"""


class SpeckerError(Exception):
    """Base class for all Specker errors."""


class InvalidStateError(SpeckerError):
    """Malformed construction input (heap count mismatch, negative coins, no players)."""


class IllegalMoveError(SpeckerError):
    """A move violates the legality rules of GameState.apply."""

    def __init__(self, message: str, move=None):
        super().__init__(message)
        self.move = move


class InvalidHeapError(SpeckerError):
    """A heap index outside [0, heap_count)."""

    def __init__(self, index: int, heap_count: int):
        super().__init__(f"invalid heap {index} (heap count is {heap_count})")
        self.index = index
        self.heap_count = heap_count


class NoLegalMoveError(SpeckerError):
    """A strategy was asked to move on a terminal state."""

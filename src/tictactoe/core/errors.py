"""Error taxonomy for rejected moves and invalid requests.

The game engine absorbs all of these at its API boundary: a rejected
request never changes state and is never surfaced to the player.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for every rejected game operation."""


class OutOfRangeIndex(GameError, IndexError):
    """Cell index outside 0–8."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Cell index out of range: {index!r}")
        self.index = index


class CellOccupied(GameError):
    """Move targets a cell that already holds a marker."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Cell {index} is already occupied")
        self.index = index


class InvalidState(GameError):
    """Operation is not allowed in the current game state."""

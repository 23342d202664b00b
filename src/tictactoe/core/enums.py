"""Core enumerations for the tic-tac-toe domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Marker(StrEnum):
    """A player's symbol on the board."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def opposite(self) -> Marker:
        return Marker.O if self is Marker.X else Marker.X


class Mode(StrEnum):
    """Who sits on the O side of the board."""

    HUMAN_VS_HUMAN = "2P"
    HUMAN_VS_AI = "VS_AI"


class GameResult(IntEnum):
    """Outcome of a board position."""

    IN_PROGRESS = 0
    X_WINS = 1
    O_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, marker: Marker) -> GameResult:
        return cls.X_WINS if marker is Marker.X else cls.O_WINS

    @property
    def winner(self) -> Marker | None:
        if self == GameResult.X_WINS:
            return Marker.X
        if self == GameResult.O_WINS:
            return Marker.O
        return None

"""Shared strategist models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.enums import Marker
    from tictactoe.core.types import Index


class MoveRule(IntEnum):
    """Heuristic rule that produced a move, in priority order."""

    WIN = auto()
    BLOCK = auto()
    CENTER = auto()
    CORNER = auto()
    ANY = auto()


@dataclass(slots=True, frozen=True)
class Decision:
    """Move chosen by a strategist and the rule behind it."""

    index: Index
    rule: MoveRule


class IStrategist(Protocol):
    """Protocol for move-selection strategies used by the game layer."""

    def choose_move(
        self,
        board: Board,
        ai_marker: Marker,
        opponent_marker: Marker,
    ) -> Index: ...

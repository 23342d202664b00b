"""Core domain layer — pure tic-tac-toe logic with zero external dependencies.

Quick start::

    from tictactoe.core import Board, Marker, Rules

    board = Board.from_notation("XXX.OO...")
    assert Rules.winner(board) is Marker.X
"""

from tictactoe.core.board import Board
from tictactoe.core.enums import GameResult, Marker, Mode
from tictactoe.core.errors import CellOccupied, GameError, InvalidState, OutOfRangeIndex
from tictactoe.core.rules import Rules
from tictactoe.core.types import (
    BOARD_SIZE,
    CELL_COUNT,
    CENTER,
    CORNERS,
    WIN_LINES,
    Cell,
    Index,
    col_of,
    is_valid_index,
    make_index,
    row_of,
)

__all__ = [
    # Enums
    "GameResult",
    "Marker",
    "Mode",
    # Errors
    "CellOccupied",
    "GameError",
    "InvalidState",
    "OutOfRangeIndex",
    # Types / helpers
    "BOARD_SIZE",
    "CELL_COUNT",
    "CENTER",
    "CORNERS",
    "WIN_LINES",
    "Cell",
    "Index",
    "col_of",
    "is_valid_index",
    "make_index",
    "row_of",
    # Domain objects
    "Board",
    "Rules",
]

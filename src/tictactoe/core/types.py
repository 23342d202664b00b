"""Cell index alias and board geometry.

Board layout (row-major)::

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

from __future__ import annotations

from typing import TypeAlias

from tictactoe.core.enums import Marker

Index: TypeAlias = int  # 0–8
Cell: TypeAlias = Marker | None  # None is an empty cell

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

CENTER: Index = 4
CORNERS: tuple[Index, ...] = (0, 2, 6, 8)

WIN_LINES: tuple[tuple[Index, Index, Index], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),  # rows
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),  # columns
    (0, 4, 8),
    (2, 4, 6),  # diagonals
)


def is_valid_index(index: int) -> bool:
    """Check whether integer is a valid cell index."""
    return 0 <= index < CELL_COUNT


def row_of(index: Index) -> int:
    return index // BOARD_SIZE


def col_of(index: Index) -> int:
    return index % BOARD_SIZE


def make_index(row: int, col: int) -> Index:
    """Create a cell index from row and column (both 0–2)."""
    return row * BOARD_SIZE + col

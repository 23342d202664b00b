"""Board - marker placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tictactoe.core.enums import Marker
from tictactoe.core.errors import CellOccupied, OutOfRangeIndex
from tictactoe.core.types import CELL_COUNT, Cell, Index, is_valid_index

_EMPTY_CHARS = frozenset("._- ")


class Board:
    """Mutable 9-cell board.

    Cells are only ever filled through :meth:`place` and only ever emptied
    all at once through :meth:`clear`.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell] | None = None) -> None:
        if cells is None:
            self._cells: list[Cell] = [None] * CELL_COUNT
            return
        self._cells = list(cells)
        if len(self._cells) != CELL_COUNT:
            raise ValueError(
                f"Board needs exactly {CELL_COUNT} cells, got {len(self._cells)}"
            )

    # -- Element access -----------------------------------------------------

    def __getitem__(self, index: Index) -> Cell:
        if not is_valid_index(index):
            raise OutOfRangeIndex(index)
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.notation()!r})"

    def __str__(self) -> str:
        glyphs = [str(c) if c is not None else " " for c in self._cells]
        rows = [
            " | ".join(glyphs[start : start + 3]) for start in range(0, CELL_COUNT, 3)
        ]
        return "\n---------\n".join(rows)

    # -- Mutation -----------------------------------------------------------

    def place(self, index: Index, marker: Marker) -> None:
        """Put *marker* on an empty cell.

        Raises:
            OutOfRangeIndex: *index* is not in 0–8.
            CellOccupied: the cell already holds a marker.
        """
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not is_valid_index(index)
        ):
            raise OutOfRangeIndex(index)
        if self._cells[index] is not None:
            raise CellOccupied(index)
        self._cells[index] = marker

    def clear(self) -> None:
        self._cells = [None] * CELL_COUNT

    def copy(self) -> Board:
        return Board(self._cells)

    # -- Queries ------------------------------------------------------------

    def is_empty(self, index: Index) -> bool:
        return self[index] is None

    def empty_indices(self) -> list[Index]:
        """Empty cells in ascending index order."""
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def count(self, marker: Marker) -> int:
        return sum(1 for cell in self._cells if cell is marker)

    def cells(self) -> tuple[Cell, ...]:
        """Immutable snapshot of all nine cells."""
        return tuple(self._cells)

    # -- Notation -----------------------------------------------------------

    def notation(self) -> str:
        """Compact row-major text form, e.g. ``"XX.OO...."``."""
        return "".join(str(c) if c is not None else "." for c in self._cells)

    @classmethod
    def from_notation(cls, text: str) -> Board:
        """Parse the form produced by :meth:`notation`.

        ``.``, ``_``, ``-`` and space all denote an empty cell.
        """
        cells: list[Cell] = []
        for char in text:
            if char in _EMPTY_CHARS:
                cells.append(None)
                continue
            try:
                cells.append(Marker(char.upper()))
            except ValueError:
                raise ValueError(f"Invalid cell character: {char!r}") from None
        return cls(cells)

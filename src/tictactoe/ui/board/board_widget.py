"""BoardWidget — 3x3 grid of clickable cells."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QMouseEvent
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tictactoe.core.types import BOARD_SIZE, CELL_COUNT, Cell, Index, make_index
from tictactoe.ui.styles.theme import cell_style


class BoardWidget(QWidget):
    """Displays the board and turns clicks into cell indices.

    While moves are accepted, a click on a cell emits ``cell_clicked``.
    After a finished game any click on the board emits
    ``restart_requested`` instead.

    Signals:
        cell_clicked(int): Index 0–8 of the clicked cell.
        restart_requested(): Board clicked while a finished game is shown.
    """

    cell_clicked = pyqtSignal(int)
    restart_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._accepts_moves = False
        self._restart_on_click = False
        self._cells: list[Cell] = [None] * CELL_COUNT
        self._buttons: list[QPushButton] = []

        layout = QGridLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                index = make_index(row, col)
                btn = QPushButton()
                btn.setObjectName(f"cell{index}")
                btn.setMinimumSize(96, 96)
                btn.setSizePolicy(
                    QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
                )
                btn.setStyleSheet(cell_style(None))
                btn.clicked.connect(lambda _checked=False, i=index: self._on_cell(i))
                layout.addWidget(btn, row, col)
                self._buttons.append(btn)

    # ── Public API ───────────────────────────────────────────────────────

    def set_cells(self, cells: Sequence[Cell]) -> None:
        """Show *cells* (nine entries, row-major)."""
        self._cells = list(cells)
        for btn, cell in zip(self._buttons, self._cells, strict=True):
            btn.setText(str(cell) if cell is not None else "")
            btn.setStyleSheet(cell_style(cell))

    def set_accepts_moves(self, accepts: bool) -> None:
        self._accepts_moves = accepts
        self._update_cursor()

    def set_restart_on_click(self, enabled: bool) -> None:
        self._restart_on_click = enabled
        self._update_cursor()

    def cell_text(self, index: Index) -> str:
        return self._buttons[index].text()

    def button(self, index: Index) -> QPushButton:
        return self._buttons[index]

    @property
    def accepts_moves(self) -> bool:
        return self._accepts_moves

    # ── Events ───────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if self._restart_on_click:
            self.restart_requested.emit()
            return
        super().mousePressEvent(event)

    def _on_cell(self, index: Index) -> None:
        if self._restart_on_click:
            self.restart_requested.emit()
            return
        if self._accepts_moves and self._cells[index] is None:
            self.cell_clicked.emit(index)

    def _update_cursor(self) -> None:
        shape = (
            Qt.CursorShape.PointingHandCursor
            if self._restart_on_click
            else Qt.CursorShape.ArrowCursor
        )
        self.setCursor(shape)
        for btn in self._buttons:
            btn.setCursor(shape)

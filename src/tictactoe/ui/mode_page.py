"""ModeSelectionPage — the first screen: pick who plays O."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from tictactoe.core.enums import Mode
from tictactoe.ui.i18n import t


class ModeSelectionPage(QWidget):
    """Title and one button per game mode.

    Signals:
        mode_selected(Mode): The chosen mode.
    """

    mode_selected = pyqtSignal(object)  # Mode

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addStretch()

        self._title = QLabel()
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title.setFont(QFont("Helvetica Neue", 18, QFont.Weight.Bold))
        layout.addWidget(self._title)

        self._btn_two_players = QPushButton()
        self._btn_two_players.setMinimumHeight(48)
        self._btn_two_players.clicked.connect(
            lambda: self.mode_selected.emit(Mode.HUMAN_VS_HUMAN)
        )
        layout.addWidget(self._btn_two_players)

        self._btn_vs_computer = QPushButton()
        self._btn_vs_computer.setMinimumHeight(48)
        self._btn_vs_computer.clicked.connect(
            lambda: self.mode_selected.emit(Mode.HUMAN_VS_AI)
        )
        layout.addWidget(self._btn_vs_computer)

        layout.addStretch()
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.mode_title)
        self._btn_two_players.setText(s.mode_two_players)
        self._btn_vs_computer.setText(s.mode_vs_computer)

    def button_for(self, mode: Mode) -> QPushButton:
        if mode == Mode.HUMAN_VS_AI:
            return self._btn_vs_computer
        return self._btn_two_players

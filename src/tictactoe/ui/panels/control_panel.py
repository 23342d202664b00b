"""ControlPanel — Back and Reset Score buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from tictactoe.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons shown under the board."""

    back_clicked = pyqtSignal()
    reset_score_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        self._btn_back = QPushButton()
        self._btn_back.setFont(btn_font)
        self._btn_back.setMinimumHeight(36)
        self._btn_back.clicked.connect(self.back_clicked)
        layout.addWidget(self._btn_back)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.setStyleSheet(
            "QPushButton { background-color: #6b2020; }"
            "QPushButton:hover { background-color: #8b2020; }"
        )
        self._btn_reset.clicked.connect(self.reset_score_clicked)
        layout.addWidget(self._btn_reset)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_back.setText(s.btn_back)
        self._btn_reset.setText(s.btn_reset_score)

    @property
    def back_button(self) -> QPushButton:
        return self._btn_back

    @property
    def reset_button(self) -> QPushButton:
        return self._btn_reset

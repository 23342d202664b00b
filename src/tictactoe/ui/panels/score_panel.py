"""ScorePanel — player labels and win counts for the current mode."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from tictactoe.core.enums import Marker, Mode
from tictactoe.game.scoreboard import ScoreSnapshot
from tictactoe.ui.i18n import t


class _PlayerScore(QWidget):
    """Label above a score for one marker."""

    def __init__(self, marker: Marker, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._marker = marker

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._label.setFont(QFont("Helvetica Neue", 10))
        layout.addWidget(self._label)

        self._value = QLabel("0")
        self._value.setObjectName("scoreValue")
        self._value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._value)

    def set_label(self, text: str) -> None:
        self._label.setText(f"{text} ({self._marker})")

    def set_value(self, value: int) -> None:
        self._value.setText(str(value))

    def label_text(self) -> str:
        return self._label.text()

    def value_text(self) -> str:
        return self._value.text()


class ScorePanel(QWidget):
    """Two-column score display. Labels depend on the game mode."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._mode: Mode | None = None

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(24)

        self._x_score = _PlayerScore(Marker.X)
        self._o_score = _PlayerScore(Marker.O)
        layout.addWidget(self._x_score)
        layout.addWidget(self._o_score)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        if self._mode == Mode.HUMAN_VS_AI:
            self._x_score.set_label(s.label_you)
            self._o_score.set_label(s.label_computer)
        else:
            self._x_score.set_label(s.label_player1)
            self._o_score.set_label(s.label_player2)

    def set_mode(self, mode: Mode | None) -> None:
        self._mode = mode
        self.retranslate_ui()

    def set_scores(self, scores: ScoreSnapshot) -> None:
        self._x_score.set_value(scores.x)
        self._o_score.set_value(scores.o)

    def score_text(self, marker: Marker) -> str:
        panel = self._x_score if marker is Marker.X else self._o_score
        return panel.value_text()

    def label_text(self, marker: Marker) -> str:
        panel = self._x_score if marker is Marker.X else self._o_score
        return panel.label_text()

"""Visual theme constants and QSS styles."""

from __future__ import annotations

from PyQt6.QtGui import QColor

from tictactoe.core.enums import Marker

MARKER_COLORS: dict[Marker, QColor] = {
    Marker.X: QColor(231, 76, 60),  # red
    Marker.O: QColor(52, 152, 219),  # blue
}

CELL_STYLE = """
QPushButton {{
    background: #1e1e1e;
    color: {color};
    border: 2px solid #555;
    border-radius: 6px;
    font-size: 42px;
    font-weight: bold;
}}
QPushButton:hover {{
    background: #2f2f2f;
}}
"""


def cell_style(marker: Marker | None) -> str:
    """Stylesheet for a board cell holding *marker*."""
    color = MARKER_COLORS[marker].name() if marker is not None else "#e0e0e0"
    return CELL_STYLE.format(color=color)


APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#statusMessage {
    font-size: 16px;
    padding: 6px;
}

QLabel#scoreValue {
    font-size: 28px;
    font-weight: bold;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""

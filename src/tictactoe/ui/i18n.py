"""Internationalisation strings for the tic-tac-toe UI.

Usage::

    from tictactoe.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_back)              # "Назад"
    print(t().status_turn.format(marker="X"))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    window_title: str

    # ── Mode selection page ──────────────────────────────────────────────
    mode_title: str
    mode_two_players: str
    mode_vs_computer: str

    # ── Score panel ──────────────────────────────────────────────────────
    label_player1: str
    label_player2: str
    label_you: str
    label_computer: str

    # ── Controls ─────────────────────────────────────────────────────────
    btn_back: str
    btn_reset_score: str

    # ── Status line ──────────────────────────────────────────────────────
    status_turn: str  # "Player {marker}'s turn."
    status_thinking: str
    status_wins: str  # "{name} Wins!"
    status_draw: str
    status_play_again: str  # appended after a win/draw
    status_score_reset: str  # prefix before the turn message

    # Winner names
    winner_you: str
    winner_computer: str
    winner_player1: str
    winner_player2: str


_EN = Strings(
    window_title="Tic-Tac-Toe",
    mode_title="Choose a game mode",
    mode_two_players="Player vs Player",
    mode_vs_computer="Player vs Computer",
    label_player1="PLAYER 1",
    label_player2="PLAYER 2",
    label_you="YOU",
    label_computer="COMPUTER",
    btn_back="Back",
    btn_reset_score="Reset Score",
    status_turn="Player {marker}'s turn.",
    status_thinking="Computer is thinking...",
    status_wins="{name} Wins!",
    status_draw="It's a Draw!",
    status_play_again=" Click the board to play again.",
    status_score_reset="Score reset. ",
    winner_you="You (X)",
    winner_computer="Computer (O)",
    winner_player1="Player 1 (X)",
    winner_player2="Player 2 (O)",
)

_RU = Strings(
    window_title="Крестики-нолики",
    mode_title="Выберите режим игры",
    mode_two_players="Игрок против игрока",
    mode_vs_computer="Игрок против компьютера",
    label_player1="ИГРОК 1",
    label_player2="ИГРОК 2",
    label_you="ВЫ",
    label_computer="КОМПЬЮТЕР",
    btn_back="Назад",
    btn_reset_score="Сбросить счёт",
    status_turn="Ход игрока {marker}.",
    status_thinking="Компьютер думает...",
    status_wins="{name} побеждает!",
    status_draw="Ничья!",
    status_play_again=" Нажмите на поле, чтобы сыграть ещё.",
    status_score_reset="Счёт сброшен. ",
    winner_you="Вы (X)",
    winner_computer="Компьютер (O)",
    winner_player1="Игрок 1 (X)",
    winner_player2="Игрок 2 (O)",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)

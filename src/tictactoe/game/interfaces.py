"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameEngine depends on these
ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from tictactoe.core.enums import Marker, Mode

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.types import Index
    from tictactoe.game.state import MoveResult, RenderState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for one engine."""

    MODE_SELECTION = auto()  # no mode chosen yet
    AWAITING_MOVE = auto()  # a human is to move
    THINKING = auto()  # the computer's turn is due
    GAME_OVER = auto()


class Outcome(IntEnum):
    """Result of a single move request."""

    CONTINUE = auto()
    WIN = auto()
    DRAW = auto()
    REJECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def marker(self) -> Marker: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> Index | None:
        """Pick a move on *board*.

        Humans answer ``None`` (their moves arrive from the UI).
        """


class IGameEngine(ABC):
    """Interface for the game orchestrator used by the presentation layer."""

    @abstractmethod
    def select_mode(self, mode: Mode) -> RenderState:
        """Switch to *mode* and start a game in it."""

    @abstractmethod
    def start_game(self, mode: Mode) -> RenderState:
        """Reset the board and begin a new game in *mode*."""

    @abstractmethod
    def apply_move(self, index: Index, player: Marker | None = None) -> MoveResult:
        """Place the marker of *player* (default: the side to move) on *index*.

        Rejected without side effects when *index* is outside 0–8, the cell
        is taken, no game is active, or *player* is given and is not the
        side to move.
        """

    @abstractmethod
    def play_ai_turn(self) -> MoveResult:
        """Let the computer answer the human's last move."""

    @abstractmethod
    def reset_scores(self) -> RenderState:
        """Zero the current mode's scores."""

    @abstractmethod
    def go_back(self) -> RenderState:
        """Leave the current mode and return to mode selection."""

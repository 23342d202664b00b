"""Game session — board, turn and phase of the game in progress."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tictactoe.core.board import Board
from tictactoe.core.enums import GameResult, Marker, Mode
from tictactoe.core.rules import Rules
from tictactoe.game.interfaces import GamePhase, Outcome

if TYPE_CHECKING:
    from tictactoe.core.errors import GameError
    from tictactoe.core.types import Cell, Index
    from tictactoe.game.scoreboard import ScoreSnapshot


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    index: Index
    marker: Marker


@dataclass(frozen=True, slots=True)
class MoveResult:
    """What happened after a move request.

    ``ai_turn_due`` tells the caller that the computer should move next;
    the engine never plays that move on its own.
    """

    accepted: bool
    outcome: Outcome
    next_player: Marker
    scores: ScoreSnapshot
    index: Index | None = None
    winner: Marker | None = None
    ai_turn_due: bool = False
    error: GameError | None = None


@dataclass(frozen=True, slots=True)
class RenderState:
    """Read-only snapshot handed to the presentation layer."""

    board: tuple[Cell, ...]
    current_player: Marker
    active: bool
    scores: ScoreSnapshot
    mode: Mode | None
    phase: GamePhase
    winner: Marker | None = None

    @property
    def is_mode_selection(self) -> bool:
        return self.mode is None


@dataclass
class GameSession:
    """Live state of one game.

    This is a pure data/logic class — no timers, no UI.  Turn policy
    depends on the mode and lives in :class:`~tictactoe.game.engine.GameEngine`.
    """

    board: Board = field(default_factory=Board)
    current_player: Marker = Marker.X
    mode: Mode | None = None
    active: bool = False
    phase: GamePhase = GamePhase.MODE_SELECTION
    result: GameResult = GameResult.IN_PROGRESS
    move_history: list[MoveRecord] = field(default_factory=list)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, mode: Mode) -> None:
        """Initialise (or reset) a game in *mode*."""
        self.mode = mode
        self.board.clear()
        self.current_player = Marker.X
        self.active = True
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    def close(self) -> None:
        """Drop the mode and the board; back to mode selection."""
        self.mode = None
        self.board.clear()
        self.current_player = Marker.X
        self.active = False
        self.phase = GamePhase.MODE_SELECTION
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, index: Index, marker: Marker) -> Outcome:
        """Place *marker* and evaluate the position.

        Caller is responsible for checking that the session is active and
        that it is *marker*'s turn; ``Board.place`` guards the cell itself.
        """
        self.board.place(index, marker)
        self.move_history.append(MoveRecord(index, marker))

        self.result = Rules.game_result(self.board)
        if self.result == GameResult.IN_PROGRESS:
            return Outcome.CONTINUE

        self.active = False
        self.phase = GamePhase.GAME_OVER
        if self.result == GameResult.DRAW:
            return Outcome.DRAW
        return Outcome.WIN

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def winner(self) -> Marker | None:
        return self.result.winner

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of markers placed."""
        return len(self.move_history)

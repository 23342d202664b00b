"""GameEngine — the central orchestrator of a tic-tac-toe session.

Coordinates: players, GameSession, per-mode ScoreBook, strategist.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tictactoe.core.enums import Marker, Mode
from tictactoe.core.errors import GameError, InvalidState
from tictactoe.engine import DefaultStrategist
from tictactoe.game.interfaces import GamePhase, IGameEngine, IPlayer, Outcome
from tictactoe.game.player import players_for_mode
from tictactoe.game.scoreboard import ScoreBook, ScoreSnapshot
from tictactoe.game.state import GameSession, MoveResult, RenderState

if TYPE_CHECKING:
    from tictactoe.core.types import Index
    from tictactoe.engine.search import IStrategist

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
GameOverCallback = Callable[[Outcome, "Marker | None"], None]  # outcome, winner
PhaseCallback = Callable[[GamePhase], None]
ScoresCallback = Callable[[ScoreSnapshot], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_scores_changed: list[ScoresCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine(IGameEngine):
    """Runs games in either mode, keeps score per mode, notifies listeners.

    Every operation returns a fresh snapshot; nothing is shared between
    engine instances, so several may coexist.

    Illegal requests (bad index, occupied cell, finished game, wrong turn)
    are absorbed: they leave the state untouched and come back as a
    ``MoveResult`` with ``accepted=False``.

    In human-vs-AI mode the engine never moves for the computer by itself.
    ``apply_move`` reports ``ai_turn_due`` and the caller decides when to
    call :meth:`play_ai_turn`.
    """

    __slots__ = (
        "_session",
        "_scores",
        "_players",
        "_strategist",
        "events",
    )

    def __init__(self, strategist: IStrategist | None = None) -> None:
        self._session = GameSession()
        self._scores = ScoreBook()
        self._players: dict[Marker, IPlayer] = {}
        self._strategist: IStrategist = (
            strategist if strategist is not None else DefaultStrategist()
        )
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def mode(self) -> Mode | None:
        return self._session.mode

    @property
    def phase(self) -> GamePhase:
        return self._session.phase

    @property
    def strategist(self) -> IStrategist:
        return self._strategist

    @property
    def scores(self) -> ScoreSnapshot:
        """Scores of the current mode."""
        return self._scores.snapshot(self._session.mode)

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._session.current_player)

    def player(self, marker: Marker) -> IPlayer | None:
        return self._players.get(marker)

    def scores_for(self, mode: Mode) -> ScoreSnapshot:
        return self._scores.snapshot(mode)

    def render_state(self) -> RenderState:
        s = self._session
        return RenderState(
            board=s.board.cells(),
            current_player=s.current_player,
            active=s.active,
            scores=self.scores,
            mode=s.mode,
            phase=s.phase,
            winner=s.winner,
        )

    # ── Lifecycle ────────────────────────────────────────────────────────

    def select_mode(self, mode: Mode) -> RenderState:
        previous = self._session.mode
        if previous is not None:
            self._commit_scores(previous)
        _LOGGER.info("Mode selected: %s", mode.name)
        return self.start_game(mode)

    def start_game(self, mode: Mode) -> RenderState:
        self._players = players_for_mode(mode, self._strategist)
        self._session.setup(mode)
        _LOGGER.debug("New game in %s, scores %s", mode.name, self.scores)
        self._emit_scores()
        self._emit_phase(self._session.phase)
        return self.render_state()

    def restart(self) -> RenderState:
        """Start another game in the current mode (no-op without a mode)."""
        mode = self._session.mode
        if mode is None:
            return self.render_state()
        return self.start_game(mode)

    def reset_scores(self) -> RenderState:
        mode = self._session.mode
        self._scores.board_for(mode).reset()
        _LOGGER.info(
            "Scores reset for %s", mode.name if mode is not None else "mode selection"
        )
        if mode is None:
            return self.go_back()
        return self.start_game(mode)

    def go_back(self) -> RenderState:
        mode = self._session.mode
        if mode is not None:
            self._commit_scores(mode)
        self._players = {}
        self._session.close()
        self._emit_scores()
        self._emit_phase(GamePhase.MODE_SELECTION)
        return self.render_state()

    # ── Moves ────────────────────────────────────────────────────────────

    def apply_move(self, index: Index, player: Marker | None = None) -> MoveResult:
        marker = player if player is not None else self._session.current_player
        try:
            self._check_turn(marker)
            outcome = self._session.apply_move(index, marker)
        except GameError as exc:
            _LOGGER.debug("Rejected move %r by %s: %s", index, marker, exc)
            return self._rejected(exc, index)

        if outcome == Outcome.WIN:
            self._scores.board_for(self._session.mode).record_win(marker)
            _LOGGER.info("%s wins: %s", marker, self._session.board.notation())
        elif outcome == Outcome.DRAW:
            _LOGGER.info("Draw: %s", self._session.board.notation())
        else:
            self._advance_turn(marker)

        result = MoveResult(
            accepted=True,
            outcome=outcome,
            next_player=self._session.current_player,
            scores=self.scores,
            index=index,
            winner=marker if outcome == Outcome.WIN else None,
            ai_turn_due=self._session.phase == GamePhase.THINKING,
        )
        self._emit_move(result)
        if outcome != Outcome.CONTINUE:
            if outcome == Outcome.WIN:
                self._emit_scores()
            self._emit_game_over(outcome, result.winner)
        else:
            self._emit_phase(self._session.phase)
        return result

    def play_ai_turn(self) -> MoveResult:
        ai = self.current_player
        if self._session.phase != GamePhase.THINKING or ai is None or ai.is_human:
            exc = InvalidState("No computer turn is due")
            _LOGGER.debug("Rejected AI turn: %s", exc)
            return self._rejected(exc)

        try:
            index = ai.request_move(self._session.board)
        except GameError as exc:
            _LOGGER.debug("AI could not move: %s", exc)
            return self._rejected(exc)
        if index is None:
            return self._rejected(InvalidState(f"{ai.name} returned no move"))
        return self.apply_move(index, ai.marker)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _check_turn(self, marker: Marker) -> None:
        if not self._session.active:
            raise InvalidState("No game in progress")
        if marker != self._session.current_player:
            raise InvalidState(f"It is {self._session.current_player}'s turn")

    def _advance_turn(self, mover: Marker) -> None:
        """Hand the turn to the other side after a non-terminal move."""
        nxt = mover.opposite
        self._session.current_player = nxt
        next_player = self._players.get(nxt)
        if next_player is not None and not next_player.is_human:
            self._session.phase = GamePhase.THINKING
        else:
            self._session.phase = GamePhase.AWAITING_MOVE

    def _commit_scores(self, mode: Mode) -> None:
        # Scores are recorded as wins happen; nothing to roll back or copy.
        _LOGGER.debug(
            "Leaving %s with scores %s", mode.name, self._scores.snapshot(mode)
        )

    def _rejected(self, exc: GameError, index: Index | None = None) -> MoveResult:
        return MoveResult(
            accepted=False,
            outcome=Outcome.REJECTED,
            next_player=self._session.current_player,
            scores=self.scores,
            index=index,
            ai_turn_due=self._session.phase == GamePhase.THINKING,
            error=exc,
        )

    def _emit_move(self, result: MoveResult) -> None:
        for cb in self.events.on_move:
            cb(result)

    def _emit_game_over(self, outcome: Outcome, winner: Marker | None) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome, winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_scores(self) -> None:
        snapshot = self.scores
        for cb in self.events.on_scores_changed:
            cb(snapshot)

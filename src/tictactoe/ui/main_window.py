"""MainWindow — top-level window: mode selection page and game page."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from tictactoe.core.enums import Marker, Mode
from tictactoe.engine import HeuristicStrategist
from tictactoe.game.engine import GameEngine
from tictactoe.game.interfaces import GamePhase, Outcome
from tictactoe.game.scoreboard import ScoreSnapshot
from tictactoe.game.state import MoveResult, RenderState
from tictactoe.ui.ai_turn import AITurnScheduler
from tictactoe.ui.board.board_widget import BoardWidget
from tictactoe.ui.i18n import set_language, t
from tictactoe.ui.mode_page import ModeSelectionPage
from tictactoe.ui.panels.control_panel import ControlPanel
from tictactoe.ui.panels.score_panel import ScorePanel
from tictactoe.ui.settings import AppSettings

_MODE_PAGE = 0
_GAME_PAGE = 1


class MainWindow(QMainWindow):
    """Main application window.

    Holds no game rules: every click is forwarded to the :class:`GameEngine`
    and the window re-renders from what the engine reports.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        engine: GameEngine | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        set_language(self._settings.language)

        self.setMinimumSize(420, 560)
        self.resize(480, 640)

        self._engine = (
            engine
            if engine is not None
            else GameEngine(HeuristicStrategist.seeded(self._settings.ai_seed))
        )
        self._ai_turn = AITurnScheduler(
            engine=self._engine,
            on_result=self._on_ai_result,
            parent=self,
            delay_ms=self._settings.ai_delay_ms,
        )

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()
        self.retranslate_ui()

        self._render(self._engine.render_state())

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._mode_page = ModeSelectionPage()
        self._stack.addWidget(self._mode_page)

        game_page = QWidget()
        layout = QVBoxLayout(game_page)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self._score_panel = ScorePanel()
        layout.addWidget(self._score_panel)

        self._status_label = QLabel()
        self._status_label.setObjectName("statusMessage")
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        self._board = BoardWidget()
        layout.addWidget(self._board, stretch=1)

        self._control_panel = ControlPanel()
        layout.addWidget(self._control_panel)

        self._stack.addWidget(game_page)

    def _connect_signals(self) -> None:
        self._mode_page.mode_selected.connect(self._on_mode_selected)
        self._board.cell_clicked.connect(self._on_cell_clicked)
        self._board.restart_requested.connect(self._on_restart_requested)
        self._control_panel.back_clicked.connect(self._on_back)
        self._control_panel.reset_score_clicked.connect(self._on_reset_score)

    def _connect_game_events(self) -> None:
        events = self._engine.events
        events.on_move.append(self._on_engine_move)
        events.on_game_over.append(self._on_engine_game_over)
        events.on_phase_changed.append(self._on_engine_phase)
        events.on_scores_changed.append(self._on_engine_scores)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._mode_page.retranslate_ui()
        self._score_panel.retranslate_ui()
        self._control_panel.retranslate_ui()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def engine(self) -> GameEngine:
        return self._engine

    @property
    def ai_turn(self) -> AITurnScheduler:
        return self._ai_turn

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    @property
    def score_panel(self) -> ScorePanel:
        return self._score_panel

    @property
    def mode_page(self) -> ModeSelectionPage:
        return self._mode_page

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    def status_text(self) -> str:
        return self._status_label.text()

    def is_mode_selection_shown(self) -> bool:
        return self._stack.currentIndex() == _MODE_PAGE

    # ── User actions ─────────────────────────────────────────────────────

    def _on_mode_selected(self, mode: Mode) -> None:
        self._ai_turn.cancel()
        self._render(self._engine.select_mode(mode))

    def _on_cell_clicked(self, index: int) -> None:
        if self._engine.phase != GamePhase.AWAITING_MOVE:
            return
        result = self._engine.apply_move(index)
        if result.accepted and result.ai_turn_due:
            self._status_label.setText(t().status_thinking)
            self._ai_turn.schedule()

    def _on_restart_requested(self) -> None:
        if self._engine.phase != GamePhase.GAME_OVER:
            return
        self._render(self._engine.restart())

    def _on_back(self) -> None:
        self._ai_turn.cancel()
        self._render(self._engine.go_back())

    def _on_reset_score(self) -> None:
        self._ai_turn.cancel()
        state = self._engine.reset_scores()
        self._render(state)
        if state.mode is not None:
            self._status_label.setText(
                t().status_score_reset + self._turn_message(state)
            )

    def _on_ai_result(self, result: MoveResult) -> None:
        if not result.accepted:
            # Board goes back to the human.
            self._sync_board_interactivity()

    # ── Engine events ────────────────────────────────────────────────────

    def _on_engine_move(self, result: MoveResult) -> None:
        self._board.set_cells(self._engine.session.board.cells())
        if result.outcome == Outcome.CONTINUE and not result.ai_turn_due:
            self._status_label.setText(
                t().status_turn.format(marker=result.next_player)
            )

    def _on_engine_game_over(self, outcome: Outcome, winner: Marker | None) -> None:
        s = t()
        if outcome == Outcome.WIN and winner is not None:
            message = s.status_wins.format(name=self._winner_name(winner))
        else:
            message = s.status_draw
        self._status_label.setText(message + s.status_play_again)

    def _on_engine_phase(self, _phase: GamePhase) -> None:
        self._sync_board_interactivity()

    def _on_engine_scores(self, scores: ScoreSnapshot) -> None:
        self._score_panel.set_scores(scores)

    # ── Rendering ────────────────────────────────────────────────────────

    def _render(self, state: RenderState) -> None:
        self._board.set_cells(state.board)
        self._score_panel.set_mode(state.mode)
        self._score_panel.set_scores(state.scores)
        if state.is_mode_selection:
            self._stack.setCurrentIndex(_MODE_PAGE)
            self._status_label.clear()
        else:
            self._stack.setCurrentIndex(_GAME_PAGE)
            self._status_label.setText(self._turn_message(state))
        self._sync_board_interactivity()

    def _sync_board_interactivity(self) -> None:
        phase = self._engine.phase
        self._board.set_accepts_moves(phase == GamePhase.AWAITING_MOVE)
        self._board.set_restart_on_click(phase == GamePhase.GAME_OVER)

    def _turn_message(self, state: RenderState) -> str:
        return t().status_turn.format(marker=state.current_player)

    def _winner_name(self, winner: Marker) -> str:
        s = t()
        if self._engine.mode == Mode.HUMAN_VS_AI:
            return s.winner_you if winner is Marker.X else s.winner_computer
        return s.winner_player1 if winner is Marker.X else s.winner_player2

    # ── Qt events ────────────────────────────────────────────────────────

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._ai_turn.cancel()
        super().closeEvent(event)

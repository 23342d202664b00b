"""Tests for GameEngine — the orchestrator."""

from __future__ import annotations

import random

import pytest

from tictactoe.core.board import Board
from tictactoe.core.enums import Marker, Mode
from tictactoe.core.errors import CellOccupied, InvalidState, OutOfRangeIndex
from tictactoe.core.types import WIN_LINES
from tictactoe.engine import HeuristicStrategist
from tictactoe.game.engine import GameEngine
from tictactoe.game.interfaces import GamePhase, Outcome
from tictactoe.game.scoreboard import ScoreSnapshot

DRAW_SEQUENCE = [0, 1, 2, 4, 3, 5, 7, 6, 8]


class _ScriptedStrategist:
    """Plays the given cells in order."""

    def __init__(self, *moves: int) -> None:
        self._moves = list(moves)
        self.calls: list[str] = []

    def choose_move(
        self, board: Board, ai_marker: Marker, opponent_marker: Marker
    ) -> int:
        self.calls.append(board.notation())
        return self._moves.pop(0)


def _make_engine(mode: Mode = Mode.HUMAN_VS_HUMAN, strategist=None) -> GameEngine:
    engine = GameEngine(strategist or HeuristicStrategist(random.Random(0)))
    engine.select_mode(mode)
    return engine


def _x_wins_top_row(engine: GameEngine) -> None:
    for index in (0, 3, 1, 4, 2):
        engine.apply_move(index)


class TestStartGame:
    def test_initial_state(self) -> None:
        engine = GameEngine()
        state = engine.render_state()
        assert state.mode is None
        assert state.phase == GamePhase.MODE_SELECTION
        assert not state.active

    def test_select_mode_starts_game(self) -> None:
        engine = GameEngine()
        state = engine.select_mode(Mode.HUMAN_VS_HUMAN)
        assert state.board == (None,) * 9
        assert state.current_player is Marker.X
        assert state.active
        assert state.mode == Mode.HUMAN_VS_HUMAN
        assert state.phase == GamePhase.AWAITING_MOVE
        assert state.scores == ScoreSnapshot(0, 0)

    def test_new_game_waits_for_x_immediately(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        engine.apply_move(0)
        assert engine.restart().phase == GamePhase.AWAITING_MOVE
        assert list(GamePhase) == [
            GamePhase.MODE_SELECTION,
            GamePhase.AWAITING_MOVE,
            GamePhase.THINKING,
            GamePhase.GAME_OVER,
        ]

    def test_players_seated_per_mode(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        x, o = engine.player(Marker.X), engine.player(Marker.O)
        assert x is not None and x.is_human
        assert o is not None and not o.is_human

    def test_start_game_clears_board(self) -> None:
        engine = _make_engine()
        engine.apply_move(4)
        state = engine.start_game(Mode.HUMAN_VS_HUMAN)
        assert state.board == (None,) * 9
        assert state.current_player is Marker.X
        assert engine.session.ply_count == 0


class TestTurnAlternation:
    def test_human_vs_human_alternates(self) -> None:
        engine = _make_engine()
        expected = Marker.X
        for index in DRAW_SEQUENCE[:-1]:
            assert engine.render_state().current_player is expected
            result = engine.apply_move(index)
            assert result.accepted
            assert result.outcome == Outcome.CONTINUE
            assert not result.ai_turn_due
            expected = expected.opposite
            assert result.next_player is expected

    def test_explicit_player_must_match_turn(self) -> None:
        engine = _make_engine()
        result = engine.apply_move(0, Marker.O)
        assert not result.accepted
        assert isinstance(result.error, InvalidState)
        assert engine.render_state().board == (None,) * 9

    def test_bool_index_is_rejected(self) -> None:
        engine = _make_engine()
        result = engine.apply_move(True)  # type: ignore[arg-type]
        assert not result.accepted
        assert isinstance(result.error, OutOfRangeIndex)
        assert engine.render_state().board == (None,) * 9
        assert engine.render_state().current_player is Marker.X


class TestWinDetection:
    @pytest.mark.parametrize("line", WIN_LINES)
    def test_every_line_wins_on_third_mark(self, line: tuple[int, int, int]) -> None:
        engine = _make_engine()
        # Two O marks can never complete a line on their own.
        o_moves = [i for i in range(9) if i not in line][:2]

        results = []
        for x_idx, o_idx in zip(line[:2], o_moves, strict=True):
            results.append(engine.apply_move(x_idx, Marker.X))
            results.append(engine.apply_move(o_idx, Marker.O))
        assert all(r.outcome == Outcome.CONTINUE for r in results)

        final = engine.apply_move(line[2], Marker.X)
        assert final.outcome == Outcome.WIN
        assert final.winner is Marker.X
        assert final.scores == ScoreSnapshot(1, 0)
        assert not engine.render_state().active
        assert engine.phase == GamePhase.GAME_OVER

    def test_o_win_counts_for_o(self) -> None:
        engine = _make_engine()
        for index in (0, 3, 1, 4, 8, 5):
            result = engine.apply_move(index)
        assert result.outcome == Outcome.WIN
        assert result.winner is Marker.O
        assert engine.scores == ScoreSnapshot(0, 1)

    def test_winner_keeps_turn(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        assert engine.render_state().current_player is Marker.X
        assert engine.render_state().winner is Marker.X


class TestDraw:
    def test_standard_draw(self) -> None:
        engine = _make_engine()
        outcomes = [engine.apply_move(i).outcome for i in DRAW_SEQUENCE]
        assert outcomes[:-1] == [Outcome.CONTINUE] * 8
        assert outcomes[-1] == Outcome.DRAW
        state = engine.render_state()
        assert not state.active
        assert state.winner is None
        assert state.scores == ScoreSnapshot(0, 0)

    def test_win_on_last_cell_is_not_draw(self) -> None:
        engine = _make_engine()
        # X completes 2-4-6 with the ninth mark.
        for index in (4, 0, 2, 1, 3, 5, 8, 7):
            assert engine.apply_move(index).outcome == Outcome.CONTINUE
        result = engine.apply_move(6)
        assert engine.session.board.is_full()
        assert result.outcome == Outcome.WIN
        assert result.winner is Marker.X


class TestRejection:
    def test_occupied_twice_is_noop(self) -> None:
        engine = _make_engine()
        engine.apply_move(4)
        before = engine.render_state()
        result = engine.apply_move(4)
        assert not result.accepted
        assert result.outcome == Outcome.REJECTED
        assert isinstance(result.error, CellOccupied)
        assert engine.render_state() == before

    def test_repeated_occupied_keeps_scores(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        engine.restart()
        engine.apply_move(0)
        engine.apply_move(0)
        engine.apply_move(0)
        assert engine.scores == ScoreSnapshot(1, 0)
        assert engine.session.board.count(Marker.X) == 1

    @pytest.mark.parametrize("index", [-1, 9, 42])
    def test_out_of_range(self, index: int) -> None:
        engine = _make_engine()
        result = engine.apply_move(index)
        assert not result.accepted
        assert isinstance(result.error, OutOfRangeIndex)
        assert engine.render_state().current_player is Marker.X

    def test_move_after_game_over(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        result = engine.apply_move(8)
        assert not result.accepted
        assert isinstance(result.error, InvalidState)
        assert engine.session.board[8] is None

    def test_move_before_mode_selected(self) -> None:
        engine = GameEngine()
        assert not engine.apply_move(0).accepted


class TestScoreIsolation:
    def test_modes_keep_separate_scores(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        engine.restart()
        _x_wins_top_row(engine)
        assert engine.scores == ScoreSnapshot(2, 0)

        state = engine.select_mode(Mode.HUMAN_VS_AI)
        assert state.scores == ScoreSnapshot(0, 0)

        state = engine.select_mode(Mode.HUMAN_VS_HUMAN)
        assert state.scores == ScoreSnapshot(2, 0)

    def test_scores_survive_go_back(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        engine.go_back()
        state = engine.select_mode(Mode.HUMAN_VS_HUMAN)
        assert state.scores == ScoreSnapshot(1, 0)


class TestResetScores:
    def test_only_current_mode_reset(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_HUMAN, _ScriptedStrategist(3, 4))
        _x_wins_top_row(engine)

        engine.select_mode(Mode.HUMAN_VS_AI)
        for human in (0, 1):
            engine.apply_move(human)
            engine.play_ai_turn()
        engine.apply_move(2)
        assert engine.scores == ScoreSnapshot(1, 0)

        state = engine.reset_scores()
        assert state.scores == ScoreSnapshot(0, 0)
        assert engine.scores_for(Mode.HUMAN_VS_AI) == ScoreSnapshot(0, 0)
        assert engine.scores_for(Mode.HUMAN_VS_HUMAN) == ScoreSnapshot(1, 0)

    def test_reset_in_two_player_mode_keeps_ai_scores(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI, _ScriptedStrategist(3, 4))
        for human in (0, 1):
            engine.apply_move(human)
            engine.play_ai_turn()
        engine.apply_move(2)

        engine.select_mode(Mode.HUMAN_VS_HUMAN)
        _x_wins_top_row(engine)
        engine.reset_scores()
        assert engine.scores_for(Mode.HUMAN_VS_HUMAN) == ScoreSnapshot(0, 0)
        assert engine.scores_for(Mode.HUMAN_VS_AI) == ScoreSnapshot(1, 0)

    def test_reset_starts_fresh_game(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        state = engine.reset_scores()
        assert state.scores == ScoreSnapshot(0, 0)
        assert state.active
        assert state.board == (None,) * 9
        assert state.mode == Mode.HUMAN_VS_HUMAN

    def test_reset_without_mode_returns_to_selection(self) -> None:
        engine = _make_engine()
        _x_wins_top_row(engine)
        engine.go_back()
        state = engine.reset_scores()
        assert state.phase == GamePhase.MODE_SELECTION
        assert engine.scores_for(Mode.HUMAN_VS_HUMAN) == ScoreSnapshot(0, 0)


class TestGoBack:
    def test_go_back_clears(self) -> None:
        engine = _make_engine()
        engine.apply_move(0)
        state = engine.go_back()
        assert state.mode is None
        assert not state.active
        assert state.board == (None,) * 9
        assert state.phase == GamePhase.MODE_SELECTION
        assert engine.player(Marker.X) is None

    def test_restart_without_mode_is_noop(self) -> None:
        engine = GameEngine()
        state = engine.restart()
        assert state.phase == GamePhase.MODE_SELECTION


class TestAITurn:
    def test_human_move_makes_ai_turn_due(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        result = engine.apply_move(0)
        assert result.outcome == Outcome.CONTINUE
        assert result.ai_turn_due
        assert result.next_player is Marker.O
        assert engine.phase == GamePhase.THINKING

    def test_engine_does_not_move_for_ai(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        engine.apply_move(0)
        assert engine.session.board.count(Marker.O) == 0

    def test_play_ai_turn(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        engine.apply_move(0)
        result = engine.play_ai_turn()
        assert result.accepted
        assert result.index == 4  # center
        assert result.next_player is Marker.X
        assert not result.ai_turn_due
        assert engine.phase == GamePhase.AWAITING_MOVE

    def test_human_cannot_move_during_ai_turn(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        engine.apply_move(0)
        result = engine.apply_move(1, Marker.X)
        assert not result.accepted
        assert result.ai_turn_due

    def test_ai_turn_rejected_when_not_due(self) -> None:
        engine = _make_engine(Mode.HUMAN_VS_AI)
        result = engine.play_ai_turn()
        assert not result.accepted
        assert isinstance(result.error, InvalidState)

    def test_ai_turn_rejected_in_two_player_mode(self) -> None:
        engine = _make_engine()
        engine.apply_move(0)
        assert not engine.play_ai_turn().accepted

    def test_ai_not_consulted_after_human_wins(self) -> None:
        strategist = _ScriptedStrategist(3, 4)
        engine = _make_engine(Mode.HUMAN_VS_AI, strategist)
        engine.apply_move(0)
        engine.play_ai_turn()
        engine.apply_move(1)
        engine.play_ai_turn()
        result = engine.apply_move(2)
        assert result.outcome == Outcome.WIN
        assert not result.ai_turn_due
        assert not engine.play_ai_turn().accepted
        assert len(strategist.calls) == 2
        assert engine.scores == ScoreSnapshot(1, 0)

    def test_ai_win_scores_for_o(self) -> None:
        strategist = _ScriptedStrategist(3, 4, 5)
        engine = _make_engine(Mode.HUMAN_VS_AI, strategist)
        for human in (0, 1, 8):
            engine.apply_move(human)
            result = engine.play_ai_turn()
        assert result.outcome == Outcome.WIN
        assert result.winner is Marker.O
        assert engine.scores == ScoreSnapshot(0, 1)
        assert engine.scores_for(Mode.HUMAN_VS_HUMAN) == ScoreSnapshot(0, 0)

    def test_ai_sees_board_after_human_move(self) -> None:
        strategist = _ScriptedStrategist(4)
        engine = _make_engine(Mode.HUMAN_VS_AI, strategist)
        engine.apply_move(0)
        engine.play_ai_turn()
        assert strategist.calls == ["X........"]

    def test_ai_cannot_corrupt_board(self) -> None:
        strategist = _ScriptedStrategist(0)
        engine = _make_engine(Mode.HUMAN_VS_AI, strategist)
        engine.apply_move(0)
        result = engine.play_ai_turn()
        assert not result.accepted
        assert isinstance(result.error, CellOccupied)
        assert engine.session.board[0] is Marker.X
        assert engine.phase == GamePhase.THINKING


class TestEvents:
    def test_move_event(self) -> None:
        engine = _make_engine()
        seen: list[int | None] = []
        engine.events.on_move.append(lambda r: seen.append(r.index))
        engine.apply_move(4)
        engine.apply_move(4)  # rejected, no event
        assert seen == [4]

    def test_game_over_event(self) -> None:
        engine = _make_engine()
        results: list[tuple[Outcome, Marker | None]] = []
        engine.events.on_game_over.append(lambda o, w: results.append((o, w)))
        _x_wins_top_row(engine)
        assert results == [(Outcome.WIN, Marker.X)]

    def test_draw_event(self) -> None:
        engine = _make_engine()
        results: list[tuple[Outcome, Marker | None]] = []
        engine.events.on_game_over.append(lambda o, w: results.append((o, w)))
        for i in DRAW_SEQUENCE:
            engine.apply_move(i)
        assert results == [(Outcome.DRAW, None)]

    def test_phase_events(self) -> None:
        engine = GameEngine(_ScriptedStrategist(4))
        phases: list[GamePhase] = []
        engine.events.on_phase_changed.append(phases.append)
        engine.select_mode(Mode.HUMAN_VS_AI)
        engine.apply_move(0)
        engine.play_ai_turn()
        engine.go_back()
        assert phases == [
            GamePhase.AWAITING_MOVE,
            GamePhase.THINKING,
            GamePhase.AWAITING_MOVE,
            GamePhase.MODE_SELECTION,
        ]

    def test_scores_event(self) -> None:
        engine = _make_engine()
        scores: list[ScoreSnapshot] = []
        engine.events.on_scores_changed.append(scores.append)
        _x_wins_top_row(engine)
        engine.reset_scores()
        assert scores == [ScoreSnapshot(1, 0), ScoreSnapshot(0, 0)]


class TestIndependentEngines:
    def test_two_engines_do_not_share_state(self) -> None:
        a = _make_engine()
        b = _make_engine()
        _x_wins_top_row(a)
        assert b.scores == ScoreSnapshot(0, 0)
        assert b.render_state().board == (None,) * 9

"""Win and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tictactoe.core.enums import GameResult, Marker
from tictactoe.core.types import WIN_LINES, Index

if TYPE_CHECKING:
    from tictactoe.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def winning_line(board: Board) -> tuple[Index, Index, Index] | None:
        """First line holding three equal markers, in ``WIN_LINES`` order."""
        for line in WIN_LINES:
            a, b, c = line
            first = board[a]
            if first is not None and first == board[b] == board[c]:
                return line
        return None

    @staticmethod
    def winner(board: Board) -> Marker | None:
        line = Rules.winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    @staticmethod
    def has_line(board: Board, marker: Marker) -> bool:
        """Whether *marker* owns all three cells of any line."""
        return any(
            board[a] is marker and board[b] is marker and board[c] is marker
            for a, b, c in WIN_LINES
        )

    @staticmethod
    def completes_line(board: Board, index: Index, marker: Marker) -> bool:
        """Would placing *marker* on the empty cell *index* win the game?"""
        trial = board.copy()
        trial.place(index, marker)
        return Rules.has_line(trial, marker)

    @staticmethod
    def is_draw(board: Board) -> bool:
        return board.is_full() and Rules.winning_line(board) is None

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the result of *board*.

        A win takes precedence over a full board.
        """
        winner = Rules.winner(board)
        if winner is not None:
            return GameResult.win_for(winner)
        if board.is_full():
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

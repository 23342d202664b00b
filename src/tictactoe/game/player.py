"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tictactoe.core.enums import Marker, Mode
from tictactoe.game.interfaces import IPlayer

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.types import Index
    from tictactoe.engine.search import IStrategist


class HumanPlayer(IPlayer):
    """A human participant — moves come from the UI.

    ``request_move`` answers ``None`` because humans pick cells interactively.
    """

    __slots__ = ("_marker", "_name")

    def __init__(self, marker: Marker, name: str = "") -> None:
        self._marker = marker
        self._name = name or f"Player ({marker})"

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> Index | None:
        return None  # Human moves arrive via engine.apply_move()


class AIPlayer(IPlayer):
    """A computer participant that delegates move choice to a strategist.

    Args:
        marker: Side the AI plays.
        strategist: Move picker, see :class:`~tictactoe.engine.IStrategist`.
        name: Display name.
    """

    __slots__ = ("_marker", "_name", "_strategist")

    def __init__(
        self,
        marker: Marker,
        strategist: IStrategist,
        name: str = "Computer",
    ) -> None:
        self._marker = marker
        self._strategist = strategist
        self._name = name

    @property
    def marker(self) -> Marker:
        return self._marker

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def strategist(self) -> IStrategist:
        return self._strategist

    def request_move(self, board: Board) -> Index | None:
        return self._strategist.choose_move(
            board.copy(), self._marker, self._marker.opposite
        )


def players_for_mode(
    mode: Mode, strategist: IStrategist
) -> dict[Marker, IPlayer]:
    """Seat the two players of *mode*. X is always a human."""
    if mode == Mode.HUMAN_VS_AI:
        return {
            Marker.X: HumanPlayer(Marker.X, "You"),
            Marker.O: AIPlayer(Marker.O, strategist),
        }
    return {
        Marker.X: HumanPlayer(Marker.X, "Player 1"),
        Marker.O: HumanPlayer(Marker.O, "Player 2"),
    }

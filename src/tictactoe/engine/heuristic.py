"""Fixed-priority heuristic opponent: win > block > center > corner > any."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from tictactoe.core.errors import InvalidState
from tictactoe.core.rules import Rules
from tictactoe.core.types import CENTER, CORNERS
from tictactoe.engine.search import Decision, IStrategist, MoveRule

if TYPE_CHECKING:
    from tictactoe.core.board import Board
    from tictactoe.core.enums import Marker
    from tictactoe.core.types import Index

_LOGGER = logging.getLogger(__name__)


class HeuristicStrategist(IStrategist):
    """Shallow rule-based move picker.

    The first applicable rule wins:

    1. a move that completes a line for *ai_marker*;
    2. a move that would complete a line for *opponent_marker*;
    3. the center;
    4. a random empty corner;
    5. a random empty cell.

    Rules 1 and 2 scan empty cells in ascending index order and return the
    first hit, so positions with several winning cells resolve to the lowest
    index.  Rules 4 and 5 draw from *rng*; pass a seeded
    :class:`random.Random` for reproducible games.

    The strategist holds no game state and never mutates the board it is
    given.
    """

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int | None) -> HeuristicStrategist:
        return cls(random.Random(seed))

    def choose_move(
        self,
        board: Board,
        ai_marker: Marker,
        opponent_marker: Marker,
    ) -> Index:
        return self.decide(board, ai_marker, opponent_marker).index

    def decide(
        self,
        board: Board,
        ai_marker: Marker,
        opponent_marker: Marker,
    ) -> Decision:
        """Pick a move and report which rule selected it.

        Raises:
            InvalidState: the board has no empty cell.
        """
        available = board.empty_indices()
        if not available:
            raise InvalidState("No empty cell left to choose from")

        decision = self._decide(board, available, ai_marker, opponent_marker)
        _LOGGER.debug(
            "%s plays %d (%s) on %s",
            ai_marker,
            decision.index,
            decision.rule.name.lower(),
            board.notation(),
        )
        return decision

    def _decide(
        self,
        board: Board,
        available: list[Index],
        ai_marker: Marker,
        opponent_marker: Marker,
    ) -> Decision:
        for index in available:
            if Rules.completes_line(board, index, ai_marker):
                return Decision(index, MoveRule.WIN)

        for index in available:
            if Rules.completes_line(board, index, opponent_marker):
                return Decision(index, MoveRule.BLOCK)

        if CENTER in available:
            return Decision(CENTER, MoveRule.CENTER)

        corners = [sq for sq in CORNERS if sq in available]
        if corners:
            return Decision(self._rng.choice(corners), MoveRule.CORNER)

        return Decision(self._rng.choice(available), MoveRule.ANY)

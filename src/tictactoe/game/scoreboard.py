"""Per-mode win tallies."""

from __future__ import annotations

from dataclasses import dataclass, field

from tictactoe.core.enums import Marker, Mode


@dataclass(frozen=True, slots=True)
class ScoreSnapshot:
    """Read-only copy of a score board."""

    x: int = 0
    o: int = 0

    def __getitem__(self, marker: Marker) -> int:
        return self.x if marker is Marker.X else self.o


@dataclass(slots=True)
class ScoreBoard:
    """Mutable ``Marker -> wins`` map for one mode."""

    wins: dict[Marker, int] = field(
        default_factory=lambda: {Marker.X: 0, Marker.O: 0}
    )

    def record_win(self, marker: Marker) -> None:
        self.wins[marker] += 1

    def reset(self) -> None:
        for marker in self.wins:
            self.wins[marker] = 0

    def snapshot(self) -> ScoreSnapshot:
        return ScoreSnapshot(x=self.wins[Marker.X], o=self.wins[Marker.O])

    def __getitem__(self, marker: Marker) -> int:
        return self.wins[marker]


class ScoreBook:
    """One independent :class:`ScoreBoard` per :class:`Mode`.

    With no mode selected, the human-vs-human board is the current one.
    """

    __slots__ = ("_boards",)

    def __init__(self) -> None:
        self._boards: dict[Mode, ScoreBoard] = {mode: ScoreBoard() for mode in Mode}

    def board_for(self, mode: Mode | None) -> ScoreBoard:
        return self._boards[mode if mode is not None else Mode.HUMAN_VS_HUMAN]

    def snapshot(self, mode: Mode | None) -> ScoreSnapshot:
        return self.board_for(mode).snapshot()

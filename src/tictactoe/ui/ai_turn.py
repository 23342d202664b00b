"""Delayed computer turn for human-vs-AI games."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from tictactoe.game.engine import GameEngine
from tictactoe.game.interfaces import GamePhase
from tictactoe.game.state import MoveResult

_LOGGER = logging.getLogger(__name__)


class AITurnScheduler:
    """Plays the computer's reply after a short, visible pause.

    The pause is cosmetic: :meth:`run_now` plays the pending turn at once.
    Callers keep board input disabled while :attr:`is_pending` is true.
    """

    DEFAULT_DELAY_MS = 800

    __slots__ = ("__weakref__", "_engine", "_on_result", "_timer")

    def __init__(
        self,
        *,
        engine: GameEngine,
        on_result: Callable[[MoveResult], None],
        parent: QObject | None = None,
        delay_ms: int = DEFAULT_DELAY_MS,
    ) -> None:
        self._engine = engine
        self._on_result = on_result

        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(max(0, delay_ms))
        self._timer.timeout.connect(self._play)

    @property
    def delay_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    def set_delay(self, delay_ms: int) -> None:
        self._timer.setInterval(max(0, delay_ms))

    def schedule(self) -> None:
        """Arm the timer for the computer's reply (restarts a pending one)."""
        self._timer.start()

    def cancel(self) -> None:
        if self._timer.isActive():
            _LOGGER.debug("Pending computer turn cancelled")
        self._timer.stop()

    def run_now(self) -> MoveResult | None:
        """Play a pending turn immediately. Returns ``None`` if none was pending."""
        if not self._timer.isActive():
            return None
        self._timer.stop()
        return self._play()

    def _play(self) -> MoveResult | None:
        if self._engine.phase != GamePhase.THINKING:
            return None
        result = self._engine.play_ai_turn()
        self._on_result(result)
        return result

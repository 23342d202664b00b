"""User-configurable application settings."""

from __future__ import annotations

from dataclasses import dataclass

from tictactoe.ui.ai_turn import AITurnScheduler


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Computer opponent
    ai_delay_ms: int = AITurnScheduler.DEFAULT_DELAY_MS
    ai_seed: int | None = None  # fixed seed makes corner/any picks repeatable

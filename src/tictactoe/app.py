"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.ui.settings import AppSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    from tictactoe.ui.ai_turn import AITurnScheduler
    from tictactoe.ui.i18n import LANGUAGES

    p = argparse.ArgumentParser(description="Tic-Tac-Toe")
    p.add_argument("--language", choices=LANGUAGES, default="English")
    p.add_argument(
        "--ai-delay",
        type=int,
        default=AITurnScheduler.DEFAULT_DELAY_MS,
        metavar="MS",
        help="pause before the computer answers",
    )
    p.add_argument(
        "--seed", type=int, default=None, help="seed for the computer's random picks"
    )
    p.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")
    return p.parse_args(argv)


def build_settings(args: argparse.Namespace) -> AppSettings:
    from tictactoe.ui.settings import AppSettings

    return AppSettings(
        language=args.language,
        log_level=args.log_level,
        ai_delay_ms=max(0, args.ai_delay),
        ai_seed=args.seed,
    )


def main() -> None:
    """Launch the Tic-Tac-Toe application."""
    from tictactoe.ui.bootstrap import run_application

    args = parse_args(sys.argv[1:])
    settings = build_settings(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(sys.argv[:1], settings))


if __name__ == "__main__":
    main()

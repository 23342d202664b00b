"""Game management layer — engine, players, scores, session state.

Quick start::

    from tictactoe.core import Mode
    from tictactoe.game import GameEngine

    engine = GameEngine()
    engine.select_mode(Mode.HUMAN_VS_AI)
    result = engine.apply_move(4)
    if result.ai_turn_due:
        engine.play_ai_turn()
"""

from tictactoe.game.engine import GameEngine, GameEvents
from tictactoe.game.interfaces import GamePhase, IGameEngine, IPlayer, Outcome
from tictactoe.game.player import AIPlayer, HumanPlayer, players_for_mode
from tictactoe.game.scoreboard import ScoreBoard, ScoreBook, ScoreSnapshot
from tictactoe.game.state import GameSession, MoveRecord, MoveResult, RenderState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameEngine",
    "IPlayer",
    "Outcome",
    # Concrete
    "AIPlayer",
    "GameEngine",
    "GameEvents",
    "GameSession",
    "HumanPlayer",
    "MoveRecord",
    "MoveResult",
    "RenderState",
    "ScoreBoard",
    "ScoreBook",
    "ScoreSnapshot",
    "players_for_mode",
]

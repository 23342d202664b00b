"""Computer opponent: move-selection strategies."""

from tictactoe.engine.heuristic import HeuristicStrategist
from tictactoe.engine.search import Decision, IStrategist, MoveRule

DefaultStrategist: type[HeuristicStrategist] = HeuristicStrategist

__all__ = [
    "DefaultStrategist",
    "Decision",
    "HeuristicStrategist",
    "IStrategist",
    "MoveRule",
]

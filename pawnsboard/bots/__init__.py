"""
Bots module - Move-selection strategies.

Provides:
- Strategy: Interface for move selection
- FillFirst / MaximizeRowScore / ControlBoard: greedy strategies
- MinimaxStrategy: lookahead against an opponent model
- ChainedStrategy / StrategyFactory: fallback composition
- EvaluationWeights: tuning for position evaluation
"""

from .policy import Strategy, StrategyContext, ChainedStrategy, MoveSelector
from .strategies import FillFirstStrategy, MaximizeRowScoreStrategy, ControlBoardStrategy
from .minimax import MinimaxStrategy
from .evaluator import EvaluationWeights, evaluate_position, count_owned_cells
from .factory import StrategyFactory, STRATEGIES, create_strategy

__all__ = [
    "Strategy",
    "StrategyContext",
    "ChainedStrategy",
    "MoveSelector",
    "FillFirstStrategy",
    "MaximizeRowScoreStrategy",
    "ControlBoardStrategy",
    "MinimaxStrategy",
    "EvaluationWeights",
    "evaluate_position",
    "count_owned_cells",
    "StrategyFactory",
    "STRATEGIES",
    "create_strategy",
]

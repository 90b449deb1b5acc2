"""
Minimax Strategy - One round of lookahead against an opponent model.

For every legal placement:
1. Simulate it on a snapshot
2. Ask the opponent model for its reply on that snapshot
3. Simulate the reply and evaluate the position for the opponent

The move whose worst case is lowest wins. The opponent model is any
MoveSelector, so strategies and plain functions both work.
"""

from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING

from ..engine_core.action import Move, MoveType
from ..engine_core.action_generator import legal_moves
from .evaluator import DEFAULT_WEIGHTS, EvaluationWeights, evaluate_position
from .policy import MoveSelector, Strategy

if TYPE_CHECKING:
    from ..engine_core.game import ReadOnlyPawnsBoard
    from ..engine_core.state import PlayerColor

logger = logging.getLogger(__name__)

# Evaluation for a move the opponent cannot answer
UNANSWERABLE = -math.inf
NEUTRAL = 0


class MinimaxStrategy(Strategy):
    """
    Picks the move that leaves the opponent's best reply weakest.

    Usage:
        strategy = MinimaxStrategy(opponent=FillFirstStrategy())
        move = strategy.choose_move(board)

    Declines (returns None) when there is no legal placement. Failed
    simulations are scored as neutral instead of raising.
    """

    def __init__(self, opponent: MoveSelector, weights: EvaluationWeights | None = None):
        if opponent is None:
            raise ValueError("Opponent strategy cannot be null")
        self.opponent = opponent
        self.weights = weights or DEFAULT_WEIGHTS

    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        context = self.context(model)
        if context is None:
            return Move.no_move()

        candidates = legal_moves(model)
        if not candidates:
            return None

        best_move = candidates[0]
        best_value = math.inf
        for move in candidates:
            value = self.evaluate_move(model, move, context.player)
            logger.debug("Minimax candidate %s scored %s", move, value)
            if value < best_value:
                best_value = value
                best_move = move

        return best_move

    def evaluate_move(self, model: ReadOnlyPawnsBoard, move: Move, player: PlayerColor) -> float:
        """Value of playing move, from the opponent's side (lower is better)."""
        try:
            after_ours = model.copy()
            after_ours.place_card(move.card_index, move.row, move.col)

            reply = self.opponent(after_ours)
            if reply is None:
                return UNANSWERABLE

            after_reply = after_ours.copy()
            if reply.move_type is MoveType.PLACE_CARD:
                after_reply.place_card(reply.card_index, reply.row, reply.col)
            elif reply.move_type is MoveType.PASS and after_reply.in_progress:
                after_reply.pass_turn()

            return evaluate_position(after_reply, player, self.weights)
        except Exception as e:
            logger.debug("Minimax simulation of %s failed: %s", move, e)
            return NEUTRAL

    def get_name(self) -> str:
        opponent_name = getattr(self.opponent, "get_name", None)
        if opponent_name is not None:
            return f"MinimaxStrategy({opponent_name()})"
        return "MinimaxStrategy"

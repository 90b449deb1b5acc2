"""
Position Evaluator - Scores board positions for search.

The evaluation is written from the opponent's point of view:
higher values are better for the opponent, lower values are better
for the player being evaluated for.

    value = score_weight * (opponent_total - our_total)
          + cell_weight * (opponent_cells - our_cells)

Weights are a tuning knob, not a rule of the game.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.state import CellContent

if TYPE_CHECKING:
    from ..engine_core.game import ReadOnlyPawnsBoard
    from ..engine_core.state import PlayerColor


@dataclass(frozen=True)
class EvaluationWeights:
    """
    Weights for the position evaluator.

    Total score differences count three times as much as board
    control by default.
    """
    score_weight: int = 3
    cell_weight: int = 1


DEFAULT_WEIGHTS = EvaluationWeights()


def count_owned_cells(model: ReadOnlyPawnsBoard, player: PlayerColor) -> int:
    """Cells holding pawns or a card owned by player."""
    rows, cols = model.dimensions()
    count = 0
    for row in range(rows):
        for col in range(cols):
            if model.cell_content(row, col) is CellContent.EMPTY:
                continue
            if model.cell_owner(row, col) is player:
                count += 1
    return count


def evaluate_position(
    model: ReadOnlyPawnsBoard,
    player: PlayerColor,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
) -> int:
    """Evaluate model for player. Lower is better for player."""
    opponent = player.opponent
    totals = model.total_score()
    score_difference = totals[opponent.index] - totals[player.index]
    cell_difference = count_owned_cells(model, opponent) - count_owned_cells(model, player)
    return weights.score_weight * score_difference + weights.cell_weight * cell_difference

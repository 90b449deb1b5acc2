"""
Basic Strategies - Greedy move selection over the read-only board.

- FillFirstStrategy: first legal placement in scan order (infallible)
- MaximizeRowScoreStrategy: first placement that wins a row it is
  not already winning (infallible)
- ControlBoardStrategy: placement that leaves the player owning the
  most cells (fallible)

Lookahead happens on snapshots from model.copy(). A snapshot that
fails to apply a move disqualifies that move and nothing else.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.action import Move
from ..engine_core.state import PlayerColor
from .evaluator import count_owned_cells
from .policy import Strategy, StrategyContext

if TYPE_CHECKING:
    from ..engine_core.game import ReadOnlyPawnsBoard

logger = logging.getLogger(__name__)


class FillFirstStrategy(Strategy):
    """
    Plays the first legal placement found.

    Cards are tried left to right, rows top to bottom. RED scans each
    row left to right and BLUE right to left, so both start from their
    own side of the board.
    """

    infallible = True

    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        context = self.context(model)
        if context is None:
            return Move.no_move()

        if context.player is PlayerColor.RED:
            columns = range(context.cols)
        else:
            columns = range(context.cols - 1, -1, -1)

        for card_index in range(len(context.hand)):
            for row in range(context.rows):
                for col in columns:
                    if model.is_legal_move(card_index, row, col):
                        return Move.place(card_index, row, col)

        return Move.pass_turn()


class MaximizeRowScoreStrategy(Strategy):
    """
    Goes after rows the player is not winning.

    Rows are visited top to bottom. In a row where the player's score
    is at most the opponent's, each legal (card, column) pair is
    simulated and the first one that puts the player strictly ahead in
    that row is played. Passes when no row can be taken.
    """

    infallible = True

    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        context = self.context(model)
        if context is None:
            return Move.no_move()

        for row in range(context.rows):
            move = self._improve_row(model, context, row)
            if move is not None:
                return move

        return Move.pass_turn()

    def _improve_row(
        self,
        model: ReadOnlyPawnsBoard,
        context: StrategyContext,
        row: int,
    ) -> Move | None:
        scores = model.row_scores(row)
        if scores[context.player.index] > scores[context.opponent.index]:
            return None

        for card_index in range(len(context.hand)):
            for col in range(context.cols):
                if not model.is_legal_move(card_index, row, col):
                    continue
                if self._wins_row(model, context, card_index, row, col):
                    return Move.place(card_index, row, col)
        return None

    @staticmethod
    def _wins_row(
        model: ReadOnlyPawnsBoard,
        context: StrategyContext,
        card_index: int,
        row: int,
        col: int,
    ) -> bool:
        try:
            simulation = model.copy()
            simulation.place_card(card_index, row, col)
            scores = simulation.row_scores(row)
        except Exception as e:
            logger.debug("Row simulation failed for card %d at (%d, %d): %s", card_index, row, col, e)
            return False
        return scores[context.player.index] > scores[context.opponent.index]


@dataclass(frozen=True)
class _Candidate:
    card_index: int
    row: int
    col: int

    @property
    def sort_key(self) -> tuple[int, int, int]:
        return self.row, self.col, self.card_index


class ControlBoardStrategy(Strategy):
    """
    Maximizes the number of cells the player owns after the move.

    Only moves that beat the current cell count are considered. Ties
    go to the topmost row, then the leftmost column, then the leftmost
    card. Declines (returns None) when no move gains control.
    """

    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        context = self.context(model)
        if context is None:
            return Move.no_move()

        best_count = count_owned_cells(model, context.player)
        candidates: list[_Candidate] = []

        for card_index in range(len(context.hand)):
            for row in range(context.rows):
                for col in range(context.cols):
                    if not model.is_legal_move(card_index, row, col):
                        continue

                    count = self._simulate(model, context.player, card_index, row, col)
                    if count is None:
                        continue
                    if count > best_count:
                        best_count = count
                        candidates = [_Candidate(card_index, row, col)]
                    elif count == best_count and candidates:
                        candidates.append(_Candidate(card_index, row, col))

        if not candidates:
            return None

        best = min(candidates, key=lambda c: c.sort_key)
        return Move.place(best.card_index, best.row, best.col)

    @staticmethod
    def _simulate(
        model: ReadOnlyPawnsBoard,
        player: PlayerColor,
        card_index: int,
        row: int,
        col: int,
    ) -> int | None:
        try:
            simulation = model.copy()
            simulation.place_card(card_index, row, col)
            return count_owned_cells(simulation, player)
        except Exception as e:
            logger.debug("Control simulation failed for card %d at (%d, %d): %s", card_index, row, col, e)
            return None

"""
Players - Automated participants that drive the engine.

An AIPlayer owns one color and one strategy. On its turn it asks the
strategy for a move and applies it through the engine's mutating
contract. Anything the engine rejects turns into a pass, so an AI
turn always ends the turn.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..engine_core.action import ActionResult, Move, MoveType
from ..engine_core.errors import NotYourTurnError

if TYPE_CHECKING:
    from ..bots.policy import MoveSelector
    from ..engine_core.game import PawnsBoard
    from ..engine_core.state import PlayerColor

logger = logging.getLogger(__name__)


@dataclass
class AIPlayer:
    """
    A computer player.

    Usage:
        player = AIPlayer(PlayerColor.RED, FillFirstStrategy())
        result = player.take_turn(board)
    """
    color: PlayerColor
    strategy: MoveSelector

    def is_my_turn(self, model: PawnsBoard) -> bool:
        return model.current_player() is self.color

    def take_turn(self, model: PawnsBoard) -> ActionResult:
        """
        Choose and apply a move for this player.

        Returns the ActionResult of the move that ended the turn.
        """
        if not self.is_my_turn(model):
            raise NotYourTurnError(f"Not {self.color.value}'s turn")

        move = self.strategy(model)
        if move is None or move.move_type is not MoveType.PLACE_CARD:
            return model.apply_move(Move.pass_turn())

        result = model.apply_move(move)
        if not result.success:
            logger.warning(
                "%s strategy chose a rejected move (%s): %s", self.color.value, move, result.error
            )
            return model.apply_move(Move.pass_turn())
        return result

    def __str__(self) -> str:
        name = getattr(self.strategy, "get_name", None)
        label = name() if name is not None else "custom"
        return f"AI Player ({self.color.value}, {label})"

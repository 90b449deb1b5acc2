"""
Action System - Moves and move results.

Moves represent:
1. Placing card i from the hand at (row, col)
2. Passing the turn
3. No move possible (only before the game starts or after it ends)

Moves are applied through PawnsBoard.apply_move(), which reports
the outcome as an ActionResult instead of raising.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .errors import ErrorKind


class MoveType(Enum):
    """Types of moves a player can make."""
    PLACE_CARD = "place_card"
    PASS = "pass"
    NO_MOVE = "no_move"


@dataclass(frozen=True)
class Move:
    """
    A move for the current player.

    Coordinates and card index are -1 for anything but a placement.
    """
    move_type: MoveType
    card_index: int = -1
    row: int = -1
    col: int = -1

    @classmethod
    def place(cls, card_index: int, row: int, col: int) -> Move:
        """Factory for a card placement."""
        return cls(move_type=MoveType.PLACE_CARD, card_index=card_index, row=row, col=col)

    @classmethod
    def pass_turn(cls) -> Move:
        """Factory for a pass."""
        return cls(move_type=MoveType.PASS)

    @classmethod
    def no_move(cls) -> Move:
        """Factory for the 'no move possible' marker."""
        return cls(move_type=MoveType.NO_MOVE)

    @property
    def is_placement(self) -> bool:
        return self.move_type is MoveType.PLACE_CARD

    @property
    def is_pass(self) -> bool:
        return self.move_type is MoveType.PASS

    def __str__(self) -> str:
        if self.move_type is MoveType.PLACE_CARD:
            return f"Move: Card {self.card_index} at ({self.row}, {self.col})"
        if self.move_type is MoveType.PASS:
            return "Move: Pass Turn"
        return "Move: No Move Available"


@dataclass
class ActionResult:
    """
    Result of applying a move.

    Contains:
    - Whether the move succeeded
    - The move that was attempted
    - Error message and kind (if failed)
    - Human-readable changes (for logs and UIs)
    """
    success: bool
    move: Move | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    state_changes: list[str] = field(default_factory=list)
    game_over: bool = False

    @classmethod
    def failure(
        cls,
        error: str,
        error_kind: ErrorKind | None = None,
        move: Move | None = None,
    ) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, move=move, error=error, error_kind=error_kind)

    @classmethod
    def succeeded(
        cls,
        move: Move,
        changes: list[str] | None = None,
        game_over: bool = False,
    ) -> ActionResult:
        """Create a success result."""
        return cls(success=True, move=move, state_changes=changes or [], game_over=game_over)

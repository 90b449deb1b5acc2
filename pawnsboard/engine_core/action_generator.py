"""
Move Generator - Enumerates legal moves from a board.

Used by:
1. Strategies to enumerate candidate placements
2. Views to highlight playable cells

Moves come out in hand order, then rows top to bottom, then columns
left to right.
"""

from __future__ import annotations
from typing import Iterator

from .action import Move
from .game import ReadOnlyPawnsBoard


def iter_legal_placements(
    model: ReadOnlyPawnsBoard,
    rows: range | None = None,
) -> Iterator[Move]:
    """Yield every legal placement for the current player, lazily."""
    if not model.in_progress:
        return

    num_rows, num_cols = model.dimensions()
    hand_size = len(model.hand(model.current_player()))
    for card_index in range(hand_size):
        for row in rows if rows is not None else range(num_rows):
            for col in range(num_cols):
                if model.is_legal_move(card_index, row, col):
                    yield Move.place(card_index, row, col)


def legal_moves(model: ReadOnlyPawnsBoard) -> list[Move]:
    """
    All legal placements for the current player.

    Empty when the game is not in progress or nothing can be placed.
    Passing is always possible and is not included.
    """
    return list(iter_legal_placements(model))

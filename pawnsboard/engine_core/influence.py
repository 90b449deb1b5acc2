"""
Influence - Per-symbol effects applied to a single cell.

Each influence kind has one handler. Handlers only see the target
cell and the acting player, never the whole board. They return True
when the cell changed.

Kinds:
- REGULAR: add a pawn, grow own pawns (max 3), or flip opponent pawns
- UPGRADING: raise the cell's value modifier
- DEVALUING: lower the cell's value modifier (may remove a card)
- BLANK: nothing
"""

from __future__ import annotations
from typing import Callable

from .card import CENTER, GRID_SIZE, Card, InfluenceType
from .state import MAX_PAWNS, Cell, CellContent, Grid, PlayerColor

UPGRADE_AMOUNT = 1
DEVALUE_AMOUNT = 1

InfluenceHandler = Callable[[Cell, PlayerColor], bool]


def apply_regular(cell: Cell, player: PlayerColor) -> bool:
    if cell.content is CellContent.EMPTY:
        cell.add_pawn(player)
        return True

    if cell.content is CellContent.PAWNS:
        if cell.owner is player:
            if cell.pawn_count < MAX_PAWNS:
                cell.add_pawn(player)
                return True
            return False
        cell.change_ownership(player)
        return True

    return False


def apply_upgrading(cell: Cell, player: PlayerColor) -> bool:
    cell.upgrade(UPGRADE_AMOUNT)
    return True


def apply_devaluing(cell: Cell, player: PlayerColor) -> bool:
    cell.devalue(DEVALUE_AMOUNT)
    return True


def apply_blank(cell: Cell, player: PlayerColor) -> bool:
    return False


INFLUENCE_HANDLERS: dict[InfluenceType, InfluenceHandler] = {
    InfluenceType.REGULAR: apply_regular,
    InfluenceType.UPGRADING: apply_upgrading,
    InfluenceType.DEVALUING: apply_devaluing,
    InfluenceType.BLANK: apply_blank,
}


def influence_for_symbol(symbol: str) -> InfluenceHandler:
    """Look up the handler for a grid character (X, I, U, D or C)."""
    return INFLUENCE_HANDLERS[InfluenceType.from_symbol(symbol)]


def apply_influence(kind: InfluenceType, cell: Cell, player: PlayerColor) -> bool:
    return INFLUENCE_HANDLERS[kind](cell, player)


def project_influence(grid: Grid, card: Card, row: int, col: int, player: PlayerColor) -> int:
    """
    Apply a freshly placed card's influence to the board.

    The grid center maps onto (row, col). BLUE reads the card's grid
    mirrored left-right. Targets off the board are skipped.

    Returns the number of cells that changed.
    """
    mirror = player is PlayerColor.BLUE
    changed = 0

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            if r == CENTER and c == CENTER:
                continue

            source_col = GRID_SIZE - 1 - c if mirror else c
            kind = card.influence_at(r, source_col)
            if kind is InfluenceType.BLANK:
                continue

            target_row = row + (r - CENTER)
            target_col = col + (c - CENTER)
            if not grid.in_bounds(target_row, target_col):
                continue

            if apply_influence(kind, grid.cell(target_row, target_col), player):
                changed += 1

    return changed

"""
Tests for cells.

Tests:
- Pawn placement and the three-pawn cap
- Ownership changes
- Card placement and value modifiers
- Card removal through devaluation
"""

import pytest

from ..engine_core.card import Card
from ..engine_core.errors import CellStateError, IllegalOwnerError
from ..engine_core.state import Cell, CellContent, Grid, PlayerColor
from .conftest import CENTER_ONLY

RED = PlayerColor.RED
BLUE = PlayerColor.BLUE


@pytest.fixture
def cell() -> Cell:
    return Cell()


class TestPawns:
    """Tests for adding pawns and changing their owner."""

    def test_new_cell_is_empty(self, cell):
        assert cell.content is CellContent.EMPTY
        assert cell.owner is None
        assert cell.pawn_count == 0

    def test_add_pawn_to_empty_cell(self, cell):
        cell.add_pawn(RED)
        assert cell.content is CellContent.PAWNS
        assert cell.owner is RED
        assert cell.pawn_count == 1

    def test_add_pawns_up_to_three(self, cell):
        for _ in range(3):
            cell.add_pawn(BLUE)
        assert cell.pawn_count == 3

        with pytest.raises(CellStateError):
            cell.add_pawn(BLUE)
        assert cell.pawn_count == 3

    def test_add_pawn_of_other_owner_fails(self, cell):
        cell.add_pawn(RED)
        with pytest.raises(IllegalOwnerError):
            cell.add_pawn(BLUE)
        assert cell.owner is RED

    def test_add_pawn_to_card_fails(self, cell, center_card):
        cell.set_card(center_card, RED)
        with pytest.raises(CellStateError):
            cell.add_pawn(RED)

    def test_change_ownership_keeps_count(self, cell):
        cell.add_pawn(RED)
        cell.add_pawn(RED)
        cell.change_ownership(BLUE)
        assert cell.owner is BLUE
        assert cell.pawn_count == 2

    def test_change_ownership_requires_pawns(self, cell):
        with pytest.raises(CellStateError):
            cell.change_ownership(BLUE)


class TestCardsAndModifiers:
    """Tests for value modifiers and card removal."""

    def test_set_card_clears_pawns(self, cell, center_card):
        cell.add_pawn(RED)
        cell.set_card(center_card, RED)
        assert cell.content is CellContent.CARD
        assert cell.card == center_card
        assert cell.pawn_count == 0
        assert cell.effective_value == 2

    def test_modifier_survives_card_placement(self, cell, center_card):
        cell.upgrade(2)
        cell.add_pawn(RED)
        cell.set_card(center_card, RED)
        assert cell.value_modifier == 2
        assert cell.effective_value == 4

    def test_devalue_to_zero_removes_card(self, cell):
        card = Card.from_rows("Knight", 2, 2, CENTER_ONLY)
        cell.set_card(card, BLUE)

        cell.devalue(1)
        assert cell.content is CellContent.CARD
        assert cell.effective_value == 1

        cell.devalue(1)
        assert cell.content is CellContent.PAWNS
        assert cell.owner is BLUE
        assert cell.pawn_count == 2
        assert cell.card is None
        assert cell.value_modifier == 0

    def test_removed_card_restores_at_most_three_pawns(self, cell):
        card = Card.from_rows("Giant", 3, 1, CENTER_ONLY)
        cell.set_card(card, RED)
        cell.devalue(1)
        assert cell.pawn_count == 3

    def test_devalue_without_card_only_moves_modifier(self, cell):
        cell.devalue(1)
        assert cell.content is CellContent.EMPTY
        assert cell.value_modifier == -1

        cell.add_pawn(RED)
        cell.devalue(2)
        assert cell.content is CellContent.PAWNS
        assert cell.pawn_count == 1
        assert cell.value_modifier == -3

    def test_effective_value_is_floored_at_zero(self, cell, center_card):
        cell.devalue(5)
        cell.add_pawn(RED)
        cell.set_card(center_card, RED)
        assert cell.effective_value == 0

    def test_negative_amounts_rejected(self, cell):
        with pytest.raises(ValueError):
            cell.upgrade(-1)
        with pytest.raises(ValueError):
            cell.devalue(-1)


class TestCopies:
    """Tests for cell and grid copies."""

    def test_cell_copy_is_independent(self, cell):
        cell.add_pawn(RED)
        clone = cell.copy()
        clone.add_pawn(RED)
        clone.devalue(1)
        assert cell.pawn_count == 1
        assert cell.value_modifier == 0

    def test_grid_copy_shares_no_cells(self):
        grid = Grid(2, 3)
        grid.cell(0, 0).add_pawn(RED)
        clone = grid.copy()
        clone.cell(0, 0).change_ownership(BLUE)
        assert grid.cell(0, 0).owner is RED
        assert all(a is not b for a, b in zip(grid.cells, clone.cells))

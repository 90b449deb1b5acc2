"""
Tests for card definitions.
"""

import pytest

from ..engine_core.card import Card, InfluenceType
from ..engine_core.errors import InvalidCardError, InvalidConfigurationError
from .conftest import CENTER_ONLY, CROSS

MIXED = ["XXXXX", "XXUXX", "XICDX", "XXIXX", "XXXXX"]


class TestCardConstruction:
    """Tests for building cards from rows."""

    def test_from_rows_parses_symbols(self):
        card = Card.from_rows("Mixed", 2, 3, MIXED)
        assert card.cost == 2
        assert card.value == 3
        assert card.influence_at(1, 2) is InfluenceType.UPGRADING
        assert card.influence_at(2, 1) is InfluenceType.REGULAR
        assert card.influence_at(2, 3) is InfluenceType.DEVALUING
        assert card.influence_at(2, 2) is InfluenceType.BLANK

    def test_char_grid_marks_center(self):
        card = Card.from_rows("Mixed", 2, 3, MIXED)
        assert card.influence_chars()[2][2] == "C"
        assert card.influence_rows() == MIXED

    def test_bool_grid_matches_regular_cells(self):
        card = Card.from_rows("Cross", 1, 1, CROSS)
        grid = card.bool_grid()
        assert grid[1][2] and grid[2][1] and grid[2][3] and grid[3][2]
        assert sum(flag for row in grid for flag in row) == 4

    def test_from_bool_grid(self):
        flags = [[False] * 5 for _ in range(5)]
        flags[0][0] = True
        card = Card.from_bool_grid("Corner", 1, 1, flags)
        assert card.influence_rows()[0] == "IXXXX"
        assert card.influence_rows()[2] == "XXCXX"

    @pytest.mark.parametrize("cost", [0, 4])
    def test_cost_out_of_range(self, cost):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", cost, 1, CENTER_ONLY)

    def test_value_must_be_positive(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", 1, 0, CENTER_ONLY)

    def test_name_required(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("", 1, 1, CENTER_ONLY)

    def test_missing_center(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", 1, 1, ["XXXXX"] * 5)

    def test_center_elsewhere(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", 1, 1, ["CXXXX", "XXXXX", "XXCXX", "XXXXX", "XXXXX"])

    def test_unknown_symbol(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", 1, 1, ["XXXXX", "XXZXX", "XXCXX", "XXXXX", "XXXXX"])

    def test_short_row(self):
        with pytest.raises(InvalidCardError):
            Card.from_rows("Bad", 1, 1, ["XXXX", "XXXXX", "XXCXX", "XXXXX", "XXXXX"])

    def test_card_errors_are_configuration_errors(self):
        with pytest.raises(InvalidConfigurationError):
            Card.from_rows("Bad", 9, 1, CENTER_ONLY)


class TestCardEquality:
    """Cards compare and hash by value."""

    def test_identical_cards_are_equal(self):
        a = Card.from_rows("Twin", 1, 2, CROSS)
        b = Card.from_rows("Twin", 1, 2, CROSS)
        assert a == b
        assert len({a, b}) == 1

    def test_grid_difference_breaks_equality(self):
        a = Card.from_rows("Twin", 1, 2, CROSS)
        b = Card.from_rows("Twin", 1, 2, CENTER_ONLY)
        assert a != b

    def test_cards_are_immutable(self):
        card = Card.from_rows("Twin", 1, 2, CROSS)
        with pytest.raises(AttributeError):
            card.value = 5

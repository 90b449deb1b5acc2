"""
Tests for deck parsing and deck building.
"""

import pytest

from ..decks.builder import STARTER_DECK, DeckBuilder, validate_deck
from ..decks.reader import parse_cards, read_cards
from ..engine_core.card import InfluenceType
from ..engine_core.errors import DeckFormatError, InvalidConfigurationError
from .conftest import CROSS, make_deck

TWO_CARDS = """\
Guard 1 2
XXXXX
XXIXX
XICIX
XXIXX
XXXXX

Hexer 2 3
XXXXX
XXXDX
XXCIX
XXXUX
XXXXX
"""


def card_text(header, rows=("XXXXX", "XXIXX", "XXCXX", "XXXXX", "XXXXX")):
    return "\n".join([header, *rows]) + "\n"


class TestParseCards:
    """Tests for the deck text format."""

    def test_parses_cards_in_order(self):
        cards = parse_cards(TWO_CARDS)
        assert [c.name for c in cards] == ["Guard", "Hexer"]
        assert cards[1].cost == 2
        assert cards[1].value == 3
        assert cards[1].influence_at(1, 3) is InfluenceType.DEVALUING
        assert cards[1].influence_at(3, 3) is InfluenceType.UPGRADING

    def test_blank_lines_are_ignored(self):
        assert len(parse_cards("\n\n" + TWO_CARDS + "\n\n")) == 2

    def test_empty_text(self):
        assert parse_cards("") == []

    def test_bad_header(self):
        with pytest.raises(DeckFormatError) as exc_info:
            parse_cards(card_text("Guard 1"))
        assert exc_info.value.line_number == 1

    def test_non_numeric_cost(self):
        with pytest.raises(DeckFormatError, match="cost"):
            parse_cards(card_text("Guard one 2"))

    @pytest.mark.parametrize("header", ["Guard 4 1", "Guard 0 1", "Guard 1 0"])
    def test_out_of_range_numbers(self, header):
        with pytest.raises(DeckFormatError):
            parse_cards(card_text(header))

    def test_error_names_the_card_line(self):
        text = TWO_CARDS + "\n" + card_text("Broken 9 1")
        with pytest.raises(DeckFormatError) as exc_info:
            parse_cards(text)
        assert exc_info.value.line_number == 15
        assert str(exc_info.value).startswith("line 15: ")

    def test_truncated_grid(self):
        with pytest.raises(DeckFormatError, match="end of file"):
            parse_cards("Guard 1 1\nXXXXX\nXXCXX\n")

    def test_bad_grid(self):
        with pytest.raises(DeckFormatError):
            parse_cards(card_text("Guard 1 1", ["XXXXX"] * 5))
        with pytest.raises(DeckFormatError):
            parse_cards(card_text("Guard 1 1", ["XXXXX", "XXQXX", "XXCXX", "XXXXX", "XXXXX"]))


class TestReadCards:
    """Tests for reading deck files."""

    def test_read_file(self, tmp_path):
        path = tmp_path / "two.deck"
        path.write_text(TWO_CARDS)
        assert len(read_cards(path)) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(DeckFormatError, match="not found"):
            read_cards(tmp_path / "missing.deck")


class TestDeckBuilder:
    """Tests for validated, optionally shuffled decks."""

    def test_starter_deck(self):
        deck = DeckBuilder().starter_deck()
        assert len(deck) == 20
        assert len({card.name for card in deck}) == 10
        assert deck == read_cards(STARTER_DECK)

    def test_same_seed_same_order(self):
        first = DeckBuilder(seed=7).starter_deck(shuffle=True)
        second = DeckBuilder(seed=7).starter_deck(shuffle=True)
        assert first == second
        assert sorted(c.name for c in first) == sorted(c.name for c in read_cards(STARTER_DECK))

    def test_too_many_copies_in_file(self, tmp_path):
        path = tmp_path / "triple.deck"
        path.write_text(card_text("Guard 1 1") * 3)
        with pytest.raises(InvalidConfigurationError):
            DeckBuilder().create_deck(path)

    def test_validate_deck(self):
        validate_deck(make_deck(CROSS, size=6))
        with pytest.raises(InvalidConfigurationError):
            validate_deck(make_deck(CROSS, size=2) * 2)

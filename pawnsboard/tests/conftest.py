"""
Pytest fixtures for Pawns Board tests.
"""

import pytest

from ..engine_core.card import Card
from ..engine_core.game import PawnsBoard
from ..engine_core.listeners import RecordingListener

EMPTY_ROW = "XXXXX"
CENTER_ONLY = [EMPTY_ROW, EMPTY_ROW, "XXCXX", EMPTY_ROW, EMPTY_ROW]
CROSS = [EMPTY_ROW, "XXIXX", "XICIX", "XXIXX", EMPTY_ROW]


def make_deck(rows, size=15, cost=1, value=1, prefix="card"):
    """Deck of identical-pattern cards, two copies per name."""
    return [
        Card.from_rows(f"{prefix}{i // 2}", cost, value, rows)
        for i in range(size)
    ]


@pytest.fixture
def center_card() -> Card:
    return Card.from_rows("Lone", 1, 2, CENTER_ONLY)


@pytest.fixture
def cross_card() -> Card:
    return Card.from_rows("Cross", 1, 1, CROSS)


@pytest.fixture
def cross_deck():
    return make_deck(CROSS, prefix="cross")


@pytest.fixture
def center_deck():
    return make_deck(CENTER_ONLY, value=2, prefix="lone")


@pytest.fixture
def expensive_deck():
    return make_deck(CROSS, cost=3, prefix="giant")


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def board(cross_deck, listener) -> PawnsBoard:
    """Started 3x5 game with cross-shaped cost-1 cards."""
    model = PawnsBoard()
    model.add_listener(listener)
    model.start_game(3, 5, cross_deck, list(cross_deck), 5)
    return model


@pytest.fixture
def center_board(center_deck) -> PawnsBoard:
    """Started 3x5 game with cards that influence nothing."""
    model = PawnsBoard()
    model.start_game(3, 5, center_deck, list(center_deck), 5)
    return model


@pytest.fixture
def stuck_board(expensive_deck) -> PawnsBoard:
    """Started game where no card can be afforded."""
    model = PawnsBoard()
    model.start_game(3, 5, expensive_deck, list(expensive_deck), 5)
    return model

"""
Deck Builder - Turns deck files into validated card lists.
"""

from __future__ import annotations
import logging
import random
from collections import Counter
from pathlib import Path
from typing import Sequence

from ..config import MAX_COPIES_PER_CARD
from ..engine_core.card import Card
from ..engine_core.errors import InvalidConfigurationError
from .reader import read_cards

logger = logging.getLogger(__name__)

STARTER_DECK = Path(__file__).parent / "data" / "starter.deck"


def validate_deck(deck: Sequence[Card]) -> None:
    """Reject decks holding more than two cards with the same name."""
    counts = Counter(card.name for card in deck)
    for name, count in counts.items():
        if count > MAX_COPIES_PER_CARD:
            raise InvalidConfigurationError(
                f"Deck contains more than {MAX_COPIES_PER_CARD} copies of card: {name}"
            )


class DeckBuilder:
    """
    Reads, validates and optionally shuffles decks.

    Shuffling uses a private random.Random, so a seed gives the same
    order every time.
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def create_deck(self, path: str | Path, shuffle: bool = False) -> list[Card]:
        cards = read_cards(path)
        validate_deck(cards)
        if shuffle:
            self.rng.shuffle(cards)
        logger.debug("Loaded %d cards from %s", len(cards), path)
        return cards

    def starter_deck(self, shuffle: bool = False) -> list[Card]:
        return self.create_deck(STARTER_DECK, shuffle=shuffle)

"""
Decks module - Loading card lists for the engine.

The engine itself only needs ordered card lists; this module reads
them from the textual deck format.
"""

from .reader import CardRecord, parse_cards, read_cards
from .builder import DeckBuilder, STARTER_DECK, validate_deck

__all__ = [
    "CardRecord",
    "parse_cards",
    "read_cards",
    "DeckBuilder",
    "STARTER_DECK",
    "validate_deck",
]

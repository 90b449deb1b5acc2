"""
Pawns Board - Rules engine and AI players for a two-player grid card game.

Players place cards onto cells they hold pawns on; each card projects
an influence pattern that adds pawns, flips ownership, or changes the
value of cards. Rows are scored separately. The package provides:
- The rules engine with independent snapshots for lookahead
- Move-selection strategies, chaining and minimax search
- Deck loading and an AI-vs-AI game loop
"""

__version__ = "0.1.0"

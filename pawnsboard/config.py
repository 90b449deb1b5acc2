"""
Configuration - Game setup parameters and environment defaults.

GameConfig validates the numeric parameters of start_game().
Deck-dependent checks (deck size, duplicates) live in the engine
because they need the decks themselves.
"""

import os

from pydantic import BaseModel, Field, field_validator

# Environment configuration
DEFAULT_ROWS = int(os.getenv("PAWNSBOARD_ROWS", "3"))
DEFAULT_COLS = int(os.getenv("PAWNSBOARD_COLS", "5"))
DEFAULT_HAND_SIZE = int(os.getenv("PAWNSBOARD_HAND_SIZE", "5"))
LOG_LEVEL = os.getenv("PAWNSBOARD_LOG_LEVEL", "WARNING")

# Most copies of one card name a deck may hold
MAX_COPIES_PER_CARD = 2


class GameConfig(BaseModel):
    """Board dimensions and starting hand size."""
    rows: int = Field(default=DEFAULT_ROWS, gt=0, description="Number of board rows")
    cols: int = Field(default=DEFAULT_COLS, gt=1, description="Number of board columns (odd)")
    hand_size: int = Field(default=DEFAULT_HAND_SIZE, gt=0, description="Starting hand size")

    model_config = {"frozen": True, "strict": True}

    @field_validator("cols")
    @classmethod
    def cols_must_be_odd(cls, value: int) -> int:
        if value % 2 == 0:
            raise ValueError("Number of columns must be odd")
        return value

    @property
    def min_deck_size(self) -> int:
        return self.rows * self.cols

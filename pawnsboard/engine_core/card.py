"""
Cards - Immutable card definitions and their influence grids.

A card has a name, a pawn cost (1-3), a score value (>= 1) and a 5x5
influence grid. The grid's center (2,2) is where the card itself is
placed; it never influences anything.

The grid can be viewed three ways:
- Typed grid of InfluenceType values
- Canonical character rows (X, I, U, D with C at the center)
- Boolean grid (True where the influence is regular)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .errors import InvalidCardError

GRID_SIZE = 5
CENTER = 2
CENTER_SYMBOL = "C"
MIN_COST = 1
MAX_COST = 3


class InfluenceType(Enum):
    """Influence symbols a card grid may contain."""
    BLANK = "X"
    REGULAR = "I"
    UPGRADING = "U"
    DEVALUING = "D"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> InfluenceType:
        """Resolve a grid character. The center marker counts as blank."""
        if symbol == CENTER_SYMBOL:
            return cls.BLANK
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(
                f"Invalid influence symbol {symbol!r}, expected X, I, U, D or C"
            ) from None


InfluenceGrid = tuple[tuple[InfluenceType, ...], ...]


@dataclass(frozen=True)
class Card:
    """
    A card definition.

    Equality and hashing are structural, so two copies of the same
    card in a deck compare equal.
    """
    name: str
    cost: int
    value: int
    influence: InfluenceGrid

    def __post_init__(self):
        if not self.name or any(ch.isspace() for ch in self.name):
            raise InvalidCardError(f"Card name must be a non-empty word, got {self.name!r}")
        if not isinstance(self.cost, int) or not MIN_COST <= self.cost <= MAX_COST:
            raise InvalidCardError(
                f"Card cost must be between {MIN_COST} and {MAX_COST}, got: {self.cost}"
            )
        if not isinstance(self.value, int) or self.value < 1:
            raise InvalidCardError(f"Card value must be positive, got: {self.value}")
        if len(self.influence) != GRID_SIZE or any(
            len(row) != GRID_SIZE for row in self.influence
        ):
            raise InvalidCardError("Influence grid must be 5x5")
        if any(
            not isinstance(kind, InfluenceType) for row in self.influence for kind in row
        ):
            raise InvalidCardError("Influence grid must only contain InfluenceType values")
        if self.influence[CENTER][CENTER] is not InfluenceType.BLANK:
            raise InvalidCardError("The center of the influence grid cannot exert influence")

    @classmethod
    def from_rows(cls, name: str, cost: int, value: int, rows: Sequence[str]) -> Card:
        """
        Build a card from five 5-character rows.

        Rows use X, I, U, D and exactly one C at the center.
        """
        if len(rows) != GRID_SIZE:
            raise InvalidCardError(f"Influence grid must have {GRID_SIZE} rows, got {len(rows)}")

        grid = []
        center_seen = False
        for r, row in enumerate(rows):
            if len(row) != GRID_SIZE:
                raise InvalidCardError(
                    f"Influence grid line must have exactly 5 characters, got: {row!r}"
                )
            parsed = []
            for c, symbol in enumerate(row):
                if symbol == CENTER_SYMBOL:
                    if center_seen:
                        raise InvalidCardError("Multiple card positions (C) found in influence grid")
                    if (r, c) != (CENTER, CENTER):
                        raise InvalidCardError(
                            f"Card position (C) must be in the center at (2,2), found at ({r},{c})"
                        )
                    center_seen = True
                try:
                    parsed.append(InfluenceType.from_symbol(symbol))
                except ValueError as e:
                    raise InvalidCardError(str(e)) from None
            grid.append(tuple(parsed))

        if not center_seen:
            raise InvalidCardError("No card position (C) found in influence grid")

        return cls(name=name, cost=cost, value=value, influence=tuple(grid))

    @classmethod
    def from_bool_grid(
        cls, name: str, cost: int, value: int, grid: Sequence[Sequence[bool]]
    ) -> Card:
        """Build a base-game card where True marks regular influence."""
        rows = []
        for r, row in enumerate(grid):
            symbols = []
            for c, flag in enumerate(row):
                if (r, c) == (CENTER, CENTER):
                    symbols.append(CENTER_SYMBOL)
                else:
                    symbols.append("I" if flag else "X")
            rows.append("".join(symbols))
        return cls.from_rows(name, cost, value, rows)

    @property
    def influence_grid(self) -> InfluenceGrid:
        return self.influence

    def influence_at(self, row: int, col: int) -> InfluenceType:
        return self.influence[row][col]

    def influence_chars(self) -> list[list[str]]:
        """Canonical character grid, with C at the center."""
        chars = [[kind.symbol for kind in row] for row in self.influence]
        chars[CENTER][CENTER] = CENTER_SYMBOL
        return chars

    def influence_rows(self) -> list[str]:
        return ["".join(row) for row in self.influence_chars()]

    def bool_grid(self) -> list[list[bool]]:
        return [[kind is InfluenceType.REGULAR for kind in row] for row in self.influence]

    def __str__(self) -> str:
        return f"{self.name} (cost {self.cost}, value {self.value})"

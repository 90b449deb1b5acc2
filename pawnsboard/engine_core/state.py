"""
Game State - Cells, the board grid and per-player zones.

Design principles:
- Every cell carries a value modifier; the base game never changes it
- The grid is a flat list of cells, copied cell by cell for snapshots
- Cards are immutable, so copies may share them
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum

from .card import Card
from .errors import CellStateError, IllegalOwnerError

MAX_PAWNS = 3


class PlayerColor(Enum):
    """The two players. RED starts on the left and moves first."""
    RED = "red"
    BLUE = "blue"

    @property
    def opponent(self) -> PlayerColor:
        return PlayerColor.BLUE if self is PlayerColor.RED else PlayerColor.RED

    @property
    def index(self) -> int:
        """Position of this player in (red, blue) score pairs."""
        return 0 if self is PlayerColor.RED else 1


class CellContent(Enum):
    EMPTY = "empty"
    PAWNS = "pawns"
    CARD = "card"


class GamePhase(Enum):
    """High-level game phases."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


@dataclass
class Cell:
    """
    A single board position.

    Holds nothing, 1-3 pawns of one player, or one card. The value
    modifier survives pawn and empty states so that it applies to
    whichever card eventually lands here.
    """
    content: CellContent = CellContent.EMPTY
    owner: PlayerColor | None = None
    pawn_count: int = 0
    card: Card | None = None
    value_modifier: int = 0

    def add_pawn(self, owner: PlayerColor) -> None:
        if self.content is CellContent.CARD:
            raise CellStateError("Cannot add pawn to a cell containing a card")

        if self.content is CellContent.EMPTY:
            self.content = CellContent.PAWNS
            self.owner = owner
            self.pawn_count = 1
            return

        if self.owner is not owner:
            raise IllegalOwnerError("Cannot add pawn of different owner")
        if self.pawn_count >= MAX_PAWNS:
            raise CellStateError("Cell already has maximum number of pawns")
        self.pawn_count += 1

    def change_ownership(self, new_owner: PlayerColor) -> None:
        if self.content is not CellContent.PAWNS:
            raise CellStateError("Can only change ownership of pawns")
        self.owner = new_owner

    def set_card(self, card: Card, owner: PlayerColor) -> None:
        # value_modifier carries over to the placed card
        self.content = CellContent.CARD
        self.owner = owner
        self.card = card
        self.pawn_count = 0

    def upgrade(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("Upgrade amount cannot be negative")
        self.value_modifier += amount
        return self.value_modifier

    def devalue(self, amount: int) -> int:
        """
        Lower the value modifier.

        A card whose value drops to zero or below is removed and the
        cell falls back to pawns of the card's owner.
        """
        if amount < 0:
            raise ValueError("Devalue amount cannot be negative")
        self.value_modifier -= amount
        if self.content is CellContent.CARD and self.card.value + self.value_modifier <= 0:
            self._remove_card()
        return self.value_modifier

    def _remove_card(self) -> None:
        self.pawn_count = min(self.card.cost, MAX_PAWNS)
        self.content = CellContent.PAWNS
        self.card = None
        self.value_modifier = 0

    @property
    def effective_value(self) -> int:
        if self.content is not CellContent.CARD:
            return 0
        return max(0, self.card.value + self.value_modifier)

    @property
    def is_empty(self) -> bool:
        return self.content is CellContent.EMPTY

    def copy(self) -> Cell:
        return replace(self)


@dataclass
class Grid:
    """Fixed-size board stored as a flat row-major list of cells."""
    rows: int
    cols: int
    cells: list[Cell] = field(default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [Cell() for _ in range(self.rows * self.cols)]
        elif len(self.cells) != self.rows * self.cols:
            raise ValueError("Cell list does not match grid dimensions")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row * self.cols + col]

    def row(self, row: int) -> list[Cell]:
        start = row * self.cols
        return self.cells[start:start + self.cols]

    def copy(self) -> Grid:
        return Grid(rows=self.rows, cols=self.cols, cells=[c.copy() for c in self.cells])


@dataclass
class PlayerState:
    """Draw pile and hand for one player."""
    color: PlayerColor
    deck: list[Card] = field(default_factory=list)
    hand: list[Card] = field(default_factory=list)

    def draw(self, hand_limit: int) -> Card | None:
        """Move the top deck card into the hand if there is room."""
        if not self.deck or len(self.hand) >= hand_limit:
            return None
        card = self.deck.pop(0)
        self.hand.append(card)
        return card

    def copy(self) -> PlayerState:
        return PlayerState(color=self.color, deck=list(self.deck), hand=list(self.hand))

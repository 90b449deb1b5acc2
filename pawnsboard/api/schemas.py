"""
Pydantic Schemas - Observation views for external collaborators.

These models describe the read-only observation contract in a form a
view or controller can consume (or dump to JSON for display). They are
built from a ReadOnlyPawnsBoard and never write back to it.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from ..engine_core.state import CellContent, GamePhase, PlayerColor

if TYPE_CHECKING:
    from ..engine_core.card import Card
    from ..engine_core.game import ReadOnlyPawnsBoard


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    name: str
    cost: int
    value: int
    influence: list[str] = Field(description="Five rows over X, I, U, D with C at the center")

    model_config = {"frozen": True}

    @classmethod
    def from_card(cls, card: Card) -> CardInfo:
        return cls(name=card.name, cost=card.cost, value=card.value, influence=card.influence_rows())


class CellInfo(BaseModel):
    """One board cell."""
    row: int
    col: int
    content: CellContent
    owner: Optional[PlayerColor] = None
    pawn_count: int = 0
    card: Optional[CardInfo] = None
    value_modifier: int = 0
    effective_value: int = 0

    model_config = {"frozen": True}


class PlayerInfo(BaseModel):
    """Per-player information."""
    color: PlayerColor
    is_current_turn: bool = False
    hand: list[CardInfo] = Field(default_factory=list)
    deck_size: int = 0
    total_score: int = 0

    model_config = {"frozen": True}


# =============================================================================
# Game State
# =============================================================================

class GameStateView(BaseModel):
    """Full observable state of a game."""
    phase: GamePhase
    rows: int = 0
    cols: int = 0
    current_player: Optional[PlayerColor] = None
    cells: list[CellInfo] = Field(default_factory=list)
    row_scores: list[tuple[int, int]] = Field(default_factory=list)
    players: list[PlayerInfo] = Field(default_factory=list)
    winner: Optional[PlayerColor] = None

    model_config = {"frozen": True}

    @classmethod
    def from_model(cls, model: ReadOnlyPawnsBoard) -> GameStateView:
        if not model.game_started:
            return cls(phase=model.phase)

        rows, cols = model.dimensions()
        current = model.current_player()
        cells = []
        for row in range(rows):
            for col in range(cols):
                card = model.card_at(row, col)
                cells.append(CellInfo(
                    row=row,
                    col=col,
                    content=model.cell_content(row, col),
                    owner=model.cell_owner(row, col),
                    pawn_count=model.pawn_count(row, col),
                    card=CardInfo.from_card(card) if card is not None else None,
                    value_modifier=model.value_modifier(row, col),
                    effective_value=model.effective_value(row, col),
                ))

        totals = model.total_score()
        players = [
            PlayerInfo(
                color=color,
                is_current_turn=color is current and not model.game_over,
                hand=[CardInfo.from_card(card) for card in model.hand(color)],
                deck_size=model.deck_size(color),
                total_score=totals[color.index],
            )
            for color in PlayerColor
        ]

        return cls(
            phase=model.phase,
            rows=rows,
            cols=cols,
            current_player=current,
            cells=cells,
            row_scores=[model.row_scores(row) for row in range(rows)],
            players=players,
            winner=model.winner() if model.game_over else None,
        )

    def cell(self, row: int, col: int) -> CellInfo:
        return self.cells[row * self.cols + col]

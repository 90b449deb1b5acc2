"""
Deck Reader - Parses the textual deck format.

Format, repeated once per card:

    name cost value
    XXXXX
    XXIXX
    XICIX
    XXIXX
    XXXXX

Grid rows use X (none), I (regular), U (upgrading), D (devaluing)
and exactly one C at the center. Blank lines between cards are
ignored.
"""

from __future__ import annotations
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..engine_core.card import GRID_SIZE, Card
from ..engine_core.errors import DeckFormatError, InvalidCardError


class CardRecord(BaseModel):
    """Validated card header plus its raw influence rows."""
    name: str = Field(min_length=1, pattern=r"^\S+$")
    cost: int = Field(ge=1, le=3)
    value: int = Field(ge=1)
    rows: list[str] = Field(min_length=GRID_SIZE, max_length=GRID_SIZE)

    def to_card(self) -> Card:
        return Card.from_rows(self.name, self.cost, self.value, self.rows)


def _parse_header(line: str, line_number: int) -> tuple[str, str, str]:
    parts = line.split()
    if len(parts) != 3:
        raise DeckFormatError(f"Invalid card header format: {line!r}", line_number)
    return parts[0], parts[1], parts[2]


def parse_cards(text: str) -> list[Card]:
    """
    Parse every card in a deck text.

    Raises DeckFormatError naming the offending line.
    """
    lines = text.splitlines()
    cards: list[Card] = []
    i = 0

    while i < len(lines):
        if not lines[i].strip():
            i += 1
            continue

        header_number = i + 1
        name, cost, value = _parse_header(lines[i], header_number)
        rows = [line.strip() for line in lines[i + 1:i + 1 + GRID_SIZE]]
        if len(rows) < GRID_SIZE:
            raise DeckFormatError(
                "Unexpected end of file while reading influence grid", header_number
            )

        try:
            record = CardRecord(name=name, cost=cost, value=value, rows=rows)
            cards.append(record.to_card())
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"])
            raise DeckFormatError(f"Invalid {field_name}: {error['msg']}", header_number) from e
        except InvalidCardError as e:
            raise DeckFormatError(str(e), header_number) from e

        i += 1 + GRID_SIZE

    return cards


def read_cards(path: str | Path) -> list[Card]:
    """Read and parse a deck file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DeckFormatError(f"File not found: {path}") from None
    return parse_cards(text)

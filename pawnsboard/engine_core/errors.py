"""
Engine Errors - Typed error kinds and exceptions.

Every failure the engine reports belongs to one closed ErrorKind.
The exception classes carry that kind so callers can either catch
a specific class or branch on `error.kind`.

Categories:
- Configuration: bad dimensions, decks or card data (start of game only)
- Preconditions: a placement that breaks a game rule
- State: operating before the game starts or after it ends
- Coordinates: row/column outside the board (caller bug)
"""

from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    """Closed set of engine error kinds."""
    # Configuration
    INVALID_CONFIGURATION = "invalid_configuration"
    INVALID_CARD = "invalid_card"
    DECK_FORMAT = "deck_format"

    # Placement preconditions
    INVALID_CARD_INDEX = "invalid_card_index"
    CELL_NOT_PAWNS = "cell_not_pawns"
    WRONG_OWNER = "wrong_owner"
    INSUFFICIENT_PAWNS = "insufficient_pawns"

    # Game state
    GAME_NOT_STARTED = "game_not_started"
    GAME_OVER = "game_over"
    GAME_NOT_OVER = "game_not_over"
    GAME_ALREADY_STARTED = "game_already_started"
    NOT_YOUR_TURN = "not_your_turn"

    # Other
    INVALID_COORDINATES = "invalid_coordinates"
    CELL_STATE = "cell_state"
    INVALID_MOVE = "invalid_move"
    STRATEGY_CONFIGURATION = "strategy_configuration"


class PawnsBoardError(Exception):
    """Base class for all engine errors."""
    kind: ErrorKind = ErrorKind.INVALID_MOVE


# =============================================================================
# Configuration errors
# =============================================================================

class InvalidConfigurationError(PawnsBoardError, ValueError):
    """Board dimensions, deck sizes or hand size are not acceptable."""
    kind = ErrorKind.INVALID_CONFIGURATION


class InvalidCardError(InvalidConfigurationError):
    """A card definition breaks the card invariants."""
    kind = ErrorKind.INVALID_CARD


class DeckFormatError(InvalidConfigurationError):
    """A deck file could not be parsed."""
    kind = ErrorKind.DECK_FORMAT

    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


# =============================================================================
# Placement preconditions
# =============================================================================

class IllegalMoveError(PawnsBoardError):
    """A placement that breaks a game rule."""
    kind = ErrorKind.INVALID_MOVE


class InvalidCardIndexError(IllegalMoveError):
    kind = ErrorKind.INVALID_CARD_INDEX


class CellNotPawnsError(IllegalMoveError):
    kind = ErrorKind.CELL_NOT_PAWNS


class IllegalOwnerError(IllegalMoveError):
    """Pawns belong to the other player."""
    kind = ErrorKind.WRONG_OWNER


class InsufficientPawnsError(IllegalMoveError):
    kind = ErrorKind.INSUFFICIENT_PAWNS


# =============================================================================
# State errors
# =============================================================================

class GameStateError(PawnsBoardError, RuntimeError):
    """The operation is not allowed in the current game phase."""
    kind = ErrorKind.GAME_NOT_STARTED


class GameNotStartedError(GameStateError):
    kind = ErrorKind.GAME_NOT_STARTED


class GameOverError(GameStateError):
    kind = ErrorKind.GAME_OVER


class GameNotOverError(GameStateError):
    kind = ErrorKind.GAME_NOT_OVER


class GameAlreadyStartedError(GameStateError):
    kind = ErrorKind.GAME_ALREADY_STARTED


class NotYourTurnError(GameStateError):
    kind = ErrorKind.NOT_YOUR_TURN


# =============================================================================
# Caller bugs
# =============================================================================

class InvalidCoordinatesError(PawnsBoardError, IndexError):
    kind = ErrorKind.INVALID_COORDINATES


class CellStateError(PawnsBoardError):
    """A cell operation that its current content does not allow."""
    kind = ErrorKind.CELL_STATE


class StrategyConfigurationError(PawnsBoardError):
    """A strategy chain was wired incorrectly."""
    kind = ErrorKind.STRATEGY_CONFIGURATION

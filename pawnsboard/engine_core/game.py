"""
Pawns Board Engine - The game state machine.

The engine is the single owner of board and player state:
1. start_game() deals hands and places the starting pawns
2. place_card() and pass_turn() are the only mutations
3. copy() produces an independent snapshot for simulation

Phases: NOT_STARTED -> IN_PROGRESS -> GAME_OVER.

Placement is validate-then-mutate: a failed call raises a typed
error, notifies listeners, and leaves the state untouched.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from collections import Counter
from typing import Sequence

from pydantic import ValidationError

from ..config import MAX_COPIES_PER_CARD, GameConfig
from .action import ActionResult, Move, MoveType
from .card import Card
from .errors import (
    CellNotPawnsError,
    GameAlreadyStartedError,
    GameNotOverError,
    GameNotStartedError,
    GameOverError,
    IllegalMoveError,
    IllegalOwnerError,
    InsufficientPawnsError,
    InvalidCardIndexError,
    InvalidConfigurationError,
    InvalidCoordinatesError,
    PawnsBoardError,
)
from .influence import project_influence
from .listeners import ModelStatusListener
from .state import Cell, CellContent, GamePhase, Grid, PlayerColor, PlayerState

logger = logging.getLogger(__name__)


class ReadOnlyPawnsBoard(ABC):
    """
    Observation contract for views and strategies.

    Everything here is free of side effects. copy() returns a full
    mutable engine that shares nothing with this board.
    """

    @property
    @abstractmethod
    def phase(self) -> GamePhase:
        pass

    @property
    def game_started(self) -> bool:
        return self.phase is not GamePhase.NOT_STARTED

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def in_progress(self) -> bool:
        return self.phase is GamePhase.IN_PROGRESS

    @abstractmethod
    def current_player(self) -> PlayerColor:
        pass

    @abstractmethod
    def dimensions(self) -> tuple[int, int]:
        pass

    @abstractmethod
    def cell_content(self, row: int, col: int) -> CellContent:
        pass

    @abstractmethod
    def cell_owner(self, row: int, col: int) -> PlayerColor | None:
        pass

    @abstractmethod
    def pawn_count(self, row: int, col: int) -> int:
        pass

    @abstractmethod
    def card_at(self, row: int, col: int) -> Card | None:
        pass

    @abstractmethod
    def value_modifier(self, row: int, col: int) -> int:
        pass

    @abstractmethod
    def effective_value(self, row: int, col: int) -> int:
        pass

    @abstractmethod
    def row_scores(self, row: int) -> tuple[int, int]:
        pass

    @abstractmethod
    def total_score(self) -> tuple[int, int]:
        pass

    @abstractmethod
    def winner(self) -> PlayerColor | None:
        pass

    @abstractmethod
    def hand(self, player: PlayerColor) -> list[Card]:
        pass

    @abstractmethod
    def deck_size(self, player: PlayerColor) -> int:
        pass

    @abstractmethod
    def is_legal_move(self, card_index: int, row: int, col: int) -> bool:
        pass

    @abstractmethod
    def copy(self) -> PawnsBoard:
        pass


class PawnsBoard(ReadOnlyPawnsBoard):
    """
    The mutable game engine.

    Usage:
        board = PawnsBoard()
        board.start_game(3, 5, red_deck, blue_deck, hand_size=5)
        board.place_card(0, 1, 0)
        board.pass_turn()
    """

    def __init__(self):
        self._phase = GamePhase.NOT_STARTED
        self._grid: Grid | None = None
        self._players: dict[PlayerColor, PlayerState] = {}
        self._current = PlayerColor.RED
        self._last_player_passed = False
        self._hand_size = 0
        self._listeners: list[ModelStatusListener] = []

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start_game(
        self,
        rows: int,
        cols: int,
        red_deck: Sequence[Card],
        blue_deck: Sequence[Card],
        hand_size: int,
    ) -> None:
        """
        Set up the board and deal the starting hands.

        Raises InvalidConfigurationError for bad dimensions, undersized
        decks, too many copies of one card, or a hand size above a third
        of the deck.
        """
        if self._phase is not GamePhase.NOT_STARTED:
            raise GameAlreadyStartedError("Game has already been started")

        try:
            config = GameConfig(rows=rows, cols=cols, hand_size=hand_size)
        except ValidationError as e:
            raise InvalidConfigurationError(
                f"Invalid game configuration: {e.errors()[0]['msg']}"
            ) from e

        for color, deck in ((PlayerColor.RED, red_deck), (PlayerColor.BLUE, blue_deck)):
            self._validate_deck(color, deck, config)

        smallest_deck = min(len(red_deck), len(blue_deck))
        if config.hand_size > smallest_deck // 3:
            raise InvalidConfigurationError(
                "Starting hand size cannot exceed one third of the deck size"
            )

        players = {
            PlayerColor.RED: PlayerState(PlayerColor.RED, deck=list(red_deck)),
            PlayerColor.BLUE: PlayerState(PlayerColor.BLUE, deck=list(blue_deck)),
        }
        for player in players.values():
            player.hand = player.deck[:config.hand_size]
            player.deck = player.deck[config.hand_size:]

        grid = Grid(config.rows, config.cols)
        for r in range(config.rows):
            grid.cell(r, 0).add_pawn(PlayerColor.RED)
            grid.cell(r, config.cols - 1).add_pawn(PlayerColor.BLUE)

        self._grid = grid
        self._players = players
        self._hand_size = config.hand_size
        self._current = PlayerColor.RED
        self._last_player_passed = False
        self._phase = GamePhase.IN_PROGRESS

        logger.info(
            "Game started on %dx%d board, hand size %d", config.rows, config.cols, config.hand_size
        )
        self._notify_turn_change(self._current)

    @staticmethod
    def _validate_deck(color: PlayerColor, deck: Sequence[Card], config: GameConfig) -> None:
        if len(deck) < config.min_deck_size:
            raise InvalidConfigurationError(
                f"Deck size must be at least {config.min_deck_size} cards "
                f"({color.value} deck has {len(deck)})"
            )
        counts = Counter(card.name for card in deck)
        for name, count in counts.items():
            if count > MAX_COPIES_PER_CARD:
                raise InvalidConfigurationError(
                    f"{color.value} deck contains more than {MAX_COPIES_PER_CARD} "
                    f"copies of card: {name}"
                )

    # =========================================================================
    # Mutations
    # =========================================================================

    def place_card(self, card_index: int, row: int, col: int) -> None:
        """
        Place a card from the current player's hand at (row, col).

        The cell must hold at least card.cost pawns owned by the current
        player. On success the card's influence is applied, the turn
        passes to the opponent, and the opponent draws a card.
        """
        try:
            card = self._check_placement(card_index, row, col)
        except PawnsBoardError as e:
            self._notify_invalid_move(self._describe_error(e))
            raise

        player = self._current
        self._grid.cell(row, col).set_card(card, player)
        changed = project_influence(self._grid, card, row, col, player)
        del self._players[player].hand[card_index]
        logger.debug(
            "%s placed %s at (%d, %d), influence changed %d cell(s)",
            player.value, card.name, row, col, changed,
        )

        self._last_player_passed = False
        self._switch_player()
        self._draw_for_current()

    def pass_turn(self) -> None:
        """Pass. Two passes in a row end the game."""
        self._validate_in_progress()

        if self._last_player_passed:
            self._phase = GamePhase.GAME_OVER
            scores = self.total_score()
            winner = self.winner()
            logger.info(
                "Game over: winner=%s, scores=%s", winner.value if winner else "tie", scores
            )
            self._notify_game_over(winner, scores)
            return

        logger.debug("%s passed", self._current.value)
        self._last_player_passed = True
        self._switch_player()
        self._draw_for_current()

    def apply_move(self, move: Move) -> ActionResult:
        """
        Apply a Move and report the outcome instead of raising.

        Engine errors become failure results carrying their ErrorKind.
        """
        if move.move_type is MoveType.NO_MOVE:
            return ActionResult.failure("No move to apply", move=move)

        actor = self._current
        try:
            if move.is_placement:
                self.place_card(move.card_index, move.row, move.col)
                changes = [f"{actor.value} placed card {move.card_index} at ({move.row}, {move.col})"]
            else:
                self.pass_turn()
                changes = [f"{actor.value} passed"]
        except PawnsBoardError as e:
            return ActionResult.failure(str(e), error_kind=e.kind, move=move)

        return ActionResult.succeeded(move, changes=changes, game_over=self.game_over)

    def _check_placement(self, card_index: int, row: int, col: int) -> Card:
        self._validate_in_progress()
        self._validate_coordinates(row, col)

        hand = self._players[self._current].hand
        if card_index < 0 or card_index >= len(hand):
            raise InvalidCardIndexError(f"Invalid card index: {card_index}")
        card = hand[card_index]

        cell = self._grid.cell(row, col)
        if cell.content is not CellContent.PAWNS:
            raise CellNotPawnsError("Cell does not contain pawns")
        if cell.owner is not self._current:
            raise IllegalOwnerError("Pawns in cell are not owned by current player")
        if cell.pawn_count < card.cost:
            raise InsufficientPawnsError(
                f"Not enough pawns in cell. Required: {card.cost}, Available: {cell.pawn_count}"
            )
        return card

    @staticmethod
    def _describe_error(error: PawnsBoardError) -> str:
        if isinstance(error, InvalidCoordinatesError):
            prefix = "Invalid coordinates"
        elif isinstance(error, IllegalOwnerError):
            prefix = "Ownership error"
        elif isinstance(error, InvalidCardIndexError):
            prefix = "Card error"
        elif isinstance(error, IllegalMoveError):
            prefix = "Access error"
        else:
            prefix = "Game state error"
        return f"{prefix}: {error}"

    def _switch_player(self) -> None:
        self._current = self._current.opponent
        self._notify_turn_change(self._current)

    def _draw_for_current(self) -> None:
        drawn = self._players[self._current].draw(self._hand_size)
        if drawn is not None:
            logger.debug("%s drew %s", self._current.value, drawn.name)

    # =========================================================================
    # Observation
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def last_player_passed(self) -> bool:
        return self._last_player_passed

    @property
    def hand_size_limit(self) -> int:
        return self._hand_size

    def current_player(self) -> PlayerColor:
        self._validate_started()
        return self._current

    def dimensions(self) -> tuple[int, int]:
        self._validate_started()
        return self._grid.rows, self._grid.cols

    def cell_content(self, row: int, col: int) -> CellContent:
        return self._cell(row, col).content

    def cell_owner(self, row: int, col: int) -> PlayerColor | None:
        return self._cell(row, col).owner

    def pawn_count(self, row: int, col: int) -> int:
        cell = self._cell(row, col)
        return cell.pawn_count if cell.content is CellContent.PAWNS else 0

    def card_at(self, row: int, col: int) -> Card | None:
        cell = self._cell(row, col)
        return cell.card if cell.content is CellContent.CARD else None

    def value_modifier(self, row: int, col: int) -> int:
        return self._cell(row, col).value_modifier

    def effective_value(self, row: int, col: int) -> int:
        return self._cell(row, col).effective_value

    def row_scores(self, row: int) -> tuple[int, int]:
        self._validate_started()
        if not 0 <= row < self._grid.rows:
            raise InvalidCoordinatesError(f"Row index out of bounds: {row}")

        scores = [0, 0]
        for cell in self._grid.row(row):
            if cell.content is CellContent.CARD:
                scores[cell.owner.index] += cell.effective_value
        return scores[0], scores[1]

    def total_score(self) -> tuple[int, int]:
        self._validate_started()

        red_total = 0
        blue_total = 0
        for row in range(self._grid.rows):
            red, blue = self.row_scores(row)
            if red > blue:
                red_total += red
            elif blue > red:
                blue_total += blue
        return red_total, blue_total

    def winner(self) -> PlayerColor | None:
        """Winner of a finished game, or None for a tie."""
        self._validate_started()
        if self._phase is not GamePhase.GAME_OVER:
            raise GameNotOverError("Game is not over yet")

        red, blue = self.total_score()
        if red > blue:
            return PlayerColor.RED
        if blue > red:
            return PlayerColor.BLUE
        return None

    def hand(self, player: PlayerColor) -> list[Card]:
        self._validate_started()
        return list(self._players[player].hand)

    def deck_size(self, player: PlayerColor) -> int:
        self._validate_started()
        return len(self._players[player].deck)

    def is_legal_move(self, card_index: int, row: int, col: int) -> bool:
        self._validate_in_progress()
        self._validate_coordinates(row, col)
        try:
            self._check_placement(card_index, row, col)
        except IllegalMoveError:
            return False
        return True

    def copy(self) -> PawnsBoard:
        """
        Independent snapshot of the whole game.

        The copy has its own grid, hands and decks and no listeners.
        """
        clone = PawnsBoard()
        clone._phase = self._phase
        clone._grid = self._grid.copy() if self._grid is not None else None
        clone._players = {color: state.copy() for color, state in self._players.items()}
        clone._current = self._current
        clone._last_player_passed = self._last_player_passed
        clone._hand_size = self._hand_size
        return clone

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_listener(self, listener: ModelStatusListener) -> None:
        if listener is not None and listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: ModelStatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_turn_change(self, player: PlayerColor) -> None:
        for listener in list(self._listeners):
            listener.on_turn_change(player)

    def _notify_game_over(self, winner: PlayerColor | None, scores: tuple[int, int]) -> None:
        for listener in list(self._listeners):
            listener.on_game_over(winner, scores)

    def _notify_invalid_move(self, message: str) -> None:
        for listener in list(self._listeners):
            listener.on_invalid_move(message)

    # =========================================================================
    # Validation helpers
    # =========================================================================

    def _validate_started(self) -> None:
        if self._phase is GamePhase.NOT_STARTED:
            raise GameNotStartedError("Game has not been started")

    def _validate_in_progress(self) -> None:
        self._validate_started()
        if self._phase is GamePhase.GAME_OVER:
            raise GameOverError("Game is already over")

    def _validate_coordinates(self, row: int, col: int) -> None:
        if not self._grid.in_bounds(row, col):
            raise InvalidCoordinatesError(
                f"Invalid coordinates: row={row} (max {self._grid.rows - 1}), "
                f"col={col} (max {self._grid.cols - 1})"
            )

    def _cell(self, row: int, col: int) -> Cell:
        self._validate_started()
        self._validate_coordinates(row, col)
        return self._grid.cell(row, col)

"""
Strategy Policy - Interface for move selection.

A Strategy reads a board through the read-only contract and returns:
- a Move (placement, pass, or "no move" when the game is not running)
- None, when a fallible strategy declines to choose

Strategies are callable, so a plain function with the same signature
(a MoveSelector) can be used anywhere a strategy is expected.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Sequence

from ..engine_core.action import Move
from ..engine_core.errors import StrategyConfigurationError

if TYPE_CHECKING:
    from ..engine_core.card import Card
    from ..engine_core.game import ReadOnlyPawnsBoard
    from ..engine_core.state import PlayerColor

MoveSelector = Callable[["ReadOnlyPawnsBoard"], Optional[Move]]


@dataclass(frozen=True)
class StrategyContext:
    """Facts every strategy needs about the position it is looking at."""
    player: PlayerColor
    hand: list[Card]
    rows: int
    cols: int

    @property
    def opponent(self) -> PlayerColor:
        return self.player.opponent


class Strategy(ABC):
    """
    Abstract base class for move-selection strategies.

    Infallible strategies always return a Move while the game is in
    progress (falling back to a pass). Fallible strategies may return
    None to let a chain try something else.
    """

    infallible: bool = False

    @abstractmethod
    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        """
        Choose a move for the current player.

        Args:
            model: Read-only view of the game

        Returns:
            The chosen Move, or None if this strategy declines
        """
        pass

    def __call__(self, model: ReadOnlyPawnsBoard) -> Move | None:
        return self.choose_move(model)

    def get_name(self) -> str:
        """Get the strategy's name/identifier."""
        return self.__class__.__name__

    @staticmethod
    def context(model: ReadOnlyPawnsBoard) -> StrategyContext | None:
        """Context for the current player, or None if the game is not running."""
        if not model.in_progress:
            return None
        player = model.current_player()
        rows, cols = model.dimensions()
        return StrategyContext(player=player, hand=model.hand(player), rows=rows, cols=cols)


class ChainedStrategy(Strategy):
    """
    Tries strategies in order and returns the first non-None move.

    If every strategy declines, the fallback decides. The chain is
    infallible exactly when its fallback is.
    """

    def __init__(
        self,
        strategies: Sequence[MoveSelector],
        fallback: MoveSelector | None = None,
    ):
        self.strategies = list(strategies)
        self.fallback = fallback

    @property
    def infallible(self) -> bool:
        return bool(getattr(self.fallback, "infallible", False))

    def choose_move(self, model: ReadOnlyPawnsBoard) -> Move | None:
        if not model.game_started:
            return Move.no_move()

        for strategy in self.strategies:
            move = strategy(model)
            if move is not None:
                return move

        if self.fallback is None:
            raise StrategyConfigurationError(
                "No strategy found, check for existence of fallback strategy"
            )
        return self.fallback(model)

    def get_name(self) -> str:
        names = [
            s.get_name() if isinstance(s, Strategy) else getattr(s, "__name__", repr(s))
            for s in self.strategies
        ]
        return " -> ".join(names) if names else "ChainedStrategy"

"""
Strategy Factory - Builds strategy chains and named strategies.

A chain starts with one create_* call, grows with add_* calls, and
ends with build(). The fallback defaults to MaximizeRowScoreStrategy
so a built chain always produces a move.

    chain = (
        StrategyFactory()
        .create_control_board()
        .add_fill_first()
        .set_fallback(FillFirstStrategy())
        .build()
    )
"""

from __future__ import annotations
from typing import Callable

from ..engine_core.errors import StrategyConfigurationError
from .minimax import MinimaxStrategy
from .policy import ChainedStrategy, MoveSelector, Strategy
from .strategies import ControlBoardStrategy, FillFirstStrategy, MaximizeRowScoreStrategy


class StrategyFactory:
    """Fluent builder for ChainedStrategy."""

    def __init__(self):
        self._strategies: list[MoveSelector] = []
        self._fallback: MoveSelector | None = MaximizeRowScoreStrategy()

    # -- starting a chain -----------------------------------------------------

    def _start(self, strategy: MoveSelector) -> StrategyFactory:
        if self._strategies:
            raise StrategyConfigurationError(
                "Cannot call create_* after strategies have been added. Use add_* methods instead."
            )
        self._strategies.append(strategy)
        return self

    def create_maximize_row_score(self) -> StrategyFactory:
        return self._start(MaximizeRowScoreStrategy())

    def create_fill_first(self) -> StrategyFactory:
        return self._start(FillFirstStrategy())

    def create_control_board(self) -> StrategyFactory:
        return self._start(ControlBoardStrategy())

    def create_minimax(self, opponent: MoveSelector) -> StrategyFactory:
        return self._start(MinimaxStrategy(opponent))

    # -- extending a chain ----------------------------------------------------

    def _add(self, strategy: MoveSelector) -> StrategyFactory:
        if not self._strategies:
            raise StrategyConfigurationError("No chain started; use a create_* method first")
        self._strategies.append(strategy)
        return self

    def add_maximize_row_score(self) -> StrategyFactory:
        return self._add(MaximizeRowScoreStrategy())

    def add_fill_first(self) -> StrategyFactory:
        return self._add(FillFirstStrategy())

    def add_control_board(self) -> StrategyFactory:
        return self._add(ControlBoardStrategy())

    def add_minimax(self, opponent: MoveSelector) -> StrategyFactory:
        return self._add(MinimaxStrategy(opponent))

    def add(self, strategy: MoveSelector) -> StrategyFactory:
        """Append any strategy or move-selection function."""
        return self._add(strategy)

    # -- fallback and result --------------------------------------------------

    def set_fallback(self, fallback: MoveSelector) -> StrategyFactory:
        if fallback is None:
            raise StrategyConfigurationError("Fallback strategy cannot be null")
        self._fallback = fallback
        return self

    @property
    def strategies(self) -> list[MoveSelector]:
        return list(self._strategies)

    @property
    def fallback(self) -> MoveSelector | None:
        return self._fallback

    def build(self) -> ChainedStrategy:
        return ChainedStrategy(self._strategies, self._fallback)


# ============================================================================
# Named strategies
# ============================================================================

def _minimax() -> Strategy:
    return MinimaxStrategy(opponent=MaximizeRowScoreStrategy())


def _chained() -> Strategy:
    return (
        StrategyFactory()
        .create_minimax(FillFirstStrategy())
        .add_control_board()
        .set_fallback(FillFirstStrategy())
        .build()
    )


STRATEGIES: dict[str, Callable[[], Strategy]] = {
    "fill-first": FillFirstStrategy,
    "maximize-row": MaximizeRowScoreStrategy,
    "control-board": ControlBoardStrategy,
    "minimax": _minimax,
    "chained": _chained,
}


def create_strategy(name: str) -> Strategy:
    """
    Create a strategy by registry name.

    Fallible strategies are wrapped in a chain ending in FillFirst so
    the result always produces a move.
    """
    try:
        strategy = STRATEGIES[name]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise StrategyConfigurationError(f"Unknown strategy {name!r} (known: {known})") from None

    if not strategy.infallible:
        strategy = ChainedStrategy([strategy], FillFirstStrategy())
    return strategy

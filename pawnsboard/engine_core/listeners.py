"""
Model Status Listeners - Synchronous notifications from the engine.

The engine fires three signals at the point of each state transition:
- turn changed (new current player)
- game over (winner or None for a tie, final (red, blue) scores)
- invalid move attempted (human-readable reason)

Listeners must not mutate the engine from inside a callback.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .state import PlayerColor


class ModelStatusListener(ABC):
    """Receives engine notifications."""

    @abstractmethod
    def on_turn_change(self, new_player: PlayerColor) -> None:
        pass

    @abstractmethod
    def on_game_over(self, winner: PlayerColor | None, final_scores: tuple[int, int]) -> None:
        pass

    @abstractmethod
    def on_invalid_move(self, message: str) -> None:
        pass


@dataclass
class RecordingListener(ModelStatusListener):
    """
    Listener that records every notification it receives.

    Used by the game loop for its game record and by tests.
    """
    events: list[tuple[str, Any]] = field(default_factory=list)

    def on_turn_change(self, new_player: PlayerColor) -> None:
        self.events.append(("turn_change", new_player))

    def on_game_over(self, winner: PlayerColor | None, final_scores: tuple[int, int]) -> None:
        self.events.append(("game_over", (winner, final_scores)))

    def on_invalid_move(self, message: str) -> None:
        self.events.append(("invalid_move", message))

    def of_kind(self, kind: str) -> list[Any]:
        return [payload for name, payload in self.events if name == kind]

    @property
    def invalid_moves(self) -> list[str]:
        return self.of_kind("invalid_move")

"""
Session module - Running games between automated players.

Provides:
- AIPlayer: a color plus a strategy
- GameLoop: alternates players until the game ends
- GameRecord: what happened
"""

from .players import AIPlayer
from .game_loop import GameLoop, GameRecord, LoopState, TurnRecord

__all__ = [
    "AIPlayer",
    "GameLoop",
    "GameRecord",
    "LoopState",
    "TurnRecord",
]

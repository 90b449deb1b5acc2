"""
API module - Schemas exposed to view and controller collaborators.
"""

from .schemas import CardInfo, CellInfo, PlayerInfo, GameStateView

__all__ = [
    "CardInfo",
    "CellInfo",
    "PlayerInfo",
    "GameStateView",
]

"""
Engine Core - Deterministic game state management.

The engine is the runtime that:
1. Validates the board and decks at start_game()
2. Owns cells, hands and decks
3. Applies placements and their influence
4. Scores rows and decides the winner
5. Produces independent snapshots for lookahead
"""

from .state import Cell, CellContent, GamePhase, Grid, PlayerColor, PlayerState
from .card import Card, InfluenceType
from .action import Move, MoveType, ActionResult
from .game import PawnsBoard, ReadOnlyPawnsBoard
from .action_generator import legal_moves, iter_legal_placements
from .influence import apply_influence, influence_for_symbol, project_influence
from .listeners import ModelStatusListener, RecordingListener
from .errors import ErrorKind, PawnsBoardError

__all__ = [
    "Cell",
    "CellContent",
    "GamePhase",
    "Grid",
    "PlayerColor",
    "PlayerState",
    "Card",
    "InfluenceType",
    "Move",
    "MoveType",
    "ActionResult",
    "PawnsBoard",
    "ReadOnlyPawnsBoard",
    "legal_moves",
    "iter_legal_placements",
    "apply_influence",
    "influence_for_symbol",
    "project_influence",
    "ModelStatusListener",
    "RecordingListener",
    "ErrorKind",
    "PawnsBoardError",
]

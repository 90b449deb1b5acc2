"""
Game Loop - Plays a game between two automated players.

The loop:
1. Start the game (if it has not been started)
2. Let the current player take its turn
3. Record the move and the engine's notifications
4. Repeat until two passes in a row end the game

Every turn either places a card or passes, and each player has a
finite deck, so a game always ends. max_turns is a guard against
misbehaving custom strategies.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from ..engine_core.listeners import RecordingListener

if TYPE_CHECKING:
    from ..engine_core.action import Move
    from ..engine_core.game import PawnsBoard
    from ..engine_core.state import PlayerColor
    from .players import AIPlayer

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 1000


class LoopState(Enum):
    """State of the game loop."""
    READY = "ready"
    RUNNING = "running"
    GAME_OVER = "game_over"
    ABORTED = "aborted"


@dataclass
class TurnRecord:
    """One turn of the game."""
    turn: int
    player: PlayerColor
    move: Move
    success: bool
    error: str | None = None


@dataclass
class GameRecord:
    """
    Result of running a game.

    Contains the turns played, the final (red, blue) scores, the winner
    (None for a tie or an aborted game) and every invalid-move message
    the engine reported.
    """
    loop_state: LoopState
    turns: list[TurnRecord] = field(default_factory=list)
    final_scores: tuple[int, int] = (0, 0)
    winner: PlayerColor | None = None
    invalid_moves: list[str] = field(default_factory=list)

    @property
    def turn_count(self) -> int:
        return len(self.turns)

    @property
    def completed(self) -> bool:
        return self.loop_state is LoopState.GAME_OVER


class GameLoop:
    """
    Drives a PawnsBoard with two AIPlayers.

    Usage:
        loop = GameLoop(board, {PlayerColor.RED: red, PlayerColor.BLUE: blue})
        record = loop.run()
        print(record.winner, record.final_scores)
    """

    def __init__(
        self,
        model: PawnsBoard,
        players: dict[PlayerColor, AIPlayer],
        max_turns: int = DEFAULT_MAX_TURNS,
    ):
        if len(players) != 2 or any(color is not p.color for color, p in players.items()):
            raise ValueError("Each player must be registered under its own color")
        self.model = model
        self.players = players
        self.max_turns = max_turns
        self.listener = RecordingListener()
        self.state = LoopState.READY

    def run(self) -> GameRecord:
        """Play turns until the game ends or max_turns is reached."""
        if not self.model.game_started:
            raise ValueError("Start the game before running the loop")

        self.model.add_listener(self.listener)
        self.state = LoopState.RUNNING
        record = GameRecord(loop_state=self.state)

        try:
            while not self.model.game_over:
                if record.turn_count >= self.max_turns:
                    logger.warning("Aborting game after %d turns", record.turn_count)
                    self.state = LoopState.ABORTED
                    break
                record.turns.append(self.step(record.turn_count + 1))
            else:
                self.state = LoopState.GAME_OVER
        finally:
            self.model.remove_listener(self.listener)

        record.loop_state = self.state
        record.final_scores = self.model.total_score()
        record.invalid_moves = list(self.listener.invalid_moves)
        if self.state is LoopState.GAME_OVER:
            record.winner = self.model.winner()
            logger.info(
                "Game finished after %d turns: winner=%s scores=%s",
                record.turn_count,
                record.winner.value if record.winner else "tie",
                record.final_scores,
            )
        return record

    def step(self, turn: int) -> TurnRecord:
        """Let the current player take one turn."""
        color = self.model.current_player()
        player = self.players[color]
        result = player.take_turn(self.model)
        logger.debug("Turn %d: %s -> %s", turn, player, result.move)
        return TurnRecord(
            turn=turn,
            player=color,
            move=result.move,
            success=result.success,
            error=result.error,
        )

"""
Pawns Board CLI - Command-line interface for the engine.

Usage:
    pawnsboard play [--red-deck F] [--blue-deck F] [--red S] [--blue S]
    pawnsboard validate <deck_file>
    pawnsboard strategies
"""

import argparse
import logging
import sys

from .config import DEFAULT_COLS, DEFAULT_HAND_SIZE, DEFAULT_ROWS, LOG_LEVEL


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pawns Board - rules engine and AI players",
        prog="pawnsboard",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play an AI-vs-AI game")
    play_parser.add_argument("--red-deck", help="Deck file for red (default: starter deck)")
    play_parser.add_argument("--blue-deck", help="Deck file for blue (default: starter deck)")
    play_parser.add_argument("--rows", type=int, default=DEFAULT_ROWS)
    play_parser.add_argument("--cols", type=int, default=DEFAULT_COLS)
    play_parser.add_argument("--hand-size", type=int, default=DEFAULT_HAND_SIZE)
    play_parser.add_argument("--red", default="fill-first", help="Strategy for red")
    play_parser.add_argument("--blue", default="maximize-row", help="Strategy for blue")
    play_parser.add_argument("--shuffle", action="store_true", help="Shuffle the decks")
    play_parser.add_argument("--seed", type=int, default=None, help="Shuffle seed")
    play_parser.add_argument("--json", action="store_true", help="Print the final state as JSON")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a deck file")
    validate_parser.add_argument("deck_file", help="Path to deck file")

    # Strategies command
    subparsers.add_parser("strategies", help="List available strategies")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "strategies":
        return cmd_strategies(args)
    else:
        parser.print_help()
        return 1


def cmd_play(args):
    """Play a game between two AI players."""
    from .api import GameStateView
    from .bots import create_strategy
    from .decks import DeckBuilder, STARTER_DECK
    from .engine_core import PawnsBoard, PawnsBoardError, PlayerColor
    from .session import AIPlayer, GameLoop

    builder = DeckBuilder(seed=args.seed)
    try:
        red_deck = builder.create_deck(args.red_deck or STARTER_DECK, shuffle=args.shuffle)
        blue_deck = builder.create_deck(args.blue_deck or STARTER_DECK, shuffle=args.shuffle)
        players = {
            PlayerColor.RED: AIPlayer(PlayerColor.RED, create_strategy(args.red)),
            PlayerColor.BLUE: AIPlayer(PlayerColor.BLUE, create_strategy(args.blue)),
        }
        board = PawnsBoard()
        board.start_game(args.rows, args.cols, red_deck, blue_deck, args.hand_size)
    except PawnsBoardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    record = GameLoop(board, players).run()

    if args.json:
        print(GameStateView.from_model(board).model_dump_json(indent=2))
        return 0

    red_score, blue_score = record.final_scores
    print(f"{players[PlayerColor.RED]} vs {players[PlayerColor.BLUE]}")
    print(f"Turns played: {record.turn_count}")
    print(f"Final scores - RED: {red_score}, BLUE: {blue_score}")
    if record.winner is None:
        print("Result: tie")
    else:
        print(f"Result: {record.winner.value} wins")
    return 0


def cmd_validate(args):
    """Validate a deck file."""
    from .decks import DeckBuilder
    from .engine_core import PawnsBoardError

    try:
        cards = DeckBuilder().create_deck(args.deck_file)
    except PawnsBoardError as e:
        print(f"Invalid deck: {e}", file=sys.stderr)
        return 1

    print(f"{args.deck_file}: {len(cards)} cards, {len({c.name for c in cards})} distinct")
    return 0


def cmd_strategies(args):
    """List registered strategies."""
    from .bots import STRATEGIES

    for name in STRATEGIES:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())

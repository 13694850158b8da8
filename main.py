"""
Main entry point for TicTacToe.

Runs the console game, or replays a list of moves and prints the
resulting state as JSON for whatever is drawing the board.

Usage:
    python main.py                          # Play in the terminal
    python main.py --moves 0,3,1,4,2        # Replay moves, print state JSON
    python main.py --moves 0,3 --status-format flat
    python main.py --debug                  # Print every move the engine sees
"""

import argparse
import sys
from typing import List, Optional

from game_engine import EngineConfig, Game, MoveError


def parse_moves(text: str) -> List[int]:
    """Parse "0,3,1" into [0, 3, 1]."""
    try:
        return [int(part) for part in text.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Moves must be comma-separated cell numbers, got {text!r}"
        )


def replay(game: Game, moves: List[int], status_format: str) -> int:
    """
    Play a list of moves and print the final state.

    Returns:
        Exit code: 0 if every move was accepted, 1 otherwise.
    """
    for position in moves:
        try:
            game.play_move(position)
        except MoveError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            print(game.get_state().to_json(status_format))
            return 1
    print(game.get_state().to_json(status_format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--moves",
        type=parse_moves,
        help="Comma-separated cells to play (0-8); prints the final state as JSON"
    )
    parser.add_argument(
        "--status-format",
        choices=EngineConfig.STATUS_FORMATS,
        default=EngineConfig.STATUS_FORMAT,
        help="Shape of the status in JSON output"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print engine debug messages"
    )

    args = parser.parse_args(argv)

    config = EngineConfig()
    config.STATUS_FORMAT = args.status_format
    config.DEBUG_MODE = args.debug

    game = Game(config)

    if args.moves is not None:
        return replay(game, args.moves, config.STATUS_FORMAT)

    from ui import ConsoleUI
    print("\n" + "="*40)
    print("   TicTacToe")
    print("="*40 + "\n")
    ConsoleUI(game).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Play N x N TicTacToe in the console, two humans on one keyboard.

Usage:
    python play.py                     # asks for the board size
    python play.py --size 5
    python play.py --size 4 --player1 Ann --player2 Bob
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gridttt import GameConfig, play_game


def main(argv=None) -> int:
    defaults = GameConfig()

    parser = argparse.ArgumentParser(description="Play N x N TicTacToe")
    parser.add_argument("--size", type=int, default=None,
                        help=f"Board size ({defaults.min_size}-{defaults.max_size}), asked if omitted")
    parser.add_argument("--player1", type=str, default=defaults.player_names[0], help="Name of X")
    parser.add_argument("--player2", type=str, default=defaults.player_names[1], help="Name of O")

    args = parser.parse_args(argv)

    if args.size is not None and not (defaults.min_size <= args.size <= defaults.max_size):
        parser.error(f"--size must be between {defaults.min_size} and {defaults.max_size}")

    config = GameConfig(size=args.size, player_names=(args.player1, args.player2))

    try:
        play_game(config, input_fn=input)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

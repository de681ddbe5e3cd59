#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--rows R --cols C --mines M] [--seed S]
    python main.py autoplay [--games N] [--rows R --cols C --mines M]
"""
import argparse
import logging

from minesweeper import BoardConfig, GameSession, play_games
from minesweeper.console import WELCOME


def play(args: argparse.Namespace) -> None:
    """Run an interactive game in the terminal."""
    print(WELCOME)
    session = GameSession(seed=args.seed)
    try:
        games = session.run(args.rows, args.cols, args.mines)
    except (EOFError, KeyboardInterrupt):
        print("\nThanks for playing!")
        return
    logging.getLogger(__name__).debug("Session ended after %d games", games)


def autoplay(args: argparse.Namespace) -> None:
    """Let the random agent play and print a summary."""
    config = BoardConfig(rows=args.rows, cols=args.cols, num_mines=args.mines)

    print(f"\nPlaying {args.games} random games on "
          f"{config.rows}x{config.cols} with {config.num_mines} mines...")
    results = play_games(config, args.games, seed=args.seed)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--rows", type=int, help="Number of rows")
    play_parser.add_argument("--cols", type=int, help="Number of columns")
    play_parser.add_argument("--mines", type=int, help="Number of mines")
    play_parser.add_argument("--seed", type=int, help="Random seed")

    autoplay_parser = subparsers.add_parser(
        "autoplay", help="Let a random agent play"
    )
    autoplay_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    autoplay_parser.add_argument("--rows", type=int, default=10)
    autoplay_parser.add_argument("--cols", type=int, default=10)
    autoplay_parser.add_argument("--mines", type=int, default=10)
    autoplay_parser.add_argument("--seed", type=int, help="Random seed")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "autoplay":
        autoplay(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()

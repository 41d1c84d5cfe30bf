"""
Main entry point for playing wordgrid in a terminal.

Usage:
    python -m wordgrid.main
    python -m wordgrid.main config.yaml --output results/session.json --verbose

Enter a selection as space-separated x,y coordinates (column,row, zero-based),
e.g. ``0,0 1,1 2,1``. Other commands: ``rotate``, ``words``, ``board``, ``quit``.
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import yaml

from .game import GameConfig, GameRound
from .puzzle import Coord


_COORD_PATTERN = re.compile(r'^(\d+),(\d+)$')


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def apply_overrides(
    config: GameConfig,
    level: Optional[int] = None,
    seed: Optional[int] = None,
    show_hidden: bool = False
) -> GameConfig:
    """Return ``config`` with command-line overrides applied and validated."""
    overrides = {}
    if level is not None:
        overrides["start_level"] = level
    if seed is not None:
        overrides["seed"] = seed
    if show_hidden:
        overrides["show_hidden_words"] = True
    if not overrides:
        return config
    return GameConfig(**{**config.model_dump(), **overrides})


def parse_coords(line: str) -> Optional[List[Coord]]:
    """Parse ``x,y x,y ...`` into coordinates; None if any token is malformed."""
    coords = []
    for token in line.split():
        match = _COORD_PATTERN.match(token)
        if not match:
            return None
        coords.append(Coord(int(match.group(1)), int(match.group(2))))
    return coords or None


def print_status(game: GameRound, out: TextIO) -> None:
    snap = game.snapshot()
    print(f"Level: {snap.level}  Goal: {snap.goal}  Score: {snap.score}", file=out)


def play(game: GameRound, lines, out: TextIO = sys.stdout) -> None:
    """
    Run the interactive loop until input ends, ``quit`` is entered or the campaign is complete.

    Args:
        game: A round that has already been set up
        lines: Iterable of input lines
        out: Where to write output
    """
    print(game.render(), file=out)
    print_status(game, out)

    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        command = line.lower()

        if command in ("quit", "exit", "q"):
            break
        if command == "rotate":
            game.rotate_board()
            print(game.render(), file=out)
            continue
        if command == "board":
            print(game.render(), file=out)
            print_status(game, out)
            continue
        if command == "words":
            found = game.progression.found_words
            print("Found: " + (", ".join(found) if found else "(none)"), file=out)
            continue

        coords = parse_coords(line)
        if coords is None:
            print(f"Unrecognised input: {line!r}", file=out)
            continue

        outcome = game.submit_path(coords)
        print(outcome.message, file=out)
        print_status(game, out)

        if outcome.goal_reached:
            level = game.progression.level
            print(f"Level {level} complete!", file=out)
            if not game.complete_level():
                print("You Win!", file=out)
                break
            print(game.render(), file=out)
            print_status(game, out)


def main():
    parser = argparse.ArgumentParser(
        description="Play a wordgrid campaign in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  start_level: 1
  grid_size: 5
  seed: 42
  show_hidden_words: false
  words_file: words.txt
  hidden_words_file: hidden_words.txt
  levels_file: levels.csv
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults to built-in settings)"
    )
    parser.add_argument(
        "--level",
        type=int,
        help="Level to start from (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides config)"
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        help="Show hidden word cells in lowercase"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log level setup and placement details"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        config = apply_overrides(config, args.level, args.seed, args.show_hidden)
    except ValueError as e:
        print(f"Error in options: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        game = GameRound.create(config=config)
    except Exception as e:
        print(f"Error loading game data: {e}", file=sys.stderr)
        sys.exit(1)

    if not game.setup_level():
        print(f"No level {config.start_level} in the level table", file=sys.stderr)
        sys.exit(1)

    try:
        play(game, sys.stdin)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")

    if args.output:
        output_path = Path(args.output)
        game.save_result(output_path)
        if args.verbose:
            print(f"Results saved to: {output_path}")

    result = game.get_result()
    print()
    print("=== Session Summary ===")
    print(f"Levels completed: {len(result.levels_completed)}")
    print(f"Words submitted: {len(result.submissions)}")
    print(f"Words accepted: {result.words_accepted}")
    print(f"Total points: {result.total_points}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    if result.campaign_complete:
        print("Campaign complete!")

    return 0


if __name__ == "__main__":
    sys.exit(main())

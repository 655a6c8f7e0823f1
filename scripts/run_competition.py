#!/usr/bin/env python3
"""Run a Misère Nim competition between two players.

Player kinds: random, heuristic, greedy_pair (alias: smart), human. The
legacy integer codes 1-4 (random, heuristic, smart, human) are accepted
too, so the older positional form still works.

Usage:
    # Heuristic vs random, 100 rounds
    python scripts/run_competition.py --p1 heuristic --p2 random --rounds 100

    # Legacy positional form: <p1 type> <p2 type> <rounds>
    python scripts/run_competition.py 2 1 100

    # Play against the heuristic yourself
    python scripts/run_competition.py --p1 human --p2 heuristic --rounds 3

Board layout and defaults come from config/misere_nim.yaml (or the file
named by --config / $MISERE_NIM_CONFIG).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Setup path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from misere_nim.board import Board
from misere_nim.competition import Competition
from misere_nim.config import load_config
from misere_nim.core.logging_config import setup_logging
from misere_nim.errors import ConfigurationError, MoveNotationError
from misere_nim.models import AIConfig, Move, PlayerKind
from misere_nim.players import HumanPlayer, create_player

logger = logging.getLogger(__name__)


def read_int(prompt: str) -> int | None:
    print(prompt)
    try:
        return int(input().strip())
    except ValueError:
        return None


def console_human_input(board: Board, player: HumanPlayer) -> Move:
    """Prompt on stdin until the human asks to make a move."""
    _ = player
    while True:
        choice = read_int("Press 1 to display the board. Press 2 to make a move:")
        if choice == 1:
            print(board)
        elif choice == 2:
            row = read_int("Enter the row number:")
            left = read_int("Enter the index of the leftmost stick:")
            right = read_int("Enter the index of the rightmost stick:")
            if None in (row, left, right):
                raise MoveNotationError(
                    "Row and stick indices must be integers",
                    context={"row": row, "left": left, "right": right},
                )
            return Move(row=row, left=left, right=right)
        else:
            print("Unsupported command")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Misère Nim competition runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("legacy", nargs="*", help="<p1 type> <p2 type> <rounds>")
    parser.add_argument("--p1", type=str, default=None, help="Player 1 kind")
    parser.add_argument("--p2", type=str, default=None, help="Player 2 kind")
    parser.add_argument("--rounds", type=int, default=None, help="Number of rounds")
    parser.add_argument("--config", type=str, default=None, help="Config file path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def resolve_arguments(args: argparse.Namespace, default_rounds: int) -> tuple[PlayerKind, PlayerKind, int]:
    legacy = list(args.legacy)
    if len(legacy) > 3:
        raise ConfigurationError(f"Too many positional arguments: {legacy}")
    legacy += [None] * (3 - len(legacy))

    p1 = args.p1 or legacy[0] or PlayerKind.HEURISTIC.value
    p2 = args.p2 or legacy[1] or PlayerKind.RANDOM.value
    rounds_token = args.rounds if args.rounds is not None else legacy[2]
    try:
        rounds = int(rounds_token) if rounds_token is not None else default_rounds
    except ValueError:
        raise ConfigurationError(f"Invalid round count: {rounds_token!r}") from None
    if rounds < 1:
        raise ConfigurationError(f"Round count must be positive, got {rounds}")
    return PlayerKind.parse(p1), PlayerKind.parse(p2), rounds


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging("misere_nim", level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
        kind1, kind2, rounds = resolve_arguments(args, config.competition.rounds)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    def ai_config(offset: int) -> AIConfig:
        seed = None if args.seed is None else args.seed + offset
        return config.heuristic.model_copy(update={"rng_seed": seed})

    player1 = create_player(kind1, 1, ai_config(0))
    player2 = create_player(kind2, 2, ai_config(1))

    # Transcript messages are only shown when a human is playing.
    has_human = PlayerKind.HUMAN in (kind1, kind2)
    competition = Competition(
        player1,
        player2,
        human_input=console_human_input if has_human else None,
        announce=print if has_human else None,
        board_config=config.board,
    )

    print(
        f"Starting a Nim competition of {rounds} rounds between a "
        f"{player1.type_name} player and a {player2.type_name} player."
    )
    score1, score2 = competition.play_multiple_rounds(rounds)
    if not has_human:
        print(f"The results are {score1}:{score2}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

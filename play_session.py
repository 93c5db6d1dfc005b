#!/usr/bin/env python3
"""
Minimal CLI for simulating board sessions.

Builds a default board and roster, plays a fixed number of turns and
prints each turn's outcome.
"""

import argparse
import logging
import random
from typing import List, Optional

from boardsession.board import create_board, describe_board
from boardsession.config import MIN_BOARD_SIZE, GameConfig, get_session_settings
from boardsession.game_logger import GameLogger
from boardsession.player import create_players
from boardsession.session import MonopolySession, create_game


def print_game_state(session: MonopolySession) -> None:
    """Print current session state."""
    print("\n" + "=" * 60)
    print(f"TURN {session.turn_number}")
    print("=" * 60)

    grids = session.get_grids()
    for player in session.get_players():
        space = grids[player.position]
        print(f"Player {player.player_id} ({player.name}): ${player.cash} | at {space.name}")


def print_game_summary(session: MonopolySession) -> None:
    """Print final session summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)

    if session.richest_player is not None:
        richest = session.richest_player
        print(f"\nRichest player: {richest.name} (${richest.cash})")

    print("\nFinal Standings:")
    for player in sorted(session.get_players(), key=lambda p: p.cash, reverse=True):
        print(f"  {player.name}: ${player.cash}")

    print(f"\nTotal Turns: {session.turn_number}")


def simulate_game(
    num_players: int = 4,
    turns: int = 100,
    board_size: int = 20,
    seed: Optional[int] = None,
    verbose: bool = True,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    game_name: str = "Monopoly",
) -> MonopolySession:
    """
    Simulate a session for a fixed number of turns.

    Args:
        num_players: Number of players (1-8)
        turns: Number of turns to play
        board_size: Number of board spaces
        seed: Random seed for reproducibility
        verbose: Whether to print detailed output
        log_file: Path to JSONL log file (None = auto-generate)
        log_dir: Directory for auto-generated log files
        game_name: Name of the session
    """
    config = GameConfig(board_size=board_size, seed=seed, max_turns=turns)
    logger = GameLogger(log_file, log_dir)
    rng = random.Random(seed)
    players = create_players(config, num_players, rng)
    session = create_game(config, players, create_board(board_size, rng), game_name)

    if verbose:
        print(f"Starting {game_name} with {num_players} players on {board_size} spaces")
        print(f"Seed: {seed}")
        print(f"Logging to: {logger.log_file}")
        print(describe_board(session.get_grids()))

    session.init()
    logger.flush_engine_events(session)

    for _ in range(config.max_turns):
        logger.log_turn_snapshot(session)
        if verbose and session.current_player_index == 0:
            print_game_state(session)
        result = session.advance_turn()
        if verbose:
            print(f"  [{result.roll:>2}] {result.description}")
        logger.flush_engine_events(session)

    session.end()
    logger.flush_engine_events(session)

    if verbose:
        print_game_summary(session)
        print(f"\nGame logged to: {logger.log_file}")

    return session


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    settings = get_session_settings()

    parser = argparse.ArgumentParser(description="Simulate a board session")
    parser.add_argument(
        "--players",
        type=int,
        default=settings.num_players,
        choices=range(1, 9),
        help="Number of players (1-8)",
    )
    parser.add_argument("--turns", type=int, default=settings.max_turns, help="Number of turns to play")
    parser.add_argument(
        "--board-size",
        type=int,
        default=settings.board_size,
        help="Number of board spaces (at least 4)",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to JSONL log file (default: auto-generated timestamp)",
    )

    args = parser.parse_args(argv)
    if args.turns < 1:
        parser.error(f"--turns must be at least 1, got {args.turns}")
    if args.board_size < MIN_BOARD_SIZE:
        parser.error(f"--board-size must be at least {MIN_BOARD_SIZE}, got {args.board_size}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    simulate_game(
        num_players=args.players,
        turns=args.turns,
        board_size=args.board_size,
        seed=args.seed,
        verbose=not args.quiet,
        log_file=args.log_file,
        log_dir=settings.log_dir,
        game_name=settings.game_name,
    )


if __name__ == "__main__":
    main()

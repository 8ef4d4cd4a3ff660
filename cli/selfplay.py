#!/usr/bin/env python3
"""
Self-play tournament for the tic-tac-toe engine.

Plays the negamax search against itself (or a random player) and prints
the outcome tally and the average number of evaluations per game.
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tictac.core.bitboard import SIZE
from tictac.ai.negamax import SearchConfig
from tictac.selfplay import SelfPlay, MatchStats, PLAYER_KINDS


def main():
    parser = argparse.ArgumentParser(description='Tic-tac-toe negamax self-play')
    parser.add_argument('--games', type=int, default=100, help='Number of games to play')
    parser.add_argument('--depth', type=int, default=6, help='Search depth in plies')
    parser.add_argument('--size', type=int, default=SIZE, help='Board side length')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for tie-breaking')
    parser.add_argument('--player1', choices=PLAYER_KINDS, default='negamax',
                        help='Player 1 (x) kind')
    parser.add_argument('--player2', choices=PLAYER_KINDS, default='negamax',
                        help='Player 2 (o) kind')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log every move')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    config = SearchConfig(depth=args.depth, seed=args.seed)
    selfplay = SelfPlay(config, players=(args.player1, args.player2), size=args.size)

    start = time.perf_counter()
    games = selfplay.generate_games(args.games)
    elapsed = time.perf_counter() - start

    stats = MatchStats.from_games(games)
    print(stats.results)
    stats.print_status()
    print(f"Time: {elapsed:.2f}s")


if __name__ == '__main__':
    main()

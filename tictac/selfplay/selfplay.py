"""
Self-play game generation.

Plays the search against itself (or against a random player) and records
each game's moves, winner and evaluation count.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import logging
import numpy as np

from ..core.bitboard import SIZE
from ..core.board import Board
from ..ai.negamax import NegamaxSearch, SearchConfig, random_move

logger = logging.getLogger(__name__)

PLAYER_KINDS = ("negamax", "random")


@dataclass
class GameRecord:
    """Record of one finished game."""
    winner: Optional[int]  # 0, 1, or None for a draw
    evaluations: int  # Search nodes expanded over the whole game
    moves: list[int] = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class SelfPlay:
    """
    Plays complete games from the empty board.

    Both sides use the same search and depth by default. A side set to
    "random" plays a uniformly random free square instead.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        players: tuple[str, str] = ("negamax", "negamax"),
        size: int = SIZE,
        rng: Optional[np.random.Generator] = None
    ):
        for kind in players:
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind: {kind!r} (expected one of {PLAYER_KINDS})")

        self.config = config or SearchConfig()
        self.players = players
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.search = NegamaxSearch(self.config, rng=self.rng)

    def choose_move(self, board: Board) -> int:
        if self.players[board.turn] == "random":
            return random_move(board, self.rng)
        return self.search.best_move(board, -np.inf, np.inf, self.config.depth)

    def play_game(self) -> GameRecord:
        """Play one game to completion."""
        board = Board(size=self.size)
        moves = []

        while not board.is_over():
            move = self.choose_move(board)
            logger.debug("Player %d plays %d", board.turn, move)
            board.make_move(move)
            moves.append(move)

        winner = board.winner()
        logger.info(
            "Game over after %d moves: %s (%d evaluations)",
            len(moves),
            "draw" if winner is None else f"player {winner} wins",
            board.evaluations
        )
        return GameRecord(winner=winner, evaluations=board.evaluations, moves=moves)

    def generate_games(self, num_games: int) -> list[GameRecord]:
        """Play num_games games back to back."""
        games = []
        for i in range(num_games):
            logger.debug("=== Game %d/%d ===", i + 1, num_games)
            games.append(self.play_game())
        return games

"""
Negamax search with alpha-beta pruning for tic-tac-toe.

Values are always from the point of view of the player to move: a child's
value is negated on the way up. The search walks the tree on one Board,
applying and reverting moves in place.

Terminal and cutoff nodes, checked in this order:
  1. the player who just moved has a line -> -inf (loss for the mover)
  2. the board is full -> 0 (draw)
  3. no depth left -> Board.heuristic()

Among moves that reach the best observed value, one is chosen uniformly at
random so repeated games do not replay the same line.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import math
import numpy as np

from ..core.board import Board

INF = math.inf


class NoMovesError(RuntimeError):
    """Raised when a move is requested from a position with no candidates."""


@dataclass
class SearchConfig:
    """Configuration for negamax search."""
    depth: int = 6  # Plies to look ahead before falling back to the heuristic
    seed: Optional[int] = None  # Seed for tie-breaking; None draws fresh entropy


@dataclass
class SearchResult:
    """Move and value returned by a search. move is None at terminal/cutoff nodes."""
    move: Optional[int]
    value: float


class NegamaxSearch:
    """
    Negamax tree search with alpha-beta pruning and random tie-breaking.

    The random source is explicit so a seeded search is reproducible.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or SearchConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def best_move(
        self,
        board: Board,
        alpha: float = -INF,
        beta: float = INF,
        depth: Optional[int] = None
    ) -> int:
        """Return the chosen move for the player to move."""
        if depth is None:
            depth = self.config.depth
        result = self.negamax(board, alpha, beta, depth)
        if result.move is None:
            raise NoMovesError("Can't choose a move in a finished game")
        return result.move

    def negamax(self, board: Board, alpha: float, beta: float, depth: int) -> SearchResult:
        """
        Search the position on board and return (move, value) for the mover.

        Board is mutated during the search and restored before returning.

        Pruning: the loop stops as soon as a strictly better value exceeds
        beta. alpha follows every score, tied or not.
        """
        if board.is_won():
            return SearchResult(None, -INF)
        if board.is_full():
            return SearchResult(None, 0.0)
        if depth == 0:
            return SearchResult(None, board.heuristic())

        best_moves: list[int] = []
        value = -INF

        for square in board.moves():
            board.evaluations += 1
            with board.played(square):
                score = -self.negamax(board, -beta, -alpha, depth - 1).value

            if score == value:
                best_moves.append(square)
            elif score > value:
                value = score
                best_moves = [square]
                if value > beta:
                    break
            alpha = max(alpha, score)

        if not best_moves:
            raise NoMovesError("Can't choose from 0 moves")

        return SearchResult(int(self.rng.choice(best_moves)), value)


def random_move(board: Board, rng: np.random.Generator) -> int:
    """Pick a free square uniformly at random."""
    moves = board.moves()
    if not moves:
        raise NoMovesError("Can't choose from 0 moves")
    return int(rng.choice(moves))

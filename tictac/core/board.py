"""
Board state for tic-tac-toe.

Uses one bitboard per player. Moves are applied and reverted in place so the
search can walk the game tree on a single instance.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .bitboard import SIZE, bit, popcount, full_mask, build_win_masks, iter_bits


@dataclass(eq=False)
class Board:
    """
    A size x size board.

    Attributes:
        size: Side length of the board
        occupancy: List of (player 0, player 1) bitboards
        turn: Player to move next, 0 or 1
        win_patterns: One mask per winning line, built at construction
        evaluations: Number of search nodes expanded on this board (diagnostic)
    """
    size: int = SIZE
    occupancy: list[int] = field(default_factory=lambda: [0, 0])
    turn: int = 0
    win_patterns: tuple[int, ...] = field(init=False)
    evaluations: int = 0

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")
        self.win_patterns = tuple(build_win_masks(self.size))
        self._full = full_mask(self.size)

    @property
    def num_squares(self) -> int:
        return self.size * self.size

    @property
    def occupied(self) -> int:
        """Bitboard of all occupied squares."""
        return self.occupancy[0] | self.occupancy[1]

    def copy(self) -> Board:
        """Independent copy with the same position and a zeroed counter."""
        return Board(size=self.size, occupancy=list(self.occupancy), turn=self.turn)

    def make_move(self, square: int) -> None:
        """Place the mover's mark on square and pass the turn. Square must be free."""
        self.occupancy[self.turn] ^= bit(square)
        self.turn = 1 - self.turn

    def undo_move(self, square: int) -> None:
        """Revert the most recent make_move(square)."""
        self.turn = 1 - self.turn
        self.occupancy[self.turn] ^= bit(square)

    @contextmanager
    def played(self, square: int) -> Iterator[Board]:
        """Apply a move for the duration of a with-block, undoing it on exit."""
        self.make_move(square)
        try:
            yield self
        finally:
            self.undo_move(square)

    def moves(self) -> list[int]:
        """Free squares in ascending order."""
        occupied = self.occupied
        return [sq for sq in range(self.num_squares) if not occupied & bit(sq)]

    def is_won(self) -> bool:
        """Check whether the player who just moved completed a line."""
        last = self.occupancy[1 - self.turn]
        return any(last & mask == mask for mask in self.win_patterns)

    def is_full(self) -> bool:
        return self.occupied == self._full

    def is_over(self) -> bool:
        """Check game over, either by full board, win or both."""
        return self.is_full() or self.is_won()

    def winner(self) -> Optional[int]:
        """Return the winning player (0 or 1) or None if nobody has won."""
        if self.is_won():
            return 1 - self.turn
        return None

    def threats(self, player: int) -> float:
        """
        Sum of squared mark counts over lines the opponent has not touched.

        Two marks in one open line outscore one mark in each of two lines.
        """
        mine = self.occupancy[player]
        theirs = self.occupancy[1 - player]
        total = sum(
            popcount(mine & mask) ** 2
            for mask in self.win_patterns
            if theirs & mask == 0
        )
        return float(total)

    def heuristic(self) -> float:
        """Static score from the point of view of the player to move."""
        return self.threats(self.turn) - self.threats(1 - self.turn)

    def __hash__(self) -> int:
        return hash((self.size, self.occupancy[0], self.occupancy[1], self.turn))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return (
            self.size == other.size and
            self.occupancy == other.occupancy and
            self.turn == other.turn
        )

    def __repr__(self) -> str:
        """Pretty print the board."""
        symbols = {}
        for sq in iter_bits(self.occupancy[0]):
            symbols[sq] = 'x'
        for sq in iter_bits(self.occupancy[1]):
            symbols[sq] = 'o'

        lines = []
        for row in range(self.size):
            lines.append(" ".join(
                symbols.get(row * self.size + col, '.') for col in range(self.size)
            ))
        lines.append(f"\n{'xo'[self.turn]} to move")
        return "\n".join(lines)

"""Tic-tac-toe engine: bitboard state, negamax search and self-play."""

__version__ = "0.1.0"

"""
Aggregate statistics over a batch of self-play games.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
import numpy as np

from .selfplay import GameRecord


@dataclass
class MatchStats:
    """Outcome tally for a batch of games."""
    num_games: int
    p1_wins: int
    p2_wins: int
    draws: int
    avg_evaluations: int  # Total evaluations // num_games
    avg_game_length: float = 0.0
    min_game_length: int = 0
    max_game_length: int = 0

    @classmethod
    def from_games(cls, games: list[GameRecord]) -> MatchStats:
        p1_wins = sum(1 for g in games if g.winner == 0)
        p2_wins = sum(1 for g in games if g.winner == 1)
        draws = sum(1 for g in games if g.is_draw)

        if not games:
            return cls(num_games=0, p1_wins=0, p2_wins=0, draws=0, avg_evaluations=0)

        lengths = np.array([len(g.moves) for g in games])
        total_evaluations = sum(g.evaluations for g in games)

        return cls(
            num_games=len(games),
            p1_wins=p1_wins,
            p2_wins=p2_wins,
            draws=draws,
            avg_evaluations=total_evaluations // len(games),
            avg_game_length=float(lengths.mean()),
            min_game_length=int(lengths.min()),
            max_game_length=int(lengths.max())
        )

    @property
    def results(self) -> list[int]:
        """[player 1 wins, player 2 wins, draws]"""
        return [self.p1_wins, self.p2_wins, self.draws]

    @property
    def draw_rate(self) -> float:
        if self.num_games == 0:
            return 0.0
        return self.draws / self.num_games

    def to_dict(self) -> dict:
        return asdict(self)

    def print_status(self) -> None:
        """Print human-readable summary to console."""
        print(f"\n{'='*40}")
        print(f"Games: {self.num_games}")
        print(f"{'='*40}")
        print(f"Results: P1 {self.p1_wins} / P2 {self.p2_wins} / Draw {self.draws}")
        print(f"Draw rate: {self.draw_rate:.1%}")
        print(f"Avg length: {self.avg_game_length:.1f} moves "
              f"(min {self.min_game_length}, max {self.max_game_length})")
        print(f"Total evaluations per game: {self.avg_evaluations}")

"""Self-play driver and outcome statistics."""

from .selfplay import SelfPlay, GameRecord, PLAYER_KINDS
from .stats import MatchStats

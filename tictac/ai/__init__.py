"""AI components: negamax search with alpha-beta pruning."""

from .negamax import NegamaxSearch, SearchConfig, SearchResult, NoMovesError, random_move

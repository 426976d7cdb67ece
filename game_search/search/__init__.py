"""
Search Module

This module implements generic game-tree search. The algorithm is minimax
with alpha-beta pruning and random tie-breaking, parameterized over
caller-supplied callbacks for move generation, apply/undo, and evaluation.

Key Components:
    - minimax: Entry point, returns the chosen transition
    - find_best_transition: Entry point, returns transition and value
    - SearchResult: (transition, value) pair produced at every node
    - SearchConfig: Depth, pruning and seed settings
    - SearchStats: Optional node/cutoff counters

"""

from game_search.search.config import SearchConfig
from game_search.search.minimax import (
    DRAW_SCORE,
    LOSS_SCORE,
    SCORE_BOUND,
    WIN_SCORE,
    SearchResult,
    find_best_transition,
    is_loss_score,
    is_win_score,
    minimax,
)
from game_search.search.stats import SearchStats

__all__ = [
    'minimax',
    'find_best_transition',
    'SearchResult',
    'SearchConfig',
    'SearchStats',
    'SCORE_BOUND',
    'WIN_SCORE',
    'LOSS_SCORE',
    'DRAW_SCORE',
    'is_win_score',
    'is_loss_score',
]

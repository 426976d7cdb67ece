"""
Utilities Module

This module provides verification, benchmarking and logging helpers.

Key Components:
    - exhaustive_minimax: Reference minimax without pruning
    - Mate suite: Chess positions with a known mating move
    - setup_logger: Configure the package logger for scripts

Success Metrics:
    - Mate suite: 4/4 at depth 2
"""

from game_search.utils.log import setup_logger
from game_search.utils.testing import (
    MATE_POSITIONS,
    SuitePosition,
    SuiteResult,
    evaluate_position,
    exhaustive_minimax,
    run_mate_suite,
)

__all__ = [
    'exhaustive_minimax',
    'run_mate_suite',
    'evaluate_position',
    'SuitePosition',
    'SuiteResult',
    'MATE_POSITIONS',
    'setup_logger',
]

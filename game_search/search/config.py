"""
Search configuration.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from game_search.search.minimax import check_depth

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    """Configuration for a game search.

    Bundles the settings a GameAdapter passes to the search driver so that
    runs are easy to reproduce.
    """

    max_depth: int = 4
    """Number of plies to look ahead (0 = evaluate the board immediately)"""

    prune: bool = True
    """Enable alpha-beta cutoffs (False = exhaustive minimax)"""

    random_seed: Optional[int] = None
    """Seed for tie-breaking (None for nondeterministic choices)"""

    max_safe_depth: int = 64
    """Depth above which a warning is logged; the search is not capped"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        check_depth(self.max_depth)

        if self.max_safe_depth <= 0:
            raise ValueError(f"max_safe_depth must be positive, got {self.max_safe_depth}")

        if self.max_depth > self.max_safe_depth:
            logger.warning(
                f"max_depth={self.max_depth} exceeds max_safe_depth={self.max_safe_depth}; "
                f"deep searches may exhaust time or the recursion limit"
            )

    def make_rng(self) -> np.random.Generator:
        """Create the tie-break generator for one search."""
        return np.random.default_rng(self.random_seed)

    def __repr__(self) -> str:
        return (
            f"SearchConfig(max_depth={self.max_depth}, prune={self.prune}, "
            f"random_seed={self.random_seed})"
        )

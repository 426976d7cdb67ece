"""
Search statistics.

Counters the engine fills in when a SearchStats instance is passed to the
driver. Useful for comparing pruned and exhaustive searches.
"""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass
class SearchStats:
    """
    Node counters for a single search (or several, if not reset).

    Attributes:
        nodes: Nodes visited, root included
        leaf_evaluations: evaluate_board calls at the depth limit
        terminal_nodes: Nodes ended by a win/loss signal or by having no moves
        cutoffs: Alpha-beta cutoffs taken
        max_ply: Deepest ply reached
    """
    nodes: int = 0
    leaf_evaluations: int = 0
    terminal_nodes: int = 0
    cutoffs: int = 0
    max_ply: int = 0

    def record_node(self, ply: int) -> None:
        self.nodes += 1
        if ply > self.max_ply:
            self.max_ply = ply

    def reset(self) -> None:
        """Zero all counters."""
        self.nodes = 0
        self.leaf_evaluations = 0
        self.terminal_nodes = 0
        self.cutoffs = 0
        self.max_ply = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)

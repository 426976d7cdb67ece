"""
Synthetic Game Trees

A game whose whole tree is written out by hand as nested lists. Interior
nodes are lists of children, leaves are numbers (heuristic scores) or the
markers "win"/"loss". Transitions are child indices.

Useful for checking the search against hand-computed minimax values:

    tree = [[3, 12], [2, 4], [14, 1]]
    cursor = TreeCursor(tree)
    GameTree().best_transition(cursor, SearchConfig(max_depth=2))
    # -> SearchResult(transition=0, value=3)

Numeric leaves above the depth limit have no transitions, so the search
scores them as a draw (0). Pick max_depth equal to the leaf depth to have
leaf numbers read by evaluate_board.
"""

from numbers import Real
from typing import Any, List, Sequence, Tuple

from game_search.games.base import GameAdapter

WIN = "win"
LOSS = "loss"


def _validate(node: Any, path: Tuple[int, ...] = ()) -> None:
    if isinstance(node, list):
        for index, child in enumerate(node):
            _validate(child, path + (index,))
        return
    if node in (WIN, LOSS):
        return
    if isinstance(node, bool) or not isinstance(node, Real):
        raise ValueError(f"Invalid tree leaf at {path}: {node!r}")


class TreeCursor:
    """
    Board for GameTree: a position inside a fixed tree.

    Attributes:
        root: The full tree
        path: Child indices from the root to the current node
        applied: Every path reached by apply, in order
    """

    def __init__(self, root: Any):
        _validate(root)
        self.root = root
        self.path: List[int] = []
        self.applied: List[Tuple[int, ...]] = []
        self._nodes: List[Any] = [root]

    @property
    def node(self) -> Any:
        return self._nodes[-1]

    def descend(self, index: int) -> None:
        node = self.node
        if not isinstance(node, list) or not 0 <= index < len(node):
            raise ValueError(f"No child {index} at {tuple(self.path)}")
        self._nodes.append(node[index])
        self.path.append(index)
        self.applied.append(tuple(self.path))

    def ascend(self, index: int) -> None:
        if not self.path or self.path[-1] != index:
            raise ValueError(f"Cannot undo child {index} at {tuple(self.path)}")
        self._nodes.pop()
        self.path.pop()

    def __repr__(self) -> str:
        return f"TreeCursor(path={tuple(self.path)}, node={self.node!r})"


class GameTree(GameAdapter[TreeCursor, int]):
    """
    Adapter for hand-written game trees.

    Args:
        interior_value: Score evaluate_board gives to interior nodes and
            markers reached at the depth limit
    """

    def __init__(self, interior_value: float = 0.0):
        self.interior_value = interior_value

    def generate_transitions(self, board: TreeCursor, is_own_turn: bool) -> Sequence[int]:
        node = board.node
        if isinstance(node, list):
            return list(range(len(node)))
        return []

    def apply_transition(self, board: TreeCursor, transition: int) -> None:
        board.descend(transition)

    def undo_transition(self, board: TreeCursor, transition: int) -> None:
        board.ascend(transition)

    def evaluate_board(self, board: TreeCursor) -> float:
        node = board.node
        if isinstance(node, list) or node in (WIN, LOSS):
            return self.interior_value
        return float(node)

    def evaluate_end_state(self, board: TreeCursor) -> float:
        node = board.node
        if node == WIN:
            return 1
        if node == LOSS:
            return -1
        return 0

    def __repr__(self) -> str:
        return f"GameTree(interior_value={self.interior_value})"

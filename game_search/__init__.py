"""
game_search

Generic two-player game-tree search: minimax with alpha-beta pruning and
random tie-breaking, driven entirely by caller-supplied callbacks.

## Architecture

The package is organized into several key modules:

1. **search**: The search algorithm
   - minimax / find_best_transition entry points
   - Recursive alpha-beta engine with a tie-break set per node
   - SearchConfig and SearchStats

2. **games**: Game adapters supplying the callbacks
   - Abstract GameAdapter interface
   - GameTree: hand-written trees for exact checks
   - TicTacToe: numpy-backed 3x3 board
   - ChessGame: python-chess boards

3. **utils**: Verification and benchmarking
   - Exhaustive (non-pruned) reference minimax
   - Chess mate suite
   - Logger setup

## Quick Start

### With plain callbacks

```python
from game_search import minimax

move = minimax(
    board,
    3,
    generate_transitions,   # (board, is_own_turn) -> list of moves
    apply_transition,       # (board, move) -> None, mutates board
    undo_transition,        # (board, move) -> None, restores board
    evaluate_board,         # (board) -> float, higher is better for root side
    evaluate_end_state,     # (board) -> <0 lost, >0 won, 0 otherwise
)
```

### With an adapter

```python
import chess
from game_search.games import ChessGame
from game_search.search import SearchConfig

board = chess.Board()
game = ChessGame.for_side_to_move(board)
result = game.best_transition(board, SearchConfig(max_depth=3, random_seed=7))
print(f"Best move: {result.transition} (value: {result.value:.0f})")
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from game_search.search import (
    LOSS_SCORE,
    WIN_SCORE,
    SearchConfig,
    SearchResult,
    SearchStats,
    find_best_transition,
    minimax,
)

__all__ = [
    'minimax',
    'find_best_transition',
    'SearchResult',
    'SearchConfig',
    'SearchStats',
    'WIN_SCORE',
    'LOSS_SCORE',
]

"""
Games Module

Adapters that supply the search callbacks for concrete games. The search
works with any object or set of functions following the same contract;
these adapters are reference implementations and test fixtures.

Key Components:
    - GameAdapter (ABC): Bundles the five callbacks as methods
    - GameTree: Hand-written trees of leaf scores
    - TicTacToe: 3x3 tic-tac-toe on a numpy board
    - ChessGame: Chess via python-chess

Data Flow:
    board → adapter.best_transition(board, config) → SearchResult
                                                     (transition, value)
"""

from game_search.games.base import GameAdapter
from game_search.games.chess_game import ChessGame
from game_search.games.tictactoe import O, X, TicTacToe, TicTacToeBoard, TicTacToeMove
from game_search.games.tree import GameTree, TreeCursor

__all__ = [
    'GameAdapter',
    'GameTree',
    'TreeCursor',
    'TicTacToe',
    'TicTacToeBoard',
    'TicTacToeMove',
    'X',
    'O',
    'ChessGame',
]

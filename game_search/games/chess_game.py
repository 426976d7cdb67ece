"""
Chess Adapter

Plays chess through the generic search using python-chess. The board is a
chess.Board, transitions are chess.Move, and apply/undo map onto
board.push()/board.pop(), so the move stack doubles as the undo log.

The adapter is built for one color, which is the maximizer at the search
root. Construct it with for_side_to_move(board) to match the position.

Evaluation Components:
    - Material: P=100, N=320, B=330, R=500, Q=900, K=0 (centipawns),
      from the adapter's color
    - End state: checkmate of the adapter's color = loss, of the opponent = win
    - Stalemate: no legal moves, scored as a draw by the search
    - Automatic draws: insufficient material, the 75-move rule and fivefold
      repetition end the game, so no moves are generated and the search
      scores them as draws. Claimable draws (threefold, 50-move) stay live.

The search asks for the moves of the side is_own_turn names. python-chess
only generates moves for the side to move, so a mismatch between the
adapter's color and the board raises ValueError.
"""

import chess
import numpy as np

from typing import Sequence

from game_search.games.base import GameAdapter

PIECE_TYPES = (chess.PAWN, chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN, chess.KING)

# Material values (centipawns), ordered as PIECE_TYPES
PIECE_VALUES = np.array([100, 320, 330, 500, 900, 0], dtype=np.float32)


def piece_counts(board: chess.Board, color: chess.Color) -> np.ndarray:
    """Number of pieces of each type for one color, ordered as PIECE_TYPES."""
    return np.array(
        [len(board.pieces(piece_type, color)) for piece_type in PIECE_TYPES],
        dtype=np.float32,
    )


class ChessGame(GameAdapter[chess.Board, chess.Move]):
    """
    Chess adapter playing for one color.

    Args:
        color: chess.WHITE or chess.BLACK; this side is the maximizer
    """

    def __init__(self, color: chess.Color = chess.WHITE):
        self.color = color

    @classmethod
    def for_side_to_move(cls, board: chess.Board) -> "ChessGame":
        return cls(board.turn)

    def generate_transitions(self, board: chess.Board, is_own_turn: bool) -> Sequence[chess.Move]:
        if (board.turn == self.color) != is_own_turn:
            side = "own" if is_own_turn else "opponent"
            raise ValueError(
                f"Asked for {side} moves as {chess.COLOR_NAMES[self.color]}, "
                f"but {chess.COLOR_NAMES[board.turn]} is to move"
            )
        if board.is_game_over():
            return []
        return list(board.legal_moves)

    def apply_transition(self, board: chess.Board, transition: chess.Move) -> None:
        board.push(transition)

    def undo_transition(self, board: chess.Board, transition: chess.Move) -> None:
        popped = board.pop()
        if popped != transition:
            raise ValueError(f"Undo out of order: expected {transition}, popped {popped}")

    def evaluate_board(self, board: chess.Board) -> float:
        """
        Material balance from the adapter's color.

        Returns:
            float: Centipawns, positive when the adapter's side is ahead
        """
        balance = piece_counts(board, self.color) - piece_counts(board, not self.color)
        return float(balance @ PIECE_VALUES)

    def evaluate_end_state(self, board: chess.Board) -> float:
        if board.is_checkmate():
            # The side to move is the side that got mated
            return -1 if board.turn == self.color else 1
        return 0

    def __repr__(self) -> str:
        return f"ChessGame(color={chess.COLOR_NAMES[self.color]})"

"""
Tic-Tac-Toe

Board and adapter for 3x3 tic-tac-toe. The board is a numpy int8 array with
X = 1, O = -1 and empty = 0. The adapter plays for one fixed side, which is
the maximizer at the search root.

Text format (used by parse and __str__):
    Three rows of "X", "O" or "." separated by "/" or newlines,
    e.g. "XX./OO./..."

Evaluation:
    Open lines (rows, columns and diagonals with no enemy mark) for the
    adapter's side minus open lines for the opponent.
"""

from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

from game_search.games.base import GameAdapter

EMPTY = 0
X = 1
O = -1

SYMBOLS = {X: "X", O: "O", EMPTY: "."}
_PARSE = {"X": X, "O": O, ".": EMPTY, "-": EMPTY}

# Row/column indices of the 8 winning lines
LINES = np.array([
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
])


class TicTacToeMove(NamedTuple):
    row: int
    col: int
    player: int

    def __str__(self) -> str:
        return f"{SYMBOLS[self.player]}@{self.row}{self.col}"


class TicTacToeBoard:
    """
    3x3 tic-tac-toe position.

    Attributes:
        cells: (3, 3) int8 array of X, O and EMPTY
    """

    def __init__(self, cells=None):
        if cells is None:
            self.cells = np.zeros((3, 3), dtype=np.int8)
        else:
            self.cells = np.array(cells, dtype=np.int8)

        if self.cells.shape != (3, 3):
            raise ValueError(f"Board must be 3x3, got shape {self.cells.shape}")
        if not np.isin(self.cells, (X, O, EMPTY)).all():
            raise ValueError("Board cells must be X (1), O (-1) or empty (0)")

    @classmethod
    def parse(cls, text: str) -> "TicTacToeBoard":
        """
        Build a board from its text form.

        Raises:
            ValueError: If the text is not three rows of three X/O/. cells
        """
        rows = [row.strip() for row in text.replace("/", "\n").strip().splitlines()]
        if len(rows) != 3 or any(len(row) != 3 for row in rows):
            raise ValueError(f"Expected 3 rows of 3 cells, got {text!r}")

        try:
            cells = [[_PARSE[ch.upper()] for ch in row] for row in rows]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r} in {text!r}") from e

        return cls(cells)

    def lines(self) -> np.ndarray:
        """Cell values along each winning line, shape (8, 3)."""
        return self.cells[LINES[:, :, 0], LINES[:, :, 1]]

    def winner(self) -> int:
        """Return X or O if that side has three in a row, else EMPTY."""
        sums = self.lines().sum(axis=1)
        if (sums == 3 * X).any():
            return X
        if (sums == 3 * O).any():
            return O
        return EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.cells == EMPTY)]

    def is_full(self) -> bool:
        return not (self.cells == EMPTY).any()

    def copy(self) -> "TicTacToeBoard":
        return TicTacToeBoard(self.cells.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeBoard):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __str__(self) -> str:
        return "/".join("".join(SYMBOLS[int(v)] for v in row) for row in self.cells)

    def __repr__(self) -> str:
        return f"TicTacToeBoard({str(self)!r})"


class TicTacToe(GameAdapter[TicTacToeBoard, TicTacToeMove]):
    """
    Tic-tac-toe adapter playing for one side.

    Args:
        player: X or O; this side is the maximizer
    """

    def __init__(self, player: int = X):
        if player not in (X, O):
            raise ValueError(f"player must be X ({X}) or O ({O}), got {player!r}")
        self.player = player
        self.opponent = -player

    def generate_transitions(self, board: TicTacToeBoard, is_own_turn: bool) -> Sequence[TicTacToeMove]:
        if board.winner() != EMPTY:
            return []
        mover = self.player if is_own_turn else self.opponent
        return [TicTacToeMove(r, c, mover) for r, c in board.empty_cells()]

    def apply_transition(self, board: TicTacToeBoard, transition: TicTacToeMove) -> None:
        if board.cells[transition.row, transition.col] != EMPTY:
            raise ValueError(f"Cell ({transition.row}, {transition.col}) is occupied")
        board.cells[transition.row, transition.col] = transition.player

    def undo_transition(self, board: TicTacToeBoard, transition: TicTacToeMove) -> None:
        if board.cells[transition.row, transition.col] != transition.player:
            raise ValueError(f"Cannot undo {transition}: cell does not hold that mark")
        board.cells[transition.row, transition.col] = EMPTY

    def evaluate_board(self, board: TicTacToeBoard) -> float:
        lines = board.lines()
        own_open = (~(lines == self.opponent).any(axis=1)).sum()
        opponent_open = (~(lines == self.player).any(axis=1)).sum()
        return float(own_open - opponent_open)

    def evaluate_end_state(self, board: TicTacToeBoard) -> float:
        winner = board.winner()
        if winner == self.player:
            return 1
        if winner == self.opponent:
            return -1
        return 0

    def __repr__(self) -> str:
        return f"TicTacToe(player={SYMBOLS[self.player]})"

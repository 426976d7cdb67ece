"""
Unit Tests for Game Adapters

Tests for the hand-written tree and tic-tac-toe adapters, focusing on:
    - Input validation
    - Apply/undo symmetry
    - Tactical choices through the search (win, block, draw)
"""

import numpy as np
import pytest

from game_search.games import GameAdapter, GameTree, O, TicTacToe, TicTacToeBoard, TicTacToeMove, TreeCursor, X
from game_search.search import DRAW_SCORE, WIN_SCORE, SearchConfig, SearchStats


class TestTreeCursor:
    """Tests for TreeCursor navigation and validation."""

    def test_descend_and_ascend(self):
        cursor = TreeCursor([[1, 2], [3]])

        cursor.descend(0)
        cursor.descend(1)
        assert cursor.node == 2
        assert cursor.path == [0, 1]

        cursor.ascend(1)
        cursor.ascend(0)
        assert cursor.node == [[1, 2], [3]]
        assert cursor.applied == [(0,), (0, 1)]

    @pytest.mark.parametrize("tree", [[1, "draw"], [True, 2], [[None]]])
    def test_invalid_leaves_rejected(self, tree):
        with pytest.raises(ValueError):
            TreeCursor(tree)

    def test_descend_missing_child_raises(self):
        cursor = TreeCursor([1, 2])
        with pytest.raises(ValueError):
            cursor.descend(5)

    def test_out_of_order_undo_raises(self):
        cursor = TreeCursor([[1], [2]])
        cursor.descend(0)
        with pytest.raises(ValueError):
            cursor.ascend(1)


class TestGameTree:
    """Tests for the GameTree adapter callbacks."""

    @pytest.fixture
    def game(self):
        return GameTree(interior_value=-1.0)

    def test_is_game_adapter(self, game):
        assert isinstance(game, GameAdapter)

    def test_transitions_are_child_indices(self, game):
        cursor = TreeCursor([[1], 2, "win"])
        assert game.generate_transitions(cursor, True) == [0, 1, 2]

        cursor.descend(1)
        assert game.generate_transitions(cursor, False) == []

    def test_evaluation(self, game):
        cursor = TreeCursor([[1], 2.5, "win", "loss"])
        assert game.evaluate_board(cursor) == -1.0

        cursor.descend(1)
        assert game.evaluate_board(cursor) == 2.5
        cursor.ascend(1)

        cursor.descend(2)
        assert game.evaluate_end_state(cursor) > 0
        assert game.evaluate_board(cursor) == -1.0
        cursor.ascend(2)

        cursor.descend(3)
        assert game.evaluate_end_state(cursor) < 0

    def test_best_transition(self, game):
        cursor = TreeCursor([[3, 12], [2, 4], [14, 1]])
        result = game.best_transition(cursor, SearchConfig(max_depth=2, random_seed=0))

        assert result.transition == 0
        assert result.value == 3
        assert cursor.path == []

    def test_best_transition_collects_stats(self, game):
        stats = SearchStats()
        game.best_transition(TreeCursor([[1, 2], [0, 5]]), SearchConfig(max_depth=2), stats=stats)

        # second branch is cut after its first leaf
        assert stats.cutoffs == 1
        assert stats.nodes == 6


class TestTicTacToeBoard:
    """Tests for board parsing, printing and win detection."""

    def test_empty_board(self):
        board = TicTacToeBoard()
        assert board.cells.shape == (3, 3)
        assert board.cells.dtype == np.int8
        assert board.winner() == 0
        assert len(board.empty_cells()) == 9
        assert not board.is_full()

    def test_parse_and_str(self):
        board = TicTacToeBoard.parse("XO./.X./..O")
        assert str(board) == "XO./.X./..O"
        assert board.cells[0, 0] == X
        assert board.cells[0, 1] == O

    def test_parse_newlines(self):
        board = TicTacToeBoard.parse("x..\n.o.\n...")
        assert str(board) == "X../.O./..."

    @pytest.mark.parametrize("text", ["XO", "XXXX/.../...", "XZ./.../...", ""])
    def test_parse_rejects_malformed_text(self, text):
        with pytest.raises(ValueError):
            TicTacToeBoard.parse(text)

    def test_rejects_bad_cells(self):
        with pytest.raises(ValueError):
            TicTacToeBoard(np.zeros((2, 3)))
        with pytest.raises(ValueError):
            TicTacToeBoard([[2, 0, 0], [0, 0, 0], [0, 0, 0]])

    @pytest.mark.parametrize("text,winner", [
        ("XXX/OO./...", X),
        ("O../OX./O.X", O),
        ("X.O/.XO/..X", X),
        ("..O/.O./O.X", O),
        ("XOX/XOO/OXX", 0),
    ])
    def test_winner(self, text, winner):
        assert TicTacToeBoard.parse(text).winner() == winner

    def test_full_board(self):
        assert TicTacToeBoard.parse("XOX/XOO/OXX").is_full()

    def test_copy_is_independent(self):
        board = TicTacToeBoard.parse("X../.../...")
        copy = board.copy()
        copy.cells[1, 1] = O

        assert board != copy
        assert str(board) == "X../.../..."


class TestTicTacToe:
    """Tests for the tic-tac-toe adapter and its play through the search."""

    @pytest.fixture
    def game(self):
        return TicTacToe(player=X)

    def test_invalid_player(self):
        with pytest.raises(ValueError):
            TicTacToe(player=0)

    def test_generate_for_each_side(self, game):
        board = TicTacToeBoard.parse("X../.O./...")

        own = game.generate_transitions(board, True)
        other = game.generate_transitions(board, False)

        assert len(own) == 7
        assert all(move.player == X for move in own)
        assert all(move.player == O for move in other)

    def test_no_moves_after_win(self, game):
        board = TicTacToeBoard.parse("XXX/OO./...")
        assert game.generate_transitions(board, False) == []

    def test_apply_and_undo(self, game):
        board = TicTacToeBoard()
        move = TicTacToeMove(1, 1, X)

        game.apply_transition(board, move)
        assert board.cells[1, 1] == X

        game.undo_transition(board, move)
        assert board == TicTacToeBoard()

    def test_apply_occupied_raises(self, game):
        board = TicTacToeBoard.parse("X../.../...")
        with pytest.raises(ValueError):
            game.apply_transition(board, TicTacToeMove(0, 0, O))

    def test_undo_wrong_mark_raises(self, game):
        board = TicTacToeBoard.parse("X../.../...")
        with pytest.raises(ValueError):
            game.undo_transition(board, TicTacToeMove(0, 0, O))

    def test_empty_board_evaluates_even(self, game):
        assert game.evaluate_board(TicTacToeBoard()) == 0.0

    def test_center_is_valued(self, game):
        board = TicTacToeBoard.parse(".../.X./...")
        # X in the centre blocks 4 of O's lines
        assert game.evaluate_board(board) == 4.0

    def test_end_state_perspective(self):
        board = TicTacToeBoard.parse("XXX/OO./...")
        assert TicTacToe(player=X).evaluate_end_state(board) > 0
        assert TicTacToe(player=O).evaluate_end_state(board) < 0

    def test_takes_immediate_win(self, game):
        board = TicTacToeBoard.parse("XX./OO./...")
        result = game.best_transition(board, SearchConfig(max_depth=2, random_seed=0))

        assert result.transition == TicTacToeMove(0, 2, X)
        assert result.value == WIN_SCORE
        assert str(board) == "XX./OO./..."

    def test_blocks_immediate_loss(self, game):
        board = TicTacToeBoard.parse("X../OO./..X")
        result = game.best_transition(board, SearchConfig(max_depth=3, random_seed=0))

        assert result.transition == TicTacToeMove(1, 2, X)
        assert str(board) == "X../OO./..X"

    def test_plays_as_o(self):
        game = TicTacToe(player=O)
        board = TicTacToeBoard.parse("OO./XX./X..")
        result = game.best_transition(board, SearchConfig(max_depth=2, random_seed=0))

        assert result.transition == TicTacToeMove(0, 2, O)

    def test_full_board_has_no_move(self, game):
        board = TicTacToeBoard.parse("XOX/XOO/OXX")
        result = game.best_transition(board, SearchConfig(max_depth=3))

        assert result.transition is None
        assert result.value == DRAW_SCORE

    def test_full_depth_search_finds_draw(self, game):
        """Corner against centre is a draw with best play on both sides."""
        board = TicTacToeBoard.parse("X../.O./...")
        result = game.best_transition(board, SearchConfig(max_depth=7, random_seed=0))

        assert result.value == DRAW_SCORE
        assert result.transition is not None
        assert str(board) == "X../.O./..."

"""
Search Verification and Benchmarking

This module provides reference implementations and test suites for checking
the search engine.

Tools:
    1. exhaustive_minimax: Plain minimax with no pruning and no randomness.
       Uses the same termination rules as the engine, so its root value must
       match the alpha-beta search on any tree.

    2. Mate suite: Chess positions with a forced mate, searched through the
       ChessGame adapter.
       - Mate in one needs depth 2 (the mating move, then the mated node
         is checked for an end state)
       - Each position lists every acceptable mating move

Evaluation Metrics:
    - Correct Moves: Number of positions where the search found a mate
    - Time per Position: Average thinking time
    - Nodes Searched: Total nodes visited
"""

import chess
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

import numpy as np

from game_search.games.chess_game import ChessGame
from game_search.search.minimax import DRAW_SCORE, LOSS_SCORE, WIN_SCORE, find_best_transition
from game_search.search.stats import SearchStats

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


def exhaustive_minimax(
    board: T,
    max_depth: int,
    generate_transitions: Callable[[T, bool], Sequence[U]],
    apply_transition: Callable[[T, U], None],
    undo_transition: Callable[[T, U], None],
    evaluate_board: Callable[[T], float],
    evaluate_end_state: Callable[[T], float],
    depth: int = 0,
    maximizing: bool = True,
) -> float:
    """
    Full minimax value of the board, visiting every node.

    Args:
        Same callbacks as game_search.search.minimax
        depth: Distance from the root (internal)
        maximizing: True if the root side is to move (internal)

    Returns:
        float: Minimax value of the root
    """
    if depth == max_depth:
        return evaluate_board(board)

    end_state = evaluate_end_state(board)
    if end_state < 0:
        return LOSS_SCORE
    if end_state > 0:
        return WIN_SCORE

    transitions = list(generate_transitions(board, maximizing))
    if not transitions:
        return DRAW_SCORE

    values = []
    for transition in transitions:
        apply_transition(board, transition)
        values.append(
            exhaustive_minimax(
                board,
                max_depth,
                generate_transitions,
                apply_transition,
                undo_transition,
                evaluate_board,
                evaluate_end_state,
                depth + 1,
                not maximizing,
            )
        )
        undo_transition(board, transition)

    return max(values) if maximizing else min(values)


@dataclass
class SuitePosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: List of acceptable best moves (UCI format)
        description: Human-readable description of the position
        id: Position identifier
    """
    fen: str
    best_moves: List[str]
    description: str = ""
    id: str = ""


@dataclass
class SuiteResult:
    """
    Result of searching a single position.

    Attributes:
        position: The test position
        found_move: Move the search chose (UCI format, "" if none)
        score: Root value of the search
        correct: Whether the chosen move is one of the best moves
        time_taken: Time spent searching (seconds)
        nodes_searched: Number of nodes visited
        depth: Search depth used
    """
    position: SuitePosition
    found_move: str
    score: float
    correct: bool
    time_taken: float
    nodes_searched: int = 0
    depth: int = 0


MATE_POSITIONS = [
    SuitePosition(
        id="M1.01",
        fen="6k1/5ppp/8/8/8/8/8/R6K w - - 0 1",
        best_moves=["a1a8"],
        description="Back-rank mate with Ra8#"
    ),
    SuitePosition(
        id="M1.02",
        fen="rnbqkbnr/pppp1ppp/8/4p3/6P1/5P2/PPPPP2P/RNBQKBNR b KQkq - 0 2",
        best_moves=["d8h4"],
        description="Fool's mate with Qh4#"
    ),
    SuitePosition(
        id="M1.03",
        fen="r1bqkb1r/pppp1ppp/2n2n2/4p2Q/2B1P3/8/PPPP1PPP/RNB1K1NR w KQkq - 4 4",
        best_moves=["h5f7"],
        description="Scholar's mate with Qxf7#"
    ),
    SuitePosition(
        id="M1.04",
        fen="k7/8/1K6/8/8/8/8/7Q w - - 0 1",
        best_moves=["h1h8", "h1b7"],
        description="Queen and king mate with Qh8# or Qb7#"
    ),
]


def evaluate_position(
    position: SuitePosition,
    depth: int,
    seed: Optional[int] = None,
    prune: bool = True,
    verbose: bool = False,
) -> SuiteResult:
    """
    Search a single position and check the result.

    Args:
        position: Test position
        depth: Search depth
        seed: Tie-break seed (None = nondeterministic)
        prune: Enable alpha-beta cutoffs
        verbose: If True, print the result line

    Returns:
        SuiteResult for the position
    """
    board = chess.Board(position.fen)
    game = ChessGame.for_side_to_move(board)
    stats = SearchStats()

    start_time = time.time()
    result = find_best_transition(
        board,
        depth,
        game.generate_transitions,
        game.apply_transition,
        game.undo_transition,
        game.evaluate_board,
        game.evaluate_end_state,
        rng=np.random.default_rng(seed),
        prune=prune,
        stats=stats,
    )
    time_taken = time.time() - start_time

    found_move = result.transition.uci() if result.transition is not None else ""
    correct = found_move in position.best_moves

    if verbose:
        status = "OK  " if correct else "FAIL"
        print(
            f"[{status}] {position.id}: found {found_move or '-'} "
            f"(expected {', '.join(position.best_moves)}), "
            f"score={result.value:.0f}, nodes={stats.nodes}, time={time_taken:.2f}s"
        )

    logger.debug(f"{position.id}: {found_move} score={result.value} nodes={stats.nodes}")

    return SuiteResult(
        position=position,
        found_move=found_move,
        score=result.value,
        correct=correct,
        time_taken=time_taken,
        nodes_searched=stats.nodes,
        depth=depth,
    )


def run_mate_suite(
    depth: int = 2,
    seed: Optional[int] = None,
    positions: Optional[List[SuitePosition]] = None,
    prune: bool = True,
    verbose: bool = True,
) -> Dict[str, Any]:
    """
    Run the mate test suite.

    Args:
        depth: Search depth (default: 2, enough for mate in one)
        seed: Tie-break seed
        positions: Positions to test (default: MATE_POSITIONS)
        prune: Enable alpha-beta cutoffs
        verbose: If True, print detailed results

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - percentage: Success percentage
            - results: List of SuiteResult objects
            - avg_time: Average time per position
            - total_time: Total search time
    """
    positions = positions if positions is not None else MATE_POSITIONS

    if verbose:
        print("=" * 70)
        print("MATE TEST SUITE")
        print("=" * 70)

    results = []
    correct_count = 0
    total_time = 0.0

    for position in positions:
        result = evaluate_position(position, depth, seed=seed, prune=prune, verbose=verbose)
        results.append(result)

        if result.correct:
            correct_count += 1

        total_time += result.time_taken

    avg_time = total_time / len(positions) if positions else 0
    percentage = (correct_count / len(positions) * 100) if positions else 0

    if verbose:
        print("\n" + "=" * 70)
        print("SUMMARY")
        print("=" * 70)
        print(f"Score: {correct_count}/{len(positions)} ({percentage:.1f}%)")
        print(f"Average time: {avg_time:.2f}s")
        print(f"Total time: {total_time:.2f}s")

    return {
        'score': correct_count,
        'total': len(positions),
        'percentage': percentage,
        'results': results,
        'avg_time': avg_time,
        'total_time': total_time,
    }

"""
Minimax Search with Alpha-Beta Pruning

This module implements the core search algorithm. It is generic over two
caller-owned types: the board (T), which is mutated in place, and the
transition (U), an opaque move token. The search never copies the board.
It applies a transition, recurses, and undoes it, so the caller's
apply/undo pair must be an exact inverse.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Prunes branches that cannot change the root decision
    - Tie-break set: All transitions reaching the best value at a node;
      one of them is picked uniformly at random
    - Fixed perspective: The root side is always the maximizer, and the
      end-state callback reports wins/losses from that side's point of view

Termination (checked in this order at every node):
    1. depth == max_depth   -> evaluate_board(board), no transition
    2. end state < 0 / > 0  -> LOSS_SCORE / WIN_SCORE, no transition
    3. no transitions       -> DRAW_SCORE (0), no transition

Preconditions:
    max_depth must be a non-negative integer. The search performs no
    depth throttling of its own; a large max_depth on a wide tree will
    exhaust time or the interpreter's recursion limit.

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

import numpy as np

from game_search.search.stats import SearchStats

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Board
U = TypeVar("U")  # Transition

# Score constants
SCORE_BOUND = 9e9  # Initial alpha/beta magnitude
WIN_SCORE = SCORE_BOUND - 1  # Forced win for the root side
LOSS_SCORE = -SCORE_BOUND + 1  # Forced loss for the root side
DRAW_SCORE = 0.0  # No legal transitions left


def is_win_score(value: float) -> bool:
    """Return True if value signals a forced win for the root side."""
    return value >= WIN_SCORE


def is_loss_score(value: float) -> bool:
    """Return True if value signals a forced loss for the root side."""
    return value <= LOSS_SCORE


@dataclass(frozen=True)
class SearchResult(Generic[U]):
    """
    Outcome of searching one node.

    Attributes:
        transition: Chosen transition, None at leaves and terminal nodes
        value: Minimax value of the node
    """
    transition: Optional[U]
    value: float


@dataclass
class _SearchContext(Generic[T, U]):
    """Per-call settings shared by every recursion level."""

    max_depth: int
    generate_transitions: Callable[[T, bool], Sequence[U]]
    apply_transition: Callable[[T, U], None]
    undo_transition: Callable[[T, U], None]
    evaluate_board: Callable[[T], float]
    evaluate_end_state: Callable[[T], float]
    rng: Any
    prune: bool = True
    stats: Optional[SearchStats] = None


def _search(
    ctx: _SearchContext,
    board: T,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
) -> SearchResult:
    """
    Recursive alpha-beta minimax.

    Args:
        ctx: Callbacks and per-call settings
        board: Current board (mutated and restored by the callbacks)
        depth: Distance from the root (increments each recursive call)
        maximizing: True if the side to move is the root side
        alpha: Best value the maximizer can already guarantee
        beta: Best value the minimizer can already guarantee

    Returns:
        SearchResult with the chosen transition (if any) and node value
    """
    stats = ctx.stats
    if stats is not None:
        stats.record_node(depth)

    # Base case: reached the search horizon
    if depth == ctx.max_depth:
        if stats is not None:
            stats.leaf_evaluations += 1
        return SearchResult(None, ctx.evaluate_board(board))

    end_state = ctx.evaluate_end_state(board)
    if end_state < 0:
        if stats is not None:
            stats.terminal_nodes += 1
        return SearchResult(None, LOSS_SCORE)
    if end_state > 0:
        if stats is not None:
            stats.terminal_nodes += 1
        return SearchResult(None, WIN_SCORE)

    transitions = list(ctx.generate_transitions(board, maximizing))
    if not transitions:
        if stats is not None:
            stats.terminal_nodes += 1
        return SearchResult(None, DRAW_SCORE)

    best = -SCORE_BOUND if maximizing else SCORE_BOUND
    best_transitions: List[U] = []

    for transition in transitions:
        ctx.apply_transition(board, transition)
        child = _search(ctx, board, depth + 1, not maximizing, alpha, beta)
        ctx.undo_transition(board, transition)

        value = child.value
        if (maximizing and value > best) or (not maximizing and value < best):
            best = value
            best_transitions = [transition]
            if maximizing:
                alpha = max(alpha, best)
            else:
                beta = min(beta, best)
        elif value == best:
            best_transitions.append(transition)

        # Strict comparison: a child tying the bound is still searched fully
        if ctx.prune and alpha > beta:
            if stats is not None:
                stats.cutoffs += 1
            break

    if not best_transitions:
        return SearchResult(None, best)

    if len(best_transitions) == 1:
        return SearchResult(best_transitions[0], best)

    chosen = best_transitions[int(ctx.rng.integers(len(best_transitions)))]
    return SearchResult(chosen, best)


def check_depth(max_depth: int) -> None:
    """Raise ValueError unless max_depth is a non-negative integer (numpy integers included)."""
    if isinstance(max_depth, bool) or not isinstance(max_depth, (int, np.integer)):
        raise ValueError(f"max_depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")


def find_best_transition(
    board: T,
    max_depth: int,
    generate_transitions: Callable[[T, bool], Sequence[U]],
    apply_transition: Callable[[T, U], None],
    undo_transition: Callable[[T, U], None],
    evaluate_board: Callable[[T], float],
    evaluate_end_state: Callable[[T], float],
    *,
    rng: Optional[np.random.Generator] = None,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> SearchResult[U]:
    """
    Search from the root and return its full result.

    The side to move at the root is the maximizer. The board is left in
    the same state it was passed in.

    Args:
        board: Starting board, mutated and restored during the search
        max_depth: Number of plies to look ahead (0 = evaluate immediately)
        generate_transitions: (board, is_own_turn) -> legal transitions
        apply_transition: (board, transition) -> None, mutates board
        undo_transition: (board, transition) -> None, reverses apply
        evaluate_board: (board) -> heuristic score at the horizon
        evaluate_end_state: (board) -> <0 lost, >0 won, 0 otherwise
        rng: Tie-break source with an integers(n) method
            (default: fresh numpy Generator)
        prune: Disable to run exhaustive minimax through the same engine
        stats: Optional counters filled in during the search

    Returns:
        SearchResult for the root. transition is None when max_depth is 0,
        the root is terminal, or it has no transitions.

    Raises:
        ValueError: If max_depth is negative or not an integer
    """
    check_depth(max_depth)

    ctx = _SearchContext(
        max_depth=max_depth,
        generate_transitions=generate_transitions,
        apply_transition=apply_transition,
        undo_transition=undo_transition,
        evaluate_board=evaluate_board,
        evaluate_end_state=evaluate_end_state,
        rng=rng if rng is not None else np.random.default_rng(),
        prune=prune,
        stats=stats,
    )

    result = _search(ctx, board, 0, True, -SCORE_BOUND, SCORE_BOUND)

    logger.debug(f"Following this move will bring us a value of {result.value}.")
    if stats is not None:
        logger.debug(f"Search stats: {stats}")

    return result


def minimax(
    board: T,
    max_depth: int,
    generate_transitions: Callable[[T, bool], Sequence[U]],
    apply_transition: Callable[[T, U], None],
    undo_transition: Callable[[T, U], None],
    evaluate_board: Callable[[T], float],
    evaluate_end_state: Callable[[T], float],
    *,
    rng: Optional[np.random.Generator] = None,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> Optional[U]:
    """
    Find the best transition to apply to the board.

    Same arguments as find_best_transition; only the chosen transition is
    returned. The root value is logged at DEBUG level.

    Returns:
        The chosen transition, or None if there is nothing to choose
    """
    return find_best_transition(
        board,
        max_depth,
        generate_transitions,
        apply_transition,
        undo_transition,
        evaluate_board,
        evaluate_end_state,
        rng=rng,
        prune=prune,
        stats=stats,
    ).transition

"""
Abstract Game Adapter Interface

This module defines the abstract base class for games the search can play.
The search itself only needs five plain callables; an adapter bundles them
as methods so a game can be handed to the search as a single object.

Key Principles:
    1. Adapters own the rules, never the search state
    2. apply_transition/undo_transition form an exact inverse pair
    3. evaluate_board is from the adapter's own side (higher = better)
    4. evaluate_end_state is from the same fixed side, not the side to move
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from game_search.search.config import SearchConfig
from game_search.search.minimax import SearchResult, find_best_transition
from game_search.search.stats import SearchStats

T = TypeVar("T")
U = TypeVar("U")


class GameAdapter(ABC, Generic[T, U]):
    """
    Abstract base class for searchable games.

    Methods:
        generate_transitions(board, is_own_turn): Legal transitions
        apply_transition(board, transition): Mutate board in place
        undo_transition(board, transition): Restore the pre-apply board
        evaluate_board(board): Heuristic score at the search horizon
        evaluate_end_state(board): <0 lost, >0 won, 0 otherwise
        best_transition(board, config): Run the search
    """

    @abstractmethod
    def generate_transitions(self, board: T, is_own_turn: bool) -> Sequence[U]:
        """
        List the legal transitions for one side.

        Args:
            board: Position to generate from (must not be mutated)
            is_own_turn: True for the adapter's side, False for the opponent

        Returns:
            Sequence of transitions, empty when that side cannot move
        """
        pass

    @abstractmethod
    def apply_transition(self, board: T, transition: U) -> None:
        pass

    @abstractmethod
    def undo_transition(self, board: T, transition: U) -> None:
        pass

    @abstractmethod
    def evaluate_board(self, board: T) -> float:
        pass

    @abstractmethod
    def evaluate_end_state(self, board: T) -> float:
        pass

    def best_transition(
        self,
        board: T,
        config: Optional[SearchConfig] = None,
        stats: Optional[SearchStats] = None,
    ) -> SearchResult[U]:
        """
        Search the board and return the root result.

        Args:
            board: Position to search from, restored before returning
            config: Search settings (uses defaults if None)
            stats: Optional counters filled in during the search

        Returns:
            SearchResult with the chosen transition and its value
        """
        config = config if config is not None else SearchConfig()
        return find_best_transition(
            board,
            config.max_depth,
            self.generate_transitions,
            self.apply_transition,
            self.undo_transition,
            self.evaluate_board,
            self.evaluate_end_state,
            rng=config.make_rng(),
            prune=config.prune,
            stats=stats,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

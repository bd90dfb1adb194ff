"""Puzzle session: the board plus UI lock a frontend keeps around the solvers."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from enum import StrEnum

from slidepuzzle.config import NUM_SHUFFLES, OPTIMAL_MAX_CELLS
from slidepuzzle.engine.geometry import is_adjacent
from slidepuzzle.engine.shuffle import generate_shuffle
from slidepuzzle.engine.solvers import DivideAndConquerSolver, find_optimal_swaps
from slidepuzzle.errors import SessionLockedError, SlidePuzzleError
from slidepuzzle.models.board import Board, Swap

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    OPTIMAL = "optimal"
    DIVIDE_AND_CONQUER = "dac"
    AUTO = "auto"


class PuzzleSession:
    """Owns one board and serialises every operation on it.

    While an operation (shuffle, solve, playback) runs, the session is
    locked and further requests are rejected instead of queued, the way a
    UI ignores clicks during an animation.
    """

    def __init__(self, width: int, height: int | None = None) -> None:
        self.board = Board.goal(width, height)
        self.moves: int = 0
        self._locked: bool = False

    @classmethod
    def from_board(cls, board: Board) -> PuzzleSession:
        """Create a session from an existing board (e.g. parsed from the CLI)."""
        board.validate()
        obj = object.__new__(cls)
        obj.board = board
        obj.moves = 0
        obj._locked = False
        return obj

    # -- locking --------------------------------------------------------------

    @property
    def locked(self) -> bool:
        return self._locked

    def lock(self) -> bool:
        """Acquire the lock.  Returns False if it was already held."""
        if self._locked:
            logger.debug("Session is locked")
            return False
        self._locked = True
        logger.debug("Locked session")
        return True

    def unlock(self) -> None:
        if not self._locked:
            logger.warning("Should unlock session which was not locked")
            return
        self._locked = False
        logger.debug("Unlocked session")

    @contextmanager
    def _operation(self) -> Iterator[None]:
        if not self.lock():
            raise SessionLockedError()
        try:
            yield
        finally:
            self.unlock()

    # -- operations -----------------------------------------------------------

    def shuffle(
        self, num_moves: int = NUM_SHUFFLES, rng: random.Random | None = None
    ) -> list[Swap]:
        """Scramble the board in place and return the swaps applied."""
        with self._operation():
            swaps = generate_shuffle(
                self.board.width,
                self.board.blank_index,
                num_moves,
                height=self.board.height,
                rng=rng,
            )
            self.board.apply_swaps(swaps)
            logger.info("Shuffled board with %d swaps", len(swaps))
            return swaps

    def solve(self, strategy: Strategy = Strategy.AUTO) -> list[Swap]:
        """Compute (but do not apply) the swaps that solve the current board."""
        with self._operation():
            strategy = self.resolve_strategy(strategy)
            tiles = self.board.tiles[:]
            try:
                if strategy is Strategy.OPTIMAL:
                    swaps = find_optimal_swaps(
                        tiles, self.board.width, self.board.height
                    )
                else:
                    solver = DivideAndConquerSolver(
                        tiles, self.board.width, self.board.height
                    )
                    swaps = solver.solve()
            except SlidePuzzleError as err:
                logger.error("Failed to solve puzzle with %s: %s", strategy, err)
                raise
            logger.info("Solve sequence (%s): %d swaps", strategy, len(swaps))
            return swaps

    def resolve_strategy(self, strategy: Strategy) -> Strategy:
        if strategy is not Strategy.AUTO:
            return strategy
        if self.board.size <= OPTIMAL_MAX_CELLS or self.board.width != self.board.height:
            return Strategy.OPTIMAL
        return Strategy.DIVIDE_AND_CONQUER

    def play(
        self,
        swaps: Iterable[Swap],
        on_swap: Callable[[int, Swap], None] | None = None,
    ) -> None:
        """Apply *swaps* one at a time, calling ``on_swap(i, swap)`` after each."""
        with self._operation():
            for i, (a, b) in enumerate(swaps):
                self.board.apply_swap(a, b)
                self.moves += 1
                if on_swap is not None:
                    on_swap(i, (a, b))
            logger.debug("Finished swap sequence")

    def move_tile(self, index: int) -> bool:
        """Slide the tile at *index* into the blank if they are adjacent.

        Returns True if the move was applied.
        """
        with self._operation():
            blank = self.board.blank_index
            if index == blank or not 0 <= index < self.board.size:
                return False
            if not is_adjacent(index, blank, self.board.width):
                return False
            self.board.apply_swap(blank, index)
            self.moves += 1
            return True

    # -- queries --------------------------------------------------------------

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()

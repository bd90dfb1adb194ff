"""Sliding puzzle solvers: optimal breadth-first search and divide and conquer."""

from slidepuzzle.engine.gameplay import PuzzleSession, Strategy
from slidepuzzle.engine.shuffle import generate_shuffle, scramble
from slidepuzzle.engine.solvers import DivideAndConquerSolver, find_optimal_swaps
from slidepuzzle.errors import (
    BoardBelowMinimumSizeError,
    BoardNotSquareError,
    BoardTooLargeError,
    FieldsSizeMismatchError,
    IllegalMoveError,
    InvariantViolationError,
    MaxStepsReachedError,
    NoRandomNeighborError,
    PositionOutOfBoundsError,
    SessionLockedError,
    SlidePuzzleError,
    TerminatedWithoutSolutionError,
    UnsolvableBoardError,
    ValueNotFoundError,
)
from slidepuzzle.models import Board, Swap, is_solvable

__all__ = [
    "Board",
    "BoardBelowMinimumSizeError",
    "BoardNotSquareError",
    "BoardTooLargeError",
    "DivideAndConquerSolver",
    "FieldsSizeMismatchError",
    "IllegalMoveError",
    "InvariantViolationError",
    "MaxStepsReachedError",
    "NoRandomNeighborError",
    "PositionOutOfBoundsError",
    "PuzzleSession",
    "SessionLockedError",
    "SlidePuzzleError",
    "Strategy",
    "Swap",
    "TerminatedWithoutSolutionError",
    "UnsolvableBoardError",
    "ValueNotFoundError",
    "find_optimal_swaps",
    "generate_shuffle",
    "is_solvable",
    "scramble",
]

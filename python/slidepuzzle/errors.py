"""Exception types raised by the sliding puzzle core."""

from __future__ import annotations


class SlidePuzzleError(Exception):
    """Base class for every error raised by :mod:`slidepuzzle`."""


# -- malformed input ----------------------------------------------------------


class ValueNotFoundError(SlidePuzzleError, ValueError):
    def __init__(self, value: int) -> None:
        super().__init__(f"value {value} not found")
        self.value = value


class PositionOutOfBoundsError(SlidePuzzleError, IndexError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"pos (row: {row}, col: {col}) out of bounds")
        self.row = row
        self.col = col


class FieldsSizeMismatchError(SlidePuzzleError, ValueError):
    def __init__(self, length: int, expected: int) -> None:
        super().__init__(
            f"tile list with {length} fields does not match board "
            f"expecting {expected} fields"
        )
        self.length = length
        self.expected = expected


class BoardNotSquareError(SlidePuzzleError, ValueError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"board is not square with width {width} and height {height}"
        )
        self.width = width
        self.height = height


class BoardBelowMinimumSizeError(SlidePuzzleError, ValueError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"boards below 3x3 are not supported (got {width}x{height})"
        )
        self.width = width
        self.height = height


class BoardTooLargeError(SlidePuzzleError, ValueError):
    def __init__(self, cells: int, limit: int) -> None:
        super().__init__(
            f"board with {cells} cells exceeds the limit of {limit} cells"
        )
        self.cells = cells
        self.limit = limit


class UnsolvableBoardError(SlidePuzzleError):
    def __init__(self) -> None:
        super().__init__("board permutation cannot reach the goal state")


class IllegalMoveError(SlidePuzzleError, ValueError):
    def __init__(self, a: int, b: int) -> None:
        super().__init__(
            f"swap ({a}, {b}) does not move the blank to an adjacent cell"
        )
        self.swap = (a, b)


# -- search ------------------------------------------------------------------


class NoRandomNeighborError(SlidePuzzleError):
    def __init__(self, index: int) -> None:
        super().__init__(f"no random neighbour to choose for index {index}")
        self.index = index


class TerminatedWithoutSolutionError(SlidePuzzleError):
    def __init__(self) -> None:
        super().__init__("algorithm terminated without finding a solution")


class MaxStepsReachedError(SlidePuzzleError):
    def __init__(self, max_steps: int) -> None:
        super().__init__(
            f"maximum number of steps ({max_steps}) reached without "
            "finding a solution"
        )
        self.max_steps = max_steps


class InvariantViolationError(SlidePuzzleError):
    """An internal assumption of a solver did not hold.

    Always indicates a logic defect rather than bad input.
    """


# -- session -----------------------------------------------------------------


class SessionLockedError(SlidePuzzleError):
    def __init__(self) -> None:
        super().__init__("session is busy with another operation")

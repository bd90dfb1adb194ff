"""Divide and conquer puzzle solver.

Solves a square board by alternately completing the top unsolved row and
the left unsolved column, locking every finished cell, until only the
bottom-right 2×2 square is left.  That square is finished by rotating the
blank around it.  The solution is not optimal but stays short and is
found without any whole-board search, so it works for large boards.

Order of solving a 4×4 board (``E`` is the final 2×2)::

    0 0 0 0
    1 2 2 2
    1 3 E E
    1 3 E E
"""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Sequence

from slidepuzzle.engine.geometry import (
    Coords,
    coords_from_index,
    goal_tiles,
    in_bounds,
    index_from_coords,
    neighbor_coords,
)
from slidepuzzle.errors import (
    BoardBelowMinimumSizeError,
    BoardNotSquareError,
    FieldsSizeMismatchError,
    InvariantViolationError,
    PositionOutOfBoundsError,
    TerminatedWithoutSolutionError,
    UnsolvableBoardError,
)
from slidepuzzle.models.board import Board, Swap

logger = logging.getLogger(__name__)

MIN_SOLVER_SIZE = 3

# The final 2×2 is solved after at most this many full blank cycles.
MAX_FINAL_CYCLES = 3


class SolverPhase(enum.Enum):
    ROW = "row"
    COLUMN = "column"


# Blank destinations relative to the staging cell, applied once the tile
# is parked two cells past its goal.  They slide the tile into the last
# cell of the row/column while the neighbouring locked cell is displaced
# and restored on the way.
#
# Row (tile 3 parked below, blank staged between it and its goal)::
#
#   0 1 2 X      0 1 2 3
#   X X X    ->  X X X
#   X X X 3      X X X X
_ROW_CORNER_ROTATION: tuple[tuple[int, int], ...] = (
    (-1, 0), (-1, -1), (0, -1), (0, 0), (1, 0),
    (1, -1), (0, -1), (-1, -1), (-1, 0), (0, 0),
)
# Column (tile 6 parked to the right)::
#
#   0 1 2      0 1 2
#   3 X X  ->  3 X X
#   X   6      6   X
_COLUMN_CORNER_ROTATION: tuple[tuple[int, int], ...] = (
    (0, -1), (-1, -1), (-1, 0), (0, 0), (0, 1),
    (-1, 1), (-1, 0), (-1, -1), (0, -1), (0, 0),
)


class DivideAndConquerSolver:
    """Single-use solver; construct with a snapshot, then call :meth:`solve`."""

    def __init__(self, tiles: Sequence[int], width: int, height: int) -> None:
        if len(tiles) != width * height:
            raise FieldsSizeMismatchError(len(tiles), width * height)
        if width != height:
            raise BoardNotSquareError(width, height)
        if width < MIN_SOLVER_SIZE or height < MIN_SOLVER_SIZE:
            raise BoardBelowMinimumSizeError(width, height)

        board = Board.from_flat(width, height, tiles)
        self.width = width
        self.height = height
        self.tiles: list[int] = board.tiles
        self.goal: list[int] = goal_tiles(board.size)
        self.blank_value = board.blank_value
        self.empty_pos: Coords = coords_from_index(board.blank_index, width)
        self.forbidden: set[Coords] = set()
        self.swaps: list[Swap] = []
        self.phase = SolverPhase.ROW
        self.working_row = 0
        self.working_col = 0

    # -- public API -----------------------------------------------------------

    def solve(self) -> list[Swap]:
        """Return the swaps (blank index, target index) that solve the board."""
        if not Board(self.width, self.height, self.tiles).is_solvable():
            raise UnsolvableBoardError()

        while not self._only_final_square_left():
            if self.phase is SolverPhase.ROW:
                self._solve_row()
                self.working_row += 1
                self.phase = SolverPhase.COLUMN
            else:
                self._solve_column()
                self.working_col += 1
                self.phase = SolverPhase.ROW
            logger.debug(
                "Frontier advanced to row %d, column %d",
                self.working_row,
                self.working_col,
            )

        self._solve_last_four_fields()
        logger.debug("Divide and conquer solved in %d swaps", len(self.swaps))
        return list(self.swaps)

    # -- phases ---------------------------------------------------------------

    def _only_final_square_left(self) -> bool:
        return (
            self.height - self.working_row < 2
            or self.width - self.working_col < 2
        )

    def _solve_row(self) -> None:
        row = self.working_row
        for col in range(self.working_col, self.width - 1):
            self._solve_cell(Coords(row, col), SolverPhase.ROW)
        self._solve_corner(Coords(row, self.width - 1), SolverPhase.ROW)

    def _solve_column(self) -> None:
        col = self.working_col
        for row in range(self.working_row, self.height - 1):
            self._solve_cell(Coords(row, col), SolverPhase.COLUMN)
        self._solve_corner(Coords(self.height - 1, col), SolverPhase.COLUMN)

    def _solve_cell(self, pos: Coords, phase: SolverPhase) -> None:
        goal_value = self._goal_value_of_pos(pos)
        if self._value_at_pos(pos) != goal_value:
            self.swap_field_to_goal_pos(self._pos_of_value(goal_value), pos, phase)
        self.forbidden.add(pos)

    def _solve_corner(self, pos: Coords, phase: SolverPhase) -> None:
        goal_value = self._goal_value_of_pos(pos)
        if self._value_at_pos(pos) != goal_value:
            self.swap_corner_fields_to_goal(goal_value, pos, phase)
        self.forbidden.add(pos)

    # -- moving a single tile -------------------------------------------------

    def swap_field_to_goal_pos(
        self, field_pos: Coords, goal_pos: Coords, phase: SolverPhase
    ) -> None:
        """Move the tile at *field_pos* to *goal_pos* one step at a time.

        Each step routes the blank next to the tile (never through it or a
        forbidden cell) and then swaps the two.
        """
        while field_pos != goal_pos:
            step = _next_step(field_pos, goal_pos, phase)
            path = self.compute_empty_field_moves(field_pos, step, self.empty_pos)
            self._apply_moves(path)

            previous_empty = self.empty_pos
            self._apply_moves([field_pos])
            field_pos = previous_empty

    def swap_corner_fields_to_goal(
        self, value: int, goal_pos: Coords, phase: SolverPhase
    ) -> None:
        """Place *value* in the last cell of the current row/column."""
        if phase is SolverPhase.ROW:
            park_pos = Coords(goal_pos.row + 2, goal_pos.col)
            staging_pos = Coords(goal_pos.row + 1, goal_pos.col)
            rotation = _ROW_CORNER_ROTATION
        else:
            park_pos = Coords(goal_pos.row, goal_pos.col + 2)
            staging_pos = Coords(goal_pos.row, goal_pos.col + 1)
            rotation = _COLUMN_CORNER_ROTATION

        # The tile may already sit next to its goal with the blank in the
        # goal itself:
        #   0 1 _
        #   X X 2
        # Parking it would require moving a locked tile, so just slide it in.
        if (
            self._value_at_pos(goal_pos) == self.blank_value
            and self._value_at_pos(staging_pos) == value
        ):
            self._apply_moves([staging_pos])
            return

        self.swap_field_to_goal_pos(self._pos_of_value(value), park_pos, phase)

        path = self.compute_empty_field_moves(park_pos, staging_pos, self.empty_pos)
        self._apply_moves(path)

        self._apply_moves(
            [Coords(staging_pos.row + dr, staging_pos.col + dc) for dr, dc in rotation]
        )

    # -- blank routing --------------------------------------------------------

    def compute_empty_field_moves(
        self, field: Coords, target: Coords, empty: Coords
    ) -> list[Coords]:
        """Return the blank's path from *empty* to *target*, start excluded.

        Breadth-first search over in-bounds cells that are neither
        forbidden nor *field* (the tile being moved).
        """
        if not in_bounds(target.row, target.col, self.width, self.height):
            raise PositionOutOfBoundsError(target.row, target.col)
        if empty == target:
            return []

        parents: dict[Coords, Coords] = {}
        seen: set[Coords] = {empty}
        queue: deque[Coords] = deque([empty])
        found = False

        while queue and not found:
            current = queue.popleft()
            for neighbor in neighbor_coords(current, self.width, self.height):
                if (
                    neighbor in seen
                    or neighbor in self.forbidden
                    or neighbor == field
                ):
                    continue
                seen.add(neighbor)
                parents[neighbor] = current
                if neighbor == target:
                    found = True
                    break
                queue.append(neighbor)

        path = [target]
        current = target
        while current != empty:
            parent = parents.get(current)
            if parent is None:
                raise InvariantViolationError(
                    f"no path for the blank from {tuple(empty)} to {tuple(target)}"
                )
            path.append(parent)
            current = parent

        path.pop()
        path.reverse()
        return path

    # -- final square ---------------------------------------------------------

    def _solve_last_four_fields(self) -> None:
        """Rotate the blank around the bottom-right 2×2 until it is solved.

        One cycle moves the blank clockwise around the square and rotates
        the three tiles by one cell, so three cycles return to the start::

            X X X   X X X                               X X X
            X 5     X 5 7  -> multiple of four moves -> X 4 5
            X 4 7   X 4                                 X 7
        """
        h, w = self.height, self.width
        cycle = [
            Coords(h - 1, w - 2),
            Coords(h - 2, w - 2),
            Coords(h - 2, w - 1),
            Coords(h - 1, w - 1),
        ]
        outer, inner = cycle[3], cycle[1]

        if self.empty_pos not in cycle:
            raise InvariantViolationError(
                f"blank at {tuple(self.empty_pos)} outside the final square"
            )
        if self.empty_pos != outer:
            if self.empty_pos == inner:
                self._apply_moves([cycle[0]])
            self._apply_moves([outer])

        for _ in range(MAX_FINAL_CYCLES):
            if self.tiles == self.goal:
                return
            self._apply_moves(cycle)

        if self.tiles != self.goal:
            raise TerminatedWithoutSolutionError()

    # -- helpers --------------------------------------------------------------

    def _apply_moves(self, moves: Sequence[Coords]) -> None:
        """Move the blank along *moves*, recording one swap per step."""
        for step in moves:
            step_idx = index_from_coords(step, self.width)
            empty_idx = index_from_coords(self.empty_pos, self.width)
            self.swaps.append((empty_idx, step_idx))
            self.tiles[empty_idx], self.tiles[step_idx] = (
                self.tiles[step_idx],
                self.tiles[empty_idx],
            )
            self.empty_pos = step

    def _pos_of_value(self, value: int) -> Coords:
        idx = Board(self.width, self.height, self.tiles).index_of(value)
        return coords_from_index(idx, self.width)

    def _value_at_pos(self, pos: Coords) -> int:
        if not in_bounds(pos.row, pos.col, self.width, self.height):
            raise PositionOutOfBoundsError(pos.row, pos.col)
        return self.tiles[index_from_coords(pos, self.width)]

    def _goal_value_of_pos(self, pos: Coords) -> int:
        if not in_bounds(pos.row, pos.col, self.width, self.height):
            raise PositionOutOfBoundsError(pos.row, pos.col)
        return self.goal[index_from_coords(pos, self.width)]


def _next_step(field: Coords, goal: Coords, phase: SolverPhase) -> Coords:
    """Return the neighbour of *field* one step closer to *goal*.

    Rows are filled by moving horizontally first, columns vertically
    first.  The order decides which of several shortest routes a tile
    takes and keeps it clear of the cells locked so far.
    """
    d_row = (goal.row > field.row) - (goal.row < field.row)
    d_col = (goal.col > field.col) - (goal.col < field.col)

    if phase is SolverPhase.ROW:
        if d_col:
            return Coords(field.row, field.col + d_col)
        if d_row:
            return Coords(field.row + d_row, field.col)
    else:
        if d_row:
            return Coords(field.row + d_row, field.col)
        if d_col:
            return Coords(field.row, field.col + d_col)
    return field

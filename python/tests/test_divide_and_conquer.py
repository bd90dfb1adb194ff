"""Divide and conquer solver: regressions, preconditions and blank routing."""

from __future__ import annotations

import itertools
import random

import pytest

from slidepuzzle.engine.geometry import Coords, is_adjacent
from slidepuzzle.engine.shuffle import scramble
from slidepuzzle.engine.solvers import DivideAndConquerSolver, SolverPhase
from slidepuzzle.engine.solvers.divide_and_conquer import MIN_SOLVER_SIZE, _next_step
from slidepuzzle.errors import (
    BoardBelowMinimumSizeError,
    BoardNotSquareError,
    FieldsSizeMismatchError,
    InvariantViolationError,
    PositionOutOfBoundsError,
    TerminatedWithoutSolutionError,
    UnsolvableBoardError,
    ValueNotFoundError,
)
from slidepuzzle.models.board import Board, is_solvable


def _solve_and_replay(tiles: list[int], size: int) -> list[tuple[int, int]]:
    swaps = DivideAndConquerSolver(tiles, size, size).solve()
    board = Board.from_flat(size, size, tiles)
    board.apply_swaps(swaps)
    assert board.is_solved(), f"not solved after {len(swaps)} swaps: {board.tiles}"
    return swaps


def _random_solvable(size: int, rng: random.Random) -> list[int]:
    tiles = list(range(size * size))
    rng.shuffle(tiles)
    if not is_solvable(tiles, size, size):
        # Exchanging two tiles (neither the blank) flips the parity.
        blank = size * size - 1
        i, j = [k for k, v in enumerate(tiles) if v != blank][:2]
        tiles[i], tiles[j] = tiles[j], tiles[i]
    return tiles


# -- regressions ----------------------------------------------------------------


def test_solved_board() -> None:
    assert DivideAndConquerSolver(list(range(16)), 4, 4).solve() == []


def test_regular_4x4() -> None:
    _solve_and_replay([8, 5, 6, 1, 14, 4, 7, 2, 0, 13, 11, 9, 15, 12, 10, 3], 4)


def test_corner_presolved_at_row_end() -> None:
    _solve_and_replay([2, 1, 5, 3, 0, 7, 8, 6, 4], 3)


def test_corner_tile_next_to_goal() -> None:
    _solve_and_replay([2, 1, 5, 7, 3, 4, 0, 6, 8], 3)


def test_input_is_not_mutated() -> None:
    tiles = [2, 1, 5, 3, 0, 7, 8, 6, 4]
    DivideAndConquerSolver(tiles, 3, 3).solve()
    assert tiles == [2, 1, 5, 3, 0, 7, 8, 6, 4]


def test_swaps_start_at_the_blank() -> None:
    tiles = [8, 5, 6, 1, 14, 4, 7, 2, 0, 13, 11, 9, 15, 12, 10, 3]
    swaps = DivideAndConquerSolver(tiles, 4, 4).solve()
    board = Board.from_flat(4, 4, tiles)
    for a, b in swaps:
        assert board.tiles[a] == board.blank_value
        board.apply_swap(a, b)


# -- larger and arbitrary boards -----------------------------------------------


@pytest.mark.parametrize("size", [5, 8, 10])
def test_scrambled_large_boards(size: int) -> None:
    board = scramble(size, num_moves=400, rng=random.Random(size))
    _solve_and_replay(board.tiles, size)


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("size", [3, 4, 5])
def test_random_solvable_permutations(size: int, seed: int) -> None:
    tiles = _random_solvable(size, random.Random(seed * 31 + size))
    _solve_and_replay(tiles, size)


# -- preconditions --------------------------------------------------------------


def test_length_mismatch() -> None:
    with pytest.raises(FieldsSizeMismatchError):
        DivideAndConquerSolver(list(range(8)), 3, 3)


def test_not_square() -> None:
    with pytest.raises(BoardNotSquareError):
        DivideAndConquerSolver(list(range(12)), 4, 3)


def test_below_minimum_size() -> None:
    with pytest.raises(BoardBelowMinimumSizeError):
        DivideAndConquerSolver([0, 1, 3, 2], 2, 2)


def test_smallest_supported_board() -> None:
    size = MIN_SOLVER_SIZE
    assert DivideAndConquerSolver(list(range(size * size)), size, size).solve() == []
    below = size - 1
    with pytest.raises(BoardBelowMinimumSizeError) as exc_info:
        DivideAndConquerSolver(list(range(below * below)), below, below)
    assert (exc_info.value.width, exc_info.value.height) == (below, below)


def test_not_a_permutation() -> None:
    with pytest.raises(ValueNotFoundError):
        DivideAndConquerSolver([0, 0, 2, 3, 4, 5, 6, 7, 8], 3, 3)


def test_unsolvable_board() -> None:
    solver = DivideAndConquerSolver([1, 0, 2, 3, 4, 5, 6, 7, 8], 3, 3)
    with pytest.raises(UnsolvableBoardError):
        solver.solve()


# -- blank routing ----------------------------------------------------------------


def test_blank_path_avoids_field() -> None:
    solver = DivideAndConquerSolver(list(range(9)), 3, 3)
    field = Coords(1, 1)
    path = solver.compute_empty_field_moves(field, Coords(0, 0), Coords(2, 2))

    assert path[-1] == Coords(0, 0)
    assert len(path) == 4
    assert field not in path
    for a, b in zip([Coords(2, 2), *path], path):
        assert is_adjacent(a.row * 3 + a.col, b.row * 3 + b.col, 3)


def test_blank_path_to_itself_is_empty() -> None:
    solver = DivideAndConquerSolver(list(range(9)), 3, 3)
    assert solver.compute_empty_field_moves(Coords(0, 0), Coords(2, 2), Coords(2, 2)) == []


def test_blank_path_avoids_forbidden_cells() -> None:
    solver = DivideAndConquerSolver(list(range(16)), 4, 4)
    solver.forbidden = {Coords(0, c) for c in range(4)}
    path = solver.compute_empty_field_moves(Coords(1, 1), Coords(1, 0), Coords(3, 3))
    assert path[-1] == Coords(1, 0)
    assert not set(path) & solver.forbidden


def test_blank_path_out_of_bounds() -> None:
    solver = DivideAndConquerSolver(list(range(9)), 3, 3)
    with pytest.raises(PositionOutOfBoundsError):
        solver.compute_empty_field_moves(Coords(0, 0), Coords(3, 0), Coords(2, 2))


def test_blank_path_blocked() -> None:
    solver = DivideAndConquerSolver(list(range(9)), 3, 3)
    solver.forbidden = {Coords(1, 2), Coords(2, 1)}
    with pytest.raises(InvariantViolationError):
        solver.compute_empty_field_moves(Coords(1, 1), Coords(0, 0), Coords(2, 2))


# -- stepping -----------------------------------------------------------------------


def test_row_phase_moves_horizontally_first() -> None:
    assert _next_step(Coords(2, 2), Coords(0, 0), SolverPhase.ROW) == Coords(2, 1)
    assert _next_step(Coords(2, 0), Coords(0, 0), SolverPhase.ROW) == Coords(1, 0)


def test_column_phase_moves_vertically_first() -> None:
    assert _next_step(Coords(2, 2), Coords(0, 0), SolverPhase.COLUMN) == Coords(1, 2)
    assert _next_step(Coords(0, 2), Coords(0, 0), SolverPhase.COLUMN) == Coords(0, 1)


def test_step_at_goal_stays() -> None:
    assert _next_step(Coords(1, 1), Coords(1, 1), SolverPhase.ROW) == Coords(1, 1)


# -- final 2×2 ------------------------------------------------------------------


def _with_final_square(square: tuple[int, ...]) -> list[int]:
    """A 3×3 board whose first row and column are solved."""
    a, b, c, d = square
    return [0, 1, 2, 3, a, b, 6, c, d]


_LOCKED_3x3 = {Coords(0, 0), Coords(0, 1), Coords(0, 2), Coords(1, 0), Coords(2, 0)}

# Half of the 24 arrangements of the bottom-right square are reachable.
_FINAL_SQUARES = [
    sq for sq in itertools.permutations([4, 5, 7, 8])
    if is_solvable(_with_final_square(sq), 3, 3)
]


def _solve_final_square(tiles: list[int]) -> DivideAndConquerSolver:
    solver = DivideAndConquerSolver(tiles, 3, 3)
    solver.forbidden = set(_LOCKED_3x3)
    solver._solve_last_four_fields()
    return solver


def test_final_square_arrangements() -> None:
    assert len(_FINAL_SQUARES) == 12


@pytest.mark.parametrize(
    "square", _FINAL_SQUARES, ids=lambda sq: "-".join(map(str, sq))
)
def test_final_square_solved(square: tuple[int, ...]) -> None:
    tiles = _with_final_square(square)
    solver = _solve_final_square(tiles)

    assert solver.tiles == list(range(9))
    # Parking the blank takes at most two moves, then at most three cycles.
    assert len(solver.swaps) <= 2 + 3 * 4
    board = Board.from_flat(3, 3, tiles)
    board.apply_swaps(solver.swaps)
    assert board.is_solved()


def test_final_square_blank_on_inner_cell() -> None:
    # Blank at (1, 1): it steps down, then right, and the square is done.
    tiles = [0, 1, 2, 3, 8, 5, 6, 4, 7]
    solver = _solve_final_square(tiles)
    assert solver.swaps == [(4, 7), (7, 8)]
    assert solver.empty_pos == Coords(2, 2)


def test_final_square_wrong_parity() -> None:
    solver = DivideAndConquerSolver([0, 1, 2, 3, 5, 4, 6, 7, 8], 3, 3)
    solver.forbidden = set(_LOCKED_3x3)
    with pytest.raises(TerminatedWithoutSolutionError):
        solver._solve_last_four_fields()
    # Three full cycles were tried.
    assert len(solver.swaps) == 12


def test_final_square_blank_outside() -> None:
    solver = DivideAndConquerSolver([8, 1, 2, 3, 4, 5, 6, 7, 0], 3, 3)
    with pytest.raises(InvariantViolationError):
        solver._solve_last_four_fields()

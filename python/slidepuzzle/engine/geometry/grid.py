"""Index and coordinate helpers for row-major boards.

All functions are pure.  Callers are responsible for passing a positive
``width``; the board model rejects anything else before it gets here.
"""

from __future__ import annotations

from typing import NamedTuple


class Coords(NamedTuple):
    row: int
    col: int


# Neighbour probing order: up, down, left, right.  Both the shuffle
# generator and every BFS depend on it to produce reproducible results.
_DELTAS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- conversions --------------------------------------------------------------


def row_col_from_index(index: int, width: int) -> tuple[int, int]:
    return divmod(index, width)


def index_from_row_col(row: int, col: int, width: int) -> int:
    return row * width + col


def coords_from_index(index: int, width: int) -> Coords:
    return Coords(*divmod(index, width))


def index_from_coords(coords: Coords, width: int) -> int:
    return coords.row * width + coords.col


# -- queries ------------------------------------------------------------------


def in_bounds(row: int, col: int, width: int, height: int) -> bool:
    """Return True if ``(row, col)`` lies on a ``width``×``height`` board.

    Negative coordinates are allowed and simply report False, so callers
    can probe ``row - 1`` without checking first.
    """
    return 0 <= row < height and 0 <= col < width


def neighbors(index: int, width: int, height: int) -> list[int]:
    """Return the indices 4-adjacent to *index* (up, down, left, right)."""
    row, col = divmod(index, width)
    result: list[int] = []
    for dr, dc in _DELTAS:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, width, height):
            result.append(nr * width + nc)
    return result


def neighbor_coords(coords: Coords, width: int, height: int) -> list[Coords]:
    """Coordinate variant of :func:`neighbors`, same ordering."""
    result: list[Coords] = []
    for dr, dc in _DELTAS:
        nr, nc = coords.row + dr, coords.col + dc
        if in_bounds(nr, nc, width, height):
            result.append(Coords(nr, nc))
    return result


def is_adjacent(a: int, b: int, width: int) -> bool:
    ar, ac = divmod(a, width)
    br, bc = divmod(b, width)
    return abs(ar - br) + abs(ac - bc) == 1


def goal_tiles(count: int) -> list[int]:
    """Return the solved tile list: ``tiles[i] == i``, blank (``count - 1``) last."""
    return list(range(count))

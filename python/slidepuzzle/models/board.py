"""Board model for the sliding puzzle solvers."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from slidepuzzle.engine.geometry import goal_tiles, is_adjacent
from slidepuzzle.errors import (
    FieldsSizeMismatchError,
    IllegalMoveError,
    PositionOutOfBoundsError,
    ValueNotFoundError,
)

Swap = tuple[int, int]


@dataclass
class Board:
    """A snapshot of the puzzle.

    Tiles are stored as a flat, row-major list of ints forming a
    permutation of ``0 .. width*height - 1``.  The largest value is the
    blank, so the goal state is simply ``tiles[i] == i``.
    """

    width: int
    height: int
    tiles: list[int]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def goal(cls, width: int, height: int | None = None) -> Board:
        """Return the solved board (blank bottom-right)."""
        height = width if height is None else height
        return cls(width=width, height=height, tiles=goal_tiles(width * height))

    @classmethod
    def from_flat(cls, width: int, height: int, flat: Sequence[int]) -> Board:
        """Create a validated board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [0, 1, 2, 3, 4, 5, 6, 8, 7])
        """
        board = cls(width=width, height=height, tiles=list(flat))
        board.validate()
        return board

    def validate(self) -> None:
        """Raise if the tiles are not a permutation matching the dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise FieldsSizeMismatchError(len(self.tiles), self.width * self.height)
        expected = self.width * self.height
        if len(self.tiles) != expected:
            raise FieldsSizeMismatchError(len(self.tiles), expected)
        present = set(self.tiles)
        for value in range(expected):
            if value not in present:
                raise ValueNotFoundError(value)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def blank_value(self) -> int:
        return self.size - 1

    @property
    def blank_index(self) -> int:
        return self.index_of(self.blank_value)

    def index_of(self, value: int) -> int:
        try:
            return self.tiles.index(value)
        except ValueError:
            raise ValueNotFoundError(value) from None

    def get_tile(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise PositionOutOfBoundsError(row, col)
        return self.tiles[row * self.width + col]

    def rows(self) -> list[list[int]]:
        w = self.width
        return [self.tiles[r * w : (r + 1) * w] for r in range(self.height)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(v == i for i, v in enumerate(self.tiles))

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        return self.tiles[index] == index

    def is_solvable(self) -> bool:
        """Return True if the goal state is reachable from this board."""
        return is_solvable(self.tiles, self.width, self.height)

    # -- mutation -------------------------------------------------------------

    def apply_swap(self, a: int, b: int) -> None:
        """Exchange the blank with an adjacent tile.

        Either operand may hold the blank; anything else raises
        :class:`IllegalMoveError`.
        """
        n = self.size
        if not (0 <= a < n and 0 <= b < n):
            raise IllegalMoveError(a, b)
        blank = self.blank_value
        if blank not in (self.tiles[a], self.tiles[b]):
            raise IllegalMoveError(a, b)
        if not is_adjacent(a, b, self.width):
            raise IllegalMoveError(a, b)
        self.tiles[a], self.tiles[b] = self.tiles[b], self.tiles[a]

    def apply_swaps(self, swaps: Iterable[Swap]) -> None:
        for a, b in swaps:
            self.apply_swap(a, b)

    def copy(self) -> Board:
        return Board(width=self.width, height=self.height, tiles=self.tiles[:])


def is_solvable(tiles: Sequence[int], width: int, height: int) -> bool:
    """Parity test for a row-major permutation with blank ``len(tiles) - 1``.

    Every move swaps the blank with a neighbour, flipping the permutation
    parity and the parity of the blank's distance to its goal cell at the
    same time.  A board is therefore solvable iff the two parities agree.
    """
    blank = len(tiles) - 1
    try:
        blank_index = tiles.index(blank)
    except ValueError:
        raise ValueNotFoundError(blank) from None

    inversions = 0
    seen: list[int] = []
    for v in tiles:
        inversions += len(seen) - bisect_left(seen, v)
        insort(seen, v)

    blank_row, blank_col = divmod(blank_index, width)
    distance = (height - 1 - blank_row) + (width - 1 - blank_col)
    return (inversions + distance) % 2 == 0

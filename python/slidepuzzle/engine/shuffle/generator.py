"""Generates solvable scrambles by walking the blank from the solved state."""

from __future__ import annotations

import logging
import random

from slidepuzzle.engine.geometry import in_bounds, neighbors, row_col_from_index
from slidepuzzle.errors import NoRandomNeighborError, PositionOutOfBoundsError
from slidepuzzle.models.board import Board, Swap

logger = logging.getLogger(__name__)


class ShuffleGenerator:
    """Creates scrambles as lists of blank swaps."""

    @staticmethod
    def generate_shuffle(
        size: int,
        blank_index: int,
        num_moves: int,
        *,
        height: int | None = None,
        rng: random.Random | None = None,
    ) -> list[Swap]:
        """Return *num_moves* sequential swaps of the blank starting at *blank_index*.

        *size* is the board width; *height* defaults to it for square boards.
        No swap immediately undoes the previous one, which keeps the
        walk from wasting moves on back-and-forth.  The swaps are only
        computed, never applied.
        """
        height = size if height is None else height
        row, col = row_col_from_index(blank_index, size)
        if not in_bounds(row, col, size, height):
            raise PositionOutOfBoundsError(row, col)

        choose = rng.choice if rng is not None else random.choice
        swaps: list[Swap] = []
        prev = blank_index
        blank = blank_index

        for _ in range(num_moves):
            candidates = [n for n in neighbors(blank, size, height) if n != prev]
            if not candidates:
                raise NoRandomNeighborError(blank)
            target = choose(candidates)
            swaps.append((blank, target))
            prev, blank = blank, target

        logger.debug("Shuffle sequence: %s", swaps)
        return swaps

    @staticmethod
    def scramble(
        width: int,
        height: int | None = None,
        num_moves: int = 10,
        *,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a goal board scrambled by *num_moves* random swaps."""
        board = Board.goal(width, height)
        swaps = ShuffleGenerator.generate_shuffle(
            board.width,
            board.blank_index,
            num_moves,
            height=board.height,
            rng=rng,
        )
        board.apply_swaps(swaps)
        return board


generate_shuffle = ShuffleGenerator.generate_shuffle
scramble = ShuffleGenerator.scramble

"""Naive, optimal puzzle solver.

Runs a breadth-first search over whole-board states, building the state
graph on the fly.  The first time a state is seen is along a shortest
path because the queue is FIFO, so later (longer) paths to known states
are never recorded.

The state space holds ``N!/2`` boards: a 3×3 board is solved in about a
second, deep 4×4 scrambles take minutes, anything larger is out of reach.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Sequence

from slidepuzzle.engine.geometry import goal_tiles, neighbors
from slidepuzzle.errors import (
    BoardTooLargeError,
    InvariantViolationError,
    MaxStepsReachedError,
)
from slidepuzzle.models.board import Board, Swap

logger = logging.getLogger(__name__)

# States are keyed by their ``bytes`` encoding, one byte per tile.
MAX_CELLS = 256


def find_optimal_swaps(
    tiles: Sequence[int],
    width: int,
    height: int,
    *,
    max_states: int | None = None,
) -> list[Swap]:
    """Return a shortest list of swaps that solves the board.

    Returns ``[]`` when the board is already solved or cannot reach the
    goal.  Raises :class:`MaxStepsReachedError` when more than
    *max_states* states would have to be explored.
    """
    board = Board.from_flat(width, height, tiles)
    if board.size > MAX_CELLS:
        raise BoardTooLargeError(board.size, MAX_CELLS)

    start = bytes(board.tiles)
    target = bytes(goal_tiles(board.size))
    if start == target:
        return []

    if not board.is_solvable():
        logger.warning("Board %s is not solvable, skipping search", board.tiles)
        return []

    blank = board.blank_value
    # state -> (parent state, swap that produced it); the start has no parent.
    parents: dict[bytes, tuple[bytes | None, Swap | None]] = {start: (None, None)}
    queue: deque[tuple[bytes, int]] = deque([(start, board.blank_index)])
    num_explored = 0
    found = False

    while queue:
        state, blank_idx = queue.popleft()
        num_explored += 1
        if state == target:
            found = True
            break
        if max_states is not None and num_explored > max_states:
            raise MaxStepsReachedError(max_states)

        for neighbor_idx in neighbors(blank_idx, width, height):
            nxt = bytearray(state)
            nxt[blank_idx] = nxt[neighbor_idx]
            nxt[neighbor_idx] = blank
            key = bytes(nxt)
            if key in parents:
                continue
            parents[key] = (state, (blank_idx, neighbor_idx))
            queue.append((key, neighbor_idx))

    logger.debug("Number of states explored by optimal solver: %d", num_explored)

    if not found:
        return []

    swaps = _trace_back(parents, target)
    logger.debug("Number of swaps to solve: %d", len(swaps))
    return swaps


def _trace_back(
    parents: dict[bytes, tuple[bytes | None, Swap | None]], target: bytes
) -> list[Swap]:
    swaps: list[Swap] = []
    state: bytes | None = target
    while state is not None:
        entry = parents.get(state)
        if entry is None:
            raise InvariantViolationError("state reached without a recorded parent")
        parent, swap = entry
        if swap is not None:
            swaps.append(swap)
        state = parent
    swaps.reverse()
    return swaps

"""Default settings shared by the session and the terminal frontend."""

from __future__ import annotations

DEFAULT_SIZE = 3
MIN_SIZE = 2
MAX_SIZE = 12

# Random blank moves per scramble.
NUM_SHUFFLES = 10

# Largest board (in cells) the AUTO strategy hands to the optimal solver.
OPTIMAL_MAX_CELLS = 9

# Seconds between animated swaps.
SWAP_INTERVAL_FAST = 0.25

SIZE_ENVVAR = "SLIDEPUZZLE_SIZE"
SHUFFLES_ENVVAR = "SLIDEPUZZLE_SHUFFLES"

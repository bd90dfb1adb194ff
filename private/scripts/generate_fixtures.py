#!/usr/bin/env python3
"""Extend ``fixtures/scrambles.json`` with seeded random scrambles.

Run from the project root::

    python private/scripts/generate_fixtures.py

The checked-in file holds only the hand-picked regression boards; the
``rand_*`` entries exist only after running this script locally.  The
hand-picked boards are kept as they are.  Entries whose id starts with
``rand_`` are dropped and regenerated from ``SEED``, so running the
script twice yields the same file.

Every generated board comes from a blank walk away from the goal, so it
is solvable by construction; ``moves`` records the walk length.
The optimal solver's result can therefore never be longer than ``moves``.
"""

from __future__ import annotations

import json
import random
import sys
from pathlib import Path

# Resolve paths: this script lives in <project_root>/private/scripts/
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent.parent
PYTHON_ROOT = PROJECT_ROOT / "python"

if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

from slidepuzzle.engine.shuffle import ShuffleGenerator  # noqa: E402
from slidepuzzle.models.board import Board  # noqa: E402

FIXTURES_PATH = PROJECT_ROOT / "fixtures" / "scrambles.json"
SEED = 42
RANDOM_PREFIX = "rand_"

# (size, walk length) -> number of boards
RANDOM_BOARD_COUNTS: dict[tuple[int, int], int] = {
    (3, 12): 5,
    (3, 30): 5,
    (4, 8): 5,
    (4, 60): 5,
    (6, 200): 3,
}


# -- serialisation ------------------------------------------------------------


def _board_to_dict(board: Board, board_id: str, moves: int) -> dict:
    return {
        "id": board_id,
        "width": board.width,
        "height": board.height,
        "moves": moves,
        "tiles": board.tiles[:],
    }


def _dump(entries: list[dict]) -> str:
    # One board per line keeps diffs readable.
    lines = [json.dumps(e, separators=(",", ":")) for e in entries]
    return "[\n  " + ",\n  ".join(lines) + "\n]\n"


# -- generation ---------------------------------------------------------------


def _generate_random_boards(rng: random.Random, seen: set[tuple[int, ...]]) -> list[dict]:
    entries: list[dict] = []
    for (size, moves), count in RANDOM_BOARD_COUNTS.items():
        generated = 0
        while generated < count:
            board = ShuffleGenerator.scramble(size, size, moves, rng=rng)
            key = tuple(board.tiles)
            if board.is_solved() or key in seen:
                continue  # walked back to the goal or duplicate; regenerate
            assert board.is_solvable(), "Generated board failed solvability check"
            seen.add(key)
            board_id = f"{RANDOM_PREFIX}{size}x{size}_{moves:03d}_{generated:02d}"
            entries.append(_board_to_dict(board, board_id, moves))
            generated += 1
    return entries


# -- main ---------------------------------------------------------------------


def main() -> None:
    rng = random.Random(SEED)

    existing: list[dict] = []
    if FIXTURES_PATH.exists():
        with open(FIXTURES_PATH) as f:
            existing = json.load(f)
    kept = [e for e in existing if not e["id"].startswith(RANDOM_PREFIX)]
    seen = {tuple(e["tiles"]) for e in kept}
    print(f"Keeping {len(kept)} hand-picked boards")

    generated = _generate_random_boards(rng, seen)
    print(f"Generated {len(generated)} random boards")

    FIXTURES_PATH.parent.mkdir(parents=True, exist_ok=True)
    FIXTURES_PATH.write_text(_dump(kept + generated))
    print(f"  → {FIXTURES_PATH.name}  ({len(kept) + len(generated)} boards) ✓")


if __name__ == "__main__":
    main()

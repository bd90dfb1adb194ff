from slidepuzzle.engine.geometry.grid import (
    Coords,
    coords_from_index,
    goal_tiles,
    in_bounds,
    index_from_coords,
    index_from_row_col,
    is_adjacent,
    neighbor_coords,
    neighbors,
    row_col_from_index,
)

__all__ = [
    "Coords",
    "coords_from_index",
    "goal_tiles",
    "in_bounds",
    "index_from_coords",
    "index_from_row_col",
    "is_adjacent",
    "neighbor_coords",
    "neighbors",
    "row_col_from_index",
]

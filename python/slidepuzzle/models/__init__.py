from slidepuzzle.models.board import Board, Swap, is_solvable

__all__ = ["Board", "Swap", "is_solvable"]

from slidepuzzle.engine.solvers.divide_and_conquer import (
    DivideAndConquerSolver,
    SolverPhase,
)
from slidepuzzle.engine.solvers.optimal import find_optimal_swaps

__all__ = ["DivideAndConquerSolver", "SolverPhase", "find_optimal_swaps"]

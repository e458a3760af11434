from .errors import InvalidMatrixError, InvalidTourError, TooLargeError, TSPError
from .matrix import DistanceMatrix
from .base import TSPSolverBase, evaluate
from .permutations import PermutationEngine
from .brute_force import BruteForceSolver, best_tour, exact_search
from .held_karp import HeldKarpSolver, dp_table_bytes, held_karp, held_karp_tour
from .nn2opt import NearestNeighborSolver, NN2OptSolver, nearest_neighbor, two_opt

SOLVERS = {
    "brute_force": BruteForceSolver,
    "held_karp": HeldKarpSolver,
    "nn": NearestNeighborSolver,
    "nn2opt": NN2OptSolver,
}

__all__ = [
    "DistanceMatrix",
    "evaluate",
    "exact_search",
    "best_tour",
    "held_karp",
    "held_karp_tour",
    "dp_table_bytes",
    "nearest_neighbor",
    "two_opt",
    "PermutationEngine",
    "TSPSolverBase",
    "BruteForceSolver",
    "HeldKarpSolver",
    "NearestNeighborSolver",
    "NN2OptSolver",
    "SOLVERS",
    "TSPError",
    "InvalidMatrixError",
    "InvalidTourError",
    "TooLargeError",
]

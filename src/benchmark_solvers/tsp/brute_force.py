import logging
from typing import List, Optional, Tuple

from .base import TSPSolverBase, check_size, tour_cost
from .matrix import DistanceMatrix
from .permutations import PermutationEngine

logger = logging.getLogger(__name__)


def best_tour(matrix, max_size: Optional[int] = None) -> Tuple[List[int], int]:
    """
    Recherche exhaustive sur les (n-1)! tours qui commencent par la ville 0.

    En cas d'égalité, le premier tour dans l'ordre lexicographique est conservé.
    Complexité O(n! · n) : à réserver aux petites instances (n <= 10-12).
    """
    matrix = DistanceMatrix(matrix)
    n = matrix.size()
    check_size(n, max_size, "BruteForce")

    if n == 1:
        return [0], 0

    D = matrix.as_array().tolist()
    engine = PermutationEngine(n)
    logger.debug("Recherche exhaustive : n=%d, %d tours candidats", n, len(engine))

    best_route: Optional[Tuple[int, ...]] = None
    best_cost = None
    for candidate in engine:
        cost = tour_cost(D, candidate)
        if best_cost is None or cost < best_cost:
            best_route, best_cost = candidate, cost

    return list(best_route), best_cost


def exact_search(matrix, max_size: Optional[int] = None) -> int:
    """Coût minimal d'un tour fermé par recherche exhaustive."""
    return best_tour(matrix, max_size=max_size)[1]


class BruteForceSolver(TSPSolverBase):
    """
    Solveur exact par énumération de toutes les permutations.
    """

    def __init__(self, matrix, name: str = "BruteForce", max_size: Optional[int] = None):
        super().__init__(matrix, name=name, max_size=max_size)

    def solve(self) -> Tuple[List[int], int]:
        return best_tour(self.matrix, max_size=self.max_size)

import logging
import math
from typing import List, Optional, Sequence, Tuple

from .base import TSPSolverBase, tour_cost, validate_tour
from .matrix import DistanceMatrix

logger = logging.getLogger(__name__)


# ---------------------------------------------------------
# Construction initiale : Nearest Neighbor
# ---------------------------------------------------------
def nearest_neighbor(matrix) -> List[int]:
    """
    Part de la ville 0 et ajoute à chaque pas la ville non visitée la plus proche.

    Égalités : l'indice le plus petit l'emporte (balayage croissant, comparaison stricte).
    """
    matrix = DistanceMatrix(matrix)
    n = matrix.size()
    D = matrix.as_array().tolist()

    visited = [False] * n
    route = [0]
    visited[0] = True

    for _ in range(n - 1):
        last = route[-1]
        best = None
        best_cost = math.inf

        for j in range(n):
            if not visited[j] and D[last][j] < best_cost:
                best = j
                best_cost = D[last][j]

        route.append(best)
        visited[best] = True

    return route


# ---------------------------------------------------------
# 2-opt : variation de coût d'une inversion route[i..j]
# ---------------------------------------------------------
def _symmetric_delta(D, route: List[int], i: int, j: int) -> int:
    a, b = route[i - 1], route[i]
    c, d = route[j], route[(j + 1) % len(route)]
    return D[a][c] + D[b][d] - D[a][b] - D[c][d]


def _directed_delta(D, route: List[int], i: int, j: int) -> int:
    # matrice orientée : les arcs internes au segment changent aussi de sens
    delta = _symmetric_delta(D, route, i, j)
    for k in range(i, j):
        delta += D[route[k + 1]][route[k]] - D[route[k]][route[k + 1]]
    return delta


def two_opt(matrix, initial_tour: Sequence[int]) -> List[int]:
    """
    Améliore un tour par inversions de segments (2-opt), en première amélioration.

    - paires (i, j) avec 1 <= i < j < n : la position 0 ne bouge jamais
    - dès qu'une inversion diminue strictement le coût, elle est appliquée
      et le balayage repart de zéro
    - s'arrête quand un balayage complet ne trouve aucune amélioration
      (optimum local, pas global)

    Le coût final est toujours <= celui de `initial_tour`.
    """
    matrix = DistanceMatrix(matrix)
    route = validate_tour(matrix, initial_tour)
    n = len(route)
    D = matrix.as_array().tolist()
    delta = _symmetric_delta if matrix.is_symmetric else _directed_delta

    passes = 0
    improved = True
    while improved:
        improved = False
        passes += 1
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                if delta(D, route, i, j) < 0:
                    route[i:j + 1] = route[i:j + 1][::-1]
                    improved = True
                    break
            if improved:
                break

    logger.debug("2-opt : %d passes, coût final %d", passes, tour_cost(D, route))
    return route


# ---------------------------------------------------------
# Solveurs
# ---------------------------------------------------------
class NearestNeighborSolver(TSPSolverBase):
    """
    Solveur glouton seul, sans amélioration.
    """

    def __init__(self, matrix, name: str = "NN", max_size: Optional[int] = None):
        super().__init__(matrix, name=name, max_size=max_size)

    def solve(self) -> Tuple[List[int], int]:
        route = nearest_neighbor(self.matrix)
        return route, self.route_cost(route)


class NN2OptSolver(TSPSolverBase):
    """
    Solveur TSP : Nearest Neighbor + 2-opt
    """

    def __init__(self, matrix, name: str = "NN2Opt", max_size: Optional[int] = None):
        super().__init__(matrix, name=name, max_size=max_size)

    def solve(self) -> Tuple[List[int], int]:
        route = nearest_neighbor(self.matrix)
        route = two_opt(self.matrix, route)
        cost = self.route_cost(route)
        return route, cost

import operator
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidTourError, TooLargeError
from .matrix import DistanceMatrix


# ---------------------------------------------------------
# Coût d'un tour fermé
# ---------------------------------------------------------
def validate_tour(matrix, tour: Sequence[int]) -> List[int]:
    """
    Vérifie que `tour` est une permutation de 0..n-1 et la renvoie sous forme de liste.
    """
    n = DistanceMatrix(matrix).size()
    try:
        items = list(tour)
        # operator.index refuse 1.9 ou "1" au lieu de les tronquer / convertir
        route = [operator.index(c) for c in items]
    except TypeError:
        raise InvalidTourError(f"Le tour doit contenir des indices entiers : {tour!r}")
    if any(isinstance(c, bool) for c in items):
        raise InvalidTourError(f"Le tour contient des booléens : {tour!r}")

    if len(route) != n:
        raise InvalidTourError(f"Le tour doit contenir {n} villes, reçu {len(route)}.")
    if sorted(route) != list(range(n)):
        raise InvalidTourError(
            f"Le tour doit être une permutation de 0..{n - 1} (doublon ou indice hors bornes) : {route}"
        )
    return route


def tour_cost(D, route: Sequence[int]) -> int:
    """
    Coût d'un tour fermé, sans validation (boucles internes des solveurs).

    D peut être le tableau numpy ou sa version `tolist()`, plus rapide en Python pur.
    """
    total = 0
    prev = route[-1]
    for city in route:
        total += D[prev][city]
        prev = city
    return int(total)


def evaluate(matrix, tour: Sequence[int]) -> int:
    """
    Somme des arcs tour[k] -> tour[k+1], plus l'arc de retour tour[n-1] -> tour[0].
    """
    matrix = DistanceMatrix(matrix)
    route = validate_tour(matrix, tour)
    return tour_cost(matrix.as_array().tolist(), route)


def check_size(n: int, limit: Optional[int], solver: str) -> None:
    if limit is not None and n > limit:
        raise TooLargeError(solver, n, limit)


# ---------------------------------------------------------
# Interface solveur
# ---------------------------------------------------------
class TSPSolverBase(ABC):
    """
    Classe de base pour tous les solveurs TSP (tour fermé, ville 0 fixée en tête).
    """

    #: plafond de taille appliqué par défaut (None = pas de garde)
    max_size: Optional[int] = None

    def __init__(self, matrix, name: str = "BaseSolver", max_size: Optional[int] = None):
        self.matrix = DistanceMatrix(matrix)
        self.D = self.matrix.as_array()
        self.n = self.matrix.size()
        self.name = name
        if max_size is not None:
            self.max_size = max_size

    def route_cost(self, route: Sequence[int]) -> int:
        return evaluate(self.matrix, route)

    @abstractmethod
    def solve(self) -> Tuple[List[int], int]:
        """
        Chaque solveur renvoie (route, coût).
        """

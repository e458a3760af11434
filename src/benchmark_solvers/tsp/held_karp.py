import logging
from typing import List, Optional, Tuple

import numpy as np

from .base import TSPSolverBase, check_size
from .matrix import DistanceMatrix

logger = logging.getLogger(__name__)

# coût "non calculé" : distinct de tout coût atteignable, y compris 0
UNSET = np.iinfo(np.int64).max


def dp_table_bytes(n: int) -> int:
    """
    Mémoire occupée par la table (2**n × n entiers 64 bits).

    C'est la limite pratique de l'algorithme : n=20 donne déjà ~2·10**7 cases (~168 Mo),
    chaque ville supplémentaire double la taille.
    """
    return (1 << n) * n * np.dtype(np.int64).itemsize


# ---------------------------------------------------------
# Table dp[mask, last]
# ---------------------------------------------------------
def _fill_table(D: np.ndarray) -> np.ndarray:
    """
    dp[mask, last] = coût minimal d'un chemin partant de 0, visitant exactement
    les villes de `mask` et finissant en `last`.

    Les masques sont parcourus par valeur croissante : ajouter une ville augmente
    strictement le masque, donc tous les prédécesseurs sont déjà finalisés.
    """
    n = D.shape[0]
    full = 1 << n
    dp = np.full((full, n), UNSET, dtype=np.int64)
    dp[1, 0] = 0

    cities = np.arange(n)
    bits = np.ones(n, dtype=np.int64) << cities

    # seuls les masques impairs (ville 0 visitée) sont atteignables
    for mask in range(1, full, 2):
        row = dp[mask]
        reached = row != UNSET
        if not reached.any():
            continue
        free = cities[(mask & bits) == 0]
        if free.size == 0:
            continue

        # meilleur prédécesseur pour chaque ville suivante possible
        base = np.where(reached, row, 0)
        candidates = np.where(reached[:, None], base[:, None] + D[:, free], UNSET)
        best = candidates.min(axis=0)

        targets = mask | bits[free]
        dp[targets, free] = np.minimum(dp[targets, free], best)

    return dp


def _closing_costs(dp: np.ndarray, D: np.ndarray) -> np.ndarray:
    """Coût total pour chaque dernière ville 1..n-1, retour vers 0 inclus."""
    last_row = dp[-1, 1:]
    return np.where(last_row != UNSET, last_row + D[1:, 0], UNSET)


def held_karp(matrix, max_size: Optional[int] = None) -> int:
    """
    Coût minimal exact par programmation dynamique (Held-Karp).

    O(2**n · n²) en temps, O(2**n · n) en mémoire (voir `dp_table_bytes`).
    Aucun garde-fou sauf si `max_size` est fourni.
    """
    return held_karp_tour(matrix, max_size=max_size)[1]


def held_karp_tour(matrix, max_size: Optional[int] = None) -> Tuple[List[int], int]:
    """
    Même calcul que `held_karp`, puis reconstruction d'un tour optimal
    en remontant la table (sans table de parents).
    """
    matrix = DistanceMatrix(matrix)
    n = matrix.size()
    check_size(n, max_size, "HeldKarp")

    if n == 1:
        return [0], 0

    D = matrix.as_array()
    logger.debug("Held-Karp : n=%d, table de %d octets", n, dp_table_bytes(n))
    dp = _fill_table(D)

    totals = _closing_costs(dp, D)
    last = int(np.argmin(totals)) + 1
    cost = int(totals[last - 1])

    # remontée : un prédécesseur p vérifie dp[mask ^ last, p] + D[p, last] == dp[mask, last]
    route = [last]
    mask = (1 << n) - 1
    while last != 0:
        prev_mask = mask ^ (1 << last)
        target = dp[mask, last]
        for p in range(n):
            if not prev_mask & (1 << p) or dp[prev_mask, p] == UNSET:
                continue
            if dp[prev_mask, p] + D[p, last] == target:
                break
        else:
            raise RuntimeError("Table Held-Karp incohérente : aucun prédécesseur trouvé.")
        route.append(p)
        mask, last = prev_mask, p

    route.reverse()
    return route, cost


class HeldKarpSolver(TSPSolverBase):
    """
    Solveur exact Held-Karp : renvoie un tour optimal et son coût.
    """

    def __init__(self, matrix, name: str = "HeldKarp", max_size: Optional[int] = None):
        super().__init__(matrix, name=name, max_size=max_size)

    def solve(self) -> Tuple[List[int], int]:
        return held_karp_tour(self.matrix, max_size=self.max_size)

class TSPError(Exception):
    """Erreur de base pour tous les solveurs TSP."""


class InvalidMatrixError(TSPError, ValueError):
    """Matrice vide, non carrée, ou contenant une valeur négative / non entière."""


class InvalidTourError(TSPError, ValueError):
    """Séquence qui n'est pas une permutation de tous les indices de la matrice."""


class TooLargeError(TSPError, ValueError):
    """Instance trop grande pour un solveur exact (plafond dépassé)."""

    def __init__(self, solver: str, n: int, limit: int):
        super().__init__(
            f"{solver} : {n} villes dépasse le plafond autorisé ({limit})."
        )
        self.solver = solver
        self.n = n
        self.limit = limit

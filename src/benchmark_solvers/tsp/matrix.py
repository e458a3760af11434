from typing import Sequence, Union

import numpy as np

from .errors import InvalidMatrixError

COST_LIMIT = int(np.iinfo(np.int64).max)


class DistanceMatrix:
    """
    Matrice de coûts n×n, immuable.

    - coûts entiers, finis, non négatifs
    - orientée : cost(i, j) peut différer de cost(j, i)
    - la diagonale n'est pas forcément nulle
    """

    __slots__ = ("_D",)

    def __init__(self, grid: Union[Sequence[Sequence[int]], np.ndarray, "DistanceMatrix"]):
        if isinstance(grid, DistanceMatrix):
            self._D = grid._D
            return
        self._D = self._validate(grid)

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------
    @staticmethod
    def _validate(grid) -> np.ndarray:
        if isinstance(grid, np.ndarray):
            if grid.ndim != 2:
                raise InvalidMatrixError(f"La matrice doit être 2D, reçu {grid.ndim}D.")
            rows = list(grid)
        else:
            try:
                rows = [list(row) for row in grid]
            except TypeError:
                raise InvalidMatrixError("La matrice doit être une séquence de lignes.")

        n = len(rows)
        if n == 0:
            raise InvalidMatrixError("La matrice est vide.")
        for i, row in enumerate(rows):
            if len(row) != n:
                raise InvalidMatrixError(
                    f"La matrice doit être carrée : ligne {i} a {len(row)} valeurs, attendu {n}."
                )

        # les chaînes ("3") seraient converties silencieusement par dtype=float
        if np.asarray(rows).dtype.kind not in "biuf":
            raise InvalidMatrixError("La matrice contient des valeurs non numériques ou hors bornes.")
        raw = np.array(rows, dtype=float)

        if not np.all(np.isfinite(raw)):
            raise InvalidMatrixError("La matrice contient des NaN ou des valeurs infinies.")
        if np.any(raw != np.floor(raw)):
            raise InvalidMatrixError("La matrice doit contenir des entiers.")
        if np.any(raw < 0):
            raise InvalidMatrixError("La matrice contient des coûts négatifs.")

        # passage par int64 directement depuis les lignes : pas de perte au-delà de 2**53
        try:
            D = np.array(rows, dtype=np.int64)
        except (OverflowError, TypeError, ValueError):
            raise InvalidMatrixError("Coûts non représentables en entiers 64 bits.")
        # toute somme de n coûts (tour, case de la table Held-Karp) doit rester sous int64 max
        if n * int(D.max()) >= COST_LIMIT:
            raise InvalidMatrixError(
                f"Coûts trop grands : {n} × {int(D.max())} dépasse la capacité d'un entier 64 bits."
            )
        D.setflags(write=False)
        return D

    # ---------------------------------------------------------
    # Accès
    # ---------------------------------------------------------
    @property
    def n(self) -> int:
        return self._D.shape[0]

    def size(self) -> int:
        return self.n

    def __len__(self) -> int:
        return self.n

    def cost(self, i: int, j: int) -> int:
        return int(self._D[i, j])

    def as_array(self) -> np.ndarray:
        """Vue en lecture seule sur les coûts (int64)."""
        return self._D

    @property
    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._D, self._D.T))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return bool(np.array_equal(self._D, other._D))

    def __hash__(self) -> int:
        return hash(self._D.tobytes())

    def __repr__(self) -> str:
        return f"DistanceMatrix(n={self.n})"

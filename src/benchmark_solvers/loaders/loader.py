import json
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import numpy as np
import polars as pl

from benchmark_solvers.tsp import DistanceMatrix, InvalidMatrixError

INDEX_COLUMNS = ["osrm_index", "index", "Unnamed: 0", ""]


def load_matrix(path: Union[str, Path]) -> DistanceMatrix:
    """
    Charge une matrice de coûts (parquet, csv ou json) et retire la colonne d'index éventuelle.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return DistanceMatrix(json.load(f))

    if suffix == ".parquet":
        df = pl.read_parquet(path)
    elif suffix == ".csv":
        df = pl.read_csv(path)
    else:
        raise InvalidMatrixError(f"Format de matrice non supporté : {path.name}")

    # Supprimer colonne index si présente
    for col in INDEX_COLUMNS:
        if col in df.columns:
            df = df.drop(col)

    if df.null_count().sum_horizontal().item() > 0:
        raise InvalidMatrixError(f"Valeurs manquantes dans {path}")

    return DistanceMatrix(df.to_numpy())


def load_matrices(paths: Sequence[Union[str, Path]]) -> Dict[str, DistanceMatrix]:
    """Charge plusieurs matrices, indexées par nom de fichier (sans extension)."""
    return {Path(p).stem: load_matrix(p) for p in paths}


def random_matrix(
    n: int,
    low: int = 1,
    high: int = 100,
    symmetric: bool = True,
    seed: Optional[int] = None,
) -> DistanceMatrix:
    """
    Instance aléatoire reproductible : coûts entiers dans [low, high], diagonale nulle.
    """
    rng = np.random.default_rng(seed)
    D = rng.integers(low, high, size=(n, n), endpoint=True)
    if symmetric:
        D = np.triu(D, 1)
        D = D + D.T
    np.fill_diagonal(D, 0)
    return DistanceMatrix(D)

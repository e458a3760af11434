import pytest

from benchmark_solvers.loaders.loader import random_matrix
from benchmark_solvers.tsp import DistanceMatrix

SAMPLE = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


@pytest.fixture
def sample():
    return DistanceMatrix(SAMPLE)


@pytest.fixture(params=[(n, seed, sym) for n in range(1, 9) for seed in (1, 2) for sym in (True, False)],
                ids=lambda p: f"n{p[0]}-s{p[1]}-{'sym' if p[2] else 'dir'}")
def small_matrix(request):
    n, seed, symmetric = request.param
    return random_matrix(n, low=0, high=50, symmetric=symmetric, seed=seed)

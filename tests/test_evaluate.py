import numpy as np
import pytest

from benchmark_solvers.tsp import InvalidTourError, evaluate


def test_sample_tour_cost(sample):
    assert evaluate(sample, [0, 1, 3, 2]) == 80
    assert evaluate(sample, [0, 1, 2, 3]) == 95


def test_closing_edge_is_directed():
    m = [[0, 1, 100], [100, 0, 2], [3, 100, 0]]
    assert evaluate(m, [0, 1, 2]) == 6
    assert evaluate(m, [0, 2, 1]) == 300


@pytest.mark.parametrize("shift", range(4))
def test_rotation_invariant(sample, shift):
    tour = [0, 2, 1, 3]
    rotated = tour[shift:] + tour[:shift]
    assert evaluate(sample, rotated) == evaluate(sample, tour)


@pytest.mark.parametrize(
    "tour",
    [
        [0, 1, 2],
        [0, 1, 2, 3, 0],
        [0, 1, 1, 2],
        [0, 1, 2, 4],
        [0, 1, 2, -1],
        [],
        [0, 1.9, 3, 2],
        "0123",
        [0, True, 3, 2],
        [0, None, 3, 2],
    ],
)
def test_invalid_tours(sample, tour):
    with pytest.raises(InvalidTourError):
        evaluate(sample, tour)


def test_single_city():
    assert evaluate([[0]], [0]) == 0


def test_numpy_indices_accepted(sample):
    assert evaluate(sample, np.array([0, 1, 3, 2])) == 80

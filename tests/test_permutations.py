import math
from itertools import permutations

import pytest

from benchmark_solvers.tsp import PermutationEngine
from benchmark_solvers.tsp.permutations import next_permutation


@pytest.mark.parametrize("n", range(1, 8))
def test_count_and_distinct(n):
    tours = list(PermutationEngine(n))
    assert len(tours) == math.factorial(n - 1) == len(PermutationEngine(n))
    assert len(set(tours)) == len(tours)
    for tour in tours:
        assert tour[0] == 0
        assert sorted(tour) == list(range(n))


def test_lexicographic_order():
    tours = list(PermutationEngine(5))
    expected = [(0,) + p for p in permutations(range(1, 5))]
    assert tours == expected


def test_single_city():
    assert list(PermutationEngine(1)) == [(0,)]


def test_restartable():
    engine = PermutationEngine(4)
    assert list(engine) == list(engine)


def test_invalid_size():
    with pytest.raises(ValueError):
        PermutationEngine(0)


def test_next_permutation_in_place():
    seq = [1, 3, 2]
    assert next_permutation(seq)
    assert seq == [2, 1, 3]
    last = [3, 2, 1]
    assert not next_permutation(last)
    assert last == [3, 2, 1]


def test_next_permutation_with_fixed_prefix():
    seq = [0, 3, 2, 1]
    assert not next_permutation(seq, start=1)
    seq = [9, 1, 2]
    assert next_permutation(seq, start=1)
    assert seq == [9, 2, 1]

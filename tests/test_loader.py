import json

import numpy as np
import polars as pl
import pytest

from benchmark_solvers.loaders.loader import load_matrices, load_matrix, random_matrix
from benchmark_solvers.tsp import InvalidMatrixError


def _frame(grid, index=False):
    data = {str(j): [row[j] for row in grid] for j in range(len(grid))}
    if index:
        data = {"osrm_index": list(range(len(grid))), **data}
    return pl.DataFrame(data)


def test_load_parquet_with_index_column(tmp_path, sample):
    path = tmp_path / "sample.parquet"
    _frame(sample.as_array().tolist(), index=True).write_parquet(path)
    assert load_matrix(path) == sample


def test_load_csv(tmp_path, sample):
    path = tmp_path / "sample.csv"
    _frame(sample.as_array().tolist()).write_csv(path)
    assert load_matrix(path) == sample


def test_load_json(tmp_path, sample):
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(sample.as_array().tolist()), encoding="utf-8")
    assert load_matrix(path).cost(2, 3) == 30


def test_load_matrices_keyed_by_stem(tmp_path, sample):
    a = tmp_path / "a.json"
    b = tmp_path / "b.csv"
    a.write_text(json.dumps([[0, 1], [1, 0]]), encoding="utf-8")
    _frame(sample.as_array().tolist()).write_csv(b)
    matrices = load_matrices([a, b])
    assert list(matrices) == ["a", "b"]
    assert matrices["b"].size() == 4


def test_unsupported_or_invalid_files(tmp_path):
    txt = tmp_path / "m.txt"
    txt.write_text("0", encoding="utf-8")
    with pytest.raises(InvalidMatrixError):
        load_matrix(txt)

    neg = tmp_path / "neg.json"
    neg.write_text(json.dumps([[0, -1], [1, 0]]), encoding="utf-8")
    with pytest.raises(InvalidMatrixError):
        load_matrix(neg)

    rect = tmp_path / "rect.csv"
    pl.DataFrame({"0": [0, 1, 2], "1": [1, 0, 2]}).write_csv(rect)
    with pytest.raises(InvalidMatrixError):
        load_matrix(rect)


def test_random_matrix_is_reproducible():
    a = random_matrix(6, seed=42)
    b = random_matrix(6, seed=42)
    assert a == b
    assert a.is_symmetric
    assert np.all(np.diag(a.as_array()) == 0)
    assert a.as_array().min() >= 0


def test_random_asymmetric_matrix():
    m = random_matrix(6, low=1, high=1000, symmetric=False, seed=1)
    assert not m.is_symmetric
    off_diag = m.as_array()[~np.eye(6, dtype=bool)]
    assert off_diag.min() >= 1
    assert off_diag.max() <= 1000

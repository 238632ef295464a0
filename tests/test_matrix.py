import itertools

import flint
import numpy as np
import pytest

from latticetools.helpers.matrix import (
    adjugate,
    cofactor_normal,
    cross_product,
    determinant,
    dot,
    minor,
)
from latticetools.utils import gcd_list, integer_rank, integral_nullspace, primitive

MATRICES = [
    [[2, 0], [1, 3]],
    [[0, 1], [1, 0]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[0, 0, 1], [0, 2, 0], [3, 0, 0]],
    [[2, -1, 0, 3], [1, 0, 4, -2], [0, 5, 1, 1], [-3, 2, 2, 0]],
    [[10**20, 1], [3, 10**20]],
]


def test_dot_and_cross():
    assert dot([1, 2, 3], [4, 5, 6]) == 32
    assert cross_product([1, 0, 0], [0, 1, 0]) == (0, 0, 1)
    assert cross_product([1, -1, 0], [0, 0, -1]) == (1, 1, 0)

    with pytest.raises(ValueError):
        cross_product([1, 0], [0, 1])


def test_determinant():
    for M in MATRICES:
        assert determinant(M) == int(flint.fmpz_mat(M).det())
    assert determinant([[7]]) == 7
    assert determinant([]) == 1

    with pytest.raises(ValueError):
        determinant([[1, 2]])


def test_minor():
    assert minor([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 1, 2) == [[1, 2], [7, 8]]


def test_adjugate():
    assert adjugate([[2, 0], [1, 3]]) == [[3, 0], [-1, 2]]
    assert adjugate([[5]]) == [[1]]

    for M in MATRICES:
        n = len(M)
        prod = np.array(M, dtype=object) @ np.array(adjugate(M), dtype=object)
        det = determinant(M)
        expected = [[det if i == j else 0 for j in range(n)] for i in range(n)]
        assert prod.tolist() == expected


def test_cofactor_normal():
    assert cofactor_normal([[1, 0, 0], [0, 1, 0]]) == (0, 0, 1)

    vecs = [[1, 2, 0, -1], [0, 1, 1, 1], [2, 0, 3, 1]]
    n = cofactor_normal(vecs)
    assert any(n)
    assert all(dot(n, v) == 0 for v in vecs)

    # dependent vectors
    assert not any(cofactor_normal([[1, 1, 0], [2, 2, 0]]))

    with pytest.raises(ValueError):
        cofactor_normal([[1, 0, 0]])


def test_cofactor_normal_matches_cross_product():
    for u, v in itertools.product([[1, 2, 3], [0, -1, 4], [2, 2, 1]], repeat=2):
        assert cofactor_normal([u, v]) == cross_product(u, v)


def test_gcd_and_primitive():
    assert gcd_list([4, -6, 10]) == 2
    assert gcd_list([]) == 0
    assert primitive([2, 4], 6) == ((1, 2), 3)
    assert primitive([-3, 0], -9) == ((-1, 0), -3)
    assert primitive([0, 0], 5) == ((0, 0), 5)


def test_nullspace_and_rank():
    null = integral_nullspace([[2, 2]])
    assert len(null) == 1
    assert null[0] in [(-1, 1), (1, -1)]

    M = [[1, 0, 1, 0], [0, 1, 0, 1]]
    null = integral_nullspace(M)
    assert len(null) == 2
    assert all(dot(row, v) == 0 for row in M for v in null)
    assert integer_rank(null) == 2

    assert integer_rank([[1, 2], [2, 4]]) == 1
    assert integer_rank([]) == 0

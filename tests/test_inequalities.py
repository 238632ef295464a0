import numpy as np
import pytest

from latticetools import Domain, HalfSpace, config
from latticetools.inequalities import InequalitySystem, same_direction


def square(n=3):
    S = InequalitySystem(2)
    S.init_domain(Domain([0, 0], [n, n]))
    return S


def test_half_space():
    h = HalfSpace([1, 1], 2)
    assert h.contains([1, 1])
    assert not h.contains([2, 1])
    assert not HalfSpace([1, 1], 2, large=False).contains([1, 1])
    assert h.dimension() == 2
    assert tuple(h) == ((1, 1), 2, True)
    assert h == HalfSpace((1, 1), 2, True)
    assert h != HalfSpace((1, 1), 2, False)
    assert str(HalfSpace([1, 0], 3, False)) == "[1, 0].x < 3"


def test_same_direction():
    assert same_direction((1, 2), (2, 4))
    assert not same_direction((1, 2), (-1, -2))
    assert not same_direction((1, 2), (2, 3))
    assert not same_direction((0, 1), (0, 0))
    assert same_direction((0, 0), (0, 0))


def test_init_domain_order():
    S = square(3)
    assert S.A == [(1, 0), (-1, 0), (0, 1), (0, -1)]
    assert S.B == [3, 0, 3, 0]
    assert S.I == [True] * 4
    assert len(S) == 4

    with pytest.raises(ValueError):
        S.init_domain(Domain([0], [1]))


def test_cut_merge_tighter():
    S = square(3)
    assert S.cut([2, 0], 3) == 0
    # 2x <= 3 has the lattice points of x <= 1
    assert S.B[0] == 3 and S.A[0] == (2, 0)
    assert S.D == Domain([0, 0], [1, 3])


def test_cut_merge_looser():
    S = square(3)
    assert S.cut([1, 0], 5) == 0
    assert S.half_space(0) == HalfSpace([1, 0], 3)
    assert len(S) == 4


def test_cut_merge_equal_strictness():
    S = square(3)
    S.cut([1, 0], 3, False)
    assert S.I[0] is False
    S.cut([2, 0], 6, True)
    assert S.I[0] is False
    assert S.D == Domain([0, 0], [2, 3])


def test_cut_opposite_normal():
    S = square(3)
    assert S.cut([-1, 0], -2) == 1
    assert S.D == Domain([2, 0], [3, 3])


def test_cut_append():
    S = square(3)
    assert S.cut([1, 1], 2) == 4
    assert S.parallel_index([3, 3]) == 4
    assert S.parallel_index([1, 2]) is None
    assert S.D == Domain([0, 0], [3, 3])


def test_merge_requires_parallel():
    S = square(3)
    with pytest.raises(ValueError):
        S.merge(0, [0, 1], 2)
    with pytest.raises(ValueError):
        S.append([1, 0, 0], 2)


def test_normal_dimension_checked():
    S = square(3)
    with pytest.raises(ValueError):
        S.parallel_index([1])
    with pytest.raises(ValueError):
        S.cut([1], 1)
    with pytest.raises(ValueError):
        S.cut([1, 0, 0], 1)
    assert len(S) == 4


def test_never_satisfied():
    S = square(3)
    with pytest.warns(UserWarning):
        S.cut([0, 0], -1)
    assert S.D.is_empty()

    S = square(3)
    S.cut([0, 0], 0)
    assert not S.D.is_empty()


def test_dilate():
    S = square(1)
    S.cut([1, 1], 1)
    S.dilate(3)
    assert S.B == [3, 0, 3, 0, 3]
    assert S.D == Domain([0, 0], [3, 3])

    # 2x <= 1 rounds the domain to x <= 0, while 2x <= 3 admits x = 1
    S = InequalitySystem(1)
    S.init_domain(Domain([0], [5]))
    S.cut([2], 1)
    assert S.D == Domain([0], [0])
    S.dilate(3)
    assert S.B == [3, 0]
    assert S.D == Domain([0], [1])


def test_reset_domain():
    S = square(3)
    S.cut([1, 0], 2, False)
    S.cut([0, -1], -1)
    assert S.D == Domain([0, 1], [1, 3])

    # loosening the rows by hand, then rebuilding, grows the domain back
    S.I = [True] * len(S)
    S.reset_domain()
    assert S.D == Domain([0, 1], [2, 3])

    # rows off the axes leave the domain alone
    S = square(3)
    S.cut([1, 1], 2)
    S.reset_domain()
    assert S.D == Domain([0, 0], [3, 3])

    S = square(3)
    with pytest.warns(UserWarning):
        S.cut([0, 0], -1)
    with pytest.warns(UserWarning):
        S.reset_domain()
    assert S.D.is_empty()

    S = InequalitySystem(2)
    S.reset_domain()
    assert S.D is None


def test_sum_unit_segment():
    S = square(2)
    S.cut([1, 1], 2)
    S.sum_unit_segment(0)
    assert S.B == [3, 0, 2, 0, 3]
    assert S.I == [True] * 5
    assert S.D == Domain([0, 0], [3, 2])

    S = square(2)
    S.sum_unit_segment(1, right_strict=True)
    assert S.I == [True, True, False, True]
    assert S.D == Domain([0, 0], [2, 2])

    S = square(2)
    S.sum_unit_segment(1, left_strict=True)
    assert S.I == [True, True, True, False]
    assert S.D == Domain([0, 1], [2, 3])

    with pytest.raises(ValueError):
        S.sum_unit_segment(2)


def test_satisfies():
    S = square(2)
    S.cut([1, 1], 2, False)
    assert S.satisfies([0, 1])
    assert not S.satisfies([1, 1])
    # the domain is not consulted
    S2 = InequalitySystem(1)
    S2.append([1], 4)
    assert S2.satisfies([-100])


def test_scan_dtype_and_arrays():
    S = square(2)
    assert S.scan_dtype([0, 0], [2, 2]) is np.int64
    assert S.scan_dtype([0, 0], [2**62, 2]) is object

    config.enable_big_integers()
    try:
        assert S.scan_dtype([0, 0], [2, 2]) is object
    finally:
        config.disable_big_integers()

    A, B, large = S.arrays()
    assert A.shape == (4, 2)
    assert B.tolist() == [2, 0, 2, 0]
    assert large.dtype == bool


def test_copy_is_independent():
    S = square(2)
    T = S.copy()
    T.cut([1, 0], 1)
    assert S.B[0] == 2
    assert T.B[0] == 1

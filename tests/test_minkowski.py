import itertools

import pytest

from latticetools import (
    LatticePolytope,
    LeftStrictUnitCell,
    LeftStrictUnitSegment,
    RightStrictUnitCell,
    RightStrictUnitSegment,
    UnitCell,
    UnitSegment,
)


def triangle(n=2):
    return LatticePolytope([[0, 0], [n, 0], [0, n]])


def point_set(p):
    return set(map(tuple, p.points().tolist()))


def test_cells():
    assert repr(UnitSegment(1)) == "UnitSegment(1)"
    assert repr(UnitCell([0, 2])) == "UnitCell{02}"
    assert UnitCell([2, 0]) == UnitCell([0, 2])
    assert hash(UnitCell([2, 0])) == hash(UnitCell([0, 2]))
    assert UnitCell([0, 2]) != RightStrictUnitCell([0, 2])
    assert UnitSegment(0) != LeftStrictUnitSegment(0)
    assert UnitCell(1).segments() == [UnitSegment(1)]
    assert RightStrictUnitCell([0, 1]).segments() == [
        RightStrictUnitSegment(0),
        RightStrictUnitSegment(1),
    ]
    assert len(UnitCell()) == 0

    with pytest.raises(ValueError):
        UnitSegment(-1)
    with pytest.raises(ValueError):
        UnitCell([0, -2])


def test_sum_with_segment():
    p = triangle()
    q = p + UnitSegment(0)
    assert q.count() == 9
    assert q.is_inside([3, 0])
    assert q.is_inside([2, 1])
    assert not q.is_inside([3, 1])
    # the summand is unchanged
    assert p.count() == 6

    assert p.minkowski_sum(UnitSegment(1)).count() == 9


def test_sum_with_strict_segments():
    p = triangle()
    assert (p + RightStrictUnitSegment(0)).count() == 6
    assert point_set(p + RightStrictUnitSegment(0)) == point_set(p)

    q = p + LeftStrictUnitSegment(0)
    assert q.count() == 6
    assert point_set(q) == {(x + 1, y) for x, y in point_set(p)}


def test_sum_with_strict_cells():
    p = triangle()
    assert (p + RightStrictUnitCell([0, 1])).count() == 8

    q = p + LeftStrictUnitCell([0, 1])
    assert point_set(q) == {(x + 1, y + 1) for x, y in point_set(p)}


def test_in_place_sum():
    p = triangle()
    p += UnitSegment(0)
    assert p.count() == 9
    p += UnitCell()
    assert p.count() == 9


def test_repeated_axis():
    p = triangle() + UnitCell([0, 0])
    assert p.count() == 12


def test_sum_3d_unit_cell():
    p = LatticePolytope([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]])
    q = p + UnitCell([0, 1, 2])
    assert q.count() == 20

    # the sum is the union of the translated unit cubes
    expected = {
        tuple(a + b for a, b in zip(v, shift))
        for v in point_set(p)
        for shift in itertools.product([0, 1], repeat=3)
    }
    assert point_set(q) == expected


def test_cell_order_does_not_matter():
    p = LatticePolytope([[0, 0, 0], [2, 1, 0], [1, 3, 1], [1, 1, 4]])
    q1 = p + UnitCell([0, 1, 2])
    q2 = p + UnitCell([2, 0, 1])
    q3 = ((p + UnitSegment(1)) + UnitSegment(2)) + UnitSegment(0)
    assert point_set(q1) == point_set(q2) == point_set(q3)


def test_sum_then_dilate():
    p = (triangle() + UnitSegment(0)) * 2
    assert p.count() == 25


def test_bad_summands():
    p = triangle()
    with pytest.raises(ValueError):
        p + UnitSegment(2)
    with pytest.raises(ValueError):
        p + UnitCell([0, 5])
    with pytest.raises(ValueError):
        p + 1


def test_right_strict_keeps_bounds():
    p = LatticePolytope([[0, 0, 0], [2, 1, 0], [1, 3, 1], [1, 1, 4]])
    closed = (p + UnitCell([0, 2])).half_spaces()
    right = (p + RightStrictUnitCell([0, 2])).half_spaces()
    assert [h.bound for h in closed] == [h.bound for h in right]
    assert [h.normal for h in closed] == [h.normal for h in right]

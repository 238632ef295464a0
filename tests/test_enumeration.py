import numpy as np
import pytest

from latticetools import Domain, LatticePolytope, UnitCell, config


def triangle(n=2):
    return LatticePolytope([[0, 0], [n, 0], [0, n]])


def test_points_order():
    p = triangle()
    assert p.points().tolist() == [[0, 0], [1, 0], [2, 0], [0, 1], [1, 1], [0, 2]]
    assert p.get_points().tolist() == p.points().tolist()


def test_count_matches_brute_force():
    polytopes = [
        triangle(4),
        LatticePolytope([[0, 0, 0], [2, 1, 0], [1, 3, 1], [1, 1, 4]]),
        LatticePolytope([[-2, 1], [3, -1], [1, 4]]) + UnitCell([0, 1]),
    ]
    for p in polytopes:
        expected = [pt for pt in p.domain().points() if p.is_inside(pt)]
        assert p.count() == len(expected)
        assert set(map(tuple, p.points().tolist())) == set(expected)


def test_count_in():
    p = triangle()
    assert p.count_in([0, 0], [1, 1]) == 4
    assert p.count_in([1, 0], [5, 0]) == 2
    assert p.count_in([5, 5], [6, 6]) == 0


def test_count_up_to():
    p = triangle()
    assert p.count_up_to(3) == 3
    assert p.count_up_to(6) == 6
    assert p.count_up_to(100) == 6
    assert p.count_up_to(0) == 0

    with pytest.raises(ValueError):
        p.count_up_to(-1)


def test_insert_points():
    digital_set = set()
    p = triangle()
    p.insert_points(digital_set)
    assert len(digital_set) == 6
    # inserting twice adds nothing
    p.insert_points(digital_set)
    assert len(digital_set) == 6

    q = LatticePolytope([[2, 2], [0, 2], [2, 0]])
    q.insert_points(digital_set)
    assert digital_set == {(x, y) for x in range(3) for y in range(3)}


def test_one_dimensional():
    p = LatticePolytope([[-3], [2]])
    assert p.count() == 6
    assert p.points().tolist() == [[-3], [-2], [-1], [0], [1], [2]]


def test_empty_domain():
    p = LatticePolytope(domain=Domain([0, 0], [-1, 3]))
    assert p.count() == 0
    assert p.points().shape == (0, 2)
    assert p.count_up_to(5) == 0


def test_big_integers():
    config.enable_big_integers()
    try:
        p = triangle()
        assert p.count() == 6
        assert p.points().tolist() == triangle().points().tolist()
    finally:
        config.disable_big_integers()


def test_huge_coordinates():
    N = 10**20
    p = LatticePolytope([[N, 0], [N + 2, 0], [N, 2]])
    assert p.count() == 6
    pts = p.points()
    assert pts.dtype == object
    assert [N + 1, 1] in pts.tolist()
    assert p.is_inside([N + 1, 1])
    assert not p.is_inside([N + 2, 1])


def test_points_dtype():
    assert triangle().points().dtype == np.int64


def test_verbosity(capsys):
    triangle().count(verbosity=1)
    assert "Scanning" in capsys.readouterr().out

    LatticePolytope([[0, 0], [1, 0]], verbosity=1)
    assert "init_simplex" in capsys.readouterr().out


def test_count_up_to_is_capped_count():
    p = LatticePolytope([[0, 0, 0], [2, 1, 0], [1, 3, 1], [1, 1, 4]])
    n = p.count()
    for m in [0, 1, n - 1, n, n + 1, 10 * n]:
        assert p.count_up_to(m) == min(n, m)
    assert len(p.points()) == n

import itertools

import ppl
import pytest

from latticetools import (
    Domain,
    HalfSpace,
    LatticePolytope,
    UnitCell,
    UnitSegment,
    UnsupportedDimensionError,
    from_half_spaces,
)
from latticetools.edge_constraints import (
    EdgeConstraints3D,
    PlanarEdgeConstraints,
    UnsupportedEdgeConstraints,
    edge_constraints_for,
)


def point_set(p):
    return set(map(tuple, p.points().tolist()))


def exact_sum_points(vertices, axes):
    # lattice points of conv(vertices) + cell, computed from the V-representation
    dim = len(vertices[0])
    vrs = [ppl.Variable(i) for i in range(dim)]
    poly = ppl.C_Polyhedron(dim, "empty")
    shifted = []
    for v in vertices:
        for shift in itertools.product([0, 1], repeat=len(axes)):
            w = list(v)
            for k, s in zip(axes, shift):
                w[k] += s
            shifted.append(w)
            poly.add_generator(
                ppl.point(sum((c * x for c, x in zip(w, vrs)), ppl.Linear_Expression()))
            )

    half_spaces = []
    for cons in poly.minimized_constraints():
        a = [-int(c) for c in cons.coefficients()]
        a += [0] * (dim - len(a))
        b = int(cons.inhomogeneous_term())
        half_spaces.append(HalfSpace(a, b))
        if cons.is_equality():
            half_spaces.append(HalfSpace([-c for c in a], -b))

    q = from_half_spaces(half_spaces, domain=Domain.bounding_box(shifted))
    return point_set(q)


def test_providers():
    assert isinstance(edge_constraints_for(1), PlanarEdgeConstraints)
    assert isinstance(edge_constraints_for(2), PlanarEdgeConstraints)
    assert isinstance(edge_constraints_for(3), EdgeConstraints3D)
    assert isinstance(edge_constraints_for(4), UnsupportedEdgeConstraints)
    assert edge_constraints_for(3).supported
    assert not edge_constraints_for(5).supported

    with pytest.raises(ValueError):
        edge_constraints_for(0)


def test_edge_constraints_3d():
    pts = [[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]]
    p = LatticePolytope(pts)
    p_bare = LatticePolytope(pts, edge_constraints=False)
    assert p.nb_half_spaces() > p_bare.nb_half_spaces()
    # edge constraints never remove points of the simplex
    assert point_set(p) == point_set(p_bare)

    # x + y <= 1 supports the edge from e_0 to e_1
    assert HalfSpace([1, 1, 0], 1) in p.half_spaces()

    assert (p + UnitCell([0, 1, 2])).count() == 20
    assert (p_bare + UnitCell([0, 1, 2])).count() == 23


@pytest.mark.parametrize(
    "vertices",
    [
        [[0, 0, 0], [2, 1, 0], [1, 3, 1], [1, 1, 4]],
        [[1, 0, 0], [0, 2, 0], [0, 0, 3], [2, 2, 2]],
        [[0, 0, 0], [3, 1, 1], [1, 0, 2]],
        [[0, 0, 0], [1, 2, 3]],
    ],
)
def test_exact_sums_3d(vertices):
    p = LatticePolytope(vertices)
    for axes in [[0], [1, 2], [0, 1, 2]]:
        assert point_set(p + UnitCell(axes)) == exact_sum_points(vertices, axes)


def test_dimension_4():
    pts = [[0, 0, 0, 0], [1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]]
    with pytest.raises(UnsupportedDimensionError):
        LatticePolytope(pts)
    with pytest.raises(UnsupportedDimensionError):
        LatticePolytope([[0, 0, 0, 0]])
    with pytest.raises(NotImplementedError):
        LatticePolytope(pts[:2])

    p = LatticePolytope(pts, edge_constraints=False)
    assert p.count() == 5

    # without edge constraints the sum may only gain points
    q = p + UnitSegment(0)
    translates = {
        (x + s, y, z, w) for x, y, z, w in point_set(p) for s in (0, 1)
    }
    assert translates <= point_set(q)

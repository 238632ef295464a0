# =============================================================================
# This file is part of latticetools.
#
# latticetools is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.
#
# latticetools is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# latticetools. If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
#
# -----------------------------------------------------------------------------
# Description:  This module contains the edge-constraint providers used when a
#               LatticePolytope is built from a simplex.
#
#               The Minkowski sum of a polytope with a unit segment along e_k
#               has, besides the (translated) facets of the polytope, facets
#               spanned by e_k and a (d-2)-face of the polytope. Bound-shifting
#               in `InequalitySystem.sum_unit_segment` only produces the sum
#               exactly if the normals of those facets are already present.
#               Providers add them, dimension by dimension.
# -----------------------------------------------------------------------------

# latticetools imports
from latticetools.errors import UnsupportedDimensionError
from latticetools.helpers.matrix import cross_product, dot
from latticetools.utils import primitive

# typing
from numpy.typing import ArrayLike


class EdgeConstraints:
    """
    Base class of the edge-constraint providers. `supported` tells whether
    the provider can make Minkowski sums with unit cells exact.
    """

    supported = True

    def __init__(self, dim: int) -> None:
        self.dim = int(dim)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dim={self.dim})"

    def add_edge_constraint(
        self, polytope: "LatticePolytope", i: int, j: int, points: ArrayLike
    ) -> None:
        raise NotImplementedError

    def add_edge_constraints(
        self, polytope: "LatticePolytope", points: ArrayLike
    ) -> None:
        """
        **Description:**
        Calls `add_edge_constraint` on every edge (i,j), i<j, of the simplex.

        **Arguments:**
        - `polytope`: The polytope under construction. It is cut in place.
        - `points`: The vertices of the simplex.

        **Returns:**
        Nothing.
        """
        for i in range(len(points)):
            for j in range(i + 1, len(points)):
                self.add_edge_constraint(polytope, i, j, points)


class PlanarEdgeConstraints(EdgeConstraints):
    """
    Provider for dimensions 1 and 2. There, the new facets of a sum with e_k
    are parallel to e_k, so their normals are axis-aligned and already present
    as domain inequalities. Nothing needs to be added.
    """

    def add_edge_constraint(
        self, polytope: "LatticePolytope", i: int, j: int, points: ArrayLike
    ) -> None:
        return None


class EdgeConstraints3D(EdgeConstraints):
    """
    Provider for dimension 3, where the new facets of a sum with e_k are
    spanned by e_k and an edge of the polytope.
    """

    def add_edge_constraint(
        self, polytope: "LatticePolytope", i: int, j: int, points: ArrayLike
    ) -> None:
        """
        **Description:**
        Adds the half-spaces bounded by the plane through the edge (i,j) and
        parallel to an axis, whenever that plane supports the simplex. For
        each axis k and each sign, the normal is n = (p_i - p_j) x (+-e_k).
        The plane n.x = n.p_i supports the simplex iff every vertex other
        than p_i and p_j lies strictly below it.

        **Arguments:**
        - `polytope`: The polytope under construction. It is cut in place.
        - `i`: The index of one end of the edge.
        - `j`: The index of the other end.
        - `points`: The vertices of the simplex.

        **Returns:**
        Nothing.
        """
        ab = [int(a) - int(b) for a, b in zip(points[i], points[j])]
        nb_needed = len(points) - 2

        for s in (1, -1):
            for k in range(3):
                e = [0, 0, 0]
                e[k] = s
                n = cross_product(ab, e)
                if not any(n):
                    # edge parallel to the axis
                    continue

                b = dot(n, points[i])
                nb_in = sum(1 for p in points if dot(n, p) < b)
                if nb_in == nb_needed:
                    polytope.cut(*primitive(n, b), True)


class UnsupportedEdgeConstraints(EdgeConstraints):
    """
    Provider for dimensions 4 and above. Edge constraints are not enough there
    (faces of every dimension up to d-2 would be needed) and no provider is
    implemented, so any request raises `UnsupportedDimensionError`.
    """

    supported = False

    def _error(self) -> UnsupportedDimensionError:
        return UnsupportedDimensionError(
            f"Edge constraints are not implemented in dimension {self.dim}. "
            + "Pass edge_constraints=False to build the polytope without them; "
            + "its Minkowski sums with unit cells may then be larger than "
            + "the true sums."
        )

    def add_edge_constraint(
        self, polytope: "LatticePolytope", i: int, j: int, points: ArrayLike
    ) -> None:
        raise self._error()

    def add_edge_constraints(
        self, polytope: "LatticePolytope", points: ArrayLike
    ) -> None:
        # also raise for simplices without edges
        raise self._error()


def edge_constraints_for(dim: int) -> EdgeConstraints:
    """
    **Description:**
    Returns the edge-constraint provider for the given dimension.

    **Arguments:**
    - `dim`: The ambient dimension.

    **Returns:**
    A `PlanarEdgeConstraints` for dim <= 2, an `EdgeConstraints3D` for
    dim == 3, and an `UnsupportedEdgeConstraints` otherwise.

    **Example:**
    ```python {2}
    from latticetools.edge_constraints import edge_constraints_for
    edge_constraints_for(4).supported
    # False
    ```
    """
    if dim <= 0:
        raise ValueError(f"Dimension must be positive, but {dim} was given...")
    if dim <= 2:
        return PlanarEdgeConstraints(dim)
    if dim == 3:
        return EdgeConstraints3D(dim)
    return UnsupportedEdgeConstraints(dim)

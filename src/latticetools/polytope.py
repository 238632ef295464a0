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
# Description:  This module contains tools designed to perform computations on
#               bounded lattice polytopes given by their H-representation.
# -----------------------------------------------------------------------------

# 'standard' imports
import itertools

# 3rd party imports
import numpy as np
from numpy.typing import ArrayLike
import ppl

# latticetools imports
from latticetools.cells import UnitCell, UnitSegment
from latticetools.domain import Domain
from latticetools.edge_constraints import edge_constraints_for
from latticetools.errors import (
    DegenerateSimplexError,
    InvalidPolytopeError,
    NonPositiveDilationError,
    PointNotInDomainError,
)
from latticetools.helpers.matrix import adjugate, cofactor_normal, determinant, dot
from latticetools.inequalities import HalfSpace, InequalitySystem
from latticetools.utils import (
    ceil_div,
    instanced_lru_cache,
    integer_rank,
    integral_nullspace,
    primitive,
)


class LatticePolytope:
    """
    This class handles computations on bounded lattice polytopes described as
    an intersection of half-spaces a.x <= b (or a.x < b) with integer data.
    Alongside the inequalities, a bounding domain enclosing the polytope is
    maintained, which keeps every enumeration of lattice points finite.

    ## Constructor

    ### `latticetools.polytope.LatticePolytope`

    **Description:**
    Constructs a `LatticePolytope` object. This is handled by the hidden
    [`__init__`](#__init__) function.

    :::note notes
    - A polytope constructed without arguments is invalid until one of
        [`init_simplex`](#init_simplex) or [`init_domain`](#init_domain) is
        called.
    - To build a polytope from half-spaces without a domain, use
        [`from_half_spaces`](#from_half_spaces) or
        [`from_inequalities`](#from_inequalities).
    :::

    **Arguments:**
    - `points`: The vertices of a simplex (at most d+1 affinely independent
        lattice points in dimension d). The polytope is their convex hull.
    - `domain`: A bounding `Domain`. The polytope is its intersection with
        the half-spaces.
    - `half_spaces`: The half-spaces cut into the domain.
    - `edge_constraints`: Whether to add the edge constraints that make
        Minkowski sums with unit cells exact. See
        [`init_simplex`](#init_simplex).
    - `verbosity`: The verbosity level.

    **Example:**
    We construct a triangle and count its lattice points.
    ```python {2,3}
    from latticetools import LatticePolytope
    p = LatticePolytope([[0, 0], [2, 0], [0, 2]])
    p.count()
    # 6
    ```
    """

    def __init__(
        self,
        points: ArrayLike = None,
        domain: Domain = None,
        half_spaces: "list[HalfSpace]" = None,
        edge_constraints: bool = True,
        verbosity: int = 0,
    ) -> None:
        """
        **Description:**
        Initializes a `LatticePolytope` object.

        **Arguments:**
        - `points`: The vertices of a simplex.
        - `domain`: A bounding `Domain`.
        - `half_spaces`: The half-spaces cut into the domain.
        - `edge_constraints`: Whether to add edge constraints to a simplex.
        - `verbosity`: The verbosity level.

        **Returns:**
        Nothing.
        """
        self._system = None
        self.clear_cache()

        if points is not None:
            if domain is not None or half_spaces is not None:
                raise ValueError(
                    "Give either the points of a simplex or a domain with "
                    + "half-spaces, not both..."
                )
            self.init_simplex(
                points, edge_constraints=edge_constraints, verbosity=verbosity
            )
        elif domain is not None:
            self.init_domain(
                domain,
                [] if half_spaces is None else half_spaces,
                verbosity=verbosity,
            )
        elif half_spaces is not None:
            raise ValueError(
                "Half-spaces need a bounding domain. "
                + "Use from_half_spaces to compute one..."
            )

    # defaults
    # ========
    def __repr__(self) -> str:
        if not self.is_valid():
            return "LatticePolytope()"
        return (
            f"LatticePolytope(domain={self.domain()!r}, "
            f"half_spaces={self.half_spaces()!r})"
        )

    def __str__(self) -> str:
        """
        **Description:**
        Returns a human-readable string describing the polytope.

        **Arguments:**
        None.

        **Returns:**
        A string describing the polytope.

        **Example:**
        ```python {2}
        p = LatticePolytope([[0, 0], [2, 0], [0, 2]])
        print(p)
        # A bounded lattice polytope in ZZ^2 defined by 5 half-spaces
        ```
        """
        if not self.is_valid():
            return "An uninitialized bounded lattice polytope"
        return (
            f"A bounded lattice polytope in ZZ^{self.ambient_dim()} "
            f"defined by {self.nb_half_spaces()} half-spaces"
        )

    def __getstate__(self):
        state = self.__dict__.copy()
        # delete instanced_lru_cache since it doesn't play nicely with pickle
        state["_cache"] = None
        return state

    def __setstate__(self, state: dict):
        self.__dict__.update(state)
        self._cache = {}

    def __copy__(self) -> "LatticePolytope":
        return self.copy()

    def copy(self) -> "LatticePolytope":
        """
        **Description:**
        Returns an independent copy of the polytope.

        **Arguments:**
        None.

        **Returns:**
        The copy.
        """
        other = LatticePolytope()
        if self._system is not None:
            other._system = self._system.copy()
        return other

    # caching
    # =======
    def clear_cache(self) -> None:
        """
        **Description:**
        Clears the cached results of any previous computation. Called by every
        method that modifies the polytope.

        **Arguments:**
        None.

        **Returns:**
        Nothing.
        """
        self._cache = {}

    # lifecycle
    # =========
    def is_valid(self) -> bool:
        """
        **Description:**
        Checks whether the polytope was initialized. Default-constructed
        polytopes are invalid.

        **Arguments:**
        None.

        **Returns:**
        True iff the polytope can be queried.
        """
        return self._system is not None

    def _check_valid(self) -> None:
        if self._system is None:
            raise InvalidPolytopeError(
                "This polytope was never initialized. "
                + "Call init_simplex or init_domain first..."
            )

    def class_name(self) -> str:
        return "LatticePolytope"

    def clear(self) -> None:
        """
        **Description:**
        Removes every inequality. The polytope becomes invalid.

        **Arguments:**
        None.

        **Returns:**
        Nothing.
        """
        self._system = None
        self.clear_cache()

    def swap(self, other: "LatticePolytope") -> None:
        """
        **Description:**
        Exchanges the contents of two polytopes in constant time.

        **Arguments:**
        - `other`: The other polytope.

        **Returns:**
        Nothing.
        """
        self._system, other._system = other._system, self._system
        self.clear_cache()
        other.clear_cache()

    # getters
    # =======
    def ambient_dimension(self) -> int:
        """
        **Description:**
        Returns the dimension of the lattice the polytope lives in.

        **Arguments:**
        None.

        **Returns:**
        The ambient dimension.
        """
        self._check_valid()
        return self._system.dimension()

    # aliases
    ambient_dim = ambient_dimension

    def domain(self) -> Domain:
        """
        **Description:**
        Returns the bounding domain of the polytope. Every lattice point of
        the polytope lies in it, but it need not be tight.

        **Arguments:**
        None.

        **Returns:**
        The bounding `Domain`.
        """
        self._check_valid()
        return self._system.D

    def nb_half_spaces(self) -> int:
        self._check_valid()
        return len(self._system)

    def half_space(self, i: int) -> HalfSpace:
        """
        **Description:**
        Returns the i-th defining half-space. Indices follow insertion order
        and are the ones returned by [`cut`](#cut).

        **Arguments:**
        - `i`: The index.

        **Returns:**
        The `HalfSpace`.
        """
        self._check_valid()
        return self._system.half_space(i)

    def half_spaces(self) -> "list[HalfSpace]":
        self._check_valid()
        return self._system.half_spaces()

    def inequalities(self) -> np.ndarray:
        """
        **Description:**
        Returns the defining inequalities as a matrix whose rows c encode
            c[0]*x_0 + ... + c[d-1]*x_{d-1} + c[d] >= 0.
        A strict inequality a.x < b is exported as a.x <= b-1, which has the
        same lattice points.

        **Arguments:**
        None.

        **Returns:**
        The inequality matrix.

        **Example:**
        ```python {2}
        p = LatticePolytope([[0, 0], [2, 0], [0, 2]])
        p.inequalities()[-1]
        # array([-1, -1,  2])
        ```
        """
        self._check_valid()
        rows = [
            [-c for c in a] + [b if large else b - 1]
            for a, b, large in zip(self._system.A, self._system.B, self._system.I)
        ]
        D = self._system.D
        dtype = self._system.scan_dtype(D.lower_bound(), D.upper_bound())
        return np.array(rows, dtype=dtype).reshape(len(rows), self.ambient_dim() + 1)

    # initialization
    # ==============
    def init_domain(
        self,
        domain: Domain,
        half_spaces: "list[HalfSpace]",
        verbosity: int = 0,
    ) -> None:
        """
        **Description:**
        Initializes the polytope as the intersection of a domain and a
        sequence of half-spaces. The domain contributes 2*d inequalities,
        e_s.x <= upper[s] then -e_s.x <= -lower[s] for each axis s, after
        which every half-space is [`cut`](#cut) in order.

        **Arguments:**
        - `domain`: The bounding domain.
        - `half_spaces`: The half-spaces. Each is a `HalfSpace`, or a
            `(normal, bound)` or `(normal, bound, large)` tuple.
        - `verbosity`: The verbosity level.

        **Returns:**
        Nothing.

        **Example:**
        ```python {3}
        from latticetools import Domain, HalfSpace, LatticePolytope
        p = LatticePolytope()
        p.init_domain(Domain([0, 0], [3, 3]), [HalfSpace([1, 0], 1)])
        p.count()
        # 8
        ```
        """
        system = InequalitySystem(domain.dimension())
        system.init_domain(domain)
        for h in half_spaces:
            system.cut(*_as_half_space(h))

        if verbosity >= 1:
            print(
                f"init_domain: {len(system)} inequalities, "
                + f"bounding domain {system.D}..."
            )

        self._system = system
        self.clear_cache()

    def init_simplex(
        self,
        points: ArrayLike,
        edge_constraints: bool = True,
        verbosity: int = 0,
    ) -> None:
        """
        **Description:**
        Initializes the polytope as the convex hull of a simplex.

        The inequalities are, in order, the 2*d inequalities of the bounding
        box of the points, one facet inequality per vertex (the facet not
        containing it), and the edge constraints. Facet inequalities are
        derived exactly: for a full simplex from the adjugate of the matrix of
        edge vectors, which gives its barycentric coordinates, and for a
        lower-dimensional one from an integral basis of the orthogonal
        complement of its affine hull.

        Edge constraints are extra supporting half-spaces that make later
        Minkowski sums with unit cells exact. They are only needed from
        dimension 3 on, and only implemented in dimension 3. In dimension 4
        and above, `edge_constraints=True` raises
        `UnsupportedDimensionError`. Pass `edge_constraints=False` to accept
        Minkowski sums that may contain extra points.

        **Arguments:**
        - `points`: Between 1 and d+1 affinely independent lattice points in
            dimension d.
        - `edge_constraints`: Whether to add edge constraints.
        - `verbosity`: The verbosity level.

        **Returns:**
        Nothing.
        """
        pts = [tuple(int(c) for c in pt) for pt in points]

        # input checking
        # --------------
        if len(pts) == 0:
            raise ValueError("A simplex needs at least one point...")
        dim = len(pts[0])
        if dim == 0 or any(len(pt) != dim for pt in pts):
            raise ValueError(
                f"Points must all have the same positive dimension, "
                + f"but their dimensions are {[len(pt) for pt in pts]}..."
            )
        if len(pts) > dim + 1:
            raise ValueError(
                f"A simplex in dimension {dim} has at most {dim+1} vertices, "
                + f"but {len(pts)} points were given..."
            )

        E = [[a - b for a, b in zip(pt, pts[0])] for pt in pts[1:]]
        if integer_rank(E) < len(E):
            raise DegenerateSimplexError(
                f"Points {[list(pt) for pt in pts]} are affinely dependent..."
            )

        provider = edge_constraints_for(dim)

        # build the inequalities
        # ----------------------
        system = InequalitySystem(dim)
        system.init_domain(Domain.bounding_box(pts))

        if len(pts) == dim + 1:
            facets = _full_simplex_facets(pts)
        else:
            facets = _lower_dimensional_simplex_facets(pts)
        for a, b in facets:
            system.cut(a, b, True)

        if edge_constraints:
            provider.add_edge_constraints(system, pts)

        if verbosity >= 1:
            print(
                f"init_simplex: {len(pts)} vertices in dimension {dim}, "
                + f"{len(system)} inequalities..."
            )

        self._system = system
        self.clear_cache()

    # modification
    # ============
    def parallel_index(self, a: ArrayLike) -> "int | None":
        """
        **Description:**
        Finds a defining inequality whose normal is a positive multiple of a.

        **Arguments:**
        - `a`: The normal.

        **Returns:**
        Its index, or None if there is none.
        """
        self._check_valid()
        return self._system.parallel_index(a)

    def cut(self, a: ArrayLike, b: int, large: bool = True) -> int:
        """
        **Description:**
        Cuts the polytope by the half-space a.x <= b, or a.x < b if `large`
        is False.

        If an inequality with a parallel normal already exists (found by
        [`parallel_index`](#parallel_index)), the two are merged and the more
        restrictive bound is kept. Otherwise the inequality is appended.
        Axis-aligned inequalities also shrink the bounding domain.

        Complexity is linear in the number of inequalities.

        **Arguments:**
        - `a`: Any integer vector.
        - `b`: Any integer.
        - `large`: Whether the inequality is large (True) or strict (False).

        **Returns:**
        The index of the inequality in the polytope.

        **Example:**
        ```python {3}
        from latticetools import Domain, LatticePolytope
        p = LatticePolytope(domain=Domain([0, 0], [3, 3]))
        p.cut([1, 0], 1)
        # 0
        p.count()
        # 8
        ```
        """
        self._check_valid()
        if len(a) != self.ambient_dim():
            raise ValueError(
                f"Normal {list(a)} has dimension {len(a)} but the polytope "
                + f"has dimension {self.ambient_dim()}..."
            )

        i = self._system.cut(a, b, large)
        self.clear_cache()
        return i

    def dilate(self, t: int) -> "LatticePolytope":
        """
        **Description:**
        Dilates the polytope P into tP, in place. All bounds are multiplied by
        t, the normals are unchanged, and the domain is rebuilt from the
        axis-aligned inequalities.

        **Arguments:**
        - `t`: A positive integer.

        **Returns:**
        The polytope itself.

        **Example:**
        ```python {3}
        p = LatticePolytope([[0, 0], [1, 0], [0, 1]])
        p.dilate(3)
        p.count()
        # 10
        ```
        """
        self._check_valid()
        if int(t) != t:
            raise ValueError(f"Dilation factor must be an integer, but {t} was given...")
        if t <= 0:
            raise NonPositiveDilationError(
                f"Dilation factor must be positive, but {t} was given..."
            )

        self._system.dilate(int(t))
        self.clear_cache()
        return self

    def __imul__(self, t: int) -> "LatticePolytope":
        return self.dilate(t)

    def __mul__(self, t: int) -> "LatticePolytope":
        return self.copy().dilate(t)

    __rmul__ = __mul__

    def _sum_segment(self, s: UnitSegment) -> None:
        if s.k >= self.ambient_dim():
            raise ValueError(
                f"Axis {s.k} is out of range for dimension {self.ambient_dim()}..."
            )
        self._system.sum_unit_segment(
            s.k, right_strict=s.right_strict, left_strict=s.left_strict
        )

    def __iadd__(self, s: "UnitSegment | UnitCell") -> "LatticePolytope":
        """
        **Description:**
        Minkowski sum of the polytope with an axis-aligned unit segment or unit
        cell, in place. Inequalities whose normal has a positive entry a_k
        along the axis k of the segment move by a_k. For a right-strict
        segment those become strict, and for a left-strict segment the ones
        with a negative entry become strict.

        The sum is exact when the polytope holds every facet normal of the
        sum, which is the case for simplices built with edge constraints in
        dimension at most 3. Otherwise the result contains the sum.

        **Arguments:**
        - `s`: A `UnitSegment`, `RightStrictUnitSegment`,
            `LeftStrictUnitSegment`, or one of the matching cells.

        **Returns:**
        The polytope itself.
        """
        self._check_valid()
        if isinstance(s, UnitSegment):
            self._sum_segment(s)
        elif isinstance(s, UnitCell):
            for seg in s.segments():
                self._sum_segment(seg)
        else:
            raise ValueError(
                f"Can only add unit segments and unit cells, not {type(s)}..."
            )

        self.clear_cache()
        return self

    def __add__(self, s: "UnitSegment | UnitCell") -> "LatticePolytope":
        out = self.copy()
        out += s
        return out

    def minkowski_sum(self, s: "UnitSegment | UnitCell") -> "LatticePolytope":
        """
        **Description:**
        Returns the Minkowski sum of the polytope with a unit segment or unit
        cell. The polytope itself is not modified. See
        [`__iadd__`](#__iadd__).

        **Arguments:**
        - `s`: The unit segment or cell.

        **Returns:**
        The Minkowski sum.

        **Example:**
        ```python {3}
        from latticetools import LatticePolytope, UnitCell
        p = LatticePolytope([[0, 0, 0], [1, 0, 0], [0, 1, 0], [0, 0, 1]])
        p.minkowski_sum(UnitCell([0, 1, 2])).count()
        # 20
        ```
        """
        return self + s

    def interior_polytope(self) -> "LatticePolytope":
        """
        **Description:**
        Returns the polytope in which every inequality is made strict.

        **Arguments:**
        None.

        **Returns:**
        The interior polytope.
        """
        self._check_valid()
        out = self.copy()
        out._system.I = [False] * len(out._system)
        out._system.reset_domain()
        return out

    def closure_polytope(self) -> "LatticePolytope":
        """
        **Description:**
        Returns the polytope in which every inequality is made large.

        **Arguments:**
        None.

        **Returns:**
        The closed polytope.
        """
        self._check_valid()
        out = self.copy()
        out._system.I = [True] * len(out._system)
        out._system.reset_domain()
        return out

    # point checks
    # ============
    def is_inside(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point lies in the polytope.

        **Arguments:**
        - `p`: Any point of the lattice.

        **Returns:**
        True iff p lies in the bounding domain and satisfies every
        inequality.
        """
        self._check_valid()
        return self._system.D.is_inside(p) and self._system.satisfies(p)

    def is_domain_point_inside(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point of the bounding domain lies in the polytope.

        **Arguments:**
        - `p`: A point of the bounding domain.

        **Returns:**
        True iff p satisfies every inequality.
        """
        self._check_valid()
        if not self._system.D.is_inside(p):
            raise PointNotInDomainError(
                f"Point {list(p)} is not in the domain {self._system.D}..."
            )
        return self._system.satisfies(p)

    def is_interior(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point satisfies every inequality strictly.

        **Arguments:**
        - `p`: Any point of the lattice.

        **Returns:**
        True iff a.p < b for every inequality.
        """
        self._check_valid()
        return self._system.D.is_inside(p) and all(
            dot(a, p) < b for a, b in zip(self._system.A, self._system.B)
        )

    def is_boundary(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point lies in the polytope but not in its interior.

        **Arguments:**
        - `p`: Any point of the lattice.

        **Returns:**
        True iff p is inside and saturates some inequality.
        """
        return self.is_inside(p) and not self.is_interior(p)

    # enumeration
    # ===========
    def _scan(
        self,
        low: ArrayLike = None,
        high: ArrayLike = None,
        interior: bool = False,
        verbosity: int = 0,
    ):
        # Yields (xs, rest) for each line of the bounding domain along axis 0,
        # where xs are the first coordinates of the points of the line that lie
        # in the polytope and rest are the remaining coordinates.
        self._check_valid()
        system = self._system
        dim = system.dimension()

        box = system.D
        if low is not None or high is not None:
            low = box.lower_bound() if low is None else low
            high = box.upper_bound() if high is None else high
            box = box.intersection(Domain(low, high))
        if box.is_empty():
            return

        low, high = box.lower_bound(), box.upper_bound()
        dtype = system.scan_dtype(low, high)
        A, B, large = system.arrays(dtype)
        if interior:
            large = np.zeros_like(large)

        if verbosity >= 1:
            print(
                f"Scanning {box.size()} points of {box} against "
                + f"{len(system)} inequalities..."
            )

        xs = np.array(range(low[0], high[0] + 1), dtype=dtype)
        line = np.outer(A[:, 0], xs)
        B = B[:, None]
        large = large[:, None]

        # the remaining coordinates, the second one varying fastest
        ranges = [range(l, h + 1) for l, h in zip(low[1:], high[1:])]
        for rest in itertools.product(*reversed(ranges)):
            rest = rest[::-1]
            if dim == 1:
                vals = line
            else:
                vals = line + (A[:, 1:] @ np.array(rest, dtype=dtype))[:, None]

            inside = np.all((vals < B) | (large & (vals == B)), axis=0)
            if inside.any():
                yield xs[inside], rest

    def _collect(self, scan) -> np.ndarray:
        dim = self.ambient_dim()
        pts = [(int(x),) + rest for xs, rest in scan for x in xs]
        D = self._system.D
        dtype = self._system.scan_dtype(D.lower_bound(), D.upper_bound())
        return np.array(pts, dtype=dtype).reshape(len(pts), dim)

    @instanced_lru_cache(maxsize=None)
    def count(self, verbosity: int = 0) -> int:
        """
        **Description:**
        Computes the number of lattice points in the polytope.

        :::note
        Every point of the bounding domain is tested, so the cost grows with
        the volume of the domain, not of the polytope.
        :::

        **Arguments:**
        - `verbosity`: The verbosity level.

        **Returns:**
        The number of lattice points.

        **Example:**
        ```python {2}
        p = LatticePolytope([[0, 0], [2, 0], [0, 2]])
        p.count()
        # 6
        ```
        """
        return sum(len(xs) for xs, _ in self._scan(verbosity=verbosity))

    def count_in(self, low: ArrayLike, high: ArrayLike) -> int:
        """
        **Description:**
        Computes the number of lattice points of the polytope lying in the box
        [low, high].

        **Arguments:**
        - `low`: The lower corner of the box.
        - `high`: The upper corner of the box.

        **Returns:**
        The number of lattice points in the polytope and in the box.
        """
        return sum(len(xs) for xs, _ in self._scan(low, high))

    def count_up_to(self, max_count: int) -> int:
        """
        **Description:**
        Computes the number of lattice points in the polytope, stopping as
        soon as `max_count` of them were found. For instance, a d-dimensional
        lattice simplex containing more than d+1 lattice points is not empty
        of interior or boundary points besides its vertices.

        **Arguments:**
        - `max_count`: The maximal number of points to count.

        **Returns:**
        min(count(), max_count).
        """
        if max_count < 0:
            raise ValueError(f"max_count must be non-negative, but is {max_count}...")

        n = 0
        if max_count == 0:
            return n
        for xs, _ in self._scan():
            n += len(xs)
            if n >= max_count:
                return max_count
        return n

    def points(self, verbosity: int = 0) -> np.ndarray:
        """
        **Description:**
        Computes the lattice points of the polytope.

        **Arguments:**
        - `verbosity`: The verbosity level.

        **Returns:**
        The points, as the rows of a matrix. There are exactly `count()` of
        them, ordered with the first coordinate varying fastest.

        **Example:**
        ```python {2}
        p = LatticePolytope([[0, 0], [1, 0], [0, 1]])
        p.points().tolist()
        # [[0, 0], [1, 0], [0, 1]]
        ```
        """
        return self._collect(self._scan(verbosity=verbosity))

    # aliases
    get_points = points

    def insert_points(self, container) -> None:
        """
        **Description:**
        Inserts the lattice points of the polytope, as tuples, into a
        container with an `add` method, such as a set.

        **Arguments:**
        - `container`: The container.

        **Returns:**
        Nothing.
        """
        for xs, rest in self._scan():
            for x in xs:
                container.add((int(x),) + rest)

    @instanced_lru_cache(maxsize=None)
    def count_interior(self) -> int:
        """
        **Description:**
        Computes the number of lattice points satisfying every inequality
        strictly.

        **Arguments:**
        None.

        **Returns:**
        The number of interior lattice points.
        """
        return sum(len(xs) for xs, _ in self._scan(interior=True))

    def count_boundary(self) -> int:
        """
        **Description:**
        Computes the number of lattice points of the polytope that saturate
        some inequality.

        **Arguments:**
        None.

        **Returns:**
        The number of boundary lattice points.
        """
        return self.count() - self.count_interior()

    def interior_points(self) -> np.ndarray:
        return self._collect(self._scan(interior=True))

    def boundary_points(self) -> np.ndarray:
        interior = {tuple(pt) for pt in self.interior_points().tolist()}
        pts = self.points()
        keep = [tuple(pt) not in interior for pt in pts.tolist()]
        return pts[np.array(keep, dtype=bool)]


# construction helpers
# --------------------
def _as_half_space(h) -> tuple:
    # accepts HalfSpace objects as well as (normal, bound[, large]) tuples
    if isinstance(h, HalfSpace):
        return h.normal, h.bound, h.large
    if len(h) == 2:
        return h[0], h[1], True
    if len(h) == 3:
        return h[0], h[1], bool(h[2])
    raise ValueError(f"Cannot interpret {h} as a half-space...")


def _full_simplex_facets(pts: list) -> list:
    """
    **Description:**
    Computes the facet inequalities of a full-dimensional simplex.

    With E the matrix whose rows are the edge vectors p_j - p_0, the
    barycentric coordinates of x are lambda_j = (x - p_0).col_j(E^-1) for
    j >= 1, and lambda_0 = 1 - sum_j lambda_j. Using the adjugate instead of
    the inverse keeps everything integral.

    **Arguments:**
    - `pts`: The d+1 affinely independent vertices.

    **Returns:**
    A list of (normal, bound) pairs with primitive normals, one per vertex,
    the j-th being the facet not containing p_j.
    """
    p0 = pts[0]
    dim = len(p0)
    E = [[a - b for a, b in zip(pt, p0)] for pt in pts[1:]]

    det = determinant(E)
    if det == 0:
        raise DegenerateSimplexError(
            f"Points {[list(pt) for pt in pts]} are affinely dependent..."
        )
    s = 1 if det > 0 else -1
    adj = adjugate(E)
    cols = [[adj[m][j] for m in range(dim)] for j in range(dim)]

    facets = []

    # sum_j lambda_j <= 1
    n = [s * sum(col[m] for col in cols) for m in range(dim)]
    facets.append(primitive(n, abs(det) + dot(n, p0)))

    # lambda_j >= 0
    for col in cols:
        n = [-s * c for c in col]
        facets.append(primitive(n, dot(n, p0)))

    return facets


def _lower_dimensional_simplex_facets(pts: list) -> list:
    """
    **Description:**
    Computes the inequalities of a simplex with k+1 <= d vertices in
    dimension d. An integral basis of the vectors orthogonal to its affine
    hull gives pairs of opposite inequalities pinning the hull. Each relative
    facet normal is orthogonal to both the facet's edge vectors and that
    basis, i.e. it is their generalized cross product.

    **Arguments:**
    - `pts`: The affinely independent vertices.

    **Returns:**
    A list of (normal, bound) pairs.
    """
    p0 = pts[0]
    dim = len(p0)
    k = len(pts) - 1
    E = [[a - b for a, b in zip(pt, p0)] for pt in pts[1:]]

    if k == 0:
        null = [tuple(int(i == j) for j in range(dim)) for i in range(dim)]
    else:
        null = integral_nullspace(E)

    facets = []
    for v in null:
        b = dot(v, p0)
        facets.append((tuple(v), b))
        facets.append((tuple(-c for c in v), -b))

    if k == 0:
        return facets

    for i in range(len(pts)):
        others = [pt for j, pt in enumerate(pts) if j != i]
        base = others[0]
        vecs = [[a - c for a, c in zip(pt, base)] for pt in others[1:]]
        vecs += [list(v) for v in null]

        n = cofactor_normal(vecs, dim)
        b = dot(n, base)
        if dot(n, pts[i]) > b:
            n = tuple(-c for c in n)
            b = -b
        facets.append(primitive(n, b))

    return facets


def poly_h_to_domain(
    half_spaces: "list[HalfSpace]", dim: int, verbosity: int = 0
) -> Domain:
    """
    **Description:**
    Computes a bounding domain of the lattice points satisfying a list of
    half-spaces, from the vertices of the (closed) polyhedron they define.
    Uses PPL for the exact H- to V-representation conversion.

    **Arguments:**
    - `half_spaces`: The half-spaces.
    - `dim`: The ambient dimension.
    - `verbosity`: The verbosity level.

    **Returns:**
    The smallest domain containing all vertices, rounded inwards to lattice
    points.
    """
    # do the work
    cs = ppl.Constraint_System()
    vrs = [ppl.Variable(i) for i in range(dim)]
    for h in half_spaces:
        a, b, _ = _as_half_space(h)
        if len(a) != dim:
            raise ValueError(
                f"Half-space {h} has dimension {len(a)}, expected {dim}..."
            )
        linexp = sum((int(c) * v for c, v in zip(a, vrs)), ppl.Linear_Expression())
        # strict inequalities are relaxed, the closure bounds the same points
        cs.insert(linexp <= int(b))

    poly = ppl.C_Polyhedron(dim, "universe")
    poly.add_constraints(cs)
    if poly.is_empty():
        raise ValueError("Inequalities are not feasible.")

    # find the vertices
    # -----------------
    lower = [None] * dim
    upper = [None] * dim
    for g in poly.minimized_generators():
        if not g.is_point():
            raise ValueError(
                f"A generator, {g}, was not a point... "
                + "The half-spaces do not bound a polytope."
            )

        div = int(g.divisor())
        coeffs = [int(c) for c in g.coefficients()]
        coeffs += [0] * (dim - len(coeffs))
        for j, c in enumerate(coeffs):
            lo, hi = ceil_div(c, div), c // div
            lower[j] = lo if lower[j] is None else min(lower[j], lo)
            upper[j] = hi if upper[j] is None else max(upper[j], hi)

    if verbosity >= 1:
        print(f"poly_h_to_domain: bounding domain is {Domain(lower, upper)}...")

    return Domain(lower, upper)


def from_half_spaces(
    half_spaces: "list[HalfSpace]",
    domain: Domain = None,
    verbosity: int = 0,
) -> LatticePolytope:
    """
    **Description:**
    Builds the polytope defined by a list of half-spaces. If no bounding
    domain is given, one is computed with
    [`poly_h_to_domain`](#poly_h_to_domain).

    **Arguments:**
    - `half_spaces`: The half-spaces. Each is a `HalfSpace`, or a
        `(normal, bound)` or `(normal, bound, large)` tuple.
    - `domain`: An optional bounding domain.
    - `verbosity`: The verbosity level.

    **Returns:**
    The `LatticePolytope`.

    **Example:**
    ```python {2}
    from latticetools import from_half_spaces
    p = from_half_spaces([([-1, 0], 0), ([0, -1], 0), ([1, 1], 2)])
    p.count()
    # 6
    ```
    """
    half_spaces = list(half_spaces)
    if domain is None:
        if len(half_spaces) == 0:
            raise ValueError("No half-spaces were given, and no domain...")
        dim = len(_as_half_space(half_spaces[0])[0])
        domain = poly_h_to_domain(half_spaces, dim, verbosity=verbosity)

    return LatticePolytope(
        domain=domain, half_spaces=half_spaces, verbosity=verbosity
    )


def from_inequalities(ineqs: ArrayLike, verbosity: int = 0) -> LatticePolytope:
    """
    **Description:**
    Builds the polytope defined by an inequality matrix, in the format output
    by [`LatticePolytope.inequalities`](#inequalities): each row c signifies
        c[0]*x_0 + ... + c[d-1]*x_{d-1} + c[d] >= 0.

    **Arguments:**
    - `ineqs`: The integer inequality matrix.
    - `verbosity`: The verbosity level.

    **Returns:**
    The `LatticePolytope`.
    """
    rows = [list(row) for row in ineqs]
    for row in rows:
        if any(int(c) != c for c in row):
            raise ValueError(f"Inequalities must be integral, but {row} is not...")

    half_spaces = [
        HalfSpace([-int(c) for c in row[:-1]], int(row[-1])) for row in rows
    ]
    return from_half_spaces(half_spaces, verbosity=verbosity)

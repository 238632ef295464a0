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
# Description:  This module contains the Domain class, an axis-aligned box of
#               lattice points.
# -----------------------------------------------------------------------------

# 'standard' imports
import itertools
import math

# typing
from numpy.typing import ArrayLike
from typing import Iterator


class Domain:
    """
    This class describes a bounded rectangular domain of the lattice ZZ^d,
    i.e. all lattice points x with lower[i] <= x[i] <= upper[i] for every i.
    Both corners are included. The domain is empty as soon as upper[i] <
    lower[i] for some i.

    **Arguments:**
    - `lower`: The lower corner.
    - `upper`: The upper corner.

    **Example:**
    ```python {2}
    from latticetools import Domain
    D = Domain([0, 0], [3, 1])
    D.size()
    # 8
    ```
    """

    def __init__(self, lower: ArrayLike, upper: ArrayLike) -> None:
        self._lower = tuple(int(c) for c in lower)
        self._upper = tuple(int(c) for c in upper)

        if len(self._lower) != len(self._upper):
            raise ValueError(
                f"Corners have different dimensions, {len(self._lower)} "
                + f"and {len(self._upper)}..."
            )

    def __repr__(self) -> str:
        return f"Domain({list(self._lower)}, {list(self._upper)})"

    def __eq__(self, other: "Domain") -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        if self.is_empty() and other.is_empty():
            return self.dimension() == other.dimension()
        return self._lower == other._lower and self._upper == other._upper

    def __hash__(self) -> int:
        if self.is_empty():
            # all empty domains of a given dimension compare equal
            return hash(("empty", self.dimension()))
        return hash((self._lower, self._upper))

    def __contains__(self, p: ArrayLike) -> bool:
        return self.is_inside(p)

    def __iter__(self) -> Iterator[tuple]:
        return self.points()

    # getters
    # =======
    def lower_bound(self) -> tuple:
        """
        **Description:**
        Returns the lower corner of the domain.

        **Arguments:**
        None.

        **Returns:**
        The lower corner, as a tuple of ints.
        """
        return self._lower

    def upper_bound(self) -> tuple:
        """
        **Description:**
        Returns the upper corner of the domain.

        **Arguments:**
        None.

        **Returns:**
        The upper corner, as a tuple of ints.
        """
        return self._upper

    def dimension(self) -> int:
        """
        **Description:**
        Returns the dimension of the lattice containing the domain.

        **Arguments:**
        None.

        **Returns:**
        The dimension.
        """
        return len(self._lower)

    # aliases
    dim = dimension

    def extent(self) -> tuple:
        """
        **Description:**
        Returns the number of lattice points along each axis.

        **Arguments:**
        None.

        **Returns:**
        A tuple whose i-th entry is max(0, upper[i] - lower[i] + 1).
        """
        return tuple(max(0, u - l + 1) for l, u in zip(self._lower, self._upper))

    def is_empty(self) -> bool:
        """
        **Description:**
        Checks whether the domain contains no lattice point.

        **Arguments:**
        None.

        **Returns:**
        True iff upper[i] < lower[i] for some axis i.
        """
        return any(u < l for l, u in zip(self._lower, self._upper))

    def size(self) -> int:
        """
        **Description:**
        Returns the number of lattice points in the domain.

        **Arguments:**
        None.

        **Returns:**
        The number of lattice points.
        """
        return math.prod(self.extent())

    # point services
    # ==============
    def is_inside(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point lies in the domain.

        **Arguments:**
        - `p`: The point.

        **Returns:**
        True iff lower <= p <= upper componentwise.
        """
        if len(p) != self.dimension():
            raise ValueError(
                f"Point {list(p)} has dimension {len(p)} but the domain has "
                + f"dimension {self.dimension()}..."
            )
        return all(l <= c <= u for l, c, u in zip(self._lower, p, self._upper))

    def points(self) -> Iterator[tuple]:
        """
        **Description:**
        Iterates over the lattice points of the domain, the first coordinate
        varying fastest.

        **Arguments:**
        None.

        **Returns:**
        An iterator over tuples of ints.
        """
        if self.is_empty():
            return iter(())

        ranges = [range(l, u + 1) for l, u in zip(self._lower, self._upper)]
        return (
            tuple(reversed(pt)) for pt in itertools.product(*reversed(ranges))
        )

    # set operations
    # ==============
    def intersection(self, other: "Domain") -> "Domain":
        """
        **Description:**
        Returns the intersection of two domains. It may be empty.

        **Arguments:**
        - `other`: The other domain.

        **Returns:**
        The domain of lattice points lying in both.
        """
        if other.dimension() != self.dimension():
            raise ValueError(
                f"Cannot intersect domains of dimensions {self.dimension()} "
                + f"and {other.dimension()}..."
            )
        lower = [max(a, b) for a, b in zip(self._lower, other._lower)]
        upper = [min(a, b) for a, b in zip(self._upper, other._upper)]
        return Domain(lower, upper)

    @staticmethod
    def bounding_box(points: ArrayLike) -> "Domain":
        """
        **Description:**
        The smallest domain containing the given lattice points.

        **Arguments:**
        - `points`: A non-empty list of lattice points.

        **Returns:**
        The bounding box, as a Domain.
        """
        points = [tuple(int(c) for c in pt) for pt in points]
        if len(points) == 0:
            raise ValueError("Cannot bound an empty set of points...")

        lower = [min(coords) for coords in zip(*points)]
        upper = [max(coords) for coords in zip(*points)]
        return Domain(lower, upper)


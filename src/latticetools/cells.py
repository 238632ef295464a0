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
# Description:  This module contains the axis-aligned unit segments and unit
#               cells that a LatticePolytope can be Minkowski-summed with.
# -----------------------------------------------------------------------------

# typing
from typing import Iterable, Iterator


class UnitSegment:
    """
    The unit segment from the origin (included) to e_k (included).

    **Arguments:**
    - `k`: The axis of the segment.
    """

    right_strict = False
    left_strict = False

    def __init__(self, k: int) -> None:
        k = int(k)
        if k < 0:
            raise ValueError(f"Axis must be non-negative, but {k} was given...")
        self.k = k

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.k})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitSegment):
            return NotImplemented
        return type(self) is type(other) and self.k == other.k

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.k))


class RightStrictUnitSegment(UnitSegment):
    """
    The unit segment from the origin (included) to e_k (excluded).

    **Arguments:**
    - `k`: The axis of the segment.
    """

    right_strict = True


class LeftStrictUnitSegment(UnitSegment):
    """
    The unit segment from the origin (excluded) to e_k (included).

    **Arguments:**
    - `k`: The axis of the segment.
    """

    left_strict = True


class UnitCell:
    """
    The unit cell obtained as the Minkowski sum of the unit segments along the
    axes in `dims`. When `dims` is empty, the cell is the origin alone.

    Minkowski sums with axis-aligned segments commute, so the order of `dims`
    does not matter. Repeated axes are summed repeatedly.

    **Arguments:**
    - `dims`: The axes of the cell.

    **Example:**
    ```python {2}
    from latticetools import UnitCell
    UnitCell([0, 2])
    # UnitCell{02}
    ```
    """

    segment = UnitSegment

    def __init__(self, dims: Iterable[int] = ()) -> None:
        if isinstance(dims, int):
            dims = [dims]
        self.dims = tuple(int(k) for k in dims)
        if any(k < 0 for k in self.dims):
            raise ValueError(f"Axes must be non-negative, but {list(self.dims)} were given...")

    def __repr__(self) -> str:
        return type(self).__name__ + "{" + "".join(str(k) for k in self.dims) + "}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, UnitCell):
            return NotImplemented
        return type(self) is type(other) and sorted(self.dims) == sorted(other.dims)

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(sorted(self.dims))))

    def __len__(self) -> int:
        return len(self.dims)

    def __iter__(self) -> Iterator[UnitSegment]:
        return iter(self.segments())

    def segments(self) -> list:
        """
        **Description:**
        The unit segments whose Minkowski sum is this cell.

        **Arguments:**
        None.

        **Returns:**
        A list of segments, one per entry of `dims`.
        """
        return [self.segment(k) for k in self.dims]


class RightStrictUnitCell(UnitCell):
    """
    The Minkowski sum of the right-strict unit segments along the axes in
    `dims`.

    **Arguments:**
    - `dims`: The axes of the cell.
    """

    segment = RightStrictUnitSegment


class LeftStrictUnitCell(UnitCell):
    """
    The Minkowski sum of the left-strict unit segments along the axes in
    `dims`.

    **Arguments:**
    - `dims`: The axes of the cell.
    """

    segment = LeftStrictUnitSegment

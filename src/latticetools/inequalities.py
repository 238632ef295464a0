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
# Description:  This module contains the storage of a system of integer linear
#               inequalities, A x <= B (or <), together with a bounding domain
#               that encloses all of its solutions.
# -----------------------------------------------------------------------------

# 'standard' imports
import warnings

# 3rd party imports
import numpy as np

# latticetools imports
from latticetools import config
from latticetools.domain import Domain
from latticetools.helpers.matrix import dot

# typing
from numpy.typing import ArrayLike


class HalfSpace:
    """
    This class describes the half-space normal.x <= bound, or normal.x < bound
    when `large` is False.

    **Arguments:**
    - `normal`: The integer normal vector.
    - `bound`: The integer right-hand side.
    - `large`: Whether the inequality is large (<=) or strict (<).

    **Example:**
    ```python {2}
    from latticetools import HalfSpace
    h = HalfSpace([1, 1], 2)
    h.contains([1, 1]), h.contains([2, 1])
    # (True, False)
    ```
    """

    def __init__(self, normal: ArrayLike, bound: int, large: bool = True) -> None:
        self.normal = tuple(int(c) for c in normal)
        self.bound = int(bound)
        self.large = bool(large)

    def __repr__(self) -> str:
        return (
            f"HalfSpace({list(self.normal)}, {self.bound}"
            + ("" if self.large else ", large=False")
            + ")"
        )

    def __str__(self) -> str:
        return f"{list(self.normal)}.x {'<=' if self.large else '<'} {self.bound}"

    def __eq__(self, other: "HalfSpace") -> bool:
        if not isinstance(other, HalfSpace):
            return NotImplemented
        return (self.normal, self.bound, self.large) == (
            other.normal,
            other.bound,
            other.large,
        )

    def __hash__(self) -> int:
        return hash((self.normal, self.bound, self.large))

    def __iter__(self):
        # allows `a, b, large = h`
        return iter((self.normal, self.bound, self.large))

    def dimension(self) -> int:
        return len(self.normal)

    def contains(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point satisfies the inequality.

        **Arguments:**
        - `p`: The point.

        **Returns:**
        True iff the point lies in the half-space.
        """
        v = dot(self.normal, p)
        return v <= self.bound if self.large else v < self.bound


def same_direction(u: tuple, v: tuple) -> bool:
    """
    **Description:**
    Checks whether v is a positive multiple of u. Two zero vectors share a
    direction.

    **Arguments:**
    - `u`: One integer vector.
    - `v`: The other integer vector.

    **Returns:**
    True iff v = lambda*u for some rational lambda > 0.
    """
    m = next((j for j, c in enumerate(u) if c != 0), None)
    if m is None:
        return not any(v)
    if v[m] == 0 or (v[m] > 0) != (u[m] > 0):
        return False
    return all(u[j] * v[m] == v[j] * u[m] for j in range(len(u)))


class InequalitySystem:
    """
    This class stores the parallel sequences of an H-representation:
    - `A`: the normals (tuples of ints), one per inequality, in insertion
        order;
    - `B`: the right-hand sides;
    - `I`: the flags telling whether each inequality is large (True) or
        strict (False);
    along with a bounding domain `D`. Every solution of the system lies in
    `D`. The domain may be loose, but it is never allowed to miss a solution.

    **Arguments:**
    - `dim`: The ambient dimension.
    """

    def __init__(self, dim: int) -> None:
        self._dim = int(dim)
        self.clear()

    def __len__(self) -> int:
        return len(self.A)

    def __repr__(self) -> str:
        return f"InequalitySystem({self.half_spaces()}, D={self.D})"

    def clear(self) -> None:
        """
        **Description:**
        Removes every inequality and forgets the domain.

        **Arguments:**
        None.

        **Returns:**
        Nothing.
        """
        self.A = []
        self.B = []
        self.I = []
        self.D = None

    def copy(self) -> "InequalitySystem":
        other = InequalitySystem(self._dim)
        other.A = list(self.A)
        other.B = list(self.B)
        other.I = list(self.I)
        other.D = self.D
        return other

    def dimension(self) -> int:
        return self._dim

    # construction
    # ============
    def init_domain(self, domain: Domain) -> None:
        """
        **Description:**
        Resets the system to the given box. The box contributes 2*dim
        inequalities: for each axis s, e_s.x <= upper[s] followed by
        -e_s.x <= -lower[s].

        **Arguments:**
        - `domain`: The bounding domain.

        **Returns:**
        Nothing.
        """
        if domain.dimension() != self._dim:
            raise ValueError(
                f"Domain has dimension {domain.dimension()} but the system "
                + f"has dimension {self._dim}..."
            )

        self.clear()
        self.D = domain

        lower, upper = domain.lower_bound(), domain.upper_bound()
        for s in range(self._dim):
            e = [0] * self._dim
            e[s] = 1
            self.append(e, upper[s])
            e[s] = -1
            self.append(e, -lower[s])

    # accessors
    # =========
    def half_space(self, i: int) -> "HalfSpace":
        return HalfSpace(self.A[i], self.B[i], self.I[i])

    def half_spaces(self) -> list:
        return [self.half_space(i) for i in range(len(self))]

    # cutting
    # =======
    def parallel_index(self, a: ArrayLike) -> "int | None":
        """
        **Description:**
        Finds an inequality whose normal is a positive multiple of a.

        **Arguments:**
        - `a`: The normal to look for.

        **Returns:**
        The index of the first such inequality, or None.
        """
        a = tuple(int(c) for c in a)
        if len(a) != self._dim:
            raise ValueError(
                f"Normal {list(a)} has dimension {len(a)} but the system has "
                + f"dimension {self._dim}..."
            )
        for i, row in enumerate(self.A):
            if same_direction(row, a):
                return i
        return None

    def merge(self, i: int, a: ArrayLike, b: int, large: bool = True) -> int:
        """
        **Description:**
        Intersects inequality i with the parallel inequality a.x <= b (or <).
        The more restrictive of the two is kept. When they coincide, the
        result is large only if both were.

        **Arguments:**
        - `i`: The index of an inequality whose normal has the direction of a.
        - `a`: The normal.
        - `b`: The right-hand side.
        - `large`: Whether a.x <= b (True) or a.x < b (False).

        **Returns:**
        The index i.
        """
        a = tuple(int(c) for c in a)
        b = int(b)
        row = self.A[i]
        if not same_direction(row, a):
            raise ValueError(
                f"Inequality {i} has normal {list(row)}, which is not "
                + f"parallel to {list(a)}..."
            )

        m = next((j for j, c in enumerate(row) if c != 0), None)
        if m is None:
            # 0 <= b, compare the bounds directly
            new_val, old_val = b, self.B[i]
        else:
            # compare b*(row[m]/a[m]) with B[i], both scaled by |a[m]|
            s = 1 if a[m] > 0 else -1
            new_val, old_val = s * b * row[m], s * self.B[i] * a[m]

        if new_val < old_val:
            self.A[i], self.B[i], self.I[i] = a, b, bool(large)
        elif new_val == old_val:
            self.I[i] = self.I[i] and bool(large)
        else:
            return i

        self._tighten_domain(i)
        return i

    def append(self, a: ArrayLike, b: int, large: bool = True) -> int:
        """
        **Description:**
        Appends the inequality a.x <= b (or <) without looking for parallel
        inequalities.

        **Arguments:**
        - `a`: The normal.
        - `b`: The right-hand side.
        - `large`: Whether a.x <= b (True) or a.x < b (False).

        **Returns:**
        The index of the new inequality.
        """
        a = tuple(int(c) for c in a)
        if len(a) != self._dim:
            raise ValueError(
                f"Normal {list(a)} has dimension {len(a)} but the system has "
                + f"dimension {self._dim}..."
            )

        self.A.append(a)
        self.B.append(int(b))
        self.I.append(bool(large))

        self._tighten_domain(len(self.A) - 1)
        return len(self.A) - 1

    def cut(self, a: ArrayLike, b: int, large: bool = True) -> int:
        """
        **Description:**
        Intersects the system with a.x <= b (or <). If a parallel inequality
        already exists, it is merged via `merge`, else the inequality is
        appended. Linear in the number of inequalities.

        **Arguments:**
        - `a`: The normal.
        - `b`: The right-hand side.
        - `large`: Whether a.x <= b (True) or a.x < b (False).

        **Returns:**
        The index of the inequality now holding the constraint.
        """
        i = self.parallel_index(a)
        if i is None:
            return self.append(a, b, large)
        return self.merge(i, a, b, large)

    def _tighten_domain(self, i: int) -> None:
        # shrink D using inequality i, when it is axis-aligned (or trivial)
        if self.D is None:
            return

        a, b, large = self.A[i], self.B[i], self.I[i]
        support = [j for j, c in enumerate(a) if c != 0]

        if len(support) == 0:
            if b > 0 or (b == 0 and large):
                return
            warnings.warn(f"Inequality {i} ({self.half_space(i)}) is never satisfied.")
            lower = self.D.lower_bound()
            self.D = Domain(lower, [c - 1 for c in lower])
            return

        if len(support) > 1:
            return

        k = support[0]
        c = a[k]
        # c*x_k <= m with integer x_k
        m = b if large else b - 1
        lower = list(self.D.lower_bound())
        upper = list(self.D.upper_bound())
        if c > 0:
            upper[k] = min(upper[k], m // c)
        else:
            lower[k] = max(lower[k], -(m // -c))
        self.D = Domain(lower, upper)

    def reset_domain(self) -> None:
        """
        **Description:**
        Rebuilds the domain from the inequalities, so that it may grow as well
        as shrink. Each bound of D comes from the tightest axis-aligned
        inequality on that side; a side without one keeps its current bound.
        Inequalities with a zero normal that can never hold empty the domain.

        **Arguments:**
        None.

        **Returns:**
        Nothing.
        """
        if self.D is None:
            return

        lower = [None] * self._dim
        upper = [None] * self._dim
        for a, b, large in zip(self.A, self.B, self.I):
            support = [j for j, c in enumerate(a) if c != 0]
            if len(support) != 1:
                continue

            k = support[0]
            c = a[k]
            m = b if large else b - 1
            if c > 0:
                v = m // c
                upper[k] = v if upper[k] is None else min(upper[k], v)
            else:
                v = -(m // -c)
                lower[k] = v if lower[k] is None else max(lower[k], v)

        old_lower, old_upper = self.D.lower_bound(), self.D.upper_bound()
        self.D = Domain(
            [o if v is None else v for v, o in zip(lower, old_lower)],
            [o if v is None else v for v, o in zip(upper, old_upper)],
        )

        for i, a in enumerate(self.A):
            if not any(a):
                self._tighten_domain(i)

    # transformations
    # ===============
    def dilate(self, t: int) -> None:
        """
        **Description:**
        Replaces the system A x <= B by A x <= t B, then rebuilds the domain
        with `reset_domain`. Only meaningful for t > 0.

        **Arguments:**
        - `t`: The positive integer factor.

        **Returns:**
        Nothing.
        """
        t = int(t)
        self.B = [t * b for b in self.B]
        self.reset_domain()

    def sum_unit_segment(
        self, k: int, right_strict: bool = False, left_strict: bool = False
    ) -> None:
        """
        **Description:**
        Replaces the system by its Minkowski sum with the unit segment from 0
        to e_k. Inequalities with a[k] > 0 move by a[k]. With `right_strict`
        the end e_k is excluded, so those inequalities become strict. With
        `left_strict` the origin is excluded, so the inequalities with
        a[k] < 0 become strict.

        The result is exact only if the system already contains every
        inequality of the sum (see `latticetools.edge_constraints`). Otherwise
        it is a superset of the sum.

        **Arguments:**
        - `k`: The axis of the segment.
        - `right_strict`: Whether e_k is excluded.
        - `left_strict`: Whether the origin is excluded.

        **Returns:**
        Nothing.
        """
        if not 0 <= k < self._dim:
            raise ValueError(f"Axis {k} is out of range for dimension {self._dim}...")

        for i, a in enumerate(self.A):
            if a[k] > 0:
                self.B[i] += a[k]
                if right_strict:
                    self.I[i] = False
            elif a[k] < 0 and left_strict:
                self.I[i] = False

        if self.D is None or self.D.is_empty():
            return

        upper = list(self.D.upper_bound())
        upper[k] += 1
        self.D = Domain(self.D.lower_bound(), upper)
        for i, a in enumerate(self.A):
            if a[k] != 0:
                self._tighten_domain(i)

    # evaluation
    # ==========
    def satisfies(self, p: ArrayLike) -> bool:
        """
        **Description:**
        Checks whether a point satisfies every inequality. The domain is not
        consulted.

        **Arguments:**
        - `p`: The point.

        **Returns:**
        True iff A p <= B holds, strictly where required.
        """
        if len(p) != self._dim:
            raise ValueError(
                f"Point {list(p)} has dimension {len(p)} but the system has "
                + f"dimension {self._dim}..."
            )
        for a, b, large in zip(self.A, self.B, self.I):
            v = dot(a, p)
            if v > b or (v == b and not large):
                return False
        return True

    def scan_dtype(self, low: ArrayLike, high: ArrayLike) -> type:
        """
        **Description:**
        Chooses the integer type for evaluating the system on the box
        [low, high]. 64-bit integers are used unless `config.big_integers` is
        set or the values a.x - b could exceed 2**config.int64_headroom_bits.

        **Arguments:**
        - `low`: The lower corner of the box.
        - `high`: The upper corner of the box.

        **Returns:**
        Either np.int64 or object.
        """
        if config.big_integers:
            return object

        limit = 2 ** config.int64_headroom_bits
        coord = [max(abs(int(l)), abs(int(h))) for l, h in zip(low, high)]
        if any(c >= limit for c in coord):
            return object
        for a, b in zip(self.A, self.B):
            if sum(abs(c) * x for c, x in zip(a, coord)) + abs(b) >= limit:
                return object
        return np.int64

    def arrays(self, dtype: type = np.int64) -> tuple:
        """
        **Description:**
        Returns the system as numpy arrays.

        **Arguments:**
        - `dtype`: The integer type, see `scan_dtype`.

        **Returns:**
        The matrix A (rows are normals), the vector B and the boolean vector
        of large flags.
        """
        A = np.array(self.A, dtype=dtype).reshape(len(self.A), self._dim)
        B = np.array(self.B, dtype=dtype).reshape(len(self.B))
        large = np.array(self.I, dtype=bool).reshape(len(self.I))
        return A, B, large

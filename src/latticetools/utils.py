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
# Description:  This module contains various common functions that are used in
#               latticetools.
# -----------------------------------------------------------------------------

# 'standard' imports
import functools
import math

# 3rd party imports
import flint
from numpy.typing import ArrayLike


# custom decorators
# -----------------
# class instance caching
# (lru_cache persists for all class instances... that is not desired...)
def instanced_lru_cache(maxsize=128):
    # implement lru_cache, stored in self._cache
    def decorator(func):
        @functools.wraps(func)  # copy func's metadata
        def wrapper(self, *args, **kwargs):
            # make class cache if it doesn't exist
            if not hasattr(self, "_cache") or self._cache is None:
                self._cache = {}

            # store function cache in class cache
            fname = func.__name__
            if fname not in self._cache:
                self._cache[fname] = functools.lru_cache(maxsize=maxsize)(func)

            # use cached result
            return self._cache[fname](self, *args, **kwargs)

        return wrapper

    return decorator


# basic math
# ----------
def gcd_list(arr: ArrayLike) -> int:
    """
    **Description:**
    Compute the (non-negative) greatest common divisor of a list of integers.
    The gcd of an empty list, or of a list of zeros, is 0.

    **Arguments:**
    - `arr`: The integers.

    **Returns:**
    The gcd of the entries of arr.

    **Example:**
    ```python {2}
    from latticetools.utils import gcd_list
    gcd_list([4, -6, 10])
    # 2
    ```
    """
    return functools.reduce(math.gcd, (int(c) for c in arr), 0)


def ceil_div(a: int, b: int) -> int:
    """
    **Description:**
    Exact ceiling of a/b for integers, b != 0.

    **Arguments:**
    - `a`: The numerator.
    - `b`: The denominator.

    **Returns:**
    The smallest integer n such that n >= a/b.
    """
    return -((-a) // b)


def primitive(normal: ArrayLike, bound: int) -> (tuple, int):
    """
    **Description:**
    Divides the inequality normal.x <= bound by the gcd of the normal. The
    bound is divided with floor division, which leaves the set of lattice
    points unchanged. The callers in this package only use it on rows whose
    bound is a multiple of the gcd, where it is exact.

    **Arguments:**
    - `normal`: The normal of the inequality.
    - `bound`: The right-hand side.

    **Returns:**
    The reduced normal, as a tuple of ints, and the reduced bound.
    """
    normal = tuple(int(c) for c in normal)
    g = gcd_list(normal)
    if g <= 1:
        return normal, int(bound)
    return tuple(c // g for c in normal), int(bound) // g


# linear algebra
# --------------
def integral_nullspace(M: ArrayLike, reduce_by_gcd: bool = True) -> list:
    """
    **Description:**
    Computes an integral basis of the right nullspace of an integer matrix,
    i.e. of the vectors v such that M v = 0.

    **Arguments:**
    - `M`: The integer matrix, as a list of rows. It must have at least one
        row.
    - `reduce_by_gcd`: Whether to make every basis vector primitive.

    **Returns:**
    The basis vectors, as a list of tuples of ints.

    **Example:**
    ```python {2}
    from latticetools.utils import integral_nullspace
    integral_nullspace([[2, 2]])
    # [(-1, 1)], up to sign
    ```
    """
    rows = [[int(c) for c in row] for row in M]
    null, nullity = flint.fmpz_mat(rows).nullspace()

    # columns beyond the nullity are padding
    null = [[int(c) for c in row] for row in null.tolist()]
    basis = [tuple(row[i] for row in null) for i in range(nullity)]

    # reduce by gcd
    if reduce_by_gcd:
        basis = [primitive(v, 0)[0] for v in basis]

    return basis


def integer_rank(M: ArrayLike) -> int:
    """
    **Description:**
    Exact rank of an integer matrix.

    **Arguments:**
    - `M`: The integer matrix, as a list of rows.

    **Returns:**
    The rank of M.
    """
    rows = [[int(c) for c in row] for row in M]
    if len(rows) == 0:
        return 0
    return int(flint.fmpz_mat(rows).rank())

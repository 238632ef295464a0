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
# Description:  This module contains small exact integer linear algebra
#               routines. Matrices are lists of rows of Python ints, and the
#               sizes involved never exceed the ambient dimension, so no
#               attempt at asymptotic efficiency is made.
# -----------------------------------------------------------------------------

# typing
from numpy.typing import ArrayLike


def _as_int_rows(M: ArrayLike) -> list:
    return [[int(c) for c in row] for row in M]


def dot(u: ArrayLike, v: ArrayLike) -> int:
    """
    **Description:**
    Exact dot product of two integer vectors.

    **Arguments:**
    - `u`: One vector.
    - `v`: The other vector.

    **Returns:**
    The dot product u.v as a Python int.
    """
    return sum(int(a) * int(b) for a, b in zip(u, v))


def cross_product(u: ArrayLike, v: ArrayLike) -> tuple:
    """
    **Description:**
    Cross product of two 3-dimensional integer vectors.

    **Arguments:**
    - `u`: One vector.
    - `v`: The other vector.

    **Returns:**
    The vector u x v.

    **Example:**
    ```python {2}
    from latticetools.helpers.matrix import cross_product
    cross_product([1, 0, 0], [0, 1, 0])
    # (0, 0, 1)
    ```
    """
    if len(u) != 3 or len(v) != 3:
        raise ValueError("The cross product is only defined in dimension 3.")

    u0, u1, u2 = (int(c) for c in u)
    v0, v1, v2 = (int(c) for c in v)
    return (u1 * v2 - u2 * v1, u2 * v0 - u0 * v2, u0 * v1 - u1 * v0)


def determinant(M: ArrayLike) -> int:
    """
    **Description:**
    Computes the determinant of a square integer matrix with the fraction-free
    Bareiss elimination. Every intermediate division is exact, so the result is
    exact for arbitrarily large entries.

    **Arguments:**
    - `M`: The square matrix, as a list of rows.

    **Returns:**
    The determinant of M. The determinant of the 0x0 matrix is 1.

    **Example:**
    ```python {2}
    from latticetools.helpers.matrix import determinant
    determinant([[2, 0], [1, 3]])
    # 6
    ```
    """
    A = _as_int_rows(M)
    n = len(A)
    if any(len(row) != n for row in A):
        raise ValueError(f"Matrix must be square, but has {n} rows of "
                         f"lengths {[len(row) for row in A]}...")
    if n == 0:
        return 1

    sign = 1
    prev = 1
    for k in range(n - 1):
        if A[k][k] == 0:
            # swap in a non-zero pivot
            for i in range(k + 1, n):
                if A[i][k] != 0:
                    A[k], A[i] = A[i], A[k]
                    sign = -sign
                    break
            else:
                return 0

        for i in range(k + 1, n):
            for j in range(k + 1, n):
                A[i][j] = (A[i][j] * A[k][k] - A[i][k] * A[k][j]) // prev
        prev = A[k][k]

    return sign * A[n - 1][n - 1]


def minor(M: ArrayLike, row: int, col: int) -> list:
    """
    **Description:**
    The matrix M with one row and one column removed.

    **Arguments:**
    - `M`: The matrix, as a list of rows.
    - `row`: The index of the row to drop.
    - `col`: The index of the column to drop.

    **Returns:**
    The submatrix, as a list of rows.
    """
    return [
        [c for j, c in enumerate(r) if j != col]
        for i, r in enumerate(_as_int_rows(M))
        if i != row
    ]


def adjugate(M: ArrayLike) -> list:
    """
    **Description:**
    Computes the adjugate of a square integer matrix. This is the inverse of
    M scaled by its determinant, adj(M) M = M adj(M) = det(M) I, so it stays
    integral.

    **Arguments:**
    - `M`: The square matrix, as a list of rows.

    **Returns:**
    The adjugate matrix, as a list of rows.

    **Example:**
    ```python {2}
    from latticetools.helpers.matrix import adjugate
    adjugate([[2, 0], [1, 3]])
    # [[3, 0], [-1, 2]]
    ```
    """
    A = _as_int_rows(M)
    n = len(A)
    if n == 1:
        return [[1]]

    # adj[i][j] is the (j,i) cofactor
    return [
        [(-1) ** (i + j) * determinant(minor(A, j, i)) for j in range(n)]
        for i in range(n)
    ]


def cofactor_normal(vectors: ArrayLike, dim: int = None) -> tuple:
    """
    **Description:**
    Generalized cross product: given d-1 integer vectors in dimension d,
    returns the vector n whose j-th entry is (-1)^j times the determinant of
    the (d-1)x(d-1) matrix obtained by dropping column j. It is orthogonal to
    every input vector, and it is zero iff the vectors are linearly dependent.
    In dimension 3 this is the usual cross product.

    **Arguments:**
    - `vectors`: The d-1 vectors, as a list of rows.
    - `dim`: The ambient dimension d. Only needed when there are no vectors
        (d = 1).

    **Returns:**
    The normal vector, as a tuple of ints.
    """
    rows = _as_int_rows(vectors)
    if dim is None:
        dim = len(rows[0])
    if len(rows) != dim - 1:
        raise ValueError(f"Need {dim-1} vectors in dimension {dim}, "
                         f"but {len(rows)} were given...")

    return tuple(
        (-1) ** j * determinant([r[:j] + r[j + 1:] for r in rows])
        for j in range(dim)
    )

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

"""
This module contains various configuration variables for the integer
arithmetic used during lattice point enumeration.
"""

# When True, enumeration always works with arbitrary precision Python integers
# (numpy object arrays). When False, 64-bit integers are used whenever the
# magnitudes involved are guaranteed to fit, and arbitrary precision otherwise.
big_integers = False

# Values of |a.x - b| are assumed to fit in int64 as long as their bound stays
# below 2**int64_headroom_bits.
int64_headroom_bits = 62


def enable_big_integers():
    """
    **Description:**
    Forces arbitrary precision integers for every lattice point enumeration.
    This is slower, but it never overflows.

    **Arguments:**
    None.

    **Returns:**
    Nothing.

    **Example:**
    ```python {2}
    import latticetools
    latticetools.config.enable_big_integers()
    ```
    """
    global big_integers
    big_integers = True


def disable_big_integers():
    """
    **Description:**
    Restores the default behaviour, where 64-bit integers are used whenever
    they cannot overflow.

    **Arguments:**
    None.

    **Returns:**
    Nothing.
    """
    global big_integers
    big_integers = False

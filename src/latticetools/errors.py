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
# Description:  Exceptions raised by latticetools.
# -----------------------------------------------------------------------------


class InvalidPolytopeError(ValueError):
    """
    Raised when a default-constructed (never initialized) polytope is queried.
    Use `LatticePolytope.is_valid` to check beforehand.
    """


class DegenerateSimplexError(ValueError):
    """
    Raised when the points given to build a simplex are affinely dependent.
    """


class NonPositiveDilationError(ValueError):
    """
    Raised when a polytope is dilated by a factor t <= 0.
    """


class PointNotInDomainError(ValueError):
    """
    Raised by `LatticePolytope.is_domain_point_inside` when the point lies
    outside the bounding domain of the polytope.
    """


class UnsupportedDimensionError(NotImplementedError):
    """
    Raised when edge constraints are requested in a dimension for which no
    edge-constraint provider exists.
    """

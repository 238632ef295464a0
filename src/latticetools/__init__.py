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

# Make the main classes and functions accessible from the root of latticetools.
from latticetools import config
from latticetools.cells import (
    LeftStrictUnitCell,
    LeftStrictUnitSegment,
    RightStrictUnitCell,
    RightStrictUnitSegment,
    UnitCell,
    UnitSegment,
)
from latticetools.domain import Domain
from latticetools.errors import (
    DegenerateSimplexError,
    InvalidPolytopeError,
    NonPositiveDilationError,
    PointNotInDomainError,
    UnsupportedDimensionError,
)
from latticetools.inequalities import HalfSpace
from latticetools.polytope import LatticePolytope, from_half_spaces, from_inequalities

# Latest version
version = "0.1.0"

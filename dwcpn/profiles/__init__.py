"""
Depth profiles: chlorophyll, production and the secondary population.
"""

from dwcpn.profiles.chlorophyll import gen_chl_profile, depth_grid, PROFILE_SHAPES
from dwcpn.profiles.production import (
    ProductionProfile,
    compute_pp_depth_profile,
    integrate_euphotic_depth,
    integrate_column_production,
)
from dwcpn.profiles.secondary import (
    SecondaryProfile,
    compute_secondary_profile,
    integrate_secondary_column,
)

__all__ = [
    "gen_chl_profile",
    "depth_grid",
    "PROFILE_SHAPES",
    "ProductionProfile",
    "compute_pp_depth_profile",
    "integrate_euphotic_depth",
    "integrate_column_production",
    "SecondaryProfile",
    "compute_secondary_profile",
    "integrate_secondary_column",
]

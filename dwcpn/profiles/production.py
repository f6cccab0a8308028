"""
Production profile and euphotic depth.

Production at each depth follows the saturating P-I response

    P(z) = B(z) * P_m^B * (1 - exp(-i_alpha(z) / P_m^B))

and the column is integrated down to the euphotic depth, where PAR falls to
1% of its surface value.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy.integrate import trapezoid

from dwcpn.core.errors import NoEuphoticDepthFound
from dwcpn.profiles.secondary import SecondaryProfile, compute_secondary_profile
from dwcpn.utils.constants import DEPTH_PROFILE_STEP, EUPHOTIC_LIGHT_FRACTION

logger = logging.getLogger(__name__)


@dataclass
class ProductionProfile:
    """Production through the water column for one timestep.

    Attributes:
        depth: Depth samples [m]
        production: Production rate at each depth [mg C m^-3 h^-1]
        par: PAR at each depth [einstein m^-2 h^-1]
        euphotic_depth: Depth of the 1% light level [m]
        euphotic_index: Last depth sample above the euphotic depth
        spectral_i_star: Sum of i_alpha / P_m^B down to the 1% level, divided
            by the euphotic index
        secondary: Secondary population, when configured
    """
    depth: np.ndarray
    production: np.ndarray
    par: np.ndarray
    euphotic_depth: float
    euphotic_index: int
    spectral_i_star: float
    secondary: Optional[SecondaryProfile] = None


def integrate_euphotic_depth(
    depth_index: int,
    depth: np.ndarray,
    par: np.ndarray,
    depth_step: float = DEPTH_PROFILE_STEP,
) -> Tuple[int, float]:
    """
    Locate the 1% light level between two depth samples.

    ``depth_index`` is the first sample below the 1% level; the euphotic
    depth is interpolated log-linearly between it and the sample above.

    Returns
    -------
    euphotic_index : int
        ``depth_index - 1``
    euphotic_depth : float
        Interpolated depth [m]
    """
    euphotic_index = depth_index - 1

    # log(PAR) -> -inf; the interpolated fraction -> 0
    if par[depth_index] <= 0.0:
        return euphotic_index, float(depth[euphotic_index])

    fraction = np.log(par[euphotic_index] / (EUPHOTIC_LIGHT_FRACTION * par[0])) / np.log(
        par[euphotic_index] / par[depth_index]
    )

    return euphotic_index, float(depth[euphotic_index] + depth_step * fraction)


def compute_pp_depth_profile(
    chl: np.ndarray,
    depth: np.ndarray,
    i_alpha: np.ndarray,
    par: np.ndarray,
    pmb: float,
    z_bottom: float,
    depth_step: float = DEPTH_PROFILE_STEP,
    secondary=None,
) -> ProductionProfile:
    """
    Production profile down to the euphotic depth.

    Parameters
    ----------
    chl, depth, i_alpha, par : ndarray
        Chlorophyll, depth, i_alpha and PAR at each depth sample
    pmb : float
        Assimilation number [mg C mg Chl^-1 h^-1]
    z_bottom : float
        Depth of the seafloor [m]; the euphotic depth never exceeds it
    depth_step : float, optional
        Depth step [m]
    secondary : SecondaryPopulationSettings, optional
        Adds a secondary population to the result

    Returns
    -------
    profile : ProductionProfile

    Raises
    ------
    NoEuphoticDepthFound
        If PAR never falls below 1% of its surface value
    """
    production = chl * pmb * (1.0 - np.exp(-i_alpha / pmb))

    below = np.nonzero(par[1:] < EUPHOTIC_LIGHT_FRACTION * par[0])[0]
    if len(below) == 0:
        raise NoEuphoticDepthFound(
            f"PAR stays above {EUPHOTIC_LIGHT_FRACTION:.0%} of the surface value "
            f"down to {depth[-1]:.1f} m"
        )

    depth_index = int(below[0]) + 1
    euphotic_index, euphotic_depth = integrate_euphotic_depth(depth_index, depth, par, depth_step)

    if abs(euphotic_depth) > abs(z_bottom):
        logger.debug(f"Euphotic depth {euphotic_depth:.2f} m clamped to the bottom at {abs(z_bottom):.2f} m")
        euphotic_index = len(depth) - 1
        euphotic_depth = abs(z_bottom)

    # summed down to the first sample below the 1% level, per euphotic sample
    spectral_i_star = float(np.sum(i_alpha[:depth_index + 1]) / pmb / max(euphotic_index, 1))

    secondary_profile = None
    if secondary is not None:
        secondary_profile = compute_secondary_profile(par, i_alpha, pmb, euphotic_index, secondary)

    return ProductionProfile(
        depth=depth,
        production=production,
        par=par,
        euphotic_depth=euphotic_depth,
        euphotic_index=euphotic_index,
        spectral_i_star=spectral_i_star,
        secondary=secondary_profile,
    )


def integrate_column_production(profile: ProductionProfile, depth_step: float = DEPTH_PROFILE_STEP) -> float:
    """
    Water-column production above the euphotic depth [mg C m^-2 h^-1].

    Trapezoidal rule down to the euphotic index, plus the production at that
    index times the distance from the sample above it to the euphotic depth.
    The index is floored at 1.
    """
    euphotic_index = max(profile.euphotic_index, 1)

    column = trapezoid(profile.production[:euphotic_index + 1], dx=depth_step)

    partial = max(profile.euphotic_depth - profile.depth[euphotic_index - 1], 0.0)
    column += profile.production[euphotic_index] * partial

    return float(column)

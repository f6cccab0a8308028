"""
Secondary phytoplankton population.

A second population whose abundance is a function of the relative light
level ``f = PAR(z) / PAR(0)``: a saturating surface community plus a
subsurface community peaking at an optimum light fraction. It shares the
photosynthetic response of the primary population.
"""

from dataclasses import dataclass

import numpy as np
from scipy.integrate import trapezoid

from dwcpn.utils.constants import DEPTH_PROFILE_STEP


@dataclass
class SecondaryProfile:
    """Secondary population at one timestep.

    Attributes:
        abundance: Chlorophyll of the secondary population at each depth [mg m^-3]
        production: Production rate at each depth [mg C m^-3 h^-1]
    """
    abundance: np.ndarray
    production: np.ndarray


def relative_light(par: np.ndarray) -> np.ndarray:
    """PAR as a fraction of its surface value (zero if the surface is dark)."""
    par = np.asarray(par, dtype=float)
    if par[0] <= 0.0:
        return np.zeros_like(par)
    return par / par[0]


def surface_abundance(f: np.ndarray, surface_max: float, saturation: float) -> np.ndarray:
    """Saturating curve, equal to ``surface_max`` at the surface (f = 1)."""
    curve = surface_max * (1.0 - np.exp(-f / saturation)) / (1.0 - np.exp(-1.0 / saturation))
    return np.maximum(curve, 0.0)


def subsurface_abundance(f: np.ndarray, subsurface_max: float, optimum: float) -> np.ndarray:
    """Peaked curve, equal to ``subsurface_max`` at ``f == optimum``."""
    ratio = f / optimum
    return np.maximum(subsurface_max * ratio * np.exp(1.0 - ratio), 0.0)


def compute_secondary_profile(
    par: np.ndarray,
    i_alpha: np.ndarray,
    pmb: float,
    euphotic_index: int,
    settings,
) -> SecondaryProfile:
    """
    Abundance and production of the secondary population.

    Parameters
    ----------
    par : ndarray
        PAR profile
    i_alpha : ndarray
        Light-weighted photosynthesis term profile
    pmb : float
        Assimilation number [mg C mg Chl^-1 h^-1]
    euphotic_index : int
        Last depth sample above the euphotic depth
    settings : SecondaryPopulationSettings

    Returns
    -------
    profile : SecondaryProfile
    """
    f = relative_light(par)

    abundance = surface_abundance(f, settings.surface_max, settings.surface_saturation)
    abundance = abundance + subsurface_abundance(f, settings.subsurface_max, settings.subsurface_optimum)

    production = abundance * pmb * (1.0 - np.exp(-np.asarray(i_alpha) / pmb))

    if settings.truncate_at_euphotic_depth:
        production[euphotic_index + 1:] = 0.0

    return SecondaryProfile(abundance=abundance, production=production)


def integrate_secondary_column(profile: SecondaryProfile, depth_step: float = DEPTH_PROFILE_STEP) -> float:
    """Water-column production of the secondary population [mg C m^-2 h^-1]."""
    return float(trapezoid(profile.production, dx=depth_step))

"""
Spectral light attenuation in the water column.

Propagates the surface spectral irradiance downward one depth step at a time
(Beer-Lambert), and accumulates the PAR and the light-weighted
photosynthesis term (i_alpha) at every depth.

References
----------
- Sathyendranath, S. & Platt, T. (1988). The spectral irradiance field at the
  surface and in the interior of the ocean. J. Geophys. Res., 93, 9270-9280.
- Platt, T., Sathyendranath, S., Caverhill, C.M. & Lewis, M.R. (1988).
  Ocean primary production and available light: further algorithms for
  remote sensing. Deep-Sea Res., 35, 855-879.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from dwcpn.core.errors import AttenuationError
from dwcpn.optics.absorption import calc_ac
from dwcpn.utils.constants import (
    AW,
    WL_ARRAY,
    DELTA_LAMBDA,
    DEPTH_PROFILE_STEP,
    DIFFUSE_MU_D,
    EINSTEIN_TO_WATTS,
    WATER_REFRACTIVE_INDEX,
)
from dwcpn.utils.interpolation import linear_interp

logger = logging.getLogger(__name__)


@dataclass
class LightProfile:
    """Light field through the water column for one timestep.

    Attributes:
        i_alpha: Light-weighted photosynthesis term at each depth [mg C mg Chl^-1 h^-1]
        par: PAR at each depth [einstein m^-2 h^-1]
        spectral_irradiance: Spectral irradiance at each depth, shape (depths, wavelengths)
        mu_d: Mean cosine of the downwelling light at each wavelength
        depth_reached: Number of depth samples actually computed
    """
    i_alpha: np.ndarray
    par: np.ndarray
    spectral_irradiance: np.ndarray
    mu_d: np.ndarray
    depth_reached: int


def init_mu_d_and_i_z(
    direct: np.ndarray,
    diffuse: np.ndarray,
    zenith_r: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Mean cosine of the downwelling light and irradiance just below the surface.

    Parameters
    ----------
    direct, diffuse : ndarray
        Corrected direct and diffuse spectral irradiance below the surface
    zenith_r : float
        Solar zenith angle in radians

    Returns
    -------
    mu_d : ndarray
        Irradiance-weighted mean cosine at each wavelength
    i_z : ndarray
        Total spectral irradiance just below the surface
    """
    zenith_w = np.arcsin(np.sin(zenith_r) / WATER_REFRACTIVE_INDEX)

    i_zero = direct + diffuse
    # fully diffuse where there is no light
    mu_d = np.divide(
        direct * np.cos(zenith_w) + diffuse * DIFFUSE_MU_D,
        i_zero,
        out=np.full(i_zero.shape, DIFFUSE_MU_D),
        where=i_zero > 0,
    )

    return mu_d, i_zero.copy()


def calc_i_z_decay(
    ac: np.ndarray,
    mu_d: np.ndarray,
    i_z: np.ndarray,
    chl: float,
    yellow_substance: float,
    ay: np.ndarray,
    bbr: np.ndarray,
    bw: np.ndarray,
    alpha_b: float,
    ac_mean: float,
    depth_step: float = DEPTH_PROFILE_STEP,
) -> Tuple[float, np.ndarray, float]:
    """
    Attenuate the spectral irradiance over one depth step.

    Total absorption is water + phytoplankton + yellow substance + twice the
    backscattering term; scattering is particulate (chlorophyll dependent)
    plus half the pure water scattering. The vertical attenuation coefficient
    is ``k = (a + bb) / mu_d``.

    Parameters
    ----------
    ac : ndarray
        Phytoplankton absorption at this depth
    mu_d : ndarray
        Mean cosine of the downwelling light
    i_z : ndarray
        Spectral irradiance at the top of the step
    chl : float
        Chlorophyll at this depth [mg m^-3]
    yellow_substance : float
        Yellow-substance absorption at 440 nm relative to phytoplankton
    ay, bbr, bw : ndarray
        Yellow-substance shape, backscattering and pure water scattering
    alpha_b : float
        Initial slope of the P-I curve [mg C mg Chl^-1 h^-1 (W m^-2)^-1]
    ac_mean : float
        Spectral mean of ``ac``
    depth_step : float, optional
        Thickness of the step [m]

    Returns
    -------
    i_alpha : float
        Light-weighted photosynthesis term at the top of the step
    i_z_next : ndarray
        Spectral irradiance at the bottom of the step
    par : float
        PAR at the top of the step [einstein m^-2 h^-1]
    """
    ac440 = float(linear_interp(WL_ARRAY, ac, 440.0))

    power = -np.log10(chl)
    ay440 = yellow_substance * ac440

    bc660 = 0.407 * chl**0.795
    bbtilda = np.clip((0.78 + 0.42 * power) * 0.01, 0.0005, 0.01)

    par = float(np.sum(i_z) * DELTA_LAMBDA)

    a = AW + ac + ay440 * ay + 2.0 * bbr
    bc = np.maximum(bc660 * (660.0 / WL_ARRAY) ** power, 0.0)
    bb = bc * bbtilda + bw * 0.5

    k = (a + bb) / mu_d

    # alpha_b is per W m^-2, irradiance is in einstein m^-2 h^-1
    x = alpha_b * ac * EINSTEIN_TO_WATTS / ac_mean
    i_alpha = float(np.sum(x * DELTA_LAMBDA * i_z / mu_d))

    return i_alpha, i_z * np.exp(-k * depth_step), par


def calc_light_decay_profile(
    chl_profile: np.ndarray,
    direct: np.ndarray,
    diffuse: np.ndarray,
    zenith_r: float,
    yellow_substance: float,
    ay: np.ndarray,
    bbr: np.ndarray,
    bw: np.ndarray,
    alpha_b: float,
    depth_step: float = DEPTH_PROFILE_STEP,
) -> LightProfile:
    """
    Light and i_alpha profiles through the water column.

    The loop stops at the first depth whose phytoplankton absorption is zero
    (no chlorophyll, e.g. below the seafloor); deeper samples stay at zero.

    Parameters
    ----------
    chl_profile : ndarray
        Chlorophyll at each depth sample
    direct, diffuse : ndarray
        Corrected spectral irradiance just below the surface
    zenith_r : float
        Solar zenith angle in radians
    yellow_substance : float
        Yellow-substance coefficient
    ay, bbr, bw : ndarray
        Wavelength-dependent optical coefficients
    alpha_b : float
        Initial slope of the P-I curve
    depth_step : float, optional
        Depth step [m]

    Returns
    -------
    profile : LightProfile

    Raises
    ------
    AttenuationError
        If PAR increases with depth
    """
    n_depths = len(chl_profile)

    i_alpha_profile = np.zeros(n_depths)
    par_profile = np.zeros(n_depths)
    spectral = np.zeros((n_depths, len(WL_ARRAY)))

    mu_d, i_z = init_mu_d_and_i_z(direct, diffuse, zenith_r)

    depth_reached = n_depths
    for z in range(n_depths):
        chl = chl_profile[z]
        ac, ac_mean = calc_ac(chl)

        if ac_mean == 0.0:
            depth_reached = z
            break

        spectral[z] = i_z
        i_alpha_profile[z], i_z, par_profile[z] = calc_i_z_decay(
            ac,
            mu_d,
            i_z,
            chl,
            yellow_substance,
            ay,
            bbr,
            bw,
            alpha_b,
            ac_mean,
            depth_step,
        )

    increases = np.diff(par_profile) > 1e-12 * max(par_profile[0], 1.0)
    if np.any(increases):
        bad = int(np.argmax(increases)) + 1
        raise AttenuationError(
            f"PAR increases with depth at sample {bad}: "
            f"{par_profile[bad - 1]:.6g} -> {par_profile[bad]:.6g}"
        )

    logger.debug(f"Light profile computed to sample {depth_reached} of {n_depths}")

    return LightProfile(
        i_alpha=i_alpha_profile,
        par=par_profile,
        spectral_irradiance=spectral,
        mu_d=mu_d,
        depth_reached=depth_reached,
    )

"""
Spectral atmospheric transmittance.

Closed-form transmittances for Rayleigh scattering, aerosol extinction, water
vapour and ozone absorption on the 24-wavelength reference grid
(``TRANSMITTANCE_WAVELENGTHS``), plus the uniformly mixed gas term and the
air albedo used for the diffuse component.

References
----------
- Bird, R.E. & Riordan, C. (1986). Simple solar spectral model for direct and
  diffuse irradiance on horizontal and tilted planes at the earth's surface
  for cloudless atmospheres. J. Clim. Appl. Meteorol., 25, 87-97.
- Leckner, B. (1978). The spectral distribution of solar radiation at the
  earth's surface - elements of a model. Solar Energy, 20, 143-150.
"""

import numpy as np

from dwcpn.utils.constants import (
    TRANSMITTANCE_WAVELENGTHS,
    OZONE_ABS,
    WATER_VAPOUR_ABS,
    PRECIPITABLE_WATER,
    AEROSOL_ALPHA1,
    AEROSOL_BETA1,
    AEROSOL_ALPHA2,
    AEROSOL_BETA2,
    AEROSOL_SPLIT_INDEX,
)

# Reference wavelengths in micrometers
_WL_UM = TRANSMITTANCE_WAVELENGTHS / 1000.0

# Index of the reference wavelength that carries the mixed gas correction
TU_DIRECT_INDEX = len(TRANSMITTANCE_WAVELENGTHS) - 1
TU_DIFFUSE_INDEX = len(TRANSMITTANCE_WAVELENGTHS) - 2


def rayleigh_transmittance(air_mass: float) -> np.ndarray:
    """
    Rayleigh (molecular) scattering transmittance.

    T_r = exp(-m / (lambda^4 * (115.6406 - 1.335 / lambda^2)))

    Parameters
    ----------
    air_mass : float
        Relative optical air mass

    Returns
    -------
    t_rayleigh : ndarray
        Transmittance at each reference wavelength
    """
    return np.exp(-air_mass / (_WL_UM**4 * (115.6406 - 1.335 / _WL_UM**2)))


def aerosol_transmittance(air_mass: float) -> np.ndarray:
    """
    Aerosol extinction transmittance (Angstrom turbidity law).

    Two turbidity regimes are used: (alpha1, beta1) for the first
    ``AEROSOL_SPLIT_INDEX`` reference wavelengths and (alpha2, beta2) above.

    Parameters
    ----------
    air_mass : float
        Relative optical air mass

    Returns
    -------
    t_aerosol : ndarray
        Transmittance at each reference wavelength
    """
    beta = np.where(np.arange(len(_WL_UM)) < AEROSOL_SPLIT_INDEX, AEROSOL_BETA1, AEROSOL_BETA2)
    alpha = np.where(np.arange(len(_WL_UM)) < AEROSOL_SPLIT_INDEX, AEROSOL_ALPHA1, AEROSOL_ALPHA2)

    return np.exp(-beta * _WL_UM ** (-alpha) * air_mass)


def water_vapour_transmittance(air_mass: float) -> np.ndarray:
    """
    Water vapour absorption transmittance.

    Parameters
    ----------
    air_mass : float
        Relative optical air mass

    Returns
    -------
    t_water_vapour : ndarray
        Transmittance at each reference wavelength
    """
    w = PRECIPITABLE_WATER
    return np.exp(
        -0.3285 * WATER_VAPOUR_ABS * (w + (1.42 - w) / 2.0) * air_mass
        / (1.0 + 20.07 * WATER_VAPOUR_ABS * air_mass) ** 0.45
    )


def ozone_transmittance(zenith_r: float) -> np.ndarray:
    """
    Ozone absorption transmittance.

    Uses the ozone air mass for a layer at 22 km and a 0.3 cm-atm column.

    Parameters
    ----------
    zenith_r : float
        Solar zenith angle in radians

    Returns
    -------
    t_ozone : ndarray
        Transmittance at each reference wavelength
    """
    ozone_air_mass = 35.0 / (1224.0 * np.cos(zenith_r) ** 2 + 1.0) ** 0.5
    return np.exp(-OZONE_ABS * 0.03 * ozone_air_mass)


def mixed_gas_transmittance(air_mass: float) -> float:
    """Uniformly mixed gas ("tu") transmittance for the oxygen band."""
    return float(np.exp(-1.41 * 0.15 * air_mass / (1.0 + 118.3 * 0.15 * air_mass) ** 0.45))


def air_albedo(
    t_aerosol: np.ndarray,
    t_ozone: np.ndarray,
    t_rayleigh: np.ndarray,
    t_water_vapour: np.ndarray,
    tu: float,
) -> np.ndarray:
    """
    Spectral albedo of the atmosphere seen from below.

    Parameters
    ----------
    t_aerosol, t_ozone, t_rayleigh, t_water_vapour : ndarray
        Component transmittances
    tu : float
        Mixed gas transmittance, applied at the last reference wavelength

    Returns
    -------
    albedo : ndarray
        Air albedo at each reference wavelength
    """
    albedo = t_ozone * t_water_vapour * (
        t_aerosol * (1.0 - t_rayleigh) * 0.5
        + t_rayleigh * (1.0 - t_aerosol) * 0.22 * 0.928
    )
    albedo[TU_DIRECT_INDEX] *= tu

    return albedo

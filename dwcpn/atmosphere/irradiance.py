"""
Spectral surface irradiance.

Synthesises direct and diffuse spectral irradiance at sea level for a solar
zenith angle, then corrects it for the Earth-Sun distance, cloud cover and
surface reflection, converts it to quantum units and calibrates it against
the observed daily PAR.

References
----------
- Bird, R.E. (1984). A simple, solar spectral model for direct-normal and
  diffuse horizontal irradiance. Solar Energy, 32, 461-471.
- Thekaekara, M.P. (1974). Extraterrestrial solar spectrum, 3000-6100 A at
  1-A intervals. Applied Optics, 13, 518-522.
- Sathyendranath, S. & Platt, T. (1988). The spectral irradiance field at the
  surface and in the interior of the ocean: a model for applications in
  oceanography and remote sensing. J. Geophys. Res., 93, 9270-9280.
"""

import logging
from typing import Tuple

import numpy as np

from dwcpn.atmosphere.transmittance import (
    rayleigh_transmittance,
    aerosol_transmittance,
    water_vapour_transmittance,
    ozone_transmittance,
    mixed_gas_transmittance,
    air_albedo,
    TU_DIRECT_INDEX,
    TU_DIFFUSE_INDEX,
)
from dwcpn.utils.air_mass import compute_airmass, DEFAULT_AIR_MASS
from dwcpn.utils.constants import (
    WL_ARRAY,
    DELTA_LAMBDA,
    TRANSMITTANCE_WAVELENGTHS,
    TRANSMITTANCE_WL_COUNT,
    ET_SPECTRAL_IRRADIANCE,
    DIFFUSE_CORRECTION,
    DIFFUSE_CORRECTION_ZENITH,
    THEKAEKARA_DAYS,
    THEKAEKARA_IRRADIANCE,
    REFERENCE_SOLAR_CONSTANT,
    WATER_REFRACTIVE_INDEX,
    DIFFUSE_TRANSMISSION,
)
from dwcpn.utils.interpolation import interpolate_spectrum

logger = logging.getLogger(__name__)

# Reference grid index of 550 nm, where the diffuse correction switches scheme
_CORRECTION_MIDPOINT_INDEX = 15


def lookup_thekaekara_correction(day_of_year: int) -> float:
    """
    Solar constant for a day of the year.

    Parameters
    ----------
    day_of_year : int
        Day of the year (1-366)

    Returns
    -------
    solar_constant : float
        Solar constant [W m^-2], piecewise-linear in the Thekaekara table
    """
    return float(np.interp(day_of_year, THEKAEKARA_DAYS, THEKAEKARA_IRRADIANCE))


def find_correction_index(zenith_d: float) -> int:
    """Index of the first correction table row whose zenith exceeds ``zenith_d``."""
    for i, zenith in enumerate(DIFFUSE_CORRECTION_ZENITH):
        if zenith_d < zenith:
            return max(i, 1)
    return len(DIFFUSE_CORRECTION_ZENITH) - 1


def interpolate_correction_factor(zenith_d: float) -> np.ndarray:
    """
    Diffuse correction factors on the reference wavelength grid.

    The five tabulated factors are first interpolated in zenith angle, then
    expanded to the 24 reference wavelengths in two segments: five equal
    steps between each of the first four table wavelengths (400-550 nm), and
    steps proportional to the wavelength spacing from 550 to 710 nm.

    Parameters
    ----------
    zenith_d : float
        Solar zenith angle in degrees

    Returns
    -------
    correction : ndarray
        Correction factor at each reference wavelength
    """
    idx = find_correction_index(zenith_d)

    upper = DIFFUSE_CORRECTION[idx]
    lower = DIFFUSE_CORRECTION[idx - 1]
    fraction = (zenith_d - DIFFUSE_CORRECTION_ZENITH[idx - 1]) / (
        DIFFUSE_CORRECTION_ZENITH[idx] - DIFFUSE_CORRECTION_ZENITH[idx - 1]
    )
    factors = (upper - lower) * fraction + lower

    correction = np.zeros(TRANSMITTANCE_WL_COUNT)
    correction[0] = factors[0]

    k = 0
    for band in range(1, 4):
        c_inc = (factors[band - 1] - factors[band]) / 5.0
        for _ in range(5):
            k += 1
            correction[k] = correction[k - 1] - c_inc

    # 550 -> 710 nm
    c_dif = factors[4] - factors[3]
    wl_dif = TRANSMITTANCE_WAVELENGTHS[-1] - TRANSMITTANCE_WAVELENGTHS[_CORRECTION_MIDPOINT_INDEX]

    for l1 in range(_CORRECTION_MIDPOINT_INDEX + 1, TRANSMITTANCE_WL_COUNT):
        wl_inc = (TRANSMITTANCE_WAVELENGTHS[l1] - TRANSMITTANCE_WAVELENGTHS[l1 - 1]) / wl_dif
        k += 1
        correction[k] = correction[k - 1] + c_dif * wl_inc

    return correction


def compute_direct_irradiance(
    t_aerosol: np.ndarray,
    t_ozone: np.ndarray,
    t_rayleigh: np.ndarray,
    tu: float,
    t_water_vapour: np.ndarray,
) -> np.ndarray:
    """Direct normal spectral irradiance on the reference grid [W m^-2 um^-1]."""
    direct = ET_SPECTRAL_IRRADIANCE * t_rayleigh * t_aerosol * t_water_vapour * t_ozone
    direct[TU_DIRECT_INDEX] *= tu
    return direct


def compute_diffuse_irradiance(
    zenith_r: float,
    zenith_d: float,
    direct: np.ndarray,
    albedo: np.ndarray,
    t_aerosol: np.ndarray,
    t_ozone: np.ndarray,
    t_rayleigh: np.ndarray,
    tu: float,
    t_water_vapour: np.ndarray,
) -> np.ndarray:
    """
    Diffuse spectral irradiance on the reference grid.

    Sums the Rayleigh and aerosol scattered components, scaled by the
    zenith-dependent correction factors, and the multiply reflected part
    between the sea surface and the atmosphere.

    Parameters
    ----------
    zenith_r, zenith_d : float
        Solar zenith angle in radians and degrees
    direct : ndarray
        Direct normal irradiance on the reference grid
    albedo : ndarray
        Air albedo on the reference grid
    t_aerosol, t_ozone, t_rayleigh, t_water_vapour : ndarray
        Component transmittances
    tu : float
        Mixed gas transmittance

    Returns
    -------
    diffuse : ndarray
        Diffuse irradiance [W m^-2 um^-1]
    """
    correction = interpolate_correction_factor(zenith_d)
    cos_z = np.cos(zenith_r)

    xx = ET_SPECTRAL_IRRADIANCE * cos_z * t_ozone * t_water_vapour
    rayleigh_part = xx * t_aerosol * (1.0 - t_rayleigh) * 0.5
    aerosol_part = xx * t_rayleigh * (1.0 - t_aerosol * 0.928 * 0.82)

    rayleigh_part[TU_DIFFUSE_INDEX] *= tu
    aerosol_part[TU_DIFFUSE_INDEX] *= tu

    scattered = (rayleigh_part + aerosol_part) * correction
    reflected = (direct * cos_z + scattered) * albedo * 0.05 / (1.0 - 0.05 * albedo)

    return scattered + reflected


def compute_irradiance_components(zenith_r: float, zenith_d: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Direct and diffuse spectral irradiance at sea level.

    The air albedo is evaluated with a fixed air mass of 1.90; transmittances
    for the beam are then recomputed with the zenith-dependent air mass.

    Parameters
    ----------
    zenith_r : float
        Solar zenith angle in radians
    zenith_d : float
        Solar zenith angle in degrees

    Returns
    -------
    direct : ndarray
        Direct irradiance on WL_ARRAY [W m^-2 um^-1]
    diffuse : ndarray
        Diffuse irradiance on WL_ARRAY [W m^-2 um^-1]
    """
    albedo = air_albedo(
        aerosol_transmittance(DEFAULT_AIR_MASS),
        ozone_transmittance(zenith_r),
        rayleigh_transmittance(DEFAULT_AIR_MASS),
        water_vapour_transmittance(DEFAULT_AIR_MASS),
        mixed_gas_transmittance(DEFAULT_AIR_MASS),
    )

    air_mass = compute_airmass(zenith_r, zenith_d)
    t_rayleigh = rayleigh_transmittance(air_mass)
    t_aerosol = aerosol_transmittance(air_mass)
    t_water_vapour = water_vapour_transmittance(air_mass)
    t_ozone = ozone_transmittance(zenith_r)
    tu = mixed_gas_transmittance(air_mass)

    direct = compute_direct_irradiance(t_aerosol, t_ozone, t_rayleigh, tu, t_water_vapour)
    diffuse = compute_diffuse_irradiance(
        zenith_r,
        zenith_d,
        direct,
        albedo,
        t_aerosol,
        t_ozone,
        t_rayleigh,
        tu,
        t_water_vapour,
    )

    return (
        interpolate_spectrum(TRANSMITTANCE_WAVELENGTHS, direct, WL_ARRAY),
        interpolate_spectrum(TRANSMITTANCE_WAVELENGTHS, diffuse, WL_ARRAY),
    )


def fresnel_reflectance(zenith_r: float) -> float:
    """
    Fresnel reflectance of the direct beam at a flat sea surface.

    Parameters
    ----------
    zenith_r : float
        Solar zenith angle in radians

    Returns
    -------
    reflectance : float
        Fraction of the direct beam reflected (unpolarised light)
    """
    if zenith_r < 1e-6:
        # normal incidence limit
        return float(((WATER_REFRACTIVE_INDEX - 1.0) / (WATER_REFRACTIVE_INDEX + 1.0)) ** 2)

    zenith_w = np.arcsin(np.sin(zenith_r) / WATER_REFRACTIVE_INDEX)

    reflectance = 0.5 * np.sin(zenith_r - zenith_w) ** 2 / np.sin(zenith_r + zenith_w) ** 2
    reflectance += 0.5 * np.tan(zenith_r - zenith_w) ** 2 / np.tan(zenith_r + zenith_w) ** 2

    return float(reflectance)


def watts_to_einsteins(wavelengths: np.ndarray) -> np.ndarray:
    """Per-wavelength factor converting W m^-2 um^-1 to einstein m^-2 h^-1 nm^-1."""
    return np.asarray(wavelengths, dtype=float) * 36.0 / (19.87 * 6.022 * 10e6)


def correct_and_recompute_irradiance_components(
    direct: np.ndarray,
    diffuse: np.ndarray,
    solar_correction: float,
    iom: float,
    day_length: float,
    sunrise: float,
    zenith_r: float,
    time: float,
    cloud_cover: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Calibrate the modelled spectrum against the observed daily PAR.

    Steps:

    1. Rescale both components by ``solar_correction / 1353``.
    2. Redistribute direct and diffuse light for cloud cover.
    3. Convert to quantum units; apply Fresnel loss to the direct beam and a
       fixed transmission to the diffuse light.
    4. Rescale so the integrated spectrum equals the PAR curve
       ``iom * sin(pi * (time - sunrise) / day_length)``.

    The modelled spectrum and the observed PAR generally disagree in
    magnitude; step 4 anchors the model to the observation and keeps only the
    spectral shape and the direct/diffuse split from the model.

    Parameters
    ----------
    direct, diffuse : ndarray
        Spectral components from :func:`compute_irradiance_components`
    solar_correction : float
        Solar constant for the day [W m^-2]
    iom : float
        Noon irradiance maximum [einstein m^-2 h^-1]
    day_length : float
        Day length in hours
    sunrise : float
        Sunrise in local solar hours
    zenith_r : float
        Solar zenith angle in radians
    time : float
        Local solar hour of the timestep
    cloud_cover : float
        Cloud cover in percent (0-100)

    Returns
    -------
    direct_corrected : ndarray
        Direct irradiance just below the surface [einstein m^-2 h^-1 nm^-1]
    diffuse_corrected : ndarray
        Diffuse irradiance just below the surface [einstein m^-2 h^-1 nm^-1]
    """
    cos_z = np.cos(zenith_r)

    direct_corrected = direct * solar_correction / REFERENCE_SOLAR_CONSTANT
    diffuse_corrected = diffuse * solar_correction / REFERENCE_SOLAR_CONSTANT

    direct_integrated = float(np.sum(direct * cos_z))
    diffuse_integrated = float(np.sum(diffuse))
    surface_irradiance = direct_integrated + diffuse_integrated

    # cloud effect
    albedo = 0.28 / (1.0 + 6.43 * cos_z)
    cc = cloud_cover / 100.0
    idir1 = direct_integrated * (1.0 - cc)
    flux = ((1.0 - 0.5 * cc) * (0.82 - albedo * (1.0 - cc)) * cos_z) / ((0.82 - albedo) * cos_z)
    idif1 = surface_irradiance * flux - idir1

    direct_corrected *= idir1 / direct_integrated
    diffuse_corrected *= idif1 / diffuse_integrated

    reflection = fresnel_reflectance(zenith_r)

    wl_coefficient = watts_to_einsteins(WL_ARRAY)
    direct_corrected = direct_corrected * wl_coefficient * cos_z
    diffuse_corrected = diffuse_corrected * wl_coefficient

    surface_irradiance = float(np.sum(direct_corrected + diffuse_corrected)) * DELTA_LAMBDA

    direct_corrected *= 1.0 - reflection
    diffuse_corrected *= DIFFUSE_TRANSMISSION

    par_surface_irradiance = iom * np.sin(np.pi * (time - sunrise) / day_length)
    adjustment = par_surface_irradiance / surface_irradiance

    logger.debug(
        f"t={time:.3f} h: surface PAR {par_surface_irradiance:.4f}, "
        f"spectral adjustment {adjustment:.4g}"
    )

    return direct_corrected * adjustment, diffuse_corrected * adjustment

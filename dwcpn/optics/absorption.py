"""
Inherent optical properties on the working wavelength grid.

Phytoplankton absorption follows Bricaud et al. (1998); default scattering
and yellow-substance spectra follow Morel (1974) and Bricaud et al. (1981).

References
----------
- Bricaud, A., Morel, A., Babin, M., Allali, K. & Claustre, H. (1998).
  Variations of light absorption by suspended particles with chlorophyll a
  concentration in oceanic (case 1) waters. J. Geophys. Res., 103, 31033-31044.
- Morel, A. (1974). Optical properties of pure water and pure sea water.
  In Optical Aspects of Oceanography, Academic Press, 1-24.
- Bricaud, A., Morel, A. & Prieur, L. (1981). Absorption by dissolved organic
  matter of the sea (yellow substance) in the UV and visible domains.
  Limnol. Oceanogr., 26, 43-53.
"""

from typing import Tuple

import numpy as np

from dwcpn.utils.constants import WL_ARRAY, BRICAUD_A, BRICAUD_E

# Scattering coefficient of pure sea water at 500 nm [m^-1]
BW500 = 0.00288

# Backscattering ratio reference value at 488 nm
BR488 = 0.00027

# Spectral slope of yellow-substance absorption [nm^-1]
YELLOW_SUBSTANCE_SLOPE = 0.014


def calculate_bw(wavelengths: np.ndarray = WL_ARRAY) -> np.ndarray:
    """Scattering coefficient of pure sea water, ``bw = 0.00288 (lambda/500)^-4.3``."""
    return BW500 * (np.asarray(wavelengths, dtype=float) / 500.0) ** -4.3


def calculate_bbr(wavelengths: np.ndarray = WL_ARRAY) -> np.ndarray:
    """Backscattering term, ``bbr = 0.5 * 0.00027 (lambda/488)^-5.3``."""
    return 0.5 * BR488 * (np.asarray(wavelengths, dtype=float) / 488.0) ** -5.3


def calculate_ay(wavelengths: np.ndarray = WL_ARRAY) -> np.ndarray:
    """Yellow-substance absorption normalised at 440 nm."""
    return np.exp(-YELLOW_SUBSTANCE_SLOPE * (np.asarray(wavelengths, dtype=float) - 440.0))


def calc_ac(chl: float) -> Tuple[np.ndarray, float]:
    """
    Phytoplankton absorption spectrum for a chlorophyll concentration.

    a_ph(lambda) = A(lambda) * chl^E(lambda)

    Parameters
    ----------
    chl : float
        Chlorophyll-a concentration [mg m^-3]

    Returns
    -------
    ac : ndarray
        Phytoplankton absorption on WL_ARRAY [m^-1]
    ac_mean : float
        Spectral mean of ``ac``; zero when ``chl`` is zero
    """
    if chl <= 0.0:
        return np.zeros_like(BRICAUD_A), 0.0

    ac = BRICAUD_A * chl**BRICAUD_E

    return ac, float(np.mean(ac))

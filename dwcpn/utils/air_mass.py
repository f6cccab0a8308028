"""
Air mass functions for the atmospheric irradiance model.

References
----------
- Kasten, F. (1966). A new table and approximation formula for the relative
  optical air mass. Arch. Meteorol. Geophys. Bioklimatol. B14, 206-223.
- Bird, R.E. & Riordan, C. (1986). Simple solar spectral model for direct and
  diffuse irradiance on horizontal and tilted planes at the earth's surface
  for cloudless atmospheres. J. Clim. Appl. Meteorol., 25, 87-97.
"""

import numpy as np

# Air mass used before the zenith-dependent value is known
DEFAULT_AIR_MASS = 1.90


def compute_airmass(zenith_r: float, zenith_d: float) -> float:
    """
    Relative optical air mass for a solar zenith angle.

    Uses the Kasten (1966) approximation
    ``m = 1 / (cos(z) + 0.15 * (93.885 - z)^-1.253)``, floored at 1.0.

    Parameters
    ----------
    zenith_r : float
        Solar zenith angle in radians
    zenith_d : float
        The same angle in degrees

    Returns
    -------
    air_mass : float
        Relative optical air mass (dimensionless, >= 1)
    """
    if zenith_d >= 93.885:
        raise ValueError(
            f"Solar zenith angle must be below 93.885 deg for the air mass formula. "
            f"Got {zenith_d:.2f} deg"
        )

    air_mass = 1.0 / (np.cos(zenith_r) + 0.15 * (93.885 - zenith_d) ** -1.253)

    return max(float(air_mass), 1.0)

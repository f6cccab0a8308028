"""
Utility functions, model grids and static tables.

Constants
---------
WL_ARRAY : ndarray
    Working wavelength grid (nm)
DELTA_LAMBDA : float
    Wavelength step (nm)
DEPTH_PROFILE_STEP : float
    Depth step (m)
DEPTH_PROFILE_COUNT : int
    Number of depth samples
TIMESTEPS : int
    Number of timesteps between the 80 deg zenith crossing and noon

Functions
---------
linear_interp
    Table lookup with linear interpolation
interpolate_spectrum
    Resample a spectrum onto another wavelength grid
compute_airmass
    Relative optical air mass (Kasten 1966), floored at 1.0
"""

from dwcpn.utils.constants import (
    WL_ARRAY,
    WL_COUNT,
    DELTA_LAMBDA,
    DEPTH_PROFILE_STEP,
    DEPTH_PROFILE_COUNT,
    TIMESTEPS,
)
from dwcpn.utils.interpolation import linear_interp, interpolate_spectrum
from dwcpn.utils.air_mass import compute_airmass, DEFAULT_AIR_MASS

__all__ = [
    "WL_ARRAY",
    "WL_COUNT",
    "DELTA_LAMBDA",
    "DEPTH_PROFILE_STEP",
    "DEPTH_PROFILE_COUNT",
    "TIMESTEPS",
    "linear_interp",
    "interpolate_spectrum",
    "compute_airmass",
    "DEFAULT_AIR_MASS",
]

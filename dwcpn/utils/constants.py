"""
Model grids, physical constants and static optical tables.

All tables are read-only numpy arrays shared by every component. Units are
noted next to each constant.
"""

import numpy as np


def _frozen(values) -> np.ndarray:
    """Return a read-only float64 array."""
    array = np.array(values, dtype=float)
    array.setflags(write=False)
    return array


# =============================================================================
# Working grids
# =============================================================================

# Wavelength grid of the photosynthetically active spectrum [nm]
WL_ARRAY = _frozen(np.arange(400.0, 701.0, 10.0))
WL_COUNT = len(WL_ARRAY)

# Wavelength step used for spectral integration [nm]
DELTA_LAMBDA = 10.0

# Vertical resolution of the depth profile [m]
DEPTH_PROFILE_STEP = 0.5

# Number of depth samples (0 to 250 m)
DEPTH_PROFILE_COUNT = 501

# Number of timesteps between the 80 degree zenith crossing and solar noon
TIMESTEPS = 10

# =============================================================================
# Model thresholds
# =============================================================================

# Zenith angle at which integration starts [degrees]
ZENITH_CUTOFF_DEG = 80.0

# A timestep is valid when its zenith angle is below this value [degrees]
ZENITH_VALID_LIMIT_DEG = 80.00005

# Fraction of surface PAR that defines the euphotic depth
EUPHOTIC_LIGHT_FRACTION = 0.01

# Daily production above this value is treated as a numeric fault [mg C m^-2 d^-1]
IMPLAUSIBLE_PRODUCTION = 50000.0

# Reference solar constant of the spectral tables [W m^-2]
REFERENCE_SOLAR_CONSTANT = 1353.0

# Refractive index of sea water
WATER_REFRACTIVE_INDEX = 1.333

# Mean cosine of the diffuse light field just below the surface
DIFFUSE_MU_D = 0.831

# Transmission of diffuse light through the sea surface
DIFFUSE_TRANSMISSION = 0.945

# Converts irradiance in einstein m^-2 h^-1 to W m^-2 for the P-I response
EINSTEIN_TO_WATTS = 6022.0 / (2.77 * 36.0)

# =============================================================================
# Pure water and phytoplankton absorption on WL_ARRAY
# =============================================================================

# Absorption of pure water [m^-1] (Pope & Fry, 1997)
AW = _frozen([
    0.00663, 0.00473, 0.00454, 0.00495, 0.00635, 0.00922, 0.00979, 0.0106,
    0.0127, 0.015, 0.0204, 0.0325, 0.0409, 0.0434, 0.0474, 0.0565, 0.0619,
    0.0695, 0.0896, 0.1351, 0.2224, 0.2644, 0.2755, 0.2916, 0.3108, 0.34,
    0.41, 0.439, 0.465, 0.516, 0.624,
])

# Phytoplankton absorption coefficients, a_ph = A * chl^E (Bricaud et al., 1998)
BRICAUD_A = _frozen([
    0.0241, 0.0287, 0.0328, 0.0359, 0.0378, 0.0350, 0.0328, 0.0309, 0.0281,
    0.0254, 0.0210, 0.0162, 0.0126, 0.0103, 0.0085, 0.0070, 0.0057, 0.0050,
    0.0051, 0.0054, 0.0052, 0.0055, 0.0061, 0.0066, 0.0071, 0.0078, 0.0108,
    0.0174, 0.0161, 0.0069, 0.0025,
])

BRICAUD_E = _frozen([
    0.6877, 0.6834, 0.6664, 0.6478, 0.6266, 0.5993, 0.5961, 0.5970, 0.5890,
    0.6074, 0.6529, 0.7212, 0.7939, 0.8500, 0.9036, 0.9312, 0.9345, 0.9298,
    0.8933, 0.8589, 0.8410, 0.8548, 0.8704, 0.8638, 0.8524, 0.8155, 0.8233,
    0.8138, 0.8284, 0.9255, 1.0286,
])

# =============================================================================
# Atmospheric transmittance tables (DO NOT change one without the others)
# =============================================================================

TRANSMITTANCE_WAVELENGTHS = _frozen([
    400.000, 410.000, 420.000, 430.000, 440.000, 450.000, 460.000, 470.000,
    480.000, 490.000, 500.000, 510.000, 520.000, 530.000, 540.000, 550.000,
    570.000, 593.000, 610.000, 630.000, 656.000, 667.600, 690.000, 710.000,
])
TRANSMITTANCE_WL_COUNT = len(TRANSMITTANCE_WAVELENGTHS)

# Ozone absorption coefficients
OZONE_ABS = _frozen([
    0.000, 0.000, 0.000, 0.000, 0.000, 0.003, 0.006, 0.009, 0.014, 0.021,
    0.030, 0.040, 0.048, 0.063, 0.075, 0.095, 0.120, 0.119, 0.132, 0.120,
    0.065, 0.060, 0.028, 0.018,
])

# Precipitable water [cm]
PRECIPITABLE_WATER = 2.0

# Water vapour absorption coefficients
WATER_VAPOUR_ABS = _frozen([
    0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.000,
    0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.000, 0.075, 0.000, 0.000,
    0.000, 0.000, 0.016, 0.0125,
])

# Angstrom turbidity coefficients below / above 500 nm
AEROSOL_ALPHA1 = 1.0274
AEROSOL_BETA1 = 0.1324
AEROSOL_ALPHA2 = 1.206
AEROSOL_BETA2 = 0.117

# First reference wavelength index that uses the second aerosol regime
AEROSOL_SPLIT_INDEX = 10

# Extra-terrestrial spectral irradiance [W m^-2 um^-1]
ET_SPECTRAL_IRRADIANCE = _frozen([
    1479.1, 1701.3, 1740.4, 1587.2, 1837.0, 2005.0, 2043.0, 1987.0, 2027.0,
    1896.0, 1909.0, 1927.0, 1831.0, 1891.0, 1898.0, 1892.0, 1840.0, 1768.0,
    1728.0, 1658.0, 1524.0, 1531.0, 1420.0, 1399.0,
])

# Diffuse irradiance correction factors: 7 zenith bins x 5 reference wavelengths
DIFFUSE_CORRECTION = _frozen([
    [1.11, 1.04, 1.15, 1.12, 1.32],
    [1.13, 1.05, 1.00, 0.96, 1.12],
    [1.18, 1.09, 1.00, 0.96, 1.07],
    [1.24, 1.11, 0.99, 0.94, 1.02],
    [1.46, 1.24, 1.06, 0.99, 1.10],
    [1.70, 1.34, 1.07, 0.96, 0.90],
    [2.61, 1.72, 1.22, 1.04, 0.80],
])

# Zenith angles [degrees] of the DIFFUSE_CORRECTION rows
DIFFUSE_CORRECTION_ZENITH = _frozen([0.0, 37.0, 48.19, 60.0, 70.0, 75.0, 80.0])

# =============================================================================
# Thekaekara solar constant table
# =============================================================================

THEKAEKARA_DAYS = _frozen([
    0., 3., 31., 42., 59., 78., 90., 93., 120., 133., 151., 170., 181., 183.,
    206., 212., 243., 265., 273., 277., 304., 306., 334., 355., 365.,
])

THEKAEKARA_IRRADIANCE = _frozen([
    1399., 1399., 1393., 1389., 1378., 1364., 1355., 1353., 1332., 1324.,
    1316., 1310., 1309., 1309., 1312., 1313., 1329., 1344., 1350., 1353.,
    1347., 1375., 1392., 1398., 1399.,
])

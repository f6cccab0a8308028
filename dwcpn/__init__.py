"""
DWCPN: depth-, wavelength- and time-resolved ocean primary production.

Computes daily water-column primary production and euphotic depth from
latitude, day of year, chlorophyll, photosynthesis-irradiance parameters,
cloud cover and daily surface PAR (Platt & Sathyendranath 1988).

Modules
-------
geometry
    Solar declination, sunrise and zenith angle through the morning
atmosphere
    Spectral direct and diffuse irradiance at sea level, calibrated to PAR
optics
    Absorption, scattering and spectral light attenuation in the water
profiles
    Chlorophyll, production and secondary population depth profiles
core
    Daily driver and exception hierarchy
config
    Input and settings records, configuration loading
validation
    Reference scenario benchmarks
utils
    Grids, static tables and interpolation helpers
"""

__version__ = "0.1.0"
__author__ = "DWCPN Contributors"

from dwcpn.core import (
    calc_pp,
    ModelOutputs,
    TimeSeries,
    DwcpnError,
    InvalidInput,
    DegenerateDay,
    NoEuphoticDepthFound,
    ImplausibleProduction,
    AttenuationError,
)
from dwcpn.config import ModelInputs, ModelSettings, SecondaryPopulationSettings, ConfigurationManager

__all__ = [
    "__version__",
    "calc_pp",
    "ModelOutputs",
    "TimeSeries",
    "ModelInputs",
    "ModelSettings",
    "SecondaryPopulationSettings",
    "ConfigurationManager",
    "DwcpnError",
    "InvalidInput",
    "DegenerateDay",
    "NoEuphoticDepthFound",
    "ImplausibleProduction",
    "AttenuationError",
]

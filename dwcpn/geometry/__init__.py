"""
Solar Geometry Module
=====================

Solar position over the half day used by the production model:

- Solar declination and sunrise
- Hour of the 80 deg zenith crossing
- Time and zenith angle series from the crossing to solar noon
"""

from dwcpn.geometry.solar import (
    solar_declination,
    compute_sunrise,
    compute_zenith_time,
    generate_time_array,
    generate_zenith_array,
)

__all__ = [
    "solar_declination",
    "compute_sunrise",
    "compute_zenith_time",
    "generate_time_array",
    "generate_zenith_array",
]

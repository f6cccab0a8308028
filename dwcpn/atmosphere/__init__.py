"""
Atmospheric irradiance model.

transmittance
    Rayleigh, aerosol, water vapour, ozone and mixed gas transmittances,
    air albedo
irradiance
    Direct/diffuse spectral irradiance at sea level, Thekaekara solar
    constant, cloud/reflection correction and PAR calibration
"""

from dwcpn.atmosphere.irradiance import (
    compute_irradiance_components,
    correct_and_recompute_irradiance_components,
    lookup_thekaekara_correction,
    interpolate_correction_factor,
    fresnel_reflectance,
)
from dwcpn.atmosphere.transmittance import (
    rayleigh_transmittance,
    aerosol_transmittance,
    water_vapour_transmittance,
    ozone_transmittance,
    mixed_gas_transmittance,
    air_albedo,
)

__all__ = [
    "compute_irradiance_components",
    "correct_and_recompute_irradiance_components",
    "lookup_thekaekara_correction",
    "interpolate_correction_factor",
    "fresnel_reflectance",
    "rayleigh_transmittance",
    "aerosol_transmittance",
    "water_vapour_transmittance",
    "ozone_transmittance",
    "mixed_gas_transmittance",
    "air_albedo",
]

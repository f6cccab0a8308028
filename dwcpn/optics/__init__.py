"""
Underwater optics: absorption, scattering and spectral light attenuation.
"""

from dwcpn.optics.absorption import calc_ac, calculate_bw, calculate_bbr, calculate_ay
from dwcpn.optics.attenuation import (
    LightProfile,
    init_mu_d_and_i_z,
    calc_i_z_decay,
    calc_light_decay_profile,
)

__all__ = [
    "calc_ac",
    "calculate_bw",
    "calculate_bbr",
    "calculate_ay",
    "LightProfile",
    "init_mu_d_and_i_z",
    "calc_i_z_decay",
    "calc_light_decay_profile",
]

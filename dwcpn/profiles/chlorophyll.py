"""
Vertical chlorophyll profiles.

The mixed layer is uniform at the surface concentration. Below it the
profile is either uniform, zero (mixed-layer-only runs) or a shifted
Gaussian deep chlorophyll maximum (Platt et al. 1988) scaled to be
continuous at the base of the mixed layer.
"""

import logging
from typing import Tuple

import numpy as np

logger = logging.getLogger(__name__)

PROFILE_SHAPES = ("gaussian", "uniform")


def depth_grid(depth_step: float, depth_count: int) -> np.ndarray:
    """Depth samples 0, dz, 2dz, ... [m]."""
    return np.arange(depth_count) * depth_step


def gaussian_background(chl: float, mld: float, z_m: float, rho: float, sigma: float) -> float:
    """
    Background concentration B0 of the shifted Gaussian profile.

    Chosen so that ``B0 * (1 + rho * g(mld)) == chl``, i.e. the profile is
    continuous at the base of the mixed layer.
    """
    peak = np.exp(-((mld - z_m) ** 2) / (2.0 * sigma**2))
    return float(chl / (1.0 + rho * peak))


def gen_chl_profile(inputs, settings) -> Tuple[np.ndarray, np.ndarray]:
    """
    Generate the depth grid and chlorophyll profile for a run.

    Parameters
    ----------
    inputs : ModelInputs
        Uses ``chl``, ``mld``, ``z_m``, ``rho``, ``sigma`` and ``z_bottom``
    settings : ModelSettings
        Uses ``mld_only``, ``profile_shape``, ``depth_step`` and ``depth_count``

    Returns
    -------
    depth : ndarray
        Depth samples [m]
    chl : ndarray
        Chlorophyll at each sample [mg m^-3]; zero below the first
        sample at or past the seafloor
    """
    depth = depth_grid(settings.depth_step, settings.depth_count)
    chl = np.full(depth.shape, float(inputs.chl))

    below_mld = depth >= inputs.mld

    if settings.mld_only:
        chl[below_mld] = 0.0
    elif settings.profile_shape == "gaussian":
        b0 = gaussian_background(inputs.chl, inputs.mld, inputs.z_m, inputs.rho, inputs.sigma)
        z = depth[below_mld]
        chl[below_mld] = b0 * (1.0 + inputs.rho * np.exp(-((z - inputs.z_m) ** 2) / (2.0 * inputs.sigma**2)))
    elif settings.profile_shape != "uniform":
        raise ValueError(f"Unknown profile shape: {settings.profile_shape}")

    # keep the first sample at or below the seafloor so the bottom is bracketed
    chl[depth - settings.depth_step >= abs(inputs.z_bottom)] = 0.0

    logger.debug(
        f"Chlorophyll profile ({settings.profile_shape}, mld_only={settings.mld_only}): "
        f"surface={chl[0]:.4g}, max={chl.max():.4g} mg m^-3"
    )

    return depth, np.maximum(chl, 0.0)

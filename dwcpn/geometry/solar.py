"""
Solar geometry for the half-day time series.

Computes solar declination, sunrise, the hour at which the sun crosses a
given zenith angle, and the zenith angle at each model timestep. Times are
local solar hours (noon = 12.0).

References
----------
- Spencer, J.W. (1971). Fourier series representation of the position of the
  sun. Search, 2(5), 172.
- Iqbal, M. (1983). An Introduction to Solar Radiation. Academic Press.
"""

import logging
from typing import Tuple

import numpy as np

from dwcpn.core.errors import DegenerateDay
from dwcpn.utils.constants import TIMESTEPS

logger = logging.getLogger(__name__)


def solar_declination(day_of_year: int) -> float:
    """
    Solar declination for a day of the year.

    Parameters
    ----------
    day_of_year : int
        Day of the year (1-366)

    Returns
    -------
    declination : float
        Solar declination in radians
    """
    theta = 2.0 * np.pi * day_of_year / 365.0

    declination_deg = (
        0.39637
        - 22.9133 * np.cos(theta)
        + 4.02543 * np.sin(theta)
        - 0.3872 * np.cos(2.0 * theta)
        + 0.052 * np.sin(2.0 * theta)
    )

    return float(np.radians(declination_deg))


def compute_sunrise(day_of_year: int, latitude: float) -> Tuple[float, float, float]:
    """
    Compute local sunrise time.

    Parameters
    ----------
    day_of_year : int
        Day of the year (1-366)
    latitude : float
        Latitude in degrees (north positive)

    Returns
    -------
    sunrise : float
        Sunrise in local solar hours. 0.0 for polar day, 12.0 for polar night.
    declination : float
        Solar declination in radians
    phi : float
        Latitude in radians

    Notes
    -----
    Polar day and night are returned as the boundary values rather than
    raised, so callers decide how to treat them.
    """
    declination = solar_declination(day_of_year)
    phi = float(np.radians(latitude))

    cos_h = -np.tan(phi) * np.tan(declination)

    if cos_h <= -1.0:
        # Polar day - sun never sets
        return 0.0, declination, phi
    if cos_h >= 1.0:
        # Polar night - sun never rises
        return 12.0, declination, phi

    hour_angle = np.arccos(cos_h)
    sunrise = 12.0 - hour_angle * 12.0 / np.pi

    return float(sunrise), declination, phi


def compute_zenith_time(declination: float, phi: float, target_zenith_deg: float) -> float:
    """
    Morning hour at which the sun crosses a zenith angle.

    Parameters
    ----------
    declination : float
        Solar declination in radians
    phi : float
        Latitude in radians
    target_zenith_deg : float
        Zenith angle to cross, in degrees

    Returns
    -------
    hour : float
        Local solar hour of the crossing (before noon)

    Raises
    ------
    DegenerateDay
        If the sun stays above or below the target zenith all day
    """
    cos_target = np.cos(np.radians(target_zenith_deg))
    cos_h = (cos_target - np.sin(declination) * np.sin(phi)) / (
        np.cos(declination) * np.cos(phi)
    )

    if cos_h > 1.0:
        raise DegenerateDay(
            f"Sun never reaches {target_zenith_deg:.1f} deg zenith "
            f"(latitude {np.degrees(phi):.2f} deg)"
        )
    if cos_h < -1.0:
        raise DegenerateDay(
            f"Sun never drops below {target_zenith_deg:.1f} deg zenith "
            f"(latitude {np.degrees(phi):.2f} deg)"
        )

    hour_angle = np.arccos(cos_h)

    return float(12.0 - hour_angle * 12.0 / np.pi)


def generate_time_array(start_time: float, timesteps: int = TIMESTEPS) -> Tuple[np.ndarray, float]:
    """
    Evenly spaced times from ``start_time`` to solar noon inclusive.

    Parameters
    ----------
    start_time : float
        First time (local solar hours), normally the 80 deg zenith crossing
    timesteps : int, optional
        Number of time samples (default: TIMESTEPS)

    Returns
    -------
    times : ndarray
        Time samples in hours
    delta_t : float
        Spacing between samples in hours
    """
    if timesteps < 2:
        raise ValueError(f"At least two timesteps are required, got {timesteps}")
    if not 0.0 <= start_time <= 12.0:
        raise ValueError(f"Start time must be between 0 and 12 h, got {start_time:.3f}")

    delta_t = (12.0 - start_time) / (timesteps - 1)
    times = start_time + delta_t * np.arange(timesteps)

    return times, delta_t


def generate_zenith_array(
    times: np.ndarray,
    declination: float,
    phi: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Solar zenith angle at each time sample.

    Parameters
    ----------
    times : ndarray
        Local solar hours
    declination : float
        Solar declination in radians
    phi : float
        Latitude in radians

    Returns
    -------
    zenith_r : ndarray
        Zenith angles in radians
    zenith_d : ndarray
        Zenith angles in degrees
    """
    hour_angle = np.pi * (np.asarray(times, dtype=float) - 12.0) / 12.0

    cos_zenith = (np.sin(declination) * np.sin(phi) +
                  np.cos(declination) * np.cos(phi) * np.cos(hour_angle))

    zenith_r = np.arccos(np.clip(cos_zenith, -1.0, 1.0))

    return zenith_r, np.degrees(zenith_r)

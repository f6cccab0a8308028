"""
Daily water-column primary production.

Orchestrates the model components for one column and one day:

- Chlorophyll profile and solar geometry
- Spectral surface irradiance, calibrated to the observed daily PAR
- Spectral light attenuation and production profile at each timestep
- Depth and time integration to daily production
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from scipy.integrate import trapezoid

from dwcpn.atmosphere.irradiance import (
    compute_irradiance_components,
    correct_and_recompute_irradiance_components,
    lookup_thekaekara_correction,
)
from dwcpn.config.settings import ModelInputs, ModelSettings
from dwcpn.core.errors import (
    DegenerateDay,
    ImplausibleProduction,
    InvalidInput,
    NoEuphoticDepthFound,
)
from dwcpn.geometry.solar import (
    compute_sunrise,
    compute_zenith_time,
    generate_time_array,
    generate_zenith_array,
)
from dwcpn.optics.attenuation import calc_light_decay_profile
from dwcpn.profiles.chlorophyll import gen_chl_profile
from dwcpn.profiles.production import compute_pp_depth_profile, integrate_column_production
from dwcpn.profiles.secondary import integrate_secondary_column
from dwcpn.utils.constants import IMPLAUSIBLE_PRODUCTION, ZENITH_CUTOFF_DEG, ZENITH_VALID_LIMIT_DEG

logger = logging.getLogger(__name__)


@dataclass
class TimeSeries:
    """Per-timestep state from the 80 deg zenith crossing to solar noon.

    Attributes:
        times: Local solar hour of each timestep
        zenith_r: Solar zenith angle [rad]
        zenith_d: Solar zenith angle [deg]
        production: Column production [mg C m^-2 h^-1]
        euphotic_depth: Euphotic depth [m]
        valid: Whether the timestep produced a production profile
    """
    times: np.ndarray
    zenith_r: np.ndarray
    zenith_d: np.ndarray
    production: np.ndarray
    euphotic_depth: np.ndarray
    valid: np.ndarray

    @property
    def delta_t(self) -> float:
        """Timestep length in hours."""
        return float(self.times[1] - self.times[0])


@dataclass
class ModelOutputs:
    """Results of a daily production run.

    Attributes:
        pp: Daily column production [mg C m^-2 d^-1]
        euphotic_depth: Maximum euphotic depth over the day [m]
        spectral_i_star: Mean spectral I* over valid timesteps
        iom: Noon irradiance maximum [einstein m^-2 h^-1]
        sunrise: Sunrise in local solar hours
        day_length: Day length in hours
        time_series: Per-timestep results
        failed_timesteps: Timesteps where no euphotic depth was found
        depth: Depth grid [m]
        chl_profile: Chlorophyll profile [mg m^-3]
        secondary_profile: Mean secondary population abundance at each depth
        secondary_pp: Daily production of the secondary population [mg C m^-2 d^-1]
    """
    pp: float
    euphotic_depth: float
    spectral_i_star: float
    iom: float
    sunrise: float
    day_length: float
    time_series: TimeSeries
    failed_timesteps: int
    depth: np.ndarray
    chl_profile: np.ndarray
    secondary_profile: Optional[np.ndarray] = None
    secondary_pp: Optional[float] = None
    metadata: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert scalar results to a dictionary."""
        return {
            "pp": self.pp,
            "euphotic_depth": self.euphotic_depth,
            "spectral_i_star": self.spectral_i_star,
            "iom": self.iom,
            "sunrise": self.sunrise,
            "day_length": self.day_length,
            "failed_timesteps": self.failed_timesteps,
            "secondary_pp": self.secondary_pp,
            "metadata": self.metadata,
        }


def integrate_daily_production(production: np.ndarray, times: np.ndarray, sunrise: float) -> float:
    """
    Integrate half-day production and double it.

    Production is taken as zero at sunrise; the trapezoidal rule runs over
    ``[sunrise, times[0], ..., noon]``. The day is symmetric about noon, so
    the half-day integral is doubled.

    Parameters
    ----------
    production : ndarray
        Column production at each timestep [mg C m^-2 h^-1]
    times : ndarray
        Local solar hour of each timestep
    sunrise : float
        Sunrise in local solar hours

    Returns
    -------
    float
        Daily production [mg C m^-2 d^-1]
    """
    t = np.concatenate(([sunrise], times))
    p = np.concatenate(([0.0], production))
    return 2.0 * float(trapezoid(p, t))


def _validate(inputs: ModelInputs, settings: ModelSettings) -> None:
    errors = inputs.validate() + settings.validate()

    if not settings.mld_only and settings.profile_shape == "gaussian" and inputs.sigma <= 0:
        errors.append("sigma must be positive for a gaussian profile")

    if errors:
        raise InvalidInput(errors)


def calc_pp(inputs: ModelInputs, settings: Optional[ModelSettings] = None) -> ModelOutputs:
    """
    Compute daily water-column primary production.

    Parameters
    ----------
    inputs : ModelInputs
        Column and day inputs
    settings : ModelSettings, optional
        Model settings; defaults to ``ModelSettings()``

    Returns
    -------
    ModelOutputs

    Raises
    ------
    InvalidInput
        If the inputs or settings fail validation
    DegenerateDay
        For polar night or polar day, or if the sun never reaches the start
        zenith angle
    ImplausibleProduction
        If daily production exceeds the sanity ceiling
    AttenuationError
        If a light profile is not monotonic

    Example:
        >>> from dwcpn import ModelInputs, calc_pp
        >>> out = calc_pp(ModelInputs(lat=43.2, iday=121, alpha_b=0.0578,
        ...                           pmb=3.294, chl=0.474, par=50.35))
        >>> out.pp > 0
        True
    """
    if settings is None:
        settings = ModelSettings()

    _validate(inputs, settings)

    depth, chl_profile = gen_chl_profile(inputs, settings)

    sunrise, declination, phi = compute_sunrise(inputs.iday, inputs.lat)
    if sunrise >= 12.0:
        raise DegenerateDay(f"No daylight on day {inputs.iday} at latitude {inputs.lat}")
    if sunrise <= 0.0:
        raise DegenerateDay(f"No sunset on day {inputs.iday} at latitude {inputs.lat}")

    start_time = compute_zenith_time(declination, phi, ZENITH_CUTOFF_DEG)
    times, delta_t = generate_time_array(start_time, settings.timesteps)
    zenith_r, zenith_d = generate_zenith_array(times, declination, phi)
    logger.debug(f"Sunrise {sunrise:.3f} h, start {start_time:.3f} h, timestep {delta_t:.3f} h")

    solar_correction = lookup_thekaekara_correction(inputs.iday)

    n_steps = len(times)
    production = np.zeros(n_steps)
    euphotic_depth = np.zeros(n_steps)
    valid = np.zeros(n_steps, dtype=bool)
    i_star = []
    failed = 0

    secondary_abundance_sum = np.zeros(len(depth)) if settings.secondary is not None else None
    secondary_production = np.zeros(n_steps)

    first_valid = None
    day_length = 0.0
    iom = 0.0

    for t in range(n_steps):
        if zenith_d[t] >= ZENITH_VALID_LIMIT_DEG:
            continue

        if first_valid is None:
            first_valid = t
            day_length = 2.0 * (12.0 - sunrise)
            if day_length <= 0.0:
                raise DegenerateDay(f"Zero day length on day {inputs.iday} at latitude {inputs.lat}")

            # noon maximum of the PAR sine curve
            iom = inputs.par * np.pi / (2.0 * day_length)

            if settings.iom_only:
                logger.info(f"Noon irradiance maximum: {iom:.4f} einstein m^-2 h^-1")
                return _outputs(
                    0.0, 0.0, 0.0, iom, sunrise, day_length,
                    times, zenith_r, zenith_d, production, euphotic_depth, valid,
                    0, depth, chl_profile,
                )

        direct, diffuse = compute_irradiance_components(zenith_r[t], zenith_d[t])
        direct, diffuse = correct_and_recompute_irradiance_components(
            direct,
            diffuse,
            solar_correction,
            iom,
            day_length,
            sunrise,
            zenith_r[t],
            times[t],
            inputs.cloud,
        )

        light = calc_light_decay_profile(
            chl_profile,
            direct,
            diffuse,
            zenith_r[t],
            inputs.yel_sub,
            inputs.ay,
            inputs.bbr,
            inputs.bw,
            inputs.alpha_b,
            settings.depth_step,
        )

        try:
            profile = compute_pp_depth_profile(
                chl_profile,
                depth,
                light.i_alpha,
                light.par,
                inputs.pmb,
                inputs.z_bottom,
                settings.depth_step,
                secondary=settings.secondary,
            )
        except NoEuphoticDepthFound as e:
            logger.warning(f"Timestep {t} (t={times[t]:.3f} h): {e}")
            failed += 1
            continue

        production[t] = integrate_column_production(profile, settings.depth_step)
        euphotic_depth[t] = profile.euphotic_depth
        valid[t] = True
        i_star.append(profile.spectral_i_star)

        if profile.secondary is not None:
            secondary_abundance_sum += profile.secondary.abundance
            secondary_production[t] = integrate_secondary_column(profile.secondary, settings.depth_step)

        logger.debug(
            f"Timestep {t}: t={times[t]:.3f} h, zenith={zenith_d[t]:.2f} deg, "
            f"column production={production[t]:.4f}, euphotic depth={euphotic_depth[t]:.2f} m"
        )

    pp_day = integrate_daily_production(production, times, sunrise)
    if pp_day > IMPLAUSIBLE_PRODUCTION:
        raise ImplausibleProduction(pp_day, IMPLAUSIBLE_PRODUCTION)

    n_valid = int(np.count_nonzero(valid))

    secondary_profile = None
    secondary_pp = None
    if settings.secondary is not None:
        secondary_profile = secondary_abundance_sum / n_valid if n_valid else secondary_abundance_sum
        secondary_pp = integrate_daily_production(secondary_production, times, sunrise)

    outputs = _outputs(
        pp_day,
        float(np.max(np.abs(euphotic_depth))),
        float(np.mean(i_star)) if i_star else 0.0,
        iom, sunrise, day_length,
        times, zenith_r, zenith_d, production, euphotic_depth, valid,
        failed, depth, chl_profile,
        secondary_profile, secondary_pp,
    )

    logger.info(
        f"Daily production {pp_day:.2f} mg C m^-2 d^-1 at lat={inputs.lat}, day={inputs.iday} "
        f"({n_valid}/{n_steps} timesteps, {failed} without euphotic depth, "
        f"max euphotic depth {outputs.euphotic_depth:.2f} m)"
    )

    return outputs


def _outputs(
    pp, max_euphotic_depth, spectral_i_star, iom, sunrise, day_length,
    times, zenith_r, zenith_d, production, euphotic_depth, valid,
    failed, depth, chl_profile, secondary_profile=None, secondary_pp=None,
) -> ModelOutputs:
    return ModelOutputs(
        pp=pp,
        euphotic_depth=max_euphotic_depth,
        spectral_i_star=spectral_i_star,
        iom=float(iom),
        sunrise=sunrise,
        day_length=day_length,
        time_series=TimeSeries(
            times=times,
            zenith_r=zenith_r,
            zenith_d=zenith_d,
            production=production,
            euphotic_depth=euphotic_depth,
            valid=valid,
        ),
        failed_timesteps=failed,
        depth=depth,
        chl_profile=chl_profile,
        secondary_profile=secondary_profile,
        secondary_pp=secondary_pp,
        metadata={"delta_t": float(times[1] - times[0]), "delta_prestart": float(times[0] - sunrise)},
    )

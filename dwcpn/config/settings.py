"""
Model input and settings records.

Defines the per-run input record (location, day, phytoplankton parameters,
surface PAR and optical spectra) and the model settings, with loaders for
dictionaries, JSON and YAML.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any
import json
import yaml

import numpy as np

from dwcpn.optics.absorption import calculate_ay, calculate_bbr, calculate_bw
from dwcpn.profiles.chlorophyll import PROFILE_SHAPES
from dwcpn.utils.constants import DEPTH_PROFILE_COUNT, DEPTH_PROFILE_STEP, TIMESTEPS, WL_COUNT


@dataclass(frozen=True)
class ModelInputs:
    """Inputs for one water column and one day.

    Attributes:
        lat: Latitude in degrees (positive north)
        lon: Longitude in degrees (carried through, not used by the model)
        z_bottom: Depth of the seafloor in m
        iday: Day of year (1-366)
        alpha_b: Initial slope of the P-I curve [mg C mg Chl^-1 h^-1 (W m^-2)^-1]
        pmb: Assimilation number [mg C mg Chl^-1 h^-1]
        z_m: Depth of the deep chlorophyll maximum in m
        mld: Mixed-layer depth in m
        chl: Surface chlorophyll [mg m^-3]
        rho: Peak-to-background ratio of the deep chlorophyll maximum
        sigma: Width of the deep chlorophyll maximum in m
        cloud: Cloud cover in percent (0-100)
        yel_sub: Yellow-substance absorption at 440 nm relative to phytoplankton
        par: Daily surface PAR [einstein m^-2 d^-1]
        bw: Pure water scattering on the model wavelength grid
        bbr: Backscattering term on the model wavelength grid
        ay: Yellow-substance absorption shape on the model wavelength grid
    """
    lat: float
    lon: float = 0.0
    z_bottom: float = 250.0
    iday: int = 1
    alpha_b: float = 0.1
    pmb: float = 3.0
    z_m: float = 0.0
    mld: float = 0.0
    chl: float = 0.1
    rho: float = 0.0
    sigma: float = 1.0
    cloud: float = 0.0
    yel_sub: float = 0.3
    par: float = 40.0
    bw: np.ndarray = field(default_factory=calculate_bw)
    bbr: np.ndarray = field(default_factory=calculate_bbr)
    ay: np.ndarray = field(default_factory=calculate_ay)

    def __post_init__(self):
        # Spectra may arrive as lists (to_dict, JSON, YAML)
        for name in ("bw", "bbr", "ay"):
            object.__setattr__(self, name, np.asarray(getattr(self, name), dtype=float))

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ModelInputs":
        """Create ModelInputs from a dictionary.

        Accepts either the flat input record or a document with an
        ``inputs`` section. Missing spectra fall back to the standard ones.

        Args:
            config_dict: Configuration dictionary

        Returns:
            ModelInputs instance
        """
        values = dict(config_dict.get("inputs", config_dict))

        if "lat" not in values:
            raise KeyError("'lat' is required in the model inputs")

        kwargs = {
            name: values[name]
            for name in (
                "lat", "lon", "z_bottom", "alpha_b", "pmb", "z_m", "mld",
                "chl", "rho", "sigma", "cloud", "yel_sub", "par",
            )
            if name in values
        }
        if "iday" in values:
            kwargs["iday"] = int(values["iday"])

        for name in ("bw", "bbr", "ay"):
            if values.get(name) is not None:
                kwargs[name] = np.asarray(values[name], dtype=float)

        return cls(**kwargs)

    @classmethod
    def from_json(cls, json_path: str) -> "ModelInputs":
        """Load inputs from a JSON file."""
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ModelInputs":
        """Load inputs from a YAML file."""
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert inputs to a JSON-serialisable dictionary."""
        return {
            "lat": self.lat,
            "lon": self.lon,
            "z_bottom": self.z_bottom,
            "iday": self.iday,
            "alpha_b": self.alpha_b,
            "pmb": self.pmb,
            "z_m": self.z_m,
            "mld": self.mld,
            "chl": self.chl,
            "rho": self.rho,
            "sigma": self.sigma,
            "cloud": self.cloud,
            "yel_sub": self.yel_sub,
            "par": self.par,
            "bw": np.asarray(self.bw).tolist(),
            "bbr": np.asarray(self.bbr).tolist(),
            "ay": np.asarray(self.ay).tolist(),
        }

    def validate(self) -> list:
        """Validate inputs against basic physical bounds.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        scalars = {
            "lat": self.lat, "z_bottom": self.z_bottom, "alpha_b": self.alpha_b,
            "pmb": self.pmb, "mld": self.mld, "chl": self.chl, "cloud": self.cloud,
            "yel_sub": self.yel_sub, "par": self.par,
        }
        for name, value in scalars.items():
            if not np.isfinite(value):
                errors.append(f"{name} must be finite, got {value}")

        if abs(self.lat) >= 90.0:
            errors.append(f"latitude must be between -90 and 90 degrees, got {self.lat}")

        if not (1 <= self.iday <= 366):
            errors.append(f"day of year must be between 1 and 366, got {self.iday}")

        if self.chl < 0:
            errors.append("chlorophyll must be non-negative")

        if self.pmb <= 0:
            errors.append("assimilation number pmb must be positive")

        if self.alpha_b < 0:
            errors.append("alpha_b must be non-negative")

        if not (0 <= self.cloud <= 100):
            errors.append("cloud cover must be between 0 and 100 percent")

        if self.par < 0:
            errors.append("surface PAR must be non-negative")

        if self.z_bottom == 0:
            errors.append("bottom depth must be non-zero")

        if self.mld < 0:
            errors.append("mixed-layer depth must be non-negative")

        if self.rho < 0:
            errors.append("rho must be non-negative")

        if self.yel_sub < 0:
            errors.append("yellow substance must be non-negative")

        for name in ("bw", "bbr", "ay"):
            values = np.asarray(getattr(self, name), dtype=float)
            if values.shape != (WL_COUNT,):
                errors.append(f"{name} must have {WL_COUNT} values, got shape {values.shape}")
            elif not np.all(np.isfinite(values)):
                errors.append(f"{name} must be finite")

        return errors


@dataclass
class SecondaryPopulationSettings:
    """Light-driven secondary phytoplankton population.

    Attributes:
        surface_max: Abundance of the surface community at the surface [mg m^-3]
        subsurface_max: Peak abundance of the subsurface community [mg m^-3]
        surface_saturation: Light fraction scale of the surface curve
        subsurface_optimum: Light fraction at which the subsurface community peaks
        truncate_at_euphotic_depth: Ignore production below the euphotic depth
    """
    surface_max: float = 0.0
    subsurface_max: float = 0.0
    surface_saturation: float = 0.2
    subsurface_optimum: float = 0.1
    truncate_at_euphotic_depth: bool = True

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "SecondaryPopulationSettings":
        return cls(
            surface_max=config_dict.get("surface_max", 0.0),
            subsurface_max=config_dict.get("subsurface_max", 0.0),
            surface_saturation=config_dict.get("surface_saturation", 0.2),
            subsurface_optimum=config_dict.get("subsurface_optimum", 0.1),
            truncate_at_euphotic_depth=config_dict.get("truncate_at_euphotic_depth", True),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "surface_max": self.surface_max,
            "subsurface_max": self.subsurface_max,
            "surface_saturation": self.surface_saturation,
            "subsurface_optimum": self.subsurface_optimum,
            "truncate_at_euphotic_depth": self.truncate_at_euphotic_depth,
        }

    def validate(self) -> list:
        errors = []

        if self.surface_max < 0 or self.subsurface_max < 0:
            errors.append("secondary population maxima must be non-negative")

        if self.surface_saturation <= 0:
            errors.append("secondary surface_saturation must be positive")

        if self.subsurface_optimum <= 0:
            errors.append("secondary subsurface_optimum must be positive")

        return errors


@dataclass
class ModelSettings:
    """Model settings.

    Attributes:
        mld_only: Only compute the mixed-layer part of the chlorophyll profile
        iom_only: Stop after computing the noon irradiance maximum
        profile_shape: Chlorophyll profile below the mixed layer ("gaussian" or "uniform")
        secondary: Optional secondary population
        depth_step: Depth step in m
        depth_count: Number of depth samples
        timesteps: Number of timesteps from the 80 deg zenith crossing to noon

    Example YAML input:
        settings:
          mld_only: false
          profile_shape: gaussian
          secondary:
            surface_max: 0.2
            subsurface_max: 0.5
    """
    mld_only: bool = False
    iom_only: bool = False
    profile_shape: str = "gaussian"
    secondary: Optional[SecondaryPopulationSettings] = None
    depth_step: float = DEPTH_PROFILE_STEP
    depth_count: int = DEPTH_PROFILE_COUNT
    timesteps: int = TIMESTEPS

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ModelSettings":
        """Create ModelSettings from a dictionary.

        Accepts either the flat settings record or a document with a
        ``settings`` section.

        Args:
            config_dict: Configuration dictionary

        Returns:
            ModelSettings instance
        """
        values = config_dict.get("settings", config_dict) or {}

        secondary_dict = values.get("secondary")
        secondary = (
            SecondaryPopulationSettings.from_dict(secondary_dict)
            if secondary_dict is not None else None
        )

        return cls(
            mld_only=values.get("mld_only", False),
            iom_only=values.get("iom_only", False),
            profile_shape=values.get("profile_shape", "gaussian"),
            secondary=secondary,
            depth_step=values.get("depth_step", DEPTH_PROFILE_STEP),
            depth_count=int(values.get("depth_count", DEPTH_PROFILE_COUNT)),
            timesteps=int(values.get("timesteps", TIMESTEPS)),
        )

    @classmethod
    def from_json(cls, json_path: str) -> "ModelSettings":
        """Load settings from a JSON file."""
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "ModelSettings":
        """Load settings from a YAML file."""
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mld_only": self.mld_only,
            "iom_only": self.iom_only,
            "profile_shape": self.profile_shape,
            "secondary": self.secondary.to_dict() if self.secondary is not None else None,
            "depth_step": self.depth_step,
            "depth_count": self.depth_count,
            "timesteps": self.timesteps,
        }

    def validate(self) -> list:
        """Validate settings.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.profile_shape not in PROFILE_SHAPES:
            errors.append(f"Invalid profile shape: {self.profile_shape}")

        if self.depth_step <= 0:
            errors.append("depth step must be positive")

        if self.depth_count < 2:
            errors.append("at least two depth samples are required")

        if self.timesteps < 2:
            errors.append("at least two timesteps are required")

        if self.secondary is not None:
            errors.extend(self.secondary.validate())

        return errors

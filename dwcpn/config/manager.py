"""
Configuration Manager for DWCPN runs.

Handles loading and validation of model inputs and settings from a
dictionary, a JSON file or a YAML file.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

import yaml

from dwcpn.config.settings import ModelInputs, ModelSettings

logger = logging.getLogger(__name__)


@dataclass
class LoadedConfiguration:
    """Container for loaded and validated configuration.

    Attributes:
        inputs: Model inputs for the water column
        settings: Model settings
        is_valid: Whether the configuration passed validation
        validation_errors: List of validation error messages
    """
    inputs: ModelInputs
    settings: ModelSettings
    is_valid: bool
    validation_errors: list


class ConfigurationManager:
    """Loads model configurations.

    A configuration document has an ``inputs`` section (see
    :class:`ModelInputs`) and an optional ``settings`` section (see
    :class:`ModelSettings`).

    Example:
        >>> manager = ConfigurationManager()
        >>> loaded = manager.load({
        ...     "inputs": {"lat": 43.2, "iday": 121, "chl": 0.474, "par": 50.35},
        ...     "settings": {"profile_shape": "uniform"},
        ... })
        >>> loaded.is_valid
        True
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, config_source: Dict[str, Any] | str) -> LoadedConfiguration:
        """Load and validate a configuration.

        Args:
            config_source: Configuration dictionary, JSON path, or YAML path

        Returns:
            LoadedConfiguration with parsed inputs and settings
        """
        if isinstance(config_source, dict):
            config_dict = config_source
        elif isinstance(config_source, (str, Path)):
            config_dict = self._read(self.resolve_path(str(config_source)))
        else:
            raise TypeError(f"Invalid config source type: {type(config_source)}")

        inputs = ModelInputs.from_dict(config_dict)
        settings = ModelSettings.from_dict(config_dict.get("settings") or {})

        validation_errors = inputs.validate() + settings.validate()
        is_valid = len(validation_errors) == 0

        if not is_valid:
            for error in validation_errors:
                logger.warning(f"Configuration validation error: {error}")

        return LoadedConfiguration(
            inputs=inputs,
            settings=settings,
            is_valid=is_valid,
            validation_errors=validation_errors,
        )

    def _read(self, path: Path) -> Dict[str, Any]:
        logger.info(f"Loading configuration from {path}")

        if path.suffix.lower() == '.json':
            with open(path, 'r') as f:
                return json.load(f)
        elif path.suffix.lower() in ('.yaml', '.yml'):
            with open(path, 'r') as f:
                return yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    def resolve_path(self, path: str) -> Path:
        """Resolve a path relative to base_path.

        Args:
            path: Relative or absolute path string

        Returns:
            Resolved absolute Path
        """
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration dictionary.

        Returns:
            Example configuration for a temperate spring column
        """
        return {
            "inputs": {
                "lat": 43.2,
                "lon": -16.0,
                "z_bottom": 250.0,
                "iday": 121,
                "alpha_b": 0.0578,
                "pmb": 3.294,
                "z_m": 0.0,
                "mld": 0.0,
                "chl": 0.474,
                "rho": 0.0,
                "sigma": 1.0,
                "cloud": 0.0,
                "yel_sub": 0.3,
                "par": 50.35,
            },
            "settings": {
                "mld_only": False,
                "profile_shape": "uniform",
            },
        }

    def save_example_config(self, output_path: str) -> None:
        """Save an example configuration file.

        Args:
            output_path: Path to save the example JSON
        """
        example = self.create_example_config()
        with open(output_path, 'w') as f:
            json.dump(example, f, indent=2)
        logger.info(f"Saved example configuration to {output_path}")

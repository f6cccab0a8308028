"""
Configuration management for DWCPN runs.

This module provides:
- ModelInputs: Per-column input record
- ModelSettings / SecondaryPopulationSettings: Model switches and grids
- ConfigurationManager: Loading and validation of configurations
"""

from dwcpn.config.settings import ModelInputs, ModelSettings, SecondaryPopulationSettings
from dwcpn.config.manager import ConfigurationManager, LoadedConfiguration

__all__ = [
    "ModelInputs",
    "ModelSettings",
    "SecondaryPopulationSettings",
    "ConfigurationManager",
    "LoadedConfiguration",
]

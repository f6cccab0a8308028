"""
Core model: the daily production driver and the exception hierarchy.

- calc_pp: Daily water-column primary production
- ModelOutputs / TimeSeries: Run results
- DwcpnError and subclasses: Failure kinds
"""

from dwcpn.core.errors import (
    DwcpnError,
    InvalidInput,
    DegenerateDay,
    NoEuphoticDepthFound,
    ImplausibleProduction,
    AttenuationError,
)
from dwcpn.core.model import calc_pp, integrate_daily_production, ModelOutputs, TimeSeries

__all__ = [
    "DwcpnError",
    "InvalidInput",
    "DegenerateDay",
    "NoEuphoticDepthFound",
    "ImplausibleProduction",
    "AttenuationError",
    "calc_pp",
    "integrate_daily_production",
    "ModelOutputs",
    "TimeSeries",
]

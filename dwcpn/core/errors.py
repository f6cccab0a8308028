"""
Exception hierarchy for DWCPN runs.

Every failure surfaced by :func:`dwcpn.calc_pp` derives from
:class:`DwcpnError`, so callers can catch the whole family at once or pick
out the individual kinds.
"""

from typing import Iterable


class DwcpnError(Exception):
    """Base class for all model errors."""
    pass


class InvalidInput(DwcpnError, ValueError):
    """Raised when inputs or settings violate basic physical bounds.

    Attributes:
        errors: The individual validation messages
    """

    def __init__(self, errors: Iterable[str]):
        self.errors = list(errors)
        super().__init__("Invalid model input: " + "; ".join(self.errors))


class DegenerateDay(DwcpnError):
    """Raised for polar day/night or when the sun never reaches the start zenith."""
    pass


class NoEuphoticDepthFound(DwcpnError):
    """Raised when PAR never drops below 1% of its surface value.

    This is a per-timestep soft failure; the daily driver absorbs it.
    """
    pass


class ImplausibleProduction(DwcpnError):
    """Raised when daily production exceeds the sanity ceiling."""

    def __init__(self, production: float, ceiling: float):
        self.production = production
        self.ceiling = ceiling
        super().__init__(
            f"Daily production {production:.2f} mg C m^-2 d^-1 exceeds "
            f"the plausible limit of {ceiling:.0f}"
        )


class AttenuationError(DwcpnError):
    """Raised when PAR increases with depth in a light profile."""
    pass

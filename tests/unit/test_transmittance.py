"""
Unit tests for atmospheric transmittances.
"""

import pytest
import numpy as np

from dwcpn.atmosphere.transmittance import (
    TU_DIRECT_INDEX,
    TU_DIFFUSE_INDEX,
    rayleigh_transmittance,
    aerosol_transmittance,
    water_vapour_transmittance,
    ozone_transmittance,
    mixed_gas_transmittance,
    air_albedo,
)
from dwcpn.utils.constants import TRANSMITTANCE_WL_COUNT


class TestTransmittances:
    """Tests for the component transmittances."""

    @pytest.mark.parametrize("func", [
        rayleigh_transmittance,
        aerosol_transmittance,
        water_vapour_transmittance,
    ])
    @pytest.mark.parametrize("air_mass", [1.0, 1.9, 5.0])
    def test_bounds(self, func, air_mass):
        """Transmittances lie in (0, 1]."""
        t = func(air_mass)
        assert t.shape == (TRANSMITTANCE_WL_COUNT,)
        assert np.all(t > 0)
        assert np.all(t <= 1)

    @pytest.mark.parametrize("func", [
        rayleigh_transmittance,
        aerosol_transmittance,
    ])
    def test_decrease_with_air_mass(self, func):
        """Longer slant paths transmit less (Beer-Lambert)."""
        assert np.all(func(3.0) < func(1.5))

    def test_rayleigh_increases_with_wavelength(self):
        """Blue light is scattered more than red."""
        t = rayleigh_transmittance(1.0)
        assert np.all(np.diff(t) > 0)

    def test_ozone(self):
        """Ozone transmittance bounded and lower at low sun."""
        high = ozone_transmittance(np.radians(10.0))
        low = ozone_transmittance(np.radians(80.0))
        assert np.all((high > 0) & (high <= 1))
        assert np.all(low <= high)

    def test_mixed_gas(self):
        """Mixed gas transmittance is a scalar in (0, 1)."""
        tu = mixed_gas_transmittance(1.9)
        assert isinstance(tu, float)
        assert 0.0 < tu < 1.0
        assert mixed_gas_transmittance(4.0) < tu


class TestAirAlbedo:
    """Tests for the air albedo."""

    @pytest.fixture
    def components(self):
        """Transmittances at the reference air mass."""
        return (
            aerosol_transmittance(1.9),
            ozone_transmittance(np.radians(30.0)),
            rayleigh_transmittance(1.9),
            water_vapour_transmittance(1.9),
        )

    def test_non_negative(self, components):
        """Albedo is non-negative and below one."""
        albedo = air_albedo(*components, mixed_gas_transmittance(1.9))
        assert np.all(albedo >= 0)
        assert np.all(albedo < 1)

    def test_mixed_gas_applied_to_last_wavelength(self, components):
        """The mixed gas factor only changes the last reference wavelength."""
        full = air_albedo(*components, 1.0)
        half = air_albedo(*components, 0.5)
        assert np.isclose(half[TU_DIRECT_INDEX], 0.5 * full[TU_DIRECT_INDEX])
        assert np.allclose(half[:TU_DIRECT_INDEX], full[:TU_DIRECT_INDEX])

    def test_tu_indices(self):
        """The diffuse term carries the mixed gas factor one wavelength lower."""
        assert TU_DIRECT_INDEX == TRANSMITTANCE_WL_COUNT - 1
        assert TU_DIFFUSE_INDEX == TRANSMITTANCE_WL_COUNT - 2

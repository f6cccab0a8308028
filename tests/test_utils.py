"""Tests for utility functions."""

import numpy as np
import pytest

from dwcpn.utils import (
    WL_ARRAY,
    WL_COUNT,
    DELTA_LAMBDA,
    DEPTH_PROFILE_STEP,
    DEPTH_PROFILE_COUNT,
    TIMESTEPS,
    linear_interp,
    interpolate_spectrum,
    compute_airmass,
)
from dwcpn.utils.constants import (
    AW,
    BRICAUD_A,
    BRICAUD_E,
    TRANSMITTANCE_WAVELENGTHS,
    ET_SPECTRAL_IRRADIANCE,
    DIFFUSE_CORRECTION,
    DIFFUSE_CORRECTION_ZENITH,
    THEKAEKARA_DAYS,
    THEKAEKARA_IRRADIANCE,
)


class TestGrids:
    """Tests for the model grids."""

    def test_wavelength_grid(self):
        """Working grid runs from 400 to 700 nm in DELTA_LAMBDA steps."""
        assert WL_ARRAY[0] == 400.0
        assert WL_ARRAY[-1] == 700.0
        assert len(WL_ARRAY) == WL_COUNT
        assert np.allclose(np.diff(WL_ARRAY), DELTA_LAMBDA)

    def test_depth_grid_size(self):
        """Depth grid covers 250 m."""
        assert np.isclose((DEPTH_PROFILE_COUNT - 1) * DEPTH_PROFILE_STEP, 250.0)

    def test_timesteps(self):
        """At least two timesteps are needed to integrate."""
        assert TIMESTEPS >= 2


class TestStaticTables:
    """Tests for the static lookup tables."""

    @pytest.mark.parametrize("table", [AW, BRICAUD_A, BRICAUD_E])
    def test_spectral_tables_on_working_grid(self, table):
        """Spectral tables match the working wavelength grid."""
        assert table.shape == WL_ARRAY.shape

    def test_transmittance_grid(self):
        """Reference grid has 24 wavelengths with 550 nm at index 15."""
        assert len(TRANSMITTANCE_WAVELENGTHS) == 24
        assert TRANSMITTANCE_WAVELENGTHS[15] == 550.0
        assert ET_SPECTRAL_IRRADIANCE.shape == TRANSMITTANCE_WAVELENGTHS.shape

    def test_diffuse_correction_shape(self):
        """Diffuse correction table is 7 zenith rows by 5 bands."""
        assert DIFFUSE_CORRECTION.shape == (7, 5)
        assert len(DIFFUSE_CORRECTION_ZENITH) == 7

    def test_thekaekara_table(self):
        """Thekaekara table has 25 points spanning the year."""
        assert len(THEKAEKARA_DAYS) == 25
        assert len(THEKAEKARA_IRRADIANCE) == 25
        assert THEKAEKARA_DAYS[0] == 0.0
        assert THEKAEKARA_DAYS[-1] == 365.0

    def test_tables_are_read_only(self):
        """Static tables cannot be modified in place."""
        with pytest.raises(ValueError):
            WL_ARRAY[0] = 1.0
        with pytest.raises(ValueError):
            AW[0] = 1.0

    def test_water_absorption_positive(self):
        """Pure water absorbs at every wavelength."""
        assert np.all(AW > 0)


class TestInterpolation:
    """Tests for linear interpolation helpers."""

    def test_midpoint(self):
        """Test interpolation between two samples."""
        assert np.isclose(linear_interp([0.0, 1.0], [0.0, 10.0], 0.5), 5.0)

    def test_exact_sample(self):
        """Interpolation at a sample returns that sample."""
        assert np.isclose(linear_interp([0.0, 1.0, 2.0], [3.0, 4.0, 8.0], 2.0), 8.0)

    def test_outside_range_clamps(self):
        """Positions outside the table take the end values."""
        assert np.isclose(linear_interp([0.0, 1.0], [2.0, 4.0], -5.0), 2.0)
        assert np.isclose(linear_interp([0.0, 1.0], [2.0, 4.0], 5.0), 4.0)

    def test_shape_mismatch(self):
        """Tables of different length are rejected."""
        with pytest.raises(ValueError):
            linear_interp([0.0, 1.0, 2.0], [1.0, 2.0], 0.5)

    def test_interpolate_spectrum(self):
        """Spectrum resampling onto a finer grid."""
        result = interpolate_spectrum([400.0, 700.0], [1.0, 4.0], WL_ARRAY)
        assert result.shape == WL_ARRAY.shape
        assert np.isclose(result[0], 1.0)
        assert np.isclose(result[-1], 4.0)
        assert np.isclose(result[10], 2.0)


class TestAirMass:
    """Tests for the Kasten air mass formula."""

    def test_overhead_sun_floored(self):
        """Air mass is floored at 1.0 for an overhead sun."""
        assert compute_airmass(0.0, 0.0) == 1.0

    def test_sixty_degrees(self):
        """Air mass is close to 1/cos(z) at 60 deg."""
        am = compute_airmass(np.radians(60.0), 60.0)
        assert np.isclose(am, 1.993, rtol=1e-3)

    def test_increases_with_zenith(self):
        """Air mass increases with zenith angle."""
        zeniths = np.array([10.0, 30.0, 50.0, 70.0, 80.0, 85.0])
        masses = [compute_airmass(np.radians(z), z) for z in zeniths]
        assert np.all(np.diff(masses) > 0)

    def test_below_horizon_rejected(self):
        """Zenith angles past the formula limit raise."""
        with pytest.raises(ValueError):
            compute_airmass(np.radians(95.0), 95.0)

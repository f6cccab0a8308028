"""
Unit tests for the spectral irradiance model.
"""

import pytest
import numpy as np

from dwcpn.atmosphere import (
    compute_irradiance_components,
    correct_and_recompute_irradiance_components,
    lookup_thekaekara_correction,
    interpolate_correction_factor,
    fresnel_reflectance,
)
from dwcpn.atmosphere.irradiance import find_correction_index
from dwcpn.utils.constants import (
    DELTA_LAMBDA,
    DIFFUSE_CORRECTION,
    TRANSMITTANCE_WL_COUNT,
    WATER_REFRACTIVE_INDEX,
    WL_COUNT,
)


class TestThekaekara:
    """Tests for the solar constant lookup."""

    def test_table_points(self):
        """Tabulated days return tabulated values."""
        assert np.isclose(lookup_thekaekara_correction(3), 1399.0)
        assert np.isclose(lookup_thekaekara_correction(93), 1353.0)
        assert np.isclose(lookup_thekaekara_correction(181), 1309.0)

    def test_linear_between_points(self):
        """Values between table days are interpolated linearly."""
        assert np.isclose(lookup_thekaekara_correction(126.5), 1328.0)

    def test_perihelion_above_aphelion(self):
        """Earth is closer to the sun in January than in July."""
        assert lookup_thekaekara_correction(3) > lookup_thekaekara_correction(183)


class TestDiffuseCorrection:
    """Tests for the diffuse correction expansion."""

    def test_index_lookup(self):
        """Index points at the first row above the zenith, never row 0."""
        assert find_correction_index(0.0) == 1
        assert find_correction_index(10.0) == 1
        assert find_correction_index(37.0) == 2
        assert find_correction_index(79.0) == 6

    def test_expansion_hits_table_values(self):
        """At a tabulated zenith the expansion passes through the 5 factors."""
        correction = interpolate_correction_factor(37.0)
        assert correction.shape == (TRANSMITTANCE_WL_COUNT,)
        np.testing.assert_allclose(correction[[0, 5, 10, 15, 23]], DIFFUSE_CORRECTION[1])

    def test_interpolates_in_zenith(self):
        """Between rows the first factor is interpolated linearly."""
        zenith = (60.0 + 70.0) / 2.0
        correction = interpolate_correction_factor(zenith)
        expected = (DIFFUSE_CORRECTION[3, 0] + DIFFUSE_CORRECTION[4, 0]) / 2.0
        assert np.isclose(correction[0], expected)


class TestIrradianceComponents:
    """Tests for direct and diffuse irradiance at sea level."""

    @pytest.mark.parametrize("zenith_d", [0.0, 30.0, 60.0, 79.9])
    def test_positive_on_working_grid(self, zenith_d):
        """Both components are positive on the working grid."""
        direct, diffuse = compute_irradiance_components(np.radians(zenith_d), zenith_d)
        assert direct.shape == (WL_COUNT,)
        assert diffuse.shape == (WL_COUNT,)
        assert np.all(direct > 0)
        assert np.all(diffuse > 0)

    def test_direct_decreases_with_zenith(self):
        """Longer slant paths attenuate the direct beam."""
        high, _ = compute_irradiance_components(np.radians(20.0), 20.0)
        low, _ = compute_irradiance_components(np.radians(70.0), 70.0)
        assert np.all(low < high)


class TestFresnel:
    """Tests for sea-surface reflectance."""

    def test_normal_incidence(self):
        """Normal incidence gives ((n-1)/(n+1))^2."""
        n = WATER_REFRACTIVE_INDEX
        assert np.isclose(fresnel_reflectance(0.0), ((n - 1) / (n + 1)) ** 2)

    def test_continuous_near_zero(self):
        """The normal incidence value matches small angles."""
        assert np.isclose(fresnel_reflectance(1e-3), fresnel_reflectance(0.0), rtol=1e-3)

    def test_increases_with_zenith(self):
        """Reflectance grows towards grazing incidence."""
        values = [fresnel_reflectance(np.radians(z)) for z in (10.0, 40.0, 60.0, 75.0, 85.0)]
        assert np.all(np.diff(values) > 0)
        assert values[-1] < 1.0


class TestCorrection:
    """Tests for the correction and PAR calibration."""

    @pytest.fixture
    def components(self):
        """Sea-level components for a 30 deg zenith angle."""
        zenith_r = np.radians(30.0)
        direct, diffuse = compute_irradiance_components(zenith_r, 30.0)
        return direct, diffuse, zenith_r

    def test_calibrated_to_par_curve(self, components):
        """Below-surface PAR is the PAR curve less surface losses."""
        direct, diffuse, zenith_r = components
        iom, day_length, sunrise, time = 2.0, 12.0, 6.0, 10.0

        d, f = correct_and_recompute_irradiance_components(
            direct, diffuse, 1353.0, iom, day_length, sunrise, zenith_r, time, 0.0
        )

        target = iom * np.sin(np.pi * (time - sunrise) / day_length)
        total = np.sum(d + f) * DELTA_LAMBDA
        assert 0.9 * target <= total <= target

    def test_independent_of_solar_constant(self, components):
        """The calibration removes the absolute scale of the spectrum."""
        direct, diffuse, zenith_r = components
        args = (2.0, 12.0, 6.0, zenith_r, 10.0, 20.0)

        d1, f1 = correct_and_recompute_irradiance_components(direct, diffuse, 1320.0, *args)
        d2, f2 = correct_and_recompute_irradiance_components(direct, diffuse, 1399.0, *args)
        np.testing.assert_allclose(d1, d2)
        np.testing.assert_allclose(f1, f2)

    def test_overcast_is_diffuse(self, components):
        """Full cloud cover removes the direct beam."""
        direct, diffuse, zenith_r = components
        d, f = correct_and_recompute_irradiance_components(
            direct, diffuse, 1353.0, 2.0, 12.0, 6.0, zenith_r, 10.0, 100.0
        )
        assert np.allclose(d, 0.0)
        assert np.all(f > 0)

    def test_cloud_shifts_light_to_diffuse(self, components):
        """More cloud means a larger diffuse share."""
        direct, diffuse, zenith_r = components
        args = (1353.0, 2.0, 12.0, 6.0, zenith_r, 10.0)

        d0, f0 = correct_and_recompute_irradiance_components(direct, diffuse, *args, 0.0)
        d5, f5 = correct_and_recompute_irradiance_components(direct, diffuse, *args, 50.0)
        assert np.sum(f5) / np.sum(d5 + f5) > np.sum(f0) / np.sum(d0 + f0)

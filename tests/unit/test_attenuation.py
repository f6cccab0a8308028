"""
Unit tests for underwater light attenuation.
"""

import pytest
import numpy as np

from dwcpn.atmosphere import compute_irradiance_components, correct_and_recompute_irradiance_components
from dwcpn.core.errors import AttenuationError
from dwcpn.optics import (
    calc_ac,
    calculate_ay,
    calculate_bbr,
    calculate_bw,
    init_mu_d_and_i_z,
    calc_i_z_decay,
    calc_light_decay_profile,
)
from dwcpn.utils.constants import DELTA_LAMBDA, DIFFUSE_MU_D, WL_COUNT


@pytest.fixture
def surface_light():
    """Corrected below-surface irradiance at 30 deg zenith."""
    zenith_r = np.radians(30.0)
    direct, diffuse = compute_irradiance_components(zenith_r, 30.0)
    direct, diffuse = correct_and_recompute_irradiance_components(
        direct, diffuse, 1353.0, 2.0, 12.0, 6.0, zenith_r, 10.0, 0.0
    )
    return direct, diffuse, zenith_r


@pytest.fixture
def optics():
    """Default yellow substance, backscattering and water scattering spectra."""
    return calculate_ay(), calculate_bbr(), calculate_bw()


class TestMeanCosine:
    """Tests for the downwelling mean cosine."""

    def test_diffuse_only(self):
        """Purely diffuse light has mu_d = 0.831."""
        mu_d, i_z = init_mu_d_and_i_z(np.zeros(WL_COUNT), np.ones(WL_COUNT), np.radians(40.0))
        assert np.allclose(mu_d, DIFFUSE_MU_D)
        assert np.allclose(i_z, 1.0)

    def test_direct_overhead(self):
        """A direct overhead beam has mu_d = 1."""
        mu_d, _ = init_mu_d_and_i_z(np.ones(WL_COUNT), np.zeros(WL_COUNT), 0.0)
        assert np.allclose(mu_d, 1.0)

    def test_refraction(self):
        """The refracted beam is steeper than the incident one."""
        zenith_r = np.radians(60.0)
        mu_d, _ = init_mu_d_and_i_z(np.ones(WL_COUNT), np.zeros(WL_COUNT), zenith_r)
        assert np.all(mu_d > np.cos(zenith_r))

    def test_dark_surface(self):
        """No light gives the diffuse value rather than NaN."""
        mu_d, i_z = init_mu_d_and_i_z(np.zeros(WL_COUNT), np.zeros(WL_COUNT), 0.3)
        assert np.all(np.isfinite(mu_d))
        assert np.all(i_z == 0)


class TestDecayStep:
    """Tests for a single attenuation step."""

    def test_attenuates(self, surface_light, optics):
        """One step reduces light at every wavelength."""
        direct, diffuse, zenith_r = surface_light
        mu_d, i_z = init_mu_d_and_i_z(direct, diffuse, zenith_r)
        ac, ac_mean = calc_ac(0.5)

        i_alpha, i_z_next, par = calc_i_z_decay(
            ac, mu_d, i_z, 0.5, 0.3, *optics, 0.1, ac_mean, 0.5
        )

        assert np.all(i_z_next < i_z)
        assert np.all(i_z_next > 0)
        assert np.isclose(par, np.sum(i_z) * DELTA_LAMBDA)
        assert i_alpha > 0

    def test_thicker_step_attenuates_more(self, surface_light, optics):
        """Doubling the step squares the transmission."""
        direct, diffuse, zenith_r = surface_light
        mu_d, i_z = init_mu_d_and_i_z(direct, diffuse, zenith_r)
        ac, ac_mean = calc_ac(0.5)

        _, one, _ = calc_i_z_decay(ac, mu_d, i_z, 0.5, 0.3, *optics, 0.1, ac_mean, 0.5)
        _, two, _ = calc_i_z_decay(ac, mu_d, i_z, 0.5, 0.3, *optics, 0.1, ac_mean, 1.0)
        np.testing.assert_allclose(two / i_z, (one / i_z) ** 2)

    def test_i_alpha_scales_with_alpha_b(self, surface_light, optics):
        """i_alpha is proportional to the initial slope."""
        direct, diffuse, zenith_r = surface_light
        mu_d, i_z = init_mu_d_and_i_z(direct, diffuse, zenith_r)
        ac, ac_mean = calc_ac(0.5)

        a1, _, _ = calc_i_z_decay(ac, mu_d, i_z, 0.5, 0.3, *optics, 0.1, ac_mean)
        a2, _, _ = calc_i_z_decay(ac, mu_d, i_z, 0.5, 0.3, *optics, 0.2, ac_mean)
        assert np.isclose(a2, 2.0 * a1)


class TestLightProfile:
    """Tests for the full light profile."""

    def test_monotonic_par(self, surface_light, optics):
        """PAR never increases with depth."""
        direct, diffuse, zenith_r = surface_light
        chl = np.full(501, 0.5)

        profile = calc_light_decay_profile(chl, direct, diffuse, zenith_r, 0.3, *optics, 0.1)

        assert profile.depth_reached == 501
        assert np.all(np.diff(profile.par) <= 0)
        assert np.all(profile.i_alpha >= 0)
        assert profile.spectral_irradiance.shape == (501, WL_COUNT)

    def test_stops_where_chlorophyll_vanishes(self, surface_light, optics):
        """Samples without chlorophyll are left at zero."""
        direct, diffuse, zenith_r = surface_light
        chl = np.full(501, 0.5)
        chl[40:] = 0.0

        profile = calc_light_decay_profile(chl, direct, diffuse, zenith_r, 0.3, *optics, 0.1)

        assert profile.depth_reached == 40
        assert np.all(profile.par[40:] == 0)
        assert np.all(profile.par[:40] > 0)

    def test_more_chlorophyll_less_light(self, surface_light, optics):
        """Chlorophyll-rich water is darker at depth."""
        direct, diffuse, zenith_r = surface_light

        clear = calc_light_decay_profile(np.full(101, 0.05), direct, diffuse, zenith_r, 0.3, *optics, 0.1)
        turbid = calc_light_decay_profile(np.full(101, 5.0), direct, diffuse, zenith_r, 0.3, *optics, 0.1)

        assert np.isclose(clear.par[0], turbid.par[0])
        assert turbid.par[-1] < clear.par[-1]

    def test_increasing_par_raises(self, surface_light, optics, monkeypatch):
        """A profile whose PAR grows with depth is rejected."""
        import dwcpn.optics.attenuation as attenuation

        def amplify(ac, mu_d, i_z, *args):
            return 0.0, i_z * 1.1, float(np.sum(i_z) * DELTA_LAMBDA)

        monkeypatch.setattr(attenuation, "calc_i_z_decay", amplify)

        direct, diffuse, zenith_r = surface_light
        with pytest.raises(AttenuationError):
            calc_light_decay_profile(np.full(20, 0.5), direct, diffuse, zenith_r, 0.3, *optics, 0.1)

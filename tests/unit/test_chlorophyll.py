"""
Unit tests for chlorophyll profile generation.
"""

import pytest
import numpy as np

from dwcpn.config import ModelInputs, ModelSettings
from dwcpn.profiles import gen_chl_profile
from dwcpn.profiles.chlorophyll import gaussian_background


class TestProfileShapes:
    """Tests for the supported profile shapes."""

    def test_depth_grid(self):
        """Depth samples are evenly spaced from the surface."""
        depth, chl = gen_chl_profile(ModelInputs(lat=0.0), ModelSettings())
        assert depth[0] == 0.0
        assert np.allclose(np.diff(depth), 0.5)
        assert len(depth) == len(chl) == 501

    def test_uniform(self):
        """Uniform profile carries the surface value everywhere."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=20.0, z_bottom=1000.0)
        _, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="uniform"))
        assert np.allclose(chl, 0.3)

    def test_mld_only(self):
        """Mixed-layer-only runs have no chlorophyll below the MLD."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=20.0, z_bottom=1000.0)
        depth, chl = gen_chl_profile(inputs, ModelSettings(mld_only=True))
        assert np.allclose(chl[depth < 20.0], 0.3)
        assert np.all(chl[depth >= 20.0] == 0.0)

    def test_gaussian_continuous_at_mld(self):
        """The deep profile meets the mixed layer without a jump."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=20.0, z_m=50.0, rho=2.0, sigma=10.0, z_bottom=1000.0)
        depth, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="gaussian"))
        i_mld = int(np.searchsorted(depth, 20.0))
        assert np.isclose(chl[i_mld], 0.3)
        assert np.isclose(chl[i_mld - 1], 0.3)

    def test_gaussian_peak(self):
        """The deep maximum sits at z_m and is (1 + rho) times the background."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=20.0, z_m=50.0, rho=2.0, sigma=10.0, z_bottom=1000.0)
        depth, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="gaussian"))
        b0 = gaussian_background(0.3, 20.0, 50.0, 2.0, 10.0)

        assert np.isclose(depth[np.argmax(chl)], 50.0)
        assert np.isclose(chl.max(), b0 * 3.0)
        assert np.isclose(chl[-1], b0, rtol=1e-6)

    def test_gaussian_without_peak_is_uniform(self):
        """rho = 0 reduces to a uniform profile."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=10.0, z_m=50.0, rho=0.0, sigma=10.0, z_bottom=1000.0)
        _, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="gaussian"))
        assert np.allclose(chl, 0.3)


class TestProfileBounds:
    """Tests for the seafloor cut-off and bounds."""

    @pytest.mark.parametrize("shape", ["gaussian", "uniform"])
    def test_zero_below_bottom(self, shape):
        """No chlorophyll past the seafloor."""
        inputs = ModelInputs(lat=0.0, chl=0.3, mld=10.0, z_m=20.0, rho=1.0, sigma=5.0, z_bottom=30.0)
        depth, chl = gen_chl_profile(inputs, ModelSettings(profile_shape=shape))
        assert np.all(chl[depth > 30.0] == 0.0)
        assert np.all(chl[depth <= 30.0] > 0.0)

    def test_negative_bottom_depth(self):
        """Bottom depth given as a negative elevation is treated by magnitude."""
        inputs = ModelInputs(lat=0.0, chl=0.3, z_bottom=-30.0)
        depth, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="uniform"))
        assert np.all(chl[depth > 30.0] == 0.0)

    def test_bottom_between_samples(self):
        """A bottom between samples keeps the sample just past it."""
        inputs = ModelInputs(lat=0.0, chl=0.3, z_bottom=20.3)
        depth, chl = gen_chl_profile(inputs, ModelSettings(profile_shape="uniform"))
        assert np.all(chl[depth <= 20.5] == 0.3)
        assert np.all(chl[depth >= 21.0] == 0.0)

    def test_non_negative(self):
        """Profiles are never negative."""
        inputs = ModelInputs(lat=0.0, chl=0.0, mld=10.0, z_m=20.0, rho=1.0, sigma=5.0)
        _, chl = gen_chl_profile(inputs, ModelSettings())
        assert np.all(chl >= 0.0)

    def test_unknown_shape(self):
        """Unknown shapes are rejected."""
        with pytest.raises(ValueError):
            gen_chl_profile(ModelInputs(lat=0.0), ModelSettings(profile_shape="triangular"))

"""Tests for transfer functions."""

import numpy as np
import pytest

from chclt.params import ConfigurationError
from chclt.transfer import (
    BT,
    ROMM,
    SRGB,
    Identity,
    PowerLaw,
    default_contrast,
    transfer_from_dict,
    transfer_signed,
)

ALL_FUNCTIONS = [Identity(), PowerLaw(2.2), PowerLaw(1.9), SRGB(), BT(), ROMM()]

# Avoids display values in (0.081, 0.0813) just above the BT knee, where the
# published constants do not meet exactly; test_bt_knee_gap covers that window
GRID = np.linspace(0.0, 1.0, 997)


class TestRoundTrip:
    """linear and transfer invert each other on [0, 1]."""

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_linear_of_transfer(self, function):
        """linear(transfer(y)) == y."""
        np.testing.assert_allclose(function.linear(function.transfer(GRID)), GRID, atol=1e-12)

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_transfer_of_linear(self, function):
        """transfer(linear(x)) == x."""
        np.testing.assert_allclose(function.transfer(function.linear(GRID)), GRID, atol=1e-12)

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_endpoints(self, function):
        """0 and 1 are fixed points."""
        assert function.linear(0.0) == pytest.approx(0.0, abs=1e-15)
        assert function.linear(1.0) == pytest.approx(1.0)
        assert function.transfer(1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_monotonic_on_grid(self, function):
        """Both directions increase along the grid."""
        assert np.all(np.diff(function.linear(GRID)) > 0)
        assert np.all(np.diff(function.transfer(GRID)) > 0)


class TestPiecewiseSegments:
    """Tests for the linear toe segments."""

    def test_srgb_toe(self):
        """Below the threshold, sRGB linear divides by the slope."""
        assert SRGB().linear(0.02) == pytest.approx(0.02 / 12.9232102)

    def test_srgb_segments_meet(self):
        """Both sRGB segments agree at the threshold."""
        x = SRGB.threshold
        curve = ((200.0 * x + 11.0) / 211.0) ** 2.4
        assert curve == pytest.approx(x / SRGB.slope, rel=1e-5)

    def test_bt_toe(self):
        """Below 0.018 linear, BT transfer multiplies by 4.5."""
        assert BT().transfer(0.01) == pytest.approx(0.045)

    def test_bt_knee_gap(self):
        """Just above the 0.081 knee, transfer(linear(x)) misses x by a bounded amount.

        The published constants put linear(0.0812) below the 0.018 linear
        threshold, so the round trip comes back through the 4.5 slope.
        """
        bt = BT()
        error = abs(bt.transfer(bt.linear(0.0812)) - 0.0812)
        assert 1e-6 < error < 5e-4
        assert bt.linear(bt.transfer(0.0812)) == pytest.approx(0.0812, abs=1e-12)

    def test_romm_thresholds_meet(self):
        """ROMM segments meet exactly at 2⁻⁵ / 2⁻⁹."""
        assert ROMM().linear(2.0 ** -5) == 2.0 ** -9
        assert ROMM().transfer(2.0 ** -9) == 2.0 ** -5


class TestScalarAndSigned:
    """Scalar handling and odd extension."""

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_scalar_returns_float(self, function):
        """Scalar input gives a Python float."""
        assert isinstance(function.linear(0.5), float)
        assert isinstance(function.transfer(0.5), float)

    def test_signed_is_odd(self):
        """transfer_signed(-x) == -transfer(x)."""
        f = SRGB()
        assert transfer_signed(f, -0.25) == pytest.approx(-f.transfer(0.25))
        np.testing.assert_allclose(
            transfer_signed(f, np.array([-0.5, 0.5])), [-f.transfer(0.5), f.transfer(0.5)]
        )

    def test_power_law_odd(self):
        """PowerLaw is already odd."""
        f = PowerLaw(2.0)
        assert f.linear(-0.5) == pytest.approx(-0.25)
        assert f.transfer(-0.25) == pytest.approx(-0.5)


class TestConfiguration:
    """Construction, defaults and serialization."""

    def test_power_law_rejects_nonpositive(self):
        """Exponent must be positive."""
        with pytest.raises(ConfigurationError):
            PowerLaw(0.0)

    def test_default_contrast_srgb(self):
        """sRGB medium luminance is linear(0.5) ≈ 0.214."""
        c = default_contrast(SRGB())
        assert c.medium_luminance == pytest.approx(0.214, abs=1e-3)
        assert c.medium_luminance == SRGB().linear(0.5)

    @pytest.mark.parametrize("function", ALL_FUNCTIONS, ids=lambda f: repr(f))
    def test_dict_roundtrip(self, function):
        """transfer_from_dict(to_dict()) reproduces the function."""
        assert transfer_from_dict(function.to_dict()) == function

    def test_unknown_kind(self):
        """Unknown kinds are rejected."""
        with pytest.raises(ConfigurationError):
            transfer_from_dict({"kind": "pq"})

"""Tests for Contrast parameters."""

import json
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from chclt.params import ConfigurationError, Contrast, default_power


class TestContrast:
    """Tests for Contrast construction and validation."""

    def test_default_power(self):
        """Non-positive power selects 13·m^1.5, at least 1."""
        c = Contrast(0.5)
        assert c.power == pytest.approx(13.0 * 0.5 ** 1.5)
        assert Contrast(0.5, power=-2.0).power == c.power

    def test_default_power_floor(self):
        """Small medium luminance never gives a power below 1."""
        assert default_power(0.01) == 1.0
        assert Contrast(0.01).power == 1.0

    def test_explicit_power_kept(self):
        """A valid explicit power is used as given."""
        assert Contrast(0.2, power=2.5).power == 2.5

    @pytest.mark.parametrize("m", [0.0, 1.0, -0.1, 1.5])
    def test_medium_luminance_open_interval(self, m):
        """Medium luminance must be strictly inside (0, 1)."""
        with pytest.raises(ConfigurationError):
            Contrast(m)

    def test_power_below_one_rejected(self):
        """A positive power below 1 is invalid."""
        with pytest.raises(ConfigurationError):
            Contrast(0.2, power=0.5)

    def test_configuration_error_is_value_error(self):
        """ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            Contrast(2.0)

    def test_frozen(self):
        """Contrast is immutable."""
        c = Contrast(0.2)
        with pytest.raises(FrozenInstanceError):
            c.power = 3.0


class TestRatioModel:
    """Tests for the ratio-based relations."""

    def test_from_ratio(self):
        """A 4.5:1 ratio gives m = 2/11."""
        c = Contrast.from_ratio(4.5)
        assert c.medium_luminance == pytest.approx(2.0 / 11.0)
        assert c.power == 1.0

    def test_linear_ratio_inverts_from_ratio(self):
        """linear_ratio recovers the ratio."""
        assert Contrast.from_ratio(4.5).linear_ratio == pytest.approx(4.5)

    def test_linear_offset(self):
        """linear_offset = m² / (1 - 2m)."""
        c = Contrast(2.0 / 11.0, power=1.0)
        assert c.linear_offset == pytest.approx(4.0 / 77.0)

    def test_nonpositive_ratio_rejected(self):
        """Ratios must be positive."""
        with pytest.raises(ConfigurationError):
            Contrast.from_ratio(0.0)


class TestContrastSerialization:
    """Tests for to_dict / to_json / from_json."""

    def test_json_roundtrip(self):
        """from_json(to_json()) reproduces the value."""
        c = Contrast(0.25, power=1.5)
        assert Contrast.from_json(c.to_json()) == c

    def test_from_dict(self):
        """from_json accepts a dict."""
        assert Contrast.from_json({"medium_luminance": 0.25, "power": 1.5}) == Contrast(0.25, 1.5)

    def test_missing_power_uses_default(self):
        """An absent power resolves to the default."""
        c = Contrast.from_json(json.dumps({"medium_luminance": 0.5}))
        assert c.power == pytest.approx(default_power(0.5))

    def test_dict_values(self):
        """to_dict reports the resolved power."""
        d = Contrast(0.5).to_dict()
        assert set(d) == {"medium_luminance", "power"}
        assert np.isclose(d["power"], default_power(0.5))

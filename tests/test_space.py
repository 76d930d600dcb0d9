"""Tests for CHCLT configuration and the named-space registry."""

import warnings

import numpy as np
import pytest

from chclt.colorimetry import RGB_TO_XYZ_BT709_D65
from chclt.params import ConfigurationError, Contrast
from chclt.space import (
    BT2020,
    BT2100,
    CHCLT,
    DEFAULT,
    G18,
    SPACES,
    SRGB_SPACE,
    as_vector3,
    available_spaces,
    get_space,
)
from chclt.transfer import SRGB, Identity, PowerLaw

EXPECTED_NAMES = {
    "srgb",
    "srgb_linear",
    "display_p3",
    "g18",
    "bt601",
    "bt709",
    "bt2020",
    "bt2100",
    "romm",
    "pure_240",
    "pure_601",
    "pure_709",
    "pure_2020",
    "pure_srgb",
    "pure_dci_p3",
    "pure_adobe_rgb",
}


class TestAsVector3:
    """Tests for vector coercion."""

    def test_accepts_lists(self):
        """Sequences become float arrays."""
        v = as_vector3([1, 2, 3])
        assert v.dtype == float
        np.testing.assert_array_equal(v, [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("bad", [1.0, [1.0, 2.0], np.zeros((2, 4))])
    def test_rejects_wrong_shape(self, bad):
        """Trailing dimension must be 3."""
        with pytest.raises(ValueError):
            as_vector3(bad)


class TestCHCLTConstruction:
    """Tests for CHCLT construction and validation."""

    def test_default_contrast_from_transfer(self):
        """Contrast defaults to the medium luminance of the transfer function."""
        space = CHCLT([0.2126, 0.7152, 0.0722], transfer_function=SRGB())
        assert space.medium_luminance == pytest.approx(SRGB().linear(0.5))

    def test_identity_default_contrast(self):
        """A linear space has medium luminance 0.5."""
        space = CHCLT([0.2126, 0.7152, 0.0722])
        assert space.medium_luminance == 0.5
        assert space.transfer_function == Identity()

    def test_nonpositive_coefficients_rejected(self):
        """Every coefficient must be positive."""
        with pytest.raises(ConfigurationError):
            CHCLT([0.5, 0.5, 0.0])

    def test_wrong_coefficient_shape_rejected(self):
        """Exactly three coefficients are required."""
        with pytest.raises(ConfigurationError):
            CHCLT([0.5, 0.5])

    def test_unnormalized_coefficients_warn(self):
        """Coefficients far from summing to 1 emit a warning."""
        with pytest.warns(UserWarning, match="sum to"):
            CHCLT([0.5, 0.5, 0.5])

    def test_normalized_coefficients_silent(self):
        """Normalized coefficients do not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            CHCLT([0.25, 0.5, 0.25])

    def test_coefficients_read_only(self, srgb):
        """Stored coefficients are immutable."""
        with pytest.raises(ValueError):
            srgb.coefficients[0] = 1.0

    def test_from_matrix(self):
        """from_matrix takes the Y row."""
        space = CHCLT.from_matrix(RGB_TO_XYZ_BT709_D65, transfer_function=SRGB())
        np.testing.assert_allclose(space.coefficients, RGB_TO_XYZ_BT709_D65.row(1))

    def test_with_contrast(self, srgb):
        """with_contrast returns a copy with new contrast."""
        other = srgb.with_contrast(Contrast(0.3))
        assert other.medium_luminance == 0.3
        assert srgb.medium_luminance != 0.3
        np.testing.assert_array_equal(other.coefficients, srgb.coefficients)


class TestLuminance:
    """Tests for luminance and transfer helpers."""

    def test_white_and_black(self, srgb):
        """White has luminance 1, black 0."""
        assert srgb.luminance([1.0, 1.0, 1.0]) == pytest.approx(1.0)
        assert srgb.luminance([0.0, 0.0, 0.0]) == 0.0

    def test_primary_luminance_is_coefficient(self, srgb):
        """A primary's luminance is its coefficient."""
        for index in range(3):
            v = np.zeros(3)
            v[index] = 1.0
            assert srgb.luminance(v) == pytest.approx(srgb.coefficients[index])

    def test_batch(self, srgb, random_colors):
        """Batches give one luminance per row."""
        lum = srgb.luminance(random_colors)
        assert lum.shape == (64,)
        np.testing.assert_allclose(lum, random_colors @ srgb.coefficients)

    def test_inverse_luminance(self, srgb):
        """inverse_luminance divides by the coefficients."""
        np.testing.assert_allclose(
            srgb.inverse_luminance(srgb.coefficients), np.ones(3)
        )

    def test_display_linear_roundtrip(self, srgb, random_colors):
        """display(linear(rgb)) == rgb."""
        np.testing.assert_allclose(srgb.display(srgb.linear(random_colors)), random_colors, atol=1e-12)

    def test_display_odd(self, srgb):
        """display extends to negative components by odd symmetry."""
        np.testing.assert_allclose(srgb.display([-0.25, 0.0, 0.25]), [-srgb.transfer(0.25), 0.0, srgb.transfer(0.25)])


class TestHueGeometry:
    """Tests for the hue axis and reference."""

    def test_axis_is_unit(self, srgb):
        """The hue axis has unit length."""
        assert np.linalg.norm(srgb.hue_axis) == pytest.approx(1.0)

    def test_axis_parallel_to_coefficients(self, srgb):
        """Rotating about the coefficient direction keeps luminance."""
        expected = srgb.coefficients / np.linalg.norm(srgb.coefficients)
        np.testing.assert_allclose(srgb.hue_axis, expected, atol=1e-12)

    def test_reference_unit_has_zero_luminance(self, srgb):
        """Hue zero lies in the plane of constant luminance."""
        assert srgb.luminance(srgb.hue_reference_unit) == pytest.approx(0.0, abs=1e-12)
        assert np.linalg.norm(srgb.hue_reference_unit) == pytest.approx(1.0)

    def test_hue_reference(self, srgb):
        """hue_reference(l) is red with luminance l."""
        ref = srgb.hue_reference(0.1)
        assert ref[1] == 0.0 and ref[2] == 0.0
        assert srgb.luminance(ref) == pytest.approx(0.1)


class TestSerialization:
    """Tests for to_json / from_json."""

    @pytest.mark.parametrize("name", sorted(EXPECTED_NAMES))
    def test_json_roundtrip(self, name):
        """Every named space survives a JSON round trip."""
        space = SPACES[name]
        restored = CHCLT.from_json(space.to_json())

        np.testing.assert_array_equal(restored.coefficients, space.coefficients)
        assert restored.contrast == space.contrast
        assert restored.transfer_function == space.transfer_function
        assert restored.name == space.name

    def test_dict_keys(self, srgb):
        """to_dict names each part of the configuration."""
        assert set(srgb.to_dict()) == {"name", "coefficients", "contrast", "transfer"}

    def test_missing_transfer_is_identity(self):
        """An absent transfer deserializes as Identity."""
        space = CHCLT.from_json({"coefficients": [0.25, 0.5, 0.25]})
        assert space.transfer_function == Identity()


class TestRegistry:
    """Tests for named spaces."""

    def test_names(self):
        """All expected spaces are registered."""
        assert set(available_spaces()) == EXPECTED_NAMES

    def test_default_is_srgb(self):
        """The default space is sRGB."""
        assert DEFAULT is SRGB_SPACE
        assert DEFAULT.name == "srgb"

    def test_srgb_coefficients(self, srgb):
        """sRGB uses the Rec. 709 luminance weights."""
        np.testing.assert_allclose(srgb.coefficients, [0.2126, 0.7152, 0.0722], atol=1e-3)

    def test_get_space_normalizes_name(self):
        """Lookup ignores case, hyphens and spaces."""
        assert get_space("Display-P3") is SPACES["display_p3"]
        assert get_space(" SRGB ") is SRGB_SPACE

    def test_unknown_space(self):
        """Unknown names raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown color space"):
            get_space("cmyk")

    def test_registry_read_only(self):
        """The registry mapping cannot be modified."""
        with pytest.raises(TypeError):
            SPACES["custom"] = SRGB_SPACE

    def test_g18(self):
        """G18 uses the 4.5:1 ratio medium luminance with linear power."""
        assert G18.medium_luminance == pytest.approx(2.0 / 11.0)
        assert G18.contrast.power == 1.0

    def test_bt2100_matches_bt2020(self):
        """BT.2100 shares the BT.2020 configuration."""
        np.testing.assert_array_equal(BT2100.coefficients, BT2020.coefficients)
        assert BT2100.transfer_function == BT2020.transfer_function

    def test_pure_spaces_use_power_law(self):
        """pure_* spaces use a pure power law."""
        assert SPACES["pure_srgb"].transfer_function == PowerLaw(11.0 / 5.0)
        assert SPACES["pure_dci_p3"].transfer_function == PowerLaw(13.0 / 5.0)

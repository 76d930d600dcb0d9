"""Colorimetry: chromaticities → RGB↔XYZ matrices, luminance coefficients, CIE Lab/LCh.

The luminance coefficients of an RGB space are the Y row of its RGB→XYZ
matrix. The matrix is derived from the white point and the three primary
chromaticities:

    P = [T(red) | T(green) | T(blue)],  s = P⁻¹ · T(white)
    M = [s_r T(red) | s_g T(green) | s_b T(blue)]

where T(x, y) = (x/y, 1, (1-x-y)/y) is the tristimulus of a chromaticity.

References:
    CIE 15:2004 Colorimetry, §7.3 (CIELAB)
    SMPTE RP 177-1993, derivation of the normalized primary matrix
"""

from __future__ import annotations

import numpy as np

from .matrix import Matrix3x3


def tristimulus(x: float, y: float) -> np.ndarray:
    """XYZ with Y = 1 for the chromaticity (x, y)."""
    return np.array([x / y, 1.0, (1.0 - x - y) / y], dtype=float)


def rgb_to_xyz_with_chromaticities(
    x_white: float,
    y_white: float,
    x_red: float,
    y_red: float,
    x_green: float,
    y_green: float,
    x_blue: float,
    y_blue: float,
) -> Matrix3x3:
    """Normalized primary matrix mapping linear RGB to XYZ.

    The columns are the primary tristimulus vectors scaled so that
    RGB (1, 1, 1) maps to the white tristimulus.

    Raises
    ------
    SingularMatrixError
        If the primaries are collinear.
    """
    white = tristimulus(x_white, y_white)
    red = tristimulus(x_red, y_red)
    green = tristimulus(x_green, y_green)
    blue = tristimulus(x_blue, y_blue)

    primaries = Matrix3x3.from_columns(red, green, blue)
    s = primaries.inverse @ white

    return Matrix3x3.from_columns(red * s[0], green * s[1], blue * s[2])


def luminance_coefficients(rgb_to_xyz: Matrix3x3) -> np.ndarray:
    """Return the Y row of an RGB→XYZ matrix."""
    return rgb_to_xyz.row(1)


def xyz_from_linear_rgb(rgb: np.ndarray, rgb_to_xyz: Matrix3x3) -> np.ndarray:
    """Linear RGB, shape (..., 3) → XYZ."""
    return rgb_to_xyz @ rgb


def linear_rgb_from_xyz(xyz: np.ndarray, rgb_to_xyz: Matrix3x3) -> np.ndarray:
    """XYZ, shape (..., 3) → linear RGB."""
    return rgb_to_xyz.inverse @ xyz


# Illuminant white points (Y = 1)
D50 = tristimulus(0.34567, 0.35850)
D55 = tristimulus(0.33242, 0.34743)
D65 = tristimulus(0.31271, 0.32902)
D75 = tristimulus(0.29902, 0.31485)
D93 = tristimulus(0.28315, 0.29711)
F7_D65 = tristimulus(0.31292, 0.32933)
F8_D50 = tristimulus(0.34588, 0.35875)
ANSI65 = tristimulus(0.313, 0.337)
DCI = tristimulus(0.314, 0.351)
ACES = tristimulus(0.32168, 0.33767)

# CIE 1931 RGB, normalized so the green column has Y = 1
CIE_RGB_TO_XYZ = Matrix3x3.from_columns(
    np.array([0.49, 0.17697, 0.0]) / 0.17697,
    np.array([0.31, 0.8124, 0.01]) / 0.17697,
    np.array([0.2, 0.01063, 0.99]) / 0.17697,
)

RGB_TO_XYZ_ROMM_D50 = rgb_to_xyz_with_chromaticities(
    0.345704, 0.35854, 0.734699, 0.265301, 0.159597, 0.840403, 0.036598, 0.000105
)
RGB_TO_XYZ_SMPTE240M_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3291, 0.630, 0.340, 0.310, 0.595, 0.155, 0.070
)
RGB_TO_XYZ_BT601_625_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.640, 0.330, 0.290, 0.600, 0.150, 0.060
)
RGB_TO_XYZ_BT601_525_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.630, 0.340, 0.310, 0.595, 0.155, 0.070
)
RGB_TO_XYZ_BT709_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.640, 0.330, 0.300, 0.600, 0.150, 0.060
)
RGB_TO_XYZ_BT2020_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.708, 0.292, 0.170, 0.797, 0.131, 0.046
)
RGB_TO_XYZ_BT2100_D65 = RGB_TO_XYZ_BT2020_D65
RGB_TO_XYZ_SRGB_D65 = RGB_TO_XYZ_BT709_D65
RGB_TO_XYZ_ADOBE_RGB_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.640, 0.330, 0.210, 0.710, 0.150, 0.060
)
RGB_TO_XYZ_DISPLAY_P3_D65 = rgb_to_xyz_with_chromaticities(
    0.3127, 0.3290, 0.680, 0.320, 0.265, 0.690, 0.150, 0.060
)
RGB_TO_XYZ_THEATER_P3_DCI = rgb_to_xyz_with_chromaticities(
    0.314, 0.351, 0.680, 0.320, 0.265, 0.690, 0.150, 0.060
)
RGB_TO_XYZ_ACES2065 = rgb_to_xyz_with_chromaticities(
    0.32168, 0.33767, 0.7347, 0.2653, 0.0, 1.0, 0.0001, -0.077
)
RGB_TO_XYZ_ACESCG = rgb_to_xyz_with_chromaticities(
    0.32168, 0.33767, 0.713, 0.293, 0.165, 0.830, 0.128, 0.044
)


# CIELAB
_LAB_DELTA = 6.0 / 29.0
_LAB_EPSILON = _LAB_DELTA ** 3


def _lab_f_inverse(t: np.ndarray) -> np.ndarray:
    """f⁻¹(t) = t³ above δ, 3δ²(t − 4/29) below."""
    t = np.asarray(t, dtype=float)
    return np.where(t > _LAB_DELTA, t * t * t, 3.0 * _LAB_DELTA ** 2 * (t - 4.0 / 29.0))


def _lab_f(t: np.ndarray) -> np.ndarray:
    """f(t) = ∛t above ε = δ³, t/(3δ²) + 4/29 below."""
    t = np.asarray(t, dtype=float)
    return np.where(t > _LAB_EPSILON, np.cbrt(t), t / (3.0 * _LAB_DELTA ** 2) + 4.0 / 29.0)


def lab_to_xyz(lab: np.ndarray, white: np.ndarray = D65) -> np.ndarray:
    """CIE L*a*b* → XYZ relative to the given white.

    Parameters
    ----------
    lab : array-like
        Lab coordinates, shape (..., 3).
    white : array-like
        Reference white tristimulus, shape (3,).

    Returns
    -------
    xyz : ndarray
        Shape (..., 3).
    """
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    return np.asarray(white, dtype=float) * _lab_f_inverse(f)


def xyz_to_lab(xyz: np.ndarray, white: np.ndarray = D65) -> np.ndarray:
    """XYZ → CIE L*a*b* relative to the given white."""
    xyz = np.asarray(xyz, dtype=float) / np.asarray(white, dtype=float)
    f = _lab_f(xyz)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_lch(lab: np.ndarray) -> np.ndarray:
    """(L, a, b) → (L, C, h) with C = hypot(a, b) and h = atan2(b, a) in radians."""
    lab = np.asarray(lab, dtype=float)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    return np.stack([L, np.hypot(a, b), np.arctan2(b, a)], axis=-1)


def lch_to_lab(lch: np.ndarray) -> np.ndarray:
    """(L, C, h) → (L, a, b), h in radians."""
    lch = np.asarray(lch, dtype=float)
    L, C, h = lch[..., 0], lch[..., 1], lch[..., 2]
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=-1)


__all__ = [
    "tristimulus",
    "rgb_to_xyz_with_chromaticities",
    "luminance_coefficients",
    "xyz_from_linear_rgb",
    "linear_rgb_from_xyz",
    "lab_to_xyz",
    "xyz_to_lab",
    "lab_to_lch",
    "lch_to_lab",
    "D50",
    "D55",
    "D65",
    "D75",
    "D93",
    "F7_D65",
    "F8_D50",
    "ANSI65",
    "DCI",
    "ACES",
    "CIE_RGB_TO_XYZ",
    "RGB_TO_XYZ_ROMM_D50",
    "RGB_TO_XYZ_SMPTE240M_D65",
    "RGB_TO_XYZ_BT601_625_D65",
    "RGB_TO_XYZ_BT601_525_D65",
    "RGB_TO_XYZ_BT709_D65",
    "RGB_TO_XYZ_BT2020_D65",
    "RGB_TO_XYZ_BT2100_D65",
    "RGB_TO_XYZ_SRGB_D65",
    "RGB_TO_XYZ_ADOBE_RGB_D65",
    "RGB_TO_XYZ_DISPLAY_P3_D65",
    "RGB_TO_XYZ_THEATER_P3_DCI",
    "RGB_TO_XYZ_ACES2065",
    "RGB_TO_XYZ_ACESCG",
]

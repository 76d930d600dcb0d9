"""Hue, chroma, luminance and contrast operations on linear RGB.

Every function takes a linear RGB vector of shape (3,) and returns a new
one; the color space supplies luminance coefficients, contrast
parameters and the transfer function. Functions that need the
luminance of the input accept it as ``lum`` so callers can avoid
recomputing it; when omitted it is computed from the vector.

Stability of the model:
- Shifting the hue preserves luminance, and saturation unless the
  result has to be normalized back into the unit cube.
- Changing chroma preserves luminance, and hue while chroma stays positive.
- Changing luminance preserves hue unless information is lost at the
  extremes. Changing contrast is a change of luminance.

References:
    Rodrigues' rotation formula
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np

from .space import CHCLT, as_vector3

# Per-channel distance from gray below which a channel does not constrain chroma
_CHROMA_EPSILON = 2.0 ** -30

# Hue-plane length below which a color is treated as achromatic
_HUE_EPSILON = 2.0 ** -30

# Colors with less chroma than this have no meaningful hue to push away from
_HUE_PUSH_MINIMUM_CHROMA = 1.0 / 32.0


def _vector(value) -> np.ndarray:
    """Coerce to a single color vector of shape (3,)."""
    v = as_vector3(value)
    if v.shape != (3,):
        raise ValueError(f"Expected a single vector of shape (3,), got {v.shape}")
    return v


def _luminance(vector: np.ndarray, space: CHCLT, lum: float | None) -> float:
    return space.luminance(vector) if lum is None else float(lum)


# Normalization


def normalize(vector, lum: float, leave_positive: bool = False) -> np.ndarray:
    """Bring each component within 0 … 1 by desaturating toward gray.

    Blending toward the gray of the same luminance keeps the luminance
    unchanged. With ``leave_positive`` only negative components are
    fixed, and components above one are kept.
    """
    v = _vector(vector)
    negative = v.min()

    if negative < 0 and lum > negative:
        desaturate = lum / (lum - negative)
        v = v * desaturate + lum * (1.0 - desaturate)

    if leave_positive:
        return np.maximum(v, 0.0)

    positive = v.max()

    if positive > 1 and lum < positive:
        desaturate = (lum - 1.0) / (lum - positive)
        v = v * desaturate + lum * (1.0 - desaturate)

    return np.clip(v, 0.0, 1.0)


def illuminate(vector) -> np.ndarray:
    """Maximum luminance that preserves the ratio of the components."""
    v = _vector(vector)
    maximum = v.max()
    return v / maximum if abs(maximum) > 0 else np.ones(3)


def saturate(vector) -> np.ndarray:
    """Maximum saturation that preserves the hue."""
    v = _vector(vector)
    return illuminate(v - v.min())


def saturation(vector, space: CHCLT) -> float:
    """Euclidean distance from the gray of the same luminance."""
    v = _vector(vector)
    return float(np.linalg.norm(v - space.luminance(v)))


# Luminance


def apply_luminance(vector, target: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Color with the same hue and the given luminance.

    Raising the luminance past the point where the color would leave the
    unit cube desaturates it toward white instead, so applying the
    original luminance afterwards does not restore the original color.

    Parameters
    ----------
    vector : array-like
        Linear RGB, shape (3,).
    target : float
        Luminance to apply. Zero or less is black, one or more is white.
    space : CHCLT
        Color space.
    lum : float, optional
        Luminance of ``vector``.

    Returns
    -------
    rgb : ndarray
        Shape (3,).
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)

    if target <= 0:
        return np.zeros(3)
    if target >= 1:
        return np.ones(3)
    if lum <= 0:
        return np.full(3, float(target))

    n = normalize(v, lum, leave_positive=True)
    rgb = space.display(n)
    s = target / lum
    t = space.transfer(s)
    d = rgb.max()

    if not t * d > 1:
        return n * s

    maximum_preserving_hue = rgb / d
    m = space.linear(maximum_preserving_hue)
    w = space.luminance(m)

    if w >= 1:
        return np.full(3, float(target))

    distance_from_white = (1.0 - target) / (1.0 - w)
    return 1.0 - distance_from_white + m * distance_from_white


def match_luminance(vector, color, by: float, space: CHCLT) -> np.ndarray:
    """Interpolate luminance toward that of ``color``."""
    v = space.luminance(vector)
    u = space.luminance(color)
    return apply_luminance(vector, v * (1.0 - by) + u * by, space, lum=v)


# Contrast


def is_dark(vector, space: CHCLT) -> bool:
    """True if the luminance is below the medium luminance."""
    return space.luminance(vector) < space.contrast.medium_luminance


def contrast(vector, space: CHCLT, lum: float | None = None) -> float:
    """Distance from medium luminance: 1 for black and white, 0 at medium."""
    lum = _luminance(_vector(vector), space, lum)
    m = space.contrast.medium_luminance
    c = (lum - m) / (1.0 - m) if lum > m else 1.0 - lum / m
    return float(abs(c) ** space.contrast.power)


def scale_contrast(vector, scalar: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Scale the contrast of the color.

    Scaling by 0.5 halves the contrast against the same background,
    0 gives medium luminance and negative values give a contrasting color.
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    m = space.contrast.medium_luminance

    if scalar < 0:
        t = (1.0 - m) / m if lum < m else m / (1.0 - m)
    else:
        t = -1.0

    u = m + abs(scalar) ** (1.0 / space.contrast.power) * (m - lum) * t
    return apply_luminance(v, u, space, lum=lum)


def apply_contrast(vector, value: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Set the contrast, staying on the same side of medium luminance.

    Negative values cross to the other side and so produce a contrasting
    color. Values near zero contrast poorly, values near one contrast well.
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    m = space.contrast.medium_luminance
    t = abs(value) ** (1.0 / space.contrast.power)

    if (lum < m) == (value < 0):
        u = (1.0 - m) * t + m
    else:
        u = m * (1.0 - t)

    return apply_luminance(v, u, space, lum=lum)


def match_contrast(vector, color, by: float, space: CHCLT) -> np.ndarray:
    """Interpolate contrast toward that of ``color``, landing on its side of medium."""
    m = space.contrast.medium_luminance
    v = space.luminance(vector)
    u = space.luminance(color)
    c = contrast(vector, space, lum=v) * (1.0 - by) + contrast(color, space, lum=u) * by

    if v < m:
        sign = -1.0 if u > m else 1.0
    else:
        sign = -1.0 if u < m else 1.0

    return apply_contrast(vector, c * sign, space, lum=v)


def contrasting(vector, value: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Color that contrasts against this one, relative to the minimum suggested contrast.

    A light and dark pair whose contrasts add to at least 1 meets the
    minimum suggested contrast.

    - ``contrasting(1)`` is black or white
    - ``contrasting(0)`` has exactly the minimum suggested contrast
    - ``contrasting(-1)`` has medium luminance
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    m = space.contrast.medium_luminance
    power = space.contrast.power

    c = ((lum - m) / (1.0 - m) if lum > m else 1.0 - lum / m) ** power
    tt = (1.0 - c) * (1.0 + value) if value < 0 else (1.0 - c) + c * value
    t = max(tt, 0.0) ** (1.0 / power)
    u = m * (1.0 - t) if lum > m else (1.0 - m) * t + m

    return apply_luminance(v, u, space, lum=lum)


# Hue


def rotate(vector, axis, turns: float) -> np.ndarray:
    """Rotate about a unit axis by whole turns (Rodrigues)."""
    v = _vector(vector)
    axis = _vector(axis)
    angle = 2.0 * np.pi * (turns % 1.0)
    cos, sin = np.cos(angle), np.sin(angle)
    return v * cos + np.cross(axis, v) * sin + axis * np.dot(axis, v) * (1.0 - cos)


def hue(vector, space: CHCLT, lum: float | None = None) -> float:
    """Angle from red in turns: reds near 0 or 1, greens near ⅓, blues near ⅔.

    Achromatic colors report 0.
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    d = v - lum
    length = float(np.linalg.norm(d))

    if length <= _HUE_EPSILON:
        return 0.0

    dot = float(np.clip(np.dot(d / length, space.hue_reference_unit), -1.0, 1.0))
    turns = float(np.arccos(dot)) * 0.5 / np.pi

    # Channel comparison picks the half turn; tied to RGB channel order
    return 1.0 - turns if v[1] < v[2] else turns


def hue_shift(vector, turns: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Rotate about the hue axis, preserving luminance.

    Shifting by 0 or 1 has no effect; shifting by ½ gives the same hue
    as negating chroma.
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    d = v - lum

    if not np.any(d):
        return v

    shifted = rotate(d, space.hue_axis, turns)
    return normalize(shifted + lum, lum, leave_positive=False)


def hue_push(vector, color, minimum_shift: float, space: CHCLT) -> np.ndarray:
    """Shift the hue away from that of ``color`` until they differ by ``minimum_shift``.

    Colors already far enough apart, or a nearly gray ``color``, are
    returned unchanged.
    """
    v = space.luminance(vector)
    w = space.luminance(color)

    if chroma(color, space, lum=w) <= _HUE_PUSH_MINIMUM_CHROMA:
        return _vector(vector)

    d = hue(vector, space, lum=v) - hue(color, space, lum=w)
    if abs(d) > 0.5:
        d = d + 1.0 if d < 0 else d - 1.0

    s = abs(minimum_shift) % 1.0
    t = 1.0 - s if s > 0.5 else s

    if not abs(d) < t:
        return _vector(vector)

    return hue_shift(vector, -d - t if d < 0 else t - d, space, lum=v)


def pure(hue_turns: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Most chromatic color of a hue, at full brightness or at luminance ``lum``."""
    if lum is None:
        rotated = rotate(space.hue_reference(1.0) - 1.0, space.hue_axis, hue_turns)
        return saturate(rotated)

    if lum <= 0:
        return np.zeros(3)
    if lum >= 1:
        return np.ones(3)

    rotated = rotate(space.hue_reference(lum) - lum, space.hue_axis, hue_turns)
    return normalize(rotated + lum, lum, leave_positive=False)


def hue_range(count: int, shift: float, space: CHCLT, start: float = 0.0) -> list[np.ndarray]:
    """Fully saturated colors at ``start``, ``start + shift``, … for a hue sweep."""
    reference = space.hue_reference(1.0) - 1.0
    axis = space.hue_axis
    return [saturate(rotate(reference, axis, start + index * shift)) for index in range(count)]


def luminance_ramp(
    count: int,
    lum_from: float,
    lum_to: float,
    space: CHCLT,
    hue_start: float = 0.0,
    hue_step: float = 0.0,
    chroma_value: float = 1.0,
) -> list[np.ndarray]:
    """Colors with luminance stepping evenly from ``lum_from`` to ``lum_to``.

    Each step may also advance the hue by ``hue_step`` turns;
    ``chroma_value`` is applied to every color.
    """
    reference = space.hue_reference(0.25) - 0.25
    axis = space.hue_axis
    colors = []

    for index in range(count):
        u = lum_from if count < 2 else lum_from + (lum_to - lum_from) * index / (count - 1)
        saturated = saturate(rotate(reference, axis, hue_start + index * hue_step))
        luminated = apply_luminance(saturated, u, space)
        colors.append(apply_chroma(luminated, chroma_value, space, lum=u))

    return colors


# Chroma


def maximum_chroma(vector, lum: float) -> float:
    """Largest chroma scale that keeps every component within 0 … 1."""
    if lum <= 0:
        return np.inf

    x = lum - _vector(vector)
    w = 1.0 - lum

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.where(x < 0, w / -x, lum / x)
    ratios = np.where(np.abs(x) > _CHROMA_EPSILON, ratios, np.inf)

    return float(ratios.min())


def minimum_chroma(vector, lum: float) -> float:
    """Most negative chroma scale that keeps every component within 0 … 1."""
    if lum <= 0:
        return -np.inf

    x = lum - _vector(vector)
    w = 1.0 - lum

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = np.where(x > 0, w / -x, lum / x)
    ratios = np.where(np.abs(x) > _CHROMA_EPSILON, ratios, -np.inf)

    return float(ratios.max())


def chroma(vector, space: CHCLT, lum: float | None = None) -> float:
    """Fraction of the available saturation: 0 for gray, 1 at the cube surface."""
    v = _vector(vector)
    m = maximum_chroma(v, _luminance(v, space, lum))

    if not np.isfinite(m):
        return 0.0
    return 1.0 / m if m != 0 else np.inf


def scale_chroma(vector, scalar: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Scale the distance from gray. Values above one may leave the unit cube."""
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    return v * scalar + lum * (1.0 - scalar)


def apply_chroma(vector, value: float, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Set chroma as a fraction of the available headroom.

    Hue is kept for positive values, inverted for negative values and
    lost at zero. Luminance is preserved.
    """
    v = _vector(vector)
    lum = _luminance(v, space, lum)
    m = minimum_chroma(v, lum) if value < 0 else maximum_chroma(v, lum)
    s = abs(value) * m if np.isfinite(m) else 0.0
    return scale_chroma(v, s, space, lum=lum)


def match_chroma(vector, color, by: float, space: CHCLT) -> np.ndarray:
    """Interpolate chroma toward that of ``color``."""
    v = space.luminance(vector)
    w = space.luminance(color)
    c = chroma(vector, space, lum=v)
    d = chroma(color, space, lum=w)
    return apply_chroma(vector, c * (1.0 - by) + d * by, space, lum=v)


def hcl(vector, space: CHCLT) -> tuple[float, float, float]:
    """(hue, chroma, luminance) of a linear color."""
    v = _vector(vector)
    lum = space.luminance(v)
    return hue(v, space, lum=lum), chroma(v, space, lum=lum), lum


# Transform


class Mode(enum.Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


@dataclass(frozen=True)
class Effect:
    """A scalar adjustment, either relative to the current value or absolute."""

    scalar: float
    mode: Mode = Mode.ABSOLUTE


@dataclass(frozen=True)
class Transform:
    """Composite adjustment.

    Applied in a fixed order: contrast (or luminance when there is no
    contrast effect), then hue, then chroma.
    """

    contrast: Effect | None = None
    hue: Effect | None = None
    chroma: Effect | None = None
    luminance: Effect | None = None

    @classmethod
    def apply_contrast(cls, value: float) -> "Transform":
        return cls(contrast=Effect(value, Mode.ABSOLUTE))

    @classmethod
    def scale_contrast(cls, value: float) -> "Transform":
        return cls(contrast=Effect(value, Mode.RELATIVE))

    @classmethod
    def apply_hue(cls, value: float) -> "Transform":
        return cls(hue=Effect(value, Mode.ABSOLUTE))

    @classmethod
    def hue_shift(cls, value: float) -> "Transform":
        return cls(hue=Effect(value, Mode.RELATIVE))

    @classmethod
    def apply_chroma(cls, value: float) -> "Transform":
        return cls(chroma=Effect(value, Mode.ABSOLUTE))

    @classmethod
    def scale_chroma(cls, value: float) -> "Transform":
        return cls(chroma=Effect(value, Mode.RELATIVE))

    @classmethod
    def apply_luminance(cls, value: float) -> "Transform":
        return cls(luminance=Effect(value, Mode.ABSOLUTE))

    @classmethod
    def scale_luminance(cls, value: float) -> "Transform":
        return cls(luminance=Effect(value, Mode.RELATIVE))


def transform_contrast(vector, effect: Effect, space: CHCLT, lum: float | None = None) -> np.ndarray:
    if effect.mode is Mode.RELATIVE:
        return scale_contrast(vector, effect.scalar, space, lum=lum)
    return apply_contrast(vector, effect.scalar, space, lum=lum)


def transform_hue(vector, effect: Effect, space: CHCLT, lum: float | None = None) -> np.ndarray:
    if effect.mode is Mode.RELATIVE:
        return hue_shift(vector, effect.scalar, space, lum=lum)
    return hue_shift(vector, effect.scalar - hue(vector, space, lum=lum), space, lum=lum)


def transform_chroma(vector, effect: Effect, space: CHCLT, lum: float | None = None) -> np.ndarray:
    if effect.mode is Mode.RELATIVE:
        return scale_chroma(vector, effect.scalar, space, lum=lum)
    return apply_chroma(vector, effect.scalar, space, lum=lum)


def transform_luminance(vector, effect: Effect, space: CHCLT, lum: float | None = None) -> np.ndarray:
    if effect.mode is Mode.RELATIVE:
        return _vector(vector) * effect.scalar
    return apply_luminance(vector, effect.scalar, space, lum=lum)


def transform(vector, transform: Transform, space: CHCLT, lum: float | None = None) -> np.ndarray:
    """Apply a Transform: contrast or luminance, then hue, then chroma."""
    result = _vector(vector)
    lum = _luminance(result, space, lum)

    if transform.contrast is not None:
        result = transform_contrast(result, transform.contrast, space, lum=lum)
        lum = space.luminance(result)
    elif transform.luminance is not None:
        result = transform_luminance(result, transform.luminance, space, lum=lum)
        lum = space.luminance(result)

    if transform.hue is not None:
        result = transform_hue(result, transform.hue, space, lum=lum)

    if transform.chroma is not None:
        result = transform_chroma(result, transform.chroma, space, lum=lum)

    return result


__all__ = [
    "normalize",
    "illuminate",
    "saturate",
    "saturation",
    "apply_luminance",
    "match_luminance",
    "is_dark",
    "contrast",
    "scale_contrast",
    "apply_contrast",
    "match_contrast",
    "contrasting",
    "rotate",
    "hue",
    "hue_shift",
    "hue_push",
    "pure",
    "hue_range",
    "luminance_ramp",
    "maximum_chroma",
    "minimum_chroma",
    "chroma",
    "scale_chroma",
    "apply_chroma",
    "match_chroma",
    "hcl",
    "Mode",
    "Effect",
    "Transform",
    "transform_contrast",
    "transform_hue",
    "transform_chroma",
    "transform_luminance",
    "transform",
]

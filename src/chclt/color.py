"""Immutable color values in linear and display RGB.

LinearRGB wraps a linear-light vector and forwards to the engine.
DisplayRGB wraps a gamma-encoded vector with alpha, the form colors take
at the boundary with images, web colors and user interfaces.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from . import engine
from .space import CHCLT


# Distance from gray below which a color has no direction to saturate
_SATURATION_EPSILON = 2.0 ** -30


def _frozen_array(value, size: int) -> np.ndarray:
    arr = np.array(value, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"Expected shape ({size},), got {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class LinearRGB:
    """A color in the linear RGB space reached through a CHCLT.

    Components are nominally 0 … 1; ``normalized`` brings colors outside
    that range back in.
    """

    vector: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "vector", _frozen_array(self.vector, 3))

    def __repr__(self) -> str:
        r, g, b = self.vector
        return f"LinearRGB({r:.6g}, {g:.6g}, {b:.6g})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, LinearRGB):
            return NotImplemented
        return bool(np.array_equal(self.vector, other.vector))

    def __hash__(self) -> int:
        return hash(self.vector.tobytes())

    @classmethod
    def rgb(cls, red: float, green: float, blue: float) -> "LinearRGB":
        return cls(np.array([red, green, blue], dtype=float))

    @classmethod
    def gray(cls, value: float) -> "LinearRGB":
        return cls(np.full(3, float(value)))

    @classmethod
    def from_hue(cls, space: CHCLT, hue: float, luminance: float | None = None) -> "LinearRGB":
        """Most chromatic color of a hue, optionally at a given luminance."""
        return cls(engine.pure(hue, space, lum=luminance))

    @classmethod
    def from_hcl(cls, space: CHCLT, hue: float, chroma: float, luminance: float) -> "LinearRGB":
        pure = engine.pure(hue, space, lum=luminance)
        return cls(engine.apply_chroma(pure, chroma, space, lum=luminance))

    @property
    def clamped(self) -> "LinearRGB":
        return LinearRGB(np.clip(self.vector, 0.0, 1.0))

    def pixel(self) -> int:
        """Pack as 0xRRGGBB."""
        r, g, b = (int(c) for c in np.floor(np.clip(self.vector, 0.0, 1.0) * 255.0 + 0.5))
        return (r << 16) | (g << 8) | b

    def display(self, space: CHCLT, alpha: float = 1.0) -> "DisplayRGB":
        """Transfer to gamma-encoded display RGB."""
        return DisplayRGB(np.append(space.display(self.vector), alpha))

    def interpolated(self, towards: "LinearRGB", by: float) -> "LinearRGB":
        """Componentwise interpolation toward another color."""
        return LinearRGB(self.vector * (1.0 - by) + towards.vector * by)

    def normalized(self, space: CHCLT) -> "LinearRGB":
        return LinearRGB(engine.normalize(self.vector, self.luminance(space)))

    def is_normal(self) -> bool:
        return bool(self.vector.min() >= 0.0 and self.vector.max() <= 1.0)

    # Luminance

    def luminance(self, space: CHCLT) -> float:
        return space.luminance(self.vector)

    def scale_luminance(self, by: float) -> "LinearRGB":
        return LinearRGB(self.vector * by)

    def apply_luminance(self, space: CHCLT, value: float) -> "LinearRGB":
        return LinearRGB(engine.apply_luminance(self.vector, value, space))

    def maximum_luminance_preserving_ratio(self, space: CHCLT) -> float:
        d = self.vector.max()
        return self.luminance(space) / d if d > 0 else 1.0

    def illuminated(self) -> "LinearRGB":
        return LinearRGB(engine.illuminate(self.vector))

    def match_luminance(self, space: CHCLT, to: "LinearRGB", by: float) -> "LinearRGB":
        return LinearRGB(engine.match_luminance(self.vector, to.vector, by, space))

    # Contrast

    def is_dark(self, space: CHCLT) -> bool:
        return engine.is_dark(self.vector, space)

    def contrast(self, space: CHCLT) -> float:
        return engine.contrast(self.vector, space)

    def scale_contrast(self, space: CHCLT, by: float) -> "LinearRGB":
        return LinearRGB(engine.scale_contrast(self.vector, by, space))

    def apply_contrast(self, space: CHCLT, value: float) -> "LinearRGB":
        return LinearRGB(engine.apply_contrast(self.vector, value, space))

    def opposing(self, space: CHCLT, value: float) -> "LinearRGB":
        """Color with the given contrast on the other side of medium luminance."""
        return self.apply_contrast(space, -value)

    def contrasting(self, space: CHCLT, value: float) -> "LinearRGB":
        return LinearRGB(engine.contrasting(self.vector, value, space))

    def match_contrast(self, space: CHCLT, to: "LinearRGB", by: float) -> "LinearRGB":
        return LinearRGB(engine.match_contrast(self.vector, to.vector, by, space))

    # Chroma

    def chroma(self, space: CHCLT) -> float:
        return engine.chroma(self.vector, space)

    def scale_chroma(self, space: CHCLT, by: float) -> "LinearRGB":
        return LinearRGB(engine.scale_chroma(self.vector, by, space))

    def apply_chroma(self, space: CHCLT, value: float) -> "LinearRGB":
        return LinearRGB(engine.apply_chroma(self.vector, value, space))

    def match_chroma(self, space: CHCLT, to: "LinearRGB", by: float) -> "LinearRGB":
        return LinearRGB(engine.match_chroma(self.vector, to.vector, by, space))

    # Saturation

    def saturation(self, space: CHCLT) -> float:
        return engine.saturation(self.vector, space)

    def apply_saturation(self, space: CHCLT, value: float) -> "LinearRGB":
        s = self.saturation(space)
        return self.scale_chroma(space, value / s) if s > _SATURATION_EPSILON else self

    def match_saturation(self, space: CHCLT, to: "LinearRGB", by: float) -> "LinearRGB":
        s = self.saturation(space)
        t = to.saturation(space)
        return self.apply_saturation(space, s * (1.0 - by) + t * by)

    def saturated(self) -> "LinearRGB":
        return LinearRGB(engine.saturate(self.vector))

    # Hue

    def hue(self, space: CHCLT) -> float:
        return engine.hue(self.vector, space)

    def hue_shifted(self, space: CHCLT, by: float) -> "LinearRGB":
        return LinearRGB(engine.hue_shift(self.vector, by, space))

    def hue_pushed(self, space: CHCLT, away_from: "LinearRGB", minimum_shift: float) -> "LinearRGB":
        return LinearRGB(engine.hue_push(self.vector, away_from.vector, minimum_shift, space))

    def hcl(self, space: CHCLT) -> tuple[float, float, float]:
        return engine.hcl(self.vector, space)

    # Transform

    def transform(self, space: CHCLT, transform: engine.Transform) -> "LinearRGB":
        return LinearRGB(engine.transform(self.vector, transform, space))


LinearRGB.BLACK = LinearRGB.gray(0.0)
LinearRGB.WHITE = LinearRGB.gray(1.0)
LinearRGB.RED = LinearRGB.rgb(1.0, 0.0, 0.0)
LinearRGB.ORANGE = LinearRGB.rgb(1.0, 0.5, 0.0)
LinearRGB.YELLOW = LinearRGB.rgb(1.0, 1.0, 0.0)
LinearRGB.CHARTREUSE = LinearRGB.rgb(0.5, 1.0, 0.0)
LinearRGB.GREEN = LinearRGB.rgb(0.0, 1.0, 0.0)
LinearRGB.SPRING = LinearRGB.rgb(0.0, 1.0, 0.5)
LinearRGB.CYAN = LinearRGB.rgb(0.0, 1.0, 1.0)
LinearRGB.AZURE = LinearRGB.rgb(0.0, 0.5, 1.0)
LinearRGB.BLUE = LinearRGB.rgb(0.0, 0.0, 1.0)
LinearRGB.VIOLET = LinearRGB.rgb(0.5, 0.0, 1.0)
LinearRGB.MAGENTA = LinearRGB.rgb(1.0, 0.0, 1.0)
LinearRGB.ROSE = LinearRGB.rgb(1.0, 0.0, 0.5)


# Web format flags for DisplayRGB.web
WEB_COMPACT_GRAY = 0x02
WEB_REGULAR_GRAY = 0x04
WEB_COMPACT = 0x08
WEB_COMPACT_ALPHA = 0x10
WEB_REGULAR = 0x40
WEB_REGULAR_ALPHA = 0x100


@dataclass(frozen=True, eq=False)
class DisplayRGB:
    """Gamma-encoded RGB with alpha, shape (4,)."""

    vector: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "vector", _frozen_array(self.vector, 4))

    def __repr__(self) -> str:
        return "RGBA({:.3g}, {:.3g}, {:.3g}, {:.3g})".format(*self.vector)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DisplayRGB):
            return NotImplemented
        return bool(np.array_equal(self.vector, other.vector))

    def __hash__(self) -> int:
        return hash(self.vector.tobytes())

    @classmethod
    def rgba(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "DisplayRGB":
        return cls(np.array([red, green, blue, alpha], dtype=float))

    @classmethod
    def gray(cls, value: float, alpha: float = 1.0) -> "DisplayRGB":
        return cls.rgba(value, value, value, alpha)

    @classmethod
    def from_hcl(
        cls,
        space: CHCLT,
        hue: float,
        chroma: float,
        luma: float,
        alpha: float = 1.0,
    ) -> "DisplayRGB":
        """Display color from hue, chroma and (linear) luminance."""
        linear = LinearRGB.from_hue(space, hue, luma).apply_chroma(space, chroma)
        return cls(np.append(space.display(np.maximum(linear.vector, 0.0)), alpha))

    @classmethod
    def from_hsb(cls, hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> "DisplayRGB":
        """Hexagonal hue, saturation, brightness model."""
        if not (brightness > 0 and saturation > 0):
            return cls.gray(brightness, alpha)

        hue1 = np.array([hue, hue - 1.0 / 3.0, hue - 2.0 / 3.0])
        hue2 = hue1 - np.floor(hue1) - 0.5
        hue3 = np.abs(hue2) * 6.0 - 1.0
        hue4 = np.clip(hue3, 0.0, 1.0)
        c = saturation * brightness
        m = brightness - c

        return cls(np.append(hue4 * c + m, alpha))

    @property
    def red(self) -> float:
        return float(self.vector[0])

    @property
    def green(self) -> float:
        return float(self.vector[1])

    @property
    def blue(self) -> float:
        return float(self.vector[2])

    @property
    def alpha(self) -> float:
        return float(self.vector[3])

    @property
    def rgb(self) -> np.ndarray:
        return self.vector[:3].copy()

    @property
    def clamped(self) -> "DisplayRGB":
        return DisplayRGB(np.clip(self.vector, 0.0, 1.0))

    @property
    def inverted(self) -> "DisplayRGB":
        return DisplayRGB(np.append(1.0 - self.vector[:3], self.vector[3]))

    @property
    def integer(self) -> tuple[int, int, int, int]:
        """Components scaled to 0 … 255, rounded half away from zero."""
        scaled = np.floor(np.clip(self.vector, 0.0, 1.0) * 255.0 + 0.5)
        r, g, b, a = (int(c) for c in scaled)
        return r, g, b, a

    def pixel(self) -> int:
        """Pack as 0xAARRGGBB."""
        r, g, b, a = self.integer
        return (a << 24) | (r << 16) | (g << 8) | b

    def web(self, allow_format: int = 0) -> str:
        """Hex color string.

        ``allow_format`` is a combination of the ``WEB_*`` flags. Compact
        forms (#RGB) are used when every component is a multiple of 17 or
        no regular form is allowed. Alpha is included for translucent colors
        when allowed, or always when only the alpha form is allowed.
        """
        r, g, b, a = self.integer

        allow_compact = (allow_format & 0x1A) != 0
        allow_regular = (allow_format & 0x144) != 0
        is_compact = all(c % 17 == 0 for c in (r, g, b, a))
        is_gray = r == g == b
        is_opaque = a == 255

        if allow_compact and (is_compact or not allow_regular):
            allow_opacity = (allow_format & WEB_COMPACT_ALPHA) != 0
            allow_gray = (allow_format & WEB_COMPACT_GRAY) != 0
            alpha_only = (allow_format & 0x18) == WEB_COMPACT_ALPHA
            scalar, digits = 17, "{:X}"
        else:
            allow_opacity = (allow_format & WEB_REGULAR_ALPHA) != 0
            allow_gray = (allow_format & WEB_REGULAR_GRAY) != 0
            alpha_only = (allow_format & 0x140) == WEB_REGULAR_ALPHA
            scalar, digits = 1, "{:02X}"

        if allow_gray and is_gray and (is_opaque or not allow_opacity):
            components = (r,)
        elif alpha_only if is_opaque else allow_opacity:
            components = (r, g, b, a)
        else:
            components = (r, g, b)

        return "#" + "".join(digits.format(c // scalar) for c in components)

    def css(self, with_alpha: int = 0) -> str:
        """CSS rgb()/rgba() string; alpha is included when translucent unless ``with_alpha < 0``."""
        red, green, blue = (c * 255.0 for c in self.vector[:3])
        if with_alpha > 0 or (with_alpha == 0 and self.alpha < 1):
            text = "rgba(%.1f, %.1f, %.1f, %.3g)" % (red, green, blue, self.alpha)
            return text.replace(".0,", ",")
        text = "rgb(%.1f, %.1f, %.1f)" % (red, green, blue)
        return text.replace(".0,", ",").replace(".0)", ")")

    def linear(self, space: CHCLT) -> LinearRGB:
        return LinearRGB(space.linear(self.vector[:3]))

    def scaled(self, by: float) -> "DisplayRGB":
        return DisplayRGB(np.append(self.vector[:3] * by, self.vector[3]))

    def normalized(self, space: CHCLT) -> "DisplayRGB":
        return self.linear(space).normalized(space).display(space, self.alpha)

    # Luma

    def luma(self, space: CHCLT) -> float:
        """Luminance of the linear color."""
        return self.linear(space).luminance(space)

    def scale_luma(self, space: CHCLT, by: float) -> "DisplayRGB":
        return self.scaled(space.transfer(by) if by > 0 else 0.0)

    def apply_luma(self, space: CHCLT, value: float) -> "DisplayRGB":
        """Display-space counterpart of applying luminance.

        The in-gamut case scales the display components directly, which
        avoids a round trip through linear space.
        """
        alpha = self.alpha

        if value <= 0:
            return DisplayRGB.gray(0.0, alpha)
        if value >= 1:
            return DisplayRGB.gray(1.0, alpha)

        linear = space.linear(self.vector[:3])
        v = space.luminance(linear)

        if v <= 0:
            return DisplayRGB.gray(space.transfer(value), alpha)

        n = engine.normalize(linear, v, leave_positive=True)
        rgb = space.display(n)
        s = space.transfer(value / v)
        d = rgb.max()

        if not s * d > 1:
            return DisplayRGB(np.append(rgb * s, alpha))

        m = space.linear(rgb / d)
        w = space.luminance(m)

        if w >= 1:
            return DisplayRGB.gray(space.transfer(value), alpha)

        distance_from_white = (1.0 - value) / (1.0 - w)
        interpolated = 1.0 - distance_from_white + distance_from_white * m
        return DisplayRGB(np.append(space.display(interpolated), alpha))

    # Contrast, chroma and hue through linear space

    def contrast(self, space: CHCLT) -> float:
        return self.linear(space).contrast(space)

    def scale_contrast(self, space: CHCLT, by: float) -> "DisplayRGB":
        return self.linear(space).scale_contrast(space, by).display(space, self.alpha)

    def apply_contrast(self, space: CHCLT, value: float) -> "DisplayRGB":
        return self.linear(space).apply_contrast(space, value).display(space, self.alpha)

    def contrasting(self, space: CHCLT, value: float) -> "DisplayRGB":
        return self.linear(space).contrasting(space, value).display(space, self.alpha)

    def chroma(self, space: CHCLT) -> float:
        return self.linear(space).chroma(space)

    def scale_chroma(self, space: CHCLT, by: float) -> "DisplayRGB":
        return self.linear(space).scale_chroma(space, by).display(space, self.alpha)

    def apply_chroma(self, space: CHCLT, value: float) -> "DisplayRGB":
        return self.linear(space).apply_chroma(space, value).display(space, self.alpha)

    def hue(self, space: CHCLT) -> float:
        return self.linear(space).hue(space)

    def hue_shifted(self, space: CHCLT, by: float) -> "DisplayRGB":
        return self.linear(space).hue_shifted(space, by).display(space, self.alpha)

    def transform(self, space: CHCLT, transform: engine.Transform) -> "DisplayRGB":
        return self.linear(space).transform(space, transform).display(space, self.alpha)

    def hsb(self) -> tuple[float, float, float]:
        """Hexagonal (hue, saturation, brightness), the inverse of ``from_hsb``.

        Grays report hue 0 and saturation 0.
        """
        r, g, b = (float(c) for c in self.vector[:3])

        if r < g:
            if g < b:
                maximum, mid_minus_min, max_minus_min, domain = b, r - g, b - r, 4.0
            else:
                maximum, mid_minus_min, max_minus_min, domain = g, b - r, g - min(r, b), 2.0
        else:
            if r < b:
                maximum, mid_minus_min, max_minus_min, domain = b, r - g, b - g, 4.0
            else:
                maximum, mid_minus_min, max_minus_min, domain = r, g - b, r - min(g, b), 0.0

        if not max_minus_min > 0:
            return 0.0, 0.0, maximum

        hue = (domain + mid_minus_min / max_minus_min) / 6.0
        return (1.0 + hue if hue < 0 else hue), max_minus_min / maximum, maximum

    def hcl(self, space: CHCLT) -> tuple[float, float, float]:
        """(hue, chroma, luminance) of the linear color."""
        return self.linear(space).hcl(space)


DisplayRGB.BLACK = DisplayRGB.gray(0.0)
DisplayRGB.WHITE = DisplayRGB.gray(1.0)


__all__ = [
    "LinearRGB",
    "DisplayRGB",
    "WEB_COMPACT_GRAY",
    "WEB_REGULAR_GRAY",
    "WEB_COMPACT",
    "WEB_COMPACT_ALPHA",
    "WEB_REGULAR",
    "WEB_REGULAR_ALPHA",
]

"""Derive a set of related interface colors from a primary color.

A palette pairs a primary (foreground) color with a contrasting
(background) color. Lesser tiers move each toward medium contrast and
reduce chroma according to an Adjustment:

    c = value * adjustment.contrast + (1 - value)
    s = value * adjustment.chroma + (1 - value)
    tier = color.scale_contrast(c).apply_chroma(chroma * s)

so value 0 leaves the color unchanged and value 1 applies the adjustment
fully. Values above 1 extrapolate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .color import LinearRGB
from .space import CHCLT, DEFAULT


@dataclass(frozen=True)
class Adjustment:
    """Contrast and chroma scalars applied at full tier strength."""

    contrast: float
    chroma: float

    HALF: ClassVar["Adjustment"]


Adjustment.HALF = Adjustment(0.5, 0.5)


class Palette:
    """Foreground and background tiers derived from a primary color.

    Parameters
    ----------
    primary : LinearRGB
        Primary foreground color.
    contrasting : LinearRGB or Adjustment, optional
        Primary background color, or an Adjustment used to derive it from
        ``primary``: its contrast is passed to ``contrasting`` and its
        chroma scales the chroma of the primary. Defaults to
        ``Adjustment(0.0, 0.5)``, a background at the minimum suggested
        contrast with half the chroma.
    space : CHCLT
        Color space, sRGB by default.
    primary_adjustment, contrasting_adjustment : Adjustment
        Applied to the foreground and background tiers.
    """

    def __init__(
        self,
        primary: LinearRGB,
        contrasting: LinearRGB | Adjustment | None = None,
        space: CHCLT = DEFAULT,
        primary_adjustment: Adjustment = Adjustment.HALF,
        contrasting_adjustment: Adjustment = Adjustment.HALF,
    ):
        if contrasting is None:
            contrasting = Adjustment(0.0, 0.5)

        self.space = space
        self.primary = primary
        self.primary_chroma = primary.chroma(space)
        self.primary_adjustment = primary_adjustment
        self.contrasting_adjustment = contrasting_adjustment

        if isinstance(contrasting, Adjustment):
            self.contrasting_chroma = self.primary_chroma * contrasting.chroma
            self.contrasting = primary.contrasting(space, contrasting.contrast).apply_chroma(
                space, self.contrasting_chroma
            )
        else:
            self.contrasting = contrasting
            self.contrasting_chroma = contrasting.chroma(space)

    def __repr__(self) -> str:
        return f"Palette(primary={self.primary!r}, contrasting={self.contrasting!r}, space={self.space.name!r})"

    def adjust(
        self,
        color: LinearRGB,
        value: float,
        adjustment: Adjustment,
        chroma: float = 1.0,
    ) -> LinearRGB:
        n = 1.0 - value
        c = value * adjustment.contrast + n
        s = value * adjustment.chroma + n
        return color.scale_contrast(self.space, c).apply_chroma(self.space, chroma * s)

    def foreground(self, value: float) -> LinearRGB:
        return self.adjust(self.primary, value, self.primary_adjustment, self.primary_chroma)

    def background(self, value: float) -> LinearRGB:
        return self.adjust(
            self.contrasting, value, self.contrasting_adjustment, abs(self.contrasting_chroma)
        )

    @property
    def primary_foreground(self) -> LinearRGB:
        return self.primary

    @property
    def secondary_foreground(self) -> LinearRGB:
        return self.foreground(0.5)

    @property
    def tertiary_foreground(self) -> LinearRGB:
        return self.foreground(1.0)

    @property
    def primary_background(self) -> LinearRGB:
        return self.contrasting

    @property
    def secondary_background(self) -> LinearRGB:
        return self.background(0.5)

    @property
    def tertiary_background(self) -> LinearRGB:
        return self.background(1.0)

    @property
    def placeholder(self) -> LinearRGB:
        return self.background(2.0)

    @property
    def divider(self) -> LinearRGB:
        return self.background(1.5)

    def disabled(self, color: LinearRGB) -> LinearRGB:
        """Half the contrast of ``color``."""
        return color.scale_contrast(self.space, 0.5)

    def inverted(self, color: LinearRGB) -> LinearRGB:
        """Same contrast on the other side of medium luminance."""
        return color.scale_contrast(self.space, -1.0)

    def adapt(self, color: LinearRGB, similar: LinearRGB, minimum_shift: float = 0.05) -> LinearRGB:
        """Move ``color`` toward the luminance and chroma of ``similar``.

        Low contrast references pull harder. The hue is then pushed away
        from that of ``similar`` so the two stay distinguishable.
        """
        contrast = similar.contrast(self.space)
        return (
            color.match_luminance(self.space, similar, 0.625 - 0.125 * contrast)
            .match_chroma(self.space, similar, 0.75 - 0.5 * contrast)
            .hue_pushed(self.space, similar, minimum_shift)
        )


__all__ = ["Adjustment", "Palette"]

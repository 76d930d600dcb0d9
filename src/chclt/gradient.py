"""Gradients through color stops, interpolated in linear light."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .color import DisplayRGB, LinearRGB
from .space import CHCLT


@dataclass(frozen=True)
class ColorStop:
    """A linear color with alpha at a location along the gradient."""

    color: LinearRGB
    alpha: float
    location: float

    def vector(self) -> np.ndarray:
        """Linear (r, g, b, alpha)."""
        return np.append(self.color.vector, self.alpha)

    def display(self, space: CHCLT) -> DisplayRGB:
        return self.color.display(space, self.alpha)


@dataclass(frozen=True)
class Gradient:
    """Piecewise-linear interpolation between color stops.

    Stops are expected in ascending order of location. Locations before
    the first stop or after the last take the color of that stop.
    """

    space: CHCLT
    stops: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def from_display(
        cls,
        space: CHCLT,
        colors: Sequence[DisplayRGB],
        locations: Sequence[float] | None = None,
    ) -> "Gradient":
        """Build from display colors.

        Without ``locations`` the colors are spread evenly over 0 … 1.
        With ``locations`` the shorter of the two sequences sets the
        number of stops.
        """
        colors = list(colors)
        if locations is None:
            scalar = max(len(colors) - 1, 1)
            locations = [index / scalar for index in range(len(colors))]

        stops = [
            ColorStop(color.linear(space), color.alpha, float(location))
            for color, location in zip(colors, locations)
        ]
        return cls(space, stops)

    @property
    def locations(self) -> list[float]:
        return [stop.location for stop in self.stops]

    def interpolate(self, location: float) -> np.ndarray:
        """Linear (r, g, b, alpha) at ``location``."""
        count = len(self.stops)

        if count == 0:
            return np.zeros(4)
        if count == 1:
            return self.stops[0].vector()

        above = bisect_left(self.locations, location)

        if above >= count:
            return self.stops[-1].vector()
        if above == 0:
            return self.stops[0].vector()

        upper = self.stops[above]
        lower = self.stops[above - 1]
        fraction = (location - lower.location) / (upper.location - lower.location)
        alpha = lower.alpha * (1.0 - fraction) + upper.alpha * fraction
        color = lower.color.interpolated(upper.color, fraction)

        return np.append(color.vector, alpha)

    def display(self, location: float) -> DisplayRGB:
        """Display color at ``location``."""
        rgba = self.interpolate(location)
        return DisplayRGB(np.append(self.space.display(rgba[:3]), rgba[3]))

    def sample(self, count: int) -> np.ndarray:
        """Evenly spaced samples over 0 … 1, shape (count, 4)."""
        if count < 1:
            return np.zeros((0, 4))
        return np.array([self.interpolate(t) for t in np.linspace(0.0, 1.0, count)])


__all__ = ["ColorStop", "Gradient"]

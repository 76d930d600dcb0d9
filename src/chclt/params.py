"""Contrast parameters shared by all contrast math.

Contrast in CHCLT is a distance from the medium luminance m:

    c = (v - m) / (1 - m)   if v > m
    c = 1 - v / m           otherwise
    contrast = |c| ** power

so black and white have contrast 1 and a color at m has contrast 0.

Ratio-based models (WCAG G18, section 508) relate to m through
    m = 1 / (r + 1),   r = 1/m - 1,   d = (1 - 2m) / m²
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict


class ConfigurationError(ValueError):
    """Raised when color-space or contrast parameters are invalid."""
    pass


def _validate_open_unit(name: str, value: float) -> None:
    """Raise ConfigurationError unless 0 < value < 1."""
    if not 0.0 < value < 1.0:
        raise ConfigurationError(f"{name} must be in (0, 1) (got {value})")


def default_power(medium_luminance: float) -> float:
    """Typical curve power 13·m·√m, never below linear."""
    return max(1.0, 13.0 * medium_luminance ** 1.5)


@dataclass(frozen=True)
class Contrast:
    """Medium luminance and curve power.

    Fields:
    - medium_luminance: luminance separating dark from light colors
    - power: curve shape, 1.0 is linear. Non-positive selects 13·m^1.5.
    """

    medium_luminance: float
    power: float = field(default=0.0)

    def __post_init__(self) -> None:
        _validate_open_unit("medium_luminance", self.medium_luminance)
        if self.power <= 0:
            object.__setattr__(self, "power", default_power(self.medium_luminance))
        if self.power < 1.0:
            raise ConfigurationError(f"power must be >= 1 (got {self.power})")

    @property
    def linear_offset(self) -> float:
        """Offset 1/d of the equivalent ratio model: m² / (1 - 2m)."""
        m = self.medium_luminance
        return m * m / (1.0 - 2.0 * m)

    @property
    def linear_ratio(self) -> float:
        """Luminance ratio r = 1/m - 1 of the equivalent ratio model."""
        return 1.0 / self.medium_luminance - 1.0

    def to_dict(self) -> Dict[str, float]:
        return {"medium_luminance": self.medium_luminance, "power": self.power}

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray | Dict[str, Any]) -> "Contrast":
        """Deserialize from a JSON string or dict."""
        if isinstance(data, (str, bytes, bytearray)):
            payload = json.loads(data)
        else:
            payload = data
        return cls(
            medium_luminance=float(payload["medium_luminance"]),
            power=float(payload.get("power", 0.0)),
        )

    @classmethod
    def from_ratio(cls, ratio: float, power: float = 1.0) -> "Contrast":
        """Contrast whose medium luminance matches a luminance ratio: m = 1/(r+1)."""
        if ratio <= 0:
            raise ConfigurationError(f"ratio must be > 0 (got {ratio})")
        return cls(1.0 / (ratio + 1.0), power=power)


__all__ = ["Contrast", "ConfigurationError", "default_power"]

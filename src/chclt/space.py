"""CHCLT color-space configuration and the registry of named spaces.

A CHCLT combines:
- luminance coefficients (the Y row of the RGB→XYZ matrix)
- a Contrast (medium luminance and curve power)
- a transfer function (display ↔ linear)

Named spaces are built once at import and exposed through a read-only
mapping. Nothing in a CHCLT changes after construction.
"""

from __future__ import annotations

import json
import warnings
from dataclasses import dataclass, field, replace
from functools import cached_property
from types import MappingProxyType
from typing import Any, Dict, Mapping

import numpy as np

from . import colorimetry
from .params import ConfigurationError, Contrast
from .transfer import (
    BT,
    ROMM,
    SRGB,
    Identity,
    PowerLaw,
    TransferFunction,
    default_contrast,
    transfer_from_dict,
    transfer_signed,
)

# Coefficient sums further than this from 1 break luminance-preserving desaturation
_COEFFICIENT_SUM_TOLERANCE = 1e-3


def as_vector3(value) -> np.ndarray:
    """Coerce to a float array with trailing dimension 3."""
    arr = np.array(value, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"Expected last dim=3 for vector, got {arr.shape}")
    return arr


def _validate_coefficients(coefficients: np.ndarray) -> None:
    if coefficients.shape != (3,):
        raise ConfigurationError(f"coefficients must have shape (3,), got {coefficients.shape}")
    if not np.all(coefficients > 0):
        raise ConfigurationError(f"coefficients must be positive (got {coefficients.tolist()})")
    total = float(coefficients.sum())
    if abs(total - 1.0) > _COEFFICIENT_SUM_TOLERANCE:
        warnings.warn(
            f"Luminance coefficients sum to {total:.6g}; white will not have luminance 1",
            stacklevel=3,
        )


@dataclass(frozen=True, eq=False)
class CHCLT:
    """Cole Hue Chroma Luma Transform configuration.

    Parameters
    ----------
    coefficients : array-like
        Positive luminance weights for linear (r, g, b), shape (3,).
    contrast : Contrast, optional
        Defaults to the medium luminance ``transfer.linear(0.5)``.
    transfer_function : TransferFunction
        Display ↔ linear conversion, Identity by default.
    name : str
        Label used by the registry and in serialization.
    """

    coefficients: np.ndarray
    contrast: Contrast | None = None
    transfer_function: TransferFunction = field(default_factory=Identity)
    name: str = ""

    def __post_init__(self) -> None:
        coefficients = np.array(self.coefficients, dtype=float)
        _validate_coefficients(coefficients)
        coefficients.setflags(write=False)
        object.__setattr__(self, "coefficients", coefficients)
        if self.contrast is None:
            object.__setattr__(self, "contrast", default_contrast(self.transfer_function))

    def __repr__(self) -> str:
        c = ", ".join(f"{x:.6g}" for x in self.coefficients)
        return (
            f"CHCLT(name={self.name!r}, coefficients=[{c}], "
            f"contrast={self.contrast!r}, transfer_function={self.transfer_function!r})"
        )

    @classmethod
    def from_matrix(
        cls,
        rgb_to_xyz,
        transfer_function: TransferFunction | None = None,
        contrast: Contrast | None = None,
        name: str = "",
    ) -> "CHCLT":
        """Build from an RGB→XYZ matrix, taking its Y row as coefficients."""
        return cls(
            colorimetry.luminance_coefficients(rgb_to_xyz),
            contrast=contrast,
            transfer_function=transfer_function if transfer_function is not None else Identity(),
            name=name,
        )

    def with_contrast(self, contrast: Contrast) -> "CHCLT":
        return replace(self, contrast=contrast)

    # Transfer

    def linear(self, value):
        """Display → linear, componentwise. ``display(linear(rgb)) == rgb``."""
        return self.transfer_function.linear(value)

    def transfer(self, value):
        """Linear → display for nonnegative input."""
        return self.transfer_function.transfer(value)

    def transfer_signed(self, value):
        return transfer_signed(self.transfer_function, value)

    def display(self, vector):
        """Linear → display, componentwise, odd-symmetric for negative components."""
        return transfer_signed(self.transfer_function, vector)

    # Luminance

    def luminance(self, vector) -> float | np.ndarray:
        """rgb · coefficients for linear rgb of shape (..., 3)."""
        result = as_vector3(vector) @ self.coefficients
        if np.ndim(result) == 0:
            return float(result)
        return result

    def inverse_luminance(self, vector) -> np.ndarray:
        """Components that would produce the given luminance along each channel."""
        return as_vector3(vector) / self.coefficients

    @property
    def medium_luminance(self) -> float:
        return self.contrast.medium_luminance

    # Hue geometry

    @cached_property
    def hue_axis(self) -> np.ndarray:
        """Unit rotation axis for hue shifts, red × green of the inverse white."""
        inverse = self.inverse_luminance(np.ones(3))
        x, y = inverse[0], inverse[1]
        red_cross_green = np.array([y, x, x * y - x - y])
        axis = red_cross_green / np.linalg.norm(red_cross_green)
        axis.setflags(write=False)
        return axis

    def hue_reference(self, lum: float) -> np.ndarray:
        """Pure red scaled to the given luminance."""
        return self.inverse_luminance(np.array([lum, 0.0, 0.0]))

    @cached_property
    def hue_reference_unit(self) -> np.ndarray:
        """Direction of hue zero in the plane of constant luminance."""
        d = self.hue_reference(1.0) - 1.0
        unit = d / np.linalg.norm(d)
        unit.setflags(write=False)
        return unit

    # Serialization

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "coefficients": [float(c) for c in self.coefficients],
            "contrast": self.contrast.to_dict(),
            "transfer": self.transfer_function.to_dict(),
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray | Dict[str, Any]) -> "CHCLT":
        """Deserialize from a JSON string or dict."""
        if isinstance(data, (str, bytes, bytearray)):
            payload = json.loads(data)
        else:
            payload = data
        contrast = payload.get("contrast")
        return cls(
            coefficients=np.array(payload["coefficients"], dtype=float),
            contrast=Contrast.from_json(contrast) if contrast is not None else None,
            transfer_function=transfer_from_dict(payload.get("transfer", {"kind": "identity"})),
            name=str(payload.get("name", "")),
        )


def _pure(name: str, rgb_to_xyz, exponent: float) -> CHCLT:
    return CHCLT.from_matrix(rgb_to_xyz, transfer_function=PowerLaw(exponent), name=name)


def _build_registry() -> Dict[str, CHCLT]:
    srgb_coefficients = colorimetry.luminance_coefficients(colorimetry.RGB_TO_XYZ_SRGB_D65)
    srgb_contrast = default_contrast(SRGB())
    bt601 = CHCLT(np.array([0.299, 0.587, 0.114]), transfer_function=BT(), name="bt601")
    bt2020 = CHCLT.from_matrix(colorimetry.RGB_TO_XYZ_BT2020_D65, transfer_function=BT(), name="bt2020")

    spaces = [
        CHCLT(srgb_coefficients, transfer_function=SRGB(), name="srgb"),
        CHCLT(srgb_coefficients, contrast=srgb_contrast, name="srgb_linear"),
        CHCLT.from_matrix(colorimetry.RGB_TO_XYZ_DISPLAY_P3_D65, transfer_function=SRGB(), name="display_p3"),
        CHCLT(srgb_coefficients, contrast=Contrast(2.0 / 11.0, power=1.0), transfer_function=SRGB(), name="g18"),
        bt601,
        CHCLT.from_matrix(colorimetry.RGB_TO_XYZ_BT709_D65, transfer_function=BT(), name="bt709"),
        bt2020,
        replace(bt2020, name="bt2100"),
        CHCLT.from_matrix(colorimetry.RGB_TO_XYZ_ROMM_D50, transfer_function=ROMM(), name="romm"),
        _pure("pure_240", colorimetry.RGB_TO_XYZ_SMPTE240M_D65, 2.0),
        CHCLT(bt601.coefficients, transfer_function=PowerLaw(19.0 / 10.0), name="pure_601"),
        _pure("pure_709", colorimetry.RGB_TO_XYZ_BT709_D65, 19.0 / 10.0),
        _pure("pure_2020", colorimetry.RGB_TO_XYZ_BT2020_D65, 19.0 / 10.0),
        _pure("pure_srgb", colorimetry.RGB_TO_XYZ_SRGB_D65, 11.0 / 5.0),
        _pure("pure_dci_p3", colorimetry.RGB_TO_XYZ_THEATER_P3_DCI, 13.0 / 5.0),
        _pure("pure_adobe_rgb", colorimetry.RGB_TO_XYZ_ADOBE_RGB_D65, 563.0 / 256.0),
    ]
    return {space.name: space for space in spaces}


SPACES: Mapping[str, CHCLT] = MappingProxyType(_build_registry())

SRGB_SPACE = SPACES["srgb"]
SRGB_LINEAR = SPACES["srgb_linear"]
DISPLAY_P3 = SPACES["display_p3"]
G18 = SPACES["g18"]
BT601 = SPACES["bt601"]
BT709 = SPACES["bt709"]
BT2020 = SPACES["bt2020"]
BT2100 = SPACES["bt2100"]
ROMM_SPACE = SPACES["romm"]

DEFAULT = SRGB_SPACE


def available_spaces() -> list[str]:
    """Names of the registered color spaces."""
    return sorted(SPACES)


def get_space(name: str) -> CHCLT:
    """Look up a registered color space by name (case-insensitive).

    Raises
    ------
    ConfigurationError
        If no space is registered under that name.
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return SPACES[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown color space {name!r}, expected one of {available_spaces()}"
        ) from None


__all__ = [
    "CHCLT",
    "as_vector3",
    "SPACES",
    "DEFAULT",
    "SRGB_SPACE",
    "SRGB_LINEAR",
    "DISPLAY_P3",
    "G18",
    "BT601",
    "BT709",
    "BT2020",
    "BT2100",
    "ROMM_SPACE",
    "available_spaces",
    "get_space",
]

"""Transfer functions between gamma-encoded display values and linear light.

Each variant provides ``linear`` (display → linear) and ``transfer``
(linear → display). They are algebraic inverses on the nonnegative reals
and monotonic. Inputs may be scalars or arrays.

The set of variants is closed: Identity, PowerLaw, SRGB, BT, ROMM.
``TRANSFER_KINDS`` maps the serialized ``kind`` name to its class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

import numpy as np

from .params import ConfigurationError, Contrast


def _scalar_or_array(source, result: np.ndarray):
    """Return a float for scalar input, otherwise the array."""
    if np.ndim(source) == 0:
        return float(result)
    return result


@dataclass(frozen=True)
class Identity:
    """Pass-through, used for linear-space configurations."""

    kind: ClassVar[str] = "identity"

    def linear(self, value):
        return _scalar_or_array(value, np.asarray(value, dtype=float))

    def transfer(self, value):
        return _scalar_or_array(value, np.asarray(value, dtype=float))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class PowerLaw:
    """Pure power law: linear = |x|^(γ-1)·x, transfer = sign(x)·|x|^(1/γ)."""

    exponent: float
    kind: ClassVar[str] = "power"

    def __post_init__(self) -> None:
        if self.exponent <= 0:
            raise ConfigurationError(f"exponent must be > 0 (got {self.exponent})")

    def linear(self, value):
        x = np.asarray(value, dtype=float)
        return _scalar_or_array(value, np.abs(x) ** (self.exponent - 1.0) * x)

    def transfer(self, value):
        x = np.asarray(value, dtype=float)
        return _scalar_or_array(value, np.copysign(np.abs(x) ** (1.0 / self.exponent), x))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "exponent": self.exponent}


@dataclass(frozen=True)
class SRGB:
    """sRGB-style piecewise curve.

    The linear segment slope 12.9232102 places the threshold at 11/280,
    where both segments meet.
    """

    kind: ClassVar[str] = "srgb"
    slope: ClassVar[float] = 12.9232102
    threshold: ClassVar[float] = 11.0 / 280.0

    def linear(self, value):
        x = np.asarray(value, dtype=float)
        curve = ((200.0 * np.maximum(x, self.threshold) + 11.0) / 211.0) ** (12.0 / 5.0)
        return _scalar_or_array(value, np.where(x > self.threshold, curve, x / self.slope))

    def transfer(self, value):
        x = np.asarray(value, dtype=float)
        knee = self.threshold / self.slope
        curve = (211.0 * np.maximum(x, knee) ** (5.0 / 12.0) - 11.0) / 200.0
        return _scalar_or_array(value, np.where(x > knee, curve, x * self.slope))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class BT:
    """ITU-R BT.601 / BT.709 / BT.2020 piecewise curve."""

    kind: ClassVar[str] = "bt"
    display_threshold: ClassVar[float] = 0.081
    linear_threshold: ClassVar[float] = 0.018

    def linear(self, value):
        x = np.asarray(value, dtype=float)
        curve = ((np.maximum(x, self.display_threshold) + 0.099) / 1.099) ** (20.0 / 9.0)
        return _scalar_or_array(value, np.where(x > self.display_threshold, curve, x / 4.5))

    def transfer(self, value):
        x = np.asarray(value, dtype=float)
        curve = 1.099 * np.maximum(x, self.linear_threshold) ** (9.0 / 20.0) - 0.099
        return _scalar_or_array(value, np.where(x > self.linear_threshold, curve, x * 4.5))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


@dataclass(frozen=True)
class ROMM:
    """ROMM / ProPhoto piecewise curve: x^(9/5) above 2⁻⁵, x/16 below."""

    kind: ClassVar[str] = "romm"
    display_threshold: ClassVar[float] = 2.0 ** -5
    linear_threshold: ClassVar[float] = 2.0 ** -9

    def linear(self, value):
        x = np.asarray(value, dtype=float)
        curve = np.maximum(x, self.display_threshold) ** (9.0 / 5.0)
        return _scalar_or_array(value, np.where(x > self.display_threshold, curve, x / 16.0))

    def transfer(self, value):
        x = np.asarray(value, dtype=float)
        curve = np.maximum(x, self.linear_threshold) ** (5.0 / 9.0)
        return _scalar_or_array(value, np.where(x > self.linear_threshold, curve, x * 16.0))

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind}


TransferFunction = Union[Identity, PowerLaw, SRGB, BT, ROMM]

TRANSFER_KINDS: Dict[str, type] = {
    Identity.kind: Identity,
    PowerLaw.kind: PowerLaw,
    SRGB.kind: SRGB,
    BT.kind: BT,
    ROMM.kind: ROMM,
}


def transfer_signed(function: TransferFunction, value):
    """Extend ``transfer`` to negative input by odd symmetry."""
    x = np.asarray(value, dtype=float)
    return _scalar_or_array(value, np.copysign(function.transfer(np.abs(x)), x))


def default_contrast(function: TransferFunction) -> Contrast:
    """Contrast with medium luminance ``linear(0.5)``."""
    return Contrast(function.linear(0.5))


def transfer_from_dict(payload: Dict[str, Any]) -> TransferFunction:
    """Rebuild a transfer function from its ``to_dict`` form."""
    kind = payload.get("kind")
    if kind not in TRANSFER_KINDS:
        raise ConfigurationError(
            f"Unknown transfer kind {kind!r}, expected one of {sorted(TRANSFER_KINDS)}"
        )
    if kind == PowerLaw.kind:
        return PowerLaw(float(payload["exponent"]))
    return TRANSFER_KINDS[kind]()


__all__ = [
    "Identity",
    "PowerLaw",
    "SRGB",
    "BT",
    "ROMM",
    "TransferFunction",
    "TRANSFER_KINDS",
    "transfer_signed",
    "default_contrast",
    "transfer_from_dict",
]

"""3×3 real matrix with closed-form determinant and inverse.

Colorimetric matrices are assembled from primary tristimulus columns,
so the constructor takes columns. Values are stored read-only in the
usual row-major layout (``values[row, column]``).
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""
    pass


@dataclass(frozen=True, eq=False)
class Matrix3x3:
    """Immutable 3×3 matrix.

    Parameters
    ----------
    values : array-like
        Matrix entries, shape (3, 3), row-major.
    """

    values: np.ndarray = field(default_factory=lambda: np.eye(3))

    def __post_init__(self) -> None:
        arr = np.array(self.values, dtype=float)
        if arr.shape != (3, 3):
            raise ValueError(f"Expected shape (3, 3) for matrix, got {arr.shape}")
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @classmethod
    def from_columns(cls, c0, c1, c2) -> "Matrix3x3":
        """Build a matrix from three column vectors."""
        return cls(np.column_stack([c0, c1, c2]))

    @classmethod
    def identity(cls) -> "Matrix3x3":
        return cls(np.eye(3))

    def column(self, index: int) -> np.ndarray:
        return self.values[:, index].copy()

    def row(self, index: int) -> np.ndarray:
        return self.values[index, :].copy()

    @property
    def columns(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.column(0), self.column(1), self.column(2)

    @property
    def transpose(self) -> "Matrix3x3":
        return Matrix3x3(self.values.T)

    @property
    def determinant(self) -> float:
        """det = a(ei − fh) − b(di − fg) + c(dh − eg)."""
        (a, b, c), (d, e, f), (g, h, i) = self.values
        return float(a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g))

    @property
    def inverse(self) -> "Matrix3x3":
        """Adjugate divided by the determinant.

        Raises
        ------
        SingularMatrixError
            If the determinant is exactly zero.
        """
        det = self.determinant
        if det == 0:
            raise SingularMatrixError("Matrix is singular (determinant is 0)")

        (a, b, c), (d, e, f), (g, h, i) = self.values
        adjugate = np.array(
            [
                [e * i - f * h, c * h - b * i, b * f - c * e],
                [f * g - d * i, a * i - c * g, c * d - a * f],
                [d * h - e * g, b * g - a * h, a * e - b * d],
            ],
            dtype=float,
        )
        return Matrix3x3(adjugate / det)

    def __matmul__(self, other):
        if isinstance(other, Matrix3x3):
            return Matrix3x3(self.values @ other.values)
        vector = np.asarray(other, dtype=float)
        if vector.shape[-1] != 3:
            raise ValueError(f"Expected last dim=3 for vector, got {vector.shape}")
        return vector @ self.values.T

    def __mul__(self, scalar: float) -> "Matrix3x3":
        return Matrix3x3(self.values * scalar)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __hash__(self) -> int:
        return hash(self.values.tobytes())

    def allclose(self, other: "Matrix3x3", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        return bool(np.allclose(self.values, other.values, rtol=rtol, atol=atol))


__all__ = ["Matrix3x3", "SingularMatrixError"]

"""Tests for Matrix3x3."""

import numpy as np
import pytest

from chclt.matrix import Matrix3x3, SingularMatrixError


class TestMatrixConstruction:
    """Tests for construction and accessors."""

    def test_from_columns(self):
        """Columns become matrix columns."""
        m = Matrix3x3.from_columns([1, 2, 3], [4, 5, 6], [7, 8, 9])

        np.testing.assert_array_equal(m.column(0), [1, 2, 3])
        np.testing.assert_array_equal(m.row(0), [1, 4, 7])

    def test_values_read_only(self):
        """Stored values cannot be modified in place."""
        m = Matrix3x3.identity()
        with pytest.raises(ValueError):
            m.values[0, 0] = 2.0

    def test_bad_shape(self):
        """Non-3×3 input raises."""
        with pytest.raises(ValueError):
            Matrix3x3(np.eye(2))

    def test_transpose(self):
        """Transpose swaps rows and columns."""
        m = Matrix3x3(np.arange(9.0).reshape(3, 3))
        np.testing.assert_array_equal(m.transpose.values, m.values.T)


class TestMatrixAlgebra:
    """Tests for determinant, inverse and products."""

    def test_determinant_matches_numpy(self, rng):
        """Closed-form determinant agrees with numpy."""
        for _ in range(20):
            values = rng.standard_normal((3, 3))
            assert Matrix3x3(values).determinant == pytest.approx(np.linalg.det(values))

    def test_inverse_product_is_identity(self, rng):
        """M · M⁻¹ = I."""
        for _ in range(20):
            m = Matrix3x3(rng.standard_normal((3, 3)) + 3.0 * np.eye(3))
            assert (m @ m.inverse).allclose(Matrix3x3.identity(), atol=1e-10)

    def test_singular_raises(self):
        """Zero determinant raises SingularMatrixError."""
        m = Matrix3x3.from_columns([1, 2, 3], [2, 4, 6], [0, 0, 1])

        with pytest.raises(SingularMatrixError):
            m.inverse

    def test_singular_is_value_error(self):
        """SingularMatrixError is a ValueError."""
        assert issubclass(SingularMatrixError, ValueError)

    def test_vector_product(self):
        """M @ v multiplies a column vector."""
        m = Matrix3x3(np.arange(9.0).reshape(3, 3))
        v = np.array([1.0, 2.0, 3.0])

        np.testing.assert_allclose(m @ v, m.values @ v)

    def test_batch_vector_product(self):
        """M @ V maps each row of a batch."""
        m = Matrix3x3(np.arange(9.0).reshape(3, 3))
        vs = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])

        np.testing.assert_allclose(m @ vs, [m.column(0), m.column(1)])

    def test_scalar_product(self):
        """Scalars multiply every entry from either side."""
        m = Matrix3x3.identity()
        assert 2.0 * m == m * 2.0
        np.testing.assert_array_equal((m * 2.0).values, 2.0 * np.eye(3))

    def test_equality_and_hash(self):
        """Equal matrices hash equally."""
        a = Matrix3x3(np.eye(3))
        b = Matrix3x3.identity()
        assert a == b
        assert hash(a) == hash(b)

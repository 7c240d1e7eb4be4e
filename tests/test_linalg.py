import logging
import unittest

import numpy as np
import pytest
import scipy.linalg
from numpy.testing import assert_allclose

import gp1d.num as gnp
from gp1d.core import linalg
from gp1d.core.linalg import DimensionError, NotPositiveDefiniteError


def random_spd(n, seed=0):
    rng = np.random.default_rng(seed)
    B = rng.standard_normal((n, n))
    return B @ B.T + n * np.eye(n)


class TestCholesky(unittest.TestCase):
    def test_one_by_one(self):
        L = linalg.cholesky([4.0], 1)
        assert_allclose(L.reshape(-1), [2.0])

    def test_reconstruction(self):
        for n in (1, 2, 5, 12):
            A = random_spd(n, seed=n)
            L = linalg.cholesky(A, n)
            self.assertLess(np.max(np.abs(L @ L.T - A)), 1e-9)

    def test_matches_scipy(self):
        A = random_spd(7)
        L = linalg.cholesky(A)
        assert_allclose(L, scipy.linalg.cholesky(A, lower=True), rtol=1e-12, atol=1e-12)

    def test_lower_triangular_positive_diagonal(self):
        L = linalg.cholesky(random_spd(6))
        assert_allclose(np.triu(L, k=1), 0.0)
        self.assertTrue(np.all(np.diag(L) > 0.0))

    def test_flattened_input(self):
        A = random_spd(4)
        assert_allclose(linalg.cholesky(A.ravel(), 4), linalg.cholesky(A))

    def test_input_not_modified(self):
        A = random_spd(4)
        A_copy = A.copy()
        linalg.cholesky(A)
        assert_allclose(A, A_copy, rtol=0, atol=0)

    def test_dimension_mismatch(self):
        with self.assertRaises(DimensionError):
            linalg.cholesky(np.ones(5), 2)
        with self.assertRaises(DimensionError):
            linalg.cholesky(np.ones((2, 3)))
        with self.assertRaises(DimensionError):
            linalg.cholesky(np.eye(3), 2)

    def test_not_positive_definite_raises(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with self.assertRaises(NotPositiveDefiniteError) as cm:
            linalg.cholesky(A, check=True)
        self.assertEqual(cm.exception.column, 1)
        self.assertIsInstance(cm.exception, np.linalg.LinAlgError)


def test_not_positive_definite_propagates_nan(caplog):
    A = np.array([[1.0, 2.0], [2.0, 1.0]])
    with caplog.at_level(logging.WARNING, logger="gp1d"):
        L = linalg.cholesky(A, check=False)
    assert np.isnan(L[1, 1])
    assert L[0, 0] == 1.0
    assert "Non-positive pivot" in caplog.text


class TestSolve(unittest.TestCase):
    def setUp(self):
        self.n = 6
        self.A = random_spd(self.n, seed=3)
        self.L = linalg.cholesky(self.A)
        self.b = np.random.default_rng(4).standard_normal(self.n)

    def test_solve_forward_matches_scipy(self):
        y = linalg.solve_forward(self.L, self.b)
        assert_allclose(y, scipy.linalg.solve_triangular(self.L, self.b, lower=True), rtol=1e-12)

    def test_solve_backward_matches_scipy(self):
        x = linalg.solve_backward(self.L, self.b)
        assert_allclose(
            x, scipy.linalg.solve_triangular(self.L.T, self.b, lower=False), rtol=1e-12
        )

    def test_solve_reproduces_rhs(self):
        x = linalg.solve(self.L, self.b)
        assert_allclose(self.A @ x, self.b, atol=1e-10)

    def test_block_rhs_equals_columnwise(self):
        B = np.random.default_rng(5).standard_normal((self.n, 3))
        X = linalg.solve(self.L, B)
        for j in range(3):
            assert_allclose(X[:, j], linalg.solve(self.L, B[:, j]), rtol=1e-12, atol=1e-14)

    def test_empty_block_rhs(self):
        Y = linalg.solve_forward(self.L, np.zeros((self.n, 0)))
        self.assertEqual(Y.shape, (self.n, 0))

    def test_rhs_dimension_mismatch(self):
        with self.assertRaises(DimensionError):
            linalg.solve(self.L, np.ones(self.n + 1))


class TestInverseAndProducts(unittest.TestCase):
    def test_inverse(self):
        n = 5
        A = random_spd(n, seed=7)
        Ainv = linalg.inverse(linalg.cholesky(A), n)
        assert_allclose(Ainv @ A, np.eye(n), atol=1e-10)
        assert_allclose(Ainv, np.linalg.inv(A), rtol=1e-9, atol=1e-12)

    def test_inverse_flattened(self):
        L = linalg.cholesky(random_spd(3))
        assert_allclose(linalg.inverse(L.ravel(), 3), linalg.inverse(L))

    def test_matmul(self):
        X = random_spd(4, seed=1)
        Y = random_spd(4, seed=2)
        assert_allclose(linalg.matmul(X, Y, 4), X @ Y)
        with self.assertRaises(DimensionError):
            linalg.matmul(X, np.eye(3))

    def test_dot(self):
        self.assertAlmostEqual(linalg.dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]), 12.0)
        self.assertEqual(linalg.dot([], []), 0.0)
        with self.assertRaises(DimensionError):
            linalg.dot([1.0, 2.0], [1.0])

    def test_trace(self):
        self.assertEqual(linalg.trace(np.diag([1.0, 2.0, 3.5])), 6.5)
        with self.assertRaises(DimensionError):
            linalg.trace(np.ones((2, 3)))

    def test_logdet_from_cholesky(self):
        A = random_spd(5, seed=11)
        sign, logabsdet = np.linalg.slogdet(A)
        self.assertEqual(sign, 1.0)
        self.assertAlmostEqual(linalg.logdet_from_cholesky(linalg.cholesky(A)), logabsdet)


@pytest.mark.parametrize("n", [1, 3, 8])
def test_as_square_matrix_infers_size(n):
    A = gnp.eye(n)
    assert linalg.as_square_matrix(A.ravel()).shape == (n, n)


if __name__ == "__main__":
    unittest.main()

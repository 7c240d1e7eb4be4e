import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

import gp1d.num as gnp
from gp1d.kernel import (
    squared_exponential_kernel,
    squared_exponential_kernel_dt,
    squared_exponential_covariance,
    squared_exponential_covariance_dt,
    bandwidth_to_precision,
    precision_to_bandwidth,
    noise_variance,
    gram_matrix,
    gram_matrix_dt,
)


def test_kernel_values():
    assert squared_exponential_kernel(0.3, 0.3, 2.0) == 1.0
    assert math.isclose(squared_exponential_kernel(0.0, 2.0, 0.5), math.exp(-2.0))
    assert squared_exponential_kernel(1.0, -1.5, 0.7) == squared_exponential_kernel(-1.5, 1.0, 0.7)


def test_bandwidth_and_precision_forms_agree():
    h = 3.0
    t = bandwidth_to_precision(h)
    d = 1.7
    assert math.isclose(squared_exponential_kernel(0.0, d, t), math.exp(-d * d / h))
    assert math.isclose(precision_to_bandwidth(t), h)


@pytest.mark.parametrize("h", [0.0, -1.0])
def test_bandwidth_must_be_positive(h):
    with pytest.raises(ValueError):
        bandwidth_to_precision(h)
    with pytest.raises(ValueError):
        precision_to_bandwidth(h)


@pytest.mark.parametrize("x1, x2, t", [(0.0, 1.0, 1.0), (0.2, -0.9, 0.3), (1.0, 1.0, 2.0)])
def test_kernel_dt_matches_finite_differences(x1, x2, t):
    fd = gnp.derivative_finite_diff(lambda s: squared_exponential_kernel(x1, x2, s), t, 1e-4)
    assert_allclose(squared_exponential_kernel_dt(x1, x2, t), fd, rtol=1e-7, atol=1e-10)


def test_covariance_matrix():
    x = gnp.array([0.0, 1.0, 3.0])
    y = gnp.array([0.5, 2.0])
    K = squared_exponential_covariance(x, y, 0.8)
    assert K.shape == (3, 2)
    for i in range(3):
        for j in range(2):
            assert math.isclose(K[i, j], math.exp(-0.8 * (x[i] - y[j]) ** 2))


def test_covariance_pairwise():
    x = gnp.array([0.0, 1.0, 3.0])
    y = gnp.array([0.0, 2.0, 1.0])
    assert_allclose(squared_exponential_covariance(x, None, 1.3, pairwise=True), np.ones(3))
    assert_allclose(
        squared_exponential_covariance(x, y, 1.3, pairwise=True),
        np.exp(-1.3 * (x - y) ** 2),
    )


def test_covariance_dt_matrix():
    x = gnp.array([-1.0, 0.0, 2.0])
    dK = squared_exponential_covariance_dt(x, None, 0.4)
    d2 = (x[:, None] - x[None, :]) ** 2
    assert_allclose(dK, -d2 * np.exp(-0.4 * d2))


def test_noise_variance():
    assert noise_variance(30.0) == 1.0 / 30.0
    assert noise_variance(float("inf")) == 0.0
    for beta in (0.0, -2.0, float("nan")):
        with pytest.raises(ValueError):
            noise_variance(beta)


def test_gram_matrix():
    x = gnp.array([0.0, 1.0, 2.0, 2.0])
    beta = 30.0
    C = gram_matrix(x, 1.0, beta)
    assert C.shape == (4, 4)
    assert_allclose(C, C.T)
    assert_allclose(np.diag(C), np.full(4, 1.0 + 1.0 / beta))
    assert_allclose(C[0, 1], math.exp(-1.0))
    # coinciding inputs differ only by the nugget
    assert_allclose(C[2, 3], 1.0)
    assert np.all(np.linalg.eigvalsh(C) > 0.0)


def test_gram_matrix_dt():
    x = gnp.array([0.0, 1.0, 2.0])
    t = 0.9
    dC = gram_matrix_dt(x, t)
    assert_allclose(np.diag(dC), 0.0)
    fd = gnp.derivative_finite_diff(lambda s: gram_matrix(x, s, 30.0), t, 1e-4)
    assert_allclose(dC, fd, rtol=1e-7, atol=1e-10)

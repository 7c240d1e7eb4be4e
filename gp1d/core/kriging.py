# gp1d/core/kriging.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Posterior mean and variance of a zero-mean GP with squared-exponential
covariance and Gaussian observation noise.

Functions
---------
predict(xi, zi, xt, t=3.0, beta=30.0)
    Posterior mean and variance at xt, kernel in precision form.

regress(xi, zi, xt, h=3.0, beta=30.0)
    Same predictor, kernel in bandwidth form (t = 1/h).

kriging_weights(L, Kit)
    Forward-solved cross-covariances shared by mean and variance.
"""
import gp1d.num as gnp
from . import linalg
from . import utils
from gp1d.kernel.gram import gram_matrix, noise_variance
from gp1d.kernel.squared_exponential import (
    squared_exponential_covariance,
    bandwidth_to_precision,
)


# --------------------------------------------------------------------------
# Public entry points
# --------------------------------------------------------------------------
def predict(xi, zi, xt, t=3.0, beta=30.0):
    """Posterior mean and variance at target points.

    Parameters
    ----------
    xi : array_like, shape (n,)
        Observation points, n >= 1.
    zi : array_like, shape (n,)
        Observed values.
    xt : array_like, shape (m,)
        Prediction points, m >= 0.
    t : float, optional
        Kernel precision, k(x, y) = exp(-t (x - y)^2).
    beta : float, optional
        Noise precision, the noise variance is 1/beta.

    Returns
    -------
    zt_posterior_mean : gnp.array, shape (m,)
    zt_posterior_variance : gnp.array, shape (m,)
        Variance of a noisy observation at xt: it includes the noise
        variance 1/beta. Not clamped.

    Raises
    ------
    DimensionError
        If the input arrays are inconsistent.
    NotPositiveDefiniteError
        If the Gram matrix cannot be factorized (and the check is enabled).

    Notes
    -----
    With C = L Lᵀ the Gram matrix, a = C⁻¹ zi, k = K(xi, xt_j) and
    v = L⁻¹ k,

    .. math::
        \\mu_j = k^T a, \\qquad
        \\sigma_j = k(xt_j, xt_j) + 1/\\beta - v^T v.

    C is factorized once; each target point then costs O(n²).
    """
    xi, zi, xt = utils.ensure_shapes_and_type(xi=xi, zi=zi, xt=xt)

    C = gram_matrix(xi, t, beta)
    L = linalg.cholesky(C)
    a = linalg.solve(L, zi)

    Kit = squared_exponential_covariance(xi, xt, t)
    V = kriging_weights(L, Kit)

    zt_posterior_mean = gnp.matmul(Kit.T, a)
    zt_prior_variance = squared_exponential_covariance(xt, None, t, pairwise=True)
    zt_posterior_variance = (
        zt_prior_variance + noise_variance(beta) - gnp.sum(V * V, axis=0)
    )
    return zt_posterior_mean, zt_posterior_variance


def regress(xi, zi, xt, h=3.0, beta=30.0):
    """Posterior mean and variance with the kernel exp(-(x - y)^2 / h).

    See :func:`predict`; this is ``predict(xi, zi, xt, 1/h, beta)``.
    """
    return predict(xi, zi, xt, t=bandwidth_to_precision(h), beta=beta)


def kriging_weights(L, Kit):
    """Return V = L⁻¹ K(xi, xt).

    Column j of V is the forward solve of the cross-covariance vector of
    target j. Columns are independent of each other.
    """
    return linalg.solve_forward(L, Kit)

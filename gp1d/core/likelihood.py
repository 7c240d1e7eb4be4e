# gp1d/core/likelihood.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Negative log-likelihood of the zero-mean GP and its derivative with
respect to the kernel precision.
"""
import gp1d.num as gnp
from . import linalg
from . import utils
from gp1d.kernel.gram import gram_matrix, gram_matrix_dt


def negative_log_likelihood(xi, zi, t, beta):
    """Computes the negative log-likelihood of the observations.

    Parameters
    ----------
    xi : array_like, shape (n,)
        Observation points.
    zi : array_like, shape (n,)
        Observed values.
    t : float
        Kernel precision.
    beta : float
        Noise precision.

    Returns
    -------
    nll : float
        0.5 * (n log(2 pi) + log det C + ziᵀ C⁻¹ zi).
    """
    xi, zi, _ = utils.ensure_shapes_and_type(xi=xi, zi=zi)
    n = xi.shape[0]
    L = linalg.cholesky(gram_matrix(xi, t, beta))
    a = linalg.solve(L, zi)
    norm2 = linalg.dot(zi, a)
    ldetC = linalg.logdet_from_cholesky(L)
    return 0.5 * (n * float(gnp.log(2.0 * gnp.pi)) + ldetC + norm2)


def likelihood_gradient_trace(xi, zi, t, beta):
    """Trace term of the log-likelihood gradient with respect to t.

    Returns

    .. math::
        \\mathrm{tr}\\left((a a^T - C^{-1})\\, \\partial_t C\\right),
        \\qquad a = C^{-1} z,

    which is twice d log p(zi | t) / dt.
    """
    xi, zi, _ = utils.ensure_shapes_and_type(xi=xi, zi=zi)
    n = xi.shape[0]
    C = gram_matrix(xi, t, beta)
    dC = gram_matrix_dt(xi, t)
    L = linalg.cholesky(C, n)
    a = linalg.solve(L, zi)
    aaT = gnp.outer(a, a)
    Cinv = linalg.inverse(L, n)
    M = linalg.matmul(aaT - Cinv, dC, n)
    return linalg.trace(M)

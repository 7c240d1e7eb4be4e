# gp1d/kernel/gram.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gram matrices of the observations.

The observation noise has precision beta and enters the Gram matrix as a
nugget 1/beta on the diagonal, which keeps it positive definite when two
inputs coincide.
"""
import gp1d.num as gnp
from .squared_exponential import (
    squared_exponential_covariance,
    squared_exponential_covariance_dt,
)


def noise_variance(beta):
    """Return 1/beta. beta = inf gives noise-free observations."""
    if not beta > 0.0:
        raise ValueError(f"noise precision beta must be positive, got {beta!r}")
    return 1.0 / beta


def gram_matrix(x, t, beta):
    """Regularized Gram matrix.

    .. math::
        C_{ij} = k(x_i, x_j; t) + \\delta_{ij} / \\beta

    Parameters
    ----------
    x : gnp.array, shape (n,)
        Observation points.
    t : float
        Kernel precision.
    beta : float
        Noise precision.

    Returns
    -------
    C : gnp.array, shape (n, n)
    """
    K = squared_exponential_covariance(x, None, t)
    return K + noise_variance(beta) * gnp.eye(x.shape[0])


def gram_matrix_dt(x, t):
    """Derivative of :func:`gram_matrix` with respect to t (the nugget is constant)."""
    return squared_exponential_covariance_dt(x, None, t)

# gp1d/kernel/squared_exponential.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Squared-exponential kernel in precision form.

The kernel is parameterized by a precision t,

.. math::
    k(x_1, x_2; t) = \\exp(-t\\,(x_1 - x_2)^2),

and the bandwidth form :math:`\\exp(-d^2/h)` is only reached through
:func:`bandwidth_to_precision`, with :math:`t = 1/h`.
"""
import gp1d.num as gnp


def bandwidth_to_precision(h):
    """Return the precision t = 1/h of a bandwidth h > 0."""
    if not h > 0.0:
        raise ValueError(f"bandwidth must be positive, got {h!r}")
    return 1.0 / h


def precision_to_bandwidth(t):
    """Return the bandwidth h = 1/t of a precision t > 0."""
    if not t > 0.0:
        raise ValueError(f"precision must be positive, got {t!r}")
    return 1.0 / t


def squared_exponential_kernel(x1, x2, t):
    """Squared-exponential kernel, elementwise with broadcasting.

    Parameters
    ----------
    x1, x2 : scalar or gnp.array
        Inputs.
    t : float
        Precision.

    Returns
    -------
    scalar or gnp.array
        Kernel values.
    """
    d = gnp.subtract(x1, x2)
    return gnp.exp(-(d * d) * t)


def squared_exponential_kernel_dt(x1, x2, t):
    """Derivative of :func:`squared_exponential_kernel` with respect to t.

    .. math::
        \\partial_t k(x_1, x_2; t) = -d^2 \\exp(-t\\,d^2)
    """
    d = gnp.subtract(x1, x2)
    d2 = d * d
    return -gnp.exp(-d2 * t) * d2


def squared_exponential_covariance(x, y, t, pairwise=False):
    """Covariance matrix between x and y.

    Parameters
    ----------
    x : gnp.array, shape (n,)
    y : gnp.array, shape (m,) or None
        None means y := x.
    t : float
        Precision.
    pairwise : bool
        If True, return the vector k(x[i], y[i]) (n == m); else the
        (n, m) matrix.

    Returns
    -------
    gnp.array
        (n, m) matrix or (n,) vector if pairwise.
    """
    if y is None or y is x:
        if pairwise:
            return gnp.ones((x.shape[0],))
        y = x
    if pairwise:
        return squared_exponential_kernel(x, y, t)
    return squared_exponential_kernel(x.reshape(-1, 1), y.reshape(1, -1), t)


def squared_exponential_covariance_dt(x, y, t):
    """Entrywise derivative with respect to t of the covariance matrix."""
    if y is None:
        y = x
    return squared_exponential_kernel_dt(x.reshape(-1, 1), y.reshape(1, -1), t)

# gp1d/kernel/parameter_selection.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Selection of the kernel precision by gradient ascent on the likelihood.
"""

import time
from gp1d.config import get_logger
from gp1d.core.utils import ensure_shapes_and_type, validate_iterations
from gp1d.core.likelihood import likelihood_gradient_trace

_logger = get_logger()


def optimize(xi, zi, beta=30.0, iterations=100, learning_rate=0.05, t0=1.0):
    """Select the kernel precision t by fixed-step gradient ascent.

    Parameters
    ----------
    xi : array_like, shape (n,)
        Observation points.
    zi : array_like, shape (n,)
        Observed values.
    beta : float, optional
        Noise precision, kept fixed.
    iterations : int, optional
        Number of ascent steps. Zero returns ``t0`` unchanged.
    learning_rate : float, optional
        Step size.
    t0 : float, optional
        Starting precision.

    Returns
    -------
    t : float
        Precision after ``iterations`` steps.

    Notes
    -----
    Each step performs

    .. math::
        t \\leftarrow t + \\eta\\,
        \\mathrm{tr}\\left((a a^T - C^{-1})\\, \\partial_t C\\right)

    where C = C(t) is the Gram matrix and a = C⁻¹ zi. There is no
    convergence test and t is not constrained: a step that makes it
    non-positive is only reported, and the next factorization usually
    fails.
    """
    iterations = validate_iterations(iterations)
    t = float(t0)
    if iterations == 0:
        return t
    xi, zi, _ = ensure_shapes_and_type(xi=xi, zi=zi)

    tic = time.time()
    _logger.info(
        "Gradient ascent on the kernel precision: t0=%g, beta=%g, %d iterations, learning rate %g",
        t,
        beta,
        iterations,
        learning_rate,
    )
    for k in range(iterations):
        g = likelihood_gradient_trace(xi, zi, t, beta)
        t = t + learning_rate * g
        _logger.debug("iteration %d: trace=%g, t=%g", k + 1, g, t)
        if not t > 0.0:
            _logger.warning(
                "Kernel precision became non-positive (t=%g) at iteration %d", t, k + 1
            )

    _logger.info("Selected t=%g in %.3fs", t, time.time() - tic)
    return t

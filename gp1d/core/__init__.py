# gp1d/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the gp1d package.

This subpackage contains the dense linear algebra (Cholesky
factorization, triangular solves, inverse), the posterior predictor,
and the likelihood of the one-dimensional GP model.

Public API
----------
Model : class
    GP model façade holding one kernel configuration.
predict, regress : functions
    Posterior mean and variance in precision and bandwidth form.
DimensionError, NotPositiveDefiniteError : exceptions
"""

from .linalg import DimensionError, NotPositiveDefiniteError
from .kriging import predict, regress
from .model import Model

__all__ = ["Model", "predict", "regress", "DimensionError", "NotPositiveDefiniteError"]

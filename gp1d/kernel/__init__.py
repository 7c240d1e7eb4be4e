# gp1d/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance model and kernel parameter selection.

Modules
-------
squared_exponential
    Squared-exponential kernel in precision form and its t-derivative.
gram
    Regularized Gram matrix of the observations.
parameter_selection
    Gradient ascent on the likelihood with respect to the precision.

Public API
-----------
- Kernel:
    squared_exponential_kernel, squared_exponential_kernel_dt,
    squared_exponential_covariance, squared_exponential_covariance_dt,
    bandwidth_to_precision, precision_to_bandwidth
- Gram matrices:
    noise_variance, gram_matrix, gram_matrix_dt
- Parameter selection:
    optimize
"""

from .squared_exponential import (
    squared_exponential_kernel,
    squared_exponential_kernel_dt,
    squared_exponential_covariance,
    squared_exponential_covariance_dt,
    bandwidth_to_precision,
    precision_to_bandwidth,
)
from .gram import noise_variance, gram_matrix, gram_matrix_dt
from .parameter_selection import optimize

__all__ = [
    # Kernel
    "squared_exponential_kernel",
    "squared_exponential_kernel_dt",
    "squared_exponential_covariance",
    "squared_exponential_covariance_dt",
    "bandwidth_to_precision",
    "precision_to_bandwidth",
    # Gram matrices
    "noise_variance",
    "gram_matrix",
    "gram_matrix_dt",
    # Parameter selection
    "optimize",
]

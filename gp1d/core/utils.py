# gp1d/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `gp1d.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for (xi, zi, xt)
- Hyperparameter validation at the public boundary
"""
import gp1d.num as gnp
from .linalg import DimensionError


def _as_vector(name, v):
    v = gnp.asarray(v)
    if v.ndim == 0:
        v = v.reshape(1)
    elif v.ndim == 2 and v.shape[1] == 1:
        v = v.reshape(-1)  # (n,1) -> (n,)
    if v.ndim != 1:
        raise DimensionError(f"{name} should be 1D or a 2D column array, got shape {v.shape}")
    return v


def ensure_shapes_and_type(*, xi=None, zi=None, xt=None):
    """Validate and convert input arrays to float64 vectors.

    Parameters
    ----------
    xi : array_like, optional
        Observation points (n,) or (n, 1).
    zi : array_like, optional
        Observed values (n,) or (n, 1).
    xt : array_like, optional
        Prediction points (m,) or (m, 1), m may be zero.

    Returns
    -------
    tuple
        (xi, zi, xt) as 1D arrays (None entries are passed through).

    Raises
    ------
    DimensionError
        If an array is not one-dimensional, if xi is empty, or if xi and
        zi have different lengths.
    """
    if xi is not None:
        xi = _as_vector("xi", xi)
        if xi.shape[0] == 0:
            raise DimensionError("at least one observation is required")
    if zi is not None:
        zi = _as_vector("zi", zi)
    if xt is not None:
        xt = _as_vector("xt", xt)

    if xi is not None and zi is not None and xi.shape[0] != zi.shape[0]:
        raise DimensionError(
            f"xi and zi must have the same length ({xi.shape[0]} != {zi.shape[0]})"
        )
    return xi, zi, xt


def validate_iterations(iterations):
    if int(iterations) != iterations or iterations < 0:
        raise ValueError(f"iterations must be a nonnegative integer, got {iterations!r}")
    return int(iterations)

# gp1d/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for GP1D.

This module defines the NumPy implementation of the gp1d.num API.
"""

from gp1d.config import get_config, get_logger

_config = get_config()
_logger = get_logger()


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy

_np_dtype = numpy.dtype(_config.dtype).type

from numpy import (
    any,
    errstate,
    diag,
    sqrt,
    exp,
    log,
    sum,
    maximum,
    inner,
    outer,
    matmul,
    trace,
    subtract,
)
from numpy.linalg import LinAlgError
from numpy import pi

# ..................................................

_logger.debug("Using backend: numpy %s", numpy.__version__)

# ..................................................


def array(x, dtype=None):
    return numpy.array(x, dtype=_np_dtype if dtype is None else dtype)


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray) and x.dtype == _np_dtype:
        return x
    return numpy.asarray(x, dtype=_np_dtype)


def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )


# gp1d/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense linear algebra used by the GP predictor and the optimizer.

Matrices are 2-D float64 arrays of shape (n, n). Routines taking an
explicit size ``n`` also accept a flattened row-major buffer of length
n * n, which is reshaped once at the boundary.

Functions
---------
cholesky(A, n=None, check=None)
    Lower Cholesky factor L of a symmetric positive-definite matrix.
solve_forward(L, b), solve_backward(L, y), solve(L, b)
    Triangular substitutions and the combined solve of (L Lᵀ) x = b.
inverse(L, n=None)
    Inverse of L Lᵀ from n solves against the standard basis.
matmul(X, Y, n=None), dot(x, y), trace(M)
    Products with explicit dimension checks.
"""
from math import isqrt
import gp1d.num as gnp
from gp1d.config import get_config, get_logger

_logger = get_logger()


class DimensionError(ValueError):
    """Array sizes or shapes are inconsistent."""


class NotPositiveDefiniteError(gnp.LinAlgError):
    """Cholesky factorization met a non-positive pivot."""

    def __init__(self, column, pivot):
        self.column = column
        self.pivot = pivot
        super().__init__(
            f"matrix is not positive definite: pivot {pivot!r} at column {column}"
        )


# --------------------------------------------------------------------------
# Shape checks
# --------------------------------------------------------------------------
def as_square_matrix(A, n=None):
    """Return A as an (n, n) float64 array.

    Parameters
    ----------
    A : array_like, shape (n, n) or (n * n,)
        Square matrix, or its flattened row-major buffer.
    n : int, optional
        Expected size. Inferred from A when omitted.

    Raises
    ------
    DimensionError
        If A cannot be read as an n x n matrix.
    """
    A = gnp.asarray(A)
    if A.ndim == 1:
        if n is None:
            n = isqrt(A.shape[0])
        if n * n != A.shape[0]:
            raise DimensionError(
                f"n * n should be equal to the buffer length ({n} * {n} != {A.shape[0]})"
            )
        return A.reshape(n, n)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionError(f"expected a square matrix, got shape {A.shape}")
    if n is not None and A.shape[0] != n:
        raise DimensionError(f"expected a {n} x {n} matrix, got shape {A.shape}")
    return A


def _check_rhs(L, b):
    L = as_square_matrix(L)
    b = gnp.asarray(b)
    if b.ndim not in (1, 2) or b.shape[0] != L.shape[0]:
        raise DimensionError(
            f"right-hand side of shape {b.shape} does not match a {L.shape[0]} x {L.shape[0]} factor"
        )
    return L, b


# --------------------------------------------------------------------------
# Factorization
# --------------------------------------------------------------------------
def cholesky(A, n=None, check=None):
    """Cholesky factorization A = L Lᵀ.

    Parameters
    ----------
    A : array_like, shape (n, n) or (n * n,)
        Symmetric positive-definite matrix. Only the lower triangle is read.
    n : int, optional
        Size of A. Required to match when A is given flattened.
    check : bool, optional
        If True, raise NotPositiveDefiniteError on a non-positive pivot.
        If False, the square root of the pivot yields NaN, which then
        propagates through L. Defaults to the configuration entry
        ``check_positive_definite``.

    Returns
    -------
    L : array_like, shape (n, n)
        Lower-triangular factor with positive diagonal.

    Notes
    -----
    Column j is computed as

    .. math::
        L_{jj} = \\sqrt{A_{jj} - \\sum_{k<j} L_{jk}^2}, \\qquad
        L_{ij} = (A_{ij} - \\sum_{k<j} L_{ik} L_{jk}) / L_{jj}, \\; i > j.

    No pivoting and no jitter are applied.
    """
    A = as_square_matrix(A, n)
    if check is None:
        check = get_config().check_positive_definite
    n = A.shape[0]
    L = gnp.zeros((n, n))
    with gnp.errstate(invalid="ignore", divide="ignore"):
        for j in range(n):
            pivot = A[j, j] - gnp.inner(L[j, :j], L[j, :j])
            if not pivot > 0.0:
                if check:
                    raise NotPositiveDefiniteError(j, float(pivot))
                _logger.warning(
                    "Non-positive pivot %g at column %d, Cholesky factor will contain NaN",
                    pivot,
                    j,
                )
            L[j, j] = gnp.sqrt(pivot)
            L[j + 1 :, j] = (A[j + 1 :, j] - gnp.matmul(L[j + 1 :, :j], L[j, :j])) / L[j, j]
    return L


def logdet_from_cholesky(L):
    """Return log det(L Lᵀ) = 2 sum(log diag L)."""
    L = as_square_matrix(L)
    return 2.0 * float(gnp.sum(gnp.log(gnp.diag(L))))


# --------------------------------------------------------------------------
# Triangular solves
# --------------------------------------------------------------------------
def solve_forward(L, b):
    """Solve L y = b by forward substitution.

    ``b`` may be a vector (n,) or a block of right-hand sides (n, m), each
    column being solved independently.
    """
    L, b = _check_rhs(L, b)
    n = L.shape[0]
    y = gnp.zeros(b.shape)
    for j in range(n):
        y[j] = (b[j] - gnp.matmul(L[j, :j], y[:j])) / L[j, j]
    return y


def solve_backward(L, y):
    """Solve Lᵀ x = y by backward substitution, L being lower-triangular."""
    L, y = _check_rhs(L, y)
    n = L.shape[0]
    x = gnp.zeros(y.shape)
    for j in range(n - 1, -1, -1):
        x[j] = (y[j] - gnp.matmul(L[j + 1 :, j], x[j + 1 :])) / L[j, j]
    return x


def solve(L, b):
    """Solve (L Lᵀ) x = b given the lower Cholesky factor L."""
    return solve_backward(L, solve_forward(L, b))


def inverse(L, n=None):
    """Inverse of C = L Lᵀ.

    Column i of C⁻¹ is the solution of C c_i = e_i. Cost O(n³).
    """
    L = as_square_matrix(L, n)
    n = L.shape[0]
    E = gnp.eye(n)
    Cinv = gnp.empty((n, n))
    for i in range(n):
        Cinv[:, i] = solve(L, E[:, i])
    return Cinv


# --------------------------------------------------------------------------
# Products
# --------------------------------------------------------------------------
def matmul(X, Y, n=None):
    """Dense product Z = X Y of two n x n matrices."""
    X = as_square_matrix(X, n)
    Y = as_square_matrix(Y, X.shape[0])
    return gnp.matmul(X, Y)


def dot(x, y):
    """Inner product of two vectors of equal length."""
    x = gnp.asarray(x)
    y = gnp.asarray(y)
    if x.ndim != 1 or x.shape != y.shape:
        raise DimensionError(
            f"dot expects two vectors of equal length, got shapes {x.shape} and {y.shape}"
        )
    return float(gnp.inner(x, y))


def trace(M):
    """Sum of the diagonal entries of a square matrix."""
    M = as_square_matrix(M)
    return float(gnp.trace(M))

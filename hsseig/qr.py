"""QR factorisation with column pivoting and in-place matrix transposition."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import scipy.linalg


class PivotedQR(NamedTuple):
    """Factors of ``a[:, p] = q @ r``.

    ``q`` is ``m x k`` with orthonormal columns, ``r`` is ``k x n`` upper
    triangular and ``p`` is the 0-based column permutation, where
    ``k = min(m, n)``.
    """

    q: np.ndarray
    r: np.ndarray
    p: np.ndarray


def qpr(a) -> PivotedQR:
    """Compute the column-pivoted QR factorisation of the matrix ``a``."""
    matrix = np.array(a, dtype=float, ndmin=2)
    if matrix.ndim != 2:
        raise ValueError("qpr expects a two-dimensional matrix")
    q, r, p = scipy.linalg.qr(matrix, mode="economic", pivoting=True)
    return PivotedQR(q, r, np.asarray(p, dtype=int))


def transpose_in_place(a, rows: int, cols: int) -> None:
    """Transpose the row-major ``rows x cols`` matrix stored flat in ``a``.

    ``a`` is a mutable one-dimensional sequence (a list or a numpy array);
    afterwards it holds the ``cols x rows`` transpose, also row-major.
    """
    if rows < 0 or cols < 0 or rows * cols != len(a):
        raise ValueError("buffer length must equal rows * cols")
    transposed = np.asarray(a).reshape(rows, cols).T.ravel().copy()
    if isinstance(a, np.ndarray):
        a[:] = transposed
    else:
        a[:] = transposed.tolist()
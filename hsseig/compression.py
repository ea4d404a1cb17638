"""Low-rank compression of dense blocks by pivoted QR or by SVD."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import scipy.linalg

from .qr import qpr


class Compression(NamedTuple):
    """Factors of a low-rank approximation ``a ~= q @ r``."""

    q: np.ndarray
    r: np.ndarray


def _as_matrix(a) -> np.ndarray:
    matrix = np.array(a, dtype=float, ndmin=2)
    if matrix.ndim != 2:
        raise ValueError("expected a two-dimensional matrix")
    return matrix


def _empty(rows: int, cols: int) -> Compression:
    return Compression(np.zeros((rows, 0)), np.zeros((0, cols)))


def compr(a, tol: str, par: float) -> Compression:
    """Compress ``a`` with a column-pivoted QR factorisation.

    With ``tol == "tol"`` the rank is one past the last diagonal entry of R
    whose size relative to ``R[0, 0]`` exceeds ``par``; otherwise ``par`` is
    the rank itself. The rank never exceeds either dimension of ``a``. The
    columns of the returned R follow the column order of ``a``.
    """
    matrix = _as_matrix(a)
    rows, cols = matrix.shape
    if rows == 0 or cols == 0:
        return _empty(rows, cols)

    q, r, p = qpr(matrix)
    if tol == "tol":
        diag = np.abs(np.diagonal(r))
        with np.errstate(divide="ignore", invalid="ignore"):
            ratios = diag / abs(r[0, 0])
        above = np.flatnonzero(ratios > par)
        rank = int(above[-1]) + 1 if above.size else 0
    else:
        rank = int(par)
        if rank < 0:
            raise ValueError("rank must not be negative")
    rank = min(rank, rows, cols)

    inverse = np.argsort(p)
    return Compression(q[:, :rank].copy(), r[:rank][:, inverse])


def compr_new(a, tol: str, par: float) -> Compression:
    """Compress ``a`` with a singular value decomposition.

    The rank is the number of leading singular values, at least one, that
    exceed ``par`` times the largest. ``q`` holds the leading left singular
    vectors and ``r`` the leading right singular vectors scaled by their
    singular values. ``tol`` is accepted for symmetry with :func:`compr`.
    """
    matrix = _as_matrix(a)
    rows, cols = matrix.shape
    if rows == 0 or cols == 0:
        return _empty(rows, cols)

    u, s, vt = scipy.linalg.svd(matrix, full_matrices=True, lapack_driver="gesdd")
    threshold = par * s[0]
    rank = 1
    while rank < s.size and s[rank] > threshold:
        rank += 1
    return Compression(u[:, :rank].copy(), s[:rank, None] * vt[:rank])
"""Products with Cauchy-like matrices and their column normalisation."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _vector(values) -> np.ndarray:
    return np.asarray(values, dtype=float).ravel()


def _indices(org) -> np.ndarray:
    return np.asarray(org, dtype=int).ravel()


def _check_indices(org: np.ndarray, size: int) -> None:
    if org.size and (org.min() < 0 or org.max() >= size):
        raise ValueError("org holds an index outside the range of d")


def cauchylike_matvec(qc: Sequence, org, x, transpose: bool = False) -> np.ndarray:
    """Multiply the Cauchy-like matrix described by ``qc`` with ``x``.

    ``qc`` holds ``(v, s, d, lam, tau)``. The matrix has entries
    ``v[i] * s[j] / (d[i] - d[org[j]] - tau[j])``: one row per element of
    ``d`` and one column per element of ``org`` (0-based indices into ``d``).
    ``lam`` is carried along but not needed by the direct product. With
    ``transpose`` false the result is ``Q @ x``, otherwise ``Q.T @ x``. A
    one-dimensional ``x`` gives a one-dimensional result.
    """
    if len(qc) < 5:
        raise ValueError("qc must hold v, s, d, lam and tau")
    v, s, d, _lam, tau = (_vector(part) for part in qc[:5])
    org_idx = _indices(org)

    if v.shape != d.shape:
        raise ValueError("v and d must have the same length")
    if s.shape != org_idx.shape or tau.shape != org_idx.shape:
        raise ValueError("s, tau and org must have the same length")
    _check_indices(org_idx, d.size)

    matrix = np.asarray(x, dtype=float)
    is_vector = matrix.ndim == 1
    if is_vector:
        matrix = matrix[:, None]
    if matrix.ndim != 2:
        raise ValueError("x must be a vector or a matrix")

    shifted = d[org_idx] + tau
    q = v[:, None] * s[None, :] / (d[:, None] - shifted[None, :])

    if transpose:
        if matrix.shape[0] != d.size:
            raise ValueError("rows of x must match the length of d")
        result = q.T @ matrix
    else:
        if matrix.shape[0] != org_idx.size:
            raise ValueError("rows of x must match the length of org")
        result = q @ matrix
    return result.ravel() if is_vector else result


def colnorms(d, tau, org, v) -> np.ndarray:
    """Reciprocal norms of the columns of ``v[i] / (d[i] - d[org[j]] - tau[j])``.

    Scaling column ``j`` by the returned ``s[j]`` gives it unit length.
    """
    d_vec = _vector(d)
    tau_vec = _vector(tau)
    org_idx = _indices(org)
    v_vec = _vector(v)

    if v_vec.shape != d_vec.shape:
        raise ValueError("v and d must have the same length")
    if tau_vec.shape != org_idx.shape:
        raise ValueError("tau and org must have the same length")
    _check_indices(org_idx, d_vec.size)

    gaps = d_vec[org_idx][:, None] - d_vec[None, :] + tau_vec[:, None]
    sums = (1.0 / (gaps * gaps)) @ (v_vec * v_vec)
    return 1.0 / np.sqrt(sums)
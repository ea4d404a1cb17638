"""Broadcasting and rearrangement helpers for dense row-major matrices."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

_ROW_METHODS = {"T", "P", "p", "M"}


def bsxfun(method: str, x, y) -> np.ndarray:
    """Apply an element-wise operation between a matrix and a vector.

    ``'T'`` multiplies, ``'P'`` and ``'p'`` add and ``'M'`` subtracts the
    i-th element of ``y`` across row i of ``x``; ``'m'`` subtracts the j-th
    element of ``y`` down column j. A new array is returned.
    """
    x = np.array(x, dtype=float, ndmin=2)
    y = np.asarray(y, dtype=float)
    rows, cols = x.shape
    if method in _ROW_METHODS:
        if y.shape[0] != rows:
            raise ValueError(
                f"bsxfun '{method}': rows of the two input arrays must match"
            )
        column = y.reshape(rows, -1)[:, :1]
        if method == "T":
            return x * column
        if method == "M":
            return x - column
        return x + column
    if method == "m":
        y_cols = y.shape[1] if y.ndim == 2 else y.shape[0]
        if y_cols != cols:
            raise ValueError("bsxfun 'm': columns of the two input arrays must match")
        return x - y.reshape(-1, cols)[:1, :]
    raise ValueError(f"unknown bsxfun method {method!r}")


def arrange_elements(arr, indices) -> np.ndarray:
    """Gather ``arr`` at ``indices``: ``result[i] = arr[int(indices[i])]``."""
    arr = np.asarray(arr, dtype=float).ravel()
    idx = np.asarray(indices).ravel()
    if arr.shape[0] != idx.shape[0]:
        raise ValueError("array and index list must have the same length")
    return arr[idx.astype(int)]


def permute_rows(x, perm: Sequence[int], forward: bool = True) -> np.ndarray:
    """Permute the rows of ``x`` by the 1-based permutation ``perm``.

    Forward: row ``perm[i]`` moves to row ``i``. Backward: row ``i`` moves to
    row ``perm[i]``. A single-row matrix is returned unchanged.
    """
    x = np.array(x, dtype=float, ndmin=2)
    if x.shape[0] == 1:
        return x
    idx = np.asarray(perm, dtype=int) - 1
    if x.shape[0] != idx.shape[0]:
        raise ValueError("number of rows must match the permutation length")
    if forward:
        return x[idx]
    result = np.empty_like(x)
    result[idx] = x
    return result


def permute(arr, indices: Sequence[int], reverse: bool = True) -> np.ndarray:
    """Scatter (``reverse``) or gather a vector by 0-based ``indices``."""
    source = np.asarray(arr, dtype=float).ravel()
    idx = np.asarray(indices, dtype=int)
    if reverse:
        result = source.copy()
        result[idx] = source[: idx.shape[0]]
        return result
    result = source.copy()
    result[: idx.shape[0]] = source[idx]
    return result


def vec_norm(v) -> float:
    """Euclidean norm of ``v``."""
    values = np.asarray(v, dtype=float)
    return float(np.sqrt(np.sum(values * values)))


def diff_vec(v) -> np.ndarray:
    """Differences of consecutive elements of ``v``."""
    values = np.asarray(v, dtype=float).ravel()
    if values.size == 0:
        return values
    return np.diff(values)
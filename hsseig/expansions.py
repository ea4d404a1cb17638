"""Scaled Taylor-expansion matrices for a one-dimensional fast multipole method."""

from __future__ import annotations

import math

import numpy as np


def _powers(r: int) -> list[float]:
    """``(1 - 1/i) ** (i - 1)`` for ``i >= 2``; the first two slots are unused."""
    return [1.0, 1.0] + [(1 - 1 / i) ** (i - 1) for i in range(2, r)]


def compute_u_scaled(x, r: int, eta0: float, a: float, dx: float, scaling: int) -> np.ndarray:
    """Expansion terms of the points ``x`` about the centre ``a``.

    Returns an ``r x len(x)`` array whose row ``k`` holds the k-th term for
    every point. ``dx`` is the diameter of the cell. With ``scaling`` 0 the
    rows are ``(x - a)**k / k!``; with ``scaling`` 1 they are scaled by
    ``eta0 * 2 / dx``; any other value leaves every term at one.
    """
    points = np.asarray(x, dtype=float).ravel()
    if points.size == 0:
        raise ValueError("x must hold at least one point")
    u = np.ones((r, points.size))
    offset = points - a

    if scaling == 1:
        eta = eta0 * 2 / dx
        if r > 1:
            u[1] = eta * offset
        for k in range(1, r - 1):
            u[k + 1] = (1 + 1 / k) ** k * eta * offset * u[k]
    elif scaling == 0:
        for k in range(r - 1):
            u[k + 1] = offset * u[k] / (k + 1)
    return u


def _negate_odd_columns(b: np.ndarray) -> None:
    b[:, 1::2] *= -1


def _fill_scaled(
    b: np.ndarray,
    ba: float,
    etax: float,
    etay: float,
    corner: tuple[float, float, float, float],
    row0,
    row1,
    col0,
    col1,
    rest,
) -> None:
    r = b.shape[0]
    tp = _powers(r)
    b[0, 0], b[0, 1], b[1, 0], b[1, 1] = corner
    for i in range(2, r):
        b[0, i] = row0(i) / (ba * etay) * b[0, i - 1] * tp[i]
    for i in range(2, r - 1):
        b[1, i] = row1(i) / (ba * etay) * b[1, i - 1] * tp[i]
    for i in range(2, r):
        b[i, 0] = col0(i) / (ba * etax) * b[i - 1, 0] * tp[i]
    for i in range(2, r - 1):
        b[i, 1] = col1(i) / (ba * etax) * b[i - 1, 1] * tp[i]
    for k in range(2, r - 2):
        for i in range(2, r - k + 1):
            b[k, i] = rest(k, i) / (ba * etay) * b[k, i - 1] * tp[i]
    _negate_odd_columns(b)


def compute_b_scaled(
    r: int, eta0: float, a: float, b: float, dx: float, dy: float, fun: int, scaling: int
) -> np.ndarray:
    """Translation matrix between cells centred at ``a`` and ``b``.

    ``fun`` selects the kernel: 1 for ``1/(x - y)``, 2 for ``1/(x - y)**2``
    and 3 for ``log|x - y|``. ``scaling`` is 0 for plain expansions and 1
    for expansions scaled by the cell diameters ``dx`` and ``dy``.
    """
    if fun not in (1, 2, 3):
        raise ValueError(f"kernel {fun} is not supported")
    if scaling not in (0, 1):
        raise ValueError(f"scaling {scaling} is not supported")
    if scaling == 1 and r < 2:
        raise ValueError("scaled expansions need at least two terms")

    ba = b - a
    etax = eta0 * 2 / dx
    etay = eta0 * 2 / dy
    out = np.zeros((r, r))

    if fun == 1:
        if scaling == 0:
            for k in range(r):
                temp = -1 / ba
                for i in range(r - k):
                    out[k, i] = temp
                    temp = temp * (i + 1) / ba
            _negate_odd_columns(out)
        else:
            temp = -1 / ba
            b10 = temp / (ba * etax)
            _fill_scaled(
                out, ba, etax, etay,
                (temp, temp / (ba * etay), b10, 2 / (ba * etay) * b10),
                row0=lambda i: 1.0,
                row1=lambda i: (i + 1) / i,
                col0=lambda i: 1.0,
                col1=lambda i: (i + 1) / i,
                rest=lambda k, i: (k + i) / i,
            )
    elif fun == 2:
        if scaling == 0:
            temp = 1 / ba
            diag = temp
            for i in range(r):
                diag = diag * temp * (i + 1)
                for j in range(i, -1, -1):
                    out[j, i - j] = -diag if (i - j) % 2 else diag
        else:
            temp = 1 / (ba * ba)
            b10 = 2 / (ba * etax) * temp
            _fill_scaled(
                out, ba, etax, etay,
                (temp, 2 / (ba * etay) * temp, b10, 3 / (ba * etay) * b10),
                row0=lambda i: (i + 1) / i,
                row1=lambda i: (i + 2) / i,
                col0=lambda i: (i + 1) / i,
                col1=lambda i: (i + 2) / i,
                rest=lambda k, i: (k + i + 1) / i,
            )
    else:
        if scaling == 0:
            temp = -1 / ba
            for k in range(r):
                out[0, k] = temp
                for i in range(k):
                    out[i + 1, k - (i + 1)] = temp
                temp = temp * (k + 1) / ba
            for k in range(r):
                for i in range(1, r - k, 2):
                    out[k, i] *= -1
            out[0, 0] = math.log(abs(b - a))
        else:
            b10 = -1 / (ba * etax)
            _fill_scaled(
                out, ba, etax, etay,
                (math.log(abs(a - b)), -1 / (ba * etay), b10, 1 / (ba * etay) * b10),
                row0=lambda i: (i - 1) / i,
                row1=lambda i: 1.0,
                col0=lambda i: (i - 1) / i,
                col1=lambda i: 1.0,
                rest=lambda k, i: (k + i - 1) / i,
            )
    return out


def _taylor_toeplitz(r: int, ab: float) -> np.ndarray:
    """Upper triangular Toeplitz matrix with ``ab**k / k!`` on superdiagonal ``k``."""
    t = np.zeros((r, r))
    value = 1.0
    for k in range(r):
        idx = np.arange(r - k)
        t[idx, idx + k] = value
        value = value * ab / (k + 1)
    return t


def compute_t_scaled(
    r: int, eta0: float, a: float, b: float, dx: float, dy: float, scaling: int
) -> np.ndarray:
    """Shift of an expansion about ``a`` to one about ``b``.

    ``dx`` and ``dy`` are the diameters of the two cells. ``scaling`` 0 gives
    the plain Taylor shift, 1 the recurrence for scaled expansions and 2 the
    plain shift scaled by ``eta0 * 2 / dx`` on the rows and ``eta0 * 2 / dy``
    on the columns.
    """
    if scaling not in (0, 1, 2):
        raise ValueError(f"scaling {scaling} is not supported")
    ab = a - b

    if scaling == 1:
        t = np.diag((dx / dy) ** np.arange(r, dtype=float))
        factor = eta0 * 2 / dy
        if r > 1:
            t[0, 1] = ab * factor
        tp = _powers(r)
        for i in range(2, r):
            t[0, i] = ab * factor * t[0, i - 1] / tp[i]
        for k in range(1, r):
            for i in range(k + 1, r):
                t[k, i] = ab / (i - k) * i * factor * t[k, i - 1] / tp[i]
        return t

    t = _taylor_toeplitz(r, ab)
    if scaling == 2:
        exponents = np.arange(r, dtype=float)
        t *= ((eta0 * 2 / dx) ** exponents)[:, None]
        t *= ((eta0 * 2 / dy) ** exponents)[None, :]
    return t
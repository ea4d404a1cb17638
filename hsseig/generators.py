"""HSS generators of banded matrices."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import accumulate

import numpy as np

from .tree import BinTree


@dataclass
class HSSGenerators:
    """Generators D, U, R and B of an HSS matrix, one slot per tree node.

    Entry ``i`` belongs to node ``i + 1``. A slot is ``None`` where the node
    has no generator of that kind. D and U are set for leaves only, and R
    and B for every node except the root.
    """

    D: list[np.ndarray | None] = field(default_factory=list)
    U: list[np.ndarray | None] = field(default_factory=list)
    R: list[np.ndarray | None] = field(default_factory=list)
    B: list[np.ndarray | None] = field(default_factory=list)


def init_gen(n: int) -> HSSGenerators:
    """Return generators for ``n`` nodes with every slot empty."""
    return HSSGenerators(
        D=[None] * n,
        U=[None] * n,
        R=[None] * n,
        B=[None] * n,
    )


def _dense_block(
    band: np.ndarray, w: int, row_start: int, row_end: int, col_start: int, col_end: int
) -> np.ndarray:
    """Dense block ``A[row_start:row_end, col_start:col_end]`` read from band storage.

    ``band[k, c]`` holds ``A[c + k - w, c]``; entries outside the band are zero.
    """
    rows = np.arange(row_start, row_end)[:, None]
    cols = np.arange(col_start, col_end)[None, :]
    band_rows = rows - cols + w
    inside = (
        (band_rows >= 0)
        & (band_rows < band.shape[0])
        & (cols >= 0)
        & (cols < band.shape[1])
    )
    safe_rows = np.clip(band_rows, 0, band.shape[0] - 1)
    safe_cols = np.clip(cols, 0, band.shape[1] - 1)
    return np.where(inside, band[safe_rows, safe_cols], 0.0)


def _rightmost_leaf(tree: BinTree, node: int) -> int:
    kids = tree.children(node)
    while kids:
        node = kids[1]
        kids = tree.children(node)
    return node


def band2hss(band, tree: BinTree, m, w: int) -> HSSGenerators | None:
    """Build the HSS generators of a symmetric banded matrix.

    ``band`` is the ``(2*w + 1) x n`` band storage, where ``band[k, c]`` holds
    ``A[c + k - w, c]``; ``w`` is the half bandwidth, ``tree`` the
    post-ordered partition tree and ``m`` the row count of every leaf block.
    A tree made of a single node has no generators and gives ``None``.
    """
    band = np.asarray(band, dtype=float)
    if band.ndim != 2 or band.shape[0] != 2 * w + 1:
        raise ValueError("band storage must have 2*w + 1 rows")

    n = tree.num_nodes
    if n == 1:
        return None

    leaves = [node for node in range(1, n + 1) if not tree.children(node)]
    sizes = [int(size) for size in m]
    if len(sizes) != len(leaves):
        raise ValueError("partition must have one size per leaf of the tree")
    if any(size < w for size in sizes):
        raise ValueError("every partition block must hold at least w rows")

    offsets = [0, *accumulate(sizes)]
    leaf_index = {node: index for index, node in enumerate(leaves)}
    identity = np.eye(w)
    gen = init_gen(n)

    for node in range(1, n):
        slot = node - 1
        if node in leaf_index:
            k = leaf_index[node]
            lo, hi = offsets[k], offsets[k + 1]
            gen.D[slot] = _dense_block(band, w, lo, hi, lo, hi)
            u = np.zeros((sizes[k], 2 * w))
            u[:w, :w] = identity
            u[sizes[k] - w :, w:] = identity
            gen.U[slot] = u

        left, _ = tree.children(tree.tr[slot])
        is_left = left == node
        split = offsets[leaf_index[_rightmost_leaf(tree, left)] + 1]

        b = np.zeros((2 * w, 2 * w))
        r = np.zeros((2 * w, 2 * w))
        if is_left:
            b[w:, :w] = _dense_block(band, w, split - w, split, split, split + w)
            r[:w, :w] = identity
        else:
            b[:w, w:] = _dense_block(band, w, split, split + w, split - w, split)
            r[w:, w:] = identity
        gen.B[slot] = b
        gen.R[slot] = r

    return gen
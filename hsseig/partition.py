"""Partitioning of matrix rows into leaf blocks of an HSS tree."""

from __future__ import annotations

from typing import NamedTuple

from .tree import BinTree


class Partition(NamedTuple):
    """A row partition and, when one was built, its binary tree."""

    tree: BinTree | None
    sizes: list[int]


def npart(n: int, ni: int, leaf_nodes: int = 0) -> Partition:
    """Split ``n`` rows into blocks of about ``ni`` rows.

    With ``leaf_nodes`` equal to 0 the number of blocks follows from ``ni``:
    a remainder of at least half a block becomes its own block, otherwise it
    is added to the last one, and a full binary tree over the blocks is
    built. A non-zero ``leaf_nodes`` gives the number of tree nodes instead;
    the rows are then shared among ``(leaf_nodes + 1) // 2`` blocks and no
    tree is built.
    """
    if leaf_nodes == 0:
        if ni >= n:
            raise ValueError(
                "partition size is greater than the number of rows in the matrix"
            )
        k = n // ni
        sizes = [ni] * k
        remainder = n % ni
        if remainder >= ni // 2:
            sizes.append(remainder)
        else:
            sizes[-1] += remainder
        return Partition(BinTree(2 * len(sizes) - 1), sizes)

    k = (leaf_nodes + 1) // 2
    block = n // k
    sizes = [block] * k
    sizes[-1] += n % block
    return Partition(None, sizes)
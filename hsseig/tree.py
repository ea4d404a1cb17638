"""Post-ordered full binary trees used to describe HSS partitions."""

from __future__ import annotations


def _require_odd(n: int) -> None:
    if n % 2 == 0:
        raise ValueError("cannot create the tree: number of nodes must be odd")


def btree(n: int) -> list[int]:
    """Parent array of a perfect binary tree with ``n`` nodes in post-order.

    Entry ``i`` holds the 1-based parent ID of node ``i + 1``; the root's
    entry is 0.
    """
    _require_odd(n)
    if n > 3:
        m = (n - 1) // 2
        left = btree(m)
        right = [parent + m for parent in left]
        left[-1] = n
        right[-1] = n
        return left + right + [0]
    if n == 3:
        return [3, 3, 0]
    return [0]


def ntree(n: int) -> list[int]:
    """Parent array of a full binary tree with ``n`` nodes in post-order.

    The left subtree is the largest perfect tree that fits; the rest is
    built recursively on the right.
    """
    _require_odd(n)
    if n == 1:
        return [0]
    n1 = 2 ** (n.bit_length() - 1) - 1
    left = btree(n1)
    right = [parent + n1 for parent in ntree(n - n1 - 1)]
    left[-1] = n
    right[-1] = n
    return left + right + [0]


class BinTree:
    """A full binary tree with post-ordered node IDs starting at 1."""

    def __init__(self, n: int) -> None:
        _require_odd(n)
        self.num_nodes: int = n
        self.tr: list[int] = ntree(n)
        self.ch: dict[int, list[int]] = {}
        for node, parent in enumerate(self.tr, start=1):
            if parent != 0:
                self.ch.setdefault(parent, []).append(node)
        self.leaves: list[int] = []
        self.node_at_lvl: list[list[int]] = self._walk_levels(self.leaves)
        self.num_levels: int = len(self.node_at_lvl)

    def children(self, node_id: int) -> list[int]:
        """Return the children of ``node_id``; empty for a leaf."""
        return list(self.ch.get(node_id, ()))

    def tree_desc(self) -> list[int]:
        """Smallest descendant of every node, indexed by node ID (index 0 unused)."""
        result = [0] * (self.num_nodes + 1)
        for node in range(1, self.num_nodes + 1):
            kids = self.ch.get(node)
            result[node] = result[kids[0]] if kids else node
        return result

    def levels(self) -> list[list[int]]:
        """All nodes grouped by level, starting with the root."""
        return self._walk_levels([])

    def _walk_levels(self, leaves: list[int]) -> list[list[int]]:
        nodes_by_level: list[list[int]] = []
        current = [self.num_nodes]
        while current:
            nodes_by_level.append(current)
            next_level: list[int] = []
            for node in current:
                kids = self.ch.get(node)
                if kids:
                    next_level.extend(kids)
                else:
                    leaves.append(node)
            current = next_level
        return nodes_by_level
"""Eigen-decomposition records of HSS tree nodes and their flat buffer encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
import scipy.linalg

_HEADER = 4
_PER_NODE = 12 + 10 + 4
_QC_PARTS = 5


def _block(values, dtype) -> np.ndarray:
    """Return ``values`` as a 2-D array; a vector becomes a single column."""
    arr = np.asarray(values, dtype=dtype)
    if arr.ndim == 0:
        return arr.reshape(1, 1)
    if arr.ndim == 1:
        return arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError("blocks must be vectors or matrices")
    return arr


@dataclass
class NonLeaf:
    """One rank-one update of a non-leaf node.

    ``qc`` holds the Cauchy-like factors ``(v, s, d, lam, tau)`` and ``org``
    the 0-based column origins; ``J``, ``G``, ``I``, ``v2c`` and ``T`` are the
    deflation data and ``n``, ``n1``, ``n2``, ``n3`` the block counts.
    """

    qc: list[np.ndarray]
    org: np.ndarray
    J: np.ndarray
    G: np.ndarray
    I: np.ndarray  # noqa: E741
    v2c: np.ndarray
    T: np.ndarray
    n: int = 0
    n1: int = 0
    n2: int = 0
    n3: int = 0

    def __post_init__(self) -> None:
        if len(self.qc) != _QC_PARTS:
            raise ValueError("qc must hold v, s, d, lam and tau")
        self.qc = [_block(part, float) for part in self.qc]
        self.org = _block(self.org, int)
        self.J = _block(self.J, float)
        self.G = _block(self.G, float)
        self.I = _block(self.I, float)
        self.v2c = _block(self.v2c, float)
        self.T = _block(self.T, int)

    @property
    def qc_sizes(self) -> list[tuple[int, int]]:
        """Shapes of the five Cauchy-like factors followed by that of ``org``."""
        return [tuple(part.shape) for part in self.qc] + [tuple(self.org.shape)]

    @property
    def float_blocks(self) -> list[np.ndarray]:
        """Floating-point blocks in buffer order."""
        return [*self.qc, self.J, self.G, self.I, self.v2c]

    @property
    def int_blocks(self) -> list[np.ndarray]:
        """Integer blocks in buffer order."""
        return [self.T, self.org]

    @classmethod
    def _blank(cls, shapes: list[tuple[int, int]], counts: list[int]) -> NonLeaf:
        qc_shapes, org_shape = shapes[:_QC_PARTS], shapes[_QC_PARTS]
        j_shape, g_shape, i_shape, v2c_shape, t_shape = shapes[_QC_PARTS + 1 :]
        return cls(
            qc=[np.zeros(shape) for shape in qc_shapes],
            org=np.zeros(org_shape, dtype=int),
            J=np.zeros(j_shape),
            G=np.zeros(g_shape),
            I=np.zeros(i_shape),
            v2c=np.zeros(v2c_shape),
            T=np.zeros(t_shape, dtype=int),
            n=counts[0],
            n1=counts[1],
            n2=counts[2],
            n3=counts[3],
        )


@dataclass
class EigenMatrix:
    """Eigenvectors of a node: a dense matrix at a leaf, updates elsewhere."""

    leaf: np.ndarray | None = None
    nonleaf: list[NonLeaf] = field(default_factory=list)

    @property
    def n_non_leaf(self) -> int:
        """Number of rank-one updates stored for the node."""
        return len(self.nonleaf)


class BufferSizes(NamedTuple):
    """Lengths of the integer and floating-point data buffers."""

    int_size: int
    double_size: int


def _header_shapes(node: NonLeaf) -> list[tuple[int, int]]:
    return node.qc_sizes + [
        tuple(node.J.shape),
        tuple(node.G.shape),
        tuple(node.I.shape),
        tuple(node.v2c.shape),
        tuple(node.T.shape),
    ]


def serialize_q_sizes(eig: EigenMatrix, is_leaf: bool, q0_size: tuple[int, int]) -> list[int]:
    """Encode the shapes held by ``eig`` as a flat list of integers.

    The list starts with ``q0_size``, the leaf flag and the update count,
    followed by 26 integers per update (the shapes of ``qc``, ``org``, ``J``,
    ``G``, ``I``, ``v2c`` and ``T``, then ``n``, ``n1``, ``n2``, ``n3``) and
    ends with the lengths of the integer and floating-point data buffers.
    For a leaf only the first four entries carry information.
    """
    count = eig.n_non_leaf
    buff = [int(q0_size[0]), int(q0_size[1]), int(bool(is_leaf)), count]
    if is_leaf:
        buff.extend([0] * (count * _PER_NODE + 2))
        return buff

    int_total = 0
    double_total = 0
    for node in eig.nonleaf:
        for rows, cols in _header_shapes(node):
            buff.extend([int(rows), int(cols)])
        buff.extend([node.n, node.n1, node.n2, node.n3])
        int_total += sum(block.size for block in node.int_blocks)
        double_total += sum(block.size for block in node.float_blocks)
    buff.extend([int_total, double_total])
    return buff


def deserialize_q_sizes(eig: EigenMatrix, buff) -> BufferSizes:
    """Read shapes written by :func:`serialize_q_sizes` into ``eig``.

    For a non-leaf, ``eig.nonleaf`` is replaced by zero-filled updates of the
    encoded shapes, ready for :func:`deserialize_q_nonleaf`. Returns the
    lengths of the data buffers that follow.
    """
    values = [int(value) for value in buff]
    if len(values) < _HEADER:
        raise ValueError("size buffer is too short")
    is_leaf = bool(values[2])
    count = values[3]
    tail = _HEADER + count * _PER_NODE
    if len(values) < tail + 2:
        raise ValueError("size buffer is too short for its update count")

    if not is_leaf:
        nodes = []
        for index in range(count):
            start = _HEADER + index * _PER_NODE
            flat = values[start : start + _PER_NODE]
            shapes = [(flat[k], flat[k + 1]) for k in range(0, 22, 2)]
            nodes.append(NonLeaf._blank(shapes, flat[22:26]))
        eig.nonleaf = nodes
    return BufferSizes(values[tail], values[tail + 1])


def serialize_q_nonleaf(eig: EigenMatrix) -> tuple[np.ndarray, np.ndarray]:
    """Pack the updates of ``eig`` into an integer and a floating-point buffer.

    The floating-point buffer holds, per update, ``qc`` then ``J``, ``G``,
    ``I`` and ``v2c``; the integer buffer holds ``T`` then ``org``.
    """
    floats = [block.ravel() for node in eig.nonleaf for block in node.float_blocks]
    ints = [block.ravel() for node in eig.nonleaf for block in node.int_blocks]
    double_buff = np.concatenate(floats) if floats else np.zeros(0)
    int_buff = np.concatenate(ints).astype(int) if ints else np.zeros(0, dtype=int)
    return int_buff, double_buff


def _take(buffer: np.ndarray, start: int, shape: tuple[int, ...]) -> tuple[np.ndarray, int]:
    size = int(np.prod(shape))
    end = start + size
    if end > buffer.size:
        raise ValueError("data buffer is too short for the encoded shapes")
    return buffer[start:end].reshape(shape).copy(), end


def deserialize_q_nonleaf(eig: EigenMatrix, int_buff, double_buff) -> None:
    """Fill the updates of ``eig`` from buffers made by :func:`serialize_q_nonleaf`.

    The shapes already present in ``eig`` (see :func:`deserialize_q_sizes`)
    decide how the buffers are split.
    """
    doubles = np.asarray(double_buff, dtype=float).ravel()
    ints = np.asarray(int_buff, dtype=int).ravel()

    pos = 0
    for node in eig.nonleaf:
        parts = []
        for part in node.qc:
            block, pos = _take(doubles, pos, part.shape)
            parts.append(block)
        node.qc = parts
        node.J, pos = _take(doubles, pos, node.J.shape)
        node.G, pos = _take(doubles, pos, node.G.shape)
        node.I, pos = _take(doubles, pos, node.I.shape)
        node.v2c, pos = _take(doubles, pos, node.v2c.shape)

    pos = 0
    for node in eig.nonleaf:
        node.T, pos = _take(ints, pos, node.T.shape)
        node.org, pos = _take(ints, pos, node.org.shape)


def compute_leaf_eig(d) -> tuple[np.ndarray, np.ndarray]:
    """Eigenvalues (ascending) and eigenvectors (columns) of a symmetric block.

    Only the upper triangle of ``d`` is referenced.
    """
    matrix = np.array(d, dtype=float, ndmin=2)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("leaf block must be a square matrix")
    values, vectors = scipy.linalg.eigh(matrix, lower=False, driver="evr")
    return values, vectors
# hsseig

Building blocks for divide-and-conquer eigensolvers of symmetric
hierarchically semiseparable (HSS) matrices, built on NumPy and SciPy.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `hsseig.tree`: `BinTree(n)` is a full binary tree with `n` nodes, where `n`
  must be odd. Its nodes are numbered from 1 in post-order, so the root comes
  last. `btree(n)` and `ntree(n)` return the parent arrays of a perfect tree
  and a full tree. In these arrays the root's parent is 0. Use
  `BinTree.children(node_id)`, `BinTree.tree_desc()` (the smallest descendant
  of every node) and `BinTree.levels()` (the nodes grouped by level, root
  first) to walk the tree. The attributes `tr`, `ch`, `leaves`,
  `node_at_lvl`, `num_nodes` and `num_levels` hold the tree itself.
- `hsseig.partition`: `npart(n, ni, leaf_nodes=0)` splits `n` rows into
  blocks of about `ni` rows. It returns a `Partition(tree, sizes)`. When
  `leaf_nodes` is 0, a remainder of at least half a block becomes a block of
  its own and a `BinTree` is built over the blocks. When `leaf_nodes` is not
  0, the rows are shared among `(leaf_nodes + 1) // 2` blocks and `tree` is
  `None`. A block size that is not smaller than `n` raises `ValueError`.
- `hsseig.bsxfun`: `bsxfun(method, x, y)` broadcasts a vector over a
  matrix. `'T'` multiplies, `'P'` and `'p'` add and `'M'` subtracts row-wise.
  `'m'` subtracts column-wise. `permute_rows` permutes rows by a 1-based
  permutation, forwards or backwards. `permute` scatters or gathers a vector
  by 0-based indices. `arrange_elements` gathers a vector at the given
  indices. `vec_norm` and `diff_vec` give the Euclidean norm and the
  consecutive differences of a vector.
- `hsseig.generators`: `HSSGenerators` holds one D, U, R and B slot per tree
  node. A slot is `None` where the node has no generator of that kind.
  `band2hss(band, tree, m, w)` builds the generators of a symmetric banded
  matrix. The matrix is given in `(2*w + 1) x n` band storage, where
  `band[k, c]` holds `A[c + k - w, c]`. For a single-node tree it returns
  `None`. `init_gen(n)` returns generators with every slot empty.
- `hsseig.qr`: `qpr(a)` is a column-pivoted QR factorisation. It returns a
  `PivotedQR(q, r, p)` with `a[:, p] == q @ r`.
  `transpose_in_place(a, rows, cols)` overwrites a flat row-major list or
  array with its transpose.
- `hsseig.compression`: `compr(a, tol, par)` compresses a block by pivoted
  QR. With `tol == "tol"` the rank comes from a relative threshold `par`;
  otherwise `par` is the rank itself. `compr_new(a, tol, par)` compresses by
  SVD and keeps at least one singular value. Both functions return a
  `Compression(q, r)` with `a ≈ q @ r`.
- `hsseig.randgen`: `RandGen` draws uniform reals from a 32-bit Mersenne
  Twister. Seed it with `set_seed` or `set_time_seed`, call `set_interval`,
  then call `rand`. `Distribution` names the distributions. Only
  `UNIFORM_REAL` is supported, and `rand` raises `RuntimeError` until an
  interval is set.
- `hsseig.cauchy`: `cauchylike_matvec(qc, org, x, transpose=False)`
  multiplies by the Cauchy-like matrix
  `v[i] * s[j] / (d[i] - d[org[j]] - tau[j])`, or by its transpose.
  `colnorms(d, tau, org, v)` gives the factors that scale each column of
  `v[i] / (d[i] - d[org[j]] - tau[j])` to unit length. Both compute the
  product directly, as a dense matrix.
- `hsseig.expansions`: `compute_u_scaled`, `compute_b_scaled` and
  `compute_t_scaled` build the expansion, interaction and shift matrices of a
  one-dimensional fast multipole method. `compute_b_scaled` supports the
  kernels `1/(x - y)`, `1/(x - y)**2` and `log|x - y|`.
- `hsseig.eigenmatrix`: `NonLeaf` holds one rank-one update of a node and
  `EigenMatrix` holds the eigenvector data of a node. `serialize_q_sizes`,
  `deserialize_q_sizes`, `serialize_q_nonleaf` and `deserialize_q_nonleaf`
  encode the updates into flat integer and floating-point buffers and decode
  them again. `compute_leaf_eig(d)` returns the ascending eigenvalues and the
  eigenvectors of a symmetric leaf block.

## Example

```python
import numpy as np
from hsseig.partition import npart
from hsseig.generators import band2hss

n, w = 16, 2
tree, m = npart(n, 4, 0)
band = np.zeros((2 * w + 1, n))
band[w] = 4.0                       # main diagonal
band[w - 1, 1:] = band[w + 1, :-1] = 1.0
gens = band2hss(band, tree, m, w)
print(gens.D[0])
```

## What it does not do

The package provides the parts of an HSS eigensolver, not the solver itself.
It has no function that runs the full divide-and-conquer computation: it does
not divide the generators, solve the secular equations, or multiply by the
assembled eigenvector matrix. It has no command-line program. It does no
fast-multipole acceleration of the Cauchy-like products or the column norms,
which are always computed directly. It does no parallel or distributed work.
import numpy as np
import pytest

from hsseig.eigenmatrix import (
    EigenMatrix,
    NonLeaf,
    compute_leaf_eig,
    deserialize_q_nonleaf,
    deserialize_q_sizes,
    serialize_q_nonleaf,
    serialize_q_sizes,
)


def _nonleaf(rng, size, cols, counts):
    return NonLeaf(
        qc=[rng.standard_normal(size) for _ in range(4)] + [rng.standard_normal(cols)],
        org=rng.integers(0, size, cols),
        J=rng.standard_normal((2, 3)),
        G=rng.standard_normal(4),
        I=rng.standard_normal((1, 2)),
        v2c=rng.standard_normal(size),
        T=rng.integers(0, 10, (3, 2)),
        n=counts[0],
        n1=counts[1],
        n2=counts[2],
        n3=counts[3],
    )


@pytest.fixture
def eig():
    rng = np.random.default_rng(7)
    return EigenMatrix(
        nonleaf=[_nonleaf(rng, 5, 4, (5, 2, 3, 1)), _nonleaf(rng, 6, 3, (6, 3, 3, 0))]
    )


def test_size_buffer_layout(eig):
    buff = serialize_q_sizes(eig, False, (1, 2))
    assert len(buff) == 4 + 2 * 26 + 2
    assert buff[:4] == [1, 2, 0, 2]
    first = eig.nonleaf[0]
    assert buff[4:6] == list(first.qc[0].shape)
    assert buff[14:16] == list(first.org.shape)
    assert buff[26:30] == [5, 2, 3, 1]
    int_total = sum(b.size for node in eig.nonleaf for b in (node.T, node.org))
    assert buff[-2] == int_total


def test_sizes_round_trip(eig):
    buff = serialize_q_sizes(eig, False, (1, 2))
    target = EigenMatrix()
    sizes = deserialize_q_sizes(target, buff)
    assert target.n_non_leaf == 2
    assert sizes.int_size == buff[-2]
    assert sizes.double_size == buff[-1]
    for got, want in zip(target.nonleaf, eig.nonleaf):
        assert got.qc_sizes == want.qc_sizes
        assert got.T.shape == want.T.shape
        assert (got.n, got.n1, got.n2, got.n3) == (want.n, want.n1, want.n2, want.n3)


def test_full_round_trip(eig):
    buff = serialize_q_sizes(eig, False, (1, 2))
    int_buff, double_buff = serialize_q_nonleaf(eig)
    target = EigenMatrix()
    sizes = deserialize_q_sizes(target, buff)
    assert int_buff.size == sizes.int_size
    assert double_buff.size == sizes.double_size
    deserialize_q_nonleaf(target, int_buff, double_buff)
    for got, want in zip(target.nonleaf, eig.nonleaf):
        for a, b in zip(got.qc, want.qc):
            np.testing.assert_array_equal(a, b)
        np.testing.assert_array_equal(got.org, want.org)
        np.testing.assert_array_equal(got.J, want.J)
        np.testing.assert_array_equal(got.G, want.G)
        np.testing.assert_array_equal(got.I, want.I)
        np.testing.assert_array_equal(got.v2c, want.v2c)
        np.testing.assert_array_equal(got.T, want.T)


def test_double_buffer_starts_with_first_factor(eig):
    _, double_buff = serialize_q_nonleaf(eig)
    first = eig.nonleaf[0].qc[0].ravel()
    np.testing.assert_array_equal(double_buff[: first.size], first)


def test_leaf_sizes():
    leaf = EigenMatrix(leaf=np.eye(3))
    buff = serialize_q_sizes(leaf, True, (3, 3))
    assert buff[:4] == [3, 3, 1, 0]
    target = EigenMatrix()
    sizes = deserialize_q_sizes(target, buff)
    assert target.nonleaf == []
    assert tuple(sizes) == (0, 0)


def test_short_data_buffer_raises(eig):
    buff = serialize_q_sizes(eig, False, (1, 2))
    int_buff, double_buff = serialize_q_nonleaf(eig)
    target = EigenMatrix()
    deserialize_q_sizes(target, buff)
    with pytest.raises(ValueError):
        deserialize_q_nonleaf(target, int_buff, double_buff[:-1])


def test_short_size_buffer_raises():
    with pytest.raises(ValueError):
        deserialize_q_sizes(EigenMatrix(), [1, 2, 0, 3, 0])


def test_leaf_eig_known_values():
    values, vectors = compute_leaf_eig([[2.0, 1.0], [1.0, 2.0]])
    np.testing.assert_allclose(values, [1.0, 3.0])
    assert vectors.shape == (2, 2)


def test_leaf_eig_reconstructs_matrix():
    rng = np.random.default_rng(3)
    a = rng.standard_normal((6, 6))
    a = a + a.T
    values, vectors = compute_leaf_eig(a)
    assert np.all(np.diff(values) >= 0)
    np.testing.assert_allclose(vectors @ np.diag(values) @ vectors.T, a, atol=1e-10)
    np.testing.assert_allclose(vectors.T @ vectors, np.eye(6), atol=1e-10)


def test_leaf_eig_uses_upper_triangle():
    upper = np.array([[1.0, 4.0], [0.0, 1.0]])
    values, _ = compute_leaf_eig(upper)
    full_values, _ = compute_leaf_eig([[1.0, 4.0], [4.0, 1.0]])
    np.testing.assert_allclose(values, full_values)


def test_leaf_eig_rejects_non_square():
    with pytest.raises(ValueError):
        compute_leaf_eig(np.zeros((2, 3)))


def test_nonleaf_requires_five_factors():
    with pytest.raises(ValueError):
        NonLeaf(
            qc=[np.zeros(2)] * 4,
            org=[0],
            J=[0.0],
            G=[0.0],
            I=[0.0],
            v2c=[0.0],
            T=[0],
        )
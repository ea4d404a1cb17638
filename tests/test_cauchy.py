import numpy as np
import pytest

from hsseig.cauchy import cauchylike_matvec, colnorms


def _setup():
    d = np.array([0.0, 1.0, 2.0, 3.0])
    org = [0, 1, 2, 3]
    tau = np.array([0.5, 0.25, 0.5, 0.75])
    v = np.array([1.0, -2.0, 0.5, 3.0])
    s = np.array([2.0, 1.0, -1.0, 0.5])
    lam = d[org] + tau
    return (v, s, d, lam, tau), org


def test_single_entry_value():
    qc = ([2.0], [3.0], [0.0], [1.0], [1.0])
    result = cauchylike_matvec(qc, [0], [1.0])
    assert result.shape == (1,)
    assert result[0] == pytest.approx(-6.0)


def test_transpose_matches_plain_product():
    qc, org = _setup()
    q = cauchylike_matvec(qc, org, np.eye(4))
    qt = cauchylike_matvec(qc, org, np.eye(4), transpose=True)
    np.testing.assert_allclose(qt, q.T)


def test_product_is_linear():
    qc, org = _setup()
    rng = np.random.default_rng(3)
    a = rng.standard_normal((4, 2))
    b = rng.standard_normal((4, 2))
    combined = cauchylike_matvec(qc, org, 2 * a + b)
    separate = 2 * cauchylike_matvec(qc, org, a) + cauchylike_matvec(qc, org, b)
    np.testing.assert_allclose(combined, separate)


def test_vector_and_column_agree():
    qc, org = _setup()
    x = np.array([1.0, 0.0, -1.0, 2.0])
    flat = cauchylike_matvec(qc, org, x, transpose=True)
    column = cauchylike_matvec(qc, org, x[:, None], transpose=True)
    np.testing.assert_allclose(flat, column[:, 0])


def test_fewer_columns_than_rows():
    qc, _ = _setup()
    v, s, d, lam, tau = qc
    qc_small = (v, s[:2], d, lam[:2], tau[:2])
    result = cauchylike_matvec(qc_small, [1, 3], np.ones((2, 3)))
    assert result.shape == (4, 3)
    back = cauchylike_matvec(qc_small, [1, 3], np.ones((4, 3)), transpose=True)
    assert back.shape == (2, 3)


def test_wrong_rows_raise():
    qc, org = _setup()
    with pytest.raises(ValueError):
        cauchylike_matvec(qc, org, np.ones((3, 1)))


def test_short_qc_raises():
    with pytest.raises(ValueError):
        cauchylike_matvec(([1.0], [1.0]), [0], [1.0])


def test_bad_org_index_raises():
    qc, _ = _setup()
    with pytest.raises(ValueError):
        cauchylike_matvec(qc, [0, 1, 2, 7], np.ones(4))


def test_colnorms_single_value():
    result = colnorms([0.0], [2.0], [0], [3.0])
    assert result[0] == pytest.approx(2.0 / 3.0)


def test_colnorms_normalise_columns():
    qc, org = _setup()
    v, _, d, lam, tau = qc
    s = colnorms(d, tau, org, v)
    q = cauchylike_matvec((v, s, d, lam, tau), org, np.eye(4))
    np.testing.assert_allclose(np.linalg.norm(q, axis=0), np.ones(4))


def test_colnorms_scale_inversely_with_v():
    qc, org = _setup()
    v, _, d, _, tau = qc
    base = colnorms(d, tau, org, v)
    doubled = colnorms(d, tau, org, 2 * v)
    assert base.shape == (4,)
    np.testing.assert_allclose(doubled, base / 2)


def test_colnorms_length_mismatch():
    with pytest.raises(ValueError):
        colnorms([0.0, 1.0], [0.5], [0], [1.0])
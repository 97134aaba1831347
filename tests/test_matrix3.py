import pytest

from cctag.matrix3 import Matrix3x3

A = Matrix3x3([[2.0, 1.0, 0.5], [0.0, 3.0, -1.0], [4.0, 0.25, 1.0]])
B = Matrix3x3([1.0, -2.0, 0.0, 3.0, 1.0, 2.0, 0.5, 0.0, 4.0])

IDENTITY_FLAT = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def test_default_is_zero():
    m = Matrix3x3()
    assert all(m[r, c] == 0.0 for r in range(3) for c in range(3))
    assert m.det() == 0.0


def test_flat_and_nested_construction_agree():
    flat = Matrix3x3([1, 2, 3, 4, 5, 6, 7, 8, 9])
    nested = Matrix3x3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert flat == nested
    assert flat[1, 2] == 6.0


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Matrix3x3([1, 2, 3])
    with pytest.raises(ValueError):
        Matrix3x3([[1, 2], [3, 4], [5, 6]])


def test_identity_det():
    assert Matrix3x3.identity().det() == 1.0


def test_det_is_multiplicative():
    assert (A @ B).det() == pytest.approx(A.det() * B.det())


def test_inverse_round_trip():
    left = A @ A.inverse()
    right = B.inverse() @ B
    assert [left[r, c] for r in range(3) for c in range(3)] == pytest.approx(IDENTITY_FLAT, abs=1e-12)
    assert [right[r, c] for r in range(3) for c in range(3)] == pytest.approx(IDENTITY_FLAT, abs=1e-12)


def test_singular_inverse_raises():
    with pytest.raises(ValueError):
        Matrix3x3([1, 2, 3, 4, 5, 6, 7, 8, 9]).inverse()


def test_transposed():
    t = A.transposed()
    assert all(t[r, c] == A[c, r] for r in range(3) for c in range(3))
    assert t.transposed() == A
    assert t.det() == pytest.approx(A.det())


def test_matmul_identity():
    assert A @ Matrix3x3.identity() == A
    assert Matrix3x3.identity() @ B == B


def test_matmul_transpose_rule():
    lhs = (A @ B).transposed()
    rhs = B.transposed() @ A.transposed()
    assert [lhs[r, c] for r in range(3) for c in range(3)] == pytest.approx(
        [rhs[r, c] for r in range(3) for c in range(3)], abs=1e-12
    )


def test_str_format():
    assert str(Matrix3x3.identity()) == "r1=(1,0,0) r2=(0,1,0) r3=(0,0,1)"
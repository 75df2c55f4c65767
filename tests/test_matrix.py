import pytest

from uwbtrilat.matrix import (
    accumulate_scaled,
    affine_mat_vec,
    format_matrix,
    identity,
    mat_vec,
    matmul,
    outer,
    scale_matrix,
    transpose,
    vec_mat,
)

A = ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (7.0, 8.0, 10.0))
B = ((2.0, 0.0, 1.0), (1.0, 3.0, 0.0), (0.0, 1.0, 4.0))
R = ((1.0, 2.0), (3.0, 4.0), (5.0, 6.0))


def test_identity_diagonal():
    eye = identity(4)
    assert len(eye) == 4
    assert all(eye[i][j] == (1.0 if i == j else 0.0) for i in range(4) for j in range(4))


def test_identity_rejects_zero():
    with pytest.raises(ValueError):
        identity(0)


def test_matmul_identity_is_neutral():
    assert matmul(identity(3), A) == A
    assert matmul(A, identity(3)) == A


def test_transpose_is_involution_and_swaps_shape():
    t = transpose(R)
    assert len(t) == 2 and len(t[0]) == 3
    assert t[1][2] == R[2][1]
    assert transpose(t) == R


def test_transpose_of_product():
    assert transpose(matmul(A, B)) == matmul(transpose(B), transpose(A))


def test_matmul_rectangular_shape():
    product = matmul(R, transpose(R))
    assert len(product) == 3 and len(product[0]) == 3
    assert product == transpose(product)


def test_matmul_shape_mismatch():
    with pytest.raises(ValueError):
        matmul(R, R)


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        transpose(((1.0, 2.0), (3.0,)))


def test_scale_matrix_and_accumulate():
    doubled = scale_matrix(2.0, A)
    assert accumulate_scaled(A, 1.0, A) == doubled
    assert accumulate_scaled(doubled, -2.0, A) == scale_matrix(0.0, A)


def test_accumulate_shape_mismatch():
    with pytest.raises(ValueError):
        accumulate_scaled(A, 1.0, R)


def test_mat_vec_identity_and_columns():
    v = (1.0, -2.0, 3.0)
    assert mat_vec(identity(3), v) == v
    assert mat_vec(A, (0.0, 1.0, 0.0)) == tuple(row[1] for row in A)


def test_vec_mat_matches_transposed_mat_vec():
    v = (1.0, -2.0, 3.0)
    assert vec_mat(v, A) == mat_vec(transpose(A), v)


def test_mat_vec_size_mismatch():
    with pytest.raises(ValueError):
        mat_vec(A, (1.0, 2.0))
    with pytest.raises(ValueError):
        vec_mat((1.0, 2.0), A)


def test_affine_mat_vec_translation():
    m = ((1.0, 0.0, 5.0), (0.0, 1.0, -3.0))
    assert affine_mat_vec(m, (2.0, 4.0)) == (7.0, 1.0)


def test_affine_mat_vec_size_mismatch():
    with pytest.raises(ValueError):
        affine_mat_vec(identity(2), (1.0, 2.0))


def test_outer_matches_matmul_of_column_and_row():
    v = (1.0, 2.0, 3.0)
    t = (4.0, 5.0)
    expected = matmul(tuple((x,) for x in v), (t,))
    assert outer(v, t) == expected


def test_outer_empty_rejected():
    with pytest.raises(ValueError):
        outer((), (1.0,))


def test_format_matrix_identity():
    text = format_matrix(identity(2))
    assert text.splitlines() == ["1.000000 0.000000", "0.000000 1.000000"]
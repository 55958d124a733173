import math

import pytest

from sigmoidnet.matrix import Matrix


def identity(n):
    return Matrix(n, n, [1.0 if i == j else 0.0 for i in range(n) for j in range(n)])


def test_random_init_shape_and_bounds():
    m = Matrix(4, 6)
    limit = math.sqrt(6.0 / 10)
    assert m.shape == (4, 6)
    assert all(-limit <= m[i, j] <= limit for i in range(4) for j in range(6))


def test_data_is_row_major():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert m[0, 2] == 3.0
    assert m[1, 0] == 4.0


def test_wrong_data_length_raises():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1, 2, 3])


def test_setitem():
    m = Matrix(2, 2, [0, 0, 0, 0])
    m[1, 1] = 7
    assert m[1, 1] == 7.0


def test_index_out_of_range():
    m = Matrix(2, 2, [0, 0, 1, 0])
    with pytest.raises(IndexError):
        _ = m[2, 0]
    assert m[1, 0] == 1.0
    assert m.shape == (2, 2)


def test_identity_matvec():
    assert identity(3).matvec([1.5, -2.0, 4.0]) == [1.5, -2.0, 4.0]


def test_matvec_wrong_size():
    with pytest.raises(ValueError):
        identity(3).matvec([1.0, 2.0])


def test_mul_vector_matches_matvec():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert m * [1.0, 0.0, -1.0] == m.matvec([1.0, 0.0, -1.0])


def test_mul_identity_is_neutral():
    m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
    assert identity(2) * m == m
    assert m * identity(3) == m


def test_mul_incompatible_shapes():
    with pytest.raises(ValueError):
        Matrix(2, 3, [0] * 6) * Matrix(2, 3, [0] * 6)


def test_add_commutes_and_scale_doubles():
    a = Matrix(2, 2, [1, 2, 3, 4])
    b = Matrix(2, 2, [0.5, -1, 2, 0])
    assert a + b == b + a
    assert a.scale(2.0) == a + a


def test_add_incompatible_shapes():
    with pytest.raises(ValueError):
        Matrix(2, 2, [0] * 4) + Matrix(1, 4, [0] * 4)


def test_str_format():
    assert str(Matrix(2, 2, [1, 2, 3, 4.5])) == "1 2 \n3 4.5 \n"
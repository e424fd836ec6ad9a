import pytest

from gameframe.matrix import Matrix4x4


def identity():
    return Matrix4x4([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def diagonal(value):
    return Matrix4x4([[value if i == j else 0 for j in range(4)] for i in range(4)])


A = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]]
B = [[2, 0, 1, 3], [1, -1, 0, 2], [4, 2, 2, 0], [0, 1, -3, 1]]
C = [[0, 1, 0, 2], [3, 0, -1, 1], [1, 1, 1, 1], [2, -2, 0, 5]]


def test_default_is_zero_matrix():
    a = Matrix4x4(A)
    assert Matrix4x4() + a == a
    assert Matrix4x4() * a == Matrix4x4()


def test_bad_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4x4([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    with pytest.raises(ValueError):
        Matrix4x4([[1, 2, 3, 4]] * 3 + [[1, 2, 3]])


def test_identity_is_neutral():
    a = Matrix4x4(A)
    assert a * identity() == a
    assert identity() * a == a


def test_add_sub_round_trip():
    a, b = Matrix4x4(A), Matrix4x4(B)
    assert (a + b) - b == a
    assert a + b == b + a


def test_add_twice_equals_scaling_by_two():
    a = Matrix4x4(A)
    assert a + a == a * diagonal(2)


def test_product_is_associative():
    a, b, c = Matrix4x4(A), Matrix4x4(B), Matrix4x4(C)
    assert (a * b) * c == a * (b * c)


def test_product_not_commutative():
    a, b = Matrix4x4(A), Matrix4x4(B)
    assert (a * b == b * a) is False


def test_product_distributes_over_addition():
    a, b, c = Matrix4x4(A), Matrix4x4(B), Matrix4x4(C)
    assert a * (b + c) == a * b + a * c


def test_product_known_entry():
    a, b = Matrix4x4(A), Matrix4x4(B)
    assert (a * b).m[0][0] == 16.0


def test_in_place_ops_match_binary_ops():
    a, b = Matrix4x4(A), Matrix4x4(B)
    for op_name, iop_name in [
        ("__add__", "__iadd__"),
        ("__sub__", "__isub__"),
        ("__mul__", "__imul__"),
    ]:
        target = Matrix4x4(A)
        expected = getattr(a, op_name)(b)
        result = getattr(target, iop_name)(b)
        assert result is target
        assert target == expected


def test_binary_ops_do_not_mutate():
    a, b = Matrix4x4(A), Matrix4x4(B)
    _ = a * b
    _ = a + b
    assert a == Matrix4x4(A)


def test_matmul_operator_matches_mul():
    a, b = Matrix4x4(A), Matrix4x4(B)
    assert a @ b == a * b


def test_non_matrix_operand_rejected():
    with pytest.raises(TypeError):
        Matrix4x4(A) + 1.0
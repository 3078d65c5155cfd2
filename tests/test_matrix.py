import pytest

from algokit.matrix import hourglass_sum, is_sparse, multiply


def test_is_sparse_true():
    assert is_sparse([[0, 0, 1], [0, 2, 0]]) is True


def test_is_sparse_false_when_balanced():
    assert is_sparse([[0, 1], [0, 1]]) is False


def test_is_sparse_dense():
    assert is_sparse([[1, 2], [3, 4]]) is False


def test_multiply_identity():
    a = [[2, 4], [3, 4]]
    identity = [[1, 0], [0, 1]]
    assert multiply(a, identity) == a
    assert multiply(identity, a) == a


def test_multiply_source_example():
    assert multiply([[2, 4], [3, 4]], [[1, 2], [1, 3]]) == [[6, 16], [7, 18]]


def test_multiply_shape():
    a = [[1, 2, 3]]
    b = [[1], [2], [3]]
    result = multiply(a, b)
    assert len(result) == 1 and len(result[0]) == 1
    assert len(multiply(b, a)) == 3
    assert all(len(row) == 3 for row in multiply(b, a))


def test_multiply_associative():
    a = [[1, 2], [3, 4]]
    b = [[0, 1], [1, 0]]
    c = [[2, 0], [1, 1]]
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_multiply_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_hourglass_all_zero():
    assert hourglass_sum([[0] * 6 for _ in range(6)]) == 0


def test_hourglass_uniform():
    assert hourglass_sum([[1] * 6 for _ in range(6)]) == 7


def test_hourglass_picks_maximum():
    grid = [[0] * 6 for _ in range(6)]
    grid[5][5] = 9
    assert hourglass_sum(grid) == 9
    grid[0][0] = -5
    assert hourglass_sum(grid) == 9


def test_hourglass_too_small():
    with pytest.raises(ValueError):
        hourglass_sum([[1, 2], [3, 4]])
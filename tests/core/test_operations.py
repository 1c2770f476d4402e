import pytest
import math
import numpy as np
from affinekit import config
from affinekit.core.matrix import Matrix, DimensionMismatch
from affinekit.core.operations import (
    MatrixOperations,
    add,
    subtract,
    scalar_multiply,
    multiply,
    round_half_up,
)


@pytest.fixture
def mat_2x3():
    return Matrix(2, 3, 1, 2, 3, 4, 5, 6)


@pytest.fixture
def other_2x3():
    return Matrix(2, 3, 1, 2, 1, 2, 1, 2)


def test_add(mat_2x3, other_2x3):
    res = add(mat_2x3, other_2x3)
    assert res.shape == (2, 3)
    assert res.elements == [2, 4, 4, 6, 6, 8]


def test_subtract(mat_2x3, other_2x3):
    res = subtract(mat_2x3, other_2x3)
    assert res.elements == [0, 0, 2, 2, 4, 4]


def test_add_then_subtract_restores(mat_2x3, other_2x3):
    rng = np.random.default_rng(12345)
    for _ in range(10):
        a = Matrix(3, 4, *rng.integers(-100, 100, 12))
        b = Matrix(3, 4, *rng.integers(-100, 100, 12))
        assert subtract(add(a, b), b) == a
    assert subtract(add(mat_2x3, other_2x3), other_2x3) == mat_2x3


def test_operands_are_not_modified(mat_2x3, other_2x3):
    add(mat_2x3, other_2x3)
    subtract(mat_2x3, other_2x3)
    scalar_multiply(mat_2x3, 4)
    assert mat_2x3.elements == [1, 2, 3, 4, 5, 6]
    assert other_2x3.elements == [1, 2, 1, 2, 1, 2]


@pytest.mark.parametrize("op", [add, subtract])
def test_elementwise_shape_mismatch(op, mat_2x3):
    with pytest.raises(DimensionMismatch):
        op(mat_2x3, Matrix(3, 2))
    with pytest.raises(DimensionMismatch):
        op(mat_2x3, Matrix(2, 2))
    # Same size, different shape
    with pytest.raises(DimensionMismatch):
        op(mat_2x3, Matrix(1, 6))


def test_dimension_mismatch_is_a_value_error(mat_2x3):
    with pytest.raises(ValueError, match="2x3 and 2x2"):
        add(mat_2x3, Matrix(2, 2))


def test_scalar_multiply(mat_2x3):
    res = scalar_multiply(mat_2x3, 3)
    assert res.shape == (2, 3)
    assert res.elements == [3, 6, 9, 12, 15, 18]


def test_scalar_multiply_identity_and_zero(mat_2x3):
    assert scalar_multiply(mat_2x3, 1) == mat_2x3
    zero = scalar_multiply(mat_2x3, 0)
    assert zero.shape == mat_2x3.shape
    assert all(v == 0 for v in zero)


def test_scalar_multiply_rounds_to_five_digits():
    res = scalar_multiply(Matrix(1, 2, 1, 2), 1 / 3)
    assert res.elements == [0.33333, 0.66667]


def test_multiply(mat_2x3):
    other = Matrix(3, 2, 1, 2, 1, 2, 1, 2)
    res = multiply(mat_2x3, other)
    assert res.shape == (2, 2)
    assert res.elements == [6, 12, 15, 30]


def test_multiply_column_vector():
    m = Matrix(3, 3, 1, 0, 5, 0, 1, 10, 0, 0, 1)
    v = Matrix(3, 1, 2, 3, 1)
    res = multiply(m, v)
    assert res.shape == (3, 1)
    assert res.elements == [7, 13, 1]


def test_multiply_rounds_to_five_digits():
    a = Matrix(1, 2, 0.1234567, 0.0000049)
    b = Matrix(2, 1, 1, 1)
    assert multiply(a, b).elements == [0.12346]
    # Float noise below the precision vanishes
    assert multiply(Matrix(1, 1, 6.123e-17), Matrix(1, 1, 4)).elements == [0]


def test_multiply_incompatible(mat_2x3):
    with pytest.raises(DimensionMismatch):
        multiply(mat_2x3, mat_2x3)
    with pytest.raises(DimensionMismatch):
        multiply(Matrix(3, 3), Matrix(2, 1))


def test_multiply_is_associative():
    rng = np.random.default_rng(12345)
    for _ in range(10):
        a = Matrix(2, 3, *rng.uniform(-10, 10, 6))
        b = Matrix(3, 4, *rng.uniform(-10, 10, 12))
        c = Matrix(4, 2, *rng.uniform(-10, 10, 8))
        left = multiply(multiply(a, b), c)
        right = multiply(a, multiply(b, c))
        assert left.shape == right.shape == (2, 2)
        assert np.allclose(left.elements, right.elements, atol=1e-2)


def test_round_digits_is_configurable(monkeypatch):
    monkeypatch.setattr(config, "ROUND_DIGITS", 2)
    m = Matrix(1, 1, 1)
    assert scalar_multiply(m, 1 / 3).elements == [0.33]
    assert multiply(Matrix(1, 1, 2 / 3), m).elements == [0.67]


def test_operators(mat_2x3, other_2x3):
    assert mat_2x3 + other_2x3 == add(mat_2x3, other_2x3)
    assert mat_2x3 - other_2x3 == subtract(mat_2x3, other_2x3)
    assert mat_2x3 * 2 == scalar_multiply(mat_2x3, 2)
    assert 2 * mat_2x3 == scalar_multiply(mat_2x3, 2)
    assert mat_2x3 * np.float64(0.5) == scalar_multiply(mat_2x3, 0.5)

    other = Matrix(3, 2, 1, 2, 1, 2, 1, 2)
    assert (mat_2x3 @ other).elements == [6, 12, 15, 30]

    with pytest.raises(DimensionMismatch):
        mat_2x3 @ mat_2x3
    with pytest.raises(TypeError):
        mat_2x3 + 1
    with pytest.raises(TypeError):
        mat_2x3 * other


def test_matrix_operations_namespace(mat_2x3, other_2x3):
    assert MatrixOperations.add(mat_2x3, other_2x3).elements == [
        2, 4, 4, 6, 6, 8
    ]
    assert MatrixOperations.subtract(mat_2x3, other_2x3) == subtract(
        mat_2x3, other_2x3
    )
    assert MatrixOperations.scalar_multiply(mat_2x3, 3).elements == [
        3, 6, 9, 12, 15, 18
    ]
    other = Matrix(3, 2, 1, 2, 1, 2, 1, 2)
    assert MatrixOperations.multiply(mat_2x3, other).elements == [
        6, 12, 15, 30
    ]


def test_rounding_ties_go_up():
    res = scalar_multiply(Matrix(1, 3, 0.000025, 0.000045, -0.000025), 1)
    assert res.elements == [0.00003, 0.00005, -0.00002]
    assert multiply(Matrix(1, 1, 0.000025), Matrix(1, 1, 1)).elements == [
        0.00003
    ]


def test_round_half_up():
    assert round_half_up(2.5, 0) == 3
    assert round_half_up(-2.5, 0) == -2
    assert round_half_up(1.005, 2) == 1.01
    assert round_half_up(0.123454, 5) == 0.12345
    assert round_half_up(float("inf"), 5) == float("inf")
    assert math.isnan(round_half_up(float("nan"), 5))

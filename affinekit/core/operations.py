"""
Arithmetic on Matrix values.

Every function validates its operands first and then builds a new result
matrix, so a failing call never leaves a partially written result behind
and never modifies its inputs.
"""

import logging
import math
from decimal import Decimal, ROUND_FLOOR
import numpy as np
from .. import config
from .matrix import Matrix, DimensionMismatch

logger = logging.getLogger(__name__)

_HALF = Decimal("0.5")


def round_half_up(value: float, digits: int) -> float:
    """
    Rounds value to the given number of decimal places, with ties going
    towards positive infinity (2.5 -> 3, -2.5 -> -2).

    The decimal point is shifted on the shortest decimal representation
    of value, so 0.000025 is a tie at 5 digits even though its binary
    value is not exactly 2.5e-05.
    """
    if not math.isfinite(value):
        return value
    shifted = Decimal(repr(float(value))).scaleb(digits) + _HALF
    whole = shifted.to_integral_value(rounding=ROUND_FLOOR)
    return float(whole.scaleb(-digits))


def _round(values: np.ndarray) -> np.ndarray:
    digits = config.ROUND_DIGITS
    rounded = [round_half_up(v, digits) for v in values.ravel().tolist()]
    return np.array(rounded, dtype=float).reshape(values.shape)


def _buffer(matrix: Matrix) -> np.ndarray:
    return matrix.as_array()


def _from_buffer(height: int, width: int, values: np.ndarray) -> Matrix:
    return Matrix(height, width, *values.ravel())

def _check_same_shape(a: Matrix, b: Matrix, operation: str):
    if a.shape != b.shape:
        raise DimensionMismatch(
            f"Incompatible matrices for {operation}: "
            f"{a.height}x{a.width} and {b.height}x{b.width}"
        )


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Returns the element-wise sum of two matrices of the same shape.

    Raises:
        DimensionMismatch: if the shapes differ.
    """
    _check_same_shape(a, b, "addition")
    return _from_buffer(a.height, a.width, _buffer(a) + _buffer(b))


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """
    Returns a - b, element-wise, for two matrices of the same shape.

    Raises:
        DimensionMismatch: if the shapes differ.
    """
    _check_same_shape(a, b, "subtraction")
    return _from_buffer(a.height, a.width, _buffer(a) - _buffer(b))


def scalar_multiply(matrix: Matrix, scalar: float) -> Matrix:
    """
    Multiplies every element by scalar and rounds the products to
    config.ROUND_DIGITS decimal places.
    """
    values = _round(_buffer(matrix) * scalar)
    return _from_buffer(matrix.height, matrix.width, values)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Returns the matrix product a * b, with every entry rounded to
    config.ROUND_DIGITS decimal places.

    The result has a.height rows and b.width columns. Entry (i, j) is the
    dot product of row i of a and column j of b.

    Raises:
        DimensionMismatch: if a.width != b.height.
    """
    if a.width != b.height:
        raise DimensionMismatch(
            f"Incompatible matrices for multiplication: "
            f"{a.height}x{a.width} and {b.height}x{b.width}"
        )
    left = _buffer(a).reshape(a.height, a.width)
    right = _buffer(b).reshape(b.height, b.width)
    product = _round(np.dot(left, right))
    return _from_buffer(a.height, b.width, product)


class MatrixOperations:
    """Namespace form of the module-level matrix operations."""

    add = staticmethod(add)
    subtract = staticmethod(subtract)
    scalar_multiply = staticmethod(scalar_multiply)
    multiply = staticmethod(multiply)

from __future__ import annotations
import logging
from numbers import Real
from typing import Any, Iterator, List, Sequence, Tuple
import numpy as np
from .interfaces import Cloneable

logger = logging.getLogger(__name__)


class DimensionMismatch(ValueError):
    """Raised when two matrices have incompatible shapes for an operation."""

    pass


class IndexOutOfBounds(IndexError):
    """Raised when a row or column index lies outside the matrix."""

    pass


class Matrix(Cloneable):
    """
    A dense matrix of real numbers stored in row-major order.

    The elements live in a flat numpy buffer of exactly height * width
    float64 values, owned by this instance. Row and column accessors
    return copies, never views into that buffer.
    """

    # Subclasses that represent fixed transforms set this to True
    _frozen = False

    def __init__(self, height: int, width: int, *elements: float):
        """
        Creates a matrix.

        Args:
            height: Number of rows.
            width: Number of columns.
            elements: Values in row-major order. Missing values are
                      filled with 0 and surplus values are dropped.
        """
        for name, value in (("height", height), ("width", width)):
            if not isinstance(value, (int, np.integer)) or value < 1:
                raise ValueError(
                    f"Matrix {name} must be a positive integer, "
                    f"got {value!r}"
                )
        self._height = int(height)
        self._width = int(width)

        size = self._height * self._width
        self._elements: np.ndarray = np.zeros(size, dtype=float)
        count = min(len(elements), size)
        if count:
            self._elements[:count] = elements[:count]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Creates a matrix from a nested sequence of rows, for example
        [[1, 2, 3], [4, 5, 6]].
        """
        try:
            data = np.array(rows, dtype=float)
        except Exception as e:
            raise ValueError(f"Could not create Matrix from rows: {e}")
        if data.ndim != 2 or 0 in data.shape:
            raise ValueError(
                f"Rows must form a non-empty 2D table, got shape {data.shape}"
            )
        return cls(data.shape[0], data.shape[1], *data.ravel())

    @staticmethod
    def identity(n: int = 3) -> "Matrix":
        """Returns a new n x n identity matrix."""
        return Matrix(n, n, *np.identity(n).ravel())

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def size(self) -> int:
        """Number of elements, i.e. height * width."""
        return self._height * self._width

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    @property
    def elements(self) -> List[float]:
        """A copy of the elements in row-major order."""
        return self._elements.tolist()

    def as_array(self) -> np.ndarray:
        """
        Returns a read-only, flat view of the element buffer. The view
        follows later set() calls but is replaced by transpose().
        """
        view = self._elements.view()
        view.flags.writeable = False
        return view

    def _check_row(self, row: int):
        if not 0 <= row < self._height:
            raise IndexOutOfBounds(
                f"Row {row} out of range for a {self._height}x{self._width} "
                f"matrix"
            )

    def _check_column(self, column: int):
        if not 0 <= column < self._width:
            raise IndexOutOfBounds(
                f"Column {column} out of range for a "
                f"{self._height}x{self._width} matrix"
            )

    def _check_mutable(self):
        if self._frozen:
            raise TypeError(
                f"{type(self).__name__} is immutable; clone() it first"
            )

    def get(self, row: int, column: int) -> float:
        """
        Returns the element at (row, column).

        Raises:
            IndexOutOfBounds: if either index is outside the matrix.
                Negative indices are rejected rather than wrapped.
        """
        self._check_row(row)
        self._check_column(column)
        return float(self._elements[row * self._width + column])

    def set(self, row: int, column: int, value: float) -> "Matrix":
        """
        Writes value at (row, column) and returns the matrix, so calls
        can be chained.
        """
        self._check_mutable()
        self._check_row(row)
        self._check_column(column)
        self._elements[row * self._width + column] = value
        return self

    def row(self, index: int) -> List[float]:
        """Returns a copy of the given row."""
        self._check_row(index)
        start = index * self._width
        return self._elements[start:start + self._width].tolist()

    def column(self, index: int) -> List[float]:
        """Returns a copy of the given column."""
        self._check_column(index)
        return self._elements[index::self._width].tolist()

    def transpose(self) -> "Matrix":
        """
        Transposes the matrix in place and returns it.

        The new layout is written to a fresh buffer, so rectangular
        matrices are handled as well as square ones.
        """
        self._check_mutable()
        grid = self._elements.reshape(self._height, self._width)
        self._elements = grid.T.flatten()
        self._height, self._width = self._width, self._height
        return self

    def clone(self) -> "Matrix":
        """
        Returns a new, mutable Matrix with the same shape and values and
        its own storage.
        """
        return Matrix(self._height, self._width, *self._elements)

    def tolist(self) -> List[List[float]]:
        """Returns the elements as a list of rows."""
        return self._elements.reshape(self._height, self._width).tolist()

    def __iter__(self) -> Iterator[float]:
        # Every call starts a fresh pass in row-major order
        for i in range(self.size):
            yield float(self._elements[i])

    def __copy__(self) -> "Matrix":
        return self.clone()

    def __deepcopy__(self, memo: dict) -> "Matrix":
        return self.clone()

    def __eq__(self, other: Any) -> bool:
        """
        Two matrices are equal when their shapes match and their values
        agree within np.allclose tolerance.
        """
        if not isinstance(other, Matrix):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._elements, other._elements))

    def __add__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .operations import add

        return add(self, other)

    def __sub__(self, other: Any) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .operations import subtract

        return subtract(self, other)

    def __mul__(self, scalar: Any) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        from .operations import scalar_multiply

        return scalar_multiply(self, scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: Any) -> "Matrix":
        """
        Matrix product self @ other. As with column vectors in general,
        (A @ B) applied to p means B first, then A.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        from .operations import multiply

        return multiply(self, other)

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self._elements.tolist())
        return f"Matrix({self._height}, {self._width}, {values})"

    def __str__(self) -> str:
        return str(self._elements.reshape(self._height, self._width))
